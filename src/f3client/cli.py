"""
Command line access to the accounts API.

Examples:
- f3client create --id <uuid> --organisation-id <uuid> --country GB \
      --base-currency GBP --bank-id 400300 --bank-id-code GBDSC --bic NWBKGB22
- f3client fetch <uuid>
- f3client list --page 0 --page-size 100
- f3client delete <uuid> --version 0

Results are printed as JSON on stdout; errors go to stderr with exit code 1.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

import requests

from .app import build_account_client, load_config
from .config import AppConfig
from .endpoints.accounts import AccountsAPI
from .errors import F3ClientError
from .logging_config import setup_logging
from .models import Attributes, new_account

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="f3client", description=__doc__.splitlines()[1])
    parser.add_argument("--profiles", default=None, help="Path to profiles.yaml")
    parser.add_argument("--profile", default=None, help="Profile name inside profiles.yaml")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--json-logs", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Create an account")
    create.add_argument("--id", required=True, dest="account_id")
    create.add_argument("--organisation-id", default=None)
    create.add_argument("--country", required=True)
    create.add_argument("--base-currency", default="")
    create.add_argument("--bank-id", default="")
    create.add_argument("--bank-id-code", default="")
    create.add_argument("--bic", default="")
    create.add_argument("--classification", default="")
    create.add_argument("--name", action="append", default=[])

    fetch = sub.add_parser("fetch", help="Fetch an account by id")
    fetch.add_argument("account_id")

    listing = sub.add_parser("list", help="List one page of accounts")
    listing.add_argument("--page", type=int, default=0)
    listing.add_argument("--page-size", type=int, default=100)

    delete = sub.add_parser("delete", help="Delete an account by id and version")
    delete.add_argument("account_id")
    delete.add_argument("--version", type=int, required=True)

    return parser


def run(args: argparse.Namespace) -> Any:
    config = load_config(args.profiles, args.profile)
    api = build_account_client(config)
    logger.debug("Using %s (profile %s)", config.base_url, config.profile_name)
    try:
        return dispatch(api, config, args)
    finally:
        api.close()


def dispatch(api: AccountsAPI, config: AppConfig, args: argparse.Namespace) -> Any:
    if args.command == "create":
        organisation_id = args.organisation_id or config.organisation_id
        if not organisation_id:
            raise ValueError("--organisation-id is required when no profile provides one.")
        attributes = Attributes(
            country=args.country,
            base_currency=args.base_currency,
            bank_id=args.bank_id,
            bank_id_code=args.bank_id_code,
            bic=args.bic,
            account_classification=args.classification,
            name=list(args.name),
        )
        return api.create(new_account(args.account_id, organisation_id, attributes)).to_dict()
    if args.command == "fetch":
        return api.fetch(args.account_id).to_dict()
    if args.command == "list":
        return [account.to_dict() for account in api.list(args.page, args.page_size)]
    if args.command == "delete":
        api.delete(args.account_id, args.version)
        return {"deleted": args.account_id, "version": args.version}
    raise ValueError(f"Unknown command '{args.command}'.")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        setup_logging(args.log_level, json_output=args.json_logs)
        result = run(args)
    except (F3ClientError, requests.RequestException, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
