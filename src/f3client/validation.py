"""
Validation helpers for profiles.yaml and API connectivity.

Purpose:
- Validate local config early, before making network calls.
- Provide a single place for connectivity checks with clear tracing.

Account payloads are never validated here; the server owns that.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlparse
import uuid

import requests

from .config import Profile
from .endpoints.accounts import AccountsAPI
from .errors import F3ClientError, F3HTTPError


def validate_profiles(profiles: dict[str, Profile]) -> list[str]:
    """
    Validate profiles and return warnings (empty list means no issues).
    """

    warnings: list[str] = []

    for name, profile in profiles.items():
        parsed = urlparse(profile.base_url)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            warnings.append(
                f"Profile '{name}' base_url '{profile.base_url}' should be an http(s) URL."
            )

        if profile.organisation_id is not None:
            try:
                uuid.UUID(profile.organisation_id)
            except ValueError:
                warnings.append(
                    f"Profile '{name}' organisation_id '{profile.organisation_id}' is not a UUID."
                )

    return warnings


def validate_connectivity(api: AccountsAPI) -> dict[str, Any]:
    """
    Validate API connectivity by listing a single account.

    Outputs:
    - Dict with ok/status/message/payload for easy logging and tracing.
    """

    try:
        accounts = api.list(0, 1)
        return {"ok": True, "status": 200, "message": "OK", "payload": len(accounts)}
    except F3HTTPError as exc:
        return {"ok": False, "status": exc.code, "message": str(exc), "payload": exc.body}
    except F3ClientError as exc:
        return {"ok": False, "status": 200, "message": f"Decode error: {exc}", "payload": None}
    except requests.RequestException as exc:
        return {"ok": False, "status": None, "message": f"Request error: {exc}", "payload": None}
