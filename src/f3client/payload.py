"""
Marshaling between domain models and JSON:API envelopes.

Logic flow:
1) to_payload() wraps an Account in PayloadOut and serializes it.
2) from_payload()/from_payload_arr() parse a response body and unwrap the
   PayloadIn/PayloadInArr envelope into AccountXL values.

Tracing notes:
- Decode failures are raised as PayloadDecodeError with the original
  JSON/type error chained, so the offending body can be found in the cause.
"""

from __future__ import annotations

import json
from typing import Any

from .errors import PayloadDecodeError
from .models import Account, AccountXL, PayloadIn, PayloadInArr, PayloadOut


def to_payload(account: Account) -> bytes:
    """
    Serialize an account into a request body. No validation is performed.
    """

    return json.dumps(PayloadOut(account=account).to_dict()).encode("utf-8")


def _load(body: bytes | str) -> Any:
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise PayloadDecodeError(f"Response body is not valid JSON: {exc}") from exc


def from_payload(body: bytes | str) -> AccountXL:
    """
    Decode a single-resource envelope ({"data": {...}}) into an AccountXL.
    """

    raw = _load(body)
    try:
        return PayloadIn.from_dict(raw).account
    except (TypeError, ValueError) as exc:
        raise PayloadDecodeError(f"Unexpected account payload: {exc}") from exc


def from_payload_arr(body: bytes | str) -> list[AccountXL]:
    """
    Decode a list envelope ({"data": [...]}) into AccountXL values.

    A missing or null `data` decodes to an empty list.
    """

    raw = _load(body)
    try:
        return PayloadInArr.from_dict(raw).accounts
    except (TypeError, ValueError) as exc:
        raise PayloadDecodeError(f"Unexpected account list payload: {exc}") from exc
