"""
HTTP client wrapper for the organisation accounts API.

Purpose:
- Provide a single place to manage base URL handling and status checks.
- Keep endpoint modules focused on URL paths, parameters and payloads.

Sources:
- base_url: resolved in config.py (defaults to a local account API).
- session: optional, lets callers bring their own requests.Session
  (custom adapters, proxies, auth) shared across calls.

Logic flow:
1) The caller instantiates F3HttpClient with base_url.
2) Endpoint methods call request(method, path, ...).
3) request() builds the full URL and delegates to requests.
4) Non-2xx statuses raise F3HTTPError; otherwise raw body bytes are returned
   to the endpoint for decoding.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
import logging

import requests

from .errors import check_status

logger = logging.getLogger(__name__)

JSON_API_CONTENT_TYPE = "application/vnd.api+json"


@dataclass
class F3HttpClient:
    """
    Minimal HTTP client that handles base URL and status checks.

    No retries are attempted; transport errors propagate from requests.
    """

    base_url: str
    timeout_seconds: float | None = 30
    debug_logging: bool = False
    session: requests.Session = field(default_factory=requests.Session)

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: bytes | None = None,
        content_type: str | None = None,
    ) -> bytes:
        """
        Send a single HTTP request and return the response body.

        Inputs:
        - method: HTTP method (GET, POST, DELETE).
        - path: endpoint path (e.g., /v1/organisation/accounts).
        - params: query parameters.
        - body/content_type: pre-encoded request body and its media type.

        Outputs:
        - Raw response body bytes (may be empty, e.g. on 204).
        """

        url = f"{self.base_url.rstrip('/')}{path}"
        headers = {"Accept": JSON_API_CONTENT_TYPE}
        if content_type:
            headers["Content-Type"] = content_type

        if self.debug_logging:
            logger.info("HTTP %s %s", method.upper(), url)
        response = self.session.request(
            method=method.upper(),
            url=url,
            params=params,
            data=body,
            headers=headers,
            timeout=self.timeout_seconds,
        )
        if not 200 <= response.status_code < 300:
            logger.debug(
                "HTTP %s %s -> %s %s", method.upper(), url, response.status_code, response.reason
            )
            check_status(response.status_code, response.reason, response.text)
        return response.content

    def close(self) -> None:
        self.session.close()
