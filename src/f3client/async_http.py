"""
Async HTTP client wrapper for the organisation accounts API.

Purpose:
- Offer the same request contract as http.py for asyncio callers.
- Keep endpoint modules focused on URL paths, parameters and payloads.

Logic flow:
1) The caller instantiates F3AsyncHttpClient with base_url (optionally as
   an async context manager).
2) Endpoint methods await request(method, path, ...).
3) request() builds the full URL and delegates to aiohttp.
4) Non-2xx statuses raise F3HTTPError; otherwise raw body bytes are returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import logging

import aiohttp

from .errors import check_status
from .http import JSON_API_CONTENT_TYPE

logger = logging.getLogger(__name__)


@dataclass
class F3AsyncHttpClient:
    """
    Minimal async HTTP client that handles base URL and status checks.
    """

    base_url: str
    timeout_seconds: float | None = 30
    debug_logging: bool = False
    _session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "F3AsyncHttpClient":
        self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def request(
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
        """

        session = self._ensure_session()
        url = f"{self.base_url.rstrip('/')}{path}"
        headers = {"Accept": JSON_API_CONTENT_TYPE}
        if content_type:
            headers["Content-Type"] = content_type
        if params:
            # aiohttp only accepts str/int/float query values.
            params = {key: str(value) for key, value in params.items()}

        if self.debug_logging:
            logger.info("HTTP %s %s", method.upper(), url)
        async with session.request(
            method=method.upper(),
            url=url,
            params=params,
            data=body,
            headers=headers,
        ) as response:
            content = await response.read()
            if not 200 <= response.status < 300:
                logger.debug(
                    "HTTP %s %s -> %s %s", method.upper(), url, response.status, response.reason
                )
                check_status(
                    response.status, response.reason, content.decode("utf-8", "replace")
                )
            return content
