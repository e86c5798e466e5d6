"""
Async organisation accounts endpoints.

Same routes and decoding as accounts.py, awaited over F3AsyncHttpClient.
"""

from __future__ import annotations

from ..async_http import F3AsyncHttpClient
from ..http import JSON_API_CONTENT_TYPE
from ..models import Account, AccountXL
from ..payload import from_payload, from_payload_arr, to_payload
from .accounts import ACCOUNTS_PATH, page_params


class AccountsAsyncAPI:
    """
    Async endpoint grouping for account CRUD routes.
    """

    def __init__(self, client: F3AsyncHttpClient) -> None:
        self._client = client

    async def create(self, account: Account) -> AccountXL:
        """
        POST /v1/organisation/accounts
        """

        body = await self._client.request(
            "POST",
            ACCOUNTS_PATH,
            body=to_payload(account),
            content_type=JSON_API_CONTENT_TYPE,
        )
        return from_payload(body)

    async def fetch(self, account_id: str) -> AccountXL:
        """
        GET /v1/organisation/accounts/{id}
        """

        body = await self._client.request("GET", f"{ACCOUNTS_PATH}/{account_id}")
        return from_payload(body)

    async def list(self, page: int, pagesize: int) -> list[AccountXL]:
        """
        GET /v1/organisation/accounts/?page[number]={page}&page[size]={pagesize}
        """

        body = await self._client.request(
            "GET", f"{ACCOUNTS_PATH}/", params=page_params(page, pagesize)
        )
        return from_payload_arr(body)

    async def delete(self, account_id: str, version: int) -> None:
        """
        DELETE /v1/organisation/accounts/{id}?version={version}
        """

        await self._client.request(
            "DELETE", f"{ACCOUNTS_PATH}/{account_id}", params={"version": version}
        )

    async def close(self) -> None:
        await self._client.close()
