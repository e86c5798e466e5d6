"""
Organisation accounts endpoints.

Source:
- Form3 API docs (Organisation > Accounts).

Included routes:
- POST   /v1/organisation/accounts
- GET    /v1/organisation/accounts/{id}
- GET    /v1/organisation/accounts/?page[number]=&page[size]=
- DELETE /v1/organisation/accounts/{id}?version=

Logic flow (per method):
1) Build path/params (and encode the body for create).
2) Pass them to F3HttpClient, which raises F3HTTPError on non-2xx.
3) Decode the response envelope into AccountXL values.

Tracing notes:
- Duplicate ids surface as 409, unknown ids as 404, stale versions as 409.
- Looping over pages is left to the caller: list() returns [] past the end.
"""

from __future__ import annotations

from ..http import JSON_API_CONTENT_TYPE, F3HttpClient
from ..models import Account, AccountXL
from ..payload import from_payload, from_payload_arr, to_payload

ACCOUNTS_PATH = "/v1/organisation/accounts"


def page_params(page: int, pagesize: int) -> dict[str, int]:
    return {"page[number]": page, "page[size]": pagesize}


class AccountsAPI:
    """
    Endpoint grouping for account CRUD routes.
    """

    def __init__(self, client: F3HttpClient) -> None:
        self._client = client

    def create(self, account: Account) -> AccountXL:
        """
        POST /v1/organisation/accounts

        Inputs:
        - account: built with new_account(); sent as-is.

        Outputs:
        - The stored account including server-assigned version.
        """

        body = self._client.request(
            "POST",
            ACCOUNTS_PATH,
            body=to_payload(account),
            content_type=JSON_API_CONTENT_TYPE,
        )
        return from_payload(body)

    def fetch(self, account_id: str) -> AccountXL:
        """
        GET /v1/organisation/accounts/{id}
        """

        body = self._client.request("GET", f"{ACCOUNTS_PATH}/{account_id}")
        return from_payload(body)

    def list(self, page: int, pagesize: int) -> list[AccountXL]:
        """
        GET /v1/organisation/accounts/?page[number]={page}&page[size]={pagesize}

        Outputs:
        - Accounts on the requested page; empty once past the last page.
        """

        body = self._client.request(
            "GET", f"{ACCOUNTS_PATH}/", params=page_params(page, pagesize)
        )
        return from_payload_arr(body)

    def delete(self, account_id: str, version: int) -> None:
        """
        DELETE /v1/organisation/accounts/{id}?version={version}

        Inputs:
        - version: the AccountXL.version last seen; the server rejects stale values.
        """

        self._client.request(
            "DELETE", f"{ACCOUNTS_PATH}/{account_id}", params={"version": version}
        )

    def close(self) -> None:
        """
        Release the underlying HTTP session.
        """

        self._client.close()
