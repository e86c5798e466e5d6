from __future__ import annotations

import json
import logging
import os
import re
import uuid
from urllib.parse import parse_qs, urlparse

import pytest
import responses

from f3client import config
from f3client.models import Attributes, new_account

ORGANISATION_ID = "eb0bd6f5-c3f5-44b2-b677-acd23cdde73c"
FAKE_BASE = "http://fake.test"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch: pytest.MonkeyPatch):
    keys = [
        "F3C_API_BASE",
        "F3C_ORGANISATION_ID",
        "F3C_REQUEST_TIMEOUT_SECONDS",
        "F3C_DEBUG_LOGGING",
    ]
    for key in keys:
        monkeypatch.delenv(key, raising=False)
    # Never pick up a developer's local .env during tests.
    monkeypatch.setattr(config, "_ENV_LOADED", True)
    yield


def gb_attributes(**overrides) -> Attributes:
    values = {
        "country": "GB",
        "base_currency": "GBP",
        "bank_id": "400300",
        "bank_id_code": "GBDSC",
        "bic": "NWBKGB22",
        "account_classification": "Personal",
    }
    values.update(overrides)
    return Attributes(**values)


def random_account(**overrides):
    return new_account(str(uuid.uuid4()), ORGANISATION_ID, gb_attributes(**overrides))


@pytest.fixture
def account():
    return random_account()


class FakeAccountServer:
    """
    In-memory stand-in for the accounts API, served through `responses`.

    Mirrors the server rules the client relies on: 409 on duplicate ids,
    404 on unknown ids, 409 on stale delete versions, empty pages past the end.
    """

    def __init__(self, base_url: str = FAKE_BASE) -> None:
        self.base_url = base_url
        self.accounts: dict[str, dict] = {}

    def register(self, mock: responses.RequestsMock) -> None:
        root = re.escape(f"{self.base_url}/v1/organisation/accounts")
        mock.add_callback(responses.POST, re.compile(rf"{root}$"), callback=self._create)
        mock.add_callback(responses.GET, re.compile(rf"{root}/(\?.*)?$"), callback=self._list)
        mock.add_callback(
            responses.GET, re.compile(rf"{root}/[^/?]+(\?.*)?$"), callback=self._fetch
        )
        mock.add_callback(
            responses.DELETE, re.compile(rf"{root}/[^/?]+(\?.*)?$"), callback=self._delete
        )

    @staticmethod
    def _reply(status: int, payload=None):
        body = "" if payload is None else json.dumps(payload)
        return status, {"Content-Type": "application/vnd.api+json"}, body

    @staticmethod
    def _account_id(request) -> str:
        return urlparse(request.url).path.rsplit("/", 1)[-1]

    def _create(self, request):
        data = json.loads(request.body)["data"]
        if data["id"] in self.accounts:
            return self._reply(409, {"error_message": "Account cannot be created as it violates a duplicate constraint"})
        stored = dict(data)
        stored["version"] = 0
        stored["attributes"] = dict(data["attributes"], status="confirmed")
        self.accounts[data["id"]] = stored
        return self._reply(201, {"data": stored})

    def _fetch(self, request):
        stored = self.accounts.get(self._account_id(request))
        if stored is None:
            return self._reply(404, {"error_message": "record does not exist"})
        return self._reply(200, {"data": stored})

    def _list(self, request):
        query = parse_qs(urlparse(request.url).query)
        page = int(query.get("page[number]", ["0"])[0])
        size = int(query.get("page[size]", ["100"])[0])
        items = list(self.accounts.values())[page * size : (page + 1) * size]
        return self._reply(200, {"data": items})

    def _delete(self, request):
        account_id = self._account_id(request)
        stored = self.accounts.get(account_id)
        if stored is None:
            return self._reply(404)
        version = parse_qs(urlparse(request.url).query).get("version", [""])[0]
        if version != str(stored["version"]):
            return self._reply(409, {"error_message": "invalid version"})
        del self.accounts[account_id]
        return self._reply(204)


@pytest.fixture
def fake_server():
    server = FakeAccountServer()
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        server.register(mock)
        yield server


@pytest.fixture
def live_server() -> str:
    return os.getenv("TEST_SERVER", "http://localhost:8080")


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger("f3client")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)
