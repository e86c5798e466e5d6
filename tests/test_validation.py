from __future__ import annotations

import requests

from f3client.config import Profile
from f3client.errors import F3HTTPError, PayloadDecodeError
from f3client.validation import validate_connectivity, validate_profiles


class StubAPI:
    def __init__(self, result=None, error=None):
        self.result = result if result is not None else []
        self.error = error
        self.calls = []

    def list(self, page, pagesize):
        self.calls.append((page, pagesize))
        if self.error is not None:
            raise self.error
        return self.result


def test_validate_profiles_accepts_good_profile() -> None:
    profile = Profile(
        name="local",
        base_url="http://localhost:8080",
        organisation_id="eb0bd6f5-c3f5-44b2-b677-acd23cdde73c",
    )
    assert validate_profiles({"local": profile}) == []


def test_validate_profiles_flags_bad_url() -> None:
    profile = Profile(name="local", base_url="localhost:8080")
    warnings = validate_profiles({"local": profile})
    assert any("http(s) URL" in warning for warning in warnings)


def test_validate_profiles_flags_bad_organisation_id() -> None:
    profile = Profile(name="local", base_url="http://localhost:8080", organisation_id="org-1")
    warnings = validate_profiles({"local": profile})
    assert any("not a UUID" in warning for warning in warnings)


def test_validate_connectivity_ok() -> None:
    api = StubAPI(result=["one"])
    outcome = validate_connectivity(api)
    assert outcome["ok"] is True
    assert outcome["payload"] == 1
    assert api.calls == [(0, 1)]


def test_validate_connectivity_reports_http_error() -> None:
    outcome = validate_connectivity(StubAPI(error=F3HTTPError(503, body="down")))
    assert outcome == {
        "ok": False,
        "status": 503,
        "message": "HTTP Error: 503, Service Unavailable",
        "payload": "down",
    }


def test_validate_connectivity_reports_decode_error() -> None:
    outcome = validate_connectivity(StubAPI(error=PayloadDecodeError("bad body")))
    assert outcome["ok"] is False
    assert "bad body" in outcome["message"]


def test_validate_connectivity_reports_transport_error() -> None:
    outcome = validate_connectivity(StubAPI(error=requests.ConnectionError("refused")))
    assert outcome["ok"] is False
    assert outcome["status"] is None
    assert "refused" in outcome["message"]
