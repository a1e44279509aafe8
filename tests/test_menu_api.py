import json
from datetime import date

import pytest
import requests

from purdue_dining.errors import ParseError, RequestError
from purdue_dining.services.http import compact_get
from purdue_dining.services.menu_api import MenuAPIClient

BASE_URL = "https://api.example.test/menus/v2"


def make_response(body, status_code=200):
    response = requests.Response()
    response.status_code = status_code
    response._content = body if isinstance(body, bytes) else json.dumps(body).encode()
    response.url = BASE_URL
    return response


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def get(self, url, headers=None, timeout=None):
        self.requests.append({"url": url, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def test_compact_get_passes_headers_and_timeout():
    session = FakeSession(make_response({}))
    compact_get(BASE_URL, headers={"Accept": "application/json"}, timeout=2.5, session=session)
    assert session.requests == [
        {"url": BASE_URL, "headers": {"Accept": "application/json"}, "timeout": 2.5}
    ]


def test_compact_get_uses_requests_get_without_session(monkeypatch):
    session = FakeSession(make_response({}))
    monkeypatch.setattr(requests, "get", session.get)

    compact_get(BASE_URL, timeout=1)

    assert session.requests == [{"url": BASE_URL, "headers": {}, "timeout": 1}]


def test_client_without_session_goes_through_requests_get(monkeypatch):
    session = FakeSession(make_response({"Location": [{"Name": "Wiley"}]}))
    monkeypatch.setattr(requests, "get", session.get)

    assert MenuAPIClient(base_url=BASE_URL).get_locations() == ["Wiley"]
    assert session.requests[0]["url"] == f"{BASE_URL}/locations"


def test_compact_get_wraps_connection_errors():
    session = FakeSession(error=requests.ConnectionError("refused"))
    with pytest.raises(RequestError) as excinfo:
        compact_get(BASE_URL, session=session)
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_compact_get_treats_http_errors_as_request_errors():
    session = FakeSession(make_response({}, status_code=503))
    with pytest.raises(RequestError):
        compact_get(BASE_URL, session=session)


def test_get_locations():
    payload = {"Location": [{"Name": "Earhart"}, {"Name": "Pete's Za"}, {"Name": ""}, {"Address": "x"}]}
    session = FakeSession(make_response(payload))
    client = MenuAPIClient(base_url=BASE_URL, timeout=None, session=session)

    assert client.get_locations() == ["Earhart", "Pete's Za"]
    assert session.requests[0]["url"] == f"{BASE_URL}/locations"
    assert session.requests[0]["headers"] == {"Accept": "application/json"}
    assert session.requests[0]["timeout"] is None


@pytest.mark.parametrize("body", [b"<html>", {"Locations": []}, {"Location": ["Earhart"]}, []])
def test_get_locations_bad_payload(body):
    client = MenuAPIClient(base_url=BASE_URL, session=FakeSession(make_response(body)))
    with pytest.raises(ParseError):
        client.get_locations()


def test_get_day_builds_url():
    session = FakeSession(make_response({"Location": "Pete's Za", "Meals": []}))
    client = MenuAPIClient(base_url=BASE_URL + "/", timeout=5, session=session)

    payload = client.get_day("Pete's Za", date(2026, 1, 5))

    assert payload["Location"] == "Pete's Za"
    assert session.requests[0]["url"] == f"{BASE_URL}/locations/Pete%27s%20Za/2026-01-05"
    assert session.requests[0]["timeout"] == 5


def test_get_day_rejects_non_object():
    client = MenuAPIClient(base_url=BASE_URL, session=FakeSession(make_response([1, 2])))
    with pytest.raises(ParseError):
        client.get_day("Ford", date(2026, 1, 5))
