from __future__ import annotations

import pytest
import requests

from vultr_api.clients import http_client as http_module
from vultr_api.clients.http_client import HttpClient
from vultr_api.exceptions.custom_exceptions import ApiRequestError, RemoteFetchError, TransportError


class FakeResponse:
    def __init__(self, status_code: int, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


def make_client() -> HttpClient:
    return HttpClient(timeout_seconds=7, base_url="https://api.example.test/")


def test_get_sends_api_key_header_and_query(monkeypatch):
    seen = {}

    def fake_get(url, params=None, headers=None, timeout=None):
        seen.update(url=url, params=params, headers=headers, timeout=timeout)
        return FakeResponse(200, '{"userdata": "x"}')

    monkeypatch.setattr(http_module.requests, "get", fake_get)

    body = make_client().get("v1/server/get_user_data", "secret", {"SUBID": 5})

    assert body == '{"userdata": "x"}'
    assert seen["url"] == "https://api.example.test/v1/server/get_user_data"
    assert seen["params"] == {"SUBID": 5}
    assert seen["headers"]["API-Key"] == "secret"
    assert seen["timeout"] == 7


def test_post_sends_form_data(monkeypatch):
    seen = {}

    def fake_post(url, data=None, headers=None, timeout=None):
        seen.update(url=url, data=data, headers=headers)
        return FakeResponse(200, "")

    monkeypatch.setattr(http_module.requests, "post", fake_post)

    body = make_client().post("/v1/server/destroy", "secret", {"SUBID": 576965})

    assert body == ""
    assert seen["url"] == "https://api.example.test/v1/server/destroy"
    assert seen["data"] == {"SUBID": 576965}
    assert seen["headers"]["API-Key"] == "secret"


def test_non_success_status_raises_with_status_and_body(monkeypatch):
    monkeypatch.setattr(
        http_module.requests,
        "get",
        lambda url, **kwargs: FakeResponse(412, "Unable to find domain"),
    )

    with pytest.raises(ApiRequestError) as exc:
        make_client().get("v1/dns/records", "secret", {"domain": "missing.test"})

    assert exc.value.status_code == 412
    assert exc.value.body == "Unable to find domain"
    assert "Request failed" in str(exc.value)


def test_invalid_key_status_is_a_remote_fetch_error(monkeypatch):
    monkeypatch.setattr(http_module.requests, "post", lambda url, **kwargs: FakeResponse(403, ""))

    with pytest.raises(RemoteFetchError):
        make_client().post("v1/server/destroy", "bad", {"SUBID": 1})


def test_transport_error_is_wrapped(monkeypatch):
    def boom(url, **kwargs):
        raise requests.ConnectionError("name resolution failed")

    monkeypatch.setattr(http_module.requests, "get", boom)

    with pytest.raises(TransportError) as exc:
        make_client().get("v1/account/info", "secret")

    assert isinstance(exc.value.__cause__, requests.ConnectionError)


def test_timeout_is_a_transport_error(monkeypatch):
    def slow(url, **kwargs):
        raise requests.Timeout("read timed out")

    monkeypatch.setattr(http_module.requests, "post", slow)

    with pytest.raises(TransportError):
        make_client().post("v1/snapshot/create", "secret", {"SUBID": 1})
