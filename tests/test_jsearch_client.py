from __future__ import annotations

from typing import Any

import pytest
import requests

from oneapply.clients.jsearch import JSearchClient, ListingsQuery
from oneapply.config import Settings


class _FakeHTTPResponse:
    def __init__(self, status_code: int, payload: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class _FakeSession:
    def __init__(self, response: _FakeHTTPResponse) -> None:
        self.response = response
        self.calls: list[dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> _FakeHTTPResponse:
        self.calls.append({"url": url, **kwargs})
        return self.response


def test_search_sends_params_and_rapidapi_headers() -> None:
    session = _FakeSession(_FakeHTTPResponse(200, {"status": "OK", "data": [{"job_id": "1"}]}))
    client = JSearchClient("secret", base_url="https://jsearch.example/", timeout=7, session=session)

    resp = client.search(
        ListingsQuery(query="python developer", page=2, country="GB", employment_types="FULLTIME", remote_jobs_only=True)
    )

    assert resp.ok
    assert resp.body["data"] == [{"job_id": "1"}]
    (call,) = session.calls
    assert call["url"] == "https://jsearch.example/search"
    assert call["timeout"] == 7
    assert call["headers"] == {"x-rapidapi-key": "secret", "x-rapidapi-host": "jsearch.p.rapidapi.com"}
    assert call["params"] == {
        "query": "python developer",
        "page": "2",
        "num_pages": "1",
        "date_posted": "month",
        "country": "GB",
        "remote_jobs_only": "true",
        "employment_types": "FULLTIME",
    }


def test_non_success_status_is_returned_not_raised() -> None:
    session = _FakeSession(_FakeHTTPResponse(500, None, text="upstream exploded"))
    resp = JSearchClient("k", session=session).search(ListingsQuery(query="x"))
    assert not resp.ok
    assert resp.status_code == 500
    assert resp.text == "upstream exploded"
    assert resp.body == {}


def test_non_json_body_becomes_empty() -> None:
    session = _FakeSession(_FakeHTTPResponse(200, ValueError("not json"), text="<html>"))
    resp = JSearchClient("k", session=session).search(ListingsQuery(query="x"))
    assert resp.ok
    assert resp.body == {}


def test_transport_errors_propagate() -> None:
    class _Exploding:
        def get(self, url: str, **kwargs: Any) -> Any:
            raise requests.Timeout("read timed out")

    with pytest.raises(requests.Timeout):
        JSearchClient("k", session=_Exploding()).search(ListingsQuery(query="x"))


def test_from_settings_uses_configured_endpoint() -> None:
    settings = Settings(JSEARCH_BASE_URL="https://proxy.local", JSEARCH_HOST="proxy.local", JSEARCH_TIMEOUT_SECONDS=3)
    client = JSearchClient.from_settings(settings, "abc")
    assert client.base_url == "https://proxy.local"
    assert client.host == "proxy.local"
    assert client.timeout == 3
    assert client.api_key == "abc"
