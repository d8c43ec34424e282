"""
Pytest configuration and fixtures for elastic-driver tests.
"""

import json as jsonlib
from typing import Any, Callable, List, Optional

import httpx
import pytest

from elastic_driver import ElasticClient

BASE_URI = "http://es.test:9200"


class FakeElasticsearch:
    """Records requests and replays queued responses through ``httpx.MockTransport``."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._responses: List[Any] = []

    def respond(
        self,
        status_code: int = 200,
        json: Any = None,
        content: Optional[bytes] = None,
    ) -> None:
        """Queue a response; unqueued requests get ``200 {}``."""
        self._responses.append((status_code, json, content))

    def respond_with(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        """Queue a callable producing the response from the request."""
        self._responses.append(handler)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json={})
        queued = self._responses.pop(0)
        if callable(queued):
            return queued(request)
        status_code, json, content = queued
        if json is not None:
            return httpx.Response(status_code, json=json)
        return httpx.Response(status_code, content=content or b"")

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return jsonlib.loads(self.last_request.content)


@pytest.fixture
def fake_es():
    """Fake Elasticsearch endpoint."""
    return FakeElasticsearch()


@pytest.fixture
def http_client(fake_es):
    """httpx client wired to the fake endpoint."""
    return httpx.AsyncClient(transport=httpx.MockTransport(fake_es.handler))


@pytest.fixture
def es_client(http_client):
    """Elasticsearch client using the fake transport."""
    return ElasticClient(BASE_URI, http_client)


@pytest.fixture
def patch_get_client(monkeypatch, es_client):
    """Make the MCP tool modules use the fake-backed client."""
    for module in (
        "elastic_driver.tools.primitives.search",
        "elastic_driver.tools.primitives.documents",
        "elastic_driver.tools.primitives.stats",
    ):
        monkeypatch.setattr(f"{module}.get_client", lambda: es_client)
    return es_client
