"""
Shared fixtures for eansearch tests.
"""

import json
from collections.abc import Callable

import httpx
import pytest
import structlog

from eansearch.client import EANSearchClient
from eansearch.config import get_settings

API_URL = "https://api.ean-search.org/api"


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Isolate tests from the developer's environment and .env files."""
    monkeypatch.delenv("EAN_SEARCH_API_TOKEN", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


class FakeAPI:
    """Records requests and answers each with a canned JSON body."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.body: object = []
        self.status_code = 200
        self.raw: str | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw is not None:
            return httpx.Response(self.status_code, text=self.raw)
        return httpx.Response(self.status_code, content=json.dumps(self.body).encode())

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.requests[-1].url.params)


@pytest.fixture
def fake_api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def make_client(fake_api: FakeAPI) -> Callable[..., EANSearchClient]:
    def factory(token: str = "test-token") -> EANSearchClient:
        http_client = httpx.Client(transport=httpx.MockTransport(fake_api.handler))
        return EANSearchClient(token, base_url=API_URL, http_client=http_client)

    return factory


@pytest.fixture
def client(make_client) -> EANSearchClient:
    return make_client()
