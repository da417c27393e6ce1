"""Shared fixtures: a gateway app wired to a fake upstream and a fake clock."""

from typing import Callable

import httpx
import pytest
import pytest_asyncio

from app import create_app
from config import Settings
from dependencies import get_http_client
from services.cache import NewsCache

TEST_ENV = {
    "NEWSDATA_API_KEY": "news-key",
    "OPENAI_API_KEY": "sk-test",
    "NEWS_CACHE_TTL_SECONDS": "60",
    "ENVIRONMENT": "test",
    "GIT_SHA": "abc123",
}


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeUpstream:
    """Records every outbound request and answers with ``respond``.

    ``respond`` may return an ``httpx.Response`` or an exception to raise.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.respond: Callable[[httpx.Request], object] = lambda request: httpx.Response(200, json={})

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self.respond(request)
        if isinstance(result, Exception):
            raise result
        return result

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def env(monkeypatch):
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    return monkeypatch


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest_asyncio.fixture
async def upstream_client(upstream: FakeUpstream):
    async with httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler)) as client:
        yield client


@pytest.fixture
def make_app(env, clock, upstream_client):
    """Build an app from the current environment. Keyword args unset env vars when None."""

    def _make(**overrides):
        for key, value in overrides.items():
            if value is None:
                env.delenv(key, raising=False)
            else:
                env.setenv(key, value)
        app_settings = Settings()
        app = create_app(app_settings)
        app.state.news_cache = NewsCache(ttl_seconds=app_settings.news_cache_ttl_seconds, clock=clock)
        app.dependency_overrides[get_http_client] = lambda: upstream_client
        return app

    return _make


@pytest_asyncio.fixture
async def client(make_app):
    transport = httpx.ASGITransport(app=make_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def client_for(make_app):
    """Factory for clients over an app built with specific env overrides."""

    def _client(raise_app_exceptions: bool = True, **overrides) -> httpx.AsyncClient:
        transport = httpx.ASGITransport(app=make_app(**overrides), raise_app_exceptions=raise_app_exceptions)
        return httpx.AsyncClient(transport=transport, base_url="http://test")

    return _client
