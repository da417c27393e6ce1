"""Request-scoped accessors for the long-lived objects held on ``app.state``."""

import httpx
from fastapi import Depends, Request
from openai import AsyncOpenAI

from config import Settings
from services.cache import NewsCache


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_news_cache(request: Request) -> NewsCache:
    return request.app.state.news_cache


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Return the shared outbound client, creating it on first use.

    Upstream timeouts live here, not in the route handlers.
    """
    state = request.app.state
    if state.http_client is None:
        state.http_client = httpx.AsyncClient(timeout=state.settings.upstream_timeout_seconds)
    return state.http_client


def get_openai_client(
    request: Request,
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> AsyncOpenAI | None:
    """Return the cached SDK client, or None while OPENAI_API_KEY is unset.

    The SDK refuses to build without a key, so the missing-key error is
    raised later by the service, after input validation.
    """
    state = request.app.state
    if not state.settings.openai_api_key:
        return None
    if state.openai_client is None:
        state.openai_client = AsyncOpenAI(
            api_key=state.settings.openai_api_key,
            base_url=state.settings.openai_base_url,
            http_client=http_client,
            max_retries=0,
        )
    return state.openai_client
