"""NewsData.io proxy — injects the server-held API key, caches the latest response."""

import logging
from typing import Any, Mapping

import httpx

from config import Settings
from errors import ConfigurationError
from services.cache import NewsCache
from services.upstream import ForwardRequest, forward, unwrap

logger = logging.getLogger(__name__)

PROVIDER = "News provider"


def build_news_request(api_key: str, params: Mapping[str, str], base_url: str) -> ForwardRequest:
    """Merge the caller's query with the API key into a GET request.

    Caller parameters are forwarded verbatim without validation, except
    ``apikey`` which always carries the server's key.
    """
    merged = {"apikey": api_key}
    merged.update((key, value) for key, value in params.items() if key != "apikey")
    url = httpx.URL(f"{base_url.rstrip('/')}/news", params=merged)
    return ForwardRequest(target_url=str(url), method="GET", headers={"Accept": "application/json"})


async def fetch_news(
    params: Mapping[str, str],
    settings: Settings,
    cache: NewsCache,
    client: httpx.AsyncClient,
) -> Any:
    """Serve the cached feed while fresh, otherwise fetch it and cache the result.

    The cache is not keyed by ``params``.
    """
    cached = cache.get_fresh()
    if cached is not None:
        logger.debug("News cache hit")
        return cached

    if not settings.newsdata_api_key:
        raise ConfigurationError("NEWSDATA_API_KEY")

    logger.debug("News cache miss, fetching with params: %s", sorted(params))
    request = build_news_request(settings.newsdata_api_key, params, settings.newsdata_base_url)
    data = unwrap(await forward(client, request), PROVIDER)

    cache.write(data)
    return data
