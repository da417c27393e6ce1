"""News feed proxy route.

GET /api/news?country=ng&language=en&size=15
"""

import httpx
from fastapi import APIRouter, Depends, Request

from config import Settings
from dependencies import get_http_client, get_news_cache, get_settings
from services.cache import NewsCache
from services.news_client import fetch_news

router = APIRouter()


@router.get("/api/news")
async def news(
    request: Request,
    settings: Settings = Depends(get_settings),
    cache: NewsCache = Depends(get_news_cache),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Provider JSON returned verbatim. Repeated query keys keep their last value."""
    params = dict(request.query_params)
    return await fetch_news(params, settings, cache, client)
