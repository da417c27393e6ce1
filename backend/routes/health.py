"""Health and readiness check routes."""

from fastapi import APIRouter, Depends

from config import Settings
from dependencies import get_settings

router = APIRouter()

SERVICE_NAME = "news-gateway"


@router.get("/health")
async def health() -> dict:
    return {"ok": True}


@router.get("/ready")
async def ready(settings: Settings = Depends(get_settings)) -> dict:
    """Lightweight readiness check — no external calls."""
    return {"status": "ok", "service": SERVICE_NAME, "commit": settings.git_sha}
