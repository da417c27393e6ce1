"""FastAPI application entry point for the news gateway."""

import logging
import sys

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, settings
from errors import register_error_handlers
from services.cache import NewsCache

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    app = FastAPI(title="News Gateway", version="1.0.0")

    # Long-lived state shared by every request
    app.state.settings = app_settings
    app.state.news_cache = NewsCache(ttl_seconds=app_settings.news_cache_ttl_seconds)
    app.state.http_client = None
    app.state.openai_client = None

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if app_settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.health import router as health_router
    from routes.news import router as news_router
    from routes.summary import router as summary_router

    app.include_router(health_router)
    app.include_router(news_router)
    app.include_router(summary_router)

    @app.on_event("startup")
    async def _validate_config() -> None:
        missing = app_settings.validate()
        if missing:
            logger.warning("Missing env vars (routes depending on them will return 500): %s", ", ".join(missing))

    @app.on_event("shutdown")
    async def _close_http_client() -> None:
        if app.state.http_client is not None:
            await app.state.http_client.aclose()
            app.state.http_client = None
        app.state.openai_client = None

    return app


app = create_app()


if __name__ == "__main__":
    logger.info("Server listening on port %d", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
