"""Centralized configuration — all env vars in one place."""

import os


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.port: int = int(os.getenv("PORT", "3000"))

        # NewsData.io
        self.newsdata_api_key: str | None = os.getenv("NEWSDATA_API_KEY") or None
        self.newsdata_base_url: str = os.getenv("NEWSDATA_BASE_URL", "https://newsdata.io/api/1")
        self.news_cache_ttl_seconds: float = float(os.getenv("NEWS_CACHE_TTL_SECONDS", "60"))

        # OpenAI chat completions
        self.openai_api_key: str | None = os.getenv("OPENAI_API_KEY") or None
        self.openai_base_url: str = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
        self.openai_model: str = os.getenv("OPENAI_MODEL", "gpt-4")

        self.upstream_timeout_seconds: float = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "30"))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of missing provider keys. Each one disables a single route."""
        required = ["NEWSDATA_API_KEY", "OPENAI_API_KEY"]
        return [var for var in required if not getattr(self, var.lower())]


settings = Settings()
