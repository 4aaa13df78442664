# backend/app/core/config.py

from __future__ import annotations

import logging
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

ALLOWED_ENVIRONMENTS = {"development", "staging", "production"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -----------------------------
    # Environment
    # -----------------------------
    # Use: development | staging | production
    ENVIRONMENT: str = "development"

    # -----------------------------
    # Logging
    # -----------------------------
    LOG_LEVEL: str = "INFO"

    # -----------------------------
    # CORS (React form client)
    # -----------------------------
    # Env value is a JSON list: CORS_ALLOW_ORIGINS='["https://calc.example.com"]'
    CORS_ALLOW_ORIGINS: List[str] = ["http://localhost:3000"]
    CORS_ALLOW_ORIGIN_REGEX: Optional[str] = None

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    def model_post_init(self, __context) -> None:  # pydantic v2 hook
        self.ENVIRONMENT = (self.ENVIRONMENT or "").strip().lower()
        self.LOG_LEVEL = (self.LOG_LEVEL or "").strip().upper()

        if self.ENVIRONMENT not in ALLOWED_ENVIRONMENTS:
            raise ValueError(
                f"Unsupported ENVIRONMENT={self.ENVIRONMENT!r}. "
                f"Allowed: {', '.join(sorted(ALLOWED_ENVIRONMENTS))}"
            )

        if not isinstance(logging.getLevelName(self.LOG_LEVEL), int):
            raise ValueError(f"Unsupported LOG_LEVEL={self.LOG_LEVEL!r}.")

        # A wildcard origin is fine locally, never in production.
        if self.is_production and "*" in self.CORS_ALLOW_ORIGINS:
            raise ValueError("CORS_ALLOW_ORIGINS must list explicit origins in production.")


# this must exist for: `from app.core.config import settings`
settings = Settings()
