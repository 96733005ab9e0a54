"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Application ───────────────────────────
    APP_ENV: str = "development"

    # ── Logging ───────────────────────────────
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")
    LOG_JSON: bool = Field(default=False, description="Render log lines as JSON")

    # ── Data API ──────────────────────────────
    DATA_API_LOG_TAG: str = Field(
        default="[Data API]",
        description="Prefix for diagnostics emitted by the record helpers",
    )

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()
