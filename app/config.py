# app/config.py
"""
Application settings loaded from environment variables (and an optional .env file).

Usage:
    from app.config import get_settings
    settings = get_settings()
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime configuration.

    The deployment differences between server variants (delete response shape,
    CORS, security headers, static demo page) are expressed here as flags.
    """

    # --- Database ---
    DATABASE_URL: str = Field(
        default="sqlite:///db.sqlite",
        description="SQLAlchemy database URL",
    )
    DATABASE_ECHO: bool = Field(
        default=False,
        description="Print emitted SQL (useful while debugging)",
    )

    # --- Server ---
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=3000, ge=1, le=65535)
    LOG_LEVEL: str = Field(default="INFO")

    # --- Response shapes ---
    DELETE_RESPONSE_STYLE: Literal["record", "message"] = Field(
        default="record",
        description="record: return the deleted user; message: return a sentence",
    )

    # --- Browser-facing policies ---
    CORS_ORIGINS: str = Field(
        default="",
        description="Allowed CORS origins (comma-separated); empty disables CORS",
    )
    SECURITY_HEADERS: bool = Field(default=False)
    CONTENT_SECURITY_POLICY: str = Field(default="script-src 'self'")

    # --- Static demo page ---
    SERVE_STATIC: bool = Field(default=False)
    STATIC_DIR: str = Field(default="public")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """
        "http://localhost:3000, https://example.com" -> ["http://localhost:3000", "https://example.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
