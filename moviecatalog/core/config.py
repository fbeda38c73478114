# moviecatalog/core/config.py
from __future__ import annotations

"""
# What To Watch · Centralized Configuration (Pydantic v2)

Single `settings` object with strongly-typed, environment-driven config.

## Goals
- Safe defaults for local/dev; explicit where prod needs secrets.
- CSV → list helpers for env-provided collections.
- One place that knows how to build the async database DSN.

## Usage
    from moviecatalog.core.config import settings

Controllers receive the `Settings` instance through their constructor
instead of importing the module-level singleton.
"""

import logging
from typing import List, Literal, Optional

from dotenv import load_dotenv
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

log = logging.getLogger(__name__)
load_dotenv()  # harmless in prod; convenient in dev


# ─────────────────────────────────────────────────────────────
# Small helpers
# ─────────────────────────────────────────────────────────────
def _split_csv(v: str | None) -> list[str]:
    """Split a comma-separated string into a trimmed list (empty-safe)."""
    if not v:
        return []
    return [s.strip() for s in str(v).split(",") if s and s.strip()]


# ─────────────────────────────────────────────────────────────
# Settings
# ─────────────────────────────────────────────────────────────
class Settings(BaseSettings):
    """
    Global application settings sourced from environment.

    Security:
        - `SALT` peppers every password hash; `JWT_SECRET_KEY` signs tokens.
          Both are required and have no defaults.

    Database:
        - `DATABASE_URL` wins when set (any async SQLAlchemy DSN);
          otherwise the DSN is assembled from the `DB_*` parts.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # don't crash on unknown keys
    )

    # ── App meta ──────────────────────────────────────────────
    PROJECT_NAME: str = "What To Watch API"
    VERSION: str = "1.0.0"
    API_PREFIX: str = ""
    ENV: Literal["development", "staging", "production"] = "development"
    ENABLE_DOCS: bool = True

    # ── Server ────────────────────────────────────────────────
    HOST: str = "0.0.0.0"
    PORT: int = Field(4000, ge=1, le=65535)

    # ── Security / JWT ────────────────────────────────────────
    SALT: SecretStr = Field(...)
    JWT_SECRET_KEY: SecretStr = Field(...)
    JWT_ALGORITHM: Literal["HS256", "HS384", "HS512"] = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(2 * 24 * 60, ge=5, le=30 * 24 * 60)

    # ── Database (PostgreSQL) ─────────────────────────────────
    DATABASE_URL: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: SecretStr = SecretStr("")
    DB_NAME: str = "what_to_watch"
    DB_CREATE_ALL: bool = False

    # ── Catalog ───────────────────────────────────────────────
    PROMO_MOVIE_ID: Optional[str] = None
    DEFAULT_MOVIE_COUNT: int = Field(60, ge=1, le=500)
    MAX_COMMENT_COUNT: int = Field(50, ge=1, le=500)

    # ── CORS ──────────────────────────────────────────────────
    BACKEND_CORS_ORIGINS: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"]
    )

    # ── Validators / normalizers ──────────────────────────────
    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def _assemble_cors_origins(cls, v: str | List[str]):
        if isinstance(v, str):
            return _split_csv(v)
        return v

    @field_validator("PROMO_MOVIE_ID", "DATABASE_URL", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # ── Derived / convenience properties ─────────────────────
    @property
    def is_production(self) -> bool:
        return self.ENV.lower() == "production"

    @property
    def ASYNC_DATABASE_URL(self) -> str:
        """Async SQLAlchemy DSN (asyncpg unless `DATABASE_URL` says otherwise)."""
        if self.DATABASE_URL:
            url = self.DATABASE_URL
            if url.startswith("postgresql://"):
                return url.replace("postgresql://", "postgresql+asyncpg://", 1)
            return url
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD.get_secret_value()}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def salt(self) -> str:
        """Plain-text salt for password hashing helpers."""
        return self.SALT.get_secret_value()


# Singleton instance
settings = Settings()
