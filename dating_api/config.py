# dating_api/config.py

"""
Configuration for the Dating App HTTP API.

All tunables are read from the environment (or a local ``.env`` file) via
pydantic-settings, with development-friendly defaults.

Environment variables
=====================

- APP_ENV
    One of "development", "production", "testing".
    Default: "development"

- DATABASE_URL
    SQLAlchemy URL of the credential store.
    Default: "sqlite:///./dating.db"

- TOKEN_KEY
    Secret used to sign bearer tokens. Must be at least 64 characters.
    The default is for local development only.

- TOKEN_EXPIRE_MINUTES
    Lifetime of issued tokens. Default: 10080 (7 days).

- CORS_ORIGINS
    Comma-separated list of allowed frontend origins.
    Example: "http://localhost:4200,https://localhost:4200"
    A "*" entry allows any origin (development only, disables credentials).

- LOG_LEVEL / LOG_FORMAT
    Standard level name, and "json" or "console".

Typical usage
=============

    from dating_api.config import get_settings

    settings = get_settings()
    engine = create_engine(settings.DATABASE_URL)
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central configuration registry for the API process.
    """

    # --- Application Meta ---
    APP_NAME: str = "dating-app"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 5001

    # --- Persistence ---
    DATABASE_URL: str = "sqlite:///./dating.db"

    # --- Security ---
    TOKEN_KEY: str = (
        "dev-only-signing-key-change-me-dev-only-signing-key-change-me-0123456789"
    )
    TOKEN_ALGORITHM: str = "HS512"
    TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7

    # --- HTTP ---
    CORS_ORIGINS: str = "http://localhost:4200,https://localhost:4200"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origin_list(self) -> List[str]:
        """
        Parse CORS_ORIGINS into a list, dropping empty entries.
        """
        parts = [p.strip() for p in (self.CORS_ORIGINS or "").split(",")]
        return [p for p in parts if p]

    @property
    def allow_any_origin(self) -> bool:
        return "*" in self.cors_origin_list

    @property
    def docs_enabled(self) -> bool:
        return self.APP_ENV != AppEnv.PRODUCTION


# Singleton settings instance
_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Return the global Settings instance, creating it from the environment
    on first use.
    """
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings()
    return _SETTINGS


def set_settings(settings: Optional[Settings]) -> None:
    """
    Replace the global Settings instance.

    Mainly useful for tests; passing None forces a reload from the
    environment on the next ``get_settings()`` call.
    """
    global _SETTINGS
    _SETTINGS = settings


__all__ = ["AppEnv", "Settings", "get_settings", "set_settings"]
