"""Runtime configuration loaded from environment variables.

Every setting has a default so the engine runs without any environment.
Numeric values that fail to parse fall back to their defaults rather than
stopping the process.

Usage:
    from booking_engine.config import get_settings

    settings = get_settings()
    settings.partial_min_percent  # 25.0
"""

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


class Settings(BaseModel):
    """Engine and API settings."""

    model_config = ConfigDict(frozen=True)

    environment: str = Field(default="dev", description="Deployment environment name")
    log_level: str = Field(default="INFO", description="Root log level")
    default_partial_percent: float = Field(
        default=25,
        description="Pay-now percent preselected when a guest switches to partial payment",
    )
    partial_min_percent: float = Field(
        default=25,
        description="Lowest pay-now percent a guest may choose",
    )
    default_currency: str = Field(default="NPR", description="Display currency code")
    cors_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _list_env(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    return Settings(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        default_partial_percent=_float_env("DEFAULT_PARTIAL_PERCENT", 25),
        partial_min_percent=_float_env("PARTIAL_MIN_PERCENT", 25),
        default_currency=os.getenv("DEFAULT_CURRENCY", "NPR").upper(),
        cors_origins=_list_env("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached Settings instance."""
    return load_settings()


def reset_settings() -> None:
    """Clear the cached settings (tests change the environment)."""
    get_settings.cache_clear()
