"""
Stellara Events -- Centralised configuration via pydantic-settings.

Environment variables override defaults using the ``STELLARA_`` prefix
(e.g. ``STELLARA_ROOT_TOPIC=stellara_event``).

Usage:
    from stellara_events.config.settings import get_settings
    settings = get_settings()          # cached singleton
    print(settings.root_topic)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StellaraSettings(BaseSettings):
    """Top-level configuration for the event emission layer."""

    # ------------------------------------------------------------------
    # General
    # ------------------------------------------------------------------
    instance_id: str = "stellara-node-1"
    environment: str = "production"  # production | staging | development

    # ------------------------------------------------------------------
    # Envelope
    # ------------------------------------------------------------------
    # First element of every standardized channel key.  Consumers filter on
    # it, so changing it is a breaking change.
    root_topic: str = Field(default="stellara_event", pattern=r"^[A-Za-z0-9_]+$")
    symbol_max_length: int = Field(default=32, ge=1)

    # ------------------------------------------------------------------
    # Redis transport
    # ------------------------------------------------------------------
    redis_url: str = "redis://localhost:6379"
    redis_stream: str = "stellara:events"
    redis_stream_maxlen: int = 100000

    # ------------------------------------------------------------------
    # Observability
    # ------------------------------------------------------------------
    metrics_enabled: bool = True
    prometheus_port: int = 8000
    log_level: str = "INFO"
    log_format: str = "json"  # json | text

    # ------------------------------------------------------------------
    # Pydantic-settings config
    # ------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_prefix="STELLARA_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


@lru_cache(maxsize=1)
def get_settings() -> StellaraSettings:
    """Return a cached singleton of the application settings.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    return StellaraSettings()
