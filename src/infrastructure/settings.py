"""Application settings loaded from environment variables via Pydantic."""

from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Central configuration for the artwork catalog service."""

    model_config = {"env_prefix": "APP_", "case_sensitive": False}

    # Upstream catalog
    api_base_url: str = "https://api.artic.edu/api/v1/artworks"
    request_timeout_seconds: float = 10.0

    # Offline mode: serve a synthetic catalog instead of calling the API
    use_sample_catalog: bool = False
    sample_catalog_size: int = 120

    # Pagination
    default_page_size: int = 12
    bulk_scan_page_size: Optional[int] = None
    max_page_size: int = 100

    # Sessions
    max_sessions: int = 1000

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: str = "*"


def get_settings() -> AppSettings:
    """Return a fresh settings instance."""
    return AppSettings()
