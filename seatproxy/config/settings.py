"""Application settings via Pydantic BaseSettings."""

from __future__ import annotations

import warnings
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

DEFAULT_MOCK_DATA_DIR = Path(__file__).resolve().parent.parent / "mock_data"


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Data source
    is_data_mocked: bool = False
    mock_data_dir: Path = DEFAULT_MOCK_DATA_DIR

    # Default request context (overridable per request via query params)
    scope: str = "org"
    github_org: str = ""
    github_ent: str = ""
    github_team: str = ""

    # GitHub access
    github_token: str | None = None  # fallback when the caller sends no Authorization
    github_api_url: str = "https://api.github.com"
    email_graphql_url: str = "https://api.github.com/graphql"
    request_timeout_seconds: float = 30.0

    # App
    debug: bool = False
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    settings = Settings()
    if not settings.is_data_mocked and not settings.github_org:
        warnings.warn(
            "GITHUB_ORG is not set. "
            "Email enrichment will query an empty organization login.",
            UserWarning,
            stacklevel=2,
        )
    return settings
