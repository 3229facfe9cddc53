"""Runtime settings, read from ``WMS_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WMS_", env_file=".env", extra="ignore")

    # Storage
    data_dir: Path = _PROJECT_ROOT / "data"
    seed_demo_data: bool = True

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Advisory service
    advisor_url: str | None = None
    advisor_timeout: float = 10.0


@lru_cache()
def get_settings() -> Settings:
    return Settings()
