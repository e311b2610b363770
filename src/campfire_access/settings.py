"""
campfire_access.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the API, lookup and store layers.
- Name the sheet that holds the entry list and the marker that means "granted".
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CAMPFIRE_ACCESS_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "campfire-access"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Record store
    sheet_name: str = "入場者リスト"
    granted_marker: str = Field(default="有", min_length=1)
    store_backend: Literal["csv", "sql", "memory"] = "csv"
    workbook_dir: Path = Path("./data")
    database_url: str = "sqlite+aiosqlite:///./campfire.db"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The sheet itself is edited by event staff outside this service; only its name
# and column conventions are configuration here.
