"""Application configuration."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STORAGE_PATH = Path("storage") / "todo-file.json"


class Settings(BaseSettings):
    storage_path: Path = DEFAULT_STORAGE_PATH
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="TODO_")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
