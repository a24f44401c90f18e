"""Runtime configuration read from the environment (and an optional .env file)."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from quizmaster.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from quizmaster.constants.quiz_constants import (
    DEFAULT_MODEL,
    DEFAULT_QUESTION_COUNT,
    DEFAULT_TEMPERATURE,
)
from quizmaster.constants.storage_constants import (
    DEFAULT_DATA_DIR,
    DEFAULT_HISTORY_LIMIT,
    STORAGE_FILE_NAME,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="QUIZMASTER_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        populate_by_name=True,
    )

    # Gemini
    GEMINI_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("QUIZMASTER_GEMINI_API_KEY", "GEMINI_API_KEY", "API_KEY"),
    )
    MODEL: str = DEFAULT_MODEL
    TEMPERATURE: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    QUESTION_COUNT: int = Field(default=DEFAULT_QUESTION_COUNT, ge=1, le=20)

    # Server
    HOST: str = DEFAULT_HOST
    PORT: int = DEFAULT_PORT
    DESKTOP_WINDOW: bool = True

    # Storage
    DATA_DIR: Path = Path(DEFAULT_DATA_DIR)
    HISTORY_LIMIT: int = Field(default=DEFAULT_HISTORY_LIMIT, ge=0)

    LOG_LEVEL: str = "INFO"

    @property
    def storage_path(self) -> Path:
        return self.DATA_DIR.expanduser() / STORAGE_FILE_NAME


@lru_cache
def get_settings() -> Settings:
    return Settings()
