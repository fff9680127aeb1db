# src/common_value_objects/config.py

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


EnvName = Literal["local", "dev", "staging", "prod"]
LogFormat = Literal["json", "console"]


ENV_PREFIX = "COMMON_VALUE_OBJECTS_"


class Settings(BaseSettings):
    """
    Library settings (Pydantic v2).

    - Read from OS env and an optional .env file, prefixed with
      COMMON_VALUE_OBJECTS_ (unprefixed ENVIRONMENT or LOG_LEVEL are ignored):
      COMMON_VALUE_OBJECTS_ENVIRONMENT,
      COMMON_VALUE_OBJECTS_LOG_LEVEL, COMMON_VALUE_OBJECTS_LOG_FORMAT,
      COMMON_VALUE_OBJECTS_OFFENSIVE_WORDS_FILE
    - Value objects never read settings while validating input; only the
      logging setup and the offensive word list loader do.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    ENVIRONMENT: EnvName = Field(default="local")
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: Optional[LogFormat] = Field(
        default=None,
        description="json|console; defaults to console for local/dev and json otherwise",
    )
    OFFENSIVE_WORDS_FILE: Optional[Path] = Field(
        default=None,
        description="Override for the bundled newline-separated offensive word list",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @property
    def is_prod(self) -> bool:
        return self.ENVIRONMENT == "prod"

    @property
    def is_staging(self) -> bool:
        return self.ENVIRONMENT == "staging"

    @property
    def is_dev(self) -> bool:
        return self.ENVIRONMENT == "dev"

    @property
    def is_local(self) -> bool:
        return self.ENVIRONMENT == "local"

    @property
    def log_format(self) -> LogFormat:
        if self.LOG_FORMAT is not None:
            return self.LOG_FORMAT
        return "console" if self.is_local or self.is_dev else "json"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
