from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    app_name: str = "git-diff-parser"

    env: str = "development"

    log_level: LogLevel = "INFO"
    log_format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    otel_logs_enabled: bool = False
    otel_service_name: str = "git-diff-parser"

    model_config = SettingsConfigDict(
        env_prefix="GIT_DIFF_PARSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
