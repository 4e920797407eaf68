# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sqlparam.core.constants import Dialect


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SQLPARAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Rewriting
    dialect: Dialect = Dialect.POSTGRES
    max_comment_depth: int | None = None  # None means unbounded

    @field_validator("dialect", mode="before")
    @classmethod
    def _normalize_dialect(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("max_comment_depth")
    @classmethod
    def _check_depth(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            msg = "max_comment_depth must be at least 1"
            raise ValueError(msg)
        return v

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


def get_settings() -> Settings:
    return Settings()
