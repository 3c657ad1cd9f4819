"""Render engine configuration loaded from environment variables."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Dialect(str, Enum):
    """SQL dialects used for identifier and literal quoting.

    Values are the dialect names understood by SQLGlot.
    """

    MYSQL = "mysql"
    DUCKDB = "duckdb"
    POSTGRES = "postgres"
    TSQL = "tsql"
    BIGQUERY = "bigquery"
    SNOWFLAKE = "snowflake"
    DATABRICKS = "databricks"


class Settings(BaseSettings):
    """Render settings loaded from environment variables with STMTRENDER_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="STMTRENDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    debug: bool = False

    # Identifier / literal quoting
    dialect: Dialect = Dialect.MYSQL

    # IF / ELSE bodies recurse through the program renderer.
    max_nesting_depth: int = 64

    # Unrecognised object keywords: raise instead of dropping the clause.
    strict_keywords: bool = False

    @field_validator("max_nesting_depth")
    @classmethod
    def _positive_depth(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_nesting_depth must be >= 1")
        return v


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment, with optional overrides for testing."""
    settings = Settings(**overrides)  # type: ignore[arg-type]

    if settings.debug:
        logger.info(
            "Loaded render settings: dialect=%s max_nesting_depth=%d strict_keywords=%s",
            settings.dialect.value,
            settings.max_nesting_depth,
            settings.strict_keywords,
        )

    return settings
