"""Configuration management using pydantic-settings."""
import logging
import sys
from functools import lru_cache
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Any, List, Literal

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Addon settings loaded from environment variables.

    All settings prefixed with VESSEL_CATEGORIZER_
    (e.g., VESSEL_CATEGORIZER_GAME_DATA_DIR=/opt/ksp/GameData)
    """

    # Config discovery
    game_data_dir: Path = Field(
        default=Path("GameData"),
        description="Root directory scanned for config files"
    )
    config_pattern: str = Field(
        default="**/*.cfg",
        min_length=1,
        description="Glob (relative to game_data_dir) selecting config files"
    )
    master_node_name: str = Field(
        default="VesselCategorizer",
        min_length=1,
        description="Top-level config node holding all addon settings"
    )
    naming_rules_node_name: str = Field(
        default="NamingRules",
        min_length=1,
        description="Child of the master node listing '<VesselType> = <substring>' rules"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON instead of console output"
    )

    model_config = SettingsConfigDict(
        env_prefix="VESSEL_CATEGORIZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator('config_pattern')
    @classmethod
    def validate_config_pattern(cls, v: str) -> str:
        """Ensure the glob stays relative to game_data_dir.

        Raises:
            ValueError: If the pattern is absolute or has an empty path segment
        """
        if PurePosixPath(v).is_absolute() or PureWindowsPath(v).anchor:
            raise ValueError(f'config_pattern must be relative to game_data_dir, got {v!r}')
        if any(not segment for segment in v.replace("\\", "/").split("/")):
            raise ValueError(f'config_pattern has an empty path segment: {v!r}')
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached addon settings.

    Settings are read from the environment once and reused.
    """
    return Settings()


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structlog on top of the standard library logging module.

    Args:
        log_level: Minimum level name (e.g. "INFO")
        json_logs: Emit JSON lines instead of human-readable console output
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    shared_processors: List[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
