"""Application configuration with environment validation.

Usage:
    from swimqualifiers.config import get_settings

    settings = get_settings()
    print(settings.standards_file)
    print(settings.data_folder)

Every setting has a default, so a bare run reads ``timestandards.xlsx`` and
the ``data`` folder from the working directory. Override with environment
variables of the same name or a ``.env`` file:

    STANDARDS_FILE=standards/2025.xlsx
    DATA_FOLDER=meets/
    OUTPUT_FILE=out/qualifier_counts.xlsx
"""

from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    """Application environment."""

    LOCAL = "local"
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class LogFormat(StrEnum):
    """Log output format."""

    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Environment = Environment.LOCAL

    # Inputs and output
    standards_file: Path = Field(
        default=Path("timestandards.xlsx"),
        description="Workbook with 'Mens' and 'Womens' qualifying time tabs",
    )
    data_folder: Path = Field(
        default=Path("data"), description="Folder searched for meet result workbooks"
    )
    output_file: Path = Field(
        default=Path("qualifier_counts.xlsx"), description="Report workbook to write"
    )
    meet_file_prefix: str = Field(
        default="CAN-MBSK_", description="Only meet files starting with this prefix are read"
    )
    meet_file_extensions: tuple[str, ...] = Field(
        default=(".xlsx", ".xls"), description="Recognized meet file extensions"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: LogFormat = Field(default=LogFormat.CONSOLE, description="Log output format")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
        get_settings.cache_clear()
    """
    return Settings()
