import logging
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Input exports (CSV snapshots of the Google Sheets tabs)
    standings_csv: Optional[Path] = Field(
        None, description="CSV export of the 'Sorted by team' standings tab."
    )
    winners_csv: Optional[Path] = Field(
        None, description="CSV export of the winners 'Clubs' tab (play-off winners)."
    )

    # Engine Settings
    tolerant_playoff_matching: bool = Field(
        False,
        description="Also match play-off winners after stripping club prefixes (e.g. 'Real').",
    )
    records_limit: int = Field(
        50, ge=1, description="Maximum rows returned by the best-records query."
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            logging.warning(
                f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
            )
            settings.log_level = "INFO"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
