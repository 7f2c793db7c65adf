"""Application configuration via pydantic-settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Open-Meteo geocoding base URL
    geocoding_api_url: str = "https://geocoding-api.open-meteo.com/v1"

    # Open-Meteo forecast base URL
    forecast_api_url: str = "https://api.open-meteo.com/v1"

    # Max candidates requested per place search
    geocoding_count: int = 5

    # Language for place names
    geocoding_language: str = "en"

    # HTTP request timeout seconds
    http_timeout: float = 30.0

    # User agent sent to Open-Meteo
    user_agent: str = "weather-now (https://open-meteo.com)"

    # SQLite file holding the last place and unit preference
    db_path: Path = Path.home() / ".weather-now" / "state.db"

    # Root log level for the CLI
    log_level: str = "WARNING"

    @field_validator("geocoding_count")
    @classmethod
    def _geocoding_count_in_range(cls, v: int) -> int:
        if not 1 <= v <= 100:
            raise ValueError(f"geocoding_count must be in [1, 100], got {v}")
        return v

    @field_validator("http_timeout")
    @classmethod
    def _http_timeout_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"http_timeout must be > 0, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def _log_level_upper(cls, v: str) -> str:
        return v.upper()


def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()
