"""12-factor configuration adapter using environment variables."""

import json
from pathlib import Path
from typing import Annotated, Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_KNOWN_TRANSPORT_TYPES = ("UBAHN", "SBAHN", "TRAM", "BUS", "REGIONAL_BUS", "BAHN")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # MVG API configuration
    mvg_api_base_url: str = Field(
        default="https://www.mvg.de/api/bgw-pt/v3",
        description="Base URL of the MVG bgw-pt API",
    )
    mvg_api_timeout: int = Field(default=10, description="Timeout for MVG API requests in seconds")
    departures_limit: int = Field(
        default=20, description="Maximum number of departures to fetch per poll"
    )
    departures_offset_minutes: int = Field(
        default=5, description="Forward offset in minutes for departure queries"
    )
    transport_types: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["UBAHN", "SBAHN", "BUS", "TRAM"],
        description="Transport types requested from the departures endpoint",
    )

    # Polling and search behaviour
    refresh_interval_seconds: float = Field(
        default=30, description="Interval between departure updates in seconds"
    )
    search_debounce_ms: int = Field(
        default=300, description="Quiet period before a station search is sent"
    )
    search_panel_limit: int = Field(
        default=10, description="Maximum results in the home/work station picker"
    )
    station_dropdown_limit: int = Field(
        default=20, description="Maximum results in the station dropdown"
    )

    # Display configuration
    timezone: str = Field(
        default="Europe/Berlin",
        description="Timezone for displaying departure times (IANA timezone name)",
    )

    # Persistence
    pinned_stations_file: str = Field(
        default="~/.mvg_quick_departures.json",
        description="JSON file holding the home and work stations",
    )

    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("transport_types", mode="before")
    @classmethod
    def split_transport_types(cls, v: Any) -> Any:
        """Accept a JSON list or a comma separated string, as given in environment variables."""
        if isinstance(v, str):
            if v.lstrip().startswith("["):
                return json.loads(v)
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    @field_validator("transport_types")
    @classmethod
    def validate_transport_types(cls, v: list[str]) -> list[str]:
        """Validate transport types are known to the MVG API."""
        normalized = [t.upper() for t in v]
        unknown = [t for t in normalized if t not in _KNOWN_TRANSPORT_TYPES]
        if unknown:
            raise ValueError(f"Unknown transport types: {', '.join(unknown)}")
        if not normalized:
            raise ValueError("transport_types must not be empty")
        return normalized

    @field_validator("refresh_interval_seconds", "search_debounce_ms")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Validate intervals are positive."""
        if v <= 0:
            raise ValueError("intervals must be positive")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate the timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return level

    @property
    def search_debounce_seconds(self) -> float:
        """Debounce period in seconds."""
        return self.search_debounce_ms / 1000

    @property
    def pinned_stations_path(self) -> Path:
        """Expanded path of the pinned stations file."""
        return Path(self.pinned_stations_file).expanduser()

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a configuration that ignores any .env file."""
        return cls(_env_file=None, **overrides)  # type: ignore[call-arg]
