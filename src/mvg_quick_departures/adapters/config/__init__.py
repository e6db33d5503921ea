"""Configuration adapters."""

from mvg_quick_departures.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
