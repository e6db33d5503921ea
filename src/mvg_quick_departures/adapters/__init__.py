"""Adapters layer - external system integrations."""

from mvg_quick_departures.adapters.config import AppConfig
from mvg_quick_departures.adapters.mvg_api import (
    MvgDepartureRepository,
    MvgHttpClient,
    MvgStationRepository,
)

__all__ = [
    "AppConfig",
    "MvgDepartureRepository",
    "MvgHttpClient",
    "MvgStationRepository",
]
