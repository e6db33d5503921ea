"""MVG API adapters."""

from mvg_quick_departures.adapters.mvg_api.http_client import MvgHttpClient
from mvg_quick_departures.adapters.mvg_api.mvg_departure_repository import MvgDepartureRepository
from mvg_quick_departures.adapters.mvg_api.mvg_station_repository import MvgStationRepository

__all__ = [
    "MvgDepartureRepository",
    "MvgHttpClient",
    "MvgStationRepository",
]
