"""Ports (interfaces) for the ports-and-adapters architecture."""

from mvg_quick_departures.domain.ports.departure_repository import DepartureRepository
from mvg_quick_departures.domain.ports.display_adapter import DisplayAdapter
from mvg_quick_departures.domain.ports.notifier import Notifier
from mvg_quick_departures.domain.ports.pinned_station_store import PinnedStationStore
from mvg_quick_departures.domain.ports.station_repository import StationRepository

__all__ = [
    "DepartureRepository",
    "DisplayAdapter",
    "Notifier",
    "PinnedStationStore",
    "StationRepository",
]
