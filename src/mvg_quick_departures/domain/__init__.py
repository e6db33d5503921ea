"""Domain layer - core business logic and models."""

from mvg_quick_departures.domain.models import (
    Departure,
    DepartureSnapshot,
    PinnedStation,
    Station,
    TransportType,
)
from mvg_quick_departures.domain.ports import (
    DepartureRepository,
    DisplayAdapter,
    Notifier,
    PinnedStationStore,
    StationRepository,
)

__all__ = [
    "Departure",
    "DepartureRepository",
    "DepartureSnapshot",
    "DisplayAdapter",
    "Notifier",
    "PinnedStation",
    "PinnedStationStore",
    "Station",
    "StationRepository",
    "TransportType",
]
