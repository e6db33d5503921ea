"""Departure snapshot domain model."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from mvg_quick_departures.domain.models.departure import Departure


@dataclass(frozen=True)
class DepartureSnapshot:
    """Departures returned by one poll for one station."""

    station_id: str
    departures: tuple[Departure, ...] = ()
    fetched_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def empty(cls, station_id: str) -> "DepartureSnapshot":
        """Create a snapshot without departures."""
        return cls(station_id=station_id)

    def __len__(self) -> int:
        return len(self.departures)
