"""Departure group domain model."""

from dataclasses import dataclass

from mvg_quick_departures.domain.models.departure import Departure
from mvg_quick_departures.domain.models.transport_type import TransportType


@dataclass(frozen=True)
class DepartureGroup:
    """Departures of one transport type, in feed order."""

    transport_type: TransportType
    departures: tuple[Departure, ...]

    @property
    def count(self) -> int:
        """Number of departures in this group."""
        return len(self.departures)
