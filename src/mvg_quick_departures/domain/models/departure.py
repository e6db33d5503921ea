"""Departure domain model."""

from dataclasses import dataclass
from enum import StrEnum

from mvg_quick_departures.domain.models.transport_type import Occupancy


class DepartureStatus(StrEnum):
    """Display status of a departure, used for tinting."""

    CANCELLED = "cancelled"
    DELAYED = "delayed"
    ON_TIME = "on_time"


@dataclass(frozen=True)
class Departure:
    """Represents a single departure from a station.

    Times are epoch milliseconds as delivered by the API. The realtime time
    equals the planned time unless the departure is delayed.
    """

    planned_departure_time: int
    realtime_departure_time: int
    delay_in_minutes: int
    realtime: bool
    transport_type: str
    label: str
    destination: str
    cancelled: bool = False
    platform: int | None = None
    platform_changed: bool = False
    occupancy: str = Occupancy.UNKNOWN

    @property
    def is_delayed(self) -> bool:
        """Whether the departure runs late."""
        return self.delay_in_minutes > 0

    @property
    def status(self) -> DepartureStatus:
        """Cancellation wins over delay."""
        if self.cancelled:
            return DepartureStatus.CANCELLED
        if self.is_delayed:
            return DepartureStatus.DELAYED
        return DepartureStatus.ON_TIME
