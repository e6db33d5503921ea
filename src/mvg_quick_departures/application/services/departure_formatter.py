"""Formatting of departures into user-facing strings."""

import time
from collections.abc import Callable
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from mvg_quick_departures.domain.contracts.departure_formatter import DepartureFormatterProtocol
from mvg_quick_departures.domain.models.board_view import DepartureGroupView, DepartureView
from mvg_quick_departures.domain.models.departure import Departure
from mvg_quick_departures.domain.models.departure_group import DepartureGroup
from mvg_quick_departures.domain.models.station import Station
from mvg_quick_departures.domain.models.transport_type import IconCategory, TransportType

DEFAULT_TIMEZONE = "Europe/Berlin"

_DISPLAY_NAMES = {
    "ubahn": "U-Bahn",
    "sbahn": "S-Bahn",
    "bus": "Bus",
    "tram": "Tram",
}

_RAIL_STATION_TYPES = (TransportType.UBAHN, TransportType.SBAHN, TransportType.TRAM)


def now_ms() -> int:
    """Current wall clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def relative_eta(timestamp_ms: int, now: int) -> str:
    """Format the time until a departure as "Now", "1 min" or "<N> min".

    Minutes are floored, so anything less than a full minute away is "Now".
    """
    minutes = (timestamp_ms - now) // 60_000
    if minutes <= 0:
        return "Now"
    if minutes == 1:
        return "1 min"
    return f"{minutes} min"


def clock_time(timestamp_ms: int, timezone: str = DEFAULT_TIMEZONE) -> str:
    """Format a timestamp as 24-hour HH:MM in the given timezone."""
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC).astimezone(ZoneInfo(timezone))
    return moment.strftime("%H:%M")


def transport_display_name(transport_type: str) -> str:
    """Map a transport type to its display name; unknown types pass through."""
    return _DISPLAY_NAMES.get(transport_type.lower(), transport_type)


def line_icon_category(transport_type: str) -> IconCategory:
    """Classify a line for icon selection; unknown types count as rail."""
    if transport_type.lower() == "bus":
        return IconCategory.ROAD
    return IconCategory.RAIL


def station_icon_category(station: Station) -> IconCategory:
    """Rail icon for stations served by U-Bahn, S-Bahn or tram, road otherwise."""
    if any(t in station.transport_types for t in _RAIL_STATION_TYPES):
        return IconCategory.RAIL
    return IconCategory.ROAD


def departure_count_summary(count: int) -> str:
    """Subtitle for a transport type section."""
    return f"{count} departure{'' if count == 1 else 's'}"


def departure_subtitle(departure: Departure, timezone: str = DEFAULT_TIMEZONE) -> str:
    """Row subtitle: "CANCELLED", or platform, departure time and any delay."""
    if departure.cancelled:
        return "CANCELLED"
    platform = departure.platform if departure.platform is not None else "-"
    subtitle = f"Platform {platform} • {clock_time(departure.realtime_departure_time, timezone)}"
    if departure.is_delayed:
        subtitle += f" • +{departure.delay_in_minutes} min delay"
    return subtitle


def departure_tooltip(departure: Departure, timezone: str = DEFAULT_TIMEZONE) -> str:
    """Tooltip for the ETA accessory with the departure time and any delay."""
    tooltip = f"Departure: {clock_time(departure.realtime_departure_time, timezone)}"
    if departure.is_delayed:
        tooltip += f" (+{departure.delay_in_minutes} min)"
    return tooltip


class DepartureFormatter(DepartureFormatterProtocol):
    """Formats departures using a fixed timezone and an injectable clock."""

    def __init__(
        self,
        timezone: str = DEFAULT_TIMEZONE,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        """Initialize the formatter.

        Args:
            timezone: IANA timezone used for absolute times.
            clock: Returns the current time in epoch milliseconds.
        """
        self.timezone = timezone
        self.clock = clock

    def format_departure(self, departure: Departure) -> DepartureView:
        """Format a single departure row."""
        return DepartureView(
            title=f"{departure.label} → {departure.destination}",
            subtitle=departure_subtitle(departure, self.timezone),
            eta=relative_eta(departure.realtime_departure_time, self.clock()),
            clock_time=clock_time(departure.realtime_departure_time, self.timezone),
            occupancy=departure.occupancy,
            tooltip=departure_tooltip(departure, self.timezone),
            icon=line_icon_category(departure.transport_type),
            status=departure.status,
        )

    def format_group(self, group: DepartureGroup) -> DepartureGroupView:
        """Format a transport type section."""
        return DepartureGroupView(
            transport_type=str(group.transport_type),
            title=transport_display_name(group.transport_type),
            subtitle=departure_count_summary(group.count),
            departures=[self.format_departure(d) for d in group.departures],
        )
