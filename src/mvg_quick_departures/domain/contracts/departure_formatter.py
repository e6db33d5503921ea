"""Protocol for formatting departures."""

from typing import Protocol

from mvg_quick_departures.domain.models.board_view import DepartureGroupView, DepartureView
from mvg_quick_departures.domain.models.departure import Departure
from mvg_quick_departures.domain.models.departure_group import DepartureGroup


class DepartureFormatterProtocol(Protocol):
    """Protocol for turning departures into display rows."""

    def format_departure(self, departure: Departure) -> DepartureView:
        """Format a single departure.

        Args:
            departure: The departure to format.

        Returns:
            Display row with title, subtitle, relative and absolute time.
        """
        ...

    def format_group(self, group: DepartureGroup) -> DepartureGroupView:
        """Format a transport type section.

        Args:
            group: The group to format.

        Returns:
            Section with display title, count summary and formatted rows.
        """
        ...
