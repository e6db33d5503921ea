"""Departure grouping service."""

import logging
from collections.abc import Iterable

from mvg_quick_departures.domain.models.departure import Departure
from mvg_quick_departures.domain.models.departure_group import DepartureGroup
from mvg_quick_departures.domain.models.transport_type import DISPLAY_ORDER

logger = logging.getLogger(__name__)


class DepartureGroupingService:
    """Service for grouping departures by transport type."""

    def group(self, departures: Iterable[Departure]) -> list[DepartureGroup]:
        """Group departures into the fixed category order U-Bahn, S-Bahn, Tram, Bus.

        Categories without departures are omitted. Within a category the order
        of the feed is kept as is; the service already sorts by departure time.
        Departures of other transport types are not part of any group.

        Args:
            departures: Departures of one snapshot, in feed order.

        Returns:
            Non-empty groups in display order.
        """
        by_type: dict[str, list[Departure]] = {t: [] for t in DISPLAY_ORDER}
        skipped = 0
        for departure in departures:
            bucket = by_type.get(departure.transport_type.upper())
            if bucket is None:
                skipped += 1
                continue
            bucket.append(departure)

        if skipped:
            logger.debug(f"Skipped {skipped} departures with transport types outside the board")

        return [
            DepartureGroup(transport_type=transport_type, departures=tuple(by_type[transport_type]))
            for transport_type in DISPLAY_ORDER
            if by_type[transport_type]
        ]
