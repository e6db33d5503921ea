"""Station repository port."""

from typing import Protocol

from mvg_quick_departures.domain.models.station import Station


class StationRepository(Protocol):
    """Port for searching locations."""

    async def search_locations(self, query: str) -> list[Station]:
        """Search locations matching a free-text query, in service ranking order.

        Raises:
            TransitApiError: If the service cannot be reached or answers badly.
        """
        ...
