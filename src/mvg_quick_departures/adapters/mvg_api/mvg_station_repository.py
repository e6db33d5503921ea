"""MVG station repository adapter."""

import logging

from mvg_quick_departures.adapters.mvg_api.constants import LOCATIONS_PATH
from mvg_quick_departures.adapters.mvg_api.http_client import MvgHttpClient
from mvg_quick_departures.adapters.mvg_api.response_parser import parse_locations
from mvg_quick_departures.domain.models.station import Station
from mvg_quick_departures.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class MvgStationRepository(StationRepository):
    """Adapter for the MVG locations endpoint."""

    def __init__(self, http_client: MvgHttpClient) -> None:
        """Initialize with an MVG HTTP client."""
        self._http_client = http_client

    async def search_locations(self, query: str) -> list[Station]:
        """Search locations by free text; the API ranks the results."""
        data = await self._http_client.get_json(LOCATIONS_PATH, params={"query": query})
        stations = parse_locations(data)
        logger.debug(f"Location search '{query}' returned {len(stations)} result(s)")
        return stations
