"""MVG departure repository adapter."""

import logging

from mvg_quick_departures.adapters.mvg_api.constants import DEPARTURES_PATH
from mvg_quick_departures.adapters.mvg_api.http_client import MvgHttpClient
from mvg_quick_departures.adapters.mvg_api.response_parser import parse_departures
from mvg_quick_departures.domain.models.departure import Departure
from mvg_quick_departures.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)

DEFAULT_TRANSPORT_TYPES = ["UBAHN", "SBAHN", "BUS", "TRAM"]


class MvgDepartureRepository(DepartureRepository):
    """Adapter for the MVG departures endpoint."""

    def __init__(self, http_client: MvgHttpClient) -> None:
        """Initialize with an MVG HTTP client."""
        self._http_client = http_client

    async def get_departures(
        self,
        station_id: str,
        limit: int = 20,
        offset_minutes: int = 0,
        transport_types: list[str] | None = None,
    ) -> list[Departure]:
        """Get departures for a station, in the order the API returns them."""
        params: dict[str, str | int] = {
            "globalId": station_id,
            "limit": limit,
            "transportTypes": ",".join(transport_types or DEFAULT_TRANSPORT_TYPES),
            "offsetInMinutes": offset_minutes,
        }
        data = await self._http_client.get_json(DEPARTURES_PATH, params=params)
        departures = parse_departures(data)
        logger.debug(f"Fetched {len(departures)} departures for {station_id}")
        return departures
