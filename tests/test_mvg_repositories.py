"""Tests for the MVG repository adapters."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from mvg_quick_departures.adapters.mvg_api import MvgDepartureRepository, MvgStationRepository
from mvg_quick_departures.domain.errors import HttpError


def _mock_http_client(data: object) -> MagicMock:
    client = MagicMock()
    client.get_json = AsyncMock(return_value=data)
    return client


class TestMvgDepartureRepository:
    """Tests for MvgDepartureRepository."""

    @pytest.mark.asyncio
    async def test_sends_query_parameters(self) -> None:
        """Given options, when fetching departures, then they are sent as query parameters."""
        client = _mock_http_client(
            [
                {
                    "plannedDepartureTime": 1_700_000_300_000,
                    "transportType": "TRAM",
                    "label": "17",
                    "destination": "Amalienburgstraße",
                }
            ]
        )
        repo = MvgDepartureRepository(client)

        departures = await repo.get_departures(
            "de:09162:1110", limit=20, offset_minutes=5, transport_types=["UBAHN", "TRAM"]
        )

        client.get_json.assert_awaited_once_with(
            "/departures",
            params={
                "globalId": "de:09162:1110",
                "limit": 20,
                "transportTypes": "UBAHN,TRAM",
                "offsetInMinutes": 5,
            },
        )
        assert [d.label for d in departures] == ["17"]

    @pytest.mark.asyncio
    async def test_defaults_to_board_transport_types(self) -> None:
        """Given no transport types, then the four board types are requested."""
        client = _mock_http_client([])
        repo = MvgDepartureRepository(client)

        await repo.get_departures("de:09162:2")

        params = client.get_json.call_args.kwargs["params"]
        assert params["transportTypes"] == "UBAHN,SBAHN,BUS,TRAM"
        assert params["offsetInMinutes"] == 0

    @pytest.mark.asyncio
    async def test_errors_propagate(self) -> None:
        """Given a failing client, then the domain error reaches the caller."""
        client = MagicMock()
        client.get_json = AsyncMock(side_effect=HttpError(503, "Service Unavailable"))
        repo = MvgDepartureRepository(client)

        with pytest.raises(HttpError):
            await repo.get_departures("de:09162:2")


class TestMvgStationRepository:
    """Tests for MvgStationRepository."""

    @pytest.mark.asyncio
    async def test_sends_query_and_parses_locations(self) -> None:
        """Given a query, when searching, then it is sent and results are parsed in order."""
        client = _mock_http_client(
            [
                {"type": "STATION", "name": "Giesing", "globalId": "de:09162:1100"},
                {"type": "STATION", "name": "Giesing Bf.", "globalId": "de:09162:1108"},
            ]
        )
        repo = MvgStationRepository(client)

        stations = await repo.search_locations("Giesing")

        client.get_json.assert_awaited_once_with("/locations", params={"query": "Giesing"})
        assert [s.name for s in stations] == ["Giesing", "Giesing Bf."]
