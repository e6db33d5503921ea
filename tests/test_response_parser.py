"""Tests for parsing MVG API responses."""

import pytest

from mvg_quick_departures.adapters.mvg_api.response_parser import (
    parse_departures,
    parse_locations,
)
from mvg_quick_departures.domain.errors import ParseError

DEPARTURE_RECORD = {
    "plannedDepartureTime": 1_700_000_300_000,
    "realtime": True,
    "delayInMinutes": 2,
    "realtimeDepartureTime": 1_700_000_420_000,
    "transportType": "UBAHN",
    "label": "U3",
    "divaId": "010U3",
    "network": "swm",
    "trainType": "",
    "destination": "Fürstenried West",
    "cancelled": False,
    "sev": False,
    "platform": 2,
    "platformChanged": False,
    "messages": [],
    "bannerHash": "",
    "occupancy": "LOW",
    "stopPointGlobalId": "de:09162:2:52:52",
}


class TestParseDepartures:
    """Tests for parse_departures."""

    def test_when_full_record_then_maps_all_fields(self) -> None:
        """Given a complete record, then camelCase fields are mapped and extras ignored."""
        [departure] = parse_departures([DEPARTURE_RECORD])

        assert departure.planned_departure_time == 1_700_000_300_000
        assert departure.realtime_departure_time == 1_700_000_420_000
        assert departure.delay_in_minutes == 2
        assert departure.realtime is True
        assert departure.transport_type == "UBAHN"
        assert departure.label == "U3"
        assert departure.destination == "Fürstenried West"
        assert departure.platform == 2
        assert departure.occupancy == "LOW"
        assert departure.is_delayed

    def test_when_optional_fields_missing_then_defaults_apply(self) -> None:
        """Given a minimal record, then realtime time falls back to planned time."""
        record = {
            "plannedDepartureTime": 1_700_000_300_000,
            "transportType": "BUS",
            "label": "139",
            "destination": "Klinikum Harlaching",
        }

        [departure] = parse_departures([record])

        assert departure.realtime_departure_time == 1_700_000_300_000
        assert departure.delay_in_minutes == 0
        assert departure.platform is None
        assert departure.cancelled is False
        assert departure.occupancy == "UNKNOWN"

    def test_when_delay_is_null_or_negative_then_zero(self) -> None:
        """Given null or early delays, then the delay is reported as zero."""
        departures = parse_departures(
            [
                {**DEPARTURE_RECORD, "delayInMinutes": None},
                {**DEPARTURE_RECORD, "delayInMinutes": -1},
            ]
        )

        assert [d.delay_in_minutes for d in departures] == [0, 0]
        assert not any(d.is_delayed for d in departures)

    def test_when_empty_list_then_no_departures(self) -> None:
        assert parse_departures([]) == []

    @pytest.mark.parametrize(
        "data",
        [
            {"error": "not a list"},
            [{"label": "U3"}],
            [{**DEPARTURE_RECORD, "plannedDepartureTime": "soon"}],
            None,
        ],
    )
    def test_when_shape_is_unexpected_then_raises_parse_error(self, data: object) -> None:
        """Given a body that does not match the record shape, then ParseError is raised."""
        with pytest.raises(ParseError):
            parse_departures(data)


class TestParseLocations:
    """Tests for parse_locations."""

    def test_maps_stations_and_skips_locations_without_id(self) -> None:
        """Given a station, a POI and an address, then the address without id is skipped."""
        data = [
            {
                "type": "STATION",
                "latitude": 48.13725,
                "longitude": 11.57542,
                "place": "München",
                "name": "Marienplatz",
                "globalId": "de:09162:2",
                "divaId": 2,
                "hasZoomData": True,
                "transportTypes": ["UBAHN", "BUS", "SBAHN"],
                "surroundingPlanLink": "MP",
                "aliases": "",
                "tariffZones": "m",
            },
            {
                "type": "POI",
                "place": "München",
                "name": "Marienplatz Rathaus",
                "globalId": "de:09162:poi:1",
                "transportTypes": None,
            },
            {"type": "ADDRESS", "place": "München", "name": "Marienplatz 8"},
        ]

        stations = parse_locations(data)

        assert [s.global_id for s in stations] == ["de:09162:2", "de:09162:poi:1"]
        assert stations[0].transport_types == frozenset({"UBAHN", "BUS", "SBAHN"})
        assert stations[0].place == "München"
        assert stations[1].type == "POI"
        assert stations[1].transport_types == frozenset()

    def test_when_shape_is_unexpected_then_raises_parse_error(self) -> None:
        with pytest.raises(ParseError):
            parse_locations({"locations": []})
