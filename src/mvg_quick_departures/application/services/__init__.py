"""Application services (use cases) for the departure board."""

from mvg_quick_departures.application.services.departure_board import BOARD_TOPIC, DepartureBoard
from mvg_quick_departures.application.services.departure_feed import DepartureFeed
from mvg_quick_departures.application.services.departure_formatter import DepartureFormatter
from mvg_quick_departures.application.services.departure_grouping_service import (
    DepartureGroupingService,
)
from mvg_quick_departures.application.services.station_picker import StationPicker
from mvg_quick_departures.application.services.station_resolver import StationResolver
from mvg_quick_departures.application.services.station_search_service import (
    StationSearchService,
)

__all__ = [
    "BOARD_TOPIC",
    "DepartureBoard",
    "DepartureFeed",
    "DepartureFormatter",
    "DepartureGroupingService",
    "StationPicker",
    "StationResolver",
    "StationSearchService",
]
