"""Domain models for MVG quick departures."""

from mvg_quick_departures.domain.models.board_view import (
    BoardView,
    DepartureGroupView,
    DepartureView,
    EmptyView,
    PickerEntry,
    StationPickerView,
)
from mvg_quick_departures.domain.models.departure import Departure, DepartureStatus
from mvg_quick_departures.domain.models.departure_group import DepartureGroup
from mvg_quick_departures.domain.models.departure_snapshot import DepartureSnapshot
from mvg_quick_departures.domain.models.error_details import ErrorDetails
from mvg_quick_departures.domain.models.feed_status import FeedStatus
from mvg_quick_departures.domain.models.notification import Notification, NotificationSeverity
from mvg_quick_departures.domain.models.station import (
    DEFAULT_HOME_STATION,
    DEFAULT_WORK_STATION,
    PinnedStation,
    PinSlot,
    Station,
)
from mvg_quick_departures.domain.models.station_catalog import (
    CatalogEntry,
    CatalogSection,
    CatalogSectionView,
    StationCatalog,
)
from mvg_quick_departures.domain.models.transport_type import (
    DISPLAY_ORDER,
    IconCategory,
    Occupancy,
    StationType,
    TransportType,
)

__all__ = [
    "DEFAULT_HOME_STATION",
    "DEFAULT_WORK_STATION",
    "DISPLAY_ORDER",
    "BoardView",
    "CatalogEntry",
    "CatalogSection",
    "CatalogSectionView",
    "Departure",
    "DepartureGroup",
    "DepartureGroupView",
    "DepartureSnapshot",
    "DepartureStatus",
    "DepartureView",
    "EmptyView",
    "ErrorDetails",
    "FeedStatus",
    "IconCategory",
    "Notification",
    "NotificationSeverity",
    "Occupancy",
    "PickerEntry",
    "PinSlot",
    "PinnedStation",
    "Station",
    "StationCatalog",
    "StationPickerView",
    "StationType",
    "TransportType",
]
