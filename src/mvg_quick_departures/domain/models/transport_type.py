"""Transport type and related enums."""

from enum import StrEnum


class TransportType(StrEnum):
    """Transport types shown on the departure board."""

    UBAHN = "UBAHN"
    SBAHN = "SBAHN"
    TRAM = "TRAM"
    BUS = "BUS"


# Fixed category order used for grouping and display
DISPLAY_ORDER: tuple[TransportType, ...] = (
    TransportType.UBAHN,
    TransportType.SBAHN,
    TransportType.TRAM,
    TransportType.BUS,
)


class StationType(StrEnum):
    """Location types returned by the locations endpoint."""

    STATION = "STATION"
    POI = "POI"
    ADDRESS = "ADDRESS"


class Occupancy(StrEnum):
    """Vehicle occupancy levels reported for a departure."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    UNKNOWN = "UNKNOWN"


class IconCategory(StrEnum):
    """Icon classes used by renderers."""

    RAIL = "rail"
    ROAD = "road"
    HOME = "home"
    WORK = "work"
