"""Station domain models."""

from dataclasses import dataclass, field
from enum import StrEnum


class PinSlot(StrEnum):
    """The two quick access slots."""

    HOME = "home"
    WORK = "work"


@dataclass(frozen=True)
class PinnedStation:
    """Reduced station projection persisted for a quick access slot."""

    global_id: str
    name: str


@dataclass(frozen=True)
class Station:
    """Represents a location returned by the locations endpoint."""

    global_id: str
    name: str
    place: str = ""
    transport_types: frozenset[str] = field(default_factory=frozenset)
    type: str = "STATION"

    def to_pinned(self) -> PinnedStation:
        """Project this station onto the persisted pin shape."""
        return PinnedStation(global_id=self.global_id, name=self.name)


DEFAULT_HOME_STATION = PinnedStation(global_id="de:09162:2", name="Marienplatz")
DEFAULT_WORK_STATION = PinnedStation(global_id="de:09162:1", name="Hauptbahnhof")
