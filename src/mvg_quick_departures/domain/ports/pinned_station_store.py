"""Pinned station store port."""

from typing import Protocol

from mvg_quick_departures.domain.models.station import PinnedStation, PinSlot


class PinnedStationStore(Protocol):
    """Port for the persisted home and work stations.

    ``get`` never fails: a slot that was never written yields its default
    (home: Marienplatz ``de:09162:2``, work: Hauptbahnhof ``de:09162:1``).
    """

    def get(self, slot: PinSlot) -> PinnedStation:
        """Get the pinned station for a slot."""
        ...

    def set(self, slot: PinSlot, station: PinnedStation) -> None:
        """Persist the pinned station for a slot."""
        ...
