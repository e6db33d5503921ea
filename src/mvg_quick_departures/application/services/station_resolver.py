"""Merges pinned stations and search results into one selectable catalog."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mvg_quick_departures.application.services.departure_formatter import station_icon_category
from mvg_quick_departures.domain.errors import StationNotFoundError
from mvg_quick_departures.domain.models.station import PinnedStation, PinSlot, Station
from mvg_quick_departures.domain.models.station_catalog import (
    CatalogEntry,
    CatalogSection,
    CatalogSectionView,
    StationCatalog,
)
from mvg_quick_departures.domain.models.transport_type import IconCategory

if TYPE_CHECKING:
    from mvg_quick_departures.application.services.station_search_service import (
        StationSearchService,
    )
    from mvg_quick_departures.domain.ports import PinnedStationStore

logger = logging.getLogger(__name__)

_PIN_ICONS = {PinSlot.HOME: IconCategory.HOME, PinSlot.WORK: IconCategory.WORK}


class StationResolver:
    """Resolves station identifiers against search results and pinned stations."""

    def __init__(
        self,
        pinned_store: PinnedStationStore,
        station_search: StationSearchService,
    ) -> None:
        """Initialize the resolver.

        Args:
            pinned_store: Store holding the home and work stations.
            station_search: Search backing the station dropdown.
        """
        self._pinned_store = pinned_store
        self._station_search = station_search

    @property
    def home_station(self) -> PinnedStation:
        """The pinned home station."""
        return self._pinned_store.get(PinSlot.HOME)

    @property
    def work_station(self) -> PinnedStation:
        """The pinned work station."""
        return self._pinned_store.get(PinSlot.WORK)

    def pinned_stations(self) -> list[tuple[PinSlot, PinnedStation]]:
        """Pinned stations in quick access order (home, then work)."""
        return [(slot, self._pinned_store.get(slot)) for slot in (PinSlot.HOME, PinSlot.WORK)]

    def pin(self, slot: PinSlot, station: Station | PinnedStation) -> PinnedStation:
        """Pin a station to a slot.

        The station is not checked against the live catalog; an invalid
        identifier shows up as a failed departure fetch once it is selected.
        """
        pinned = station.to_pinned() if isinstance(station, Station) else station
        self._pinned_store.set(slot, pinned)
        logger.info(f"Pinned {pinned.name} ({pinned.global_id}) as {slot.value} station")
        return pinned

    def catalog(self) -> StationCatalog:
        """Build the ordered, deduplicated list of selectable stations."""
        show_pinned = not self._station_search.has_active_query
        sections: list[CatalogSectionView] = []
        excluded: set[str] = set()

        if show_pinned:
            quick_access = []
            for slot, pinned in self.pinned_stations():
                if pinned.global_id in excluded:
                    continue
                excluded.add(pinned.global_id)
                quick_access.append(
                    CatalogEntry(
                        global_id=pinned.global_id, title=pinned.name, icon=_PIN_ICONS[slot]
                    )
                )
            if quick_access:
                sections.append(
                    CatalogSectionView(section=CatalogSection.QUICK_ACCESS, entries=quick_access)
                )

        results = []
        for station in self._station_search.results:
            if station.global_id in excluded:
                continue
            excluded.add(station.global_id)
            results.append(
                CatalogEntry(
                    global_id=station.global_id,
                    title=station.name,
                    icon=station_icon_category(station),
                )
            )
        if results:
            section = CatalogSection.ALL_STATIONS if show_pinned else CatalogSection.SEARCH_RESULTS
            sections.append(CatalogSectionView(section=section, entries=results))

        return StationCatalog(sections=sections)

    def resolve(self, global_id: str) -> Station | PinnedStation | None:
        """Look up a station: search results first, then home, then work.

        Returns:
            The station, or None if the identifier is in none of the three.
        """
        for station in self._station_search.results:
            if station.global_id == global_id:
                return station
        for _slot, pinned in self.pinned_stations():
            if pinned.global_id == global_id:
                return pinned
        return None

    def require(self, global_id: str) -> Station | PinnedStation:
        """Like ``resolve``, but raises for identifiers that cannot be resolved.

        Raises:
            StationNotFoundError: If the identifier is in none of the candidates.
        """
        station = self.resolve(global_id)
        if station is None:
            raise StationNotFoundError(global_id)
        return station
