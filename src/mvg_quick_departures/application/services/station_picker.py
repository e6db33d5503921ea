"""Home/work station picker."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from mvg_quick_departures.application.services.departure_formatter import station_icon_category
from mvg_quick_departures.domain.models.board_view import EmptyView, PickerEntry, StationPickerView
from mvg_quick_departures.domain.models.station import PinnedStation, PinSlot, Station

if TYPE_CHECKING:
    from mvg_quick_departures.application.services.station_search_service import (
        StationSearchService,
    )

logger = logging.getLogger(__name__)

StationSelectedCallback = Callable[[PinSlot, PinnedStation], object]


class StationPicker:
    """A search session for choosing the home or work station."""

    def __init__(
        self,
        slot: PinSlot,
        station_search: StationSearchService,
        on_station_selected: StationSelectedCallback,
    ) -> None:
        """Initialize the picker.

        Args:
            slot: The slot being chosen.
            station_search: Search panel session owned by this picker.
            on_station_selected: Called with the slot and the chosen station.
        """
        self.slot = slot
        self.station_search = station_search
        self._on_station_selected = on_station_selected
        self.chosen: PinnedStation | None = None

    @property
    def slot_title(self) -> str:
        return self.slot.value.capitalize()

    def update_query(self, query: str) -> None:
        """Forward a query edit to the debounced search."""
        self.station_search.update_query(query)

    async def search(self, query: str) -> list[Station]:
        """Search and wait for the results."""
        return await self.station_search.search(query)

    async def choose(self, station: Station) -> PinnedStation:
        """Hand the chosen station to the callback and close the picker."""
        pinned = station.to_pinned()
        self.chosen = pinned
        self._on_station_selected(self.slot, pinned)
        await self.close()
        return pinned

    async def close(self) -> None:
        """Tear down the search; pending timers and requests are cancelled."""
        await self.station_search.close()
        logger.debug(f"Closed {self.slot.value} station picker")

    def view(self) -> StationPickerView:
        """Build the picker list."""
        search = self.station_search
        entries = [
            PickerEntry(
                global_id=station.global_id,
                title=station.name,
                subtitle=station.place,
                icon=station_icon_category(station),
                action_title=f"Set as {self.slot_title} Station",
            )
            for station in search.results
        ]
        empty_view = None
        if search.has_active_query and not entries and not search.is_loading:
            empty_view = EmptyView(
                title="No stations found",
                description="Try searching with a different term",
            )
        return StationPickerView(
            placeholder=f"Search for {self.slot.value} station...",
            query=search.query,
            is_loading=search.is_loading,
            entries=entries,
            empty_view=empty_view,
        )
