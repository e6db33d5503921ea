"""Departure board: wires station selection, polling, grouping and formatting."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from mvg_quick_departures.application.services.station_picker import StationPicker
from mvg_quick_departures.domain.contracts.board_view_provider import BOARD_TOPIC, BoardViewProvider
from mvg_quick_departures.domain.errors import StationNotFoundError
from mvg_quick_departures.domain.models.board_view import BoardView, EmptyView
from mvg_quick_departures.domain.models.feed_status import FeedStatus
from mvg_quick_departures.domain.models.notification import Notification
from mvg_quick_departures.domain.models.station import PinnedStation, PinSlot, Station

if TYPE_CHECKING:
    from mvg_quick_departures.application.services.departure_feed import DepartureFeed
    from mvg_quick_departures.application.services.departure_grouping_service import (
        DepartureGroupingService,
    )
    from mvg_quick_departures.application.services.station_resolver import StationResolver
    from mvg_quick_departures.application.services.station_search_service import (
        StationSearchService,
    )
    from mvg_quick_departures.domain.contracts.departure_formatter import (
        DepartureFormatterProtocol,
    )
    from mvg_quick_departures.domain.contracts.state_broadcaster import StateBroadcasterProtocol
    from mvg_quick_departures.domain.ports import Notifier

logger = logging.getLogger(__name__)


class DepartureBoard(BoardViewProvider):
    """Entry point for user intents and source of the board view model.

    Renderers subscribe to ``BOARD_TOPIC`` on the state broadcaster and call
    ``view()`` when notified.
    """

    def __init__(
        self,
        feed: DepartureFeed,
        resolver: StationResolver,
        station_search: StationSearchService,
        grouping_service: DepartureGroupingService,
        formatter: DepartureFormatterProtocol,
        notifier: Notifier,
        state_broadcaster: StateBroadcasterProtocol,
        picker_search_factory: Callable[[], StationSearchService],
    ) -> None:
        """Initialize the departure board.

        Args:
            feed: Departure feed for the selected station.
            resolver: Resolver for pinned stations and dropdown results.
            station_search: Search backing the station dropdown.
            grouping_service: Groups departures by transport type.
            formatter: Formats groups and departures for display.
            notifier: Receives confirmations of pinned stations.
            state_broadcaster: Broadcaster shared with feed and search.
            picker_search_factory: Creates a fresh search session for a station picker.
        """
        self.feed = feed
        self.resolver = resolver
        self.station_search = station_search
        self.grouping_service = grouping_service
        self.formatter = formatter
        self._notifier = notifier
        self._state_broadcaster = state_broadcaster
        self._picker_search_factory = picker_search_factory
        self.selected_station: PinnedStation | None = None
        self._subscribed_topics: list[str] = []

    def start(self, station_id: str | None = None) -> None:
        """Subscribe to feed and search updates and select the initial station.

        Args:
            station_id: Station to show first; defaults to the home station.
        """
        for topic in (self.feed.topic, self.station_search.topic):
            self._state_broadcaster.subscribe(topic, self._on_update)
            self._subscribed_topics.append(topic)

        if station_id is None:
            self._activate(self.resolver.home_station)
            return
        station = self.resolver.resolve(station_id)
        self._activate(station or PinnedStation(global_id=station_id, name=station_id))

    async def stop(self) -> None:
        """Stop polling, close the search and unsubscribe."""
        await self.feed.stop()
        await self.station_search.close()
        for topic in self._subscribed_topics:
            self._state_broadcaster.unsubscribe(topic, self._on_update)
        self._subscribed_topics.clear()

    def select_station(self, global_id: str) -> bool:
        """Select a station from the dropdown.

        Returns:
            False if the identifier could not be resolved; the selection is ignored.
        """
        try:
            station = self.resolver.require(global_id)
        except StationNotFoundError:
            logger.debug(f"Ignoring selection of unknown station {global_id}")
            return False
        self._activate(station)
        return True

    def search_stations(self, query: str) -> None:
        """Forward a dropdown query edit."""
        self.station_search.update_query(query)

    async def refresh(self) -> None:
        """Refresh departures of the selected station now."""
        await self.feed.refresh()

    def set_home_station(self, station: Station | PinnedStation) -> PinnedStation:
        """Pin a station as home station."""
        return self.set_pinned_station(PinSlot.HOME, station)

    def set_work_station(self, station: Station | PinnedStation) -> PinnedStation:
        """Pin a station as work station."""
        return self.set_pinned_station(PinSlot.WORK, station)

    def set_pinned_station(
        self, slot: PinSlot, station: Station | PinnedStation
    ) -> PinnedStation:
        """Pin a station to a slot and confirm it to the user."""
        pinned = self.resolver.pin(slot, station)
        title = slot.value.capitalize()
        self._notifier.notify(
            Notification.success(
                f"{title} Station Set", f"Set {pinned.name} as your {slot.value} station"
            )
        )
        self._state_broadcaster.broadcast_update(BOARD_TOPIC)
        return pinned

    def open_station_picker(self, slot: PinSlot) -> StationPicker:
        """Open a search session for choosing the home or work station."""
        return StationPicker(slot, self._picker_search_factory(), self.set_pinned_station)

    def view(self) -> BoardView:
        """Build the view model for one redraw."""
        feed = self.feed
        groups = [
            self.formatter.format_group(group)
            for group in self.grouping_service.group(feed.departures)
        ]
        empty_view = None
        if not groups and not feed.is_loading:
            empty_view = EmptyView(
                title="No departures found",
                description="No upcoming departures available at this station",
            )
        error = None
        if feed.status == FeedStatus.FAILED and feed.last_error is not None:
            error = feed.last_error.message
        selected = self.selected_station
        return BoardView(
            station_id=selected.global_id if selected else None,
            station_name=selected.name if selected else None,
            is_loading=feed.is_loading,
            status=feed.status,
            groups=groups,
            catalog=self.resolver.catalog(),
            empty_view=empty_view,
            error=error,
        )

    def _activate(self, station: Station | PinnedStation) -> None:
        pinned = station.to_pinned() if isinstance(station, Station) else station
        self.selected_station = pinned
        self.feed.select_station(pinned.global_id)
        self._state_broadcaster.broadcast_update(BOARD_TOPIC)

    def _on_update(self, topic: str) -> None:
        logger.debug(f"Board update triggered by {topic}")
        self._state_broadcaster.broadcast_update(BOARD_TOPIC)
