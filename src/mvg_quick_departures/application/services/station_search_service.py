"""Debounced station search."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from mvg_quick_departures.domain.errors import TransitApiError
from mvg_quick_departures.domain.models.notification import Notification
from mvg_quick_departures.domain.models.transport_type import StationType

if TYPE_CHECKING:
    from mvg_quick_departures.domain.contracts.state_broadcaster import StateBroadcasterProtocol
    from mvg_quick_departures.domain.models.station import Station
    from mvg_quick_departures.domain.ports import Notifier, StationRepository

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.3
SEARCH_PANEL_LIMIT = 10
STATION_DROPDOWN_LIMIT = 20


class StationSearchService:
    """Turns a stream of query edits into ranked station results.

    Every query edit bumps a generation counter. Non-blank queries wait for a
    quiet period before hitting the network; an edit during that period
    cancels the wait. Once a request is in flight it runs to completion, but
    its result is only applied if no newer query was issued meanwhile.
    """

    def __init__(
        self,
        station_repository: StationRepository,
        notifier: Notifier,
        state_broadcaster: StateBroadcasterProtocol | None = None,
        topic: str = "station-search",
        limit: int = SEARCH_PANEL_LIMIT,
        station_types: frozenset[str] | None = None,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        """Initialize the search service.

        Args:
            station_repository: Repository used for the remote search.
            notifier: Receives one failure notification per failed search.
            state_broadcaster: Optional broadcaster notified on every state change.
            topic: Topic used for broadcasts.
            limit: Maximum number of results kept.
            station_types: Location types to keep, or None to keep all.
            debounce_seconds: Quiet period before a query is sent.
        """
        self._station_repository = station_repository
        self._notifier = notifier
        self._state_broadcaster = state_broadcaster
        self.topic = topic
        self.limit = limit
        self.station_types = station_types
        self.debounce_seconds = debounce_seconds

        self.query = ""
        self.results: list[Station] = []
        self.is_loading = False
        self._generation = 0
        self._debounce_task: asyncio.Task | None = None
        self._tasks: set[asyncio.Task] = set()
        self._closed = False

    @classmethod
    def for_search_panel(
        cls,
        station_repository: StationRepository,
        notifier: Notifier,
        state_broadcaster: StateBroadcasterProtocol | None = None,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        limit: int = SEARCH_PANEL_LIMIT,
    ) -> StationSearchService:
        """Search used when picking a home or work station: all location types."""
        return cls(
            station_repository,
            notifier,
            state_broadcaster,
            topic="station-picker",
            limit=limit,
            station_types=None,
            debounce_seconds=debounce_seconds,
        )

    @classmethod
    def for_station_dropdown(
        cls,
        station_repository: StationRepository,
        notifier: Notifier,
        state_broadcaster: StateBroadcasterProtocol | None = None,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        limit: int = STATION_DROPDOWN_LIMIT,
    ) -> StationSearchService:
        """Search backing the station dropdown: stations only."""
        return cls(
            station_repository,
            notifier,
            state_broadcaster,
            topic="station-dropdown",
            limit=limit,
            station_types=frozenset({StationType.STATION}),
            debounce_seconds=debounce_seconds,
        )

    @property
    def has_active_query(self) -> bool:
        """Whether the current query is non-blank."""
        return bool(self.query.strip())

    def update_query(self, query: str) -> None:
        """Record a query edit and schedule the debounced search."""
        if self._closed:
            logger.debug("Ignoring query on closed station search")
            return

        self._generation += 1
        generation = self._generation
        self.query = query
        self._cancel_debounce()

        if not query.strip():
            self._apply(generation, [])
            return

        task = asyncio.create_task(self._debounced_search(generation, query))
        self._debounce_task = task
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def search(self, query: str) -> list[Station]:
        """Issue a query and wait until all outstanding searches have settled.

        Returns:
            The applied results, i.e. those of the most recent query.
        """
        self.update_query(query)
        await self.wait_idle()
        return list(self.results)

    async def wait_idle(self) -> None:
        """Wait until no debounce timer or request is outstanding."""
        while self._tasks:
            await asyncio.wait(set(self._tasks))

    async def close(self) -> None:
        """Cancel pending and in-flight searches; no updates fire afterwards."""
        self._closed = True
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._debounce_task = None
        self.is_loading = False
        logger.debug(f"Closed station search '{self.topic}'")

    def _cancel_debounce(self) -> None:
        if self._debounce_task is not None and not self._debounce_task.done():
            self._debounce_task.cancel()
        self._debounce_task = None

    async def _debounced_search(self, generation: int, query: str) -> None:
        await asyncio.sleep(self.debounce_seconds)
        # Past the quiet period the request is in flight and no longer cancelled by edits
        if self._debounce_task is asyncio.current_task():
            self._debounce_task = None

        self.is_loading = True
        self._broadcast()
        results: list[Station] = []
        try:
            results = await self._fetch(generation, query)
        finally:
            self._apply(generation, results)

    async def _fetch(self, generation: int, query: str) -> list[Station]:
        try:
            stations = await self._station_repository.search_locations(query)
        except Exception as e:
            if generation != self._generation or self._closed:
                logger.debug(f"Dropping error of superseded search '{query}': {e!r}")
                return []
            if isinstance(e, TransitApiError):
                logger.warning(f"Station search for '{query}' failed: {e}")
            else:
                logger.exception(f"Unexpected error searching stations for '{query}'")
            message = str(e) or "Unknown error occurred"
            self._notifier.notify(Notification.failure("Failed to search stations", message))
            return []

        if self.station_types is not None:
            stations = [s for s in stations if s.type in self.station_types]
        return stations[: self.limit]

    def _apply(self, generation: int, results: list[Station]) -> None:
        if self._closed:
            return
        if generation != self._generation:
            logger.debug(f"Discarding results of superseded search generation {generation}")
            return
        self.results = results
        self.is_loading = False
        logger.debug(f"Search '{self.query}' yielded {len(results)} result(s)")
        self._broadcast()

    def _broadcast(self) -> None:
        if self._state_broadcaster is not None and not self._closed:
            self._state_broadcaster.broadcast_update(self.topic)
