"""Polling departure feed for the active station."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from mvg_quick_departures.domain.models.departure_snapshot import DepartureSnapshot
from mvg_quick_departures.domain.models.error_details import ErrorDetails
from mvg_quick_departures.domain.models.feed_status import FeedStatus
from mvg_quick_departures.domain.models.notification import Notification
from mvg_quick_departures.domain.models.transport_type import TransportType

if TYPE_CHECKING:
    from mvg_quick_departures.domain.contracts.state_broadcaster import StateBroadcasterProtocol
    from mvg_quick_departures.domain.models.departure import Departure
    from mvg_quick_departures.domain.ports import DepartureRepository, Notifier

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL_SECONDS = 30.0
DEFAULT_LIMIT = 20
DEFAULT_OFFSET_MINUTES = 5
DEFAULT_TRANSPORT_TYPES = (
    TransportType.UBAHN,
    TransportType.SBAHN,
    TransportType.BUS,
    TransportType.TRAM,
)


class DepartureFeed:
    """Polls departures for the selected station and publishes snapshots.

    Each selection starts a new generation. A fetch only writes its result
    if its generation is still current, so a late response for a station the
    user has navigated away from is dropped.
    """

    def __init__(
        self,
        departure_repository: DepartureRepository,
        notifier: Notifier,
        state_broadcaster: StateBroadcasterProtocol | None = None,
        topic: str = "departures",
        refresh_interval_seconds: float = DEFAULT_REFRESH_INTERVAL_SECONDS,
        limit: int = DEFAULT_LIMIT,
        offset_minutes: int = DEFAULT_OFFSET_MINUTES,
        transport_types: list[str] | None = None,
    ) -> None:
        """Initialize the departure feed.

        Args:
            departure_repository: Repository used to fetch departures.
            notifier: Receives one failure notification per failed poll.
            state_broadcaster: Optional broadcaster notified on every state change.
            topic: Topic used for broadcasts.
            refresh_interval_seconds: Time between polls.
            limit: Number of departures requested per poll.
            offset_minutes: Forward offset sent with every request.
            transport_types: Transport types requested.
        """
        self._departure_repository = departure_repository
        self._notifier = notifier
        self._state_broadcaster = state_broadcaster
        self.topic = topic
        self.refresh_interval_seconds = refresh_interval_seconds
        self.limit = limit
        self.offset_minutes = offset_minutes
        self.transport_types = [
            str(t) for t in (transport_types or DEFAULT_TRANSPORT_TYPES)
        ]

        self.station_id: str | None = None
        self.status = FeedStatus.IDLE
        self.snapshot: DepartureSnapshot | None = None
        self.last_error: ErrorDetails | None = None
        self.last_update: datetime | None = None
        self._generation = 0
        self._task: asyncio.Task | None = None

    @property
    def is_loading(self) -> bool:
        """Whether a fetch for the active station is outstanding."""
        return self.status == FeedStatus.LOADING

    @property
    def departures(self) -> tuple[Departure, ...]:
        """Departures of the current snapshot, empty if there is none."""
        return self.snapshot.departures if self.snapshot is not None else ()

    def select_station(self, station_id: str) -> None:
        """Make a station active and restart the poll cycle for it."""
        self._cancel_poll_loop()
        self._generation += 1
        self.station_id = station_id
        self.snapshot = DepartureSnapshot.empty(station_id)
        self.last_error = None
        self.status = FeedStatus.LOADING
        logger.info(f"Selected station {station_id}")
        self._task = asyncio.create_task(self._poll_loop(self._generation, station_id))

    async def refresh(self) -> None:
        """Fetch departures for the active station now, without moving the poll phase."""
        if self.station_id is None:
            logger.debug("Refresh requested without an active station")
            return
        await self._poll_once(self._generation, self.station_id)

    async def stop(self) -> None:
        """Stop polling and cancel any fetch in flight."""
        self._generation += 1
        self.station_id = None
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                logger.info("Stopped departure feed")
        if self.status == FeedStatus.LOADING:
            self.status = FeedStatus.IDLE

    def _cancel_poll_loop(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _poll_loop(self, generation: int, station_id: str) -> None:
        try:
            while True:
                await self._poll_once(generation, station_id)
                await asyncio.sleep(self.refresh_interval_seconds)
        except asyncio.CancelledError:
            logger.debug(f"Poll loop for {station_id} cancelled")
            raise

    async def _poll_once(self, generation: int, station_id: str) -> None:
        self.status = FeedStatus.LOADING
        self._broadcast()

        try:
            departures = await self._departure_repository.get_departures(
                station_id,
                limit=self.limit,
                offset_minutes=self.offset_minutes,
                transport_types=list(self.transport_types),
            )
        except Exception as e:
            self._fail(generation, station_id, e)
            return

        if generation != self._generation:
            logger.debug(f"Discarding departures for {station_id}: station changed meanwhile")
            return

        self.snapshot = DepartureSnapshot(
            station_id=station_id,
            departures=tuple(departures),
            fetched_at=datetime.now(UTC),
        )
        self.last_update = self.snapshot.fetched_at
        self.last_error = None
        self.status = FeedStatus.READY
        logger.debug(f"Loaded {len(departures)} departures for {station_id}")
        self._broadcast()

    def _fail(self, generation: int, station_id: str, error: Exception) -> None:
        if generation != self._generation:
            logger.debug(f"Discarding failure for {station_id}: station changed meanwhile")
            return

        error_details = ErrorDetails.from_exception(error)
        logger.error(
            f"Failed to load departures for {station_id}: "
            f"{error_details.reason} (status: {error_details.status_code}, error: {error})"
        )
        self.snapshot = DepartureSnapshot.empty(station_id)
        self.last_error = error_details
        self.status = FeedStatus.FAILED
        self._notifier.notify(
            Notification.failure("Failed to load departures", error_details.message)
        )
        self._broadcast()

    def _broadcast(self) -> None:
        if self._state_broadcaster is not None:
            self._state_broadcaster.broadcast_update(self.topic)
