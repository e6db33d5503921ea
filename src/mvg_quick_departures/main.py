"""Main entry point for the live departure board."""

import asyncio
import logging
import sys
from dataclasses import dataclass

import aiohttp

from mvg_quick_departures.adapters.broadcasters import StateBroadcaster
from mvg_quick_departures.adapters.config import AppConfig
from mvg_quick_departures.adapters.mvg_api import (
    MvgDepartureRepository,
    MvgHttpClient,
    MvgStationRepository,
)
from mvg_quick_departures.adapters.notifications import LogNotifier
from mvg_quick_departures.adapters.storage import JsonPinnedStationStore
from mvg_quick_departures.adapters.terminal import TerminalDisplayAdapter
from mvg_quick_departures.application.services import (
    DepartureBoard,
    DepartureFeed,
    DepartureFormatter,
    DepartureGroupingService,
    StationResolver,
    StationSearchService,
)
from mvg_quick_departures.domain.ports import Notifier, PinnedStationStore

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


@dataclass
class BoardComponents:
    """The wired object graph of one board."""

    board: DepartureBoard
    broadcaster: StateBroadcaster
    notifier: Notifier
    pinned_store: PinnedStationStore
    station_repository: MvgStationRepository
    departure_repository: MvgDepartureRepository


def create_board(
    config: AppConfig,
    session: aiohttp.ClientSession,
    notifier: Notifier | None = None,
    pinned_store: PinnedStationStore | None = None,
) -> BoardComponents:
    """Wire repositories, services and the board for a shared aiohttp session."""
    http_client = MvgHttpClient(
        session, base_url=config.mvg_api_base_url, timeout_seconds=config.mvg_api_timeout
    )
    departure_repo = MvgDepartureRepository(http_client)
    station_repo = MvgStationRepository(http_client)
    notifier = notifier or LogNotifier()
    pinned_store = pinned_store or JsonPinnedStationStore(config.pinned_stations_path)
    broadcaster = StateBroadcaster()

    dropdown_search = StationSearchService.for_station_dropdown(
        station_repo,
        notifier,
        broadcaster,
        debounce_seconds=config.search_debounce_seconds,
        limit=config.station_dropdown_limit,
    )

    def picker_search_factory() -> StationSearchService:
        return StationSearchService.for_search_panel(
            station_repo,
            notifier,
            broadcaster,
            debounce_seconds=config.search_debounce_seconds,
            limit=config.search_panel_limit,
        )

    feed = DepartureFeed(
        departure_repo,
        notifier,
        broadcaster,
        refresh_interval_seconds=config.refresh_interval_seconds,
        limit=config.departures_limit,
        offset_minutes=config.departures_offset_minutes,
        transport_types=config.transport_types,
    )
    board = DepartureBoard(
        feed=feed,
        resolver=StationResolver(pinned_store, dropdown_search),
        station_search=dropdown_search,
        grouping_service=DepartureGroupingService(),
        formatter=DepartureFormatter(timezone=config.timezone),
        notifier=notifier,
        state_broadcaster=broadcaster,
        picker_search_factory=picker_search_factory,
    )
    return BoardComponents(
        board=board,
        broadcaster=broadcaster,
        notifier=notifier,
        pinned_store=pinned_store,
        station_repository=station_repo,
        departure_repository=departure_repo,
    )


async def run_board(config: AppConfig, station_id: str | None = None) -> None:
    """Run the live board until interrupted."""
    async with aiohttp.ClientSession() as session:
        components = create_board(config, session)
        display_adapter = TerminalDisplayAdapter(components.board, components.broadcaster)

        await display_adapter.start()
        components.board.start(station_id)
        try:
            await asyncio.Event().wait()
        finally:
            logger.info("Shutting down...")
            await components.board.stop()
            await display_adapter.stop()


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level)
    await run_board(config)


def cli_main() -> None:
    """Synchronous entry point for the board command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")


if __name__ == "__main__":
    cli_main()
