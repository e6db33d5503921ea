"""Command line interface for searching stations, pinning and showing departures."""

import argparse
import asyncio
import json
import logging
import re
import sys
from typing import Any

import aiohttp

from mvg_quick_departures.adapters.config import AppConfig
from mvg_quick_departures.adapters.storage import JsonPinnedStationStore
from mvg_quick_departures.adapters.terminal import render_board, render_picker
from mvg_quick_departures.application.services import (
    DepartureFormatter,
    DepartureGroupingService,
    StationSearchService,
)
from mvg_quick_departures.application.services.departure_feed import DEFAULT_TRANSPORT_TYPES
from mvg_quick_departures.domain.errors import TransitApiError
from mvg_quick_departures.domain.models import (
    BoardView,
    CatalogEntry,
    CatalogSection,
    CatalogSectionView,
    EmptyView,
    FeedStatus,
    IconCategory,
    PinnedStation,
    PinSlot,
    Station,
    StationCatalog,
)
from mvg_quick_departures.main import configure_logging, create_board, run_board

logger = logging.getLogger(__name__)

_GLOBAL_ID_PATTERN = re.compile(r"^[a-z]{2}:\d+:\d+$")


def _station_to_dict(station: Station) -> dict[str, Any]:
    return {
        "globalId": station.global_id,
        "name": station.name,
        "place": station.place,
        "type": station.type,
        "transportTypes": sorted(station.transport_types),
    }


async def search_stations(
    config: AppConfig, query: str, stations_only: bool = False
) -> list[Station]:
    """Search locations the way the station dropdown or the picker does."""
    async with aiohttp.ClientSession() as session:
        components = create_board(config, session)
        factory = (
            StationSearchService.for_station_dropdown
            if stations_only
            else StationSearchService.for_search_panel
        )
        search = factory(
            components.station_repository,
            components.notifier,
            debounce_seconds=0,
            limit=config.station_dropdown_limit if stations_only else config.search_panel_limit,
        )
        try:
            return await search.search(query)
        finally:
            await search.close()


async def show_departures(config: AppConfig, station_id: str | None = None) -> BoardView:
    """Fetch departures once and build the board view for them.

    Raises:
        TransitApiError: If the departures could not be loaded.
    """
    async with aiohttp.ClientSession() as session:
        components = create_board(config, session)
        home = components.pinned_store.get(PinSlot.HOME)
        station_id = station_id or home.global_id
        station_name = home.name if station_id == home.global_id else station_id

        departures = await components.departure_repository.get_departures(
            station_id,
            limit=config.departures_limit,
            offset_minutes=config.departures_offset_minutes,
            transport_types=config.transport_types or list(DEFAULT_TRANSPORT_TYPES),
        )
        formatter = DepartureFormatter(timezone=config.timezone)
        groups = [formatter.format_group(g) for g in DepartureGroupingService().group(departures)]
        empty_view = None
        if not groups:
            empty_view = EmptyView(
                title="No departures found",
                description="No upcoming departures available at this station",
            )
        return BoardView(
            station_id=station_id,
            station_name=station_name,
            is_loading=False,
            status=FeedStatus.READY,
            groups=groups,
            catalog=StationCatalog(sections=[]),
            empty_view=empty_view,
        )


async def pin_station(
    config: AppConfig,
    slot: PinSlot,
    query_or_id: str,
    index: int = 0,
    name: str | None = None,
) -> bool:
    """Pin a station given by global id, or the search result at ``index``."""
    async with aiohttp.ClientSession() as session:
        components = create_board(config, session)
        if _GLOBAL_ID_PATTERN.match(query_or_id):
            pinned = components.board.set_pinned_station(
                slot, PinnedStation(global_id=query_or_id, name=name or query_or_id)
            )
            print(f"Set {pinned.name} ({pinned.global_id}) as your {slot.value} station")
            return True

        query = query_or_id
        picker = components.board.open_station_picker(slot)
        try:
            results = await picker.search(query)
            print(render_picker(picker.view()))
            if not 0 <= index < len(results):
                print(f"No result at index {index} for '{query}'", file=sys.stderr)
                return False
            pinned = await picker.choose(results[index])
        finally:
            await picker.close()
        print(f"\nSet {pinned.name} ({pinned.global_id}) as your {slot.value} station")
        return True


def show_pins(config: AppConfig) -> StationCatalog:
    """Quick access stations as they appear in the dropdown."""
    store = JsonPinnedStationStore(config.pinned_stations_path)
    home = store.get(PinSlot.HOME)
    work = store.get(PinSlot.WORK)
    return StationCatalog(
        sections=[
            CatalogSectionView(
                section=CatalogSection.QUICK_ACCESS,
                entries=[
                    CatalogEntry(global_id=home.global_id, title=home.name, icon=IconCategory.HOME),
                    CatalogEntry(global_id=work.global_id, title=work.name, icon=IconCategory.WORK),
                ],
            )
        ]
    )


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="MVG Quick Departures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search for stations
  mvg-quick-departures search "Giesing"

  # Show departures of the home station, or of a station by ID
  mvg-quick-departures show
  mvg-quick-departures show de:09162:1110

  # Watch a live, auto-refreshing board
  mvg-quick-departures watch

  # Pin the first search result as work station
  mvg-quick-departures pin work "Hauptbahnhof"
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search for stations")
    search_parser.add_argument("query", help="Station name to search for")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")
    search_parser.add_argument(
        "--stations-only", action="store_true", help="Only return stations, no POIs"
    )

    show_parser = subparsers.add_parser("show", help="Show departures once")
    show_parser.add_argument("station_id", nargs="?", help="Station ID (default: home station)")
    show_parser.add_argument("--json", action="store_true", help="Output as JSON")

    watch_parser = subparsers.add_parser("watch", help="Show an auto-refreshing board")
    watch_parser.add_argument("station_id", nargs="?", help="Station ID (default: home station)")

    pin_parser = subparsers.add_parser("pin", help="Set the home or work station")
    pin_parser.add_argument("slot", choices=[s.value for s in PinSlot], help="Slot to set")
    pin_parser.add_argument("query_or_id", help="Station name to search for, or a station ID")
    pin_parser.add_argument(
        "--index", type=int, default=0, help="Which search result to pin (default: 0)"
    )
    pin_parser.add_argument("--name", help="Display name when pinning by station ID")

    subparsers.add_parser("pins", help="Show home and work stations")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = AppConfig()
    configure_logging("DEBUG" if args.verbose else "WARNING")

    try:
        if args.command == "search":
            results = await search_stations(config, args.query, args.stations_only)
            if args.json:
                payload = [_station_to_dict(s) for s in results]
                print(json.dumps(payload, indent=2, ensure_ascii=False))
            else:
                if not results:
                    print(f"No stations found for '{args.query}'", file=sys.stderr)
                    return 1
                print(f"\nFound {len(results)} location(s):\n")
                for station in results:
                    print(f"  {station.name} ({station.place or 'Unknown'}) [{station.type}]")
                    print(f"    ID: {station.global_id}")
                    print()

        elif args.command == "show":
            view = await show_departures(config, args.station_id)
            if args.json:
                print(json.dumps(view.model_dump(mode="json"), indent=2, ensure_ascii=False))
            else:
                print(render_board(view))

        elif args.command == "watch":
            await run_board(config, args.station_id)

        elif args.command == "pin":
            if not await pin_station(
                config, PinSlot(args.slot), args.query_or_id, args.index, args.name
            ):
                return 1

        elif args.command == "pins":
            catalog = show_pins(config)
            for entry in catalog.entries:
                print(f"{entry.icon.value:>5}: {entry.title} ({entry.global_id})")

    except TransitApiError as e:
        logger.debug(f"Command {args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
