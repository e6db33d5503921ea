"""Plain-text terminal renderer for the departure board."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TYPE_CHECKING, TextIO

from mvg_quick_departures.domain.contracts.board_view_provider import BOARD_TOPIC
from mvg_quick_departures.domain.models.departure import DepartureStatus
from mvg_quick_departures.domain.models.transport_type import IconCategory
from mvg_quick_departures.domain.ports.display_adapter import DisplayAdapter

if TYPE_CHECKING:
    from mvg_quick_departures.domain.contracts.board_view_provider import BoardViewProvider
    from mvg_quick_departures.domain.contracts.state_broadcaster import StateBroadcasterProtocol
    from mvg_quick_departures.domain.models.board_view import (
        BoardView,
        DepartureView,
        StationPickerView,
    )
    from mvg_quick_departures.domain.models.station_catalog import StationCatalog

logger = logging.getLogger(__name__)

_CLEAR_SCREEN = "\033[2J\033[H"

_ICONS = {
    IconCategory.RAIL: "🚆",
    IconCategory.ROAD: "🚌",
    IconCategory.HOME: "🏠",
    IconCategory.WORK: "🏢",
}

_STATUS_MARKERS = {
    DepartureStatus.CANCELLED: "✖",
    DepartureStatus.DELAYED: "!",
    DepartureStatus.ON_TIME: " ",
}


def render_departure(view: DepartureView) -> str:
    """Render one departure row with its accessories."""
    marker = _STATUS_MARKERS[view.status]
    return (
        f"  {marker} {_ICONS[view.icon]} {view.title}\n"
        f"      {view.subtitle}   👤 {view.occupancy}   🕒 {view.eta}"
    )


def render_catalog(catalog: StationCatalog) -> str:
    """Render the station dropdown sections."""
    lines = []
    for section in catalog.sections:
        lines.append(f"[{section.title}]")
        for entry in section.entries:
            lines.append(f"  {_ICONS[entry.icon]} {entry.title}  ({entry.global_id})")
    return "\n".join(lines)


def render_board(view: BoardView) -> str:
    """Render a full board view as text."""
    header = view.station_name or "No station selected"
    if view.is_loading:
        header += "  (loading…)"
    lines = [header, "=" * len(header)]

    if view.error:
        lines.append(f"⚠ {view.error}")

    if view.empty_view is not None:
        lines.append(view.empty_view.title)
        lines.append(view.empty_view.description)
    for group in view.groups:
        lines.append("")
        lines.append(f"{group.title} · {group.subtitle}")
        lines.extend(render_departure(d) for d in group.departures)

    catalog = render_catalog(view.catalog)
    if catalog:
        lines.append("")
        lines.append(catalog)
    return "\n".join(lines)


def render_picker(view: StationPickerView) -> str:
    """Render the home/work station picker."""
    lines = [view.placeholder if not view.query else f"Search: {view.query}"]
    for index, entry in enumerate(view.entries):
        place = f", {entry.subtitle}" if entry.subtitle else ""
        icon = _ICONS[entry.icon]
        lines.append(f"  {index:>2}. {icon} {entry.title}{place}  ({entry.global_id})")
    if view.empty_view is not None:
        lines.append(view.empty_view.title)
        lines.append(view.empty_view.description)
    return "\n".join(lines)


class TerminalDisplayAdapter(DisplayAdapter):
    """Redraws the board on a text stream whenever the board changes."""

    def __init__(
        self,
        board: BoardViewProvider,
        state_broadcaster: StateBroadcasterProtocol,
        stream: TextIO | None = None,
        clear_screen: bool = True,
    ) -> None:
        """Initialize the terminal display.

        Args:
            board: Source of board views.
            state_broadcaster: Broadcaster carrying board updates.
            stream: Output stream, stdout by default.
            clear_screen: Clear the terminal before each redraw.
        """
        self.board = board
        self._state_broadcaster = state_broadcaster
        self.stream = stream or sys.stdout
        self.clear_screen = clear_screen
        self._dirty = asyncio.Event()
        self._task: asyncio.Task | None = None

    async def display_board(self, view: BoardView) -> None:
        """Write one board view to the stream."""
        if self.clear_screen:
            self.stream.write(_CLEAR_SCREEN)
        self.stream.write(render_board(view) + "\n")
        self.stream.flush()

    async def start(self) -> None:
        """Subscribe to board updates and start the redraw loop."""
        if self._task is not None and not self._task.done():
            logger.warning("Terminal display already running")
            return
        self._state_broadcaster.subscribe(BOARD_TOPIC, self._on_board_update)
        self._dirty.set()
        self._task = asyncio.create_task(self._render_loop())
        logger.info("Started terminal display")

    async def stop(self) -> None:
        """Unsubscribe and stop the redraw loop."""
        self._state_broadcaster.unsubscribe(BOARD_TOPIC, self._on_board_update)
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Stopped terminal display")

    def _on_board_update(self, topic: str) -> None:  # noqa: ARG002
        self._dirty.set()

    async def _render_loop(self) -> None:
        while True:
            await self._dirty.wait()
            # Coalesce bursts of updates into a single redraw
            self._dirty.clear()
            try:
                await self.display_board(self.board.view())
            except Exception as e:
                logger.error(f"Failed to redraw board: {e}", exc_info=True)
