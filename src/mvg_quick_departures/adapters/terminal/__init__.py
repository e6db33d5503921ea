"""Terminal rendering adapters."""

from mvg_quick_departures.adapters.terminal.terminal_display_adapter import (
    TerminalDisplayAdapter,
    render_board,
    render_catalog,
    render_picker,
)

__all__ = ["TerminalDisplayAdapter", "render_board", "render_catalog", "render_picker"]
