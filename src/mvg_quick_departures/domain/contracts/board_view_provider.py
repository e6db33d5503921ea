"""Protocol for sources of the departure board view."""

from typing import Protocol

from mvg_quick_departures.domain.models.board_view import BoardView

BOARD_TOPIC = "board"


class BoardViewProvider(Protocol):
    """Builds the board view model; changes are announced on ``BOARD_TOPIC``."""

    def view(self) -> BoardView:
        """Build the view model for one redraw."""
        ...
