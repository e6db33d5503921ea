"""Display adapter port."""

from abc import ABC, abstractmethod

from mvg_quick_departures.domain.models.board_view import BoardView


class DisplayAdapter(ABC):
    """Port for displaying the departure board to users."""

    @abstractmethod
    async def display_board(self, view: BoardView) -> None:
        """Render one board view."""
        ...

    @abstractmethod
    async def start(self) -> None:
        """Start the display adapter."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Stop the display adapter."""
        ...
