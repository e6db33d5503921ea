"""Contracts (protocols) between application services and their collaborators."""

from mvg_quick_departures.domain.contracts.board_view_provider import (
    BOARD_TOPIC,
    BoardViewProvider,
)
from mvg_quick_departures.domain.contracts.departure_formatter import DepartureFormatterProtocol
from mvg_quick_departures.domain.contracts.state_broadcaster import (
    StateBroadcasterProtocol,
    StateListener,
)

__all__ = [
    "BOARD_TOPIC",
    "BoardViewProvider",
    "DepartureFormatterProtocol",
    "StateBroadcasterProtocol",
    "StateListener",
]
