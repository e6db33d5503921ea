"""Protocol for broadcasting state updates."""

from collections.abc import Callable
from typing import Protocol

StateListener = Callable[[str], None]


class StateBroadcasterProtocol(Protocol):
    """Protocol for publishing state-changed signals to subscribers."""

    def subscribe(self, topic: str, listener: StateListener) -> None:
        """Register a listener for a topic.

        Args:
            topic: The topic to listen on.
            listener: Called with the topic name on every update.
        """
        ...

    def unsubscribe(self, topic: str, listener: StateListener) -> None:
        """Remove a listener from a topic."""
        ...

    def broadcast_update(self, topic: str) -> None:
        """Broadcast an update signal to all subscribers on the topic.

        Args:
            topic: The topic to broadcast to.
        """
        ...
