"""Broadcaster for state updates."""

from __future__ import annotations

import logging
from collections import defaultdict

from mvg_quick_departures.domain.contracts.state_broadcaster import (
    StateBroadcasterProtocol,
    StateListener,
)

logger = logging.getLogger(__name__)


class StateBroadcaster(StateBroadcasterProtocol):
    """In-process publish/subscribe hub keyed by topic."""

    def __init__(self) -> None:
        """Initialize with no subscribers."""
        self._listeners: dict[str, list[StateListener]] = defaultdict(list)

    def subscribe(self, topic: str, listener: StateListener) -> None:
        """Register a listener for a topic.

        Args:
            topic: The topic to listen on.
            listener: Called with the topic name on every update.
        """
        if listener not in self._listeners[topic]:
            self._listeners[topic].append(listener)

    def unsubscribe(self, topic: str, listener: StateListener) -> None:
        """Remove a listener from a topic; unknown listeners are ignored."""
        listeners = self._listeners.get(topic)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def subscriber_count(self, topic: str) -> int:
        """Number of listeners on a topic."""
        return len(self._listeners.get(topic, ()))

    def broadcast_update(self, topic: str) -> None:
        """Broadcast an update signal to all subscribers on the topic.

        A failing listener is logged and does not prevent the others from
        being notified.

        Args:
            topic: The topic to broadcast to.
        """
        for listener in list(self._listeners.get(topic, ())):
            try:
                listener(topic)
            except Exception as e:
                logger.error(f"State listener failed on topic {topic}: {e}", exc_info=True)
