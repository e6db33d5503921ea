"""Notifier port."""

from typing import Protocol

from mvg_quick_departures.domain.models.notification import Notification


class Notifier(Protocol):
    """Port for user-facing notifications (toasts)."""

    def notify(self, notification: Notification) -> None:
        """Show a notification. Fire-and-forget."""
        ...
