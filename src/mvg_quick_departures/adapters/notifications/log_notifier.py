"""Notifier that writes notifications to the log."""

import logging
from collections import deque

from mvg_quick_departures.domain.models.notification import Notification, NotificationSeverity
from mvg_quick_departures.domain.ports.notifier import Notifier

logger = logging.getLogger(__name__)


class LogNotifier(Notifier):
    """Logs notifications and keeps the most recent ones for display."""

    def __init__(self, history_size: int = 20) -> None:
        self.history: deque[Notification] = deque(maxlen=history_size)

    def notify(self, notification: Notification) -> None:
        self.history.append(notification)
        text = notification.title
        if notification.message:
            text = f"{text}: {notification.message}"
        if notification.severity == NotificationSeverity.FAILURE:
            logger.warning(text)
        else:
            logger.info(text)

    @property
    def latest(self) -> Notification | None:
        """The most recent notification, if any."""
        return self.history[-1] if self.history else None
