"""Tests for the log notifier."""

import logging

import pytest

from mvg_quick_departures.adapters.notifications import LogNotifier
from mvg_quick_departures.domain.models import Notification


def test_failure_is_logged_as_warning(caplog: pytest.LogCaptureFixture) -> None:
    """Given a failure, when notifying, then it is logged at WARNING with its message."""
    notifier = LogNotifier()

    with caplog.at_level(logging.INFO, logger="mvg_quick_departures"):
        notifier.notify(Notification.failure("Failed to load departures", "HTTP 500"))

    assert caplog.records[-1].levelno == logging.WARNING
    assert caplog.records[-1].getMessage() == "Failed to load departures: HTTP 500"


def test_success_is_logged_as_info(caplog: pytest.LogCaptureFixture) -> None:
    """Given a success, when notifying, then it is logged at INFO."""
    notifier = LogNotifier()

    with caplog.at_level(logging.INFO, logger="mvg_quick_departures"):
        notifier.notify(Notification.success("Home Station Set"))

    assert caplog.records[-1].levelno == logging.INFO
    assert caplog.records[-1].getMessage() == "Home Station Set"


def test_history_is_bounded() -> None:
    """Given more notifications than the history size, then only the latest are kept."""
    notifier = LogNotifier(history_size=2)
    assert notifier.latest is None

    for i in range(3):
        notifier.notify(Notification.success(f"Notification {i}"))

    assert [n.title for n in notifier.history] == ["Notification 1", "Notification 2"]
    assert notifier.latest.title == "Notification 2"
