"""Notification adapters."""

from mvg_quick_departures.adapters.notifications.log_notifier import LogNotifier

__all__ = ["LogNotifier"]
