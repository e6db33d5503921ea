"""Departure feed status."""

from enum import StrEnum


class FeedStatus(StrEnum):
    """Lifecycle of the departure feed for the active station."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"
