"""Notification domain model."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class NotificationSeverity(StrEnum):
    """Severity of a user-facing notification."""

    SUCCESS = "success"
    FAILURE = "failure"


class Notification(BaseModel):
    """A fire-and-forget message for the user."""

    model_config = ConfigDict(frozen=True)

    severity: NotificationSeverity
    title: str
    message: str = ""

    @classmethod
    def success(cls, title: str, message: str = "") -> "Notification":
        """Create a success notification."""
        return cls(severity=NotificationSeverity.SUCCESS, title=title, message=message)

    @classmethod
    def failure(cls, title: str, message: str = "") -> "Notification":
        """Create a failure notification."""
        return cls(severity=NotificationSeverity.FAILURE, title=title, message=message)
