"""Error details domain model."""

from pydantic import BaseModel, ConfigDict

from mvg_quick_departures.domain.errors import HttpError, NetworkError, ParseError


def _reason_for_status(status_code: int) -> str:
    if status_code == 429:
        return "Rate limit exceeded"
    if status_code == 502:
        return "Bad gateway (server error)"
    if status_code == 503:
        return "Service unavailable"
    if status_code == 504:
        return "Gateway timeout"
    return f"HTTP {status_code}"


class ErrorDetails(BaseModel):
    """Details about an error, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    kind: str
    status_code: int | None = None
    reason: str
    message: str = ""

    @classmethod
    def from_exception(cls, error: Exception) -> "ErrorDetails":
        """Classify an exception raised by a remote call."""
        message = str(error) or error.__class__.__name__
        if isinstance(error, HttpError):
            return cls(
                kind="http",
                status_code=error.status_code,
                reason=_reason_for_status(error.status_code),
                message=message,
            )
        if isinstance(error, NetworkError):
            return cls(kind="network", reason="Network error", message=message)
        if isinstance(error, ParseError):
            return cls(kind="parse", reason="Malformed response", message=message)
        return cls(kind="unknown", reason="Unknown error", message=message)
