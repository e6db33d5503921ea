"""Domain errors for remote transit data access."""


class TransitApiError(Exception):
    """Base class for failures talking to the transit data service."""


class NetworkError(TransitApiError):
    """Raised when the request could not be completed (connection, timeout)."""


class HttpError(TransitApiError):
    """Raised when the service answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP {status_code}: {reason}" if reason else f"HTTP {status_code}")


class ParseError(TransitApiError):
    """Raised when the response body is not valid JSON or has an unexpected shape."""


class StationNotFoundError(LookupError):
    """Raised when a station identifier cannot be resolved."""

    def __init__(self, global_id: str) -> None:
        self.global_id = global_id
        super().__init__(f"Station not found: {global_id}")
