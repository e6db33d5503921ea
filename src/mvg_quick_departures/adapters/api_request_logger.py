"""Opt-in tracing of MVG API traffic, enabled with MQD_LOG_REQUESTS=true."""

import json
import logging
import os
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

REQUEST_LOG_ENV = "MQD_LOG_REQUESTS"

_REDACTED = "***REDACTED***"
_SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def should_log_requests() -> bool:
    """Check if request tracing is enabled via the MQD_LOG_REQUESTS environment variable."""
    return os.getenv(REQUEST_LOG_ENV, "").strip().lower() == "true"


def format_request_line(method: str, url: str, params: Mapping[str, Any] | None = None) -> str:
    """Render a request as a single line with sorted query parameters.

    Colons and commas stay readable, so global ids and transport type lists
    look the way they do in the MVG web app.
    """
    if not params:
        return f"{method} {url}"
    query = urlencode(sorted(params.items()), safe=":,")
    separator = "&" if "?" in url else "?"
    return f"{method} {url}{separator}{query}"


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Replace credentials in request headers."""
    return {
        name: _REDACTED if name.lower() in _SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def log_api_request(
    method: str,
    url: str,
    params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
) -> None:
    """Log an outgoing request if tracing is enabled.

    Args:
        method: HTTP method.
        url: Request URL without query string.
        params: Query parameters.
        headers: Request headers; credentials are redacted.
    """
    if not should_log_requests():
        return
    message = format_request_line(method, url, params)
    if headers:
        message += f" headers={json.dumps(redact_headers(headers), sort_keys=True)}"
    logger.info(f"API request: {message}")


def log_api_response(url: str, status: int, elapsed_ms: float, size: int) -> None:
    """Log status, latency and body size of a response if tracing is enabled."""
    if not should_log_requests():
        return
    logger.info(f"API response: {status} {url} ({size} bytes in {elapsed_ms:.0f} ms)")
