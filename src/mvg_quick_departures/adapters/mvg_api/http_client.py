"""HTTP client for MVG API requests.

Talks to the undocumented but public bgw-pt v3 API that backs mvg.de.
"""

import asyncio
import json
import logging
import time
from typing import TYPE_CHECKING, Any

import aiohttp

from mvg_quick_departures.adapters.api_request_logger import log_api_request, log_api_response
from mvg_quick_departures.adapters.mvg_api.constants import DEFAULT_HEADERS, MVG_API_BASE_URL
from mvg_quick_departures.domain.errors import HttpError, NetworkError, ParseError

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

logger = logging.getLogger(__name__)


class MvgHttpClient:
    """Thin JSON GET client that maps transport failures to domain errors."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = MVG_API_BASE_URL,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize with a shared aiohttp session.

        Args:
            session: Session owned by the caller.
            base_url: API base URL without trailing slash.
            timeout_seconds: Total timeout per request.
        """
        self._session = session
        self.base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def get_json(self, path: str, params: dict[str, str | int] | None = None) -> Any:
        """GET a path below the base URL and decode the JSON body.

        Raises:
            NetworkError: Connection failure or timeout.
            HttpError: Non-2xx status.
            ParseError: Body is not valid JSON.
        """
        url = f"{self.base_url}{path}"
        log_api_request("GET", url, params=params, headers=DEFAULT_HEADERS)
        started = time.monotonic()
        try:
            async with self._session.get(
                url, params=params, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                return await self._handle_response(response, url, started)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Request to {url} failed: {e!r}")
            raise NetworkError(str(e) or f"Request to {url} failed") from e

    async def _handle_response(self, response: "ClientResponse", url: str, started: float) -> Any:
        """Check the status and decode the body."""
        if not 200 <= response.status < 300:
            await self._log_error_response(response, url)
            raise HttpError(response.status, response.reason or "")

        body = await response.read()
        log_api_response(url, response.status, (time.monotonic() - started) * 1000, len(body))
        try:
            return json.loads(body)
        except ValueError as e:
            logger.error(f"MVG API returned malformed JSON for {url}: {body[:200]!r}")
            raise ParseError(f"Malformed response from {url}: {e}") from e

    async def _log_error_response(self, response: "ClientResponse", url: str) -> None:
        """Log error response details."""
        try:
            raw_body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug(f"Could not read error body from {url}: {e!r}")
            raw_body = b""
        error_text = raw_body.decode("utf-8", errors="replace")
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        retry_after = response.headers.get("Retry-After")
        extra_info_str = f" [Retry-After: {retry_after}]" if retry_after else ""
        logger.error(
            f"MVG API returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type}){extra_info_str}"
        )
