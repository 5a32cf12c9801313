# ABOUTME: HTTP client abstraction for bibliographic API calls and cover image probes.
# ABOUTME: JSON GET plus metadata-only HEAD, with opt-in rate limiting, retry, and custom transport.

import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}
_USER_AGENT = "sparkshelf/0.1.0"


class MetadataFetchError(Exception):
    """Raised when an HTTP request to a bibliographic API fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class HeadResponse:
    """Headers of interest from a HEAD request."""

    status_code: int
    content_type: str | None
    content_length: int | None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP GET operations against JSON APIs."""

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]: ...


@runtime_checkable
class HeadClient(Protocol):
    """Protocol for metadata-only requests against image hosts."""

    def head(self, url: str) -> HeadResponse: ...


def _user_agent() -> str:
    contact = os.environ.get("SPARKSHELF_CONTACT_EMAIL", "")
    return f"{_USER_AGENT} ({contact})" if contact else _USER_AGENT


class SparkshelfHttpClient:
    """HTTP client for Open Library, Google Books and cover hosts.

    Wraps httpx.Client. Retries and request spacing are off by default: a
    failed request surfaces immediately as MetadataFetchError. Both can be
    turned on for bulk use against rate-limited endpoints.
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        min_request_interval: float = 0.0,
        max_retries: int = 0,
        retry_delay: float = 1.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": _user_agent()},
            "timeout": timeout,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)
        self._min_interval = min_request_interval
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._last_request_time: float = 0.0

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """Send a GET request and decode the JSON body.

        Args:
            url: The URL to request.
            params: Optional query parameters.

        Returns:
            Parsed JSON response body.

        Raises:
            MetadataFetchError: On transport errors, non-200 responses,
                bodies that are not a JSON object, or exhausted retries.
        """
        self._rate_limit()

        attempts = 1 + self._max_retries
        last_status = 0
        for attempt in range(attempts):
            try:
                response = self._client.get(url, params=params)
                last_status = response.status_code
            except httpx.HTTPError as exc:
                raise MetadataFetchError(f"Request failed: {url}: {exc}") from exc

            if response.status_code == 200:
                try:
                    data = response.json()
                except ValueError as exc:
                    raise MetadataFetchError(
                        f"Invalid JSON from {url}", status_code=200
                    ) from exc
                if not isinstance(data, dict):
                    raise MetadataFetchError(
                        f"Expected a JSON object from {url}", status_code=200
                    )
                return data

            if response.status_code not in _RETRYABLE_STATUS_CODES:
                raise MetadataFetchError(
                    f"HTTP {response.status_code} from {url}",
                    status_code=response.status_code,
                )

            if attempt < attempts - 1:
                delay = self._retry_delay * (2**attempt)
                logger.warning(
                    "HTTP %d from %s, retrying in %.1fs (attempt %d/%d)",
                    response.status_code,
                    url,
                    delay,
                    attempt + 1,
                    self._max_retries,
                )
                time.sleep(delay)

        raise MetadataFetchError(
            f"HTTP {last_status} from {url} after {attempts} attempts",
            status_code=last_status,
        )

    def head(self, url: str) -> HeadResponse:
        """Send a HEAD request and return status plus content headers.

        Non-2xx responses are returned, not raised; only transport failures raise.
        """
        self._rate_limit()
        try:
            response = self._client.head(url)
        except httpx.HTTPError as exc:
            raise MetadataFetchError(f"HEAD failed: {url}: {exc}") from exc

        raw_length = response.headers.get("content-length")
        try:
            content_length = int(raw_length) if raw_length is not None else None
        except ValueError:
            content_length = None

        return HeadResponse(
            status_code=response.status_code,
            content_type=response.headers.get("content-type"),
            content_length=content_length,
        )

    def close(self) -> None:
        self._client.close()

    def _rate_limit(self) -> None:
        """Sleep if needed to maintain minimum interval between requests."""
        if self._min_interval <= 0:
            return
        now = time.monotonic()
        elapsed = now - self._last_request_time
        if elapsed < self._min_interval and self._last_request_time > 0:
            time.sleep(self._min_interval - elapsed)
        self._last_request_time = time.monotonic()
