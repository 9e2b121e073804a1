"""
HTTP Transport for repofetch.

Handles HTTP communication with the GitHub REST API: authentication headers,
automatic retry, Link-header pagination and error handling.
"""

import random
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

import httpx

from repofetch.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    RateLimitedError,
    RepoFetchError,
    ServerError,
    ValidationError,
)
from repofetch.logging import log_http_request, log_http_response

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_PER_PAGE = 100
API_VERSION = "2022-11-28"
USER_AGENT = "repofetch-python"

# Error codes for statuses the API does not describe further
_STATUS_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    409: "CONFLICT",
    422: "VALIDATION_FAILED",
    429: "RATE_LIMITED",
}

PageFn = Callable[[list[dict[str, Any]]], Iterable[dict[str, Any]]]


@dataclass
class RetryConfig:
    """Configuration for automatic retry behavior."""

    max_retries: int = 3
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [429, 500, 502, 503])
    respect_retry_after: bool = True
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


def preview_headers(previews: Iterable[str] | None) -> dict[str, str]:
    """
    Build the Accept header enabling API media-type previews.

    ``["baptiste"]`` becomes ``application/vnd.github.baptiste-preview+json``.
    """
    if not previews:
        return {}
    return {
        "Accept": ", ".join(
            f"application/vnd.github.{name}-preview+json" for name in previews
        )
    }


class BaseTransport:
    """Retry, backoff and error-mapping logic shared by sync and async transports."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str | None = None,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize transport settings.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: Personal access or app token; requests are anonymous without one
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

    def _default_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": USER_AGENT,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _should_retry(self, status_code: int, attempt: int) -> bool:
        """
        Determine if a request should be retried.

        Args:
            status_code: HTTP status code
            attempt: Current attempt number (0-indexed)

        Returns:
            True if the request should be retried
        """
        if attempt >= self.retry_config.max_retries:
            return False

        return status_code in self.retry_config.retry_on

    def _get_backoff_time(
        self, attempt: int, retry_after: str | None
    ) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter, respecting Retry-After header
        if present. Both are capped at ``max_backoff``.

        Args:
            attempt: Current attempt number (0-indexed)
            retry_after: Value of Retry-After header (if present)

        Returns:
            Time to wait in seconds
        """
        if retry_after and self.retry_config.respect_retry_after:
            try:
                return min(float(retry_after), self.retry_config.max_backoff)
            except ValueError:
                pass  # Fall through to exponential backoff

        base_wait = self.retry_config.backoff_factor ** attempt

        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        return min(wait_time, self.retry_config.max_backoff)

    @staticmethod
    def _is_rate_limited(response: httpx.Response) -> bool:
        """Primary rate limits are reported as 403 with no remaining quota."""
        if response.status_code == 429:
            return True
        return (
            response.status_code == 403
            and response.headers.get("X-RateLimit-Remaining") == "0"
        )

    def _effective_status(self, response: httpx.Response) -> int:
        return 429 if self._is_rate_limited(response) else response.status_code

    def _parse_error_response(self, response: httpx.Response) -> RepoFetchError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate RepoFetchError subclass
        """
        try:
            data = response.json()
        except Exception:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        code = _STATUS_CODES.get(status_code, f"HTTP_{status_code}")
        message = data.get("message") or f"HTTP {status_code}"
        request_id = response.headers.get("X-GitHub-Request-Id")

        if self._is_rate_limited(response):
            return RateLimitedError(
                "RATE_LIMITED", message, self._retry_after_seconds(response), request_id
            )
        if status_code == 401:
            return AuthenticationError(code, message, request_id)
        elif status_code == 403:
            return AuthorizationError(code, message, request_id)
        elif status_code == 404:
            return NotFoundError(code, message, request_id)
        elif status_code >= 500:
            return ServerError(code, message, request_id)
        else:
            return ValidationError(code, message, request_id)

    @staticmethod
    def _retry_after_seconds(response: httpx.Response) -> int:
        retry_after = response.headers.get("Retry-After")
        if retry_after is not None:
            try:
                return int(retry_after)
            except ValueError:
                pass

        reset = response.headers.get("X-RateLimit-Reset")
        if reset is not None:
            try:
                return max(int(reset) - int(time.time()), 0)
            except ValueError:
                pass

        return 60

    @staticmethod
    def _next_url(response: httpx.Response) -> str | None:
        next_link = response.links.get("next")
        return next_link.get("url") if next_link else None


class HTTPTransport(BaseTransport):
    """
    HTTP transport layer with retry logic and pagination.

    Handles:
    - Bearer token authentication
    - Exponential backoff with jitter for retries
    - Retry-After header respect for rate limiting
    - Link header pagination
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str | None = None,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
    ) -> None:
        super().__init__(base_url, token, timeout, retry_config)

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=self._default_headers(),
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Make a request with automatic retry.

        Args:
            method: HTTP method
            path: API path (e.g., "/users/octocat") or absolute URL
            params: Query parameters
            headers: Extra headers for this request

        Returns:
            Parsed JSON response

        Raises:
            RepoFetchError: On API errors
        """
        return self._send(method, path, params, headers).json()

    def paginate(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        page_fn: PageFn | None = None,
    ) -> list[dict[str, Any]]:
        """
        Fetch every page of a list endpoint.

        Follows ``Link: rel="next"`` until the last page. When ``page_fn`` is
        given, it is applied to each page and its output is collected instead
        of the raw page.

        Args:
            path: API path of the list endpoint
            params: Query parameters for the first page
            headers: Extra headers for every page
            page_fn: Transform applied to each page

        Returns:
            Concatenated (transformed) items of all pages, in page order
        """
        results: list[dict[str, Any]] = []
        url: str | None = path
        query: dict[str, Any] | None = {"per_page": DEFAULT_PER_PAGE, **(params or {})}

        while url:
            response = self._send("GET", url, query, headers)
            page = response.json()
            results.extend(page_fn(page) if page_fn else page)
            url = self._next_url(response)
            # The next link already carries the query string
            query = None

        return results

    def _send(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None,
        headers: dict[str, str] | None,
    ) -> httpx.Response:
        def make_request() -> httpx.Response:
            log_http_request(method, path, params, headers)
            started = time.monotonic()
            response = self._client.request(method, path, params=params, headers=headers)
            log_http_response(
                response.status_code, path, (time.monotonic() - started) * 1000
            )
            return response

        return self._execute_with_retry(make_request)

    def _execute_with_retry(
        self, request_fn: Callable[[], httpx.Response]
    ) -> httpx.Response:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Function that makes the HTTP request

        Returns:
            The successful response

        Raises:
            RepoFetchError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                response = request_fn()

                if response.status_code < 400:
                    return response

                error = self._parse_error_response(response)

                if not self._should_retry(self._effective_status(response), attempt):
                    raise error

                last_error = error

                retry_after = response.headers.get("Retry-After")
                wait_time = self._get_backoff_time(attempt, retry_after)
                time.sleep(wait_time)

            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e

                last_error = e
                wait_time = self._get_backoff_time(attempt, None)
                time.sleep(wait_time)

        if last_error:
            if isinstance(last_error, RepoFetchError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")
