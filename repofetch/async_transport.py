"""
Async HTTP Transport for repofetch.

Handles async HTTP communication with the GitHub REST API using the httpx
async client. Retry, backoff and error mapping are shared with the sync
transport.
"""

import asyncio
import time
from collections.abc import Callable, Coroutine
from typing import Any

import httpx

from repofetch.exceptions import RepoFetchError, ServerError
from repofetch.logging import log_http_request, log_http_response
from repofetch.transport import (
    DEFAULT_BASE_URL,
    DEFAULT_PER_PAGE,
    BaseTransport,
    PageFn,
    RetryConfig,
)


class AsyncHTTPTransport(BaseTransport):
    """
    Async HTTP transport layer with retry logic and pagination.

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

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers=self._default_headers(),
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Make a request with automatic retry.

        Returns:
            Parsed JSON response

        Raises:
            RepoFetchError: On API errors
        """
        response = await self._send(method, path, params, headers)
        return response.json()

    async def paginate(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        page_fn: PageFn | None = None,
    ) -> list[dict[str, Any]]:
        """
        Fetch every page of a list endpoint, one page at a time.

        See ``HTTPTransport.paginate``.
        """
        results: list[dict[str, Any]] = []
        url: str | None = path
        query: dict[str, Any] | None = {"per_page": DEFAULT_PER_PAGE, **(params or {})}

        while url:
            response = await self._send("GET", url, query, headers)
            page = response.json()
            results.extend(page_fn(page) if page_fn else page)
            url = self._next_url(response)
            query = None

        return results

    async def _send(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None,
        headers: dict[str, str] | None,
    ) -> httpx.Response:
        async def make_request() -> httpx.Response:
            log_http_request(method, path, params, headers)
            started = time.monotonic()
            response = await self._client.request(
                method, path, params=params, headers=headers
            )
            log_http_response(
                response.status_code, path, (time.monotonic() - started) * 1000
            )
            return response

        return await self._execute_with_retry(make_request)

    async def _execute_with_retry(
        self, request_fn: Callable[[], Coroutine[Any, Any, httpx.Response]]
    ) -> httpx.Response:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Async function that makes the HTTP request

        Returns:
            The successful response

        Raises:
            RepoFetchError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                response = await request_fn()

                if response.status_code < 400:
                    return response

                error = self._parse_error_response(response)

                if not self._should_retry(self._effective_status(response), attempt):
                    raise error

                last_error = error

                retry_after = response.headers.get("Retry-After")
                wait_time = self._get_backoff_time(attempt, retry_after)
                await asyncio.sleep(wait_time)

            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e

                last_error = e
                wait_time = self._get_backoff_time(attempt, None)
                await asyncio.sleep(wait_time)

        if last_error:
            if isinstance(last_error, RepoFetchError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")
