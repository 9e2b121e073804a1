"""
repofetch async client.

Provides the async interface for listing GitHub repositories.
"""

from typing import Any

from repofetch.async_clients import AsyncReposClient, AsyncTeamsClient, AsyncUsersClient
from repofetch.async_transport import AsyncHTTPTransport
from repofetch.client import read_env_config
from repofetch.transport import DEFAULT_BASE_URL, RetryConfig


class AsyncGitHubClient:
    """
    Async client for listing GitHub repositories.

    Example:
        ```python
        from repofetch import AsyncGitHubClient

        async with AsyncGitHubClient.from_env() as client:
            repos = await client.repos.fetch_all(owner="octo-org")
        ```
    """

    DEFAULT_BASE_URL = DEFAULT_BASE_URL
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout

        self._transport = AsyncHTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            retry_config=retry_config,
        )

        self.users = AsyncUsersClient(self._transport)
        self.repos = AsyncReposClient(self._transport, client=self)
        self.teams = AsyncTeamsClient(self._transport)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "AsyncGitHubClient":
        """Create a client from GITHUB_TOKEN / GITHUB_API_URL."""
        return cls(timeout=timeout, retry_config=retry_config, **read_env_config())

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncGitHubClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
