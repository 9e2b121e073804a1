"""
repofetch main client.

Provides the primary interface for listing GitHub repositories.
"""

import os
from typing import Any

from repofetch.clients import ReposClient, TeamsClient, UsersClient
from repofetch.exceptions import ConfigurationError
from repofetch.transport import DEFAULT_BASE_URL, HTTPTransport, RetryConfig


def read_env_config() -> dict[str, Any]:
    """
    Read client settings from the environment.

    Environment variables:
        GITHUB_TOKEN: Access token (optional, GH_TOKEN is used as a fallback)
        GITHUB_API_URL: Base URL for API (optional, default: https://api.github.com)

    Raises:
        ConfigurationError: If GITHUB_API_URL is not an http(s) URL
    """
    token = os.environ.get("GITHUB_TOKEN") or os.environ.get("GH_TOKEN") or None
    base_url = os.environ.get("GITHUB_API_URL") or DEFAULT_BASE_URL

    if not base_url.startswith(("https://", "http://")):
        raise ConfigurationError(
            f"Invalid GITHUB_API_URL: {base_url}. Must be an http(s) URL"
        )

    return {"token": token, "base_url": base_url}


class GitHubClient:
    """
    Main client for listing GitHub repositories.

    Aggregates the users, repos and teams resource clients over one transport.

    Example:
        ```python
        from repofetch import GitHubClient

        # Create client with explicit configuration
        client = GitHubClient(token="ghp_...")

        # Or create from environment variables
        client = GitHubClient.from_env()

        # Everything "octo-org/platform" can push to, forks excluded
        repos = client.repos.fetch_all(
            owner="octo-org/platform",
            minimum_access="push",
            include_forks=False,
        )
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
        """
        Initialize the GitHub client.

        Args:
            token: Access token; without one only public data is visible and
                repository payloads carry no ``permissions``
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            retry_config=retry_config,
        )

        self.users = UsersClient(self._transport)
        self.repos = ReposClient(self._transport, client=self)
        self.teams = TeamsClient(self._transport)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "GitHubClient":
        """
        Create a client from environment variables (see ``read_env_config``).

        Raises:
            ConfigurationError: If GITHUB_API_URL is invalid
        """
        return cls(timeout=timeout, retry_config=retry_config, **read_env_config())

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
