"""repofetch - list and filter every repository of a GitHub user, organization or team."""

from repofetch.async_client import AsyncGitHubClient
from repofetch.async_fetcher import AsyncRepositoryFetcher, async_fetch_all_repositories
from repofetch.client import GitHubClient
from repofetch.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    InvalidTeamContextError,
    MissingOwnerError,
    NotFoundError,
    OwnerNotFoundError,
    RateLimitedError,
    RepoFetchError,
    ServerError,
    ValidationError,
)
from repofetch.fetcher import RepositoryFetcher, fetch_all_repositories, select_route
from repofetch.filters import filter_page, passes_filters
from repofetch.logging import configure_logging, get_logger
from repofetch.transport import HTTPTransport, RetryConfig
from repofetch.types import FetchOptions, OwnerInfo, OwnerType, Route

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Clients
    "GitHubClient",
    "AsyncGitHubClient",
    # Fetch-all operation
    "RepositoryFetcher",
    "AsyncRepositoryFetcher",
    "fetch_all_repositories",
    "async_fetch_all_repositories",
    "select_route",
    "filter_page",
    "passes_filters",
    # Types
    "FetchOptions",
    "OwnerInfo",
    "OwnerType",
    "Route",
    # Exceptions
    "RepoFetchError",
    "MissingOwnerError",
    "OwnerNotFoundError",
    "InvalidTeamContextError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "ConfigurationError",
    # Transport
    "HTTPTransport",
    "RetryConfig",
    # Logging
    "configure_logging",
    "get_logger",
]
