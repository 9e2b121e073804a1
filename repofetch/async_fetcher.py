"""
Async variant of the fetch-all operation.

Same steps as ``repofetch.fetcher``, awaiting the owner lookup and the
paginated listing of an ``AsyncGitHubClient`` (or any client with the same
coroutine methods).
"""

from collections.abc import Mapping
from typing import Any

from repofetch.exceptions import NotFoundError, OwnerNotFoundError
from repofetch.fetcher import (
    build_owner_info,
    coerce_options,
    get_operation,
    select_route,
    split_owner,
)
from repofetch.filters import filter_page
from repofetch.logging import log_fetch_operation
from repofetch.types.options import FetchOptions
from repofetch.types.owners import OwnerInfo, OwnerType
from repofetch.types.repos import RepositoryRecord


class AsyncRepositoryFetcher:
    """Async counterpart of ``RepositoryFetcher``."""

    def __init__(self, client: Any) -> None:
        self.client = client

    async def resolve_owner(self, name: str) -> OwnerInfo:
        """Resolve ``name`` (optionally ``"org/team"``) to an OwnerInfo."""
        owner, team_slug = split_owner(name)
        try:
            data = await self.client.users.get_by_username(owner)
        except NotFoundError as e:
            raise OwnerNotFoundError(owner, e.request_id) from e

        owner_type = data.get("type", OwnerType.USER)
        log_fetch_operation("resolve_owner", owner, team=team_slug, type=owner_type)
        return build_owner_info(owner, team_slug, owner_type)

    async def fetch_all(
        self,
        options: FetchOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> list[RepositoryRecord]:
        """
        Fetch every repository of the configured owner that passes the filters.

        Raises the same errors as ``RepositoryFetcher.fetch_all``.
        """
        opts = coerce_options(options, **overrides)
        owner_info = await self.resolve_owner(opts.owner)
        route = select_route(owner_info)
        log_fetch_operation("select_route", owner_info.owner, route=route.operation)

        operation = get_operation(self.client, route)
        repos = await operation(
            **route.kwargs,
            page_fn=lambda page: filter_page(page, opts),
            previews=list(route.previews),
        )

        log_fetch_operation("fetch_all", owner_info.owner, matched=len(repos))
        return repos


async def async_fetch_all_repositories(
    client: Any,
    options: FetchOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> list[RepositoryRecord]:
    """Shortcut for ``AsyncRepositoryFetcher(client).fetch_all(options, **overrides)``."""
    return await AsyncRepositoryFetcher(client).fetch_all(options, **overrides)
