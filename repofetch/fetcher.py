"""
Fetch every repository of a user, organization or team.

Resolves the owner, picks the matching listing endpoint, drains its pages
and filters each page client-side. The client is any object exposing
``users.get_by_username`` plus the three listing methods named in
``select_route``; ``GitHubClient`` and ``repofetch.testing.MockGitHubClient``
both qualify.
"""

from collections.abc import Callable, Mapping
from typing import Any

from repofetch.exceptions import (
    InvalidTeamContextError,
    MissingOwnerError,
    NotFoundError,
    OwnerNotFoundError,
)
from repofetch.filters import filter_page
from repofetch.logging import log_fetch_operation
from repofetch.types.options import FetchOptions
from repofetch.types.owners import OwnerInfo, OwnerType
from repofetch.types.repos import RepositoryRecord, Route

# Media-type preview that adds ``is_template`` to repository payloads
TEMPLATE_PREVIEW = "baptiste"


def coerce_options(
    options: FetchOptions | Mapping[str, Any] | None = None, **overrides: Any
) -> FetchOptions:
    """
    Normalize the caller's options and make sure an owner was given.

    Raises:
        MissingOwnerError: If no owner is set
    """
    if isinstance(options, FetchOptions):
        data: dict[str, Any] = {**vars(options), **overrides}
    else:
        data = {**(options or {}), **overrides}

    opts = FetchOptions.from_dict(data)
    if not opts.owner:
        raise MissingOwnerError()
    return opts


def split_owner(name: str) -> tuple[str, str | None]:
    """Split ``"org/team"`` on the first slash; plain names have no team."""
    owner, _, team = name.partition("/")
    return owner, team or None


def build_owner_info(owner: str, team_slug: str | None, owner_type: str) -> OwnerInfo:
    """
    Combine a looked-up owner kind with the requested team.

    Raises:
        InvalidTeamContextError: If a team was requested for a non-organization
    """
    info = OwnerInfo(owner=owner, team_slug=team_slug, owner_type=owner_type)
    if team_slug and not info.is_org:
        raise InvalidTeamContextError()
    return info


def select_route(owner_info: OwnerInfo) -> Route:
    """
    Choose the listing operation for an owner.

    Organizations with a team list that team's repositories, organizations
    without one list all org repositories, and anything else is listed as a
    user.
    """
    previews = (TEMPLATE_PREVIEW,)
    if owner_info.is_org:
        if owner_info.team_slug:
            return Route(
                "teams.list_repos_in_org",
                {"org": owner_info.owner, "team_slug": owner_info.team_slug},
                previews,
            )
        return Route("repos.list_for_org", {"org": owner_info.owner}, previews)
    return Route("repos.list_for_user", {"username": owner_info.owner}, previews)


def get_operation(client: Any, route: Route) -> Callable[..., Any]:
    """Look up the bound client method a route names."""
    return getattr(getattr(client, route.resource), route.method)


class RepositoryFetcher:
    """
    Lists and filters all repositories of an owner through a GitHub client.

    Example:
        ```python
        from repofetch import GitHubClient, RepositoryFetcher

        with GitHubClient.from_env() as client:
            fetcher = RepositoryFetcher(client)
            repos = fetcher.fetch_all(owner="octo-org/core", minimum_access="push")
        ```
    """

    def __init__(self, client: Any) -> None:
        self.client = client

    def resolve_owner(self, name: str) -> OwnerInfo:
        """
        Resolve ``name`` (optionally ``"org/team"``) to an OwnerInfo.

        Raises:
            OwnerNotFoundError: If the user/org does not exist
            InvalidTeamContextError: If a team was given for a user
        """
        owner, team_slug = split_owner(name)
        try:
            data = self.client.users.get_by_username(owner)
        except NotFoundError as e:
            raise OwnerNotFoundError(owner, e.request_id) from e

        owner_type = data.get("type", OwnerType.USER)
        log_fetch_operation("resolve_owner", owner, team=team_slug, type=owner_type)
        return build_owner_info(owner, team_slug, owner_type)

    def fetch_all(
        self,
        options: FetchOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> list[RepositoryRecord]:
        """
        Fetch every repository of the configured owner that passes the filters.

        Args:
            options: FetchOptions or a plain options mapping
            overrides: Individual options, taking precedence over ``options``

        Returns:
            Matching repository records in API order

        Raises:
            MissingOwnerError: If no owner was given
            OwnerNotFoundError: If the owner does not exist
            InvalidTeamContextError: If a team was given for a user
            RepoFetchError: Any other API failure, unchanged
        """
        opts = coerce_options(options, **overrides)
        owner_info = self.resolve_owner(opts.owner)
        route = select_route(owner_info)
        log_fetch_operation("select_route", owner_info.owner, route=route.operation)

        operation = get_operation(self.client, route)
        repos = operation(
            **route.kwargs,
            page_fn=lambda page: filter_page(page, opts),
            previews=list(route.previews),
        )

        log_fetch_operation("fetch_all", owner_info.owner, matched=len(repos))
        return repos


def fetch_all_repositories(
    client: Any,
    options: FetchOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> list[RepositoryRecord]:
    """Shortcut for ``RepositoryFetcher(client).fetch_all(options, **overrides)``."""
    return RepositoryFetcher(client).fetch_all(options, **overrides)
