"""Repositories resource client."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from repofetch.exceptions import ConfigurationError
from repofetch.fetcher import RepositoryFetcher
from repofetch.transport import PageFn, preview_headers

if TYPE_CHECKING:
    from repofetch.client import GitHubClient
    from repofetch.transport import HTTPTransport


class ReposClient:
    """Client for repository listing operations."""

    def __init__(
        self, transport: "HTTPTransport", client: "GitHubClient | None" = None
    ) -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
            client: Owning client, used by ``fetch_all`` to reach the users
                and teams resources
        """
        self.transport = transport
        self._client = client

    def list_for_user(
        self,
        username: str,
        page_fn: PageFn | None = None,
        previews: list[str] | None = None,
    ) -> list[dict[str, Any]]:
        """
        List all public repositories of a user, across every page.

        Args:
            username: User login
            page_fn: Transform applied to each page of results
            previews: API media-type previews to enable
        """
        return self.transport.paginate(
            f"/users/{quote(username, safe='')}/repos",
            headers=preview_headers(previews),
            page_fn=page_fn,
        )

    def list_for_org(
        self,
        org: str,
        page_fn: PageFn | None = None,
        previews: list[str] | None = None,
    ) -> list[dict[str, Any]]:
        """
        List all repositories of an organization, across every page.

        Args:
            org: Organization login
            page_fn: Transform applied to each page of results
            previews: API media-type previews to enable
        """
        return self.transport.paginate(
            f"/orgs/{quote(org, safe='')}/repos",
            headers=preview_headers(previews),
            page_fn=page_fn,
        )

    def fetch_all(
        self,
        owner: str | None = None,
        visibility: str = "all",
        minimum_access: str = "pull",
        include_forks: bool = True,
        include_archived: bool = False,
        include_templates: bool = False,
    ) -> list[dict[str, Any]]:
        """
        List every repository of a user, organization or "org/team", filtered.

        Args:
            owner: User or organization login, or "org/team"
            visibility: "all", "public" or "private"
            minimum_access: Lowest permission the token must hold ("pull", "push", "admin")
            include_forks: Keep forked repositories
            include_archived: Keep archived repositories
            include_templates: Keep template repositories

        Returns:
            Matching repository payloads in API order

        Raises:
            MissingOwnerError: If owner is empty
            OwnerNotFoundError: If the owner does not exist
            InvalidTeamContextError: If a team was given for a user
        """
        if self._client is None:
            raise ConfigurationError(
                "fetch_all needs the owning client for user and team lookups"
            )

        return RepositoryFetcher(self._client).fetch_all(
            owner=owner,
            visibility=visibility,
            minimum_access=minimum_access,
            include_forks=include_forks,
            include_archived=include_archived,
            include_templates=include_templates,
        )
