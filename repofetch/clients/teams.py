"""Teams resource client."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from repofetch.transport import PageFn, preview_headers

if TYPE_CHECKING:
    from repofetch.transport import HTTPTransport


class TeamsClient:
    """Client for organization team operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the teams client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list_repos_in_org(
        self,
        org: str,
        team_slug: str,
        page_fn: PageFn | None = None,
        previews: list[str] | None = None,
    ) -> list[dict[str, Any]]:
        """
        List all repositories a team has access to, across every page.

        Args:
            org: Organization login
            team_slug: Team slug within the organization
            page_fn: Transform applied to each page of results
            previews: API media-type previews to enable

        Returns:
            Repository payloads (after ``page_fn``) in API order

        Raises:
            NotFoundError: If the organization or team does not exist
        """
        return self.transport.paginate(
            f"/orgs/{quote(org, safe='')}/teams/{quote(team_slug, safe='')}/repos",
            headers=preview_headers(previews),
            page_fn=page_fn,
        )
