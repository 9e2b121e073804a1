"""Async Teams resource client."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from repofetch.transport import PageFn, preview_headers

if TYPE_CHECKING:
    from repofetch.async_transport import AsyncHTTPTransport


class AsyncTeamsClient:
    """Async client for organization team operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """Initialize the async teams client."""
        self.transport = transport

    async def list_repos_in_org(
        self,
        org: str,
        team_slug: str,
        page_fn: PageFn | None = None,
        previews: list[str] | None = None,
    ) -> list[dict[str, Any]]:
        """List all repositories a team has access to, across every page."""
        return await self.transport.paginate(
            f"/orgs/{quote(org, safe='')}/teams/{quote(team_slug, safe='')}/repos",
            headers=preview_headers(previews),
            page_fn=page_fn,
        )
