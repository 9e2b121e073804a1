"""Async Users resource client."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

if TYPE_CHECKING:
    from repofetch.async_transport import AsyncHTTPTransport


class AsyncUsersClient:
    """Async client for user and organization account lookups."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """Initialize the async users client."""
        self.transport = transport

    async def get_by_username(self, username: str) -> dict[str, Any]:
        """
        Get the public profile of a user or organization account.

        Returns:
            Account payload; ``type`` is "User" or "Organization"

        Raises:
            NotFoundError: If no account has this login
        """
        return await self.transport.request("GET", f"/users/{quote(username, safe='')}")
