"""Users resource client."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

if TYPE_CHECKING:
    from repofetch.transport import HTTPTransport


class UsersClient:
    """Client for user and organization account lookups."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the users client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get_by_username(self, username: str) -> dict[str, Any]:
        """
        Get the public profile of a user or organization account.

        Args:
            username: Login of the user or organization

        Returns:
            Account payload; ``type`` is "User" or "Organization"

        Raises:
            NotFoundError: If no account has this login
        """
        return self.transport.request("GET", f"/users/{quote(username, safe='')}")
