"""repofetch resource clients."""

from repofetch.clients.repos import ReposClient
from repofetch.clients.teams import TeamsClient
from repofetch.clients.users import UsersClient

__all__ = [
    "UsersClient",
    "ReposClient",
    "TeamsClient",
]
