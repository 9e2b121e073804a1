"""repofetch async resource clients."""

from repofetch.async_clients.repos import AsyncReposClient
from repofetch.async_clients.teams import AsyncTeamsClient
from repofetch.async_clients.users import AsyncUsersClient

__all__ = [
    "AsyncUsersClient",
    "AsyncReposClient",
    "AsyncTeamsClient",
]
