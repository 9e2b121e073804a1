"""Repository-related data models."""

from dataclasses import dataclass, field
from typing import Any

# Repository payloads are passed through exactly as the API returns them.
RepositoryRecord = dict[str, Any]


@dataclass(frozen=True)
class Route:
    """A listing operation chosen for an owner, with its call arguments."""

    operation: str  # "<resource>.<method>" on the client
    kwargs: dict[str, Any] = field(default_factory=dict)
    previews: tuple[str, ...] = ()

    @property
    def resource(self) -> str:
        return self.operation.split(".", 1)[0]

    @property
    def method(self) -> str:
        return self.operation.split(".", 1)[1]
