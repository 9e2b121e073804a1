"""Owner-related data models."""

from dataclasses import dataclass


class OwnerType:
    """Account kinds reported by the users endpoint."""

    USER = "User"
    ORGANIZATION = "Organization"


@dataclass(frozen=True)
class OwnerInfo:
    """An owner name resolved against the users endpoint."""

    owner: str
    team_slug: str | None
    owner_type: str  # "User" or "Organization"

    @property
    def is_org(self) -> bool:
        return self.owner_type == OwnerType.ORGANIZATION
