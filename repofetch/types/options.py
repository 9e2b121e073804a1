"""Options accepted by the fetch-all operation."""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

VISIBILITIES = ("all", "public", "private")

# Ordered weakest to strongest. Keys match the API's permissions object.
ACCESS_LEVELS = ("pull", "push", "admin")


@dataclass
class FetchOptions:
    """
    Options for listing an owner's repositories.

    Attributes:
        owner: User or organization name, or "org/team" for a team's repos
        visibility: "all", "public" or "private"
        minimum_access: "pull", "push" or "admin" (case-insensitive)
        include_forks: Keep forked repositories
        include_archived: Keep archived repositories
        include_templates: Keep template repositories
    """

    owner: str | None = None
    visibility: str = "all"
    minimum_access: str = "pull"
    include_forks: bool = True
    include_archived: bool = False
    include_templates: bool = False

    def __post_init__(self) -> None:
        # The API reports permission keys in lowercase
        self.minimum_access = self.minimum_access.lower()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FetchOptions":
        """
        Build options from a plain options bag.

        Unknown keys are ignored and None values fall back to the defaults.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{
            key: value
            for key, value in data.items()
            if key in known and value is not None
        })
