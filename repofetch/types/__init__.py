"""repofetch type definitions.

This module exports all data model types used by the package.
"""

from repofetch.types.options import (
    ACCESS_LEVELS,
    VISIBILITIES,
    FetchOptions,
)
from repofetch.types.owners import OwnerInfo, OwnerType
from repofetch.types.repos import RepositoryRecord, Route

__all__ = [
    # Fetch options
    "FetchOptions",
    "VISIBILITIES",
    "ACCESS_LEVELS",
    # Owner types
    "OwnerInfo",
    "OwnerType",
    # Repository types
    "RepositoryRecord",
    "Route",
]
