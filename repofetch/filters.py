"""
Client-side repository filters.

Each predicate answers whether a single repository record should be kept for
the given options. ``passes_filters`` combines them in a fixed order and
``filter_page`` applies them to one page of listing results. Records are
only read, never modified.
"""

from collections.abc import Callable, Iterable

from repofetch.types.options import FetchOptions
from repofetch.types.repos import RepositoryRecord


def matches_visibility(repo: RepositoryRecord, options: FetchOptions) -> bool:
    """Keep private repos only for "all"/"private" and public ones for "all"/"public"."""
    if options.visibility == "public" and repo.get("private"):
        return False
    if options.visibility == "private" and not repo.get("private"):
        return False
    return True


def has_minimum_access(repo: RepositoryRecord, options: FetchOptions) -> bool:
    """
    Check the caller's permissions on a repository.

    ``permissions`` is only present on authenticated requests. Without it the
    only level that can be satisfied is "pull", which public visibility
    implies. Access levels the API does not report are rejected.
    """
    permissions = repo.get("permissions")
    if permissions is None:
        return options.minimum_access == "pull"
    return bool(permissions.get(options.minimum_access))


def allows_fork(repo: RepositoryRecord, options: FetchOptions) -> bool:
    return options.include_forks or not repo.get("fork")


def allows_archived(repo: RepositoryRecord, options: FetchOptions) -> bool:
    return options.include_archived or not repo.get("archived")


def allows_template(repo: RepositoryRecord, options: FetchOptions) -> bool:
    return options.include_templates or not repo.get("is_template")


# Evaluation order; the first failing predicate rejects the record.
PREDICATES: tuple[Callable[[RepositoryRecord, FetchOptions], bool], ...] = (
    matches_visibility,
    has_minimum_access,
    allows_fork,
    allows_archived,
    allows_template,
)


def passes_filters(repo: RepositoryRecord, options: FetchOptions) -> bool:
    """Return True if the record survives every predicate."""
    return all(predicate(repo, options) for predicate in PREDICATES)


def filter_page(
    page: Iterable[RepositoryRecord], options: FetchOptions
) -> list[RepositoryRecord]:
    """Return the records of a page that pass all filters, in page order."""
    return [repo for repo in page if passes_filters(repo, options)]


__all__ = [
    "PREDICATES",
    "allows_archived",
    "allows_fork",
    "allows_template",
    "filter_page",
    "has_minimum_access",
    "matches_visibility",
    "passes_filters",
]
