"""
Pytest fixtures for repofetch testing.

Provides a mock client and repository payloads covering every filter.
"""

from collections.abc import Generator
from typing import Any

import pytest

from repofetch.testing.mock import MockGitHubClient
from repofetch.types.owners import OwnerType


def create_mock_repository(
    name: str = "test-repo",
    owner: str = "test-owner",
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Create a repository payload shaped like the API's.

    Args:
        name: Repository name
        owner: Owner login
        **kwargs: Fields to add or override (e.g. ``private=True``,
            ``permissions={"pull": True, "push": False, "admin": False}``)

    Returns:
        Repository dict; ``permissions`` is only present when passed in
    """
    repo: dict[str, Any] = {
        "name": name,
        "full_name": f"{owner}/{name}",
        "owner": {"login": owner},
        "private": False,
        "fork": False,
        "archived": False,
        "is_template": False,
        "html_url": f"https://github.com/{owner}/{name}",
    }
    repo.update(kwargs)
    return repo


def permissions(level: str) -> dict[str, bool]:
    """Permissions object granting ``level`` and everything below it."""
    order = ["pull", "push", "admin"]
    granted = order[: order.index(level) + 1]
    return {key: key in granted for key in order}


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGitHubClient, None, None]:
    """
    Provide a MockGitHubClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.users.add_owner("octocat")
            mock_client.repos.configure_list_for_user("octocat", [repo])
            assert my_function(mock_client) == [repo]
        ```
    """
    client = MockGitHubClient()
    yield client
    client.reset()


@pytest.fixture
def mock_user_client(
    mock_client: MockGitHubClient,
    sample_repositories: dict[str, dict[str, Any]],
) -> MockGitHubClient:
    """Provide a MockGitHubClient with user "octocat" owning every sample repository."""
    mock_client.users.add_owner("octocat", OwnerType.USER)
    mock_client.repos.configure_list_for_user(
        "octocat", list(sample_repositories.values())
    )
    return mock_client


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_repositories() -> dict[str, dict[str, Any]]:
    """One repository per filter case, keyed by what makes it distinct."""
    return {
        "public": create_mock_repository("public"),
        "private": create_mock_repository("private", private=True),
        "fork": create_mock_repository("fork", fork=True),
        "archived": create_mock_repository("archived", archived=True),
        "template": create_mock_repository("template", is_template=True),
        "pull": create_mock_repository("pull", permissions=permissions("pull")),
        "push": create_mock_repository("push", permissions=permissions("push")),
        "admin": create_mock_repository("admin", permissions=permissions("admin")),
    }


__all__ = [
    "mock_client",
    "mock_user_client",
    "sample_repositories",
    # Helper functions
    "create_mock_repository",
    "permissions",
]
