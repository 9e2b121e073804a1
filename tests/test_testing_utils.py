"""
Tests for the repofetch testing utilities.

Feature: repofetch
"""

import pytest

from repofetch.exceptions import NotFoundError, ServerError
from repofetch.testing import MockGitHubClient, create_mock_repository, permissions
from repofetch.types import OwnerType


def test_unknown_owner_raises_not_found() -> None:
    mock = MockGitHubClient()

    with pytest.raises(NotFoundError):
        mock.users.get_by_username("ghost")

    assert mock.was_called("users.get_by_username")


def test_add_owner() -> None:
    mock = MockGitHubClient()
    mock.users.add_owner("octo-org", OwnerType.ORGANIZATION)

    assert mock.users.get_by_username("octo-org") == {
        "login": "octo-org",
        "type": "Organization",
    }


def test_flat_list_is_a_single_page() -> None:
    mock = MockGitHubClient()
    mock.repos.configure_list_for_user("octocat", [{"name": "a"}, {"name": "b"}])
    pages: list[list[dict]] = []

    mock.repos.list_for_user("octocat", page_fn=lambda page: pages.append(page) or page)

    assert pages == [[{"name": "a"}, {"name": "b"}]]


def test_list_of_pages() -> None:
    mock = MockGitHubClient()
    mock.teams.configure_list_repos_in_org("octo-org", "core", [[{"name": "a"}], [{"name": "b"}]])
    pages: list[list[dict]] = []

    result = mock.teams.list_repos_in_org(
        "octo-org", "core", page_fn=lambda page: pages.append(page) or page
    )

    assert result == [{"name": "a"}, {"name": "b"}]
    assert len(pages) == 2


def test_unconfigured_listing_is_empty() -> None:
    assert MockGitHubClient().repos.list_for_org("octo-org") == []


def test_configured_error_is_raised() -> None:
    mock = MockGitHubClient()
    mock.repos.configure_list_for_org("octo-org", error=ServerError("HTTP_500", "boom"))

    with pytest.raises(ServerError):
        mock.repos.list_for_org("octo-org")


def test_call_recording_and_reset() -> None:
    mock = MockGitHubClient()
    mock.users.add_owner("octocat")
    mock.users.get_by_username("octocat")
    mock.repos.list_for_user("octocat", previews=["baptiste"])

    assert mock.call_count("users.get_by_username") == 1
    assert mock.get_calls("repos.list_for_user")[0].kwargs == {"previews": ["baptiste"]}
    assert len(mock.get_calls()) == 2

    mock.reset()

    assert mock.get_calls() == []
    with pytest.raises(NotFoundError):
        mock.users.get_by_username("octocat")


def test_create_mock_repository() -> None:
    repo = create_mock_repository("widgets", owner="octo-org", private=True)

    assert repo["full_name"] == "octo-org/widgets"
    assert repo["private"] is True
    assert repo["fork"] is False
    assert "permissions" not in repo


def test_permissions_helper() -> None:
    assert permissions("pull") == {"pull": True, "push": False, "admin": False}
    assert permissions("push") == {"pull": True, "push": True, "admin": False}
    assert permissions("admin") == {"pull": True, "push": True, "admin": True}


def test_mock_user_client_fixture(mock_user_client: MockGitHubClient) -> None:
    repos = mock_user_client.repos.list_for_user("octocat")

    assert len(repos) == 8
