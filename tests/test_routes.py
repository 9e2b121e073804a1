"""
Tests for owner parsing, owner validation and listing route selection.

Feature: repofetch
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from repofetch.exceptions import InvalidTeamContextError, MissingOwnerError
from repofetch.fetcher import (
    TEMPLATE_PREVIEW,
    build_owner_info,
    coerce_options,
    select_route,
    split_owner,
)
from repofetch.types import FetchOptions, OwnerInfo, OwnerType

login_strategy = st.text(
    alphabet=st.characters(whitelist_categories=("Ll", "Lu", "Nd"), whitelist_characters="-"),
    min_size=1,
    max_size=39,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("octocat", ("octocat", None)),
        ("octo-org/core", ("octo-org", "core")),
        ("octo-org/", ("octo-org", None)),
        ("octo-org/core/extra", ("octo-org", "core/extra")),
    ],
)
def test_split_owner(raw: str, expected: tuple[str, str | None]) -> None:
    assert split_owner(raw) == expected


@given(owner=login_strategy, team=login_strategy)
@settings(max_examples=100)
def test_split_owner_round_trip(owner: str, team: str) -> None:
    assert split_owner(f"{owner}/{team}") == (owner, team)


def test_team_on_user_is_rejected() -> None:
    with pytest.raises(InvalidTeamContextError):
        build_owner_info("valid-user", "team-one", OwnerType.USER)


def test_user_without_team_is_accepted() -> None:
    info = build_owner_info("octocat", None, OwnerType.USER)

    assert info == OwnerInfo("octocat", None, "User")
    assert not info.is_org


def test_route_for_org_team() -> None:
    route = select_route(OwnerInfo("octo-org", "core", OwnerType.ORGANIZATION))

    assert route.operation == "teams.list_repos_in_org"
    assert route.kwargs == {"org": "octo-org", "team_slug": "core"}
    assert (route.resource, route.method) == ("teams", "list_repos_in_org")


def test_route_for_org() -> None:
    route = select_route(OwnerInfo("octo-org", None, OwnerType.ORGANIZATION))

    assert route.operation == "repos.list_for_org"
    assert route.kwargs == {"org": "octo-org"}


def test_route_for_user() -> None:
    route = select_route(OwnerInfo("octocat", None, OwnerType.USER))

    assert route.operation == "repos.list_for_user"
    assert route.kwargs == {"username": "octocat"}


@given(
    owner=login_strategy,
    team=st.one_of(st.none(), login_strategy),
    owner_type=st.sampled_from([OwnerType.USER, OwnerType.ORGANIZATION]),
)
@settings(max_examples=100)
def test_every_route_requests_template_preview(
    owner: str, team: str | None, owner_type: str
) -> None:
    route = select_route(OwnerInfo(owner, team, owner_type))

    assert route.previews == (TEMPLATE_PREVIEW,)


def test_coerce_options_defaults() -> None:
    options = coerce_options({"owner": "octocat"})

    assert options == FetchOptions(
        owner="octocat",
        visibility="all",
        minimum_access="pull",
        include_forks=True,
        include_archived=False,
        include_templates=False,
    )


def test_coerce_options_ignores_unknown_and_none() -> None:
    options = coerce_options({"owner": "octocat", "per_page": 5, "visibility": None})

    assert options.visibility == "all"


def test_coerce_options_lowercases_access() -> None:
    assert coerce_options(owner="octocat", minimum_access="ADMIN").minimum_access == "admin"


def test_coerce_options_requires_owner() -> None:
    with pytest.raises(MissingOwnerError):
        coerce_options(FetchOptions())
