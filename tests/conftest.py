"""Shared fixtures for the repofetch test suite."""

from repofetch.testing.fixtures import (  # noqa: F401
    mock_client,
    mock_user_client,
    sample_repositories,
)
