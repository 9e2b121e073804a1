"""
Pytest plugin for repofetch testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["repofetch.testing.conftest"]
"""

from repofetch.testing.fixtures import (
    mock_client,
    mock_user_client,
    sample_repositories,
)

__all__ = [
    "mock_client",
    "mock_user_client",
    "sample_repositories",
]
