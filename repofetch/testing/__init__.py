"""repofetch testing utilities.

Provides a mock client and fixtures for testing code that uses repofetch.
"""

from repofetch.testing.fixtures import create_mock_repository, permissions
from repofetch.testing.mock import MockCall, MockGitHubClient, MockResponse

__all__ = [
    # Mock client
    "MockGitHubClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_repository",
    "permissions",
]
