#!/usr/bin/env python3
"""
Basic repofetch usage example.

Lists the repositories of an owner given on the command line.
Run with: GITHUB_TOKEN=... python examples/basic_usage.py octo-org/core
"""

import logging
import sys

from repofetch import GitHubClient, RepoFetchError, configure_logging

configure_logging(level=logging.INFO, http_level=logging.DEBUG)

owner = sys.argv[1] if len(sys.argv) > 1 else "octocat"

with GitHubClient.from_env() as client:
    try:
        repos = client.repos.fetch_all(owner=owner, include_archived=True)
    except RepoFetchError as e:
        print(f"Failed: {e.message}")
        sys.exit(1)

for repo in repos:
    flags = [name for name in ("private", "fork", "archived", "is_template") if repo.get(name)]
    print(f"{repo['full_name']:50} {' '.join(flags)}")

print(f"\n{len(repos)} repositories")
