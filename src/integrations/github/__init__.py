"""
GitHub REST API client.

``github_client`` is the process-wide instance built from the GitHub config section.
"""

from src.integrations.github.api import BEGINNER_FRIENDLY_LABELS, GitHubClient, github_client

__all__ = [
    "BEGINNER_FRIENDLY_LABELS",
    "GitHubClient",
    "github_client",
]
