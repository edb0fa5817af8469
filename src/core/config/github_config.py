"""
GitHub configuration.
"""

from dataclasses import dataclass


@dataclass
class GitHubConfig:
    """GitHub REST API configuration."""

    token: str = ""
    api_base_url: str = "https://api.github.com"
    user_agent: str = "OpenSourceGuide-AI/1.0"
    timeout: float = 60.0

    @property
    def authenticated(self) -> bool:
        return bool(self.token)
