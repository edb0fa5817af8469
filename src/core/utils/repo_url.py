"""
GitHub repository reference parsing.

Accepts the shapes users paste into the search box:
- https://github.com/owner/repo (extra path segments such as /issues/123 are ignored)
- git@github.com:owner/repo.git
- owner/repo
"""

import re
from typing import Any

import structlog

from src.core.models import RepositoryIdentifier

logger = structlog.get_logger()

_NAME = r"([a-zA-Z0-9._-]+)"

# Tried in order with fullmatch, first match wins
GITHUB_REPO_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"^https?://github\.com/{_NAME}/{_NAME}(?:/.*)?$"),
    re.compile(rf"^git@github\.com:{_NAME}/{_NAME}(?:\.git)?$"),
    re.compile(rf"^{_NAME}/{_NAME}$"),
)

VALID_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+$")


def is_valid_name(value: str) -> bool:
    """Owner and repository names follow GitHub naming rules and cannot start with '.' or '-'."""
    return bool(VALID_NAME_PATTERN.fullmatch(value)) and not value.startswith((".", "-"))


def normalize_repository_url(raw: str) -> str:
    """Trim whitespace, then drop one trailing '.git' and one trailing '/'."""
    clean = raw.strip()
    clean = clean.removesuffix(".git")
    return clean.removesuffix("/")


def parse_repository_url(raw: Any) -> RepositoryIdentifier | None:
    """
    Extract owner and repository name from a GitHub repository reference.

    Returns None for anything that is not a recognizable repository reference;
    this function never raises.
    """
    if not isinstance(raw, str):
        return None

    try:
        clean = normalize_repository_url(raw)

        for pattern in GITHUB_REPO_PATTERNS:
            match = pattern.fullmatch(clean)
            if not match:
                continue

            owner, name = match.groups()
            if not is_valid_name(owner) or not is_valid_name(name):
                return None
            return RepositoryIdentifier(owner=owner, name=name)

        return None
    except Exception as e:
        logger.warning("repo_url_parse_failed", repo_url=raw, error=str(e))
        return None
