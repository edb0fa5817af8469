"""
Pytest configuration: project root on sys.path plus shared repository fixtures.
"""

import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def repo_metadata() -> dict[str, Any]:
    """Trimmed GitHub /repos/{owner}/{repo} payload."""
    return {
        "name": "react",
        "full_name": "facebook/react",
        "description": "The library for web and native user interfaces.",
        "html_url": "https://github.com/facebook/react",
        "language": "JavaScript",
        "stargazers_count": 230000,
        "forks_count": 47000,
        "open_issues_count": 800,
        "created_at": "2013-05-24T16:15:54Z",
        "updated_at": "2026-10-17T09:00:00Z",
        "license": {"key": "mit", "name": "MIT License"},
    }


@pytest.fixture
def beginner_issues() -> list[dict[str, Any]]:
    return [
        {
            "title": f"Fix typo in docs #{number}",
            "html_url": f"https://github.com/facebook/react/issues/{number}",
            "labels": [{"name": "good first issue"}],
        }
        for number in range(1, 8)
    ]
