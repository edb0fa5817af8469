import base64

import httpx
import pytest
import respx
from httpx import Response

from src.core.errors import (
    GitHubAPIError,
    GitHubAuthenticationError,
    GitHubConnectionError,
    GitHubRateLimitError,
    GitHubResourceNotFoundError,
)
from src.integrations.github.api import BEGINNER_FRIENDLY_LABELS, GitHubClient

API = "https://api.github.com"


@pytest.fixture
def github_client() -> GitHubClient:
    return GitHubClient(api_base_url=API)


def _encoded(text: str) -> str:
    # GitHub wraps base64 content at 60 characters
    raw = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return "\n".join(raw[i : i + 60] for i in range(0, len(raw), 60))


def test_unauthenticated_headers(github_client):
    assert "Authorization" not in github_client.headers
    assert github_client.headers["Accept"] == "application/vnd.github.v3+json"
    assert github_client.headers["User-Agent"] == "OpenSourceGuide-AI/1.0"
    assert github_client.authenticated is False
    assert github_client.get_rate_limit_status() == {
        "authenticated": False,
        "limits": "60 requests/hour (unauthenticated)",
    }


def test_authenticated_headers():
    client = GitHubClient(token="ghp_test")

    assert client.headers["Authorization"] == "token ghp_test"
    assert client.authenticated is True
    assert client.get_rate_limit_status()["limits"] == "5000 requests/hour (authenticated)"


@respx.mock
@pytest.mark.asyncio
async def test_get_repository_metadata_success(github_client, repo_metadata):
    route = respx.get(f"{API}/repos/facebook/react").mock(return_value=Response(200, json=repo_metadata))

    data = await github_client.get_repository_metadata("facebook", "react")

    assert data["full_name"] == "facebook/react"
    assert route.called
    assert route.calls.last.request.headers["Accept"] == "application/vnd.github.v3+json"


@respx.mock
@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status_code", "error_type"),
    [
        (404, GitHubResourceNotFoundError),
        (403, GitHubRateLimitError),
        (429, GitHubRateLimitError),
        (401, GitHubAuthenticationError),
        (500, GitHubAPIError),
        (502, GitHubAPIError),
    ],
)
async def test_get_repository_metadata_status_mapping(github_client, status_code, error_type):
    respx.get(f"{API}/repos/owner/repo").mock(return_value=Response(status_code, json={"message": "nope"}))

    with pytest.raises(error_type) as exc_info:
        await github_client.get_repository_metadata("owner", "repo")

    assert exc_info.value.status_code == status_code


@respx.mock
@pytest.mark.asyncio
async def test_not_found_message_names_endpoint(github_client):
    respx.get(f"{API}/repos/owner/missing").mock(return_value=Response(404))

    with pytest.raises(GitHubResourceNotFoundError, match="Resource not found: /repos/owner/missing"):
        await github_client.get_repository_metadata("owner", "missing")


@respx.mock
@pytest.mark.asyncio
async def test_connection_error_is_wrapped(github_client):
    respx.get(f"{API}/repos/owner/repo").mock(side_effect=httpx.ConnectError("refused"))

    with pytest.raises(GitHubConnectionError, match="Unable to connect to GitHub API") as exc_info:
        await github_client.get_repository_metadata("owner", "repo")

    assert exc_info.value.status_code is None


@respx.mock
@pytest.mark.asyncio
async def test_search_beginner_friendly_issues_query(github_client, beginner_issues):
    route = respx.get(f"{API}/search/issues").mock(
        return_value=Response(200, json={"total_count": len(beginner_issues), "items": beginner_issues})
    )

    issues = await github_client.search_beginner_friendly_issues("facebook", "react")

    assert issues == beginner_issues
    params = route.calls.last.request.url.params
    assert params["sort"] == "created"
    assert params["order"] == "desc"
    assert params["per_page"] == "20"
    query = params["q"]
    assert query.startswith("repo:facebook/react is:open is:issue (")
    for label in BEGINNER_FRIENDLY_LABELS:
        assert f'label:"{label}"' in query
    assert query.count(" OR ") == len(BEGINNER_FRIENDLY_LABELS) - 1


@respx.mock
@pytest.mark.asyncio
async def test_search_caps_results_at_twenty(github_client):
    items = [{"title": f"issue {i}"} for i in range(30)]
    respx.get(f"{API}/search/issues").mock(return_value=Response(200, json={"items": items}))

    issues = await github_client.search_beginner_friendly_issues("owner", "repo")

    assert len(issues) == 20


@respx.mock
@pytest.mark.asyncio
async def test_search_without_items_returns_empty_list(github_client):
    respx.get(f"{API}/search/issues").mock(return_value=Response(200, json={"total_count": 0}))

    assert await github_client.search_beginner_friendly_issues("owner", "repo") == []


@respx.mock
@pytest.mark.asyncio
async def test_search_failure_raises(github_client):
    respx.get(f"{API}/search/issues").mock(return_value=Response(403))

    with pytest.raises(GitHubRateLimitError):
        await github_client.search_beginner_friendly_issues("owner", "repo")


@respx.mock
@pytest.mark.asyncio
async def test_get_file_content_decodes_base64(github_client):
    text = "# React\n\nA JavaScript library for building user interfaces. ✨\n" * 3
    respx.get(f"{API}/repos/facebook/react/contents/README.md").mock(
        return_value=Response(200, json={"content": _encoded(text), "encoding": "base64"})
    )

    assert await github_client.get_file_content("facebook", "react", "README.md") == text


@respx.mock
@pytest.mark.asyncio
async def test_get_file_content_missing_returns_none(github_client):
    respx.get(f"{API}/repos/owner/repo/contents/CONTRIBUTING.md").mock(return_value=Response(404))

    assert await github_client.get_file_content("owner", "repo", "CONTRIBUTING.md") is None


@respx.mock
@pytest.mark.asyncio
async def test_get_file_content_directory_returns_none(github_client):
    respx.get(f"{API}/repos/owner/repo/contents/docs").mock(return_value=Response(200, json=[{"name": "a.md"}]))

    assert await github_client.get_file_content("owner", "repo", "docs") is None


@respx.mock
@pytest.mark.asyncio
async def test_get_file_content_server_error_raises(github_client):
    respx.get(f"{API}/repos/owner/repo/contents/README.md").mock(return_value=Response(500))

    with pytest.raises(GitHubAPIError):
        await github_client.get_file_content("owner", "repo", "README.md")


@respx.mock
@pytest.mark.asyncio
async def test_get_repository_stats_counts(github_client):
    respx.get(f"{API}/repos/owner/repo/contributors").mock(return_value=Response(200, json=[{}] * 12))
    respx.get(f"{API}/repos/owner/repo/branches").mock(return_value=Response(200, json=[{}] * 3))
    respx.get(f"{API}/repos/owner/repo/releases").mock(return_value=Response(200, json=[{}] * 10))

    stats = await github_client.get_repository_stats("owner", "repo")

    assert stats.contributor_count == 12
    assert stats.branch_count == 3
    assert stats.release_count == 10


@respx.mock
@pytest.mark.asyncio
async def test_get_repository_stats_partial_failure(github_client):
    respx.get(f"{API}/repos/owner/repo/contributors").mock(return_value=Response(403))
    respx.get(f"{API}/repos/owner/repo/branches").mock(return_value=Response(200, json=[{}] * 2))
    respx.get(f"{API}/repos/owner/repo/releases").mock(side_effect=httpx.ConnectError("down"))

    stats = await github_client.get_repository_stats("owner", "repo")

    assert stats.contributor_count == 0
    assert stats.branch_count == 2
    assert stats.release_count == 0
