import base64
from typing import Any
from urllib.parse import quote

import httpx
import structlog

from src.core.config import config
from src.core.errors import (
    GitHubAPIError,
    GitHubAuthenticationError,
    GitHubConnectionError,
    GitHubRateLimitError,
    GitHubResourceNotFoundError,
)
from src.core.models import RepositoryStats
from src.core.utils.concurrency import gather_settled

logger = structlog.get_logger()

BEGINNER_FRIENDLY_LABELS = ["good first issue", "help wanted", "beginner", "easy", "starter"]
MAX_BEGINNER_ISSUES = 20


class GitHubClient:
    """
    A client for the public GitHub REST API.

    Works unauthenticated (60 requests/hour) or with a personal access token
    (5000 requests/hour). Every non-success response is raised as a
    GitHubAPIError subclass carrying the HTTP status, so callers can classify
    failures without inspecting message text.
    """

    def __init__(
        self,
        token: str | None = None,
        api_base_url: str = "https://api.github.com",
        user_agent: str = "OpenSourceGuide-AI/1.0",
        timeout: float = 60.0,
    ) -> None:
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout = timeout
        self.headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": user_agent,
        }
        if token:
            self.headers["Authorization"] = f"token {token}"

    @property
    def authenticated(self) -> bool:
        return "Authorization" in self.headers

    def get_rate_limit_status(self) -> dict[str, Any]:
        return {
            "authenticated": self.authenticated,
            "limits": "5000 requests/hour (authenticated)"
            if self.authenticated
            else "60 requests/hour (unauthenticated)",
        }

    async def _request(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """
        GET an API endpoint and return the decoded JSON body.

        Raises:
            GitHubResourceNotFoundError: 404.
            GitHubRateLimitError: 403 or 429.
            GitHubAuthenticationError: 401.
            GitHubAPIError: Any other non-success status.
            GitHubConnectionError: The API could not be reached.
        """
        url = f"{self.api_base_url}{endpoint}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, headers=self.headers, params=params)
        except httpx.RequestError as e:
            logger.error("github_request_error", endpoint=endpoint, error=str(e))
            raise GitHubConnectionError("Unable to connect to GitHub API") from e

        if response.status_code == 404:
            raise GitHubResourceNotFoundError(f"Resource not found: {endpoint}", status_code=404)
        if response.status_code in (403, 429):
            raise GitHubRateLimitError(
                "GitHub API rate limit exceeded or forbidden", status_code=response.status_code
            )
        if response.status_code == 401:
            raise GitHubAuthenticationError("GitHub API authentication failed", status_code=401)
        if response.is_error:
            logger.error(
                "github_request_failed",
                endpoint=endpoint,
                status_code=response.status_code,
                response_body=response.text,
            )
            raise GitHubAPIError(
                f"GitHub API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        return response.json()

    async def get_repository_metadata(self, owner: str, repo: str) -> dict[str, Any]:
        """
        Fetches basic metadata for a repository.

        Returns:
            dict: Repository metadata including description, stars, license, etc.
        """
        data = await self._request(f"/repos/{owner}/{repo}")
        if not isinstance(data, dict):
            raise GitHubAPIError("Expected a dictionary from GitHub API")
        return data

    async def search_beginner_friendly_issues(self, owner: str, repo: str) -> list[dict[str, Any]]:
        """
        Searches open issues carrying any of the beginner-friendly labels.

        Returns at most 20 issues, most recently created first.
        """
        label_query = " OR ".join(f'label:"{label}"' for label in BEGINNER_FRIENDLY_LABELS)
        query = f"repo:{owner}/{repo} is:open is:issue ({label_query})"

        result = await self._request(
            "/search/issues",
            params={"q": query, "sort": "created", "order": "desc", "per_page": MAX_BEGINNER_ISSUES},
        )
        if not isinstance(result, dict):
            return []
        return list(result.get("items") or [])[:MAX_BEGINNER_ISSUES]

    async def get_file_content(self, owner: str, repo: str, path: str) -> str | None:
        """
        Fetches and decodes a file from the repository's default branch.

        Returns None when the file does not exist or is not a base64 encoded file
        (e.g. the path is a directory).
        """
        try:
            data = await self._request(f"/repos/{owner}/{repo}/contents/{quote(path)}")
        except GitHubResourceNotFoundError:
            logger.info("github_file_not_found", repo=f"{owner}/{repo}", path=path)
            return None

        if not isinstance(data, dict) or not data.get("content") or data.get("encoding") != "base64":
            return None

        return base64.b64decode(data["content"]).decode("utf-8", errors="replace")

    async def get_repository_stats(self, owner: str, repo: str) -> RepositoryStats:
        """Counts contributors, branches and releases; a failed lookup counts as 0."""
        contributors, branches, releases = await gather_settled(
            [
                self._request(f"/repos/{owner}/{repo}/contributors", params={"per_page": 100}),
                self._request(f"/repos/{owner}/{repo}/branches", params={"per_page": 100}),
                self._request(f"/repos/{owner}/{repo}/releases", params={"per_page": 10}),
            ],
            fallbacks=[[], [], []],
        )

        for name, outcome in (("contributors", contributors), ("branches", branches), ("releases", releases)):
            if not outcome.succeeded:
                logger.warning(
                    "github_stats_lookup_failed", repo=f"{owner}/{repo}", lookup=name, error=str(outcome.error)
                )

        return RepositoryStats(
            contributor_count=len(contributors.value or []),
            branch_count=len(branches.value or []),
            release_count=len(releases.value or []),
        )


github_client = GitHubClient(
    token=config.github.token,
    api_base_url=config.github.api_base_url,
    user_agent=config.github.user_agent,
    timeout=config.github.timeout,
)
