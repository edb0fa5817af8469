"""
Repository onboarding analysis.

Fans out to GitHub for repository data, then to the chat model for four
analyses. Only the repository metadata lookup is mandatory; every other
failure degrades to an empty value or a fixed fallback text.
"""

from datetime import datetime, timezone
from typing import Any

import structlog

from src.core.errors import (
    ErrorKind,
    GitHubAPIError,
    GitHubAuthenticationError,
    GitHubRateLimitError,
    GitHubResourceNotFoundError,
    OnboardingError,
)
from src.core.models import (
    AnalysisContext,
    AnalysisMetadata,
    AnalysisResult,
    ApiStatus,
    OnboardingResponse,
    RepositoryIdentifier,
    RepositorySummary,
)
from src.core.utils.concurrency import gather_settled
from src.core.utils.logging import log_operation
from src.core.utils.repo_url import parse_repository_url
from src.insights.service import InsightService
from src.integrations.github.api import GitHubClient

logger = structlog.get_logger()

OPTIONAL_DOCUMENTS = ("README.md", "CONTRIBUTING.md", "CODE_OF_CONDUCT.md")

FALLBACK_ANALYSES = {
    "where_to_start": "Unable to analyze beginner-friendly opportunities at this time.",
    "what_needs_improving": "Unable to identify improvement areas at this time.",
    "contribution_rules": "Unable to summarize contribution guidelines at this time.",
    "project_overview": "Unable to generate project overview at this time.",
}

INVALID_URL_MESSAGE = (
    "Please provide a valid GitHub repository URL "
    "(e.g., https://github.com/owner/repo, git@github.com:owner/repo.git, or owner/repo)"
)


def classify_github_error(error: Exception, repo: RepositoryIdentifier) -> OnboardingError:
    """
    Map a failed mandatory GitHub lookup to a request-level error.

    GitHub client errors are classified by type. Anything else falls back to
    the message text ("not found", "rate limit", "authentication").
    """
    if isinstance(error, GitHubAPIError):
        if isinstance(error, GitHubResourceNotFoundError):
            kind = ErrorKind.REPOSITORY_NOT_FOUND
        elif isinstance(error, GitHubRateLimitError):
            kind = ErrorKind.RATE_LIMITED
        elif isinstance(error, GitHubAuthenticationError):
            kind = ErrorKind.AUTH_FAILED
        else:
            kind = ErrorKind.UPSTREAM_ERROR
    else:
        message = str(error).lower()
        if "not found" in message:
            kind = ErrorKind.REPOSITORY_NOT_FOUND
        elif "rate limit" in message:
            kind = ErrorKind.RATE_LIMITED
        elif "authentication" in message:
            kind = ErrorKind.AUTH_FAILED
        else:
            kind = ErrorKind.UPSTREAM_ERROR

    messages = {
        ErrorKind.REPOSITORY_NOT_FOUND: (
            f"The repository '{repo.full_name}' was not found. "
            "Please check that the repository exists and is publicly accessible."
        ),
        ErrorKind.RATE_LIMITED: (
            "GitHub API rate limit exceeded. Please try again later or configure a GitHub token for higher limits."
        ),
        ErrorKind.AUTH_FAILED: "GitHub API authentication failed. Please check your GitHub token configuration.",
        ErrorKind.UPSTREAM_ERROR: "Could not fetch repository information. Please try again later.",
    }
    return OnboardingError(kind, messages[kind])


class OnboardingOrchestrator:
    """Builds the onboarding analysis for a single repository reference."""

    def __init__(self, github: GitHubClient, insights: InsightService) -> None:
        self.github = github
        self.insights = insights

    async def analyze(self, raw_url: Any) -> OnboardingResponse:
        """
        Analyze a repository reference and assemble the response payload.

        Raises:
            OnboardingError: For invalid input or a failed repository metadata lookup.
        """
        if not raw_url or not isinstance(raw_url, str):
            raise OnboardingError(ErrorKind.INVALID_INPUT, "repoUrl is required and must be a string")

        repo = parse_repository_url(raw_url)
        if repo is None:
            raise OnboardingError(ErrorKind.INVALID_URL, INVALID_URL_MESSAGE)

        async with log_operation("repository_analysis", subject_ids={"repo": repo.full_name}):
            context = await self.fetch_context(repo)
            analysis = await self.generate_analysis(context)

        return OnboardingResponse(
            repository=RepositorySummary(
                name=context.repository.get("name") or repo.name,
                full_name=context.repository.get("full_name") or repo.full_name,
                description=context.repository.get("description"),
                url=context.repository.get("html_url"),
            ),
            analysis=analysis,
            metadata=AnalysisMetadata(
                analyzed_at=datetime.now(timezone.utc),
                issues_found=len(context.issues),
                has_readme=bool(context.readme),
                has_contributing=bool(context.contributing),
                has_code_of_conduct=bool(context.code_of_conduct),
                api_status=ApiStatus(
                    github="Authenticated" if self.github.authenticated else "Unauthenticated",
                    llm="Active" if self.insights.active else "Inactive",
                ),
            ),
        )

    async def fetch_context(self, repo: RepositoryIdentifier) -> AnalysisContext:
        """
        Fetch repository data from GitHub.

        All five lookups run concurrently and are awaited in full before the
        metadata outcome is inspected.
        """
        metadata, issues, *documents = await gather_settled(
            [
                self.github.get_repository_metadata(repo.owner, repo.name),
                self.github.search_beginner_friendly_issues(repo.owner, repo.name),
                *(self.github.get_file_content(repo.owner, repo.name, path) for path in OPTIONAL_DOCUMENTS),
            ],
            fallbacks=[None, [], None, None, None],
        )

        if not metadata.succeeded:
            logger.error("repository_metadata_fetch_failed", repo=repo.full_name, error=str(metadata.error))
            raise classify_github_error(metadata.error, repo)

        if not issues.succeeded:
            logger.warning("beginner_issues_fetch_failed", repo=repo.full_name, error=str(issues.error))
        for path, document in zip(OPTIONAL_DOCUMENTS, documents, strict=True):
            if not document.succeeded:
                logger.warning("document_fetch_failed", repo=repo.full_name, path=path, error=str(document.error))

        readme, contributing, code_of_conduct = (document.value for document in documents)
        return AnalysisContext(
            repository=metadata.value,
            issues=issues.value or [],
            readme=readme,
            contributing=contributing,
            code_of_conduct=code_of_conduct,
        )

    async def generate_analysis(self, context: AnalysisContext) -> AnalysisResult:
        """Run the four analyses concurrently; each failure falls back to its fixed text."""
        names = list(FALLBACK_ANALYSES)
        outcomes = await gather_settled(
            [
                self.insights.analyze_where_to_start(context),
                self.insights.analyze_what_needs_improving(context),
                self.insights.analyze_contribution_rules(context),
                self.insights.analyze_project_overview(context),
            ],
            fallbacks=[FALLBACK_ANALYSES[name] for name in names],
        )

        for name, outcome in zip(names, outcomes, strict=True):
            if not outcome.succeeded:
                logger.error(
                    "analysis_generation_failed", analysis=name, repo=context.full_name, error=str(outcome.error)
                )

        return AnalysisResult(**{name: outcome.value for name, outcome in zip(names, outcomes, strict=True)})
