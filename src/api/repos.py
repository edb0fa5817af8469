"""Repository-related API endpoints."""

import structlog
from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_github_client
from src.api.errors import ErrorResponse
from src.core.errors import ErrorKind, GitHubAPIError, OnboardingError
from src.core.models import RepositoryStats
from src.core.utils.repo_url import parse_repository_url
from src.integrations.github.api import GitHubClient
from src.services.onboarding import INVALID_URL_MESSAGE, classify_github_error

logger = structlog.get_logger()

router = APIRouter(prefix="/repos", tags=["Repositories"])


@router.get(
    "/{owner}/{repo}/stats",
    response_model=RepositoryStats,
    status_code=status.HTTP_200_OK,
    summary="Repository community statistics",
    description="Count contributors, branches and recent releases of a repository.",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def repository_stats(
    owner: str,
    repo: str,
    github: GitHubClient = Depends(get_github_client),
) -> RepositoryStats:
    identifier = parse_repository_url(f"{owner}/{repo}")
    if identifier is None:
        raise OnboardingError(ErrorKind.INVALID_URL, INVALID_URL_MESSAGE)

    # Stats lookups degrade individually, so confirm the repository exists first
    try:
        await github.get_repository_metadata(identifier.owner, identifier.name)
    except GitHubAPIError as e:
        logger.error("repository_stats_lookup_failed", repo=identifier.full_name, error=str(e))
        raise classify_github_error(e, identifier) from e

    return await github.get_repository_stats(identifier.owner, identifier.name)
