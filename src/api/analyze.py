"""Repository analysis API endpoints."""

from typing import Any

import structlog
from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_github_client, get_insight_service, get_orchestrator
from src.api.errors import ErrorResponse
from src.core.models import AnalyzeRepoRequest, OnboardingResponse
from src.insights.service import InsightService
from src.integrations.github.api import GitHubClient
from src.services.onboarding import OnboardingOrchestrator

logger = structlog.get_logger()

router = APIRouter(tags=["Analysis"])


@router.post(
    "/analyze",
    response_model=OnboardingResponse,
    status_code=status.HTTP_200_OK,
    summary="Analyze a GitHub repository for new contributors",
    description=(
        "Fetches repository metadata, beginner-friendly issues and community documents from GitHub "
        "and returns four generated analyses: where to start, what needs improving, "
        "contribution rules and a project overview."
    ),
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def analyze_repository(
    request: AnalyzeRepoRequest,
    orchestrator: OnboardingOrchestrator = Depends(get_orchestrator),
) -> OnboardingResponse:
    """
    Analyze a repository reference.

    Accepts https URLs, SSH remotes and bare ``owner/repo`` names. Errors are
    raised as OnboardingError and rendered by the registered exception handler.
    """
    logger.info("analysis_requested", repo_url=request.repo_url)
    return await orchestrator.analyze(request.repo_url)


@router.get(
    "/status",
    response_model=dict[str, Any],
    summary="Upstream API status",
    description="Report GitHub authentication mode and chat completion usage for the current window.",
)
async def api_status(
    github: GitHubClient = Depends(get_github_client),
    insights: InsightService = Depends(get_insight_service),
) -> dict[str, Any]:
    return {
        "github": github.get_rate_limit_status(),
        "llm": {"active": insights.active, **insights.get_rate_limit_status()},
    }
