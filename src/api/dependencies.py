from functools import lru_cache

from fastapi import Depends

from src.insights.service import InsightService
from src.integrations.github.api import GitHubClient, github_client
from src.services.onboarding import OnboardingOrchestrator

# --- Service Dependencies ---  # DI: swap for fakes in tests via app.dependency_overrides.


def get_github_client() -> GitHubClient:
    """Injects the shared GitHubClient configured from the environment."""
    return github_client


@lru_cache(maxsize=1)
def get_insight_service() -> InsightService:
    """
    Injects the process-wide InsightService.

    A single instance keeps its rate limiter counters across requests.
    """
    return InsightService()


def get_orchestrator(
    github: GitHubClient = Depends(get_github_client),
    insights: InsightService = Depends(get_insight_service),
) -> OnboardingOrchestrator:
    return OnboardingOrchestrator(github=github, insights=insights)
