"""
Contributor-facing analyses generated by a chat completion model.

Each analysis renders its own prompt from the shared AnalysisContext and
makes exactly one completion call; failures are raised to the caller, which
decides how to degrade.
"""

from collections.abc import Callable
from typing import Any

import structlog
from langchain_core.prompts import ChatPromptTemplate

from src.core.config import config
from src.core.errors import InsightServiceError
from src.core.models import AnalysisContext
from src.core.utils.rate_limiter import RollingWindowRateLimiter
from src.insights.prompts import (
    CONTRIBUTION_RULES_PROMPT,
    PROJECT_OVERVIEW_PROMPT,
    WHAT_NEEDS_IMPROVING_PROMPT,
    WHERE_TO_START_PROMPT,
)
from src.integrations.providers import get_chat_model

logger = structlog.get_logger()

MAX_PROMPT_ISSUES = 5


def _excerpt(text: str, length: int) -> str:
    """First ``length`` characters of a document on a single line."""
    return text[:length].replace("\n", " ")


def _readme_length_label(length: int) -> str:
    if length < 500:
        return "Quite short"
    if length > 2000:
        return "Comprehensive"
    return "Moderate length"


def _yes_no(value: Any) -> str:
    return "Yes" if value else "No"


class InsightService:
    """
    Generates the four onboarding analyses for a repository.

    The model is built per call through ``model_factory`` so each analysis can
    request its own completion budget. Usage is tracked by a rate limiter owned
    by the service instance.
    """

    def __init__(
        self,
        model_factory: Callable[..., Any] = get_chat_model,
        api_key_configured: bool | None = None,
        rate_limiter: RollingWindowRateLimiter | None = None,
    ) -> None:
        self._model_factory = model_factory
        self._api_key_configured = config.ai.active if api_key_configured is None else api_key_configured
        self.rate_limiter = rate_limiter or RollingWindowRateLimiter(
            requests_per_minute=config.ai.requests_per_minute,
            tokens_per_minute=config.ai.tokens_per_minute,
        )
        if not self._api_key_configured:
            logger.warning("llm_api_key_missing", provider=config.ai.provider)

    @property
    def active(self) -> bool:
        return self._api_key_configured

    def get_rate_limit_status(self) -> dict[str, Any]:
        return self.rate_limiter.status()

    async def _complete(self, prompt: ChatPromptTemplate, max_tokens: int, **variables: Any) -> str:
        """
        Render a prompt and return the model's answer.

        Raises:
            InsightServiceError: If no API key is configured or the response has no content.
        """
        if not self._api_key_configured:
            raise InsightServiceError(
                "Chat completion API key is not configured. Please set the provider API key environment variable."
            )

        self.rate_limiter.check()

        llm = self._model_factory(max_tokens=max_tokens)
        messages = prompt.format_messages(**variables)
        response = await llm.ainvoke(messages)

        content = getattr(response, "content", None)
        if not isinstance(content, str) or not content.strip():
            raise InsightServiceError("Unexpected response format from chat completion API")

        usage = getattr(response, "usage_metadata", None) or {}
        self.rate_limiter.record(
            prompt_tokens=int(usage.get("input_tokens", 0) or 0),
            completion_tokens=int(usage.get("output_tokens", 0) or 0),
        )

        return content.strip()

    async def analyze_where_to_start(self, context: AnalysisContext) -> str:
        """Suggest concrete first steps for newcomers, based on beginner-friendly issues."""
        repo = context.repository

        if context.issues:
            lines = [f"Beginner-friendly issues found ({len(context.issues)}):"]
            for index, issue in enumerate(context.issues[:MAX_PROMPT_ISSUES], start=1):
                lines.append(f'{index}. "{issue.get("title", "")}" - {issue.get("html_url", "")}')
                labels = [label.get("name", "") for label in issue.get("labels") or [] if isinstance(label, dict)]
                if labels:
                    lines.append(f"   Labels: {', '.join(labels)}")
            issues_section = "\n".join(lines)
        else:
            issues_section = (
                "No beginner-friendly issues found with typical labels (good first issue, help wanted, etc.)"
            )

        return await self._complete(
            WHERE_TO_START_PROMPT,
            max_tokens=600,
            full_name=context.full_name,
            description=repo.get("description") or "No description available",
            language=repo.get("language") or "Not specified",
            stars=repo.get("stargazers_count", 0),
            open_issues=repo.get("open_issues_count", 0),
            issues_section=issues_section,
        )

    async def analyze_what_needs_improving(self, context: AnalysisContext) -> str:
        """Point out documentation, community and maintenance gaps."""
        repo = context.repository

        readme_section = ""
        if context.readme:
            length = len(context.readme)
            readme_section = (
                "README.md analysis:\n"
                f"- Length: {length} characters\n"
                f"- {_readme_length_label(length)}\n"
                f'- First 200 chars: "{_excerpt(context.readme, 200)}..."'
            )

        return await self._complete(
            WHAT_NEEDS_IMPROVING_PROMPT,
            max_tokens=600,
            full_name=context.full_name,
            description=repo.get("description") or "No description",
            language=repo.get("language") or "Not specified",
            updated_at=repo.get("updated_at", "unknown"),
            has_readme=_yes_no(context.readme),
            has_contributing=_yes_no(context.contributing),
            has_code_of_conduct=_yes_no(context.code_of_conduct),
            open_issues=repo.get("open_issues_count", 0),
            forks=repo.get("forks_count", 0),
            readme_section=readme_section,
        )

    async def analyze_contribution_rules(self, context: AnalysisContext) -> str:
        """Summarize how to contribute from CONTRIBUTING.md, falling back to the README."""
        sections = []
        if context.contributing:
            sections.append(
                "CONTRIBUTING.md content (first 1000 characters):\n"
                f'"{_excerpt(context.contributing, 1000)}..."'
            )
        if context.code_of_conduct:
            sections.append(f"CODE_OF_CONDUCT.md exists (length: {len(context.code_of_conduct)} characters)")
        if context.readme and not context.contributing:
            sections.append(
                "No CONTRIBUTING.md found. README.md content (first 800 characters):\n"
                f'"{_excerpt(context.readme, 800)}..."'
            )

        return await self._complete(
            CONTRIBUTION_RULES_PROMPT,
            max_tokens=600,
            full_name=context.full_name,
            guidelines_section="\n\n".join(sections),
        )

    async def analyze_project_overview(self, context: AnalysisContext) -> str:
        """Describe what the project is and why someone would contribute."""
        repo = context.repository
        license_info = repo.get("license") if isinstance(repo.get("license"), dict) else {}

        readme_section = ""
        if context.readme:
            readme_section = f'README.md content (first 1500 characters):\n"{_excerpt(context.readme, 1500)}..."'

        return await self._complete(
            PROJECT_OVERVIEW_PROMPT,
            max_tokens=700,
            full_name=context.full_name,
            name=repo.get("name", ""),
            description=repo.get("description") or "No description provided",
            language=repo.get("language") or "Not specified",
            created_at=repo.get("created_at", "unknown"),
            updated_at=repo.get("updated_at", "unknown"),
            stars=repo.get("stargazers_count", 0),
            forks=repo.get("forks_count", 0),
            open_issues=repo.get("open_issues_count", 0),
            license=license_info.get("name") or "Not specified",
            readme_section=readme_section,
        )
