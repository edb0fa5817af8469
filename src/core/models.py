from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


@dataclass(frozen=True)
class RepositoryIdentifier:
    """Owner/name pair of a GitHub repository, produced by the URL parser."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        """The full name of the repository (e.g., 'owner/repo')."""
        return f"{self.owner}/{self.name}"


class AnalysisContext(BaseModel):
    """
    Everything fetched from GitHub for one analysis request.

    Only ``repository`` is mandatory; the other lookups degrade to empty values.
    """

    repository: dict[str, Any]
    issues: list[dict[str, Any]] = Field(default_factory=list)
    readme: str | None = None
    contributing: str | None = None
    code_of_conduct: str | None = None

    @property
    def full_name(self) -> str:
        return str(self.repository.get("full_name", ""))


class CamelModel(BaseModel):
    """Base for models serialized with camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyzeRepoRequest(BaseModel):
    """Request body of the analyze endpoint. ``repoUrl`` is validated by the orchestrator."""

    repo_url: Any = Field(default=None, alias="repoUrl")

    model_config = ConfigDict(populate_by_name=True)


class AnalysisResult(CamelModel):
    """The four analyses, each either model output or a fixed fallback."""

    where_to_start: str
    what_needs_improving: str
    contribution_rules: str
    project_overview: str


class RepositorySummary(CamelModel):
    name: str
    full_name: str
    description: str | None = None
    url: str | None = None


class ApiStatus(CamelModel):
    github: str
    llm: str


class AnalysisMetadata(CamelModel):
    analyzed_at: datetime
    issues_found: int
    has_readme: bool
    has_contributing: bool
    has_code_of_conduct: bool
    api_status: ApiStatus


class OnboardingResponse(CamelModel):
    """Successful payload of the analyze endpoint."""

    repository: RepositorySummary
    analysis: AnalysisResult
    metadata: AnalysisMetadata


class RepositoryStats(CamelModel):
    """Community size indicators; a count is 0 when its lookup failed."""

    contributor_count: int = 0
    branch_count: int = 0
    release_count: int = 0
