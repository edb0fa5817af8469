"""
Core error classes for the contribution guide backend.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable error tags returned to API clients."""

    INVALID_INPUT = "InvalidInput"
    INVALID_URL = "InvalidUrl"
    REPOSITORY_NOT_FOUND = "RepositoryNotFound"
    AUTH_FAILED = "AuthFailed"
    RATE_LIMITED = "RateLimited"
    UPSTREAM_ERROR = "UpstreamError"
    INTERNAL_ERROR = "InternalError"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.INVALID_URL: 400,
    ErrorKind.REPOSITORY_NOT_FOUND: 404,
    ErrorKind.AUTH_FAILED: 401,
    ErrorKind.RATE_LIMITED: 429,
    ErrorKind.UPSTREAM_ERROR: 500,
    ErrorKind.INTERNAL_ERROR: 500,
}


class OnboardingError(Exception):
    """Raised when a repository analysis request cannot be completed."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code


class GitHubAPIError(Exception):
    """Raised when the GitHub REST API answers with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class GitHubResourceNotFoundError(GitHubAPIError):
    """Raised when a specific GitHub resource is not found."""

    pass


class GitHubRateLimitError(GitHubAPIError):
    """Raised when GitHub API rate limit is exceeded or access is forbidden."""

    pass


class GitHubAuthenticationError(GitHubAPIError):
    """Raised when GitHub rejects the configured credentials."""

    pass


class GitHubConnectionError(GitHubAPIError):
    """Raised when the GitHub API cannot be reached at all."""

    pass


class InsightServiceError(Exception):
    """Raised when the chat completion provider cannot produce an analysis."""

    pass
