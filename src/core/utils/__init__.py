"""
Shared utilities for repository parsing, fan-out, rate tracking and logging.

Helpers shared by the orchestrator, the GitHub client, the insight service
and the API layer.
"""

from src.core.utils.concurrency import Settled, gather_settled
from src.core.utils.logging import configure_logging, log_operation
from src.core.utils.rate_limiter import RollingWindowRateLimiter
from src.core.utils.repo_url import parse_repository_url

__all__ = [
    "Settled",
    "gather_settled",
    "configure_logging",
    "log_operation",
    "RollingWindowRateLimiter",
    "parse_repository_url",
]
