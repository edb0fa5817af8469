"""
Structured logging utilities.

structlog setup for the API process and a context manager that times an
operation and reports its outcome as events.
"""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog

from src.core.config.logging_config import LoggingConfig

logger = structlog.get_logger()


def configure_logging(logging_config: LoggingConfig) -> None:
    """Route stdlib logging and structlog through the configured level."""
    level = logging.getLevelName(logging_config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=logging_config.format)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


@asynccontextmanager
async def log_operation(
    operation: str,
    subject_ids: dict[str, str] | None = None,
    **context: Any,
) -> AsyncIterator[None]:
    """
    Log ``{operation}_started``, then ``{operation}_completed`` or ``{operation}_failed`` with latency.

    Example:
        async with log_operation("repository_analysis", subject_ids={"repo": "owner/repo"}):
            context = await orchestrator.fetch_context(repo)
    """
    started = time.perf_counter()
    log_context = {"operation": operation, **(subject_ids or {}), **context}

    logger.info(f"{operation}_started", **log_context)
    try:
        yield
    except Exception as e:
        logger.error(f"{operation}_failed", error=str(e), latency_ms=_elapsed_ms(started), **log_context)
        raise
    logger.info(f"{operation}_completed", latency_ms=_elapsed_ms(started), **log_context)


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
