"""
Settled fan-out helper.

Runs independent awaitables concurrently and waits for every one of them,
so a failing call never cancels or hides the results of its siblings.
"""

import asyncio
from collections.abc import Awaitable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Settled(Generic[T]):
    """Outcome of one operation: its value (or fallback) and whether it succeeded."""

    value: T
    succeeded: bool
    error: Exception | None = None


async def gather_settled(
    operations: Sequence[Awaitable[Any]],
    fallbacks: Sequence[Any],
) -> list[Settled[Any]]:
    """
    Run all operations concurrently and return their settled outcomes in input order.

    A failed operation yields its fallback value with ``succeeded=False`` and the
    raised exception attached. Only ``Exception`` subclasses are absorbed; task
    cancellation still propagates.

    Args:
        operations: Independent awaitables to run.
        fallbacks: Value to use for each operation that fails.

    Raises:
        ValueError: If the number of fallbacks does not match the number of operations.
    """
    if len(operations) != len(fallbacks):
        for operation in operations:
            # Avoid "coroutine was never awaited" warnings for rejected input
            if asyncio.iscoroutine(operation):
                operation.close()
        raise ValueError(f"Expected {len(operations)} fallbacks, got {len(fallbacks)}")

    outcomes = await asyncio.gather(*operations, return_exceptions=True)

    settled: list[Settled[Any]] = []
    for outcome, fallback in zip(outcomes, fallbacks, strict=True):
        if isinstance(outcome, Exception):
            settled.append(Settled(value=fallback, succeeded=False, error=outcome))
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            settled.append(Settled(value=outcome, succeeded=True))
    return settled
