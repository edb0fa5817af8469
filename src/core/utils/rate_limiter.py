"""
Rolling-window usage tracking for the chat completion provider.

The limiter is advisory: it tracks requests and tokens per window and warns
when usage approaches the provider's limits, but never blocks a call.
"""

import math
import time
from collections.abc import Callable
from typing import Any

import structlog

logger = structlog.get_logger()


class RollingWindowRateLimiter:
    """
    Per-window request and token counters with an injectable clock.

    Counters reset once ``window_seconds`` have passed since the window started.
    """

    def __init__(
        self,
        requests_per_minute: int = 30,
        tokens_per_minute: int = 6000,
        window_seconds: float = 60.0,
        warning_threshold: int = 25,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.requests_per_minute = requests_per_minute
        self.tokens_per_minute = tokens_per_minute
        self.window_seconds = window_seconds
        self.warning_threshold = warning_threshold
        self._clock = clock
        self.request_count = 0
        self.token_count = 0
        self.window_start = clock()

    def _roll_window(self) -> None:
        now = self._clock()
        if now - self.window_start > self.window_seconds:
            self.request_count = 0
            self.token_count = 0
            self.window_start = now

    def check(self) -> None:
        """Reset expired counters and warn when the request budget is nearly spent."""
        self._roll_window()

        if self.request_count >= self.warning_threshold:
            logger.warning(
                "llm_rate_limit_warning",
                requests_used=self.request_count,
                requests_limit=self.requests_per_minute,
            )

    def record(self, prompt_tokens: int = 0, completion_tokens: int = 0) -> None:
        """Count one completed request and the tokens it consumed."""
        self._roll_window()
        self.request_count += 1
        self.token_count += prompt_tokens + completion_tokens

    def status(self) -> dict[str, Any]:
        self._roll_window()
        now = self._clock()
        time_until_reset = max(0.0, self.window_seconds - (now - self.window_start))

        return {
            "requests_remaining": max(0, self.requests_per_minute - self.request_count),
            "requests_used": self.request_count,
            "requests_limit": self.requests_per_minute,
            "tokens_used": self.token_count,
            "tokens_limit": self.tokens_per_minute,
            "window_reset_in": math.ceil(time_until_reset),
        }
