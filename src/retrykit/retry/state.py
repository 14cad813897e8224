"""
Per-run state and stop reasons.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..exceptions import (
    BudgetExceededError,
    MaxAttemptsExceededError,
    MaxDurationExceededError,
)


class StopReason(str, Enum):
    """Why a retry run ended."""

    SUCCESS = "success"
    NON_RETRYABLE_ERROR = "non_retryable_error"
    MAX_ATTEMPTS_EXCEEDED = "max_attempts_exceeded"
    MAX_DURATION_EXCEEDED = "max_duration_exceeded"


_BUDGET_ERRORS: dict[StopReason, type[BudgetExceededError]] = {
    StopReason.MAX_ATTEMPTS_EXCEEDED: MaxAttemptsExceededError,
    StopReason.MAX_DURATION_EXCEEDED: MaxDurationExceededError,
}


@dataclass
class RunState:
    """
    Mutable record of a single retry run.

    Created fresh by the executor for every run and handed to the operation
    on each attempt. Never reuse a state for a second run.

    Attributes:
        start_time: Monotonic timestamp taken when the run started
        attempts: Number of operation invocations so far
        last_backoff: Most recently applied delay in seconds (0.0 before any)
        stop_reason: Why the run ended, None while it is still running
        result: Return value of the latest attempt
        last_error: Error raised by the latest attempt, if any
    """

    start_time: float = field(default_factory=time.monotonic)
    attempts: int = 0
    last_backoff: float = 0.0
    stop_reason: StopReason | None = None
    result: Any = None
    last_error: BaseException | None = None

    @property
    def elapsed(self) -> float:
        """Seconds since the run started."""
        return time.monotonic() - self.start_time

    @property
    def stopped(self) -> bool:
        return self.stop_reason is not None

    @property
    def succeeded(self) -> bool:
        return self.stop_reason is StopReason.SUCCESS

    def stop(self, reason: StopReason, message: str | None = None) -> None:
        """
        Record the terminal stop reason.

        Args:
            reason: Why the run ended
            message: Explanation turned into a synthetic budget error when the
                run has no real error to report

        Raises:
            RuntimeError: If the run was already stopped
        """
        if self.stop_reason is not None:
            raise RuntimeError(f"Run already stopped ({self.stop_reason.value})")

        if message is not None and self.last_error is None:
            error_cls = _BUDGET_ERRORS.get(reason, BudgetExceededError)
            self.last_error = error_cls(
                message, stop_reason=reason, attempts=self.attempts
            )
        self.stop_reason = reason
