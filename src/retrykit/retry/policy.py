"""
Retry policy definition.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from numbers import Real
from typing import Any, Callable

from .backoff import BackoffStrategy, ExponentialBackoff, FixedBackoff
from .state import RunState
from ..predicates import RetryPredicate, retry_if_error_present


@dataclass(frozen=True)
class RetryPolicy:
    """
    Immutable configuration for retry behavior.

    A policy is built once and may be shared by any number of runs, from any
    number of threads. Each run gets its own RunState.

    Attributes:
        max_attempts: Maximum number of operation invocations (default: 5).
            0 or negative means no attempt limit.
        max_duration: Time budget in seconds since the run started
            or as a timedelta (default: None). None, 0 or negative means no
            time limit. A timedelta is stored as seconds.
        retry_predicate: Decides whether an attempt's error is retryable
            (default: retry iff an error is present)
        backoff: Strategy computing the pause between attempts
            (default: fixed 100ms)
    """

    max_attempts: int = 5
    max_duration: float | timedelta | None = None
    retry_predicate: RetryPredicate = retry_if_error_present
    backoff: BackoffStrategy = field(default_factory=lambda: FixedBackoff(0.1))

    def __post_init__(self):
        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int):
            raise TypeError(f"max_attempts must be an int, got {self.max_attempts!r}")
        if isinstance(self.max_duration, timedelta):
            object.__setattr__(self, "max_duration", self.max_duration.total_seconds())
        elif self.max_duration is not None and (
            isinstance(self.max_duration, bool) or not isinstance(self.max_duration, Real)
        ):
            raise TypeError(
                f"max_duration must be seconds or a timedelta, got {self.max_duration!r}"
            )
        if not callable(self.retry_predicate):
            raise TypeError("retry_predicate must be callable")
        if not isinstance(self.backoff, BackoffStrategy):
            raise TypeError(f"backoff must be a BackoffStrategy, got {self.backoff!r}")

    @property
    def attempt_limited(self) -> bool:
        return self.max_attempts > 0

    @property
    def duration_limited(self) -> bool:
        return self.max_duration is not None and self.max_duration > 0

    def execute(
        self, operation: Callable[[RunState], Any], **kwargs: Any
    ) -> tuple[Any, BaseException | None, RunState]:
        """Run ``operation`` under this policy. See ``retrykit.retry.executor.execute``."""
        from .executor import execute

        return execute(operation, self, **kwargs)

    @classmethod
    def aggressive(cls) -> "RetryPolicy":
        """Preset for aggressive retry (more attempts, growing delays)."""
        return cls(
            max_attempts=10,
            max_duration=300.0,
            backoff=ExponentialBackoff(initial_delay=1.0, factor=2.0),
        )

    @classmethod
    def conservative(cls) -> "RetryPolicy":
        """Preset for conservative retry (fewer attempts, short fixed delay)."""
        return cls(
            max_attempts=3,
            backoff=FixedBackoff(0.5),
        )

    @classmethod
    def no_retry(cls) -> "RetryPolicy":
        """Preset for no retry (single attempt only)."""
        return cls(max_attempts=1)
