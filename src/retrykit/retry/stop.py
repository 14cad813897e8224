"""
Stop evaluation: decides after each attempt whether the run goes on.
"""

import time
from dataclasses import dataclass

from .policy import RetryPolicy
from .state import RunState, StopReason


@dataclass(frozen=True)
class StopDecision:
    """Outcome of evaluating a run after an attempt."""

    should_continue: bool
    reason: StopReason | None = None
    message: str | None = None

    @classmethod
    def proceed(cls) -> "StopDecision":
        return cls(should_continue=True)

    @classmethod
    def halt(cls, reason: StopReason, message: str | None = None) -> "StopDecision":
        return cls(should_continue=False, reason=reason, message=message)


def evaluate_stop(
    state: RunState, policy: RetryPolicy, now: float | None = None
) -> StopDecision:
    """
    Decide whether to attempt again. First matching rule wins:

    1. The predicate declines to retry ``last_error``: stop as non-retryable.
       With the default predicate this is also how success surfaces (no
       error, nothing to retry); the executor tells the two apart afterwards
       by whether an error is present. Custom predicates go through the very
       same branch, so there is no separate success check.
    2. The attempt limit is reached: stop, attempts exceeded.
    3. The time budget is used up: stop, duration exceeded.
    4. Otherwise continue.

    Args:
        state: Run state after the latest attempt (not modified)
        policy: Policy of the run
        now: Monotonic timestamp to measure elapsed time against
            (default: time.monotonic())

    Returns:
        The decision
    """
    if not policy.retry_predicate(state.last_error):
        return StopDecision.halt(StopReason.NON_RETRYABLE_ERROR)

    if policy.attempt_limited and state.attempts >= policy.max_attempts:
        return StopDecision.halt(
            StopReason.MAX_ATTEMPTS_EXCEEDED, "max attempts exceeded"
        )

    if policy.duration_limited:
        if now is None:
            now = time.monotonic()
        if now - state.start_time >= policy.max_duration:
            return StopDecision.halt(
                StopReason.MAX_DURATION_EXCEEDED, "max duration exceeded"
            )

    return StopDecision.proceed()
