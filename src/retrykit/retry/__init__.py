"""
retrykit - Retry Engine.

Retry loop with stop evaluation and fixed or exponential backoff.
"""

from .state import RunState, StopReason
from .backoff import (
    BackoffKind,
    BackoffStrategy,
    FixedBackoff,
    ExponentialBackoff,
    compute_exponential_backoff,
    make_backoff,
)
from .policy import RetryPolicy
from .stop import StopDecision, evaluate_stop
from .executor import execute, async_execute, with_retry, async_with_retry

__all__ = [
    "RunState",
    "StopReason",
    "BackoffKind",
    "BackoffStrategy",
    "FixedBackoff",
    "ExponentialBackoff",
    "compute_exponential_backoff",
    "make_backoff",
    "RetryPolicy",
    "StopDecision",
    "evaluate_stop",
    "execute",
    "async_execute",
    "with_retry",
    "async_with_retry",
]
