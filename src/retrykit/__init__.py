"""
retrykit - Retry With Backoff.

Run fallible operations under an attempt and time budget, pausing with fixed
or exponential backoff between attempts.
"""

from .exceptions import (
    RetryKitError,
    TransientError,
    PermanentError,
    BudgetExceededError,
    MaxAttemptsExceededError,
    MaxDurationExceededError,
)
from .predicates import (
    DEFAULT_RETRYABLE_STATUS_CODES,
    retry_if_error_present,
    retry_if_retryable,
    retry_on,
    retry_on_http_status,
)
from .retry import (
    BackoffKind,
    BackoffStrategy,
    ExponentialBackoff,
    FixedBackoff,
    RetryPolicy,
    RunState,
    StopDecision,
    StopReason,
    async_execute,
    async_with_retry,
    compute_exponential_backoff,
    evaluate_stop,
    execute,
    make_backoff,
    with_retry,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Engine
    "RetryPolicy",
    "RunState",
    "StopReason",
    "StopDecision",
    "evaluate_stop",
    "execute",
    "async_execute",
    "with_retry",
    "async_with_retry",
    # Backoff
    "BackoffKind",
    "BackoffStrategy",
    "FixedBackoff",
    "ExponentialBackoff",
    "compute_exponential_backoff",
    "make_backoff",
    # Predicates
    "DEFAULT_RETRYABLE_STATUS_CODES",
    "retry_if_error_present",
    "retry_if_retryable",
    "retry_on",
    "retry_on_http_status",
    # Exceptions
    "RetryKitError",
    "TransientError",
    "PermanentError",
    "BudgetExceededError",
    "MaxAttemptsExceededError",
    "MaxDurationExceededError",
]
