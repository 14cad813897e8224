"""
retrykit - Exception Hierarchy.

Retry-aware exceptions for operations run under a retry policy.
"""

from .base import (
    RetryKitError,
    TransientError,
    PermanentError,
    BudgetExceededError,
    MaxAttemptsExceededError,
    MaxDurationExceededError,
)

__all__ = [
    "RetryKitError",
    "TransientError",
    "PermanentError",
    "BudgetExceededError",
    "MaxAttemptsExceededError",
    "MaxDurationExceededError",
]
