"""
retrykit - Retry Predicates.

Classifiers deciding whether an attempt's error warrants another attempt.
"""

from .base import RetryPredicate, retry_if_error_present, retry_if_retryable, retry_on
from .http import DEFAULT_RETRYABLE_STATUS_CODES, retry_on_http_status

__all__ = [
    "RetryPredicate",
    "retry_if_error_present",
    "retry_if_retryable",
    "retry_on",
    "DEFAULT_RETRYABLE_STATUS_CODES",
    "retry_on_http_status",
]
