"""
HTTP-aware retry predicates for operations built on httpx.
"""

from typing import Iterable

import httpx

from .base import RetryPredicate

DEFAULT_RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def retry_on_http_status(
    status_codes: Iterable[int] = DEFAULT_RETRYABLE_STATUS_CODES,
    retry_transport_errors: bool = True,
) -> RetryPredicate:
    """
    Build a predicate for httpx failures.

    Retries ``httpx.HTTPStatusError`` (as raised by
    ``Response.raise_for_status()``) when the status is in ``status_codes``,
    and connection-level ``httpx.TransportError`` unless disabled.

    Args:
        status_codes: HTTP statuses that trigger a retry
        retry_transport_errors: Retry connect/read failures and timeouts

    Returns:
        Retry predicate
    """
    codes = frozenset(status_codes)

    def predicate(error: BaseException | None) -> bool:
        if isinstance(error, httpx.HTTPStatusError):
            return error.response.status_code in codes
        if isinstance(error, httpx.TransportError):
            return retry_transport_errors
        return False

    return predicate
