"""
General-purpose retry predicates.

A retry predicate receives the error of the latest attempt (None when the
attempt succeeded) and answers whether another attempt is warranted.
"""

from typing import Callable

RetryPredicate = Callable[[BaseException | None], bool]


def retry_if_error_present(error: BaseException | None) -> bool:
    """Retry iff the latest attempt reported an error."""
    return error is not None


def retry_if_retryable(error: BaseException | None) -> bool:
    """Retry iff the error carries a truthy ``retryable`` flag."""
    return bool(getattr(error, "retryable", False))


def retry_on(*exception_types: type[BaseException]) -> RetryPredicate:
    """
    Build a predicate retrying only the given exception types.

    Args:
        exception_types: Exception classes worth another attempt

    Returns:
        Predicate returning True for instances of any of the types
    """
    if not exception_types:
        raise ValueError("retry_on() needs at least one exception type")

    def predicate(error: BaseException | None) -> bool:
        return isinstance(error, exception_types)

    return predicate
