"""
Base exception classes for retried operations.

Each exception includes a `retryable` flag indicating whether the failed
operation can be safely attempted again with the same inputs.
"""


class RetryKitError(Exception):
    """Base exception for all retrykit errors."""

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.retryable = retryable
        self.operation = operation

    def __str__(self) -> str:
        parts = [self.message]
        if self.operation:
            parts.insert(0, f"[{self.operation}]")
        return " ".join(parts)


class TransientError(RetryKitError):
    """Raised by an operation for a failure worth retrying. Always retryable."""

    def __init__(self, message: str = "Transient failure", **kwargs):
        super().__init__(message, retryable=True, **kwargs)


class PermanentError(RetryKitError):
    """Raised by an operation for a failure that will not go away. Not retryable."""

    def __init__(self, message: str = "Permanent failure", **kwargs):
        super().__init__(message, retryable=False, **kwargs)


class BudgetExceededError(RetryKitError):
    """
    Attached to a run that exhausted its retry budget without a real error.

    Only produced when the retry predicate asked for another attempt even
    though the operation reported no error.
    """

    def __init__(
        self,
        message: str = "Retry budget exceeded",
        *,
        stop_reason=None,
        attempts: int | None = None,
        **kwargs,
    ):
        super().__init__(message, retryable=False, **kwargs)
        self.stop_reason = stop_reason
        self.attempts = attempts

    def __str__(self) -> str:
        text = super().__str__()
        if self.attempts is not None:
            text = f"{text} (attempts: {self.attempts})"
        return text


class MaxAttemptsExceededError(BudgetExceededError):
    """The attempt budget ran out while the run was still retryable."""

    def __init__(self, message: str = "max attempts exceeded", **kwargs):
        super().__init__(message, **kwargs)


class MaxDurationExceededError(BudgetExceededError):
    """The time budget ran out while the run was still retryable."""

    def __init__(self, message: str = "max duration exceeded", **kwargs):
        super().__init__(message, **kwargs)
