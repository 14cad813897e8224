"""
Retry executor and decorators.
"""

import asyncio
import functools
import logging
import time
from typing import Any, Awaitable, Callable, ParamSpec, TypeVar

from .policy import RetryPolicy
from ..exceptions import RetryKitError
from .state import RunState, StopReason
from .stop import StopDecision, evaluate_stop

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

Operation = Callable[[RunState], Any]
AsyncOperation = Callable[[RunState], Awaitable[Any]]
RetryCallback = Callable[[RunState, float], None]


def _finish(state: RunState, decision: StopDecision) -> tuple[Any, BaseException | None, RunState]:
    reason = decision.reason
    if reason == StopReason.NON_RETRYABLE_ERROR and state.last_error is None:
        reason = StopReason.SUCCESS
    state.stop(reason, decision.message)
    logger.debug(
        f"Run stopped after {state.attempts} attempt(s): {reason.value}"
    )
    return state.result, state.last_error, state


def execute(
    operation: Operation,
    policy: RetryPolicy | None = None,
    *,
    on_retry: RetryCallback | None = None,
    sleep: Callable[[float], None] | None = None,
) -> tuple[Any, BaseException | None, RunState]:
    """
    Run an operation until it succeeds, turns non-retryable or runs out of budget.

    The operation receives the run state and either returns a value or raises.
    Raised exceptions are recorded as the attempt's error and handed back to
    the caller, never swallowed.

    Args:
        operation: Callable taking the RunState
        policy: Retry policy (default: RetryPolicy())
        on_retry: Optional callback(state, delay) called before each pause
        sleep: Function used to pause between attempts (default: time.sleep)

    Returns:
        Tuple of (last result, last error or None, final RunState). Check
        ``state.stop_reason`` to tell success from an exhausted budget.
    """
    if policy is None:
        policy = RetryPolicy()
    if sleep is None:
        sleep = time.sleep

    state = RunState()
    while True:
        state.attempts += 1
        try:
            result, error = operation(state), None
        except Exception as e:
            result, error = None, e
        state.result, state.last_error = result, error

        decision = evaluate_stop(state, policy)
        if not decision.should_continue:
            return _finish(state, decision)

        delay = policy.backoff.compute(state)
        logger.debug(f"Attempt {state.attempts} failed: {error!r}, waiting {delay:.3f}s")
        if on_retry:
            on_retry(state, delay)
        sleep(delay)
        state.last_backoff = delay


async def async_execute(
    operation: AsyncOperation,
    policy: RetryPolicy | None = None,
    *,
    on_retry: RetryCallback | None = None,
    sleep: Callable[[float], Awaitable[None]] | None = None,
) -> tuple[Any, BaseException | None, RunState]:
    """
    Async counterpart of ``execute`` for coroutine operations.

    Args:
        operation: Async callable taking the RunState
        policy: Retry policy (default: RetryPolicy())
        on_retry: Optional callback(state, delay) called before each pause
        sleep: Coroutine function used to pause (default: asyncio.sleep)

    Returns:
        Tuple of (last result, last error or None, final RunState)
    """
    if policy is None:
        policy = RetryPolicy()
    if sleep is None:
        sleep = asyncio.sleep

    state = RunState()
    while True:
        state.attempts += 1
        try:
            result, error = await operation(state), None
        except Exception as e:
            result, error = None, e
        state.result, state.last_error = result, error

        decision = evaluate_stop(state, policy)
        if not decision.should_continue:
            return _finish(state, decision)

        delay = policy.backoff.compute(state)
        logger.debug(f"Attempt {state.attempts} failed: {error!r}, waiting {delay:.3f}s")
        if on_retry:
            on_retry(state, delay)
        await sleep(delay)
        state.last_backoff = delay


def _label(error: BaseException, func: Callable) -> BaseException:
    if isinstance(error, RetryKitError) and error.operation is None:
        error.operation = func.__qualname__
    return error


def _retry_callback(
    policy: RetryPolicy,
    on_retry: Callable[[int, BaseException | None, float], None] | None,
) -> RetryCallback:
    def callback(state: RunState, delay: float) -> None:
        if on_retry:
            on_retry(state.attempts, state.last_error, delay)
        else:
            limit = policy.max_attempts if policy.attempt_limited else "inf"
            logger.warning(
                f"Retry {state.attempts}/{limit}: {state.last_error}, "
                f"waiting {delay:.1f}s"
            )

    return callback


def with_retry(
    policy: RetryPolicy | None = None,
    on_retry: Callable[[int, BaseException | None, float], None] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator for synchronous functions with retry logic.

    Args:
        policy: Retry policy (default: RetryPolicy())
        on_retry: Optional callback(attempt, error, delay) called before each retry

    Returns:
        Decorated function that returns the first successful value or raises
        the final error (the operation's own, or a budget error)
    """
    if policy is None:
        policy = RetryPolicy()
    callback = _retry_callback(policy, on_retry)

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            result, error, _ = execute(
                lambda state: func(*args, **kwargs), policy, on_retry=callback
            )
            if error is not None:
                raise _label(error, func)
            return result

        return wrapper

    return decorator


def async_with_retry(
    policy: RetryPolicy | None = None,
    on_retry: Callable[[int, BaseException | None, float], None] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator for async functions with retry logic.

    Args:
        policy: Retry policy (default: RetryPolicy())
        on_retry: Optional callback(attempt, error, delay) called before each retry

    Returns:
        Decorated async function with retry behavior
    """
    if policy is None:
        policy = RetryPolicy()
    callback = _retry_callback(policy, on_retry)

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            result, error, _ = await async_execute(
                lambda state: func(*args, **kwargs), policy, on_retry=callback
            )
            if error is not None:
                raise _label(error, func)
            return result

        return wrapper

    return decorator
