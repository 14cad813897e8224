"""
Backoff strategies.

A strategy turns the state of a run into the delay to apply before the next
attempt. Strategies only read ``RunState.last_backoff``; the executor records
the applied delay back into the state.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from .state import RunState

_NS_PER_SECOND = 1_000_000_000


class BackoffKind(str, Enum):
    """Available backoff strategies."""

    FIXED = "fixed"  # delay = base
    EXPONENTIAL = "exponential"  # delay = initial, then last * factor


class BackoffStrategy(ABC):
    """Computes the pause between two attempts of a run."""

    @property
    @abstractmethod
    def kind(self) -> BackoffKind:
        ...

    @abstractmethod
    def compute(self, state: RunState) -> float:
        """
        Compute the delay before the next attempt.

        Args:
            state: Current run state (read-only for strategies)

        Returns:
            Delay in seconds
        """
        ...


@dataclass(frozen=True)
class FixedBackoff(BackoffStrategy):
    """Same delay before every attempt."""

    delay: float = 0.1

    def __post_init__(self):
        if self.delay < 0:
            raise ValueError(f"delay must be >= 0, got {self.delay}")

    @property
    def kind(self) -> BackoffKind:
        return BackoffKind.FIXED

    def compute(self, state: RunState) -> float:
        return self.delay


def compute_exponential_backoff(initial: float, last: float, factor: float) -> float:
    """
    Calculate the next exponential delay.

    Args:
        initial: Delay returned when no backoff has been applied yet
        last: Previously applied delay in seconds (0 for none)
        factor: Growth factor applied to the previous delay

    Returns:
        Next delay in seconds, truncated to nanosecond resolution
    """
    if last == 0:
        return initial
    last_ns = round(last * _NS_PER_SECOND)
    return int(last_ns * factor) / _NS_PER_SECOND


@dataclass(frozen=True)
class ExponentialBackoff(BackoffStrategy):
    """
    Delay that grows by ``factor`` after every attempt.

    With ``initial_delay=5`` and ``factor=2.0`` the delays run 5, 10, 20, 40...
    There is no cap.
    """

    initial_delay: float
    factor: float = 2.0

    def __post_init__(self):
        if self.initial_delay < 0:
            raise ValueError(f"initial_delay must be >= 0, got {self.initial_delay}")
        # growth works in whole nanoseconds; anything smaller truncates to 0
        if 0 < self.initial_delay < 1 / _NS_PER_SECOND:
            raise ValueError(
                f"initial_delay must be 0 or at least 1ns, got {self.initial_delay}"
            )
        if self.factor < 1.0:
            raise ValueError(f"factor must be >= 1.0, got {self.factor}")

    @property
    def kind(self) -> BackoffKind:
        return BackoffKind.EXPONENTIAL

    def compute(self, state: RunState) -> float:
        return compute_exponential_backoff(
            self.initial_delay, state.last_backoff, self.factor
        )


def make_backoff(
    kind: BackoffKind | str, delay: float, factor: float = 2.0
) -> BackoffStrategy:
    """
    Build a backoff strategy from its kind.

    Args:
        kind: Strategy kind, as enum member or its string value
        delay: Fixed delay, or initial delay for exponential backoff
        factor: Growth factor (exponential only)

    Returns:
        The configured strategy

    Raises:
        ValueError: If the kind is unknown
    """
    kind = BackoffKind(kind)
    if kind == BackoffKind.EXPONENTIAL:
        return ExponentialBackoff(initial_delay=delay, factor=factor)
    return FixedBackoff(delay=delay)
