"""Tests for RetryPolicy - behavior focused."""

import dataclasses
from datetime import timedelta

import pytest
from retrykit.predicates import retry_if_error_present
from retrykit.retry import ExponentialBackoff, FixedBackoff, RetryPolicy, StopReason


class TestRetryPolicyDefaults:
    """Test default configuration."""

    def test_default_predicate_retries_only_on_error(self):
        """Default predicate: retry iff an error is present."""
        policy = RetryPolicy()

        assert policy.retry_predicate is retry_if_error_present
        assert policy.retry_predicate(ValueError("boom")) is True
        assert policy.retry_predicate(None) is False

    def test_default_backoff_is_fixed_100ms(self):
        assert RetryPolicy().backoff == FixedBackoff(0.1)

    def test_default_has_no_duration_limit(self):
        policy = RetryPolicy()

        assert policy.attempt_limited is True
        assert policy.duration_limited is False


class TestRetryPolicyLimits:
    """Test how unset limits are interpreted."""

    @pytest.mark.parametrize("max_attempts", [0, -1])
    def test_non_positive_attempts_means_unbounded(self, max_attempts):
        assert RetryPolicy(max_attempts=max_attempts).attempt_limited is False

    @pytest.mark.parametrize("max_duration", [None, 0, -5.0])
    def test_non_positive_duration_means_unbounded(self, max_duration):
        assert RetryPolicy(max_duration=max_duration).duration_limited is False

    def test_rejects_non_integer_attempts(self):
        with pytest.raises(TypeError):
            RetryPolicy(max_attempts=2.5)

    def test_timedelta_duration_is_stored_as_seconds(self):
        """A time span given as timedelta becomes float seconds."""
        policy = RetryPolicy(max_duration=timedelta(seconds=1, milliseconds=500))

        assert policy.max_duration == 1.5
        assert policy.duration_limited is True

    def test_timedelta_duration_bounds_a_run(self):
        """A timedelta budget works inside the loop, not only at construction."""
        policy = RetryPolicy(
            max_attempts=3,
            max_duration=timedelta(seconds=60),
            backoff=FixedBackoff(0),
        )

        def operation(state):
            raise RuntimeError("down")

        _, error, state = policy.execute(operation, sleep=lambda delay: None)

        assert isinstance(error, RuntimeError)
        assert state.stop_reason == StopReason.MAX_ATTEMPTS_EXCEEDED

    @pytest.mark.parametrize("max_duration", ["10", True, [1.0]])
    def test_rejects_non_numeric_duration(self, max_duration):
        with pytest.raises(TypeError):
            RetryPolicy(max_duration=max_duration)

    def test_rejects_non_strategy_backoff(self):
        with pytest.raises(TypeError):
            RetryPolicy(backoff=0.1)

    def test_rejects_non_callable_predicate(self):
        with pytest.raises(TypeError):
            RetryPolicy(retry_predicate=True)

    def test_policy_is_immutable(self):
        """Policies are shared across runs, so fields cannot change."""
        policy = RetryPolicy()

        with pytest.raises(dataclasses.FrozenInstanceError):
            policy.max_attempts = 99


class TestRetryPolicyPresets:
    """Test preset policies."""

    def test_aggressive_preset_has_more_attempts(self):
        default = RetryPolicy()
        aggressive = RetryPolicy.aggressive()

        assert aggressive.max_attempts > default.max_attempts
        assert isinstance(aggressive.backoff, ExponentialBackoff)
        assert aggressive.duration_limited

    def test_conservative_preset_has_fewer_attempts(self):
        assert RetryPolicy.conservative().max_attempts < RetryPolicy().max_attempts

    def test_no_retry_preset_runs_once(self):
        calls = []

        def operation(state):
            calls.append(state.attempts)
            raise RuntimeError("down")

        _, error, state = RetryPolicy.no_retry().execute(operation)

        assert calls == [1]
        assert isinstance(error, RuntimeError)
        assert state.stop_reason == StopReason.MAX_ATTEMPTS_EXCEEDED
