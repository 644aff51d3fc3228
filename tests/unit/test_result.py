"""Tests for the Success/Failure result type."""

from __future__ import annotations

import pytest

from exprcalc.core.errors import ResultUnwrapError
from exprcalc.core.result import Failure, Result, Success


class TestSuccess:
    def test_flags(self) -> None:
        result = Success(3)
        assert result.is_success
        assert not result.is_failure

    def test_map_transforms_value(self) -> None:
        assert Success(3).map(lambda v: v * 2) == Success(6)

    def test_bind_chains_next_step(self) -> None:
        assert Success(3).bind(lambda v: Success(str(v))) == Success("3")
        assert Success(3).bind(lambda v: Failure("nope")) == Failure("nope")

    def test_and_then_is_bind(self) -> None:
        assert Success(1).and_then(lambda v: Success(v + 1)) == Success(2)

    def test_match(self) -> None:
        assert Success(2).match(lambda v: v + 1, lambda m: -1) == 3

    def test_unwrap(self) -> None:
        assert Success("x").unwrap() == "x"


class TestFailure:
    def test_flags(self) -> None:
        result = Failure("bad")
        assert result.is_failure
        assert not result.is_success

    def test_map_passes_failure_through(self) -> None:
        failure = Failure("bad")
        assert failure.map(lambda v: v * 2) is failure

    def test_bind_short_circuits(self) -> None:
        calls: list[object] = []

        def step(v: object) -> Result[int]:
            calls.append(v)
            return Success(1)

        assert Failure("first").bind(step) == Failure("first")
        assert calls == []

    def test_match(self) -> None:
        assert Failure("bad").match(lambda v: "ok", lambda m: f"Error: {m}") == "Error: bad"

    def test_unwrap_raises(self) -> None:
        with pytest.raises(ResultUnwrapError, match="bad"):
            Failure("bad").unwrap()

    def test_pattern_matching(self) -> None:
        match Failure("bad"):
            case Success(value):
                pytest.fail(f"unexpected success {value}")
            case Failure(message):
                assert message == "bad"

    def test_frozen(self) -> None:
        failure = Failure("bad")
        with pytest.raises(AttributeError):
            failure.message = "worse"  # type: ignore[misc]


class TestChaining:
    def test_first_failure_wins(self) -> None:
        result = (
            Success(1)
            .bind(lambda v: Failure("step two"))
            .bind(lambda v: Failure("step three"))
        )
        assert result == Failure("step two")

    def test_success_and_failure_never_equal(self) -> None:
        assert Success("x") != Failure("x")
