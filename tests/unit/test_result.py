"""Tests for the Ok/Err result type."""

from __future__ import annotations

import pytest

from schemalang.core.result import Err, Ok, err, ok


class TestOk:
    def test_is_ok(self) -> None:
        assert ok(1).is_ok() is True
        assert ok(1).is_error() is False

    def test_unwrap_returns_value(self) -> None:
        assert ok(1).unwrap() == 1

    def test_map_transforms_value(self) -> None:
        assert ok(1).map(lambda v: v + 1).unwrap() == 2

    def test_flat_map_returns_mapper_result(self) -> None:
        assert ok(1).flat_map(lambda v: ok(v + 1)).unwrap() == 2

    def test_flat_map_can_fail(self) -> None:
        result = ok(1).flat_map(lambda _: err(ValueError("failure")))
        assert result.is_error()

    def test_or_else_keeps_value(self) -> None:
        assert ok(1).or_else(lambda _: ok(2)).unwrap() == 1

    def test_or_else_does_not_call_mapper(self) -> None:
        def boom(_: Exception) -> Ok[int, Exception]:
            raise AssertionError("must not be called")

        assert ok(1).or_else(boom).unwrap() == 1


class TestErr:
    def test_is_error(self) -> None:
        assert err(ValueError("oops")).is_ok() is False
        assert err(ValueError("oops")).is_error() is True

    def test_unwrap_raises_wrapped_error(self) -> None:
        error = ValueError("oops")
        with pytest.raises(ValueError) as exc_info:
            err(error).unwrap()
        assert exc_info.value is error

    def test_map_is_noop(self) -> None:
        error = ValueError("oops")
        result = err(error).map(lambda v: v + 1)
        assert isinstance(result, Err)
        assert result.error is error

    def test_flat_map_is_noop(self) -> None:
        error = ValueError("oops")
        result = err(error).flat_map(lambda v: ok(v + 1))
        assert isinstance(result, Err)
        assert result.error is error

    def test_or_else_can_change_error(self) -> None:
        other = ValueError("other")
        result = err(ValueError("oops")).or_else(lambda _: err(other))
        with pytest.raises(ValueError) as exc_info:
            result.unwrap()
        assert exc_info.value is other

    def test_or_else_can_recover(self) -> None:
        assert err(ValueError("oops")).or_else(lambda _: ok(1)).unwrap() == 1

    def test_or_else_receives_error(self) -> None:
        error = ValueError("oops")
        seen: list[Exception] = []
        err(error).or_else(lambda e: seen.append(e) or ok(None))
        assert seen == [error]
