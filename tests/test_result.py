"""Tests for Result pattern implementation."""

from __future__ import annotations

import pytest

from core.result import Failure, Success, failure, success


class TestSuccess:
    """Tests for Success class."""

    def test_is_success_returns_true(self) -> None:
        """Success.is_success() should return True."""
        result = Success({"access_token": "tok"})

        assert result.is_success() is True
        assert result.is_failure() is False

    def test_unwrap_returns_value(self) -> None:
        """Success.unwrap() should return the contained value."""
        result = Success([{"id": "ad-1"}])

        assert result.unwrap() == [{"id": "ad-1"}]

    def test_unwrap_or_ignores_default(self) -> None:
        """Success.unwrap_or() should return value, ignoring default."""
        result = Success("tok")

        assert result.unwrap_or("fallback") == "tok"

    def test_map_transforms_value(self) -> None:
        """Success.map() should transform the contained value."""
        result = Success({"status": "queued"})

        mapped = result.map(lambda body: body["status"])

        assert mapped.unwrap() == "queued"

    def test_and_then_chains_success(self) -> None:
        """Success.and_then() should return whatever the function returns."""
        result = Success({"access_token": "tok"})

        chained = result.and_then(lambda body: Success(body["access_token"]))

        assert chained == Success("tok")

    def test_and_then_can_fail(self) -> None:
        """Success.and_then() can turn a success into a failure."""
        result = Success({})

        chained = result.and_then(lambda _body: Failure("missing token"))

        assert chained.is_failure()
        assert chained.error == "missing token"


class TestFailure:
    """Tests for Failure class."""

    def test_is_failure_returns_true(self) -> None:
        """Failure.is_failure() should return True."""
        result = Failure("error")

        assert result.is_failure() is True
        assert result.is_success() is False

    def test_unwrap_raises_value_error(self) -> None:
        """Failure.unwrap() should raise ValueError."""
        result = Failure("invalid_grant")

        with pytest.raises(ValueError, match="Cannot unwrap Failure: invalid_grant"):
            result.unwrap()

    def test_unwrap_or_returns_default(self) -> None:
        """Failure.unwrap_or() should return the default value."""
        result: Failure[str] = Failure("error")

        assert result.unwrap_or([]) == []

    def test_map_returns_self(self) -> None:
        """Failure.map() should return self unchanged."""
        result: Failure[str] = Failure("error")

        assert result.map(lambda x: x) is result

    def test_and_then_skips_function(self) -> None:
        """Failure.and_then() should not call the chained function."""
        result: Failure[str] = Failure("network down")
        called = []

        chained = result.and_then(lambda body: called.append(body) or Success(body))

        assert chained is result
        assert called == []


class TestHelpers:
    """Tests for success() and failure() helpers."""

    def test_success_creates_success(self) -> None:
        """success() should create a Success instance."""
        result = success(42)

        assert isinstance(result, Success)
        assert result.value == 42

    def test_failure_creates_failure(self) -> None:
        """failure() should create a Failure instance."""
        result = failure("error message")

        assert isinstance(result, Failure)
        assert result.error == "error message"
