"""Tests for utility helpers: name validation, argument normalization, futures."""

import string
from concurrent.futures import Future
from unittest.mock import MagicMock

import pytest

from hookquery.exceptions import ConstructionError
from hookquery.utils import attach, chain, flatten_args, normalize_direction, validate_collection_name

VALID_CHARS = string.ascii_lowercase + string.digits + "_/"


class TestValidateCollectionName:
    @pytest.mark.parametrize("name", ["posts", "a", "_", "/", "app/posts", "logs_2024", "0", VALID_CHARS])
    def test_valid(self, name):
        assert validate_collection_name(name) == name

    @pytest.mark.parametrize("char", sorted(set(string.printable) - set(VALID_CHARS)))
    def test_every_other_printable_char_is_rejected(self, char):
        with pytest.raises(ConstructionError):
            validate_collection_name(f"posts{char}")

    @pytest.mark.parametrize("name", ["", None, 42, b"posts", "Ünicode", "posts\n"])
    def test_invalid(self, name):
        with pytest.raises(ConstructionError) as exc_info:
            validate_collection_name(name)
        assert exc_info.value.details == {"name": name}


class TestNormalizeDirection:
    @pytest.mark.parametrize(
        "direction,expected",
        [
            (None, "asc"),
            (0, "asc"),
            ("", "asc"),
            (False, "asc"),
            (1, "asc"),
            (2, "asc"),
            (-1, "desc"),
            (-1.0, "desc"),
            (-1.5, "desc"),
            (float("nan"), "asc"),
            (float("inf"), "asc"),
            (float("-inf"), "asc"),
            ("desc", "desc"),
            ("ASC", "ASC"),
            ("random", "random"),
        ],
    )
    def test_normalize(self, direction, expected):
        assert normalize_direction(direction) == expected

    def test_true_is_passed_through(self):
        assert normalize_direction(True) is True


class TestFlattenArgs:
    def test_variadic(self):
        assert flatten_args(("a", "b")) == ("a", "b")

    def test_single_sequence(self):
        assert flatten_args((["a", "b"],)) == ("a", "b")
        assert flatten_args((("a",),)) == ("a",)

    def test_empty(self):
        assert flatten_args(()) == ()


class TestAttach:
    def test_returns_same_future(self):
        future: Future = Future()
        assert attach(future, MagicMock()) is future
        assert attach(future) is future

    def test_success(self):
        future: Future = Future()
        on_complete, on_error = MagicMock(), MagicMock()
        attach(future, on_complete, on_error)
        future.set_result("ok")
        on_complete.assert_called_once_with("ok")
        on_error.assert_not_called()

    def test_failure(self):
        future: Future = Future()
        on_complete, on_error = MagicMock(), MagicMock()
        attach(future, on_complete, on_error)
        error = RuntimeError("down")
        future.set_exception(error)
        on_complete.assert_not_called()
        on_error.assert_called_once_with(error)

    def test_failure_without_on_error_is_silent(self):
        future: Future = Future()
        on_complete = MagicMock()
        attach(future, on_complete)
        future.set_exception(RuntimeError("down"))
        on_complete.assert_not_called()

    def test_already_settled_future_runs_immediately(self):
        future: Future = Future()
        future.set_result(3)
        on_complete = MagicMock()
        attach(future, on_complete)
        on_complete.assert_called_once_with(3)


class TestChain:
    def test_maps_result(self):
        future: Future = Future()
        chained = chain(future, lambda x: x * 2)
        future.set_result(21)
        assert chained.result() == 42

    def test_propagates_failure(self):
        future: Future = Future()
        chained = chain(future, lambda x: x)
        error = RuntimeError("down")
        future.set_exception(error)
        assert chained.exception() is error

    def test_failure_in_fn(self):
        future: Future = Future()
        chained = chain(future, lambda x: 1 / x)
        future.set_result(0)
        assert isinstance(chained.exception(), ZeroDivisionError)

    def test_cancellation(self):
        future: Future = Future()
        chained = chain(future, lambda x: x)
        future.cancel()
        assert chained.cancelled()
