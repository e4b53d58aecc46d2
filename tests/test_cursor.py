"""Tests for optscan.parser.cursor."""

import pytest

from optscan.parser.cursor import ArgumentCursor
from optscan.parser.errors import CursorError


class TestArgumentCursor:
    def test_consumes_in_order(self) -> None:
        cursor = ArgumentCursor(["a", "b"])
        assert cursor.remaining == 2
        assert cursor.consume() == "a"
        assert cursor.consume() == "b"
        assert cursor.consume() is None
        assert cursor.remaining == 0

    def test_peek_does_not_advance(self) -> None:
        cursor = ArgumentCursor(["a"])
        assert cursor.peek() == "a"
        assert cursor.position == 0
        cursor.consume()
        assert cursor.peek() is None

    def test_unconsume_rewinds_one_token(self) -> None:
        cursor = ArgumentCursor(["a", "b", "c"])
        cursor.consume()
        cursor.consume()
        cursor.unconsume()
        assert cursor.rest() == ["b", "c"]
        assert cursor.span(0) == ["a"]

    def test_unconsume_depth_is_one(self) -> None:
        cursor = ArgumentCursor(["a", "b"])
        cursor.consume()
        cursor.consume()
        cursor.unconsume()
        with pytest.raises(CursorError):
            cursor.unconsume()

    def test_unconsume_without_consume(self) -> None:
        with pytest.raises(CursorError):
            ArgumentCursor(["a"]).unconsume()

    def test_consume_at_end_keeps_rewind_target(self) -> None:
        cursor = ArgumentCursor(["a"])
        cursor.consume()
        assert cursor.consume() is None
        cursor.unconsume()
        assert cursor.rest() == ["a"]

    def test_does_not_modify_argv(self) -> None:
        argv = ["a", "b"]
        cursor = ArgumentCursor(argv)
        cursor.consume()
        assert argv == ["a", "b"]
        assert cursor.rest() == ["b"]

    def test_start_out_of_range(self) -> None:
        with pytest.raises(CursorError):
            ArgumentCursor(["a"], start=2)
        assert ArgumentCursor(["a", "b"], start=1).rest() == ["b"]
