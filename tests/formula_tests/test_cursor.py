# tests/formula_tests/test_cursor.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Test suite for the bounded character cursor

"""Test suite for cursor scanning primitives and the operation ceiling."""

import pytest
from formula.cursor import Cursor, DEFAULT_OPERATION_LIMIT
from formula.exceptions import RunawayScanError
from utils.logger import get_logger


class TestCursor:
    """Test cases for cursor lookahead, consumption and the runaway guard."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_peek_does_not_advance(self):
        cursor = Cursor("12")

        assert cursor.peek() == "1"
        assert cursor.peek() == "1"
        assert cursor.position == 0

    def test_advance_consumes_characters_in_order(self):
        cursor = Cursor("ab")

        assert cursor.advance() == "a"
        assert cursor.advance() == "b"
        assert cursor.position == 2
        assert cursor.is_at_end()

    def test_end_of_input_returns_none_without_moving(self):
        cursor = Cursor("x")
        cursor.advance()

        assert cursor.peek() is None
        assert cursor.advance() is None
        assert cursor.position == 1

    def test_empty_input_is_at_end(self):
        cursor = Cursor("")

        assert cursor.is_at_end()
        assert cursor.peek() is None

    def test_match_and_advance_on_match(self):
        cursor = Cursor("(1")

        assert cursor.match_and_advance("(") is True
        assert cursor.position == 1

    def test_match_and_advance_consumes_on_mismatch(self):
        """A failed match still moves past the character it examined."""
        cursor = Cursor("ab")

        assert cursor.match_and_advance("x") is False
        assert cursor.position == 1
        assert cursor.peek() == "b"

    def test_match_and_advance_at_end(self):
        cursor = Cursor("")

        assert cursor.match_and_advance(")") is False
        assert cursor.position == 0

    SKIP_CASES = [
        ("   1", 3, "1"),
        ("1", 0, "1"),
        ("    ", 4, None),
        ("  \t1", 2, "\t"),
        ("\n1", 0, "\n"),
    ]

    @pytest.mark.parametrize("text, position, next_char", SKIP_CASES)
    def test_skip_whitespace_only_skips_spaces(self, text, position, next_char):
        cursor = Cursor(text)
        cursor.skip_whitespace()

        assert cursor.position == position
        assert cursor.peek() == next_char

    def test_peek_and_advance_are_counted(self):
        cursor = Cursor("abc")
        cursor.peek()
        cursor.advance()
        cursor.is_at_end()

        assert cursor.operation_count == 2

    def test_operation_limit_raises_runaway_scan(self):
        cursor = Cursor("abc", operation_limit=2)
        cursor.peek()
        cursor.advance()

        with pytest.raises(RunawayScanError) as exc_info:
            cursor.peek()

        assert exc_info.value.limit == 2
        assert exc_info.value.position == 1
        self.logger.debug(f"Runaway message: {exc_info.value}")

    def test_operations_at_end_of_input_are_still_counted(self):
        """A loop that peeks at the end forever must still hit the ceiling."""
        cursor = Cursor("", operation_limit=10)

        with pytest.raises(RunawayScanError):
            while True:
                cursor.peek()

        assert cursor.operation_count == 11

    def test_default_limit(self):
        assert Cursor("1").operation_limit == DEFAULT_OPERATION_LIMIT == 1000

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError):
            Cursor("1", operation_limit=-1)
