# formula/cursor.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Bounded character cursor backing the recursive-descent parser

"""Character cursor with a runaway-scan guard.

The cursor owns the input text and a scan position. Every ``peek`` and
``advance`` counts as one primitive operation; once the count exceeds the
configured ceiling the cursor raises ``RunawayScanError``. The ceiling bounds
the work of a single parse no matter how the grammar and the input interact.

A cursor belongs to exactly one parse call and is never reused.
"""

from typing import Optional

from .exceptions import RunawayScanError
from utils.logger import get_logger

DEFAULT_OPERATION_LIMIT = 1000


class Cursor:
    """Forward-only scanner over one input string.

    Attributes:
        text: The input being scanned
        operation_limit: Maximum number of counted operations
    """

    def __init__(self, text: str, operation_limit: int = DEFAULT_OPERATION_LIMIT):
        if operation_limit < 0:
            raise ValueError(f"operation_limit must be non-negative, got {operation_limit}")
        self.text = text
        self.operation_limit = operation_limit
        self._position = 0
        self._operation_count = 0
        self._logger = get_logger()

    @property
    def position(self) -> int:
        return self._position

    @property
    def operation_count(self) -> int:
        return self._operation_count

    def _count_operation(self):
        self._operation_count += 1
        if self._operation_count > self.operation_limit:
            self._logger.debug(
                f"Operation ceiling {self.operation_limit} exceeded at position {self._position}"
            )
            raise RunawayScanError(self.operation_limit, self._position)

    def is_at_end(self) -> bool:
        """Return True when every character has been consumed."""
        return self._position == len(self.text)

    def peek(self) -> Optional[str]:
        """Return the current character without consuming it, or None at end."""
        self._count_operation()
        if self.is_at_end():
            return None

        char = self.text[self._position]
        self._logger.debug(f"peek: {char!r}")
        return char

    def advance(self) -> Optional[str]:
        """Consume and return the current character, or None at end."""
        self._count_operation()
        if self.is_at_end():
            return None

        char = self.text[self._position]
        self._logger.debug(f"next: {char!r}")
        self._position += 1
        return char

    def match_and_advance(self, expected: str) -> bool:
        """Consume one character and report whether it was ``expected``.

        The character is consumed even when it does not match, so callers
        peek first when they need to keep the input intact.
        """
        return self.advance() == expected

    def skip_whitespace(self):
        """Consume consecutive ASCII spaces (tabs and newlines are not skipped)."""
        while self.peek() == " ":
            self.advance()
