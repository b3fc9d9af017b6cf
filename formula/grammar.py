# formula/grammar.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Recursive-descent parser for arithmetic formulas over number cards

"""Recursive-descent grammar for player-submitted arithmetic formulas.

Grammar (lowest to highest binding):

    Additive       := Multiplicative (('+' | '-') Multiplicative)*
    Multiplicative := Terminal (('*' | '/') Terminal)*
    Terminal       := Number | '(' Additive ')'
    Number         := digit+

Every production either returns a node, with the cursor moved past the text it
consumed, or returns None. A failed production leaves the cursor where it
stopped scanning; nothing is rewound and no alternative is tried, so the
caller fails as well.

Spaces are allowed between tokens. A production does not need to reach the
end of the input; callers that want a whole-input parse check
``is_finished()`` afterwards.
"""

from typing import FrozenSet, List, Optional

from .ast_nodes import (
    ADDITIVE,
    MULTIPLICATIVE,
    BinaryChain,
    ChainElement,
    Formula,
    NumberLiteral,
    Operator,
    Parenthesized,
)
from .cursor import DEFAULT_OPERATION_LIMIT, Cursor
from utils.logger import get_logger

_DIGITS = "0123456789"


class FormulaParser:
    """Recursive-descent parser over a single ``Cursor``.

    One instance parses one text. ``RunawayScanError`` raised by the cursor
    passes through every production untouched.

    Attributes:
        cursor: The cursor owned by this parser
    """

    def __init__(self, text: str, operation_limit: int = DEFAULT_OPERATION_LIMIT):
        self.cursor = Cursor(text, operation_limit)
        self._logger = get_logger()
        self._logger.debug("--- parsing start ---")

    def parse(self) -> Optional[Formula]:
        """Parse the additive production once from the start of the text."""
        return self.parse_additive()

    def is_finished(self) -> bool:
        """Return True when the whole text has been consumed."""
        return self.cursor.is_at_end()

    def parse_additive(self) -> Optional[Formula]:
        """Collect ``Multiplicative (('+' | '-') Multiplicative)*``.

        An operand that fails to match fails the chain, whether it is the
        first one or follows an operator that was already consumed.
        """
        self._logger.debug("parsing additive")
        elements: List[ChainElement] = []

        while True:
            self.cursor.skip_whitespace()
            operand = self.parse_multiplicative()
            if operand is None:
                return _traced(self._logger, None)

            operator = self._peek_operator(ADDITIVE)
            elements.append(ChainElement(operand, operator))
            if operator is None:
                break

        return _traced(self._logger, BinaryChain(tuple(elements)))

    def parse_multiplicative(self) -> Optional[Formula]:
        self._logger.debug("parsing multiplicative")
        elements: List[ChainElement] = []

        while True:
            self.cursor.skip_whitespace()
            operand = self.parse_terminal()
            if operand is None:
                return _traced(self._logger, None)

            operator = self._peek_operator(MULTIPLICATIVE)
            elements.append(ChainElement(operand, operator))
            if operator is None:
                break

        return _traced(self._logger, BinaryChain(tuple(elements)))

    def _peek_operator(self, operators: FrozenSet[Operator]) -> Optional[Operator]:
        """Consume and return the next operator if it belongs to ``operators``."""
        self.cursor.skip_whitespace()
        operator = Operator.from_symbol(self.cursor.peek())
        if operator not in operators:
            return None
        self.cursor.match_and_advance(operator.value)
        return operator

    def parse_terminal(self) -> Optional[Formula]:
        self._logger.debug("parsing terminal")
        self.cursor.skip_whitespace()

        if self.cursor.peek() == "(":
            self.cursor.match_and_advance("(")
            inner = self.parse_additive()
            if inner is None:
                return None
            if not self.cursor.match_and_advance(")"):
                return None
            return _traced(self._logger, Parenthesized(inner))

        return self.parse_number()

    def parse_number(self) -> Optional[NumberLiteral]:
        self._logger.debug("parsing number")
        value = 0
        found = False

        while not self.cursor.is_at_end():
            char = self.cursor.peek()
            if char not in _DIGITS:
                break
            found = True
            self.cursor.match_and_advance(char)
            value = value * 10 + _DIGITS.index(char)

        return _traced(self._logger, NumberLiteral(value) if found else None)


def _traced(logger, value):
    # Type name only; repr walks the whole subtree
    logger.debug(f"returning {type(value).__name__}")
    return value
