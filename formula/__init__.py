# formula/__init__.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Formula parsing and evaluation components for player-submitted answers

"""Arithmetic formula parsing and evaluation.

A player answers a quiz by typing an expression over the cards, for example
``(3 + 5) * 2 - 4 / 4``. This package turns that text into a formula tree
with a recursive-descent parser and reduces the tree to a number.

Core Functions:
    parse_formula: Parse text into a formula tree, or None if it does not match
    parse_formula_strict: Parse text that must be one complete formula
    compute_formula: Evaluate a formula tree to a float

Grammar Features:
    - Non-negative integer literals
    - ``+ -`` below ``* /`` in precedence, both left-associative
    - Parenthetical grouping
    - Spaces between tokens

Example:
    >>> from formula import parse_formula, compute_formula
    >>> compute_formula(parse_formula("(1 + 2) * 3"))
    9.0
"""

from typing import Optional

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
from .evaluator import compute_formula
from .exceptions import ParseError, RunawayScanError
from .grammar import FormulaParser
from utils.logger import get_logger


def parse_formula(text: str, operation_limit: int = DEFAULT_OPERATION_LIMIT) -> Optional[Formula]:
    """Parse arithmetic text into a formula tree.

    A fresh parser and cursor are built for every call. Unconsumed trailing
    text is not an error here: ``"1+2)"`` parses as ``1 + 2``.

    Args:
        text: Expression typed by the player
        operation_limit: Ceiling on primitive cursor operations

    Returns:
        Root of the formula tree, or None when the text does not match

    Raises:
        RunawayScanError: The parse needed more than ``operation_limit``
            cursor operations
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {text!r}")

    result = FormulaParser(text, operation_limit).parse()

    if result is None:
        logger.debug("Formula did not match the grammar")
    else:
        logger.debug(f"Formula parsed into {type(result).__name__}")
    return result


def parse_formula_strict(text: str, operation_limit: int = DEFAULT_OPERATION_LIMIT) -> Formula:
    """Parse text that must consist of exactly one formula.

    Trailing spaces are accepted; any other unconsumed text is rejected.

    Args:
        text: Expression typed by the player
        operation_limit: Ceiling on primitive cursor operations

    Returns:
        Root of the formula tree

    Raises:
        ParseError: The text is empty, malformed or has trailing input
        RunawayScanError: The parse needed more than ``operation_limit``
            cursor operations
    """
    logger = get_logger()
    logger.debug(f"Strictly parsing formula: {text!r}")

    parser = FormulaParser(text, operation_limit)
    result = parser.parse()

    if result is None:
        if text.strip(" ") == "":
            raise ParseError("Input formula is empty.")
        raise ParseError(
            f"Failed to parse formula (stopped at position {parser.cursor.position})."
        )

    parser.cursor.skip_whitespace()
    if not parser.is_finished():
        position = parser.cursor.position
        raise ParseError(
            f"Unexpected {text[position]!r} at position {position} after a complete formula."
        )

    return result


__all__ = [
    "parse_formula",
    "parse_formula_strict",
    "compute_formula",
    "Formula",
    "NumberLiteral",
    "Parenthesized",
    "BinaryChain",
    "ChainElement",
    "Operator",
    "ADDITIVE",
    "MULTIPLICATIVE",
    "Cursor",
    "FormulaParser",
    "DEFAULT_OPERATION_LIMIT",
    "ParseError",
    "RunawayScanError",
]

__version__ = "1.0.0"
__description__ = "Arithmetic formula parsing and evaluation for Krypto"
