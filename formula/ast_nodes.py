# formula/ast_nodes.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Formula tree node classes for arithmetic expressions over cards

"""Formula tree types produced by the parser and read by the evaluator.

A formula is one of three immutable, hashable variants:

    NumberLiteral: a non-negative integer leaf
    Parenthesized: explicit grouping around exactly one inner formula
    BinaryChain: a left-to-right chain of operands at one precedence tier

The variants do not share behaviour. Code that walks a tree dispatches on the
concrete type with ``isinstance`` and treats any other type as a programming
error. ``str()`` of every node renders source text that parses back to an
equal tree.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class Operator(Enum):
    """Binary arithmetic operators recognised by the grammar."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: Optional[str]) -> Optional[Operator]:
        """Return the operator spelled by ``symbol``, or None if there is none."""
        for operator in cls:
            if operator.value == symbol:
                return operator
        return None


# Operators bound by each precedence tier
ADDITIVE = frozenset({Operator.ADD, Operator.SUB})
MULTIPLICATIVE = frozenset({Operator.MUL, Operator.DIV})


@dataclass(frozen=True, slots=True)
class NumberLiteral:
    """Non-negative integer leaf.

    Attributes:
        value: The literal's integer value
    """

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Parenthesized:
    """Explicit grouping around a single inner formula.

    Evaluation-wise this is the identity; it exists so that the tree keeps
    the player's parentheses.

    Attributes:
        inner: The grouped formula
    """

    inner: Formula

    def __str__(self) -> str:
        return f"({self.inner})"


@dataclass(frozen=True, slots=True)
class ChainElement:
    """One operand of a chain plus the operator linking it to the next one.

    Attributes:
        operand: Formula for this position in the chain
        operator: Operator applied between this operand and the next, or
            None for the last element
    """

    operand: Formula
    operator: Optional[Operator] = None


@dataclass(frozen=True, slots=True)
class BinaryChain:
    """Left-to-right chain of operands at one precedence tier.

    ``elements`` is never empty. A single element is a chain with no
    operator applied.

    Attributes:
        elements: Ordered chain elements
    """

    elements: Tuple[ChainElement, ...]

    def __post_init__(self):
        if not self.elements:
            raise ValueError("BinaryChain requires at least one element")

    def __str__(self) -> str:
        parts = []
        for element in self.elements:
            parts.append(str(element.operand))
            if element.operator is not None:
                parts.append(str(element.operator))
        return " ".join(parts)


Formula = Union[NumberLiteral, Parenthesized, BinaryChain]
