# formula/evaluator.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Tree-walking evaluator for parsed formulas

"""Reduce a formula tree to a floating-point number.

Each ``BinaryChain`` holds a single precedence tier, because the parser folds
multiplicative chains into single operands of the additive tier. A plain
left fold over the chain is therefore enough; no precedence logic lives here.

Arithmetic follows IEEE-754 doubles. Division by zero gives an infinity or
NaN instead of raising, so evaluation never fails on a well-formed tree.
"""

import math

from .ast_nodes import BinaryChain, Formula, NumberLiteral, Operator, Parenthesized


def compute_formula(formula: Formula) -> float:
    """Evaluate ``formula`` and return its value.

    Args:
        formula: Tree produced by the parser or built by hand

    Returns:
        The value as a float; may be ``inf``, ``-inf`` or ``nan``

    Raises:
        TypeError: ``formula`` is not a formula node
    """
    if isinstance(formula, NumberLiteral):
        return _to_float(formula.value)

    if isinstance(formula, Parenthesized):
        return compute_formula(formula.inner)

    if isinstance(formula, BinaryChain):
        first = formula.elements[0]
        result = compute_formula(first.operand)
        pending = first.operator

        for element in formula.elements[1:]:
            result = _apply(pending, result, compute_formula(element.operand))
            pending = element.operator

        return result

    raise TypeError(f"Not a formula node: {type(formula).__name__}")


def _apply(operator: Operator, lhs: float, rhs: float) -> float:
    if operator is Operator.ADD:
        return lhs + rhs
    if operator is Operator.SUB:
        return lhs - rhs
    if operator is Operator.MUL:
        return lhs * rhs
    if operator is Operator.DIV:
        return _divide(lhs, rhs)
    raise TypeError(f"Chain element is missing its operator: {operator!r}")


def _divide(lhs: float, rhs: float) -> float:
    try:
        return lhs / rhs
    except ZeroDivisionError:
        # Signed zero decides the sign of the infinity, as in IEEE-754
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)


def _to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf
