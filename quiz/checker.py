# quiz/checker.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Judging of player-submitted answers against a quiz

"""Judge a player's expression against a quiz.

An answer is correct when it parses as one complete formula, uses every card
of the hand exactly once (in any order), and evaluates to the target.
"""

import math
from collections import Counter
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from formula import ParseError, compute_formula, parse_formula_strict
from formula.ast_nodes import BinaryChain, Formula, NumberLiteral, Parenthesized
from formula.cursor import DEFAULT_OPERATION_LIMIT
from utils.logger import get_logger

from .generator import Quiz

# Floating-point evaluation makes e.g. 7 / 3 * 3 land a hair off 7
_TOLERANCE = 1e-9


class Verdict(Enum):
    """Outcome of judging one submitted answer."""

    CORRECT = auto()
    UNPARSEABLE = auto()
    WRONG_CARDS = auto()
    WRONG_VALUE = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Judgement:
    """Result of ``judge_answer``.

    Attributes:
        verdict: Outcome category
        message: Human-readable explanation
        value: The expression's value when it parsed, else None
    """

    verdict: Verdict
    message: str
    value: Optional[float] = None

    @property
    def accepted(self) -> bool:
        return self.verdict is Verdict.CORRECT


def collect_numbers(formula: Formula) -> List[int]:
    """Return the literal values of a formula in left-to-right order.

    Raises:
        TypeError: ``formula`` is not a formula node
    """
    if isinstance(formula, NumberLiteral):
        return [formula.value]

    if isinstance(formula, Parenthesized):
        return collect_numbers(formula.inner)

    if isinstance(formula, BinaryChain):
        numbers: List[int] = []
        for element in formula.elements:
            numbers.extend(collect_numbers(element.operand))
        return numbers

    raise TypeError(f"Not a formula node: {type(formula).__name__}")


def judge_answer(
    text: str, quiz: Quiz, operation_limit: int = DEFAULT_OPERATION_LIMIT
) -> Judgement:
    """Judge ``text`` as an answer to ``quiz``.

    Args:
        text: Expression typed by the player
        quiz: The quiz being answered
        operation_limit: Ceiling on primitive cursor operations for the parse

    Returns:
        The judgement

    Raises:
        RunawayScanError: Parsing exceeded ``operation_limit``
    """
    logger = get_logger()

    try:
        formula = parse_formula_strict(text, operation_limit)
    except ParseError as e:
        logger.debug(f"Answer rejected as unparseable: {e}")
        return Judgement(Verdict.UNPARSEABLE, str(e))

    value = compute_formula(formula)

    used = Counter(collect_numbers(formula))
    dealt = Counter(quiz.cards)
    if used != dealt:
        missing = sorted((dealt - used).elements())
        extra = sorted((used - dealt).elements())
        details = []
        if missing:
            details.append(f"unused cards {missing}")
        if extra:
            details.append(f"numbers not in hand {extra}")
        return Judgement(
            Verdict.WRONG_CARDS, f"Answer must use each card once: {', '.join(details)}", value
        )

    if not (math.isfinite(value) and math.isclose(value, quiz.target, rel_tol=_TOLERANCE, abs_tol=_TOLERANCE)):
        return Judgement(Verdict.WRONG_VALUE, f"Answer is {value:g}, not {quiz.target}", value)

    return Judgement(Verdict.CORRECT, f"{formula} = {quiz.target}", value)
