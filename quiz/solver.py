# quiz/solver.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Exhaustive answer search over every formula shape for a hand of cards

"""Brute-force solver for Krypto hands.

A formula shape is a binary tree whose leaves are card positions and whose
inner nodes are operators. For a hand of ``n`` cards every shape over the
positions ``0..n-1`` is enumerated once and cached; each distinct ordering of
the hand is then plugged into every shape.

Values are computed with exact rational arithmetic (``fractions.Fraction``),
so ``7 / 3 * 3`` equals ``7`` exactly. Shapes that divide by zero are
skipped.

Answers are returned as ordinary formula trees in fully parenthesized form,
so ``str(answer)`` reads ``((1 + 2) * 3)`` and ``compute_formula(answer)``
works on them directly.
"""

import itertools
from fractions import Fraction
from functools import lru_cache
from typing import Iterable, Iterator, List, Sequence, Set, Tuple, Union

from formula.ast_nodes import BinaryChain, ChainElement, Formula, NumberLiteral, Operator, Parenthesized
from utils.logger import get_logger

MAX_HAND_SIZE = 5

# Survey defaults: a deck holds three copies of each card from 1 to 10
MAX_CARD_NUMBER = 10
CARD_DUPLICATES = 3
NUM_HAND_CARDS = 5

# A leaf is a card position; an inner node is (operator, left, right)
Shape = Union[int, Tuple[Operator, "Shape", "Shape"]]


def _enumerate_shapes(indices: Tuple[int, ...]) -> List[Shape]:
    if len(indices) == 1:
        return [indices[0]]

    shapes: List[Shape] = []
    for break_at in range(1, len(indices)):
        for left in _enumerate_shapes(indices[:break_at]):
            for right in _enumerate_shapes(indices[break_at:]):
                for operator in Operator:
                    shapes.append((operator, left, right))
    return shapes


@lru_cache(maxsize=None)
def formula_shapes(n: int) -> Tuple[Shape, ...]:
    """Return every formula shape over ``n`` card positions.

    Args:
        n: Hand size, between 1 and ``MAX_HAND_SIZE``

    Returns:
        All shapes, computed once per ``n``

    Raises:
        ValueError: ``n`` is out of range
    """
    if not 1 <= n <= MAX_HAND_SIZE:
        raise ValueError(f"Hand size must be between 1 and {MAX_HAND_SIZE}, got {n}")

    shapes = tuple(_enumerate_shapes(tuple(range(n))))
    get_logger().debug(f"Enumerated {len(shapes)} formula shapes for {n} cards")
    return shapes


def _evaluate(shape: Shape, values: Sequence[int]) -> Fraction:
    """Evaluate a shape exactly; raises ZeroDivisionError on a zero divisor."""
    if isinstance(shape, int):
        return Fraction(values[shape])

    operator, left, right = shape
    lhs = _evaluate(left, values)
    rhs = _evaluate(right, values)

    if operator is Operator.ADD:
        return lhs + rhs
    if operator is Operator.SUB:
        return lhs - rhs
    if operator is Operator.MUL:
        return lhs * rhs
    return lhs / rhs


def _assign(shape: Shape, values: Sequence[int]) -> Formula:
    """Build the parenthesized formula tree for a shape filled with values."""
    if isinstance(shape, int):
        return NumberLiteral(values[shape])

    operator, left, right = shape
    chain = BinaryChain(
        (ChainElement(_assign(left, values), operator), ChainElement(_assign(right, values)))
    )
    return Parenthesized(chain)


def _unique_orderings(cards: Sequence[int]) -> Iterator[Tuple[int, ...]]:
    return iter(dict.fromkeys(itertools.permutations(cards)))


def find_answers(cards: Sequence[int], target: int) -> Iterator[Formula]:
    """Yield formulas that use every card exactly once and equal ``target``.

    The search is lazy; take as many answers as needed with
    ``itertools.islice``.

    Args:
        cards: The hand, at most ``MAX_HAND_SIZE`` cards
        target: Value to reach

    Yields:
        Fully parenthesized formula trees

    Raises:
        ValueError: The hand is empty or too large
    """
    logger = get_logger()
    shapes = formula_shapes(len(cards))
    goal = Fraction(target)

    logger.debug(f"Searching answers for {list(cards)} -> {target}")

    for ordered in _unique_orderings(cards):
        for shape in shapes:
            try:
                value = _evaluate(shape, ordered)
            except ZeroDivisionError:
                continue

            if value == goal:
                answer = _assign(shape, ordered)
                logger.debug(f"Answer found: {answer}")
                yield answer


def compute_impossibles(cards: Sequence[int], within: Iterable[int]) -> Set[int]:
    """Return the members of ``within`` that no formula over the hand reaches.

    Only integral formula values count. The search stops as soon as every
    candidate has been reached.

    Args:
        cards: The hand, at most ``MAX_HAND_SIZE`` cards
        within: Candidate targets

    Returns:
        Candidates that cannot be made from the hand

    Raises:
        ValueError: The hand is empty or too large
    """
    impossibles = set(within)
    shapes = formula_shapes(len(cards))

    for ordered in _unique_orderings(cards):
        for shape in shapes:
            try:
                value = _evaluate(shape, ordered)
            except ZeroDivisionError:
                continue

            if value.denominator == 1:
                impossibles.discard(value.numerator)

            if not impossibles:
                return impossibles

    get_logger().debug(f"Hand {list(cards)} cannot reach {sorted(impossibles)}")
    return impossibles


def survey_hands(
    max_card: int = MAX_CARD_NUMBER,
    duplicates: int = CARD_DUPLICATES,
    hand_size: int = NUM_HAND_CARDS,
) -> Iterator[Tuple[Tuple[int, ...], Set[int]]]:
    """Yield every distinct hand of a deck that cannot reach some card value.

    The deck holds ``duplicates`` copies of each value ``1..max_card``. Each
    distinct hand is checked against the set of card values as targets.

    Args:
        max_card: Highest card value in the deck
        duplicates: Copies of each value in the deck
        hand_size: Cards per hand

    Yields:
        ``(hand, impossibles)`` pairs with a non-empty ``impossibles``
    """
    deck = sorted(list(range(1, max_card + 1)) * duplicates)
    within = set(deck)

    for hand in dict.fromkeys(itertools.combinations(deck, hand_size)):
        impossibles = compute_impossibles(hand, within)
        if impossibles:
            yield hand, impossibles
