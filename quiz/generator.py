# quiz/generator.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Random quiz generation: a sorted hand of cards and a target

import random
from dataclasses import dataclass
from typing import Optional, Tuple

from utils.logger import get_logger

MIN_NUMBER = 1
MAX_NUMBER = 10
NUM_CARDS = 5


@dataclass(frozen=True)
class QuizSettings:
    """Ranges used when dealing a quiz.

    Attributes:
        min_number: Smallest card or target value (inclusive)
        max_number: Largest card or target value (inclusive)
        num_cards: Number of cards in a hand
    """

    min_number: int = MIN_NUMBER
    max_number: int = MAX_NUMBER
    num_cards: int = NUM_CARDS

    def __post_init__(self):
        if self.min_number > self.max_number:
            raise ValueError(
                f"min_number ({self.min_number}) exceeds max_number ({self.max_number})"
            )
        if self.num_cards < 1:
            raise ValueError(f"num_cards must be positive, got {self.num_cards}")


@dataclass(frozen=True)
class Quiz:
    """A hand of cards and the number the player must make from them."""

    cards: Tuple[int, ...]
    target: int

    def __str__(self) -> str:
        return f"{' '.join(str(card) for card in self.cards)} -> {self.target}"


def generate_quiz(
    settings: Optional[QuizSettings] = None, rng: Optional[random.Random] = None
) -> Quiz:
    """Deal a new quiz.

    Cards and target are drawn independently and uniformly, with replacement,
    from ``[settings.min_number, settings.max_number]``. Cards are sorted
    ascending.

    Args:
        settings: Value ranges and hand size; defaults to five cards in 1..10
        rng: Random source, for reproducible quizzes

    Returns:
        The new quiz
    """
    settings = settings or QuizSettings()
    rng = rng or random.Random()

    def draw() -> int:
        return rng.randint(settings.min_number, settings.max_number)

    cards = tuple(sorted(draw() for _ in range(settings.num_cards)))
    quiz = Quiz(cards=cards, target=draw())

    get_logger().debug(f"Generated quiz: {quiz}")
    return quiz
