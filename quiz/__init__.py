# quiz/__init__.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Quiz dealing, answer judging and solving

"""Krypto quizzes: dealing hands, judging answers and solving hands.

Primary Components:
    generate_quiz: Deal five cards and a target
    judge_answer: Check a player's expression against a quiz
    find_answers: Lazily search every formula over a hand for a target
    compute_impossibles: Targets a hand cannot reach
    parse_cards: Read a comma-separated card list
"""

from .cards import CardFormatError, parse_cards
from .checker import Judgement, Verdict, collect_numbers, judge_answer
from .generator import Quiz, QuizSettings, generate_quiz
from .solver import MAX_HAND_SIZE, compute_impossibles, find_answers, formula_shapes, survey_hands

__all__ = [
    "CardFormatError",
    "parse_cards",
    "Judgement",
    "Verdict",
    "collect_numbers",
    "judge_answer",
    "Quiz",
    "QuizSettings",
    "generate_quiz",
    "MAX_HAND_SIZE",
    "compute_impossibles",
    "find_answers",
    "formula_shapes",
    "survey_hands",
]
