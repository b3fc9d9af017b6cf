# tests/quiz_tests/test_solver.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Test suite for the exhaustive hand solver

"""Test suite for formula shape enumeration, answer search and hand surveys."""

import itertools
from collections import Counter

import pytest
from formula import compute_formula, parse_formula
from quiz.checker import collect_numbers
from quiz.solver import (
    MAX_HAND_SIZE,
    compute_impossibles,
    find_answers,
    formula_shapes,
    survey_hands,
)
from utils.logger import get_logger


class TestFormulaShapes:
    """Test cases for shape enumeration."""

    # Catalan(n - 1) tree shapes times 4 ** (n - 1) operator choices
    @pytest.mark.parametrize("n, expected", [(1, 1), (2, 4), (3, 32), (4, 320), (5, 3584)])
    def test_shape_counts(self, n, expected):
        assert len(formula_shapes(n)) == expected

    def test_single_card_shape_is_its_position(self):
        assert formula_shapes(1) == (0,)

    def test_shapes_are_cached(self):
        assert formula_shapes(3) is formula_shapes(3)

    @pytest.mark.parametrize("n", [0, MAX_HAND_SIZE + 1])
    def test_hand_size_out_of_range(self, n):
        with pytest.raises(ValueError):
            formula_shapes(n)


class TestFindAnswers:
    """Test cases for lazy answer search."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    SOLVABLE_CASES = [
        ((1, 2, 3), 9),
        ((2, 2), 1),
        ((1, 3, 4, 6), 24),
        ((1, 2, 3, 4, 5), 15),
        ((5,), 5),
    ]

    @pytest.mark.parametrize("cards, target", SOLVABLE_CASES)
    def test_answers_reach_target_with_every_card(self, cards, target):
        answers = list(itertools.islice(find_answers(cards, target), 5))

        assert answers
        for answer in answers:
            self.logger.debug(f"{cards} -> {target}: {answer}")
            assert compute_formula(answer) == pytest.approx(target)
            assert Counter(collect_numbers(answer)) == Counter(cards)

    def test_answer_display_is_fully_parenthesized(self):
        answer = next(find_answers((2, 2), 1))

        assert str(answer) == "(2 / 2)"

    def test_answer_text_parses_back_to_same_value(self):
        answer = next(find_answers((1, 3, 4, 6), 24))
        reparsed = parse_formula(str(answer))

        assert compute_formula(reparsed) == pytest.approx(24)

    def test_exact_arithmetic_finds_fractional_paths(self):
        """6 / (1 - 3 / 4) only works through the intermediate value 1/4."""
        displays = {str(answer) for answer in find_answers((1, 3, 4, 6), 24)}

        assert "(6 / (1 - (3 / 4)))" in displays

    def test_unreachable_target_yields_nothing(self):
        assert list(find_answers((1,), 2)) == []
        assert list(find_answers((1, 1), 3)) == []

    def test_search_is_lazy(self):
        answers = find_answers((1, 2, 3, 4, 5), 15)

        assert next(answers) is not None

    def test_too_many_cards(self):
        with pytest.raises(ValueError):
            next(find_answers((1, 2, 3, 4, 5, 6), 1))


class TestImpossibles:
    """Test cases for unreachable target detection."""

    def test_pair_of_ones(self):
        assert compute_impossibles((1, 1), range(1, 4)) == {3}

    def test_only_integral_values_count(self):
        # 1 / 2 is reachable but is not the integer 0 or 1
        assert compute_impossibles((1, 2), {0}) == {0}

    def test_all_reachable(self):
        assert compute_impossibles((1, 2, 3), {6, 0, 5}) == set()

    def test_unreachable_candidate_kept(self):
        assert compute_impossibles((1, 2, 3), {6, 100}) == {100}

    def test_within_is_not_mutated(self):
        within = {1, 2, 3}
        compute_impossibles((1, 1), within)

        assert within == {1, 2, 3}


class TestSurveyHands:
    """Test cases for deck surveys."""

    def test_small_deck_survey(self):
        results = list(survey_hands(max_card=3, duplicates=1, hand_size=2))

        assert results == [((1, 3), {1}), ((2, 3), {2, 3})]

    def test_duplicate_hands_surveyed_once(self):
        hands = [hand for hand, _ in survey_hands(max_card=2, duplicates=2, hand_size=2)]

        assert len(hands) == len(set(hands))
