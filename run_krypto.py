#!/usr/bin/env python3
# run_krypto.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Command-line interface for dealing, judging and solving Krypto quizzes

import sys
import argparse
import itertools
import random
from typing import Optional, Sequence

from formula.cursor import DEFAULT_OPERATION_LIMIT
from formula.exceptions import RunawayScanError
from quiz import (
    CardFormatError,
    Quiz,
    QuizSettings,
    Verdict,
    compute_impossibles,
    find_answers,
    generate_quiz,
    judge_answer,
    parse_cards,
    survey_hands,
)
from quiz.generator import MAX_NUMBER, MIN_NUMBER, NUM_CARDS
from utils.logger import configure_logging, get_logger

EXIT_OK = 0
EXIT_WRONG_ANSWER = 1
EXIT_UNPARSEABLE = 2
EXIT_BAD_QUIZ = 3
EXIT_RUNAWAY = 4
EXIT_UNEXPECTED = 5


def non_negative_int(value: str) -> int:
    """Argparse type for counts and limits that may not be negative."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")

    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def build_quiz(
    cards_text: Optional[str], target: Optional[int], settings: QuizSettings, rng: random.Random
) -> Quiz:
    """Assemble the quiz from command line values, dealing whatever is missing.

    Raises:
        CardFormatError: The card list is malformed
    """
    dealt = generate_quiz(settings, rng)
    cards = parse_cards(cards_text) if cards_text is not None else dealt.cards
    return Quiz(cards=tuple(cards), target=dealt.target if target is None else target)


def print_answers(quiz: Quiz, limit: int) -> int:
    """Log up to ``limit`` solver answers and return how many were found."""
    logger = get_logger()
    logger.info(f"\n🔍 Answers (up to {limit}):")

    count = 0
    for count, answer in enumerate(itertools.islice(find_answers(quiz.cards, quiz.target), limit), 1):
        logger.answer_found(count, str(answer))

    if count == 0:
        logger.info("  none")
    return count


def print_impossibles(quiz: Quiz, settings: QuizSettings) -> None:
    """Log the targets in the settings range that the hand cannot make."""
    within = range(settings.min_number, settings.max_number + 1)
    get_logger().impossibles_found(quiz.cards, sorted(compute_impossibles(quiz.cards, within)))


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Krypto arithmetic card puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_krypto.py
  python run_krypto.py -c 1,2,3,4,5 -t 7 -e "(1 + 2) * 4 - 5 - 3"
  python run_krypto.py -c 1,2,3,4,5 -t 7 --solve --limit 3
  python run_krypto.py -c 2,2,5,9,9 --impossibles
  python run_krypto.py --survey

Answers use the cards with + - * / and parentheses, each card exactly once.
        """,
    )

    parser.add_argument("-c", "--cards", help="Comma-separated hand, e.g. 1,2,3,4,5")

    parser.add_argument("-t", "--target", type=int, help="Target value")

    parser.add_argument("-e", "--expression", help="Answer expression to judge")

    parser.add_argument("--solve", action="store_true", help="Print answers for the quiz")

    parser.add_argument(
        "--limit",
        type=non_negative_int,
        default=1,
        help="Maximum number of answers to print (default: 1)",
    )

    parser.add_argument(
        "--impossibles",
        action="store_true",
        help="Print the targets the hand cannot reach",
    )

    parser.add_argument(
        "--survey",
        action="store_true",
        help="List every hand of the standard deck that misses some target",
    )

    parser.add_argument("--seed", type=int, help="Seed for dealing random quizzes")

    parser.add_argument(
        "--min-number",
        type=int,
        default=MIN_NUMBER,
        help=f"Smallest dealt card or target (default: {MIN_NUMBER})",
    )

    parser.add_argument(
        "--max-number",
        type=int,
        default=MAX_NUMBER,
        help=f"Largest dealt card or target (default: {MAX_NUMBER})",
    )

    parser.add_argument(
        "--num-cards",
        type=int,
        default=NUM_CARDS,
        help=f"Cards in a dealt hand (default: {NUM_CARDS})",
    )

    parser.add_argument(
        "--operation-limit",
        type=non_negative_int,
        default=DEFAULT_OPERATION_LIMIT,
        help=f"Parser operation ceiling (default: {DEFAULT_OPERATION_LIMIT})",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Explain accepted answers too"
    )

    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only report warnings and errors"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --quiet)"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the Krypto CLI.

    Returns:
        Exit code (0 for success, non-zero for errors or wrong answers)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=not args.quiet, debug=args.debug)
    logger = get_logger()

    try:
        if args.survey:
            for hand, impossibles in survey_hands():
                logger.impossibles_found(hand, sorted(impossibles))
            return EXIT_OK

        settings = QuizSettings(
            min_number=args.min_number, max_number=args.max_number, num_cards=args.num_cards
        )
        quiz = build_quiz(args.cards, args.target, settings, random.Random(args.seed))
        logger.quiz_presented(quiz.cards, quiz.target)

        if args.impossibles:
            print_impossibles(quiz, settings)

        if args.solve:
            print_answers(quiz, args.limit)

        if args.expression is None:
            return EXIT_OK

        judgement = judge_answer(args.expression, quiz, args.operation_limit)
        logger.answer_judged(args.expression, str(judgement.verdict), judgement.value)
        if args.verbose or not judgement.accepted:
            logger.info(judgement.message)

        if judgement.verdict is Verdict.UNPARSEABLE:
            return EXIT_UNPARSEABLE
        return EXIT_OK if judgement.accepted else EXIT_WRONG_ANSWER

    except CardFormatError as e:
        logger.error(f"Card list error: {e}")
        return EXIT_BAD_QUIZ

    except ValueError as e:
        logger.error(f"Quiz error: {e}")
        return EXIT_BAD_QUIZ

    except RunawayScanError as e:
        logger.error(f"Parser gave up: {e}")
        return EXIT_RUNAWAY

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return EXIT_UNEXPECTED

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return EXIT_UNEXPECTED


if __name__ == "__main__":
    sys.exit(main())
