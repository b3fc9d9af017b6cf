# quiz/cards.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Card list tokenization and parsing using SLY

"""Parsing of comma-separated card lists such as ``"1, 2, 3, 4, 5"``.

Card lists arrive from the command line. They are tokenized with a SLY lexer
and checked against a one-rule LALR grammar:

    cards := cards ',' NUMBER | NUMBER

Whitespace around numbers and commas is ignored.
"""

from typing import Tuple

from sly import Lexer, Parser
from utils.logger import get_logger


class CardFormatError(ValueError):
    """Exception raised when a card list is empty or malformed."""

    pass


class CardLexer(Lexer):
    """SLY-based lexer for card lists.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {"NUMBER", "COMMA"}

    ignore = " \t"

    COMMA = r","

    @_(r"\d+")
    def NUMBER(self, t):
        t.value = int(t.value)
        return t

    def error(self, t):
        """Reject characters that are neither digits, commas nor blanks.

        Raises:
            CardFormatError: Always raised with character and position
        """
        illegal_char = t.value[0]
        error_pos = self.index

        get_logger().debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise CardFormatError(
            f"Illegal character '{illegal_char}' in card list at position {error_pos}"
        )


class CardListParser(Parser):
    """SLY-based parser accepting a non-empty comma-separated list of numbers."""

    tokens = CardLexer.tokens

    @_("cards COMMA NUMBER")
    def cards(self, p):
        return p.cards + (p.NUMBER,)

    @_("NUMBER")
    def cards(self, p):
        return (p.NUMBER,)

    def error(self, token):
        """Handle syntax errors such as doubled or trailing commas.

        Raises:
            CardFormatError: Always raised with token information
        """
        if token:
            error_msg = f"Unexpected '{token.value}' in card list at position {token.index}"
        else:
            error_msg = "Card list ends with a comma"

        raise CardFormatError(error_msg)


def parse_cards(text: str) -> Tuple[int, ...]:
    """Parse a card list into a tuple of integers, preserving order.

    Args:
        text: Comma-separated card values

    Returns:
        Card values in the order given

    Raises:
        CardFormatError: The list is empty or malformed
    """
    logger = get_logger()
    logger.debug(f"Parsing card list: {text!r}")

    if text.strip() == "":
        raise CardFormatError("Card list is empty.")

    cards = CardListParser().parse(CardLexer().tokenize(text))
    if cards is None:
        raise CardFormatError(f"Failed to parse card list: {text!r}")

    logger.debug(f"Parsed {len(cards)} cards: {cards}")
    return cards
