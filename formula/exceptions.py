# formula/exceptions.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Custom exceptions for formula scanning and parsing

"""Domain-specific exceptions for arithmetic formula processing.

Ordinary grammar mismatches are not exceptions: productions return ``None``.
The exceptions here cover the two conditions that must not be confused with
a plain "could not parse this text" result.
"""


class RunawayScanError(RuntimeError):
    """Exception raised when a cursor exceeds its primitive operation ceiling.

    Signals pathological input or a grammar defect that makes no forward
    progress. It is fatal for the parse call and is never turned into a
    no-match by any production.

    Attributes:
        limit: The operation ceiling that was exceeded
        position: Scan position at the moment the ceiling was hit
    """

    def __init__(self, limit: int, position: int):
        super().__init__(
            f"Scan exceeded {limit} operations at position {position}"
        )
        self.limit = limit
        self.position = position


class ParseError(RuntimeError):
    """Exception raised by strict parsing when the text is not a whole formula.

    Used by callers that need a complete-input parse and want a message they
    can show instead of a bare ``None``.
    """

    pass
