"""Exception hierarchy for radix conversion.

WHY: Callers need to tell a bad alphabet apart from a bad number or a
bad numeral string, but also want a single type to catch at the
boundary (CLI, API wrappers).

HOW: Every error derives from RadixError, which is itself a ValueError,
so code that already catches ValueError keeps working.

RULES:
- NumeralError: raised while building a converter
- InvalidNumberError: raised by from_decimal()
- DecodeError: raised by into_decimal()
- AlphabetFileError: raised while loading an alphabet file
"""

from __future__ import annotations

from typing import Optional


class RadixError(ValueError):
    """Base class for all radix conversion errors."""


class NumeralError(RadixError):
    """Raised when a numeral alphabet cannot form a positional system.

    Covers empty tokens, duplicated tokens, tokens that are prefixes of
    each other (when validation is on) and alphabets with fewer than two
    numerals.
    """


class InvalidNumberError(RadixError):
    """Raised when from_decimal() is given something it cannot encode.

    The value must coerce to a finite, non-negative number.
    """


class DecodeError(RadixError):
    """Raised when into_decimal() meets text outside the alphabet.

    Attributes:
        numeral: The offending token, or the unmatched remainder of the
                 input in multi-character mode.
    """

    def __init__(self, message: str, numeral: Optional[str] = None) -> None:
        self.numeral = numeral
        super().__init__(message)


class AlphabetFileError(RadixError):
    """Raised when an alphabet file is missing, unreadable or malformed."""
