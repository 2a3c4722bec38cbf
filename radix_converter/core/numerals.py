"""Alphabet splitting, validation and greedy tokenization.

WHY: A numeral alphabet is either a plain string (one character per
digit) or a sequence of tokens of any length ("zero", "one", ...).
Multi-character tokens need two extra pieces of machinery: a check that
no token can shadow another while decoding, and a tokenizer that splits
an encoded string back into tokens.

HOW: Small pure functions over tuples of strings. The converter calls
them once at construction (split, coerce, validate, order) and the
tokenizer on every decode.

RULES:
- Tokens are non-empty strings; non-string elements are coerced with str()
- Two tokens conflict when one is a prefix of the other (or they are equal)
- A prefix-free token set decodes unambiguously, so the pairwise check is
  sufficient
- Decoding is greedy longest-match, left to right
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from radix_converter.core.errors import DecodeError, NumeralError


def split_alphabet(text: str) -> Tuple[str, ...]:
    """Split a single-character alphabet string into its numerals."""
    return tuple(text)


def coerce_tokens(values: Iterable[object]) -> Tuple[str, ...]:
    """Coerce every element to ``str`` and reject empty tokens.

    Raises:
        NumeralError: If any token is the empty string.
    """
    tokens = []
    for value in values:
        token = str(value)
        if token == "":
            raise NumeralError("Empty string cannot be a numeral")
        tokens.append(token)
    return tuple(tokens)


def find_duplicate(tokens: Sequence[str]) -> Optional[str]:
    """Return the first token that appears twice, or None."""
    seen = set()
    for token in tokens:
        if token in seen:
            return token
        seen.add(token)
    return None


def find_prefix_conflict(tokens: Sequence[str]) -> Optional[Tuple[str, str]]:
    """Return the first pair ``(shorter, longer)`` where one token prefixes the other.

    Identical tokens count as a conflict too; callers normally reject
    duplicates before getting here.
    """
    for i, first in enumerate(tokens):
        for second in tokens[i + 1:]:
            if second.startswith(first):
                return first, second
            if first.startswith(second):
                return second, first
    return None


def order_by_length(tokens: Sequence[str]) -> Tuple[str, ...]:
    """Sort tokens longest first. The sort is stable, ties keep alphabet order."""
    return tuple(sorted(tokens, key=len, reverse=True))


def tokenize(text: str, ordered_numerals: Sequence[str]) -> List[str]:
    """Split ``text`` into tokens by greedy longest match.

    At each position the longest token that prefixes the remaining text
    is consumed.

    Args:
        text: The encoded number.
        ordered_numerals: Tokens sorted by descending length
                          (see order_by_length()).

    Returns:
        The tokens in left-to-right order.

    Raises:
        DecodeError: If no token matches at some position. The error's
                     ``numeral`` is the unmatched remainder.
    """
    result: List[str] = []
    pos = 0
    while pos < len(text):
        for numeral in ordered_numerals:
            if text.startswith(numeral, pos):
                result.append(numeral)
                pos += len(numeral)
                break
        else:
            rest = text[pos:]
            raise DecodeError("Unknown numerals: {}".format(rest), numeral=rest)
    return result
