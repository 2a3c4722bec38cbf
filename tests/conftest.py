"""Shared test fixtures for the radix_converter test suite.

WHY: Most test modules convert through the same handful of alphabets.
Building them here keeps the expected values in one place.

HOW: Pytest fixtures return ready RadixConverter instances. They are
immutable, so function scope is only for isolation of intent.

RULES:
- BASE62 ordering is digits, lowercase, uppercase
- WORD_DIGITS is prefix-free, so it validates
"""

from typing import Tuple

import pytest

from radix_converter import RadixConverter

BASE62 = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

WORD_DIGITS: Tuple[str, ...] = (
    "zero", "one", "two", "three", "four",
    "five", "six", "seven", "eight", "nine",
)


@pytest.fixture
def base2():
    return RadixConverter("01")


@pytest.fixture
def base3():
    return RadixConverter("012")


@pytest.fixture
def base7():
    return RadixConverter("0123456")


@pytest.fixture
def base10():
    return RadixConverter("0123456789")


@pytest.fixture
def base16():
    return RadixConverter("0123456789abcdef")


@pytest.fixture
def base62():
    return RadixConverter(BASE62)


@pytest.fixture
def words():
    """Decimal digits spelled out as English words."""
    return RadixConverter(list(WORD_DIGITS))


@pytest.fixture
def mixed_length():
    """Variable-length tokens: a=0, ba=1, bb=2, c=3."""
    return RadixConverter(["a", "ba", "bb", "c"])
