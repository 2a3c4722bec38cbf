"""RadixConverter: a positional numeral system over an arbitrary alphabet.

WHY: Base conversion is easy when digits are "0-9a-z", but real
alphabets are often custom (base62 short links, z-base-24 ids) or made of
multi-character tokens (digits spelled as words). One class handles all
of them and composes any two into a direct converter.

HOW: The alphabet is split and validated once in __init__ and stored in
read-only containers (tuple, MappingProxyType). from_decimal() does
repeated divmod by the radix; into_decimal() tokenizes (per character or
greedy longest-match) and folds the digits back with Horner's rule.
convert_into()/convert_from() chain the two through a Python int.

RULES:
- Immutable after construction; instances may be shared between threads
- radix == len(numerals) == len(numeral_values) >= 2
- Duplicate and empty tokens are always rejected; the prefix check on
  multi-character alphabets runs only when validate=True
- from_decimal() floors floats and rejects negative or non-finite input
- from_decimal(0) returns numerals[0], never the empty string
- into_decimal("") returns 0
"""

from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional, Tuple, Union

from radix_converter.core.errors import DecodeError, InvalidNumberError, NumeralError
from radix_converter.core.numerals import (
    coerce_tokens,
    find_duplicate,
    find_prefix_conflict,
    order_by_length,
    split_alphabet,
    tokenize,
)

logger = logging.getLogger(__name__)

Numerals = Union[str, Iterable[object]]


class RadixConverter:
    """Converts non-negative integers to and from one numeral system.

    Args:
        numerals: Either a string, where each character is one numeral,
                  or a sequence whose elements (coerced with ``str()``)
                  are the numerals. The index of a numeral is its value.
        validate: Check that no multi-character token is a prefix of
                  another. Default: True.

    Raises:
        NumeralError: If a token is empty or duplicated, if tokens
                      conflict as prefixes (validate=True), or if fewer
                      than two numerals are given.

    Example::

        base16 = RadixConverter("0123456789abcdef")
        base16.from_decimal(10)   # "a"
        base16.into_decimal("ff") # 255
    """

    def __init__(self, numerals: Numerals, validate: bool = True) -> None:
        ordered: Optional[Tuple[str, ...]]

        if isinstance(numerals, str):
            tokens = split_alphabet(numerals)
            if find_duplicate(tokens) is not None:
                raise NumeralError("Numerals must be unique")
            ordered = None
        else:
            try:
                tokens = coerce_tokens(numerals)
            except TypeError as exc:
                raise NumeralError(
                    "Numerals must be a string or a sequence of strings, got {}".format(
                        type(numerals).__name__
                    )
                ) from exc

            duplicate = find_duplicate(tokens)
            if duplicate is not None:
                raise NumeralError("Invalid numerals: {} is duplicated".format(duplicate))

            if validate:
                conflict = find_prefix_conflict(tokens)
                if conflict is not None:
                    raise NumeralError(
                        "Invalid numerals: {} and {} cannot be used together".format(*conflict)
                    )

            ordered = order_by_length(tokens)

        if len(tokens) < 2:
            raise NumeralError(
                "Radix must be at least 2, got {}".format(len(tokens))
            )

        self._numerals = tokens
        self._numeral_values = MappingProxyType(
            {numeral: value for value, numeral in enumerate(tokens)}
        )
        self._ordered_numerals = ordered

        logger.debug(
            "Built radix-%d converter (%s mode)",
            self.radix,
            "multi-character" if ordered is not None else "single-character",
        )

    @property
    def radix(self) -> int:
        """Number of distinct numerals (the base)."""
        return len(self._numerals)

    @property
    def numerals(self) -> Tuple[str, ...]:
        """Numerals in value order: ``numerals[v]`` encodes digit ``v``."""
        return self._numerals

    @property
    def numeral_values(self) -> Mapping[str, int]:
        """Read-only mapping from numeral to its digit value."""
        return self._numeral_values

    @property
    def ordered_numerals(self) -> Optional[Tuple[str, ...]]:
        """Numerals longest first, or None in single-character mode."""
        return self._ordered_numerals

    @property
    def is_multi_character(self) -> bool:
        """True when the converter was built from an explicit token sequence."""
        return self._ordered_numerals is not None

    def __repr__(self) -> str:
        if self.is_multi_character:
            return "RadixConverter({!r})".format(list(self._numerals))
        return "RadixConverter({!r})".format("".join(self._numerals))

    def from_decimal(self, num: object) -> str:
        """Encode a non-negative number in this numeral system.

        Floats (and anything ``float()`` accepts) are floored first.

        Raises:
            InvalidNumberError: If the value is not a number, is not
                                finite, or is negative.
        """
        d = _to_integer(num)
        if d < 0:
            raise InvalidNumberError("Negative numbers are not supported: {}".format(num))

        digits = []
        while True:
            d, remainder = divmod(d, self.radix)
            digits.append(self._numerals[remainder])
            if d == 0:
                break
        digits.reverse()
        return "".join(digits)

    def into_decimal(self, num: str) -> int:
        """Decode a string in this numeral system to an integer.

        The empty string decodes to 0.

        Raises:
            DecodeError: If the string contains anything that is not a
                         numeral of this system.
        """
        if not isinstance(num, str):
            raise DecodeError(
                "Expected a string to decode, got {}".format(type(num).__name__)
            )
        if not num:
            return 0

        if self._ordered_numerals is None:
            tokens = list(num)
        else:
            tokens = tokenize(num, self._ordered_numerals)

        value = 0
        for token in tokens:
            digit = self._numeral_values.get(token)
            if digit is None:
                raise DecodeError("Invalid numeral: {}".format(token), numeral=token)
            value = value * self.radix + digit
        return value

    def convert_into(self, converter: RadixConverter) -> Callable[[str], str]:
        """Return a function converting from this system into ``converter``'s.

        The returned function raises whatever into_decimal() or
        from_decimal() raise.

        Example::

            base2.convert_into(base16)("1110")  # "e"
        """
        def convert(num: str) -> str:
            return converter.from_decimal(self.into_decimal(num))

        return convert

    def convert_from(self, converter: RadixConverter) -> Callable[[str], str]:
        """Return a function converting from ``converter``'s system into this one."""
        return converter.convert_into(self)


def _to_integer(num: object) -> int:
    """Coerce ``num`` to an int, flooring fractional values."""
    if isinstance(num, int):
        return num

    if isinstance(num, str):
        try:
            return int(num.strip())
        except ValueError:
            pass

    try:
        value = float(num)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidNumberError("Invalid number: {!r}".format(num)) from exc

    if not math.isfinite(value):
        raise InvalidNumberError("Invalid number: {}".format(num))
    return math.floor(value)
