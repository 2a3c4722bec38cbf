"""Radix converter: numbers between arbitrary numeral alphabets.

WHY: Converting between bases is a one-liner for "0-9a-z" alphabets,
but short-link ids, unambiguous human codes and spelled-out digits all
need custom alphabets, sometimes with multi-character numerals. This
package provides one immutable converter class for all of them.

HOW: RadixConverter (core/converter.py) does the work. presets.py names
common alphabets, alphabet_file.py loads custom ones from disk, and
cli.py exposes conversion on the command line.

RULES:
- Only non-negative integers are converted
- Converters are immutable and safe to share
- All errors derive from RadixError (a ValueError)
"""

from radix_converter.core.converter import RadixConverter
from radix_converter.core.errors import (
    AlphabetFileError,
    DecodeError,
    InvalidNumberError,
    NumeralError,
    RadixError,
)

__version__ = "0.1.0"

__all__ = [
    "RadixConverter",
    "RadixError",
    "NumeralError",
    "InvalidNumberError",
    "DecodeError",
    "AlphabetFileError",
]
