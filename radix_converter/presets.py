"""Named numeral alphabets.

WHY: Most conversions use a well-known alphabet (hex, base62, base58...).
Naming them lets the CLI and callers pick one by key instead of pasting
the alphabet string, and guarantees everyone uses the same digit order.

HOW: Each alphabet is a module-level constant. PRESETS maps names (and a
few aliases) to those constants. get_converter() builds the
RadixConverter once per name and caches it; converters are immutable, so
sharing one instance is safe.

RULES:
- Keys are lowercase identifiers (used in CLI flags and config)
- String values are single-character alphabets, tuples are
  multi-character token alphabets
- Never mutate these constants at runtime
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Tuple, Union

from radix_converter.core.converter import RadixConverter

BINARY = "01"
OCTAL = "01234567"
DECIMAL = "0123456789"
HEX = "0123456789abcdef"
BASE32 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE62 = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Tantek Celik's NewBase60: no I, O or l, plus underscore
NEWBASE60 = "0123456789ABCDEFGHJKLMNPQRSTUVWXYZ_abcdefghijkmnopqrstuvwxyz"

# Unambiguous base-24 "z numbers"
ZBASE24 = "34678abcdefghkmnpqrstwxy"

ENGLISH_DIGITS: Tuple[str, ...] = (
    "zero", "one", "two", "three", "four",
    "five", "six", "seven", "eight", "nine",
)

PRESETS: Dict[str, Union[str, Tuple[str, ...]]] = {
    "binary": BINARY,
    "bin": BINARY,
    "octal": OCTAL,
    "oct": OCTAL,
    "decimal": DECIMAL,
    "dec": DECIMAL,
    "hex": HEX,
    "base16": HEX,
    "base32": BASE32,
    "base36": BASE36,
    "base58": BASE58,
    "base62": BASE62,
    "newbase60": NEWBASE60,
    "zbase24": ZBASE24,
    "english": ENGLISH_DIGITS,
}


def list_presets() -> List[str]:
    """Return all preset names (aliases included), sorted."""
    return sorted(PRESETS)


@lru_cache(maxsize=None)
def get_converter(name: str) -> RadixConverter:
    """Return the shared RadixConverter for a preset name.

    Args:
        name: Preset key, case-insensitive (e.g. "hex", "Base62").

    Raises:
        ValueError: If the name is not a known preset.
    """
    key = name.strip().lower()
    if key not in PRESETS:
        raise ValueError(
            "Unknown preset '{}'. Available: {}".format(name, ", ".join(list_presets()))
        )
    return RadixConverter(PRESETS[key])
