"""Load numeral alphabets from files.

WHY: Custom alphabets, especially multi-character ones, are awkward to
type on a command line. Keeping them in a file next to the data makes
them reusable and reviewable.

HOW: JSON files hold either a string (one numeral per character) or an
array of tokens, checked against ALPHABET_SCHEMA with jsonschema. Any
other file is read as plain text with one token per line.

RULES:
- .json: string of length >= 2, or array of >= 2 strings/integers
  (whole-number floats such as 1.0 are rejected)
- Text files: strip each line, ignore blank lines and '#' comments
- Every failure is reported as AlphabetFileError
- Token-level checks (duplicates, prefixes) are left to RadixConverter
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Union

import jsonschema

from radix_converter.core.converter import RadixConverter
from radix_converter.core.errors import AlphabetFileError

logger = logging.getLogger(__name__)

ALPHABET_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "oneOf": [
        {"type": "string", "minLength": 2},
        {
            "type": "array",
            "minItems": 2,
            "items": {
                "oneOf": [
                    {"type": "string", "minLength": 1},
                    {"type": "integer"},
                ],
            },
        },
    ],
}


def _load_json(path: Path, raw: str) -> Union[str, List[str]]:
    """Parse and validate a JSON alphabet.

    WHY: JSON lets an alphabet carry tokens that are awkward as text
    lines (leading spaces, '#', integers), but the content is user-written
    and must be checked before it reaches RadixConverter.

    HOW: json.loads(), then jsonschema against ALPHABET_SCHEMA, then a
    float check because JSON Schema's "integer" type also accepts
    whole-number floats such as 1.0.

    RULES:
    - A JSON string is returned unchanged (single-character alphabet)
    - Array items are coerced with str(); floats are rejected so 1.0
      never silently becomes the token "1.0"
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise AlphabetFileError("Invalid JSON in {}: {}".format(path, exc)) from exc

    try:
        jsonschema.validate(data, ALPHABET_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise AlphabetFileError(
            "Invalid alphabet in {}: {}".format(path, exc.message)
        ) from exc

    if isinstance(data, str):
        return data

    for item in data:
        if isinstance(item, float):
            raise AlphabetFileError(
                "Invalid alphabet in {}: {} is not a string or an integer".format(path, item)
            )
    return [str(item) for item in data]


def _load_lines(raw: str) -> List[str]:
    """Split a plain-text alphabet into tokens, one per line.

    Lines are stripped; blank lines and lines starting with '#' are
    skipped so the file can carry comments.
    """
    tokens = []
    for line in raw.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            tokens.append(stripped)
    return tokens


def load_alphabet(path: Union[str, Path]) -> Union[str, List[str]]:
    """Read an alphabet from a JSON or plain-text file.

    Args:
        path: Path to the alphabet file.

    Returns:
        A string (single-character alphabet, JSON only) or a list of
        tokens, ready to pass to RadixConverter.

    Raises:
        AlphabetFileError: If the file is missing, unreadable or does not
                           describe an alphabet.
    """
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise AlphabetFileError("Cannot read alphabet file {}: {}".format(p, exc)) from exc

    if p.suffix.lower() == ".json":
        alphabet = _load_json(p, raw)
    else:
        alphabet = _load_lines(raw)

    logger.info("Loaded %d numerals from %s", len(alphabet), p)
    return alphabet


def load_converter(path: Union[str, Path], validate: bool = True) -> RadixConverter:
    """Build a RadixConverter from an alphabet file."""
    return RadixConverter(load_alphabet(path), validate=validate)
