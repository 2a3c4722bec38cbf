"""Configuration defaults and .env loading.

WHY: The CLI has a handful of defaults (source and target alphabets,
validation, log level) that users want to set once per shell or project
instead of passing flags every time.

HOW: python-dotenv loads the .env file on import. Each default is read
from the environment with a hard-coded fallback.

RULES:
- Only the CLI reads these values; RadixConverter always defaults to
  validate=True
- Boolean settings accept "true"/"false" (case-insensitive)
- Preset names are validated where they are used, not here
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the command is run from)
load_dotenv()


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable.

    Unset variables return ``default``; any value other than "true"
    (after stripping, case-insensitive) is False.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() == "true"


DEFAULT_SOURCE_PRESET = os.getenv("RADIX_DEFAULT_SOURCE", "decimal")
DEFAULT_TARGET_PRESET = os.getenv("RADIX_DEFAULT_TARGET", "base62")
DEFAULT_VALIDATE_NUMERALS = env_flag("RADIX_VALIDATE_NUMERALS", True)
LOG_LEVEL = os.getenv("RADIX_LOG_LEVEL", "WARNING").strip().upper()
