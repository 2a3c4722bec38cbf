"""Core conversion modules.

WHY: The core package is the whole conversion engine: the converter
class, its alphabet helpers and its error types. Presets, alphabet files
and the CLI are thin layers on top.

HOW: errors.py defines the exception hierarchy, numerals.py splits,
validates and tokenizes alphabets, converter.py holds RadixConverter.

RULES:
- No I/O and no configuration lookups in this package
- Everything here is pure and thread-safe
"""
