"""Character sets and character/value mapping for structured identifiers.

Numeric identifiers use the ten decimal digits. Alphanumeric identifiers use
digits followed by A-Z, giving base 36. Input is case-insensitive for the
alphanumeric set; the canonical form is always uppercase.
"""

import re
from enum import Enum

NUMERIC_CHARS = "0123456789"
ALPHANUMERIC_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_ALPHABETS = {
    "numeric": NUMERIC_CHARS,
    "alphanumeric": ALPHANUMERIC_CHARS,
}

_PATTERNS = {
    "numeric": re.compile(f"[{NUMERIC_CHARS}]*"),
    "alphanumeric": re.compile(f"[{ALPHANUMERIC_CHARS}]*", re.IGNORECASE | re.ASCII),
}


def _key(charset: "str | Enum") -> str:
    # Enum members hash by name, so look up by value
    return charset.value if isinstance(charset, Enum) else charset


def get_alphabet(charset: "str | Enum") -> str:
    """Get the ordered alphabet for a charset.

    Args:
        charset: Charset name ("numeric" or "alphanumeric") or Charset member.

    Returns:
        The alphabet; a character's index is its numeric value.

    Raises:
        KeyError: If the charset is unknown.
    """
    return _ALPHABETS[_key(charset)]


def char_value(char: str, charset: "str | Enum") -> int | None:
    """Map a single character to its value under a charset.

    Args:
        char: The character to map.
        charset: Charset name or member.

    Returns:
        The value in [0, base), or None if the character is not in the
        alphabet.
    """
    if len(char) != 1 or not char.isascii():
        return None
    if _key(charset) == "alphanumeric":
        char = char.upper()
    index = get_alphabet(charset).find(char)
    return index if index >= 0 else None


def value_char(value: int, charset: "str | Enum") -> str:
    """Map a value back to its character under a charset.

    Raises:
        IndexError: If the value is outside [0, base).
    """
    alphabet = get_alphabet(charset)
    if not 0 <= value < len(alphabet):
        raise IndexError(f"Value {value} out of range for charset {_key(charset)}")
    return alphabet[value]


def to_values(text: str, charset: "str | Enum") -> list[int] | None:
    """Map a string to its value sequence.

    Returns:
        The list of values, or None if any character is outside the alphabet.
    """
    values = []
    for char in text:
        value = char_value(char, charset)
        if value is None:
            return None
        values.append(value)
    return values


def in_alphabet(text: str, charset: "str | Enum") -> bool:
    """Check if every character of a string belongs to a charset (case-insensitive)."""
    return _PATTERNS[_key(charset)].fullmatch(text) is not None
