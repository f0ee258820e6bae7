"""Check character algorithms for structured identifiers.

The core functions operate on plain integer value sequences so they can be
tested directly against published vectors, independent of any alphabet or
display formatting:

- Luhn (base 10): starting from the rightmost body digit and moving left,
  every second digit is doubled; doubled values >= 10 have 9 subtracted.
- Mod36 (base 36): body values are weighted 2, 1, 2, 1, ... from the left;
  doubled values >= 36 have 35 subtracted.

In both cases the check value is the one that brings the weighted sum to
zero modulo the base.
"""

from collections.abc import Sequence
from enum import Enum

from structured_id.exceptions import BodyTooShortError
from structured_id.utils.alphabet import to_values, value_char


def _require_body(values: Sequence[int]) -> None:
    if not values:
        raise BodyTooShortError("Cannot compute a check value over an empty body")


def _luhn_sum(values: Sequence[int], double_rightmost: bool) -> int:
    total = 0
    for offset, value in enumerate(reversed(values)):
        if (offset % 2 == 0) == double_rightmost:
            value *= 2
            if value >= 10:
                value -= 9
        total += value
    return total


def luhn_check_digit(values: Sequence[int]) -> int:
    """Compute the Luhn check digit for a body of decimal digit values.

    Args:
        values: Body digit values (0-9), left to right.

    Returns:
        The check digit in [0, 9].

    Raises:
        BodyTooShortError: If the body is empty.
    """
    _require_body(values)
    return (10 - _luhn_sum(values, double_rightmost=True) % 10) % 10


def luhn_verify(values: Sequence[int]) -> bool:
    """Verify a full digit sequence whose last digit is the Luhn check digit.

    This is the full-sequence variant: the check digit itself is undoubled and
    the doubling parity shifts by one position.

    Raises:
        BodyTooShortError: If there is no body before the check digit.
    """
    _require_body(values[:-1])
    return _luhn_sum(values, double_rightmost=False) % 10 == 0


def _mod36_sum(values: Sequence[int]) -> int:
    total = 0
    for position, value in enumerate(values, start=1):
        if position % 2 == 1:
            value *= 2
            if value >= 36:
                value -= 35
        total += value
    return total % 36


def mod36_check_value(values: Sequence[int]) -> int:
    """Compute the Mod36 check value for a body of base-36 values.

    Args:
        values: Body values (0-35), left to right.

    Returns:
        The check value in [0, 35].

    Raises:
        BodyTooShortError: If the body is empty.
    """
    _require_body(values)
    return (36 - _mod36_sum(values)) % 36


def mod36_verify(values: Sequence[int]) -> bool:
    """Verify a full value sequence whose last value is the Mod36 check value."""
    _require_body(values[:-1])
    return mod36_check_value(values[:-1]) == values[-1]


def compute_check_char(body: str, algorithm: "str | Enum", charset: "str | Enum") -> str:
    """Compute the check character for a body string.

    Args:
        body: The body characters (must all belong to the charset).
        algorithm: "luhn" or "mod36".
        charset: The charset the body is drawn from.

    Returns:
        The check character, uppercase for alphanumeric.

    Raises:
        BodyTooShortError: If the body is empty.
        ValueError: If the body contains characters outside the charset or the
            algorithm has no check character.
    """
    values = to_values(body, charset)
    if values is None:
        raise ValueError(f"Body contains characters outside the {charset} alphabet")

    name = algorithm.value if isinstance(algorithm, Enum) else algorithm
    if name == "luhn":
        check = luhn_check_digit(values)
    elif name == "mod36":
        check = mod36_check_value(values)
    else:
        raise ValueError(f"Algorithm '{name}' has no check character")
    return value_char(check, charset)
