"""Utility functions."""

from structured_id.utils.alphabet import char_value, get_alphabet, in_alphabet, to_values
from structured_id.utils.checksums import (
    compute_check_char,
    luhn_check_digit,
    luhn_verify,
    mod36_check_value,
    mod36_verify,
)

__all__ = [
    "char_value",
    "get_alphabet",
    "in_alphabet",
    "to_values",
    "compute_check_char",
    "luhn_check_digit",
    "luhn_verify",
    "mod36_check_value",
    "mod36_verify",
]
