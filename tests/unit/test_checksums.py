"""Unit tests for Luhn and Mod36 check values."""

import pytest

from structured_id.exceptions import BodyTooShortError
from structured_id.utils.checksums import (
    compute_check_char,
    luhn_check_digit,
    luhn_verify,
    mod36_check_value,
    mod36_verify,
)


def _digits(text: str) -> list[int]:
    return [int(c) for c in text]


class TestLuhn:
    """Tests for the Luhn algorithm over digit values."""

    @pytest.mark.parametrize(
        ("body", "check"),
        [
            ("7992739871", 3),
            ("411111111111111", 1),
            ("0", 0),
            ("1", 8),
            ("37828224631000", 5),
        ],
    )
    def test_check_digit_vectors(self, body: str, check: int) -> None:
        """Published vectors should produce their check digits."""
        assert luhn_check_digit(_digits(body)) == check

    def test_verify_full_sequence(self) -> None:
        """The full-sequence variant should accept valid numbers only."""
        assert luhn_verify(_digits("79927398713"))
        assert luhn_verify(_digits("4111111111111111"))
        assert not luhn_verify(_digits("79927398710"))
        assert not luhn_verify(_digits("79927398731"))

    def test_verify_agrees_with_check_digit(self) -> None:
        """Verifying body+check should match recomputing the check digit."""
        body = _digits("12345678")
        for candidate in range(10):
            expected = candidate == luhn_check_digit(body)
            assert luhn_verify(body + [candidate]) is expected

    def test_empty_body_raises(self) -> None:
        """A check digit over nothing is a configuration error."""
        with pytest.raises(BodyTooShortError):
            luhn_check_digit([])
        with pytest.raises(BodyTooShortError):
            luhn_verify([5])


class TestMod36:
    """Tests for the Mod36 algorithm over base-36 values."""

    def test_single_value(self) -> None:
        """A (10) is doubled to 20, so the check value is 16."""
        assert mod36_check_value([10]) == 16

    def test_reduction_above_base(self) -> None:
        """Doubled values >= 36 are reduced by 35."""
        # Z doubled: 70 - 35 = 35; plus Z undoubled: 70 -> 34 mod 36; check 2
        assert mod36_check_value([35, 35]) == 2

    def test_weights_alternate_from_left(self) -> None:
        """Weights are 2, 1, 2, 1 from the first body character."""
        # 1*2 + 1 + 1*2 = 5 -> check 31
        assert mod36_check_value([1, 1, 1]) == 31

    def test_verify(self) -> None:
        """Verification compares the trailing value with the recomputed one."""
        assert mod36_verify([10, 16])
        assert not mod36_verify([10, 15])

    def test_empty_body_raises(self) -> None:
        """A check value over nothing is a configuration error."""
        with pytest.raises(BodyTooShortError):
            mod36_check_value([])


class TestComputeCheckChar:
    """Tests for the character-level dispatcher."""

    def test_luhn_char(self) -> None:
        """Luhn returns a digit character."""
        assert compute_check_char("7992739871", "luhn", "numeric") == "3"

    def test_mod36_char_case_insensitive_body(self) -> None:
        """Mod36 returns an uppercase character for any body case."""
        assert compute_check_char("A", "mod36", "alphanumeric") == "G"
        assert compute_check_char("zz", "mod36", "alphanumeric") == "2"

    def test_bad_body_raises(self) -> None:
        """Bodies outside the alphabet are rejected."""
        with pytest.raises(ValueError):
            compute_check_char("12A", "luhn", "numeric")

    def test_none_algorithm_raises(self) -> None:
        """There is no check character without an algorithm."""
        with pytest.raises(ValueError):
            compute_check_char("123", "none", "numeric")
