"""Code configuration model for structured identifiers."""

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

from structured_id.exceptions import (
    BodyTooShortError,
    IncompatibleAlgorithmError,
    InvalidShapeError,
)
from structured_id.utils.alphabet import get_alphabet


class Charset(str, Enum):
    """Character sets an identifier can be drawn from."""

    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"


class Algorithm(str, Enum):
    """Check character algorithms."""

    NONE = "none"
    LUHN = "luhn"
    MOD36 = "mod36"


class EntropyPreference(str, Enum):
    """Preferred source of randomness for generation."""

    CRYPTO = "crypto"
    FALLBACK = "fallback"


# Algorithms legal for each charset
COMPATIBLE_ALGORITHMS: dict[Charset, tuple[Algorithm, ...]] = {
    Charset.NUMERIC: (Algorithm.NONE, Algorithm.LUHN),
    Charset.ALPHANUMERIC: (Algorithm.NONE, Algorithm.MOD36),
}


class CodeConfig(BaseModel):
    """A resolved, immutable identifier configuration.

    Construction validates the shape and the charset/algorithm pairing, so any
    CodeConfig instance is safe to hand to the generator, validator and
    formatter without further checks.
    """

    charset: Charset = Field(default=Charset.NUMERIC)
    algorithm: Algorithm = Field(default=Algorithm.NONE)
    groups: int = Field(default=4, description="Number of display groups")
    group_size: int = Field(
        default=4, alias="groupSize", description="Characters per display group"
    )
    separator: str = Field(default="", description="Display separator, formatter only")
    entropy: EntropyPreference = Field(
        default=EntropyPreference.CRYPTO,
        alias="entropySource",
        description="Preferred entropy source, generator only",
    )

    class Config:
        populate_by_name = True
        frozen = True
        extra = "forbid"

    @model_validator(mode="after")
    def check_shape_and_algorithm(self) -> "CodeConfig":
        # Incompatible pairings are reported regardless of shape
        allowed = COMPATIBLE_ALGORITHMS[self.charset]
        if self.algorithm not in allowed:
            raise IncompatibleAlgorithmError(
                self.algorithm.value,
                self.charset.value,
                [a.value for a in allowed],
            )

        if self.groups < 1 or self.group_size < 1:
            raise InvalidShapeError(self.groups, self.group_size)

        if self.has_checksum and self.total_length < 2:
            raise BodyTooShortError(
                f"Algorithm '{self.algorithm.value}' needs at least 2 characters, "
                f"shape gives {self.total_length}"
            )
        return self

    @property
    def total_length(self) -> int:
        """Length of the canonical identifier."""
        return self.groups * self.group_size

    @property
    def has_checksum(self) -> bool:
        """Whether the last character is a check character."""
        return self.algorithm != Algorithm.NONE

    @property
    def body_length(self) -> int:
        """Number of randomly drawn characters."""
        return self.total_length - 1 if self.has_checksum else self.total_length

    @property
    def alphabet(self) -> str:
        """Ordered alphabet for the configured charset."""
        return get_alphabet(self.charset)

    @property
    def base(self) -> int:
        """Alphabet size."""
        return len(self.alphabet)

    @property
    def entropy_bits(self) -> int:
        """Bits of randomness in one identifier, rounded to the nearest bit."""
        return round(math.log2(self.base) * self.body_length)

    def display_settings(self) -> dict[str, Any]:
        """Convert to a plain dictionary for display or YAML serialization.

        Returns:
            Dictionary keyed by the camelCase option names.
        """
        return {
            "charset": self.charset.value,
            "algorithm": self.algorithm.value,
            "groups": self.groups,
            "groupSize": self.group_size,
            "separator": self.separator,
            "entropySource": self.entropy.value,
        }


def resolve_config(**options: Any) -> CodeConfig:
    """Validate and normalize identifier options into a CodeConfig.

    Options may use snake_case or camelCase names. Options set to None are
    ignored so callers can pass through unset CLI flags.

    Raises:
        InvalidShapeError: If groups or group size is less than 1.
        IncompatibleAlgorithmError: If the algorithm does not fit the charset.
        BodyTooShortError: If a checksum is requested on a 1-character shape.
    """
    return CodeConfig(**{k: v for k, v in options.items() if v is not None})
