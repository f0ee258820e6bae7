"""Identifier generation and validation.

Generation draws the body from an entropy source and appends a check
character when the configuration asks for one. Validation never raises for
bad data: malformed input is simply invalid.
"""

import logging

from structured_id.exceptions import (
    EntropySourceUnavailableError,
    InvalidIdError,
    ShapeMismatchError,
)
from structured_id.models.config import CodeConfig
from structured_id.services.entropy import EntropySource, resolve_entropy_source
from structured_id.services.formatter import format_id, parse_display
from structured_id.utils.alphabet import in_alphabet
from structured_id.utils.checksums import compute_check_char

logger = logging.getLogger(__name__)


def _draw(source: EntropySource, n: int) -> int:
    try:
        index = source.randbelow(n)
    except EntropySourceUnavailableError:
        raise
    except (NotImplementedError, OSError) as e:
        raise EntropySourceUnavailableError(f"Entropy source failed: {e}") from e

    if not isinstance(index, int) or not 0 <= index < n:
        raise EntropySourceUnavailableError(
            f"Entropy source produced {index!r}, expected an integer in [0, {n})"
        )
    return index


def generate_id(config: CodeConfig, source: EntropySource) -> str:
    """Generate a canonical identifier.

    Consumes exactly ``config.body_length`` draws from the source; the output
    is fully determined by those draws.

    Args:
        config: The resolved configuration.
        source: Entropy source to draw alphabet indices from.

    Returns:
        An uppercase identifier of ``config.total_length`` characters.

    Raises:
        EntropySourceUnavailableError: If the source cannot produce a value.
    """
    alphabet = config.alphabet
    body = "".join(alphabet[_draw(source, len(alphabet))] for _ in range(config.body_length))
    if not config.has_checksum:
        return body
    return body + compute_check_char(body, config.algorithm, config.charset)


def generate_ids(config: CodeConfig, source: EntropySource, count: int) -> list[str]:
    """Generate several identifiers from one source.

    No uniqueness check is made across the batch.

    Raises:
        ValueError: If count is less than 1.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    ids = [generate_id(config, source) for _ in range(count)]
    logger.debug("Generated %d %s identifier(s)", count, config.charset.value)
    return ids


def validate_id(candidate: str, config: CodeConfig) -> bool:
    """Check whether a canonical identifier is valid for a configuration.

    Checks length, then alphabet membership (case-insensitive for
    alphanumeric), then the check character if one is configured.

    Args:
        candidate: The canonical identifier, without separators.
        config: The resolved configuration.

    Returns:
        True if valid. Never raises for malformed input.
    """
    if not isinstance(candidate, str) or len(candidate) != config.total_length:
        return False
    if not in_alphabet(candidate, config.charset):
        return False
    if not config.has_checksum:
        return True

    body, supplied = candidate[:-1], candidate[-1].upper()
    return compute_check_char(body, config.algorithm, config.charset) == supplied


def normalize_id(candidate: str, config: CodeConfig) -> str:
    """Normalize a valid identifier to its canonical uppercase form.

    Raises:
        InvalidIdError: If the identifier is not valid for the configuration.
    """
    if not validate_id(candidate, config):
        raise InvalidIdError(f"Invalid ID: {candidate}")
    return candidate.upper()


class CodecService:
    """Service binding one configuration to one entropy source.

    Convenient for callers, like the CLI, that generate, check and render
    identifiers with the same settings repeatedly.
    """

    def __init__(
        self,
        config: CodeConfig,
        source: EntropySource | None = None,
        strict_entropy: bool = False,
    ) -> None:
        """Initialize the codec service.

        Args:
            config: The resolved configuration.
            source: Entropy source; resolved from ``config.entropy`` if omitted.
            strict_entropy: Refuse to degrade to the fallback source.
        """
        self.config = config
        self.source = source or resolve_entropy_source(config.entropy, strict=strict_entropy)
        logger.debug(
            "Codec configured: %s (source=%s)",
            config.display_settings(),
            type(self.source).__name__,
        )

    def generate(self) -> str:
        """Generate one canonical identifier."""
        return generate_id(self.config, self.source)

    def generate_many(self, count: int) -> list[str]:
        """Generate ``count`` canonical identifiers."""
        return generate_ids(self.config, self.source, count)

    def validate(self, candidate: str) -> bool:
        """Validate a canonical identifier."""
        return validate_id(candidate, self.config)

    def validate_display(self, display: str) -> bool:
        """Validate an identifier given in display form.

        Returns:
            False if the display form has the wrong shape or the identifier is
            invalid.
        """
        try:
            canonical = self.parse(display)
        except ShapeMismatchError:
            return False
        return self.validate(canonical)

    def format(self, canonical: str) -> str:
        """Render a canonical identifier in display form."""
        return format_id(canonical, self.config)

    def parse(self, display: str) -> str:
        """Recover the canonical identifier from display form."""
        return parse_display(display, self.config)
