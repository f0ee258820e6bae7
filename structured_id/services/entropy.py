"""Entropy sources for identifier generation.

A source is passed to the generator per call rather than held globally, so
tests can inject a deterministic source and concurrent callers with their own
sources never interfere.
"""

import logging
import os
import random
import secrets
from abc import ABC, abstractmethod

from structured_id.exceptions import EntropySourceUnavailableError
from structured_id.models.config import EntropyPreference

logger = logging.getLogger(__name__)


class EntropySource(ABC):
    """Abstract source of uniformly distributed alphabet indices."""

    is_cryptographic: bool = False

    @abstractmethod
    def randbelow(self, n: int) -> int:
        """Draw a uniformly distributed integer in [0, n).

        Args:
            n: Exclusive upper bound, at least 1.

        Returns:
            The drawn integer.

        Raises:
            EntropySourceUnavailableError: If no value can be produced.
        """
        pass


class StrongEntropySource(EntropySource):
    """Cryptographically strong source backed by the OS (``secrets``)."""

    is_cryptographic = True

    @staticmethod
    def available() -> bool:
        """Check whether the host provides an OS randomness source."""
        try:
            os.urandom(1)
        except NotImplementedError:
            return False
        return True

    def randbelow(self, n: int) -> int:
        try:
            return secrets.randbelow(n)
        except (NotImplementedError, OSError) as e:
            raise EntropySourceUnavailableError(f"OS randomness unavailable: {e}") from e


class FallbackEntropySource(EntropySource):
    """Non-cryptographic source backed by a Mersenne Twister.

    Suitable for tests and low-stakes codes. Pass a seed for reproducible
    output.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def randbelow(self, n: int) -> int:
        return self._random.randrange(n)


def resolve_entropy_source(
    preference: EntropyPreference | str = EntropyPreference.CRYPTO,
    *,
    strict: bool = False,
    seed: int | None = None,
) -> EntropySource:
    """Pick a concrete entropy source for a preference.

    When the strong source is preferred but the host cannot provide it, the
    fallback source is returned and a warning is logged, unless ``strict`` is
    set. Callers can inspect ``is_cryptographic`` on the result to detect the
    downgrade.

    Args:
        preference: "crypto" or "fallback".
        strict: Raise instead of degrading to the fallback.
        seed: Seed for the fallback source.

    Returns:
        The selected entropy source.

    Raises:
        EntropySourceUnavailableError: If strict and the strong source is
            unavailable.
    """
    preference = EntropyPreference(preference)
    if preference == EntropyPreference.FALLBACK:
        return FallbackEntropySource(seed)

    if StrongEntropySource.available():
        return StrongEntropySource()

    if strict:
        raise EntropySourceUnavailableError(
            "Cryptographically strong entropy source is not available on this host"
        )
    logger.warning(
        "Strong entropy source unavailable, falling back to non-cryptographic source"
    )
    return FallbackEntropySource(seed)
