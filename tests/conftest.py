"""Pytest fixtures for structured-id tests."""

from collections.abc import Iterable
from pathlib import Path

import pytest

from structured_id.exceptions import EntropySourceUnavailableError
from structured_id.models.config import CodeConfig, resolve_config
from structured_id.services.entropy import EntropySource


class SequenceEntropySource(EntropySource):
    """Deterministic source that replays a fixed list of draws."""

    def __init__(self, draws: Iterable[int]) -> None:
        self._draws = list(draws)
        self.calls: list[int] = []

    def randbelow(self, n: int) -> int:
        if len(self.calls) >= len(self._draws):
            raise EntropySourceUnavailableError("Sequence exhausted")
        self.calls.append(n)
        return self._draws[len(self.calls) - 1]


class BrokenEntropySource(EntropySource):
    """Source whose host randomness is missing."""

    def randbelow(self, n: int) -> int:
        raise NotImplementedError("no randomness here")


@pytest.fixture
def numeric_luhn() -> CodeConfig:
    """Numeric, Luhn, one group of 11 (fits the classic 79927398713 vector)."""
    return resolve_config(charset="numeric", algorithm="luhn", groups=1, groupSize=11)


@pytest.fixture
def alnum_mod36() -> CodeConfig:
    """Alphanumeric, Mod36, 4 groups of 4 with a dash separator."""
    return resolve_config(
        charset="alphanumeric", algorithm="mod36", groups=4, groupSize=4, separator="-"
    )


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME and the working directory at empty temp folders.

    Returns:
        The temporary home directory.
    """
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    monkeypatch.chdir(work)
    return home


@pytest.fixture
def make_source() -> type[SequenceEntropySource]:
    """Factory for deterministic entropy sources.

    Returns:
        The SequenceEntropySource class, called with the draws to replay.
    """
    return SequenceEntropySource


@pytest.fixture
def broken_source() -> BrokenEntropySource:
    """An entropy source that cannot produce values."""
    return BrokenEntropySource()
