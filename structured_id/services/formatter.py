"""Conversion between canonical and display forms.

Purely structural: the separator is inserted between fixed-size groups, and
neither direction looks at the alphabet or the check character.
"""

from structured_id.exceptions import ShapeMismatchError
from structured_id.models.config import CodeConfig


def format_id(canonical: str, config: CodeConfig, separator: str | None = None) -> str:
    """Insert the separator between every group of a canonical identifier.

    Args:
        canonical: The canonical identifier.
        config: The resolved configuration.
        separator: Separator override; defaults to ``config.separator``.

    Returns:
        The display form with ``config.groups`` groups.

    Raises:
        ShapeMismatchError: If the identifier length differs from the
            configured total length.
    """
    if len(canonical) != config.total_length:
        raise ShapeMismatchError(config.total_length, len(canonical))

    sep = config.separator if separator is None else separator
    size = config.group_size
    return sep.join(canonical[i : i + size] for i in range(0, len(canonical), size))


def parse_display(display: str, config: CodeConfig, separator: str | None = None) -> str:
    """Remove separators from a display form to recover the canonical identifier.

    Args:
        display: The display form.
        config: The resolved configuration.
        separator: Separator override; defaults to ``config.separator``.

    Returns:
        The canonical identifier, unchanged in case.

    Raises:
        ShapeMismatchError: If the stripped string has the wrong length.
    """
    sep = config.separator if separator is None else separator
    canonical = display.replace(sep, "") if sep else display
    if len(canonical) != config.total_length:
        raise ShapeMismatchError(config.total_length, len(canonical))
    return canonical
