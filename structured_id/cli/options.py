"""Shared option handling for structured-id CLI commands."""

from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from structured_id.exceptions import ConfigurationError, EntropySourceUnavailableError, SettingsError
from structured_id.models.config import CodeConfig, resolve_config
from structured_id.services.codec import CodecService
from structured_id.services.entropy import FallbackEntropySource
from structured_id.services.settings import discover_settings_path, load_settings

console = Console()


def effective_options(ctx: click.Context) -> dict[str, Any]:
    """Merge defaults-file values with options given on the command line.

    Command-line options win over the defaults file.
    """
    settings_path: Path | None = discover_settings_path(ctx.obj.get("config_path"))
    options = load_settings(settings_path)
    overrides: dict[str, Any] = ctx.obj.get("overrides", {})
    for key, value in overrides.items():
        if value is None:
            continue
        # Drop the camelCase spelling from the file if the CLI sets the field
        if key == "group_size":
            options.pop("groupSize", None)
        elif key == "entropy":
            options.pop("entropySource", None)
        options[key] = value
    return options


def get_code_config(ctx: click.Context) -> CodeConfig:
    """Resolve the effective configuration, aborting on errors.

    Args:
        ctx: Click context populated by the ``sid`` group.

    Returns:
        The resolved configuration.
    """
    try:
        return resolve_config(**effective_options(ctx))
    except (ConfigurationError, SettingsError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise click.Abort() from None
    except ValidationError as e:
        console.print(f"[red]Invalid settings:[/red] {escape(str(e))}")
        raise click.Abort() from None


def get_codec(ctx: click.Context) -> CodecService:
    """Build a codec service for the effective configuration.

    A ``--seed`` selects a seeded fallback source for reproducible output.
    """
    config = get_code_config(ctx)
    seed: int | None = ctx.obj.get("seed")
    source = FallbackEntropySource(seed) if seed is not None else None
    try:
        return CodecService(config, source, strict_entropy=ctx.obj.get("strict_entropy", False))
    except EntropySourceUnavailableError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise click.Abort() from None
