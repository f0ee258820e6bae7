"""Config CLI commands for structured-id."""

from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from structured_id.cli.options import get_code_config
from structured_id.services.settings import (
    LOCAL_SETTINGS_NAME,
    discover_settings_path,
    global_settings_path,
    save_settings,
)

console = Console()


def _format_value(value: Any) -> str:
    """Format a value for display.

    Args:
        value: The value to format.

    Returns:
        Formatted string representation.
    """
    if value is None:
        return "[dim]not set[/dim]"
    if value == "":
        return "[dim]empty[/dim]"
    return escape(repr(value) if isinstance(value, str) and value.strip() != value else str(value))


def _render_dict_tree(tree: Tree, d: dict[str, Any]) -> None:
    """Render a flat dictionary as tree leaves.

    Args:
        tree: The Rich Tree object to add to.
        d: The dictionary to render.
    """
    for key, value in d.items():
        tree.add(f"[cyan]{key}[/cyan]: {_format_value(value)}")


@click.group()
def config() -> None:
    """View and save default settings."""
    pass


@config.command(name="show")
@click.argument("key", required=False)
@click.pass_context
def config_show(ctx: click.Context, key: str | None) -> None:
    """Show the effective settings.

    If KEY is provided, show only that value.

    Examples:
        sid config show
        sid config show groupSize
    """
    settings = get_code_config(ctx).display_settings()

    if key:
        if key not in settings:
            console.print(f"[yellow]Unknown key '{escape(key)}'[/yellow]")
            raise click.Abort()
        console.print(f"{key}: {_format_value(settings[key])}")
        return

    source = discover_settings_path(ctx.obj.get("config_path"))
    label = f"from {source}" if source else "built-in defaults"
    tree = Tree(f"[bold]Configuration[/bold] [dim]({escape(label)})[/dim]")
    _render_dict_tree(tree, settings)
    console.print(tree)


@config.command(name="init")
@click.option("--global", "global_", is_flag=True, help="Write ~/.structured-id/config.yaml")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@click.pass_context
def config_init(ctx: click.Context, global_: bool, force: bool) -> None:
    """Save the effective settings as a defaults file.

    Writes .structured-id.yaml in the current directory unless --global.

    Examples:
        sid -c alphanumeric -a mod36 --separator - config init
    """
    code_config = get_code_config(ctx)
    path = global_settings_path() if global_ else Path.cwd() / LOCAL_SETTINGS_NAME

    if path.exists() and not force:
        console.print(f"[yellow]{escape(str(path))} already exists (use --force)[/yellow]")
        raise click.Abort()

    save_settings(path, code_config)
    console.print(f"[green]Saved settings to {escape(str(path))}[/green]")
