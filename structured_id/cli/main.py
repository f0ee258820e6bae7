"""Main CLI entry point for structured-id."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from structured_id.cli.codes import format_cmd, parse_cmd, validate
from structured_id.cli.config import config
from structured_id.cli.generate import generate, info
from structured_id.exceptions import StructuredIdError
from structured_id.models.config import Algorithm, Charset, EntropyPreference

console = Console()


def _setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a defaults file",
)
@click.option(
    "-c",
    "--charset",
    type=click.Choice([c.value for c in Charset]),
    help="Character set (default: numeric)",
)
@click.option(
    "-a",
    "--algorithm",
    type=click.Choice([a.value for a in Algorithm]),
    help="Check character algorithm (default: none)",
)
@click.option("-g", "--groups", type=int, help="Number of groups (default: 4)")
@click.option("-s", "--group-size", type=int, help="Characters per group (default: 4)")
@click.option("--separator", help="Display separator (default: none)")
@click.option(
    "--entropy",
    type=click.Choice([e.value for e in EntropyPreference]),
    help="Entropy source (default: crypto)",
)
@click.option(
    "--strict-entropy",
    is_flag=True,
    help="Fail instead of falling back when the crypto source is unavailable",
)
@click.option("--seed", type=int, help="Seed a non-cryptographic source (reproducible output)")
@click.option("--debug/--no-debug", default=False, help="Show debug information")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    charset: str | None,
    algorithm: str | None,
    groups: int | None,
    group_size: int | None,
    separator: str | None,
    entropy: str | None,
    strict_entropy: bool,
    seed: int | None,
    debug: bool,
) -> None:
    """structured-id - Generate and validate structured IDs with optional checksums.

    Options given here apply to every command and override the defaults file
    (.structured-id.yaml or ~/.structured-id/config.yaml).

    Examples:
        sid generate
        sid -c alphanumeric -a mod36 --separator - generate
        sid -a luhn -g 1 -s 11 validate 79927398713
    """
    _setup_logging(debug)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["strict_entropy"] = strict_entropy
    ctx.obj["seed"] = seed
    ctx.obj["debug"] = debug
    ctx.obj["overrides"] = {
        "charset": charset,
        "algorithm": algorithm,
        "groups": groups,
        "group_size": group_size,
        "separator": separator,
        "entropy": entropy,
    }


@cli.command()
@click.pass_context
def help(ctx: click.Context) -> None:
    """Show this help message."""
    click.echo(ctx.parent.get_help())


# Register commands
cli.add_command(generate)
cli.add_command(info)
cli.add_command(validate)
cli.add_command(format_cmd, name="format")
cli.add_command(parse_cmd, name="parse")
cli.add_command(config)


def main() -> None:
    """Main entry point with error handling."""
    try:
        cli()
    except StructuredIdError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)
    except Exception as e:
        if "--debug" in sys.argv:
            raise
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
