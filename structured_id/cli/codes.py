"""Validate, format and parse commands for structured-id CLI."""

import click
from rich.console import Console
from rich.markup import escape

from structured_id.cli.options import get_code_config
from structured_id.exceptions import ShapeMismatchError
from structured_id.services.codec import validate_id
from structured_id.services.formatter import format_id, parse_display

console = Console()


@click.command()
@click.argument("code")
@click.option(
    "-d",
    "--display",
    is_flag=True,
    help="CODE is in display form; strip separators before checking",
)
@click.pass_context
def validate(ctx: click.Context, code: str, display: bool) -> None:
    """Check an ID. Exits 0 if valid, 1 if invalid.

    CODE is the ID to check.

    Examples:
        sid -a luhn -g 1 -s 11 validate 79927398713
        sid -c alphanumeric -a mod36 --separator - validate --display AB12-...
    """
    code_config = get_code_config(ctx)

    candidate = code
    if display:
        try:
            candidate = parse_display(code, code_config)
        except ShapeMismatchError:
            candidate = None

    if candidate is not None and validate_id(candidate, code_config):
        console.print(f"[green]Valid:[/green] {escape(candidate.upper())}", highlight=False)
        return

    console.print(f"[red]Invalid:[/red] {escape(code)}", highlight=False)
    ctx.exit(1)


@click.command()
@click.argument("code")
@click.pass_context
def format_cmd(ctx: click.Context, code: str) -> None:
    """Render a canonical ID in display form.

    CODE is the canonical ID (no separators).
    """
    code_config = get_code_config(ctx)
    try:
        click.echo(format_id(code, code_config))
    except ShapeMismatchError as e:
        console.print(f"[red]Cannot format:[/red] {escape(str(e))}")
        raise click.Abort() from None


@click.command()
@click.argument("display")
@click.pass_context
def parse_cmd(ctx: click.Context, display: str) -> None:
    """Recover the canonical ID from display form.

    DISPLAY is the ID with separators.
    """
    code_config = get_code_config(ctx)
    try:
        click.echo(parse_display(display, code_config))
    except ShapeMismatchError as e:
        console.print(f"[red]Cannot parse:[/red] {escape(str(e))}")
        raise click.Abort() from None
