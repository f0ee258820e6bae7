"""Generate and info commands for structured-id CLI."""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from structured_id.cli.options import get_code_config, get_codec
from structured_id.exceptions import EntropySourceUnavailableError

console = Console()
err_console = Console(stderr=True)


@click.command()
@click.option("-n", "--count", type=click.IntRange(min=1), default=1, help="How many IDs")
@click.option("--raw", is_flag=True, help="Print canonical IDs without separators")
@click.pass_context
def generate(ctx: click.Context, count: int, raw: bool) -> None:
    """Generate new IDs.

    Examples:
        sid generate
        sid generate -n 10
        sid -c alphanumeric -a mod36 --separator - generate
    """
    codec = get_codec(ctx)
    try:
        ids = codec.generate_many(count)
    except EntropySourceUnavailableError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise click.Abort() from None

    if not codec.source.is_cryptographic and ctx.obj.get("seed") is None:
        err_console.print("[yellow]Warning:[/yellow] using a non-cryptographic entropy source")

    for new_id in ids:
        click.echo(new_id if raw else codec.format(new_id))


@click.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show the effective ID shape, alphabet and entropy."""
    code_config = get_code_config(ctx)

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row("Charset", code_config.charset.value)
    table.add_row("Alphabet", code_config.alphabet)
    table.add_row("Algorithm", code_config.algorithm.value)
    table.add_row("Shape", f"{code_config.groups} x {code_config.group_size}")
    table.add_row("Total length", str(code_config.total_length))
    table.add_row("Entropy", f"{code_config.entropy_bits} bits")
    console.print(table)
