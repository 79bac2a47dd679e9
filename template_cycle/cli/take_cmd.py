"""CLI command for previewing the values a cycle produces."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from template_cycle.plugins.manager import default_manager


@click.command("take")
@click.argument("values", nargs=-1)
@click.option("--count", "-n", type=click.IntRange(min=0), default=6, show_default=True,
              help="Number of values to read.")
@click.option("--reset-every", type=click.IntRange(min=1), default=None,
              help="Reset the cycle after this many reads.")
@click.pass_context
def take(ctx: click.Context, values: tuple[str, ...], count: int, reset_every: int | None) -> None:
    """Read COUNT values from a cycle over VALUES."""
    console: Console = ctx.obj.get("console", Console())
    cyc = default_manager().load("Cycle", *values)

    console.print(f"\n[bold]Cycle of {cyc.elements()} values[/bold]\n")

    table = Table()
    table.add_column("Read", justify="right", style="dim")
    table.add_column("Value", style="green")

    for i in range(count):
        if reset_every and i and i % reset_every == 0:
            cyc.reset()
            table.add_row("", "[yellow]reset[/yellow]")
        table.add_row(str(i + 1), escape(cyc.stringify()))

    console.print(table)
