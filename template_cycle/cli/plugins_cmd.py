"""CLI command for listing template plugins."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from template_cycle.plugins.manager import default_manager


@click.command("plugins")
@click.option("--plugin-dir", type=click.Path(file_okay=False), default=None,
              help="Also discover plugins from this directory.")
@click.pass_context
def plugins(ctx: click.Context, plugin_dir: str | None) -> None:
    """List available template plugins."""
    console: Console = ctx.obj.get("console", Console())
    manager = default_manager()
    manager.discover_entry_points()
    if plugin_dir:
        manager.discover(plugin_dir)

    table = Table(title="Template Plugins")
    table.add_column("Name", style="cyan")
    table.add_column("Version", style="green")
    table.add_column("Description")
    table.add_column("Author", style="dim")
    table.add_column("Source", style="dim")

    for info in manager.summary():
        table.add_row(info["name"], info["version"], escape(info["description"]), info["author"] or "—",
                      escape(info["source"]))
    console.print(table)
