"""template-cycle command-line interface.

Entry point for the ``tcycle`` CLI tool.
"""

from __future__ import annotations

import click
from rich.console import Console

from template_cycle import __app_name__, __version__

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """tcycle: preview and check value cycles for templates."""
    ctx.ensure_object(dict)
    ctx.obj["console"] = console


# Import and register sub-commands
from template_cycle.cli.take_cmd import take  # noqa: E402
from template_cycle.cli.config_cmd import config  # noqa: E402
from template_cycle.cli.plugins_cmd import plugins  # noqa: E402

cli.add_command(take)
cli.add_command(config)
cli.add_command(plugins)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
