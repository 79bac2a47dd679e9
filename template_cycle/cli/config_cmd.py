"""CLI commands for checking and inspecting cycle config files."""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from template_cycle.core.config import load_cycle_config
from template_cycle.utils.validation import Severity, validate_cycle_config

_STYLES = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
}


def _load(path: str):
    try:
        return load_cycle_config(path)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{path} is not valid JSON: {e}") from e
    except ValueError as e:
        raise click.ClickException(f"{path} is not a cycle config: {e}") from e


@click.group("config")
@click.pass_context
def config(ctx: click.Context) -> None:
    """Check and inspect cycle config files."""
    pass


@config.command("check")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def config_check(ctx: click.Context, path: str) -> None:
    """Validate a cycle config file."""
    console: Console = ctx.obj.get("console", Console())
    result = validate_cycle_config(_load(path))

    for msg in result.messages:
        style = _STYLES[msg.severity]
        console.print(f"[{style}]{msg.severity.value.upper()}[/{style}] {escape(msg.parameter)}: {escape(msg.message)}")

    if not result.is_valid:
        console.print(f"[bold red]{len(result.errors)} error(s)[/bold red]")
        ctx.exit(1)
    console.print("[bold green]OK[/bold green]")


@config.command("show")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def config_show(ctx: click.Context, path: str) -> None:
    """Display the cycles defined in a config file."""
    console: Console = ctx.obj.get("console", Console())
    cfg = _load(path)
    if not isinstance(cfg.cycles, dict):
        raise click.ClickException(f"{path}: cycles must be a mapping of name to values")

    tree = Tree(f"[bold]{escape(cfg.meta.name)}[/bold]")
    for name, values in cfg.cycles.items():
        branch = tree.add(f"[cyan]{escape(str(name))}[/cyan]")
        for v in values if isinstance(values, list) else [values]:
            branch.add(escape(repr(v)))

    console.print(tree)
