"""CLI command: saat rules — list the supported WCAG rules."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from saat.core.rules import WCAG_RULES

console = Console()


@click.command()
@click.option("--details", is_flag=True, help="Show the full description of each rule.")
def rules(details: bool) -> None:
    """List the WCAG success criteria SAAT checks."""
    table = Table(title="WCAG rules", show_lines=details)
    table.add_column("Rule", style="bold cyan")
    table.add_column("Name")
    table.add_column("Level", justify="center")
    table.add_column("Description")

    for definition in WCAG_RULES.values():
        table.add_row(
            definition.code,
            definition.name,
            definition.level,
            definition.full_description if details else definition.description,
        )

    console.print(table)
