"""CLI command: saat badge REPORT — badges from an existing JSON report."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.console import Console

from saat.reporters.badge import (
    conformity_level,
    conformity_status,
    generate_badges_from_report,
)
from saat.reporters.json_report import load_json_report

console = Console(stderr=True)


@click.command()
@click.argument("report", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False),
    default=None,
    help="Where to write badges (default: the report's directory).",
)
def badge(report: str, output_dir: str | None) -> None:
    """Generate WCAG conformity badges from a saat-audit.json report."""
    target = Path(output_dir) if output_dir else Path(report).parent

    try:
        data = load_json_report(report)
        written = generate_badges_from_report(data, target)
    except (json.JSONDecodeError, ValueError) as e:
        raise click.ClickException(f"Badge generation failed: {e}") from e

    conformity = float(data["summary"]["overallConformityPercent"])
    console.print(
        f"[bold]WCAG {conformity_level(conformity)}[/bold] "
        f"{conformity:.2f}% ({conformity_status(conformity)})"
    )
    for path in written:
        console.print(f"  [green]wrote[/green] {path}")
