"""CLI command: saat audit [DIRECTORY] — run the WCAG audit."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from saat.cli import load_cli_config
from saat.core.engine import AuditEngine
from saat.core.errors import ConfigurationError
from saat.core.models import AuditResult
from saat.reporters import json_report, markdown
from saat.reporters.badge import generate_badges

console = Console(stderr=True)


def _conformity_style(percent: float) -> str:
    if percent >= 95:
        return "green"
    if percent >= 85:
        return "yellow"
    return "red"


@click.command()
@click.argument("directory", type=click.Path(file_okay=False), required=False)
@click.option(
    "--rule",
    "-r",
    "rules",
    multiple=True,
    help="Rule id to check (repeatable). Defaults to the configured rules.",
)
@click.option(
    "--min-conformity",
    type=click.FloatRange(0, 100),
    default=None,
    help="Fail when overall conformity is below this percentage.",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for report files.",
)
@click.option("--no-json", is_flag=True, help="Skip the JSON report.")
@click.option("--no-markdown", is_flag=True, help="Skip the Markdown report.")
@click.option(
    "--badge/--no-badge",
    default=None,
    help="Generate SVG conformity badges.",
)
@click.pass_context
def audit(
    ctx: click.Context,
    directory: str | None,
    rules: tuple[str, ...],
    min_conformity: float | None,
    output_dir: str | None,
    no_json: bool,
    no_markdown: bool,
    badge: bool | None,
) -> None:
    """Audit Vue components for WCAG conformity."""
    config = load_cli_config(ctx)
    if config.logging.level == "verbose" and not ctx.obj.get("quiet"):
        logging.getLogger("saat").setLevel(logging.DEBUG)
    console.quiet = ctx.obj.get("quiet") or config.logging.level == "quiet"

    target = Path(directory) if directory else config.components_dir
    threshold = min_conformity if min_conformity is not None else config.min_conformity
    reports_dir = Path(output_dir) if output_dir else config.output_dir

    try:
        engine = AuditEngine(
            rules=list(rules) or config.rules,
            component_types=config.component_types,
        )
    except ConfigurationError as e:
        raise click.BadParameter(str(e), param_hint="--rule") from e

    console.print(
        f"[bold]SAAT[/bold] auditing [cyan]{target}[/cyan] "
        f"against {len(engine.rules)} rule(s)\n"
    )
    result = engine.run(target)

    if not result.components:
        console.print("[yellow]No components found.[/yellow]")

    _print_summary(result, timing=config.logging.timing)

    if config.output.json and not no_json:
        path = json_report.write_json_report(
            result,
            reports_dir / json_report.REPORT_FILENAME,
            pretty=config.output.pretty_json,
        )
        console.print(f"JSON report: [cyan]{path}[/cyan]")

    if config.output.markdown and not no_markdown:
        path = markdown.write_markdown_report(
            result, reports_dir / markdown.REPORT_FILENAME
        )
        console.print(f"Markdown report: [cyan]{path}[/cyan]")

    make_badges = config.generate_badge if badge is None else badge
    if make_badges:
        generate_badges(result.summary.to_dict(), reports_dir)
        console.print(f"Badges: [cyan]{reports_dir}[/cyan]")

    if not result.meets_threshold(threshold):
        console.print(
            f"\n[red]Conformity {result.overall_conformity_percent:.1f}% "
            f"is below threshold {threshold:g}%[/red]"
        )
        sys.exit(1)


def _print_summary(result: AuditResult, timing: bool = True) -> None:
    summary = result.summary

    table = Table(title="Conformity by rule", show_lines=False)
    table.add_column("Rule", style="bold")
    table.add_column("Name")
    table.add_column("Passed", justify="right")
    table.add_column("Failed", justify="right")
    table.add_column("N/A", justify="right")
    table.add_column("Violations", justify="right")
    table.add_column("Conformity", justify="right")

    for stat in summary.rule_statistics:
        style = _conformity_style(stat.conformity_percent)
        table.add_row(
            stat.rule_id,
            stat.rule_name,
            str(stat.passed),
            str(stat.failed),
            str(stat.not_applicable),
            str(summary.by_rule.get(stat.rule_id, 0)),
            f"[{style}]{stat.conformity_percent:.1f}%[/{style}]",
        )

    console.print(table)
    console.print(
        f"\nScanned {summary.total_components} components "
        f"({result.components_failed} failed to parse), "
        f"{summary.components_with_violations} with violations"
    )
    console.print(f"Total violations: {summary.total_violations}")
    style = _conformity_style(summary.overall_conformity_percent)
    console.print(
        f"Overall conformity: [{style}]"
        f"{summary.overall_conformity_percent:.1f}%[/{style}]"
    )
    if timing:
        console.print(f"Duration: {result.duration_ms} ms")
