"""Markdown report — human-readable audit summary."""

from __future__ import annotations

from pathlib import Path

from saat.core.models import AuditResult, ComponentAuditResult, format_timestamp
from saat.core.rules import rule_name

REPORT_FILENAME = "saat-audit.md"


def render_markdown_report(result: AuditResult) -> str:
    """Summary, per-rule statistics and per-component violations."""
    summary = result.summary
    lines = [
        "# SAAT Accessibility Audit",
        "",
        f"Generated: {format_timestamp(result.timestamp)}",
        "",
        "## Summary",
        "",
        f"- Components scanned: {summary.total_components}",
        f"- Components with violations: {summary.components_with_violations}",
        f"- Components failed to parse: {result.components_failed}",
        f"- Total violations: {summary.total_violations}",
        f"- Overall conformity: {summary.overall_conformity_percent:.1f}%",
        f"- Duration: {result.duration_ms} ms",
        "",
        "## Conformity by rule",
        "",
        "| Rule | Name | Passed | Failed | N/A | Conformity |",
        "|---|---|---:|---:|---:|---:|",
    ]
    for stat in summary.rule_statistics:
        lines.append(
            f"| {stat.rule_id} | {stat.rule_name} | {stat.passed} | {stat.failed} "
            f"| {stat.not_applicable} | {stat.conformity_percent:.1f}% |"
        )

    lines += ["", "## Violations", ""]
    offenders = [c for c in result.components if c.has_violations]
    if not offenders:
        lines.append("No violations found.")
    for component in offenders:
        lines += _component_section(component)

    return "\n".join(lines) + "\n"


def _component_section(component: ComponentAuditResult) -> list[str]:
    lines = [
        f"### {component.name}",
        "",
        f"`{component.path}`",
        "",
    ]
    for v in component.violations:
        location = f" (line {v.line})" if v.line is not None else ""
        lines.append(
            f"- **{v.rule_id} {rule_name(v.rule_id)}** "
            f"[{v.severity.value}]{location}: {v.issue}"
        )
        lines.append(f"  - Fix: {v.recommendation}")
        if v.content:
            lines.append(f"  - Code: `{_escape_code(v.content)}`")
    lines.append("")
    return lines


def _escape_code(text: str) -> str:
    return text.replace("`", "'")


def write_markdown_report(result: AuditResult, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_markdown_report(result), encoding="utf-8")
    return path
