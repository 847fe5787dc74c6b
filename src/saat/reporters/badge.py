"""SVG conformity badges built from an audit summary."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from saat.core.rules import ALL_RULE_IDS

logger = logging.getLogger(__name__)

BADGE_FILENAME = "wcag-conformity.svg"
DETAILED_BADGE_FILENAME = "wcag-conformity-detailed.svg"
MARKDOWN_FILENAME = "wcag-badge.md"

# (threshold, level, color, status), highest first
_LEVELS = (
    (95.0, "AAA", "#28a745", "Excellent"),
    (85.0, "AA", "#ffc107", "Good"),
    (70.0, "A", "#fd7e14", "Fair"),
)
_CRITICAL = ("A", "#dc3545", "Critical")

_SVG_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="{total}" height="20" role="img" aria-label="{label}">
  <title>{title}</title>
  <linearGradient id="s" x2="0" y2="100%">
    <stop offset="0" stop-color="#bbb"/>
    <stop offset="1" stop-color="#999"/>
  </linearGradient>
  <clipPath id="r">
    <rect width="{total}" height="20" rx="3" fill="#fff"/>
  </clipPath>
  <g clip-path="url(#r)">
    <rect width="{left}" height="20" fill="#555"/>
    <rect x="{left}" width="{right}" height="20" fill="{color}"/>
    <rect width="{total}" height="20" fill="url(#s)" opacity="0.1"/>
  </g>
  <g fill="#fff" text-anchor="middle" font-family="Verdana,Geneva,DejaVu Sans,sans-serif" font-size="11">
    <text x="{left_center}" y="14">{left_text}</text>
    <text x="{right_center}" y="14">{right_text}</text>
  </g>
</svg>
"""


def conformity_level(conformity: float) -> str:
    if conformity >= 95:
        return "AAA"
    if conformity >= 85:
        return "AA"
    return "A"


def conformity_color(conformity: float) -> str:
    for threshold, _, color, _ in _LEVELS:
        if conformity >= threshold:
            return color
    return _CRITICAL[1]


def conformity_status(conformity: float) -> str:
    for threshold, _, _, status in _LEVELS:
        if conformity >= threshold:
            return status
    return _CRITICAL[2]


def _render_svg(
    left_text: str,
    right_text: str,
    color: str,
    title: str,
    label: str,
    left: int,
    right: int,
) -> str:
    return _SVG_TEMPLATE.format(
        total=left + right,
        left=left,
        right=right,
        left_center=left // 2,
        right_center=left + right // 2,
        left_text=left_text,
        right_text=right_text,
        color=color,
        title=title,
        label=label,
    )


def render_badge_svg(conformity: float) -> str:
    """Level and percentage, e.g. ``WCAG AA | 87.5% (Good)``."""
    percent = f"{conformity:.1f}"
    return _render_svg(
        left_text=f"WCAG {conformity_level(conformity)}",
        right_text=f"{percent}% ({conformity_status(conformity)})",
        color=conformity_color(conformity),
        title="WCAG Conformity Badge",
        label=f"WCAG Conformity: {percent}%",
        left=140,
        right=150,
    )


def render_detailed_badge_svg(
    conformity: float,
    passing_rules: int,
    rule_count: int,
) -> str:
    return _render_svg(
        left_text=f"WCAG 2.1 Level {conformity_level(conformity)}",
        right_text=f"{passing_rules}/{rule_count} rules passing",
        color=conformity_color(conformity),
        title="WCAG Rules Conformity Badge",
        label=f"WCAG Conformity: {passing_rules}/{rule_count} rules",
        left=160,
        right=180,
    )


def render_markdown_badge(conformity: float, badge_path: str = BADGE_FILENAME) -> str:
    level = conformity_level(conformity)
    return f"![WCAG {level} Conformity {conformity:.1f}%]({badge_path})\n"


def _rule_counts(summary: Mapping[str, Any], conformity: float) -> tuple[int, int]:
    stats = summary.get("ruleStatistics") or []
    if not stats:
        rule_count = len(ALL_RULE_IDS)
        return round(conformity / 100 * rule_count), rule_count
    passing = sum(1 for s in stats if not s.get("failed"))
    return passing, len(stats)


def generate_badges(summary: Mapping[str, Any], output_dir: str | Path) -> list[Path]:
    """Write the simple badge, the detailed badge and a Markdown snippet.

    ``summary`` is the ``summary`` object of a JSON audit report. Raises
    ValueError when it carries no ``overallConformityPercent``.
    """
    conformity = summary.get("overallConformityPercent") if summary else None
    if conformity is None:
        raise ValueError("Invalid audit report: missing summary.overallConformityPercent")
    conformity = float(conformity)
    passing, rule_count = _rule_counts(summary, conformity)

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for filename, content in (
        (BADGE_FILENAME, render_badge_svg(conformity)),
        (DETAILED_BADGE_FILENAME, render_detailed_badge_svg(conformity, passing, rule_count)),
        (MARKDOWN_FILENAME, render_markdown_badge(conformity)),
    ):
        path = output_dir / filename
        path.write_text(content, encoding="utf-8")
        written.append(path)

    logger.info(
        "Badges written to %s (WCAG %s, %.2f%%)",
        output_dir,
        conformity_level(conformity),
        conformity,
    )
    return written


def generate_badges_from_report(
    report: Mapping[str, Any],
    output_dir: str | Path,
) -> list[Path]:
    summary = report.get("summary")
    if not isinstance(summary, Mapping):
        raise ValueError("Invalid audit report: missing summary")
    return generate_badges(summary, output_dir)
