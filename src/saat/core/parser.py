"""Vue single-file component parser — regex slicing, no syntax tree."""

from __future__ import annotations

import re
from pathlib import Path

from saat.core.errors import ParseError
from saat.core.models import NormalizedComponent

_TEMPLATE_RE = re.compile(r"<template[^>]*>([\s\S]*?)</template>")
_SCRIPT_RE = re.compile(r"<script[^>]*>([\s\S]*?)</script>")

_EXPORT_NAME_RE = re.compile(
    r"export\s+default\s+(?:defineComponent\s*\(\s*)?\{[\s\S]*?"
    r"(?<![\w$])name\s*:\s*['\"]([\w-]+)['\"]"
)
_DEFINE_OPTIONS_NAME_RE = re.compile(
    r"defineOptions\s*\(\s*\{[\s\S]*?(?<![\w$])name\s*:\s*['\"]([\w-]+)['\"]"
)

_ATTRIBUTE_RE = re.compile(r"\s+([^\s=/>]+)(?:\s*=\s*(?:\"([^\"]*)\"|'([^']*)'))?")

UNKNOWN_COMPONENT = "UnknownComponent"


def parse_component(path: str | Path) -> NormalizedComponent:
    """Read a component file and slice out its template and script."""
    try:
        content = Path(path).read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        raise ParseError(str(path), str(e)) from e
    return parse_component_source(content, str(path))


def parse_component_source(content: str, path: str) -> NormalizedComponent:
    """Slice already-loaded component source."""
    template = _TEMPLATE_RE.search(content)
    script = _SCRIPT_RE.search(content)
    return NormalizedComponent(
        name=extract_component_name(path, content),
        path=path,
        template=template.group(1) if template else "",
        script=script.group(1) if script else "",
    )


def extract_component_name(path: str, content: str) -> str:
    """Declared component name, else the filename stem."""
    for regex in (_EXPORT_NAME_RE, _DEFINE_OPTIONS_NAME_RE):
        match = regex.search(content)
        if match:
            return match.group(1)
    stem = Path(path).stem
    return stem or UNKNOWN_COMPONENT


def line_at(text: str, index: int) -> int:
    """1-based line number of a character offset."""
    return text.count("\n", 0, index) + 1


def parse_attributes(tag: str) -> dict[str, str | None]:
    """Attributes of an opening tag; valueless attributes map to None."""
    attributes: dict[str, str | None] = {}
    inner = re.sub(r"^<[\w.-]+", "", tag.strip())
    for match in _ATTRIBUTE_RE.finditer(inner):
        key = match.group(1)
        if match.group(2) is not None:
            attributes[key] = match.group(2)
        else:
            attributes[key] = match.group(3)
    return attributes


def extract_elements(template: str, tag: str) -> list[dict]:
    """Opening tags of one element type with their line and attributes."""
    elements = []
    regex = re.compile(rf"<{re.escape(tag)}\b[^>]*>", re.IGNORECASE)
    for match in regex.finditer(template):
        elements.append(
            {
                "tag": tag,
                "content": match.group(0),
                "line": line_at(template, match.start()),
                "attributes": parse_attributes(match.group(0)),
            }
        )
    return elements
