"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from saat.core.models import NormalizedComponent


def vue_source(template: str = "", script: str = "") -> str:
    """Wrap markup and code in a single-file component."""
    parts = []
    if template:
        parts.append(f"<template>\n{template}\n</template>")
    if script:
        parts.append(f"<script>\n{script}\n</script>")
    return "\n\n".join(parts) + "\n"


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_components_dir(fixtures_dir: Path) -> Path:
    return fixtures_dir / "components"


@pytest.fixture
def sample_config_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "saat.yaml"


@pytest.fixture
def make_component() -> Callable[..., NormalizedComponent]:
    def _make(
        template: str = "",
        script: str = "",
        name: str = "TestComponent",
        path: str = "src/components/TestComponent.vue",
    ) -> NormalizedComponent:
        return NormalizedComponent(
            name=name, path=path, template=template, script=script
        )

    return _make


@pytest.fixture
def write_component(tmp_path: Path) -> Callable[..., Path]:
    """Write a .vue file under tmp_path and return its path."""

    def _write(relative: str, template: str = "", script: str = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(vue_source(template, script), encoding="utf-8")
        return path

    return _write
