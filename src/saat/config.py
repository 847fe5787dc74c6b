"""Audit configuration — saat.yaml, env vars, defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from saat.core.applicability import (
    ALL_COMPONENT_TYPES,
    ComponentType,
    parse_component_type,
)
from saat.core.errors import ConfigurationError
from saat.core.rules import ALL_RULE_IDS, WCAG_RULES

DEFAULT_CONFIG_FILE = "saat.yaml"
DEFAULT_MIN_CONFORMITY = 85.0

LOG_LEVELS = ("verbose", "normal", "quiet")

# camelCase spellings accepted for compatibility with existing configs
_KEY_ALIASES = {
    "componentsDir": "components_dir",
    "outputDir": "output_dir",
    "minConformity": "min_conformity",
    "componentTypes": "component_types",
    "generateBadge": "generate_badge",
    "prettyJson": "pretty_json",
}


@dataclass
class OutputOptions:
    json: bool = True
    markdown: bool = True
    pretty_json: bool = True


@dataclass
class LoggingOptions:
    level: str = "normal"
    timing: bool = True


@dataclass
class SaatConfig:
    """Settings for one audit run."""

    components_dir: Path = field(default_factory=lambda: Path("src/components"))
    output_dir: Path = field(default_factory=lambda: Path("a11y-reports"))
    rules: tuple[str, ...] = ALL_RULE_IDS
    min_conformity: float = DEFAULT_MIN_CONFORMITY
    component_types: tuple[ComponentType, ...] = ALL_COMPONENT_TYPES
    generate_badge: bool = False
    output: OutputOptions = field(default_factory=OutputOptions)
    logging: LoggingOptions = field(default_factory=LoggingOptions)

    @classmethod
    def load(cls, path: str | Path | None = None) -> SaatConfig:
        """Load config from a YAML file (or ./saat.yaml), then env overrides."""
        if path is not None:
            config = load_config(path)
        elif Path(DEFAULT_CONFIG_FILE).is_file():
            config = load_config(DEFAULT_CONFIG_FILE)
        else:
            config = cls()

        env_conformity = os.environ.get("SAAT_MIN_CONFORMITY")
        if env_conformity:
            config.min_conformity = _parse_min_conformity(env_conformity)

        env_components = os.environ.get("SAAT_COMPONENTS_DIR")
        if env_components:
            config.components_dir = Path(env_components)

        env_output = os.environ.get("SAAT_OUTPUT_DIR")
        if env_output:
            config.output_dir = Path(env_output)

        return config


def load_config(path: str | Path) -> SaatConfig:
    """Load a config from a YAML file path."""
    text = Path(path).read_text(encoding="utf-8")
    return load_config_from_string(text)


def load_config_from_string(text: str) -> SaatConfig:
    """Parse a YAML string into a validated SaatConfig."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid config YAML: {e}") from e
    if data is None:
        return SaatConfig()
    if not isinstance(data, dict):
        raise ConfigurationError("Config YAML must be a mapping")
    return _build_config(_normalize_keys(data))


def _normalize_keys(data: dict) -> dict:
    normalized = {}
    for key, value in data.items():
        if isinstance(value, dict):
            value = _normalize_keys(value)
        normalized[_KEY_ALIASES.get(key, key)] = value
    return normalized


def _build_config(data: dict[str, Any]) -> SaatConfig:
    config = SaatConfig()

    if "components_dir" in data:
        config.components_dir = Path(str(data["components_dir"]))
    if "output_dir" in data:
        config.output_dir = Path(str(data["output_dir"]))
    if "rules" in data:
        config.rules = _parse_rules(data["rules"])
    if "min_conformity" in data:
        config.min_conformity = _parse_min_conformity(data["min_conformity"])
    if "component_types" in data:
        config.component_types = _parse_component_types(data["component_types"])
    if "generate_badge" in data:
        config.generate_badge = bool(data["generate_badge"])

    output = _section(data, "output")
    config.output = OutputOptions(
        json=bool(output.get("json", True)),
        markdown=bool(output.get("markdown", True)),
        pretty_json=bool(output.get("pretty_json", True)),
    )

    log = _section(data, "logging")
    level = str(log.get("level", "normal"))
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level: {level!r} (expected one of {', '.join(LOG_LEVELS)})"
        )
    config.logging = LoggingOptions(level=level, timing=bool(log.get("timing", True)))

    return config


def _section(data: dict, name: str) -> dict:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"'{name}' must be a mapping")
    return value


def _parse_rules(raw: Any) -> tuple[str, ...]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list) or not raw:
        raise ConfigurationError("'rules' must be a non-empty list of rule ids")
    rules = tuple(str(r) for r in raw)
    unknown = [r for r in rules if r not in WCAG_RULES]
    if unknown:
        raise ConfigurationError(f"Unknown rule(s): {', '.join(unknown)}")
    return rules


def _parse_min_conformity(raw: Any) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"min_conformity must be a number: {raw!r}") from e
    if not 0 <= value <= 100:
        raise ConfigurationError(f"min_conformity must be between 0 and 100: {value}")
    return value


def _parse_component_types(raw: Any) -> tuple[ComponentType, ...]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list) or not raw:
        raise ConfigurationError("'component_types' must be a non-empty list")
    try:
        return tuple(parse_component_type(str(t)) for t in raw)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
