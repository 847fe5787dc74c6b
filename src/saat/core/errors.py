"""Error taxonomy for the audit pipeline."""

from __future__ import annotations


class SaatError(Exception):
    """Base class for all SAAT errors."""


class ScanAccessError(SaatError):
    """A directory could not be listed during a scan."""


class ParseError(SaatError):
    """A component file could not be read or sliced into sections."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = path
        self.reason = reason


class ValidatorError(SaatError):
    """A rule check raised unexpectedly on a component."""

    def __init__(self, rule_id: str, component: str, cause: BaseException) -> None:
        super().__init__(f"Validator {rule_id} failed for {component}: {cause}")
        self.rule_id = rule_id
        self.component = component
        self.cause = cause


class ConfigurationError(SaatError, ValueError):
    """Invalid configuration or rule selection."""
