"""Audit engine — orchestrates scanning, validation and aggregation."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from pathlib import Path

from saat.core.applicability import (
    ALL_COMPONENT_TYPES,
    ComponentType,
    infer_component_type,
    resolve_applicability,
)
from saat.core.errors import ConfigurationError, ParseError, ValidatorError
from saat.core.models import (
    AuditResult,
    ComponentAuditResult,
    ComponentMetadata,
    NormalizedComponent,
    RuleStatus,
    Violation,
)
from saat.core.parser import parse_component
from saat.core.rules import ALL_RULE_IDS, WCAG_RULES
from saat.core.scanner import DEFAULT_EXTENSION, scan_components
from saat.core.statistics import build_summary
from saat.validators import VALIDATORS, Validator

logger = logging.getLogger(__name__)


class AuditEngine:
    """Runs the configured rules over every component under a directory."""

    def __init__(
        self,
        rules: Iterable[str] | None = None,
        component_types: Iterable[ComponentType] | None = None,
        extension: str = DEFAULT_EXTENSION,
        validators: Sequence[Validator] | None = None,
    ) -> None:
        requested = list(rules) if rules is not None else list(ALL_RULE_IDS)
        unknown = [r for r in requested if r not in WCAG_RULES]
        if unknown:
            raise ConfigurationError(f"Unknown rule(s): {', '.join(unknown)}")

        # Catalog order, duplicates collapsed
        self._rules = tuple(r for r in ALL_RULE_IDS if r in set(requested))
        self._component_types = tuple(
            component_types if component_types is not None else ALL_COMPONENT_TYPES
        )
        self._extension = extension
        self._validators = {
            v.rule_id: v for v in (validators if validators is not None else VALIDATORS)
        }

    @property
    def rules(self) -> tuple[str, ...]:
        return self._rules

    def run(self, directory: str | Path) -> AuditResult:
        """Audit every component under ``directory``. Never raises for bad input."""
        start_time = datetime.now(timezone.utc)
        started = time.perf_counter()

        metadata = scan_components(directory, self._extension)
        logger.info("Found %d component(s) under %s", len(metadata), directory)

        results: list[ComponentAuditResult] = []
        failed = 0
        for meta in metadata:
            try:
                component = parse_component(meta.path)
            except ParseError as e:
                logger.warning("%s", e)
                failed += 1
                continue
            except Exception as e:
                logger.warning("%s", ParseError(meta.path, str(e)))
                failed += 1
                continue
            results.append(self.audit_component(component, meta, root=directory))

        results.sort(key=lambda r: r.path)
        summary = build_summary(results, self._rules)
        end_time = datetime.now(timezone.utc)

        logger.info(
            "Audited %d component(s) (%d failed) in %.2fs, conformity %.2f%%",
            len(results),
            failed,
            time.perf_counter() - started,
            summary.overall_conformity_percent,
        )

        return AuditResult(
            start_time=start_time,
            end_time=end_time,
            components=tuple(results),
            rules_applied=self._rules,
            summary=summary,
            components_failed=failed,
        )

    def audit_component(
        self,
        component: NormalizedComponent,
        meta: ComponentMetadata | None = None,
        root: str | Path | None = None,
    ) -> ComponentAuditResult:
        """Evaluate the configured rules on one parsed component.

        When ``root`` is given, only directories below it take part in
        type inference.
        """
        name = meta.name if meta else component.name
        component_type = infer_component_type(
            name, _path_within(component.path, root)
        )
        applicability = resolve_applicability(
            component_type, self._rules, self._component_types
        )
        evaluate = set(applicability.evaluate)

        violations: list[Violation] = []
        statuses: list[RuleStatus] = []
        for rule_id in self._rules:
            if rule_id not in evaluate:
                statuses.append(RuleStatus.not_applicable(rule_id))
                continue
            found = self._run_validator(rule_id, component)
            violations.extend(found)
            statuses.append(RuleStatus.evaluated(rule_id, len(found)))

        return ComponentAuditResult(
            name=component.name,
            path=component.path,
            violations=tuple(violations),
            rule_statuses=tuple(statuses),
            component_type=component_type.value,
        )

    def _run_validator(
        self, rule_id: str, component: NormalizedComponent
    ) -> list[Violation]:
        validator = self._validators.get(rule_id)
        if validator is None:
            logger.debug("No validator registered for %s", rule_id)
            return []
        try:
            return validator.validate(component)
        except Exception as e:
            logger.debug("%s", ValidatorError(rule_id, component.path, e))
            return []


def _path_within(path: str, root: str | Path | None) -> str:
    if root is None:
        return path
    try:
        return str(Path(path).relative_to(root))
    except ValueError:
        return path
