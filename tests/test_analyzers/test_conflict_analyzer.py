"""Tests for ConflictAnalyzer: evaluation, ordering and rule failure handling."""

from __future__ import annotations

import logging

import pytest

from selection_engine.analyzers.conflict_analyzer import ConflictAnalyzer, sort_conflicts
from selection_engine.exceptions import EmptyRuleSetError
from selection_engine.models.context import AnalysisContext
from selection_engine.models.enums import ConflictType, ImpactArea, Severity
from selection_engine.models.insights import Conflict
from selection_engine.models.selections import WorkoutSelections
from selection_engine.registry import RuleRegistry
from selection_engine.rules.base import ConflictRule


def _conflict(conflict_id: str, severity: Severity, confidence: float) -> Conflict:
    return Conflict(
        id=conflict_id,
        components=("focus",),
        type=ConflictType.SAFETY,
        severity=severity,
        description=conflict_id,
        suggested_resolution="",
        confidence=confidence,
        impact=ImpactArea.SAFETY,
    )


def _boom(selections, context) -> bool:
    raise RuntimeError("broken rule")


class TestSortConflicts:
    def test_severity_then_confidence(self) -> None:
        conflicts = [
            _conflict("medium", Severity.MEDIUM, 0.99),
            _conflict("high_low_conf", Severity.HIGH, 0.7),
            _conflict("critical", Severity.CRITICAL, 0.5),
            _conflict("high_high_conf", Severity.HIGH, 0.9),
        ]
        ordered = [c.id for c in sort_conflicts(conflicts)]
        assert ordered == ["critical", "high_high_conf", "high_low_conf", "medium"]

    def test_ties_keep_input_order(self) -> None:
        conflicts = [_conflict("a", Severity.LOW, 0.5), _conflict("b", Severity.LOW, 0.5)]
        assert [c.id for c in sort_conflicts(conflicts)] == ["a", "b"]


class TestConflictAnalyzer:
    def setup_method(self) -> None:
        registry = RuleRegistry()
        registry.discover_rules()
        self.registry = registry
        self.analyzer = ConflictAnalyzer(registry.conflict_rules())
        self.context = AnalysisContext()

    def test_empty_rule_set_rejected(self) -> None:
        with pytest.raises(EmptyRuleSetError):
            ConflictAnalyzer([])

    def test_low_energy_long_duration(self, tired_long_selections: WorkoutSelections) -> None:
        conflicts = self.analyzer.detect_conflicts(tired_long_selections, self.context)
        ids = [c.id for c in conflicts]
        assert ids == ["energy_focus", "energy_duration"]
        assert all(c.severity == Severity.HIGH for c in conflicts)

    def test_balanced_selections_have_no_conflicts(
        self, balanced_selections: WorkoutSelections
    ) -> None:
        assert self.analyzer.detect_conflicts(balanced_selections, self.context) == ()

    def test_empty_snapshot_has_no_conflicts(self) -> None:
        assert self.analyzer.detect_conflicts(WorkoutSelections(), self.context) == ()

    def test_multiple_rules_fire_together(self) -> None:
        selections = WorkoutSelections(
            energy=1,
            duration=60,
            focus="strength",
            soreness=("legs", "back", "shoulders"),
            areas=("legs",),
        )
        ids = {c.id for c in self.analyzer.detect_conflicts(selections, self.context)}
        assert {"energy_duration", "energy_focus", "soreness_areas", "soreness_focus"} <= ids

    def test_disabled_rule_skipped(self, tired_long_selections: WorkoutSelections) -> None:
        self.registry.disable("energy_focus")
        analyzer = ConflictAnalyzer(self.registry.conflict_rules())
        ids = [c.id for c in analyzer.detect_conflicts(tired_long_selections, self.context)]
        assert ids == ["energy_duration"]

    def test_failing_rule_is_a_non_match(
        self, tired_long_selections: WorkoutSelections, caplog: pytest.LogCaptureFixture
    ) -> None:
        broken = ConflictRule(
            rule_id="broken", components=("focus",), condition=_boom, generate=_boom
        )
        analyzer = ConflictAnalyzer([broken, *self.registry.conflict_rules()])
        with caplog.at_level(logging.WARNING):
            conflicts = analyzer.detect_conflicts(tired_long_selections, self.context)
        assert len(conflicts) == 2
        assert "broken" in caplog.text
