"""Tests for SynergyAnalyzer."""

from __future__ import annotations

import pytest

from selection_engine.analyzers.synergy_analyzer import SynergyAnalyzer
from selection_engine.exceptions import EmptyRuleSetError
from selection_engine.models.context import AnalysisContext
from selection_engine.models.selections import WorkoutSelections
from selection_engine.registry import default_registry


class TestSynergyAnalyzer:
    def setup_method(self) -> None:
        self.analyzer = SynergyAnalyzer(default_registry().synergy_rules())
        self.context = AnalysisContext()

    def test_empty_rule_set_rejected(self) -> None:
        with pytest.raises(EmptyRuleSetError):
            SynergyAnalyzer([])

    def test_sorted_by_confidence(self, balanced_selections: WorkoutSelections) -> None:
        synergies = self.analyzer.find_synergies(balanced_selections, self.context)
        assert [s.id for s in synergies] == [
            "dumbbell_strength",
            "energy_focus_boost",
            "equipment_strength_boost",
        ]

    def test_no_synergies_for_empty_snapshot(self) -> None:
        assert self.analyzer.find_synergies(WorkoutSelections(), self.context) == ()

    def test_has_potential_synergy(self) -> None:
        assert self.analyzer.has_potential_synergy("energy", "focus")
        assert self.analyzer.has_potential_synergy("soreness", "equipment")
        assert not self.analyzer.has_potential_synergy("injury", "duration")

    def test_synergy_strength_averages_realized_synergies(
        self, balanced_selections: WorkoutSelections
    ) -> None:
        # dumbbell_strength (0.9) and equipment_strength_boost (0.8)
        strength = self.analyzer.synergy_strength(
            "focus", "equipment", balanced_selections, self.context
        )
        assert strength == pytest.approx(0.85)

    def test_synergy_strength_zero_when_nothing_realized(self) -> None:
        assert self.analyzer.synergy_strength("energy", "focus", WorkoutSelections(), self.context) == 0.0
