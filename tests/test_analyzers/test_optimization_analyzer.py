"""Tests for OptimizationAnalyzer heuristics and insight ranking."""

from __future__ import annotations

from selection_engine.analyzers.optimization_analyzer import (
    OptimizationAnalyzer,
    conflict_to_insight,
    sort_insights,
    synergy_to_insight,
)
from selection_engine.models.context import AnalysisContext
from selection_engine.models.enums import (
    ConflictType,
    ImpactArea,
    InsightType,
    Severity,
    SynergyType,
)
from selection_engine.models.insights import Conflict, Insight, Synergy
from selection_engine.models.selections import DurationSelection, WorkoutSelections


def _conflict(severity: Severity) -> Conflict:
    return Conflict(
        id="energy_focus",
        components=("energy", "focus"),
        type=ConflictType.SAFETY,
        severity=severity,
        description="Low energy with high-intensity focus may increase injury risk",
        suggested_resolution="Switch to mobility, flexibility, or recovery focus",
        confidence=0.95,
        impact=ImpactArea.SAFETY,
    )


def _insight(insight_id: str, actionable: bool, confidence: float) -> Insight:
    return Insight(
        id=insight_id,
        type=InsightType.OPTIMIZATION,
        message="",
        recommendation="",
        confidence=confidence,
        actionable=actionable,
    )


class TestInsightProjection:
    def test_conflict_becomes_warning(self) -> None:
        insight = conflict_to_insight(_conflict(Severity.HIGH))
        assert insight.id == "conflict_energy_focus"
        assert insight.type == InsightType.WARNING
        assert insight.actionable is True
        assert insight.related_fields == ("energy", "focus")
        assert insight.metadata["severity"] == Severity.HIGH

    def test_critical_conflict_becomes_critical_warning(self) -> None:
        assert conflict_to_insight(_conflict(Severity.CRITICAL)).type == InsightType.CRITICAL_WARNING

    def test_synergy_is_not_actionable(self) -> None:
        synergy = Synergy(
            id="dumbbell_strength",
            components=("focus", "equipment"),
            type=SynergyType.OPTIMIZATION,
            description="Strength focus with dumbbells creates excellent training synergy",
            confidence=0.9,
        )
        insight = synergy_to_insight(synergy)
        assert insight.id == "synergy_dumbbell_strength"
        assert insight.type == InsightType.OPTIMIZATION
        assert insight.actionable is False

    def test_sort_actionable_first_then_confidence(self) -> None:
        ordered = sort_insights(
            [
                _insight("passive_high", False, 0.99),
                _insight("active_low", True, 0.6),
                _insight("active_high", True, 0.9),
            ]
        )
        assert [i.id for i in ordered] == ["active_high", "active_low", "passive_high"]


class TestOptimizationHeuristics:
    def setup_method(self) -> None:
        self.analyzer = OptimizationAnalyzer()
        self.context = AnalysisContext()

    def _ids(self, selections: WorkoutSelections) -> list[str]:
        return [i.id for i in self.analyzer.generate_optimization_insights(selections, self.context)]

    def test_long_session_without_warmup(self) -> None:
        assert "warmup_suggestion" in self._ids(WorkoutSelections(duration=75))

    def test_long_session_with_warmup(self) -> None:
        selections = WorkoutSelections(
            duration=DurationSelection(total_duration=75, warm_up_included=True)
        )
        assert "warmup_suggestion" not in self._ids(selections)

    def test_strength_with_little_equipment(self) -> None:
        ids = self._ids(WorkoutSelections(focus="strength", equipment=("Bands",), areas=("legs",)))
        assert ids == ["equipment_suggestion"]

    def test_focus_without_areas(self) -> None:
        assert self._ids(WorkoutSelections(focus="cardio")) == ["areas_suggestion"]

    def test_long_strength_without_recovery_equipment(self) -> None:
        selections = WorkoutSelections(
            focus="strength", duration=45, equipment=("Dumbbells", "Bench"), areas=("legs",)
        )
        assert self._ids(selections) == ["recovery_equipment_suggestion"]

    def test_recovery_equipment_present(self) -> None:
        selections = WorkoutSelections(
            focus="strength",
            duration=45,
            equipment=("Dumbbells", "Yoga Mat"),
            areas=("legs",),
        )
        assert self._ids(selections) == []

    def test_empty_snapshot(self) -> None:
        assert self._ids(WorkoutSelections()) == []

    def test_recommendations_merge_and_rank(self, tired_long_selections: WorkoutSelections) -> None:
        conflicts = (_conflict(Severity.HIGH),)
        insights = self.analyzer.generate_recommendations(
            conflicts, (), tired_long_selections, self.context
        )
        ids = [i.id for i in insights]
        assert ids == ["conflict_energy_focus", "recovery_equipment_suggestion"]
