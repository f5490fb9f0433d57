"""Tests for the synergy rule modules."""

from __future__ import annotations

from selection_engine.models.context import AnalysisContext
from selection_engine.models.enums import SynergyType
from selection_engine.models.selections import EquipmentSelection, WorkoutSelections
from selection_engine.rules.synergies import energy_focus, equipment_focus


def _rule(module, rule_id: str):
    return next(r for r in module.RULES if r.rule_id == rule_id)


class TestEnergyFocusSynergy:
    def setup_method(self) -> None:
        self.context = AnalysisContext()
        self.rule = _rule(energy_focus, "energy_focus_boost")

    def test_high_energy_strength(self) -> None:
        selections = WorkoutSelections(energy=4, focus="strength")
        assert self.rule.condition(selections, self.context)
        synergy = self.rule.generate(selections, self.context)
        assert synergy.type == SynergyType.PERFORMANCE
        assert synergy.confidence == 0.85

    def test_moderate_energy_does_not_fire(self) -> None:
        assert not self.rule.condition(WorkoutSelections(energy=3, focus="strength"), self.context)

    def test_non_intense_focus_does_not_fire(self) -> None:
        assert not self.rule.condition(WorkoutSelections(energy=5, focus="recovery"), self.context)


class TestEquipmentSynergies:
    def setup_method(self) -> None:
        self.context = AnalysisContext()

    def test_has_equipment_matches_substring_case_insensitively(self) -> None:
        selections = WorkoutSelections(
            equipment=EquipmentSelection(
                specific_equipment=("Stretching & Mobility Zone (Yoga Mats, Foam Rollers)",)
            )
        )
        assert equipment_focus.has_equipment(selections, "foam roller")
        assert not equipment_focus.has_equipment(selections, "dumbbell")

    def test_equipment_variety_for_strength(self) -> None:
        rule = _rule(equipment_focus, "equipment_strength_boost")
        assert rule.condition(WorkoutSelections(focus="strength", equipment=("Bench", "Bands")), self.context)
        assert not rule.condition(WorkoutSelections(focus="strength", equipment=("Bench",)), self.context)

    def test_dumbbells_for_strength(self) -> None:
        rule = _rule(equipment_focus, "dumbbell_strength")
        selections = WorkoutSelections(focus="strength", equipment=("Dumbbells",))
        assert rule.condition(selections, self.context)
        synergy = rule.generate(selections, self.context)
        assert synergy.type == SynergyType.OPTIMIZATION
        assert synergy.confidence == 0.9

    def test_foam_roller_for_sore_recovery(self) -> None:
        rule = _rule(equipment_focus, "recovery_foam_roller")
        selections = WorkoutSelections(focus="recovery", soreness=("legs",), equipment=("Foam Roller",))
        assert rule.condition(selections, self.context)
        synergy = rule.generate(selections, self.context)
        assert synergy.type == SynergyType.RECOVERY
        assert synergy.components == ("focus", "soreness", "equipment")
        assert synergy.metadata["sore_areas"] == ["legs"]

    def test_foam_roller_needs_soreness(self) -> None:
        rule = _rule(equipment_focus, "recovery_foam_roller")
        selections = WorkoutSelections(focus="recovery", equipment=("Foam Roller",))
        assert not rule.condition(selections, self.context)
