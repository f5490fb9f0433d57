"""Confidence factor calculators: one per ConfidenceFactors field."""

from selection_engine.confidence.calculators.base import FactorCalculator, clamp_score
from selection_engine.confidence.calculators.equipment_fit import EquipmentFitCalculator
from selection_engine.confidence.calculators.goal_alignment import GoalAlignmentCalculator
from selection_engine.confidence.calculators.profile_match import ProfileMatchCalculator
from selection_engine.confidence.calculators.safety_alignment import SafetyAlignmentCalculator
from selection_engine.confidence.calculators.structure_quality import StructureQualityCalculator


def default_calculators() -> tuple[FactorCalculator, ...]:
    """One instance of each built-in calculator, in FACTOR_NAMES order."""
    return (
        ProfileMatchCalculator(),
        SafetyAlignmentCalculator(),
        EquipmentFitCalculator(),
        GoalAlignmentCalculator(),
        StructureQualityCalculator(),
    )


__all__ = [
    "EquipmentFitCalculator",
    "FactorCalculator",
    "GoalAlignmentCalculator",
    "ProfileMatchCalculator",
    "SafetyAlignmentCalculator",
    "StructureQualityCalculator",
    "clamp_score",
    "default_calculators",
]
