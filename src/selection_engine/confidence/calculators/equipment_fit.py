"""Equipment fit: does the user own what the plan needs?"""

from __future__ import annotations

from selection_engine.confidence.calculators.base import FactorCalculator, clamp_score
from selection_engine.models.context import AnalysisContext, UserProfile
from selection_engine.models.plan import GeneratedPlan

_BODY_WEIGHT = frozenset({"body weight", "bodyweight", "none", "no equipment", "none (bodyweight)"})
_COVERAGE_WEIGHT = 0.85
_UTILIZATION_WEIGHT = 0.15


def _normalize(pieces) -> frozenset[str]:
    return frozenset(p.strip().lower() for p in pieces if p and p.strip().lower() not in _BODY_WEIGHT)


class EquipmentFitCalculator(FactorCalculator):
    """Coverage of required equipment (85%) plus utilization of owned equipment (15%).

    A plan that needs no equipment always fits. An owned piece counts as
    used when the plan requires it.
    """

    factor_name = "equipment_fit"
    weight = 0.15
    description = "Measures how well the workout uses the equipment the user has available"

    def calculate(
        self, profile: UserProfile, plan: GeneratedPlan, context: AnalysisContext
    ) -> float:
        required = _normalize(plan.equipment) | _normalize(
            piece for exercise in plan.all_exercises for piece in exercise.equipment
        )
        if not required:
            return 1.0

        available = _normalize(profile.available_equipment)
        coverage = len(required & available) / len(required)
        utilization = len(required & available) / len(available) if available else 0.0
        return clamp_score(coverage * _COVERAGE_WEIGHT + utilization * _UTILIZATION_WEIGHT)
