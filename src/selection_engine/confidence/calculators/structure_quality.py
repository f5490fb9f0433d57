"""Structure quality: is the plan a well-formed warm-up / main / cool-down session?

Mean of four sub-scores:
    completeness: warm-up 0.25 + main 0.50 + cool-down 0.25 for non-empty phases
    distribution: main phase holds 60-80% of phase time (linear falloff outside)
    consistency: phase durations add up to the declared total
    main volume: at least MIN_MAIN_EXERCISES exercises in the main phase
"""

from __future__ import annotations

from selection_engine.confidence.calculators.base import FactorCalculator, clamp_score
from selection_engine.models.context import AnalysisContext, UserProfile
from selection_engine.models.enums import MIN_FACTOR_SCORE
from selection_engine.models.plan import GeneratedPlan

MIN_MAIN_EXERCISES = 3
MAIN_SHARE_RANGE = (0.6, 0.8)


def _completeness(plan: GeneratedPlan) -> float:
    score = 0.0
    if not plan.warmup.is_empty:
        score += 0.25
    if not plan.main.is_empty:
        score += 0.5
    if not plan.cooldown.is_empty:
        score += 0.25
    return score


def _distribution(plan: GeneratedPlan) -> float:
    phase_total = sum(p.duration_s for p in plan.phases)
    if phase_total <= 0:
        return 0.0
    share = plan.main.duration_s / phase_total
    low, high = MAIN_SHARE_RANGE
    if low <= share <= high:
        return 1.0
    distance = low - share if share < low else share - high
    return max(0.0, 1.0 - 2 * distance)


def _consistency(plan: GeneratedPlan) -> float:
    if plan.total_duration_s <= 0:
        return 0.0
    phase_total = sum(p.duration_s for p in plan.phases)
    return max(0.0, 1.0 - abs(phase_total - plan.total_duration_s) / plan.total_duration_s)


class StructureQualityCalculator(FactorCalculator):
    factor_name = "structure_quality"
    weight = 0.20
    description = (
        "Measures phase completeness, time distribution and internal consistency "
        "of the workout structure"
    )

    def calculate(
        self, profile: UserProfile, plan: GeneratedPlan, context: AnalysisContext
    ) -> float:
        if not plan.all_exercises:
            return MIN_FACTOR_SCORE

        main_volume = min(1.0, len(plan.main.exercises) / MIN_MAIN_EXERCISES)
        score = (
            _completeness(plan) + _distribution(plan) + _consistency(plan) + main_volume
        ) / 4
        return clamp_score(score)
