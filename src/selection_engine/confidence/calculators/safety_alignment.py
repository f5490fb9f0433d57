"""Safety alignment: how well the plan accommodates injuries and risk.

Starts at 1.0 and subtracts a fixed penalty per risk signal:

    jump / plyometric exercise          -0.10 each
    deadlift / squat                    -0.05 each
    overhead / press                    -0.08 each
    high-intensity exercise             -0.05 each
    exercise touching an injured,
    sore or mobility-limited area       -0.10 each
    beginner or novice user             -0.10
    session longer than 60 minutes      -0.05
    outdoor location                    -0.03
    detailed workout type               -0.02

The result is floored at MIN_FACTOR_SCORE. An empty plan scores 0.5.
"""

from __future__ import annotations

from selection_engine.confidence.calculators.base import FactorCalculator, clamp_score
from selection_engine.models.context import AnalysisContext, UserProfile, is_beginner
from selection_engine.models.enums import LONG_SESSION_MINUTES
from selection_engine.models.plan import Exercise, GeneratedPlan

EMPTY_PLAN_SAFETY_SCORE = 0.5

# (name keywords, penalty)
_RISK_PATTERNS: tuple[tuple[tuple[str, ...], float], ...] = (
    (("jump", "plyometric"), 0.10),
    (("deadlift", "squat"), 0.05),
    (("overhead", "press"), 0.08),
)
_HIGH_INTENSITY_PENALTY = 0.05
_RESTRICTED_AREA_PENALTY = 0.10
_BEGINNER_PENALTY = 0.10
_LONG_SESSION_PENALTY = 0.05
_OUTDOOR_PENALTY = 0.03
_DETAILED_WORKOUT_PENALTY = 0.02


def _touches_restricted_area(exercise: Exercise, restricted: frozenset[str]) -> bool:
    if not restricted:
        return False
    areas = {a.lower() for a in exercise.target_areas}
    name = exercise.name.lower()
    return bool(areas & restricted) or any(area in name for area in restricted)


class SafetyAlignmentCalculator(FactorCalculator):
    factor_name = "safety_alignment"
    weight = 0.20
    description = (
        "Measures how well the workout accommodates user injuries, soreness areas, "
        "and safety concerns"
    )

    def calculate(
        self, profile: UserProfile, plan: GeneratedPlan, context: AnalysisContext
    ) -> float:
        exercises = plan.all_exercises
        if not exercises:
            return EMPTY_PLAN_SAFETY_SCORE

        restricted = frozenset(
            a.lower()
            for a in profile.injuries + profile.mobility_limitations + context.soreness_areas
            if a
        )
        score = 1.0
        for exercise in exercises:
            name = exercise.name.lower()
            for keywords, penalty in _RISK_PATTERNS:
                if any(k in name for k in keywords):
                    score -= penalty
            if exercise.intensity == "high":
                score -= _HIGH_INTENSITY_PENALTY
            if _touches_restricted_area(exercise, restricted):
                score -= _RESTRICTED_AREA_PENALTY

        if is_beginner(profile.fitness_level):
            score -= _BEGINNER_PENALTY
        if plan.total_duration_min > LONG_SESSION_MINUTES:
            score -= _LONG_SESSION_PENALTY
        if context.environment.location == "outdoor":
            score -= _OUTDOOR_PENALTY
        if context.workout_type == "detailed":
            score -= _DETAILED_WORKOUT_PENALTY

        return clamp_score(score)
