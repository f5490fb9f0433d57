"""Goal alignment: does the plan's focus serve the user's goals?

Each goal is classified into a keyword family (strength, cardio, weight
loss, flexibility) and scored against the plan's title, main phase name,
description and reasoning. The mean goal score gets a +0.05 bonus when one of
the user's workout styles appears in the plan. With no goals the score is 0.7.
"""

from __future__ import annotations

from selection_engine.confidence.calculators.base import FactorCalculator, clamp_score
from selection_engine.models.context import AnalysisContext, UserProfile
from selection_engine.models.plan import GeneratedPlan

NO_GOALS_SCORE = 0.7
GENERAL_GOAL_SCORE = 0.8
STYLE_MATCH_BONUS = 0.05

_STRENGTH_WORDS = ("strength", "muscle")
_CARDIO_WORDS = ("cardio", "endurance", "stamina", "hiit")
_WEIGHT_LOSS_WORDS = ("weight", "fat", "loss")
_FLEXIBILITY_WORDS = ("flexibility", "mobility", "stretch", "yoga")
_BURN_WORDS = ("calorie", "burn")


def _mentions(text: str, words: tuple[str, ...]) -> bool:
    return any(w in text for w in words)


def goal_score(goal: str, focus_text: str, detail_text: str) -> float:
    """Score a single goal against the plan's focus and detail text."""
    goal = goal.lower()
    both = f"{focus_text} {detail_text}"
    strength = _mentions(both, _STRENGTH_WORDS)
    cardio = _mentions(both, _CARDIO_WORDS)

    if _mentions(goal, _STRENGTH_WORDS):
        if strength:
            return 1.0
        return 0.3 if cardio else 0.6
    if _mentions(goal, ("cardio", "endurance", "stamina")):
        if cardio:
            return 1.0
        return 0.4 if strength else 0.7
    if _mentions(goal, _WEIGHT_LOSS_WORDS):
        if cardio or _mentions(detail_text, _BURN_WORDS):
            return 1.0
        return 0.8 if "strength" in focus_text else 0.6
    if _mentions(goal, ("flexibility", "mobility", "stretch")):
        return 1.0 if _mentions(both, _FLEXIBILITY_WORDS) else 0.3
    return GENERAL_GOAL_SCORE


class GoalAlignmentCalculator(FactorCalculator):
    factor_name = "goal_alignment"
    weight = 0.20
    description = "Measures how well the workout aligns with the user's primary fitness goals"

    def calculate(
        self, profile: UserProfile, plan: GeneratedPlan, context: AnalysisContext
    ) -> float:
        goals = [g for g in profile.goals if g]
        if not goals:
            return NO_GOALS_SCORE

        focus_text = f"{plan.title} {plan.main.name}".lower()
        detail_text = f"{plan.description} {plan.reasoning}".lower()
        average = sum(goal_score(g, focus_text, detail_text) for g in goals) / len(goals)

        styles = [s.lower() for s in profile.workout_styles if s]
        if any(s in focus_text or s in detail_text for s in styles):
            average += STYLE_MATCH_BONUS

        return clamp_score(average)
