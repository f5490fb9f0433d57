"""Focus conflicts driven by duration, experience, time of day and goals.

Thresholds:
    focus == strength and duration < SHORT_DURATION_THRESHOLD → MEDIUM efficiency
    beginner and focus in {power, endurance} → MEDIUM safety
    evening and focus in {strength, power}
        and duration > VERY_LONG_DURATION_THRESHOLD → LOW user experience
    weight-loss goal and focus == strength
        and duration > VERY_LONG_DURATION_THRESHOLD → LOW goal alignment
"""

from __future__ import annotations

from selection_engine.extractors import extract_duration, extract_focus
from selection_engine.models.context import AnalysisContext, is_beginner
from selection_engine.models.enums import (
    ADVANCED_FOCUSES,
    FIELD_DURATION,
    FIELD_FOCUS,
    FIELD_TIME_OF_DAY,
    FIELD_USER_GOALS,
    FIELD_USER_PROFILE,
    LOW_CONFIDENCE,
    MEDIUM_CONFIDENCE,
    MEDIUM_HIGH_CONFIDENCE,
    SHORT_DURATION_THRESHOLD,
    STRENGTH_POWER_FOCUSES,
    VERY_LONG_DURATION_THRESHOLD,
    VERY_LOW_CONFIDENCE,
    ConflictType,
    ImpactArea,
    Severity,
)
from selection_engine.models.insights import Conflict
from selection_engine.models.selections import WorkoutSelections
from selection_engine.rules.base import ConflictRule

_EVENING = "evening"
_WEIGHT_LOSS_GOALS = frozenset({"weight_loss", "weight-loss", "weight loss", "lose weight", "fat_loss"})


def _is_very_long(selections: WorkoutSelections) -> bool:
    duration = extract_duration(selections.duration)
    return duration is not None and duration > VERY_LONG_DURATION_THRESHOLD


def _focus_duration_condition(selections: WorkoutSelections, _context: AnalysisContext) -> bool:
    duration = extract_duration(selections.duration)
    return (
        extract_focus(selections.focus) == "strength"
        and duration is not None
        and duration < SHORT_DURATION_THRESHOLD
    )


def _focus_duration_conflict(selections: WorkoutSelections, _context: AnalysisContext) -> Conflict:
    return Conflict(
        id="focus_duration",
        components=(FIELD_FOCUS, FIELD_DURATION),
        type=ConflictType.EFFICIENCY,
        severity=Severity.MEDIUM,
        description="Strength focus needs adequate time for proper sets and rest periods",
        suggested_resolution="Extend duration to at least 30 minutes or switch to a circuit format",
        confidence=MEDIUM_CONFIDENCE,
        impact=ImpactArea.EFFECTIVENESS,
        metadata={
            "focus": extract_focus(selections.focus),
            "duration": extract_duration(selections.duration),
        },
    )


def _experience_focus_condition(selections: WorkoutSelections, context: AnalysisContext) -> bool:
    return (
        is_beginner(context.user_profile.fitness_level)
        and extract_focus(selections.focus) in ADVANCED_FOCUSES
    )


def _experience_focus_conflict(selections: WorkoutSelections, context: AnalysisContext) -> Conflict:
    return Conflict(
        id="experience_focus",
        components=(FIELD_USER_PROFILE, FIELD_FOCUS),
        type=ConflictType.SAFETY,
        severity=Severity.MEDIUM,
        description="Advanced focus may be too challenging for a beginner fitness level",
        suggested_resolution="Start with general fitness or strength focus to build a foundation",
        confidence=MEDIUM_HIGH_CONFIDENCE,
        impact=ImpactArea.SAFETY,
        metadata={
            "fitness_level": context.user_profile.fitness_level,
            "focus": extract_focus(selections.focus),
        },
    )


def _time_of_day_condition(selections: WorkoutSelections, context: AnalysisContext) -> bool:
    return (
        context.environment.time_of_day == _EVENING
        and extract_focus(selections.focus) in STRENGTH_POWER_FOCUSES
        and _is_very_long(selections)
    )


def _time_of_day_conflict(selections: WorkoutSelections, context: AnalysisContext) -> Conflict:
    return Conflict(
        id="time_of_day_focus",
        components=(FIELD_TIME_OF_DAY, FIELD_FOCUS),
        type=ConflictType.USER_EXPERIENCE,
        severity=Severity.LOW,
        description="Long high-intensity evening sessions may affect sleep quality",
        suggested_resolution="Consider a shorter session or moderate intensity in the evening",
        confidence=LOW_CONFIDENCE,
        impact=ImpactArea.EFFECTIVENESS,
        metadata={
            "time_of_day": context.environment.time_of_day,
            "focus": extract_focus(selections.focus),
            "duration": extract_duration(selections.duration),
        },
    )


def _has_weight_loss_goal(context: AnalysisContext) -> bool:
    return any(goal.strip().lower() in _WEIGHT_LOSS_GOALS for goal in context.user_profile.goals)


def _goal_duration_condition(selections: WorkoutSelections, context: AnalysisContext) -> bool:
    return (
        _has_weight_loss_goal(context)
        and extract_focus(selections.focus) == "strength"
        and _is_very_long(selections)
    )


def _goal_duration_conflict(selections: WorkoutSelections, context: AnalysisContext) -> Conflict:
    return Conflict(
        id="goal_duration",
        components=(FIELD_USER_GOALS, FIELD_DURATION),
        type=ConflictType.GOAL_ALIGNMENT,
        severity=Severity.LOW,
        description="Long strength sessions are less time-efficient for weight loss",
        suggested_resolution="Consider circuit training or add cardio intervals",
        confidence=VERY_LOW_CONFIDENCE,
        impact=ImpactArea.EFFECTIVENESS,
        metadata={
            "goals": list(context.user_profile.goals),
            "duration": extract_duration(selections.duration),
        },
    )


RULES = (
    ConflictRule(
        rule_id="focus_duration",
        components=(FIELD_FOCUS, FIELD_DURATION),
        condition=_focus_duration_condition,
        generate=_focus_duration_conflict,
    ),
    ConflictRule(
        rule_id="experience_focus",
        components=(FIELD_USER_PROFILE, FIELD_FOCUS),
        condition=_experience_focus_condition,
        generate=_experience_focus_conflict,
    ),
    ConflictRule(
        rule_id="time_of_day_focus",
        components=(FIELD_TIME_OF_DAY, FIELD_FOCUS),
        condition=_time_of_day_condition,
        generate=_time_of_day_conflict,
    ),
    ConflictRule(
        rule_id="goal_duration",
        components=(FIELD_USER_GOALS, FIELD_DURATION),
        condition=_goal_duration_condition,
        generate=_goal_duration_conflict,
    ),
)
