"""Shared test fixtures: selection snapshots, user profiles, generated plans."""

from __future__ import annotations

import pytest

from selection_engine.models.context import AnalysisContext, Environment, UserProfile
from selection_engine.models.plan import Exercise, GeneratedPlan, PlanPhase
from selection_engine.models.selections import (
    DurationSelection,
    EnergySelection,
    FocusSelection,
    TrainingLoad,
    WorkoutSelections,
)
from selection_engine.registry import RuleRegistry


@pytest.fixture
def context() -> AnalysisContext:
    """Intermediate user with no goals, equipment or environment info."""
    return AnalysisContext()


@pytest.fixture
def beginner_context() -> AnalysisContext:
    return AnalysisContext(user_profile=UserProfile(fitness_level="new to exercise"))


@pytest.fixture
def intermediate_profile() -> UserProfile:
    """Strength-minded intermediate with a basic home gym."""
    return UserProfile(
        fitness_level="some experience",
        goals=("build strength",),
        workout_styles=("strength",),
        intensity_preference="moderate",
        available_equipment=("Dumbbells", "Bench", "Yoga Mat"),
    )


@pytest.fixture
def balanced_selections() -> WorkoutSelections:
    """A sensible strength session: no conflicts expected."""
    return WorkoutSelections(
        duration=DurationSelection(total_duration=45, warm_up_included=True),
        focus=FocusSelection(focus="strength", label="Strength"),
        energy=EnergySelection(level=4, label="Energized"),
        areas=("upper_body", "core"),
        equipment=("Dumbbells", "Bench", "Foam Roller"),
    )


@pytest.fixture
def tired_long_selections() -> WorkoutSelections:
    """Low energy with a very long strength session."""
    return WorkoutSelections(
        duration=60,
        focus="strength",
        energy=2,
        equipment=("Dumbbells", "Barbell"),
        areas=("legs",),
    )


@pytest.fixture
def intense_load() -> TrainingLoad:
    return TrainingLoad(weekly_volume=360, average_intensity="intense", recent_activities=("run",))


@pytest.fixture
def registry() -> RuleRegistry:
    registry = RuleRegistry()
    registry.discover_rules()
    return registry


@pytest.fixture
def strength_plan() -> GeneratedPlan:
    """30-minute strength plan with all three phases populated (durations in seconds)."""
    return GeneratedPlan(
        title="Upper Body Strength",
        description="Dumbbell strength session to build muscle",
        total_duration_s=1800,
        difficulty="intermediate",
        equipment=("Dumbbells",),
        warmup=PlanPhase(
            name="Warm-up",
            duration_s=240,
            exercises=(
                Exercise(name="Arm Circles", duration_s=60, intensity="low"),
                Exercise(name="Cat-Cow", duration_s=60, intensity="low"),
            ),
        ),
        main=PlanPhase(
            name="Strength Block",
            duration_s=1320,
            exercises=(
                Exercise(name="Dumbbell Row", sets=3, reps=10, duration_s=45,
                         equipment=("Dumbbells",), intensity="moderate",
                         target_areas=("back",)),
                Exercise(name="Floor Press", sets=3, reps=10, duration_s=45,
                         equipment=("Dumbbells",), intensity="moderate",
                         target_areas=("chest",)),
                Exercise(name="Goblet Squat", sets=3, reps=12, duration_s=45,
                         equipment=("Dumbbells",), intensity="moderate",
                         target_areas=("legs",)),
            ),
        ),
        cooldown=PlanPhase(
            name="Cool-down",
            duration_s=240,
            exercises=(Exercise(name="Child's Pose", duration_s=60, intensity="low"),),
        ),
        reasoning="Targets strength goals with available dumbbells",
    )


@pytest.fixture
def evening_context() -> AnalysisContext:
    return AnalysisContext(environment=Environment(time_of_day="evening", location="indoor"))
