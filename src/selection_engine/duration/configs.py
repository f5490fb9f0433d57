"""Supported duration buckets and their structural targets."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from selection_engine.models.duration import DurationConfig, ExerciseCount, TimeAllocation
from selection_engine.models.enums import (
    SUPPORTED_DURATIONS,
    Complexity,
    VariableRichness,
)

DURATION_CONFIGS: Mapping[int, DurationConfig] = MappingProxyType({
    5: DurationConfig(
        duration=5,
        name="Quick Break",
        description="Perfect for desk breaks",
        exercise_count=ExerciseCount(warmup=1, main=2, cooldown=1),
        time_allocation=TimeAllocation(20, 60, 20),
        complexity=Complexity.MINIMAL,
        variable_requirements=VariableRichness.CORE,
    ),
    10: DurationConfig(
        duration=10,
        name="Mini Session",
        description="Short but effective",
        exercise_count=ExerciseCount(warmup=2, main=3, cooldown=1),
        time_allocation=TimeAllocation(15, 70, 15),
        complexity=Complexity.SIMPLE,
        variable_requirements=VariableRichness.CORE,
    ),
    15: DurationConfig(
        duration=15,
        name="Express",
        description="Efficient workout",
        exercise_count=ExerciseCount(warmup=2, main=4, cooldown=2),
        time_allocation=TimeAllocation(13, 74, 13),
        complexity=Complexity.STANDARD,
        variable_requirements=VariableRichness.STANDARD,
    ),
    20: DurationConfig(
        duration=20,
        name="Focused",
        description="Balanced duration",
        exercise_count=ExerciseCount(warmup=3, main=5, cooldown=2),
        time_allocation=TimeAllocation(15, 70, 15),
        complexity=Complexity.STANDARD,
        variable_requirements=VariableRichness.STANDARD,
    ),
    30: DurationConfig(
        duration=30,
        name="Complete",
        description="Full workout experience",
        exercise_count=ExerciseCount(warmup=3, main=8, cooldown=3),
        time_allocation=TimeAllocation(13, 74, 13),
        complexity=Complexity.COMPREHENSIVE,
        variable_requirements=VariableRichness.ENHANCED,
    ),
    45: DurationConfig(
        duration=45,
        name="Extended",
        description="Maximum benefit",
        exercise_count=ExerciseCount(warmup=4, main=12, cooldown=4),
        time_allocation=TimeAllocation(11, 78, 11),
        complexity=Complexity.ADVANCED,
        variable_requirements=VariableRichness.FULL,
    ),
})


def nearest_supported_duration(duration: float) -> int:
    """Closest supported bucket; an exact tie resolves to the shorter bucket."""
    # min() keeps the first of equal keys, and SUPPORTED_DURATIONS is ascending
    return min(SUPPORTED_DURATIONS, key=lambda d: abs(d - duration))


def get_duration_config(duration: float) -> DurationConfig:
    """Config of the nearest supported bucket."""
    return DURATION_CONFIGS[nearest_supported_duration(duration)]
