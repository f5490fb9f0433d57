"""Duration bucket configuration and strategy records."""

from __future__ import annotations

from dataclasses import dataclass, field

from selection_engine.models.enums import (
    DEFAULT_ENERGY_LEVEL,
    Complexity,
    VariableRichness,
)


@dataclass(frozen=True)
class ExerciseCount:
    """Target exercise count per phase."""

    warmup: int
    main: int
    cooldown: int

    @property
    def total(self) -> int:
        return self.warmup + self.main + self.cooldown


@dataclass(frozen=True)
class TimeAllocation:
    """Percentage of the session spent in each phase (sums to 100)."""

    warmup_percent: float
    main_percent: float
    cooldown_percent: float


@dataclass(frozen=True)
class DurationConfig:
    """A supported duration bucket with its structural targets."""

    duration: int
    name: str
    description: str
    exercise_count: ExerciseCount
    time_allocation: TimeAllocation
    complexity: Complexity
    variable_requirements: VariableRichness


@dataclass(frozen=True)
class StrategyParams:
    """Inputs to DurationStrategy.select_strategy()."""

    duration: float
    fitness_level: str = "some experience"
    focus: str | None = None
    energy_level: int = DEFAULT_ENERGY_LEVEL  # 1-10
    soreness_areas: tuple[str, ...] = field(default_factory=tuple)
    equipment: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class StrategyResult:
    """Selected bucket and the reasoning behind it."""

    config: DurationConfig
    adjusted_duration: int
    is_exact_match: bool
    adjustment_reason: str | None = None
    recommendations: tuple[str, ...] = field(default_factory=tuple)
    alternative_options: tuple[DurationConfig, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PhaseAllocation:
    """Minutes allocated to each phase."""

    warmup_minutes: float
    main_minutes: float
    cooldown_minutes: float

    def as_seconds(self) -> dict[str, int]:
        return {
            "warmup": round(self.warmup_minutes * 60),
            "main": round(self.main_minutes * 60),
            "cooldown": round(self.cooldown_minutes * 60),
        }


@dataclass(frozen=True)
class DurationOptimization:
    """Summary of how a requested duration maps onto the chosen bucket."""

    requested_duration: float
    actual_duration: int
    is_optimal: bool
    alternative_durations: tuple[int, ...]
    phase_allocation: PhaseAllocation
    recommendations: tuple[str, ...] = field(default_factory=tuple)
