"""Generated workout plan: produced externally, scored by the confidence service."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Exercise:
    """A single exercise within a plan phase."""

    name: str
    sets: int = 1
    reps: int | None = None
    duration_s: float | None = None
    equipment: tuple[str, ...] = field(default_factory=tuple)
    intensity: str | None = None  # "low" | "moderate" | "high"
    target_areas: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PlanPhase:
    """Warm-up, main or cool-down block of a plan."""

    name: str = ""
    duration_s: float = 0.0
    exercises: tuple[Exercise, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.exercises


@dataclass(frozen=True)
class GeneratedPlan:
    """A complete workout plan as returned by the plan generator.

    Durations are in seconds, matching the generator's response format.
    """

    title: str = ""
    description: str = ""
    total_duration_s: float = 0.0
    difficulty: str | None = None
    equipment: tuple[str, ...] = field(default_factory=tuple)
    warmup: PlanPhase = field(default_factory=PlanPhase)
    main: PlanPhase = field(default_factory=PlanPhase)
    cooldown: PlanPhase = field(default_factory=PlanPhase)
    reasoning: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)

    @property
    def phases(self) -> tuple[PlanPhase, PlanPhase, PlanPhase]:
        return (self.warmup, self.main, self.cooldown)

    @property
    def all_exercises(self) -> tuple[Exercise, ...]:
        return self.warmup.exercises + self.main.exercises + self.cooldown.exercises

    @property
    def total_duration_min(self) -> float:
        return self.total_duration_s / 60.0
