"""User profile and analysis context: everything the rules know beyond the selections."""

from __future__ import annotations

from dataclasses import dataclass, field

from selection_engine.models.enums import FitnessTier

# Product vocabulary and common synonyms → normalized tier
_FITNESS_TIERS: dict[str, FitnessTier] = {
    "new to exercise": FitnessTier.BEGINNER,
    "beginner": FitnessTier.BEGINNER,
    "novice": FitnessTier.NOVICE,
    "some experience": FitnessTier.INTERMEDIATE,
    "intermediate": FitnessTier.INTERMEDIATE,
    "adaptive": FitnessTier.INTERMEDIATE,
    "advanced athlete": FitnessTier.ADVANCED,
    "advanced": FitnessTier.ADVANCED,
}


def normalize_fitness_level(fitness_level: str | None) -> FitnessTier:
    """Map a free-text fitness level onto a FitnessTier (intermediate if unknown)."""
    if not fitness_level:
        return FitnessTier.INTERMEDIATE
    return _FITNESS_TIERS.get(fitness_level.strip().lower(), FitnessTier.INTERMEDIATE)


def is_beginner(fitness_level: str | None) -> bool:
    """True for users new to exercise (beginner or novice)."""
    return normalize_fitness_level(fitness_level) <= FitnessTier.NOVICE


@dataclass(frozen=True)
class UserProfile:
    """Static facts about the user, collected during onboarding."""

    fitness_level: str = "some experience"
    goals: tuple[str, ...] = field(default_factory=tuple)
    workout_styles: tuple[str, ...] = field(default_factory=tuple)
    intensity_preference: str | None = None  # "low" | "moderate" | "high"
    available_equipment: tuple[str, ...] = field(default_factory=tuple)
    injuries: tuple[str, ...] = field(default_factory=tuple)
    mobility_limitations: tuple[str, ...] = field(default_factory=tuple)

    @property
    def fitness_tier(self) -> FitnessTier:
        return normalize_fitness_level(self.fitness_level)


@dataclass(frozen=True)
class SessionRecord:
    """One previously completed session."""

    focus: str | None = None
    duration_min: float = 0.0
    completed: bool = True
    rating: int | None = None  # 1-5 user rating


@dataclass(frozen=True)
class SessionPreferences:
    """Session-level preferences that shape how insights are presented."""

    ai_assistance_level: str = "moderate"  # "minimal" | "moderate" | "comprehensive"
    show_learning_tips: bool = False


@dataclass(frozen=True)
class Environment:
    """Where and when the workout will happen."""

    time_of_day: str | None = None  # "morning" | "afternoon" | "evening"
    location: str | None = None  # "indoor" | "outdoor"


@dataclass(frozen=True)
class AnalysisContext:
    """Context passed to every rule alongside the selections."""

    user_profile: UserProfile = field(default_factory=UserProfile)
    session_history: tuple[SessionRecord, ...] = field(default_factory=tuple)
    preferences: SessionPreferences = field(default_factory=SessionPreferences)
    environment: Environment = field(default_factory=Environment)
    soreness_areas: tuple[str, ...] = field(default_factory=tuple)
    workout_type: str | None = None  # "quick" | "detailed"
