"""Profile match: how well plan intensity and complexity suit the user.

The score is the mean of four sub-scores:
    1. fitness alignment: expected intensity for the tier vs. plan intensity
    2. complexity match: expected complexity for the tier vs. plan complexity
    3. energy compatibility: tier-implied energy budget vs. duration and intensity
    4. intensity preference: distance from the tier's preferred intensity range
"""

from __future__ import annotations

from selection_engine.confidence.calculators.base import FactorCalculator, clamp_score
from selection_engine.models.context import AnalysisContext, UserProfile
from selection_engine.models.enums import FitnessTier
from selection_engine.models.plan import Exercise, GeneratedPlan

# Intensity ladder, lowest first
INTENSITY_LEVELS = ("low", "low-medium", "medium", "medium-high", "high")

_EXPECTED_INTENSITY: dict[FitnessTier, str] = {
    FitnessTier.BEGINNER: "low",
    FitnessTier.NOVICE: "low-medium",
    FitnessTier.INTERMEDIATE: "medium",
    FitnessTier.ADVANCED: "medium-high",
}

_EXPECTED_COMPLEXITY: dict[FitnessTier, str] = {
    FitnessTier.BEGINNER: "simple",
    FitnessTier.NOVICE: "simple",
    FitnessTier.INTERMEDIATE: "moderate",
    FitnessTier.ADVANCED: "complex",
}

_COMPLEXITY_COMPATIBILITY: dict[str, dict[str, float]] = {
    "simple": {"simple": 1.0, "moderate": 0.7, "complex": 0.4},
    "moderate": {"simple": 0.8, "moderate": 1.0, "complex": 0.8},
    "complex": {"simple": 0.6, "moderate": 0.9, "complex": 1.0},
}

# Tier → (max comfortable duration in minutes, preferred intensity)
_ENERGY_BUDGET: dict[FitnessTier, tuple[float, str]] = {
    FitnessTier.BEGINNER: (30.0, "low-medium"),
    FitnessTier.NOVICE: (40.0, "medium"),
    FitnessTier.INTERMEDIATE: (50.0, "medium"),
    FitnessTier.ADVANCED: (60.0, "medium-high"),
}

_PREFERRED_INTENSITIES: dict[FitnessTier, tuple[str, ...]] = {
    FitnessTier.BEGINNER: ("low", "low-medium"),
    FitnessTier.NOVICE: ("low-medium", "medium"),
    FitnessTier.INTERMEDIATE: ("medium", "medium-high"),
    FitnessTier.ADVANCED: ("medium-high", "high"),
}

_EXERCISE_INTENSITY = {"high": 0.9, "moderate": 0.7, "low": 0.3}
_TIME_OF_DAY_ADJUSTMENT = {"morning": 0.05, "evening": -0.05}


_INTENSITY_COMPATIBILITY: dict[str, dict[str, float]] = {
    "low": {"low": 1.0, "low-medium": 0.8, "medium": 0.6, "medium-high": 0.4, "high": 0.2},
    "low-medium": {"low": 0.8, "low-medium": 1.0, "medium": 0.9, "medium-high": 0.7, "high": 0.5},
    "medium": {"low": 0.6, "low-medium": 0.9, "medium": 1.0, "medium-high": 0.9, "high": 0.7},
    "medium-high": {"low": 0.4, "low-medium": 0.7, "medium": 0.9, "medium-high": 1.0, "high": 0.9},
    "high": {"low": 0.2, "low-medium": 0.5, "medium": 0.7, "medium-high": 0.9, "high": 1.0},
}


def intensity_compatibility(expected: str, actual: str) -> float:
    """Compatibility of two rungs of the intensity ladder (symmetric, 0.2-1.0)."""
    return _INTENSITY_COMPATIBILITY[expected][actual]


def estimate_intensity(exercises: tuple[Exercise, ...]) -> str:
    """Map the mean per-exercise intensity onto the intensity ladder."""
    if not exercises:
        return "medium"
    total = 0.0
    for exercise in exercises:
        value = _EXERCISE_INTENSITY.get(exercise.intensity or "", 0.5)
        duration = exercise.duration_s or 0.0
        if duration > 60:
            value += 0.1
        if duration < 30:
            value -= 0.1
        total += max(0.0, min(1.0, value))
    average = total / len(exercises)
    if average >= 0.8:
        return "high"
    if average >= 0.6:
        return "medium-high"
    if average >= 0.4:
        return "medium"
    if average >= 0.2:
        return "low-medium"
    return "low"


def estimate_complexity(exercises: tuple[Exercise, ...]) -> str:
    """Classify plan complexity from exercise names and intensity."""
    if not exercises:
        return "moderate"
    total = 0.0
    for exercise in exercises:
        name = exercise.name.lower()
        value = 0.5
        if "compound" in name or "multi-joint" in name:
            value += 0.3
        if "isolation" in name or "single-joint" in name:
            value -= 0.2
        if "balance" in name or "stability" in name:
            value += 0.2
        if exercise.intensity == "high" and "interval" in name:
            value += 0.2
        total += max(0.0, min(1.0, value))
    average = total / len(exercises)
    if average >= 0.7:
        return "complex"
    if average >= 0.4:
        return "moderate"
    return "simple"


class ProfileMatchCalculator(FactorCalculator):
    """Measures how well the plan aligns with the user's fitness level."""

    factor_name = "profile_match"
    weight = 0.25
    description = (
        "Measures how well the workout aligns with the user's fitness level, "
        "experience, energy level, and preferred intensity"
    )

    def calculate(
        self, profile: UserProfile, plan: GeneratedPlan, context: AnalysisContext
    ) -> float:
        tier = profile.fitness_tier
        exercises = plan.all_exercises
        intensity = estimate_intensity(exercises)

        fitness = intensity_compatibility(_EXPECTED_INTENSITY[tier], intensity)
        complexity = _COMPLEXITY_COMPATIBILITY[_EXPECTED_COMPLEXITY[tier]][
            estimate_complexity(exercises)
        ]
        energy = self._energy_compatibility(tier, plan.total_duration_min, intensity, context)
        preference = self._intensity_preference(profile, tier, intensity)

        return clamp_score((fitness + complexity + energy + preference) / 4)

    @staticmethod
    def _energy_compatibility(
        tier: FitnessTier, duration_min: float, intensity: str, context: AnalysisContext
    ) -> float:
        max_duration, preferred = _ENERGY_BUDGET[tier]
        duration_score = max(0.0, 1 - abs(duration_min - max_duration) / max_duration)
        intensity_score = intensity_compatibility(preferred, intensity)
        adjustment = _TIME_OF_DAY_ADJUSTMENT.get(context.environment.time_of_day or "", 0.0)
        return max(0.0, min(1.0, (duration_score + intensity_score) / 2 + adjustment))

    @staticmethod
    def _intensity_preference(profile: UserProfile, tier: FitnessTier, intensity: str) -> float:
        preferred = _PREFERRED_INTENSITIES[tier]
        if profile.intensity_preference in ("low", "high"):
            preferred = preferred + (profile.intensity_preference,)
        elif profile.intensity_preference == "moderate":
            preferred = preferred + ("medium",)
        if intensity in preferred:
            return 1.0
        index = INTENSITY_LEVELS.index(intensity)
        distance = min(abs(index - INTENSITY_LEVELS.index(p)) for p in preferred)
        return max(0.1, 1 - distance * 0.25)
