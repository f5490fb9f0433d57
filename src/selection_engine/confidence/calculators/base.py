"""Abstract base class for confidence factor calculators."""

from __future__ import annotations

from abc import ABC, abstractmethod

from selection_engine.models.context import AnalysisContext, UserProfile
from selection_engine.models.enums import MIN_FACTOR_SCORE
from selection_engine.models.plan import GeneratedPlan


def clamp_score(value: float, floor: float = MIN_FACTOR_SCORE) -> float:
    """Clamp a factor score into [floor, 1.0]."""
    return max(floor, min(1.0, value))


class FactorCalculator(ABC):
    """Base class for the five confidence factors.

    Subclasses must define:
        factor_name: key in ConfidenceFactors / the weight map
        weight: default weight of the factor
        description: one-line explanation shown in factor breakdowns
        calculate(): pure arithmetic over (profile, plan, context)
    """

    factor_name: str
    weight: float
    description: str

    @abstractmethod
    def calculate(
        self, profile: UserProfile, plan: GeneratedPlan, context: AnalysisContext
    ) -> float:
        """Return the factor score in [0.1, 1.0]."""
        ...
