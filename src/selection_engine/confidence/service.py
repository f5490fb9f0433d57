"""ConfidenceService: scores a generated plan against a user's profile.

Usage:
    service = ConfidenceService()
    result = service.calculate_confidence(profile, plan, context)
    breakdown = service.get_factor_breakdown(profile, plan, context)
"""

from __future__ import annotations

import logging
import time
from typing import Sequence

import numpy as np

from selection_engine.confidence.calculators import FactorCalculator, default_calculators
from selection_engine.exceptions import ConfigurationError
from selection_engine.models.confidence import (
    FACTOR_NAMES,
    ConfidenceConfig,
    ConfidenceFactors,
    ConfidenceMetadata,
    ConfidenceResult,
    FactorBreakdown,
)
from selection_engine.models.context import AnalysisContext, UserProfile
from selection_engine.models.enums import (
    CONFIDENCE_VERSION,
    MIN_FACTOR_SCORE,
    WEAK_FACTOR_THRESHOLD,
    WEIGHT_SUM_TOLERANCE,
    ConfidenceLevel,
)
from selection_engine.models.plan import GeneratedPlan

logger = logging.getLogger(__name__)

_LEVEL_MESSAGES: dict[ConfidenceLevel, str] = {
    ConfidenceLevel.EXCELLENT: "This workout is excellently matched to your profile",
    ConfidenceLevel.GOOD: "This workout is well-suited to your needs",
    ConfidenceLevel.FAIR: "This workout may need adjustments to better match your profile",
    ConfidenceLevel.POOR: "This workout needs review before you start it",
}

_FACTOR_MESSAGES: dict[str, str] = {
    "profile_match": "Consider adjusting workout intensity to better match your fitness level",
    "safety_alignment": "Review exercises for any safety concerns with your current condition",
    "equipment_fit": "Some exercises may require equipment you don't have available",
    "goal_alignment": "Workout focus may not align perfectly with your primary fitness goals",
    "structure_quality": "Workout structure could be optimized for better flow and effectiveness",
}


def validate_config(config: ConfidenceConfig) -> None:
    """Reject weight maps and thresholds the service cannot score with.

    Raises:
        ConfigurationError: If a factor weight is missing, unknown or
            negative, the weights do not sum to 1.0, or the level thresholds
            are not ordered excellent >= good >= fair within [0, 1].
    """
    weights = config.weights
    missing = [name for name in FACTOR_NAMES if name not in weights]
    if missing:
        raise ConfigurationError(f"Missing factor weights: {', '.join(missing)}")
    unknown = sorted(set(weights) - set(FACTOR_NAMES))
    if unknown:
        raise ConfigurationError(f"Unknown factor weights: {', '.join(unknown)}")
    negative = [name for name, w in weights.items() if w < 0]
    if negative:
        raise ConfigurationError(f"Negative factor weights: {', '.join(negative)}")

    total = float(np.sum([weights[name] for name in FACTOR_NAMES]))
    if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
        raise ConfigurationError(f"Factor weights must sum to 1.0, got {total:.6f}")

    t = config.thresholds
    if not 0.0 <= t.fair <= t.good <= t.excellent <= 1.0:
        raise ConfigurationError(
            f"Thresholds must satisfy 0 <= fair <= good <= excellent <= 1, "
            f"got fair={t.fair}, good={t.good}, excellent={t.excellent}"
        )


def assess_data_quality(profile: UserProfile, plan: GeneratedPlan) -> float:
    """Share of the inputs that scoring relies on which are actually present."""
    present = [
        bool(profile.fitness_level),
        bool(profile.goals),
        bool(profile.available_equipment),
        bool(profile.intensity_preference),
        not plan.main.is_empty,
        plan.total_duration_s > 0,
        bool(plan.difficulty),
    ]
    return max(MIN_FACTOR_SCORE, sum(present) / len(present))


class ConfidenceService:
    """Runs every factor calculator and combines them into one weighted score.

    The configuration is validated at construction; a bad weight map is a
    setup error, never a per-call one. During scoring, a calculator that
    raises is logged and scored at MIN_FACTOR_SCORE, and out-of-range
    outputs are clamped and logged.
    """

    def __init__(
        self,
        config: ConfidenceConfig | None = None,
        calculators: Sequence[FactorCalculator] | None = None,
    ) -> None:
        self.config = config or ConfidenceConfig()
        validate_config(self.config)

        calculators = tuple(calculators) if calculators is not None else default_calculators()
        by_name = {c.factor_name: c for c in calculators}
        missing = [name for name in FACTOR_NAMES if name not in by_name]
        if missing:
            raise ConfigurationError(f"Missing factor calculators: {', '.join(missing)}")
        self._calculators = tuple(by_name[name] for name in FACTOR_NAMES)
        self._weights = np.array([self.config.weights[name] for name in FACTOR_NAMES], dtype=float)

    def calculate_confidence(
        self, profile: UserProfile, plan: GeneratedPlan, context: AnalysisContext
    ) -> ConfidenceResult:
        """Score ``plan`` for ``profile`` in ``context``."""
        start = time.perf_counter()

        scores = self._factor_scores(profile, plan, context)
        overall = float(np.clip(np.dot(scores, self._weights), 0.0, 1.0))
        factors = ConfidenceFactors(*(float(s) for s in scores))
        level = self._level_for(overall)
        recommendations = self._recommendations(factors, level)

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        metadata = ConfidenceMetadata(
            calculation_time_ms=elapsed_ms,
            factor_weights=dict(self.config.weights),
            data_quality=assess_data_quality(profile, plan),
            version=CONFIDENCE_VERSION,
        )
        if self.config.detailed_logging:
            logger.info(
                "Confidence %.3f (%s) in %.2fms: %s",
                overall,
                level.name.lower(),
                elapsed_ms,
                factors.as_dict(),
            )
        return ConfidenceResult(
            overall_score=overall,
            level=level,
            factors=factors,
            recommendations=recommendations,
            metadata=metadata,
        )

    def get_factor_breakdown(
        self, profile: UserProfile, plan: GeneratedPlan, context: AnalysisContext
    ) -> tuple[FactorBreakdown, ...]:
        """Per-factor score, weight and weighted contribution."""
        scores = self._factor_scores(profile, plan, context)
        weighted = scores * self._weights
        return tuple(
            FactorBreakdown(
                factor_name=calculator.factor_name,
                score=float(score),
                weight=float(weight),
                weighted_score=float(contribution),
                description=calculator.description,
            )
            for calculator, score, weight, contribution in zip(
                self._calculators, scores, self._weights, weighted
            )
        )

    def _factor_scores(
        self, profile: UserProfile, plan: GeneratedPlan, context: AnalysisContext
    ) -> np.ndarray:
        raw: list[float] = []
        for calculator in self._calculators:
            try:
                value = float(calculator.calculate(profile, plan, context))
            except Exception:
                logger.warning(
                    "Calculator %s failed; scoring it at %.1f",
                    calculator.factor_name,
                    MIN_FACTOR_SCORE,
                    exc_info=True,
                )
                value = MIN_FACTOR_SCORE
            if not MIN_FACTOR_SCORE <= value <= 1.0:
                logger.warning(
                    "Calculator %s returned out-of-range score %.4f; clamping",
                    calculator.factor_name,
                    value,
                )
            raw.append(value)
        return np.clip(np.array(raw, dtype=float), MIN_FACTOR_SCORE, 1.0)

    def _level_for(self, score: float) -> ConfidenceLevel:
        t = self.config.thresholds
        if score >= t.excellent:
            return ConfidenceLevel.EXCELLENT
        if score >= t.good:
            return ConfidenceLevel.GOOD
        if score >= t.fair:
            return ConfidenceLevel.FAIR
        return ConfidenceLevel.POOR

    @staticmethod
    def _recommendations(
        factors: ConfidenceFactors, level: ConfidenceLevel
    ) -> tuple[str, ...]:
        recommendations = [_LEVEL_MESSAGES[level]]
        for name, score in factors.as_dict().items():
            if score < WEAK_FACTOR_THRESHOLD:
                recommendations.append(_FACTOR_MESSAGES[name])
        return tuple(recommendations)
