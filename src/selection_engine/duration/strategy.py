"""DurationStrategy: maps a requested duration onto a supported bucket.

Selection happens in two steps:

1. Snap the request to the nearest supported bucket (ties go down).
2. Apply downward adjustments in order, each one recorded in the reason:
   a. energy <= 3/10 steps down one bucket, never below 10 minutes
   b. 3+ sore areas steps down one bucket, never below 15 minutes
   c. beginners are capped at 30 minutes

Adjustments never increase the duration.
"""

from __future__ import annotations

import logging

from selection_engine.duration.configs import (
    DURATION_CONFIGS,
    get_duration_config,
    nearest_supported_duration,
)
from selection_engine.models.context import is_beginner, normalize_fitness_level
from selection_engine.models.duration import (
    DurationConfig,
    DurationOptimization,
    PhaseAllocation,
    StrategyParams,
    StrategyResult,
)
from selection_engine.models.enums import (
    BEGINNER_MAX_DURATION,
    DURATION_HIGH_ENERGY_THRESHOLD,
    DURATION_LOW_ENERGY_THRESHOLD,
    EQUIPMENT_VARIETY_COUNT,
    HIGH_SORENESS_THRESHOLD,
    LARGE_ADJUSTMENT_RATIO,
    LONG_BUCKET_MIN,
    LOW_ENERGY_MIN_DURATION,
    SHORT_BUCKET_MAX,
    SORENESS_MIN_DURATION,
    SUPPORTED_DURATIONS,
    Complexity,
    FitnessTier,
)

logger = logging.getLogger(__name__)

_MAX_ALTERNATIVES = 3


def _step_down(duration: int, floor: int) -> int:
    """Next shorter bucket, or ``duration`` itself if that would go below ``floor``."""
    shorter = [d for d in SUPPORTED_DURATIONS if floor <= d < duration]
    return max(shorter) if shorter else duration


class DurationStrategy:
    """Selects a duration bucket and explains the choice.

    Usage:
        strategy = DurationStrategy()
        result = strategy.select_strategy(StrategyParams(duration=22))
        optimization = strategy.create_duration_optimization(params, result)
    """

    def select_strategy(self, params: StrategyParams) -> StrategyResult:
        """Pick the bucket for ``params`` with reasons and alternatives."""
        adjusted, reasons = self._resolve_duration(params)
        config = DURATION_CONFIGS[adjusted]
        is_exact = params.duration in SUPPORTED_DURATIONS

        recommendations = self._recommendations(params, config)
        adjustments = reasons if is_exact else reasons[1:]
        recommendations.extend(f"Duration {reason}" for reason in adjustments)

        logger.debug(
            "Selected %dmin (%s) for %smin request, exact match: %s",
            adjusted,
            config.name,
            params.duration,
            is_exact,
        )
        return StrategyResult(
            config=config,
            adjusted_duration=adjusted,
            is_exact_match=is_exact,
            adjustment_reason="; ".join(reasons) if reasons else None,
            recommendations=tuple(recommendations),
            alternative_options=self._alternatives(adjusted, params.duration),
        )

    def validate_strategy(self, result: StrategyResult, params: StrategyParams) -> bool:
        """Check a result is internally consistent and reproducible from ``params``."""
        if result.adjusted_duration not in SUPPORTED_DURATIONS:
            logger.warning("Invalid duration %smin is not supported", result.adjusted_duration)
            return False
        if result.config.duration != result.adjusted_duration:
            logger.warning(
                "Config for %dmin does not match adjusted duration %dmin",
                result.config.duration,
                result.adjusted_duration,
            )
            return False
        expected, _ = self._resolve_duration(params)
        if expected != result.adjusted_duration:
            logger.warning(
                "Result %dmin differs from recomputed %dmin",
                result.adjusted_duration,
                expected,
            )
            return False

        if params.duration > 0:
            ratio = abs(result.adjusted_duration - params.duration) / params.duration
            if ratio > LARGE_ADJUSTMENT_RATIO:
                logger.info(
                    "Large adjustment from %smin to %dmin (%d%%)",
                    params.duration,
                    result.adjusted_duration,
                    round(ratio * 100),
                )
        return True

    def create_duration_optimization(
        self, params: StrategyParams, result: StrategyResult
    ) -> DurationOptimization:
        """Summarize the chosen bucket with its phase allocation in minutes."""
        config = result.config
        actual = result.adjusted_duration
        allocation = config.time_allocation
        phase_allocation = PhaseAllocation(
            warmup_minutes=actual * allocation.warmup_percent / 100,
            main_minutes=actual * allocation.main_percent / 100,
            cooldown_minutes=actual * allocation.cooldown_percent / 100,
        )

        recommendations: list[str] = []
        if params.duration != actual:
            recommendations.append(
                f"Adjusted from {params.duration:g}min to {actual}min for optimal workout structure"
            )
        if config.complexity == Complexity.MINIMAL:
            recommendations.append(
                f"Simple structure with {config.exercise_count.total} exercises for time efficiency"
            )
        elif config.complexity == Complexity.COMPREHENSIVE:
            recommendations.append(
                f"Comprehensive structure with {config.exercise_count.total} exercises "
                "for complete training"
            )

        return DurationOptimization(
            requested_duration=params.duration,
            actual_duration=actual,
            is_optimal=params.duration == actual and result.is_exact_match,
            alternative_durations=tuple(d for d in SUPPORTED_DURATIONS if d != actual),
            phase_allocation=phase_allocation,
            recommendations=tuple(recommendations),
        )

    @staticmethod
    def get_supported_durations() -> tuple[int, ...]:
        return SUPPORTED_DURATIONS

    @staticmethod
    def get_duration_config(duration: float) -> DurationConfig:
        return get_duration_config(duration)

    @staticmethod
    def _resolve_duration(params: StrategyParams) -> tuple[int, list[str]]:
        """Bucket for ``params`` plus the ordered list of adjustment reasons."""
        reasons: list[str] = []
        duration = nearest_supported_duration(params.duration)
        if params.duration not in SUPPORTED_DURATIONS:
            reasons.append(f"{params.duration:g}min not directly supported")

        if params.energy_level <= DURATION_LOW_ENERGY_THRESHOLD:
            stepped = _step_down(duration, LOW_ENERGY_MIN_DURATION)
            if stepped < duration:
                duration = stepped
                reasons.append(
                    f"adjusted down due to low energy level ({params.energy_level}/10)"
                )

        if len(params.soreness_areas) >= HIGH_SORENESS_THRESHOLD:
            stepped = _step_down(duration, SORENESS_MIN_DURATION)
            if stepped < duration:
                duration = stepped
                reasons.append(
                    f"adjusted down due to high soreness ({len(params.soreness_areas)} areas)"
                )

        if is_beginner(params.fitness_level) and duration > BEGINNER_MAX_DURATION:
            duration = BEGINNER_MAX_DURATION
            reasons.append("adjusted down for beginner-friendly duration")

        return duration, reasons

    @staticmethod
    def _recommendations(params: StrategyParams, config: DurationConfig) -> list[str]:
        recommendations: list[str] = []

        if params.energy_level <= DURATION_LOW_ENERGY_THRESHOLD:
            recommendations.append(
                f"With low energy ({params.energy_level}/10), focus on gentle movements "
                "and listen to your body"
            )
        elif params.energy_level >= DURATION_HIGH_ENERGY_THRESHOLD:
            recommendations.append(
                f"High energy level ({params.energy_level}/10) - great opportunity for an "
                f"intense {config.name.lower()} workout"
            )

        if params.soreness_areas:
            recommendations.append(
                f"Avoid intense work on sore areas: {', '.join(params.soreness_areas)}"
            )

        if config.duration <= SHORT_BUCKET_MAX:
            recommendations.append(
                f"Short {config.duration}min workout - focus on compound movements "
                "for maximum efficiency"
            )
        elif config.duration >= LONG_BUCKET_MIN:
            recommendations.append(
                f"Longer {config.duration}min workout - good opportunity for "
                "comprehensive training"
            )

        if not params.equipment:
            recommendations.append("Body weight workout - focus on form and controlled movements")
        elif len(params.equipment) >= EQUIPMENT_VARIETY_COUNT:
            recommendations.append(
                "Good equipment variety - opportunity for diverse exercise selection"
            )

        tier = normalize_fitness_level(params.fitness_level)
        if tier == FitnessTier.BEGINNER:
            recommendations.append(
                "As someone new to exercise, focus on learning proper form over intensity"
            )
        elif tier == FitnessTier.ADVANCED:
            recommendations.append(
                "Advanced level - opportunity for complex movements and higher intensity"
            )
        return recommendations

    @staticmethod
    def _alternatives(selected: int, requested: float) -> tuple[DurationConfig, ...]:
        others = sorted(
            (d for d in SUPPORTED_DURATIONS if d != selected),
            key=lambda d: abs(d - requested),
        )
        return tuple(DURATION_CONFIGS[d] for d in others[:_MAX_ALTERNATIVES])
