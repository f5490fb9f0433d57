"""OptimizationAnalyzer: heuristic insights and the unified insight ranking.

Heuristics are independent of the rule sets:
    duration > VERY_LONG_DURATION_THRESHOLD without a warm-up → add warm-up
    strength focus with < MIN_EQUIPMENT_FOR_STRENGTH pieces → add equipment
    focus set without target areas → select areas
    strength focus, duration >= LONG_DURATION_THRESHOLD and no
        flexibility equipment → add recovery equipment
"""

from __future__ import annotations

import logging
from typing import Iterable

from selection_engine.extractors import (
    extract_areas,
    extract_duration,
    extract_equipment,
    extract_focus,
    extract_warmup_included,
)
from selection_engine.models.context import AnalysisContext
from selection_engine.models.enums import (
    FIELD_AREAS,
    FIELD_DURATION,
    FIELD_EQUIPMENT,
    FIELD_FOCUS,
    LONG_DURATION_THRESHOLD,
    LOW_CONFIDENCE,
    MEDIUM_LOW_CONFIDENCE,
    MIN_EQUIPMENT_FOR_STRENGTH,
    VERY_LONG_DURATION_THRESHOLD,
    VERY_LOW_CONFIDENCE,
    WARMUP_DURATION_MAX_MINUTES,
    WARMUP_DURATION_MINUTES,
    InsightType,
    Severity,
)
from selection_engine.models.insights import Conflict, Insight, Synergy
from selection_engine.models.selections import WorkoutSelections

logger = logging.getLogger(__name__)

_FLEXIBILITY_EQUIPMENT = ("foam roller", "yoga mat", "stretch")


def sort_insights(insights: Iterable[Insight]) -> tuple[Insight, ...]:
    """Actionable first, then confidence descending (stable)."""
    return tuple(sorted(insights, key=lambda i: (not i.actionable, -i.confidence)))


def conflict_to_insight(conflict: Conflict) -> Insight:
    insight_type = (
        InsightType.CRITICAL_WARNING
        if conflict.severity == Severity.CRITICAL
        else InsightType.WARNING
    )
    return Insight(
        id=f"conflict_{conflict.id}",
        type=insight_type,
        message=conflict.description,
        recommendation=conflict.suggested_resolution,
        confidence=conflict.confidence,
        actionable=True,
        related_fields=conflict.components,
        metadata={
            "conflict_type": conflict.type,
            "impact": conflict.impact,
            "severity": conflict.severity,
            **conflict.metadata,
        },
    )


def synergy_to_insight(synergy: Synergy) -> Insight:
    return Insight(
        id=f"synergy_{synergy.id}",
        type=InsightType.OPTIMIZATION,
        message=synergy.description,
        recommendation="Continue with this combination for optimal results",
        confidence=synergy.confidence,
        actionable=False,
        related_fields=synergy.components,
        metadata={"synergy_type": synergy.type, **synergy.metadata},
    )


class OptimizationAnalyzer:
    """Derives heuristic insights and merges them with conflicts and synergies."""

    def generate_optimization_insights(
        self, selections: WorkoutSelections, context: AnalysisContext
    ) -> tuple[Insight, ...]:
        """Apply every heuristic to the snapshot (unsorted, in heuristic order)."""
        duration = extract_duration(selections.duration)
        focus = extract_focus(selections.focus)
        equipment = extract_equipment(selections.equipment)
        areas = extract_areas(selections.areas)

        insights: list[Insight] = []
        if (
            duration is not None
            and duration > VERY_LONG_DURATION_THRESHOLD
            and not extract_warmup_included(selections.duration)
        ):
            insights.append(self._warmup_insight(duration))
        if focus == "strength" and len(equipment) < MIN_EQUIPMENT_FOR_STRENGTH:
            insights.append(self._equipment_insight(focus, equipment))
        if focus and not areas:
            insights.append(self._areas_insight(focus))
        if (
            focus == "strength"
            and duration is not None
            and duration >= LONG_DURATION_THRESHOLD
            and not _has_flexibility_equipment(equipment)
        ):
            insights.append(self._recovery_equipment_insight(duration))
        return tuple(insights)

    def generate_recommendations(
        self,
        conflicts: Iterable[Conflict],
        synergies: Iterable[Synergy],
        selections: WorkoutSelections,
        context: AnalysisContext,
    ) -> tuple[Insight, ...]:
        """Project conflicts, synergies and heuristics into one ranked insight list."""
        insights: list[Insight] = [conflict_to_insight(c) for c in conflicts]
        insights.extend(synergy_to_insight(s) for s in synergies)
        insights.extend(self.generate_optimization_insights(selections, context))
        logger.debug("Generated %d recommendations", len(insights))
        return sort_insights(insights)

    @staticmethod
    def _warmup_insight(duration: float) -> Insight:
        return Insight(
            id="warmup_suggestion",
            type=InsightType.OPTIMIZATION,
            message="Long workout duration detected - consider adding warm-up",
            recommendation=(
                f"Include {WARMUP_DURATION_MINUTES}-{WARMUP_DURATION_MAX_MINUTES} minutes "
                "of dynamic warm-up to prevent injury"
            ),
            confidence=MEDIUM_LOW_CONFIDENCE,
            actionable=True,
            related_fields=(FIELD_DURATION,),
            metadata={"duration": duration, "suggestion": "add_warmup"},
        )

    @staticmethod
    def _equipment_insight(focus: str, equipment: frozenset[str]) -> Insight:
        return Insight(
            id="equipment_suggestion",
            type=InsightType.OPTIMIZATION,
            message="Strength focus with minimal equipment may limit progression",
            recommendation="Consider adding resistance bands or dumbbells for variety",
            confidence=LOW_CONFIDENCE,
            actionable=True,
            related_fields=(FIELD_EQUIPMENT, FIELD_FOCUS),
            metadata={
                "focus": focus,
                "equipment_count": len(equipment),
                "suggestion": "add_equipment",
            },
        )

    @staticmethod
    def _areas_insight(focus: str) -> Insight:
        return Insight(
            id="areas_suggestion",
            type=InsightType.OPTIMIZATION,
            message="Focus specified but no target areas selected",
            recommendation="Select specific muscle groups to target for better results",
            confidence=VERY_LOW_CONFIDENCE,
            actionable=True,
            related_fields=(FIELD_AREAS, FIELD_FOCUS),
            metadata={"focus": focus, "suggestion": "select_areas"},
        )

    @staticmethod
    def _recovery_equipment_insight(duration: float) -> Insight:
        return Insight(
            id="recovery_equipment_suggestion",
            type=InsightType.OPTIMIZATION,
            message="Long strength session without flexibility or recovery equipment",
            recommendation="Consider a foam roller or yoga mat for post-workout mobility",
            confidence=VERY_LOW_CONFIDENCE,
            actionable=True,
            related_fields=(FIELD_EQUIPMENT, FIELD_FOCUS),
            metadata={"duration": duration, "suggestion": "add_recovery_equipment"},
        )


def _has_flexibility_equipment(equipment: frozenset[str]) -> bool:
    return any(
        keyword in piece.lower() for piece in equipment for keyword in _FLEXIBILITY_EQUIPMENT
    )
