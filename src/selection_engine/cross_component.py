"""CrossComponentService: orchestrates conflict, synergy and insight analysis.

Usage:
    service = CrossComponentService()
    analysis = service.analyze_interactions(selections, context)
    validation = service.validate_configuration(selections, context)
    change = service.analyze_component_change("energy", 1, selections, context)
"""

from __future__ import annotations

import dataclasses
import logging
from concurrent.futures import ThreadPoolExecutor
from types import MappingProxyType
from typing import Any, Mapping

from selection_engine.analyzers.conflict_analyzer import ConflictAnalyzer
from selection_engine.analyzers.optimization_analyzer import OptimizationAnalyzer
from selection_engine.analyzers.synergy_analyzer import SynergyAnalyzer
from selection_engine.exceptions import InvalidSelectionError
from selection_engine.models.context import AnalysisContext
from selection_engine.models.enums import (
    FIELD_AREAS,
    FIELD_DURATION,
    FIELD_ENERGY,
    FIELD_EQUIPMENT,
    FIELD_FOCUS,
    FIELD_INJURY,
    FIELD_SORENESS,
    FIELD_TRAINING_LOAD,
    NEUTRAL_IMPACT_CONFIDENCE,
    ImpactType,
    Severity,
)
from selection_engine.models.insights import (
    ChangeAnalysis,
    ComponentImpact,
    Conflict,
    InteractionAnalysis,
    Synergy,
    ValidationResult,
)
from selection_engine.models.selections import WorkoutSelections
from selection_engine.registry import RuleRegistry

logger = logging.getLogger(__name__)

# Which fields should be re-examined when a given field changes
COMPONENT_DEPENDENCIES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    FIELD_ENERGY: (FIELD_FOCUS, FIELD_DURATION),
    FIELD_FOCUS: (FIELD_EQUIPMENT, FIELD_AREAS),
    FIELD_DURATION: (FIELD_ENERGY, FIELD_FOCUS),
    FIELD_EQUIPMENT: (FIELD_FOCUS, FIELD_DURATION),
    FIELD_AREAS: (FIELD_SORENESS, FIELD_FOCUS),
    FIELD_SORENESS: (FIELD_AREAS, FIELD_FOCUS),
    FIELD_INJURY: (FIELD_FOCUS, FIELD_DURATION, FIELD_AREAS),
    FIELD_TRAINING_LOAD: (FIELD_FOCUS, FIELD_DURATION, FIELD_ENERGY),
})

_WARNING_SEVERITIES = frozenset({Severity.HIGH, Severity.MEDIUM})


class CrossComponentService:
    """Facade over the conflict, synergy and optimization analyzers.

    With no registry given, every rule under ``selection_engine.rules`` is
    auto-discovered, mirroring how the analyzers are normally wired.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or RuleRegistry()
        if registry is None:
            self.registry.discover_rules()

        self.conflict_analyzer = ConflictAnalyzer(self.registry.conflict_rules())
        self.synergy_analyzer = SynergyAnalyzer(self.registry.synergy_rules())
        self.optimization_analyzer = OptimizationAnalyzer()

    def detect_conflicts(
        self, selections: WorkoutSelections, context: AnalysisContext
    ) -> tuple[Conflict, ...]:
        return self.conflict_analyzer.detect_conflicts(selections, context)

    def find_synergies(
        self, selections: WorkoutSelections, context: AnalysisContext
    ) -> tuple[Synergy, ...]:
        return self.synergy_analyzer.find_synergies(selections, context)

    def analyze_interactions(
        self, selections: WorkoutSelections, context: AnalysisContext
    ) -> InteractionAnalysis:
        """Run conflict and synergy detection concurrently, then rank insights.

        Both detectors only read the frozen snapshot, so they run on a
        two-worker pool without coordination. Each result list is sorted by
        its analyzer, so completion order never affects the output.
        """
        with ThreadPoolExecutor(max_workers=2) as pool:
            conflicts_future = pool.submit(self.detect_conflicts, selections, context)
            synergies_future = pool.submit(self.find_synergies, selections, context)
            conflicts = conflicts_future.result()
            synergies = synergies_future.result()

        recommendations = self.optimization_analyzer.generate_recommendations(
            conflicts, synergies, selections, context
        )
        logger.debug(
            "Interaction analysis: %d conflicts, %d synergies, %d recommendations",
            len(conflicts),
            len(synergies),
            len(recommendations),
        )
        return InteractionAnalysis(
            conflicts=conflicts,
            synergies=synergies,
            recommendations=recommendations,
        )

    def validate_configuration(
        self,
        selections: WorkoutSelections,
        context: AnalysisContext,
        include_all: bool = False,
    ) -> ValidationResult:
        """Split conflicts into blocking (critical) issues and advisory warnings.

        LOW severity conflicts are informational and appear in neither list;
        pass ``include_all=True`` to get every conflict in ``conflicts``.
        """
        conflicts = self.detect_conflicts(selections, context)
        critical = tuple(c for c in conflicts if c.severity == Severity.CRITICAL)
        warnings = tuple(c for c in conflicts if c.severity in _WARNING_SEVERITIES)
        suggestions = self.optimization_analyzer.generate_optimization_insights(selections, context)

        return ValidationResult(
            is_valid=not critical,
            critical_issues=critical,
            warnings=warnings,
            suggestions=suggestions,
            conflicts=conflicts if include_all else (),
        )

    def analyze_component_change(
        self,
        field_name: str,
        new_value: Any,
        current: WorkoutSelections,
        context: AnalysisContext,
    ) -> ChangeAnalysis:
        """Diff conflicts before and after setting ``field_name`` to ``new_value``.

        Resolved conflicts are positive impacts, introduced ones negative.
        A single neutral impact is reported when the conflict set is unchanged.

        Raises:
            InvalidSelectionError: If ``field_name`` is not a selection field.
        """
        if field_name not in WorkoutSelections.field_names():
            raise InvalidSelectionError(f"Unknown selection field: {field_name!r}", field_name)

        updated = dataclasses.replace(current, **{field_name: new_value})
        before = {c.id: c for c in self.detect_conflicts(current, context)}
        after = {c.id: c for c in self.detect_conflicts(updated, context)}

        impacts: list[ComponentImpact] = []
        for conflict_id, conflict in before.items():
            if conflict_id not in after:
                impacts.append(
                    ComponentImpact(
                        affected_component=", ".join(conflict.components),
                        impact_type=ImpactType.POSITIVE,
                        description=f"Resolves conflict: {conflict.description}",
                        confidence=conflict.confidence,
                    )
                )
        for conflict_id, conflict in after.items():
            if conflict_id not in before:
                impacts.append(
                    ComponentImpact(
                        affected_component=", ".join(conflict.components),
                        impact_type=ImpactType.NEGATIVE,
                        description=f"Creates conflict: {conflict.description}",
                        confidence=conflict.confidence,
                    )
                )
        if not impacts:
            impacts.append(
                ComponentImpact(
                    affected_component=field_name,
                    impact_type=ImpactType.NEUTRAL,
                    description="No change in component conflicts",
                    confidence=NEUTRAL_IMPACT_CONFIDENCE,
                )
            )

        recommendations = self.optimization_analyzer.generate_recommendations(
            tuple(after.values()), (), updated, context
        )
        return ChangeAnalysis(impacts=tuple(impacts), recommendations=recommendations)

    @staticmethod
    def get_component_dependencies() -> Mapping[str, tuple[str, ...]]:
        """Static table of which fields to re-check when a field changes."""
        return COMPONENT_DEPENDENCIES
