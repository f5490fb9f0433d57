"""Injury conflicts: target areas that overlap injured regions.

A severe injury on a targeted region is the only CRITICAL rule and makes a
configuration invalid. Any other overlap is a HIGH safety warning.
"""

from __future__ import annotations

from selection_engine.extractors import (
    extract_areas,
    extract_injury_regions,
    extract_severe_injury_regions,
)
from selection_engine.models.context import AnalysisContext
from selection_engine.models.enums import (
    FIELD_AREAS,
    FIELD_INJURY,
    HIGH_CONFIDENCE,
    VERY_HIGH_CONFIDENCE,
    ConflictType,
    ImpactArea,
    Severity,
)
from selection_engine.models.insights import Conflict
from selection_engine.models.selections import WorkoutSelections
from selection_engine.rules.base import ConflictRule


def _injured_overlap(selections: WorkoutSelections) -> frozenset[str]:
    return extract_injury_regions(selections.injury) & extract_areas(selections.areas)


def _severe_overlap(selections: WorkoutSelections) -> frozenset[str]:
    return extract_severe_injury_regions(selections.injury) & extract_areas(selections.areas)


def _non_severe_overlap(selections: WorkoutSelections) -> frozenset[str]:
    return _injured_overlap(selections) - _severe_overlap(selections)


def _injury_areas_condition(selections: WorkoutSelections, _context: AnalysisContext) -> bool:
    return bool(_non_severe_overlap(selections))


def _injury_areas_conflict(selections: WorkoutSelections, _context: AnalysisContext) -> Conflict:
    overlapping = sorted(_non_severe_overlap(selections))
    return Conflict(
        id="injury_areas",
        components=(FIELD_INJURY, FIELD_AREAS),
        type=ConflictType.SAFETY,
        severity=Severity.HIGH,
        description=f"Selected workout areas include injured regions: {', '.join(overlapping)}",
        suggested_resolution="Avoid loading injured regions or choose different target areas",
        confidence=HIGH_CONFIDENCE,
        impact=ImpactArea.SAFETY,
        metadata={"overlapping_areas": overlapping},
    )


def _injury_severe_condition(selections: WorkoutSelections, _context: AnalysisContext) -> bool:
    return bool(_severe_overlap(selections))


def _injury_severe_conflict(selections: WorkoutSelections, _context: AnalysisContext) -> Conflict:
    overlapping = sorted(_severe_overlap(selections))
    return Conflict(
        id="injury_areas_severe",
        components=(FIELD_INJURY, FIELD_AREAS),
        type=ConflictType.SAFETY,
        severity=Severity.CRITICAL,
        description=f"Selected workout areas include severely injured regions: {', '.join(overlapping)}",
        suggested_resolution="Remove severely injured regions from the target areas",
        confidence=VERY_HIGH_CONFIDENCE,
        impact=ImpactArea.SAFETY,
        metadata={"overlapping_areas": overlapping},
    )


RULES = (
    ConflictRule(
        rule_id="injury_areas",
        components=(FIELD_INJURY, FIELD_AREAS),
        condition=_injury_areas_condition,
        generate=_injury_areas_conflict,
    ),
    ConflictRule(
        rule_id="injury_areas_severe",
        components=(FIELD_INJURY, FIELD_AREAS),
        condition=_injury_severe_condition,
        generate=_injury_severe_conflict,
    ),
)
