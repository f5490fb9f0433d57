"""Soreness conflicts: training sore areas, or intense focus while broadly sore.

Thresholds:
    soreness ∩ target areas non-empty → MEDIUM safety conflict
    sore-area count >= HIGH_SORENESS_THRESHOLD
        and focus in {strength, power, endurance} → HIGH safety conflict
"""

from __future__ import annotations

from selection_engine.extractors import extract_areas, extract_focus, extract_soreness
from selection_engine.models.context import AnalysisContext
from selection_engine.models.enums import (
    FIELD_AREAS,
    FIELD_FOCUS,
    FIELD_SORENESS,
    HIGH_CONFIDENCE,
    HIGH_SORENESS_THRESHOLD,
    INTENSE_FOCUSES,
    MEDIUM_HIGH_CONFIDENCE,
    ConflictType,
    ImpactArea,
    Severity,
)
from selection_engine.models.insights import Conflict
from selection_engine.models.selections import WorkoutSelections
from selection_engine.rules.base import ConflictRule


def _overlap(selections: WorkoutSelections) -> frozenset[str]:
    return extract_soreness(selections.soreness) & extract_areas(selections.areas)


def _soreness_areas_condition(selections: WorkoutSelections, _context: AnalysisContext) -> bool:
    return bool(_overlap(selections))


def _soreness_areas_conflict(selections: WorkoutSelections, _context: AnalysisContext) -> Conflict:
    overlapping = sorted(_overlap(selections))
    return Conflict(
        id="soreness_areas",
        components=(FIELD_SORENESS, FIELD_AREAS),
        type=ConflictType.SAFETY,
        severity=Severity.MEDIUM,
        description=(
            f"Selected workout areas overlap with sore muscle groups: {', '.join(overlapping)}"
        ),
        suggested_resolution="Choose different areas or reduce intensity for sore regions",
        confidence=MEDIUM_HIGH_CONFIDENCE,
        impact=ImpactArea.SAFETY,
        metadata={
            "overlapping_areas": overlapping,
            "soreness_count": len(extract_soreness(selections.soreness)),
        },
    )


def _soreness_focus_condition(selections: WorkoutSelections, _context: AnalysisContext) -> bool:
    return (
        len(extract_soreness(selections.soreness)) >= HIGH_SORENESS_THRESHOLD
        and extract_focus(selections.focus) in INTENSE_FOCUSES
    )


def _soreness_focus_conflict(selections: WorkoutSelections, _context: AnalysisContext) -> Conflict:
    return Conflict(
        id="soreness_focus",
        components=(FIELD_SORENESS, FIELD_FOCUS),
        type=ConflictType.SAFETY,
        severity=Severity.HIGH,
        description="High soreness with intense focus may worsen muscle recovery",
        suggested_resolution="Switch to recovery or flexibility focus",
        confidence=HIGH_CONFIDENCE,
        impact=ImpactArea.SAFETY,
        metadata={
            "soreness_count": len(extract_soreness(selections.soreness)),
            "focus": extract_focus(selections.focus),
        },
    )


RULES = (
    ConflictRule(
        rule_id="soreness_areas",
        components=(FIELD_SORENESS, FIELD_AREAS),
        condition=_soreness_areas_condition,
        generate=_soreness_areas_conflict,
    ),
    ConflictRule(
        rule_id="soreness_focus",
        components=(FIELD_SORENESS, FIELD_FOCUS),
        condition=_soreness_focus_condition,
        generate=_soreness_focus_conflict,
    ),
)
