"""Equipment conflicts: too little for strength, too much for a short session.

Thresholds:
    equipment selected but empty and focus == strength → MEDIUM efficiency conflict
    equipment count > MAX_EQUIPMENT_FOR_SHORT_DURATION
        and duration < VERY_LONG_DURATION_THRESHOLD → MEDIUM efficiency conflict
"""

from __future__ import annotations

from selection_engine.extractors import extract_duration, extract_equipment, extract_focus
from selection_engine.models.context import AnalysisContext
from selection_engine.models.enums import (
    FIELD_DURATION,
    FIELD_EQUIPMENT,
    FIELD_FOCUS,
    MAX_EQUIPMENT_FOR_SHORT_DURATION,
    MEDIUM_CONFIDENCE,
    MEDIUM_LOW_CONFIDENCE,
    VERY_LONG_DURATION_THRESHOLD,
    ConflictType,
    ImpactArea,
    Severity,
)
from selection_engine.models.insights import Conflict
from selection_engine.models.selections import WorkoutSelections
from selection_engine.rules.base import ConflictRule


def _equipment_focus_condition(selections: WorkoutSelections, _context: AnalysisContext) -> bool:
    return (
        selections.equipment is not None
        and extract_focus(selections.focus) == "strength"
        and len(extract_equipment(selections.equipment)) == 0
    )


def _equipment_focus_conflict(selections: WorkoutSelections, _context: AnalysisContext) -> Conflict:
    return Conflict(
        id="equipment_focus",
        components=(FIELD_EQUIPMENT, FIELD_FOCUS),
        type=ConflictType.EFFICIENCY,
        severity=Severity.MEDIUM,
        description="Strength focus without equipment may limit training options",
        suggested_resolution="Add resistance equipment or switch to a body weight-friendly focus",
        confidence=MEDIUM_LOW_CONFIDENCE,
        impact=ImpactArea.EFFECTIVENESS,
        metadata={"focus": extract_focus(selections.focus), "equipment_count": 0},
    )


def _equipment_duration_condition(selections: WorkoutSelections, _context: AnalysisContext) -> bool:
    duration = extract_duration(selections.duration)
    return (
        duration is not None
        and len(extract_equipment(selections.equipment)) > MAX_EQUIPMENT_FOR_SHORT_DURATION
        and duration < VERY_LONG_DURATION_THRESHOLD
    )


def _equipment_duration_conflict(selections: WorkoutSelections, _context: AnalysisContext) -> Conflict:
    return Conflict(
        id="equipment_duration",
        components=(FIELD_EQUIPMENT, FIELD_DURATION),
        type=ConflictType.EFFICIENCY,
        severity=Severity.MEDIUM,
        description="Many equipment pieces with a short duration may rush transitions",
        suggested_resolution="Reduce equipment selection or extend duration",
        confidence=MEDIUM_CONFIDENCE,
        impact=ImpactArea.PERFORMANCE,
        metadata={
            "equipment_count": len(extract_equipment(selections.equipment)),
            "duration": extract_duration(selections.duration),
        },
    )


RULES = (
    ConflictRule(
        rule_id="equipment_focus",
        components=(FIELD_EQUIPMENT, FIELD_FOCUS),
        condition=_equipment_focus_condition,
        generate=_equipment_focus_conflict,
    ),
    ConflictRule(
        rule_id="equipment_duration",
        components=(FIELD_EQUIPMENT, FIELD_DURATION),
        condition=_equipment_duration_condition,
        generate=_equipment_duration_conflict,
    ),
)
