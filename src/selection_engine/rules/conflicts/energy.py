"""Energy conflicts: low energy paired with long or high-intensity sessions.

Thresholds:
    energy <= LOW_ENERGY_THRESHOLD and duration > LONG_DURATION_THRESHOLD
        → HIGH efficiency conflict
    energy <= LOW_ENERGY_THRESHOLD and focus in {strength, power}
        → HIGH safety conflict
"""

from __future__ import annotations

from selection_engine.extractors import extract_duration, extract_energy, extract_focus
from selection_engine.models.context import AnalysisContext
from selection_engine.models.enums import (
    FIELD_DURATION,
    FIELD_ENERGY,
    FIELD_FOCUS,
    HIGH_CONFIDENCE,
    LONG_DURATION_THRESHOLD,
    LOW_ENERGY_THRESHOLD,
    STRENGTH_POWER_FOCUSES,
    VERY_HIGH_CONFIDENCE,
    ConflictType,
    ImpactArea,
    Severity,
)
from selection_engine.models.insights import Conflict
from selection_engine.models.selections import WorkoutSelections
from selection_engine.rules.base import ConflictRule


def _is_low_energy(selections: WorkoutSelections) -> bool:
    energy = extract_energy(selections.energy)
    return energy is not None and energy <= LOW_ENERGY_THRESHOLD


def _energy_duration_condition(selections: WorkoutSelections, _context: AnalysisContext) -> bool:
    duration = extract_duration(selections.duration)
    return _is_low_energy(selections) and duration is not None and duration > LONG_DURATION_THRESHOLD


def _energy_duration_conflict(selections: WorkoutSelections, _context: AnalysisContext) -> Conflict:
    return Conflict(
        id="energy_duration",
        components=(FIELD_ENERGY, FIELD_DURATION),
        type=ConflictType.EFFICIENCY,
        severity=Severity.HIGH,
        description=(
            "Low energy level paired with long workout duration may lead to poor performance"
        ),
        suggested_resolution="Reduce duration to 30-45 minutes or focus on recovery activities",
        confidence=HIGH_CONFIDENCE,
        impact=ImpactArea.PERFORMANCE,
        metadata={
            "energy_level": extract_energy(selections.energy),
            "duration": extract_duration(selections.duration),
        },
    )


def _energy_focus_condition(selections: WorkoutSelections, _context: AnalysisContext) -> bool:
    return _is_low_energy(selections) and extract_focus(selections.focus) in STRENGTH_POWER_FOCUSES


def _energy_focus_conflict(selections: WorkoutSelections, _context: AnalysisContext) -> Conflict:
    return Conflict(
        id="energy_focus",
        components=(FIELD_ENERGY, FIELD_FOCUS),
        type=ConflictType.SAFETY,
        severity=Severity.HIGH,
        description="Low energy with high-intensity focus may increase injury risk",
        suggested_resolution="Switch to mobility, flexibility, or recovery focus",
        confidence=VERY_HIGH_CONFIDENCE,
        impact=ImpactArea.SAFETY,
        metadata={
            "energy_level": extract_energy(selections.energy),
            "focus": extract_focus(selections.focus),
        },
    )


RULES = (
    ConflictRule(
        rule_id="energy_duration",
        components=(FIELD_ENERGY, FIELD_DURATION),
        condition=_energy_duration_condition,
        generate=_energy_duration_conflict,
    ),
    ConflictRule(
        rule_id="energy_focus",
        components=(FIELD_ENERGY, FIELD_FOCUS),
        condition=_energy_focus_condition,
        generate=_energy_focus_conflict,
    ),
)
