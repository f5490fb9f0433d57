"""Training load conflicts: an intense recent load combined with more stress.

Thresholds:
    intensity == intense and focus in {strength, power}
        and weekly volume > HIGH_WEEKLY_VOLUME_THRESHOLD → HIGH safety (overtraining)
    intensity == intense and duration > LONG_DURATION_THRESHOLD → MEDIUM efficiency
    intensity == intense and energy <= LOW_ENERGY_THRESHOLD → HIGH safety
"""

from __future__ import annotations

from selection_engine.extractors import (
    extract_duration,
    extract_energy,
    extract_focus,
    extract_training_load,
)
from selection_engine.models.context import AnalysisContext
from selection_engine.models.enums import (
    FIELD_DURATION,
    FIELD_ENERGY,
    FIELD_FOCUS,
    FIELD_TRAINING_LOAD,
    HIGH_CONFIDENCE,
    HIGH_WEEKLY_VOLUME_THRESHOLD,
    INTENSE_TRAINING_LOAD,
    LONG_DURATION_THRESHOLD,
    LOW_ENERGY_THRESHOLD,
    MEDIUM_CONFIDENCE,
    MEDIUM_HIGH_CONFIDENCE,
    STRENGTH_POWER_FOCUSES,
    ConflictType,
    ImpactArea,
    Severity,
)
from selection_engine.models.insights import Conflict
from selection_engine.models.selections import WorkoutSelections
from selection_engine.rules.base import ConflictRule


def _is_intense(selections: WorkoutSelections) -> bool:
    load = extract_training_load(selections.training_load)
    return load is not None and load.average_intensity == INTENSE_TRAINING_LOAD


def _load_metadata(selections: WorkoutSelections) -> dict:
    load = extract_training_load(selections.training_load)
    return {
        "training_load": load.average_intensity if load else None,
        "weekly_volume": load.weekly_volume if load else None,
    }


def _load_focus_condition(selections: WorkoutSelections, _context: AnalysisContext) -> bool:
    load = extract_training_load(selections.training_load)
    return (
        _is_intense(selections)
        and extract_focus(selections.focus) in STRENGTH_POWER_FOCUSES
        and load.weekly_volume > HIGH_WEEKLY_VOLUME_THRESHOLD
    )


def _load_focus_conflict(selections: WorkoutSelections, _context: AnalysisContext) -> Conflict:
    return Conflict(
        id="training_load_focus",
        components=(FIELD_TRAINING_LOAD, FIELD_FOCUS),
        type=ConflictType.SAFETY,
        severity=Severity.HIGH,
        description="High training load with intense focus may lead to overtraining",
        suggested_resolution="Consider recovery focus or reduce training intensity",
        confidence=MEDIUM_HIGH_CONFIDENCE,
        impact=ImpactArea.SAFETY,
        metadata={**_load_metadata(selections), "focus": extract_focus(selections.focus)},
    )


def _load_duration_condition(selections: WorkoutSelections, _context: AnalysisContext) -> bool:
    duration = extract_duration(selections.duration)
    return _is_intense(selections) and duration is not None and duration > LONG_DURATION_THRESHOLD


def _load_duration_conflict(selections: WorkoutSelections, _context: AnalysisContext) -> Conflict:
    return Conflict(
        id="training_load_duration",
        components=(FIELD_TRAINING_LOAD, FIELD_DURATION),
        type=ConflictType.EFFICIENCY,
        severity=Severity.MEDIUM,
        description="High training load with long duration may be unsustainable",
        suggested_resolution="Reduce duration or consider a recovery-focused session",
        confidence=MEDIUM_CONFIDENCE,
        impact=ImpactArea.PERFORMANCE,
        metadata={**_load_metadata(selections), "duration": extract_duration(selections.duration)},
    )


def _load_energy_condition(selections: WorkoutSelections, _context: AnalysisContext) -> bool:
    energy = extract_energy(selections.energy)
    return _is_intense(selections) and energy is not None and energy <= LOW_ENERGY_THRESHOLD


def _load_energy_conflict(selections: WorkoutSelections, _context: AnalysisContext) -> Conflict:
    return Conflict(
        id="training_load_energy",
        components=(FIELD_TRAINING_LOAD, FIELD_ENERGY),
        type=ConflictType.SAFETY,
        severity=Severity.HIGH,
        description="Low energy with high training load may lead to poor performance",
        suggested_resolution="Consider a recovery session or reduce workout intensity",
        confidence=HIGH_CONFIDENCE,
        impact=ImpactArea.PERFORMANCE,
        metadata={**_load_metadata(selections), "energy_level": extract_energy(selections.energy)},
    )


RULES = (
    ConflictRule(
        rule_id="training_load_focus",
        components=(FIELD_TRAINING_LOAD, FIELD_FOCUS),
        condition=_load_focus_condition,
        generate=_load_focus_conflict,
    ),
    ConflictRule(
        rule_id="training_load_duration",
        components=(FIELD_TRAINING_LOAD, FIELD_DURATION),
        condition=_load_duration_condition,
        generate=_load_duration_conflict,
    ),
    ConflictRule(
        rule_id="training_load_energy",
        components=(FIELD_TRAINING_LOAD, FIELD_ENERGY),
        condition=_load_energy_condition,
        generate=_load_energy_conflict,
    ),
)
