"""Energy synergies: high energy on a strength or power day."""

from __future__ import annotations

from selection_engine.extractors import extract_energy, extract_focus
from selection_engine.models.context import AnalysisContext
from selection_engine.models.enums import (
    FIELD_ENERGY,
    FIELD_FOCUS,
    HIGH_ENERGY_THRESHOLD,
    MEDIUM_HIGH_CONFIDENCE,
    STRENGTH_POWER_FOCUSES,
    SynergyType,
)
from selection_engine.models.insights import Synergy
from selection_engine.models.selections import WorkoutSelections
from selection_engine.rules.base import SynergyRule


def _energy_focus_condition(selections: WorkoutSelections, _context: AnalysisContext) -> bool:
    energy = extract_energy(selections.energy)
    return (
        energy is not None
        and energy >= HIGH_ENERGY_THRESHOLD
        and extract_focus(selections.focus) in STRENGTH_POWER_FOCUSES
    )


def _energy_focus_synergy(selections: WorkoutSelections, _context: AnalysisContext) -> Synergy:
    return Synergy(
        id="energy_focus_boost",
        components=(FIELD_ENERGY, FIELD_FOCUS),
        type=SynergyType.PERFORMANCE,
        description="High energy level supports an intense strength or power session",
        confidence=MEDIUM_HIGH_CONFIDENCE,
        benefit="Higher training quality and heavier working sets",
        metadata={
            "energy_level": extract_energy(selections.energy),
            "focus": extract_focus(selections.focus),
        },
    )


RULES = (
    SynergyRule(
        rule_id="energy_focus_boost",
        components=(FIELD_ENERGY, FIELD_FOCUS),
        condition=_energy_focus_condition,
        generate=_energy_focus_synergy,
    ),
)
