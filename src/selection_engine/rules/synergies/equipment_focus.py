"""Equipment synergies: selected equipment that suits the chosen focus.

Equipment names come from the product vocabulary ("Dumbbells",
"Foam Roller", "Stretching & Mobility Zone (Yoga Mats, Foam Rollers)"), so
pieces are matched case-insensitively by substring.
"""

from __future__ import annotations

from selection_engine.extractors import extract_equipment, extract_focus, extract_soreness
from selection_engine.models.context import AnalysisContext
from selection_engine.models.enums import (
    FIELD_EQUIPMENT,
    FIELD_FOCUS,
    FIELD_SORENESS,
    HIGH_CONFIDENCE,
    MEDIUM_CONFIDENCE,
    MIN_EQUIPMENT_FOR_STRENGTH,
    VERY_HIGH_CONFIDENCE,
    SynergyType,
)
from selection_engine.models.insights import Synergy
from selection_engine.models.selections import WorkoutSelections
from selection_engine.rules.base import SynergyRule


def has_equipment(selections: WorkoutSelections, keyword: str) -> bool:
    """True if any selected equipment piece mentions ``keyword``."""
    keyword = keyword.lower()
    return any(keyword in piece.lower() for piece in extract_equipment(selections.equipment))


def _equipment_strength_condition(selections: WorkoutSelections, _context: AnalysisContext) -> bool:
    return (
        extract_focus(selections.focus) == "strength"
        and len(extract_equipment(selections.equipment)) >= MIN_EQUIPMENT_FOR_STRENGTH
    )


def _equipment_strength_synergy(selections: WorkoutSelections, _context: AnalysisContext) -> Synergy:
    return Synergy(
        id="equipment_strength_boost",
        components=(FIELD_EQUIPMENT, FIELD_FOCUS),
        type=SynergyType.EFFICIENCY,
        description="Varied equipment enables progressive strength training",
        confidence=MEDIUM_CONFIDENCE,
        benefit="More exercise variety and load progression options",
        metadata={"equipment_count": len(extract_equipment(selections.equipment))},
    )


def _dumbbell_condition(selections: WorkoutSelections, _context: AnalysisContext) -> bool:
    return extract_focus(selections.focus) == "strength" and has_equipment(selections, "dumbbell")


def _dumbbell_synergy(selections: WorkoutSelections, _context: AnalysisContext) -> Synergy:
    return Synergy(
        id="dumbbell_strength",
        components=(FIELD_FOCUS, FIELD_EQUIPMENT),
        type=SynergyType.OPTIMIZATION,
        description="Strength focus with dumbbells creates excellent training synergy",
        confidence=HIGH_CONFIDENCE,
        benefit="Allows for unilateral training and full range of motion",
    )


def _foam_roller_condition(selections: WorkoutSelections, _context: AnalysisContext) -> bool:
    return (
        extract_focus(selections.focus) == "recovery"
        and len(extract_soreness(selections.soreness)) > 0
        and has_equipment(selections, "foam roller")
    )


def _foam_roller_synergy(selections: WorkoutSelections, _context: AnalysisContext) -> Synergy:
    return Synergy(
        id="recovery_foam_roller",
        components=(FIELD_FOCUS, FIELD_SORENESS, FIELD_EQUIPMENT),
        type=SynergyType.RECOVERY,
        description="Recovery focus with foam roller addresses soreness effectively",
        confidence=VERY_HIGH_CONFIDENCE,
        benefit="Perfect combination for active recovery and muscle maintenance",
        metadata={"sore_areas": sorted(extract_soreness(selections.soreness))},
    )


RULES = (
    SynergyRule(
        rule_id="equipment_strength_boost",
        components=(FIELD_EQUIPMENT, FIELD_FOCUS),
        condition=_equipment_strength_condition,
        generate=_equipment_strength_synergy,
    ),
    SynergyRule(
        rule_id="dumbbell_strength",
        components=(FIELD_FOCUS, FIELD_EQUIPMENT),
        condition=_dumbbell_condition,
        generate=_dumbbell_synergy,
    ),
    SynergyRule(
        rule_id="recovery_foam_roller",
        components=(FIELD_FOCUS, FIELD_SORENESS, FIELD_EQUIPMENT),
        condition=_foam_roller_condition,
        generate=_foam_roller_synergy,
    ),
)
