"""Rule records for cross-component analysis.

A rule is plain data: an id, the selection fields it reasons about, a
``condition`` predicate and a ``generate`` function producing the Conflict or
Synergy when the condition holds. Rule modules expose a module-level
``RULES`` tuple; the RuleRegistry discovers them automatically.

Conditions must return False (never raise) when a field they need is
missing. The extractors guarantee this as long as rules only read selections
through them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from selection_engine.models.context import AnalysisContext
from selection_engine.models.insights import Conflict, Synergy
from selection_engine.models.selections import WorkoutSelections

Condition = Callable[[WorkoutSelections, AnalysisContext], bool]


@dataclass(frozen=True)
class ConflictRule:
    """Declarative conflict rule.

    Attributes:
        rule_id: unique identifier; also the id of the generated Conflict.
        components: selection fields the rule reasons about.
        condition: predicate over (selections, context).
        generate: builds the Conflict when the condition holds.
        enabled: disabled rules are skipped by the analyzers.
    """

    rule_id: str
    components: tuple[str, ...]
    condition: Condition
    generate: Callable[[WorkoutSelections, AnalysisContext], Conflict]
    enabled: bool = True


@dataclass(frozen=True)
class SynergyRule:
    """Declarative synergy rule. Same contract as ConflictRule."""

    rule_id: str
    components: tuple[str, ...]
    condition: Condition
    generate: Callable[[WorkoutSelections, AnalysisContext], Synergy]
    enabled: bool = True
