"""SynergyAnalyzer: evaluates synergy rules and answers field-pair queries."""

from __future__ import annotations

import logging
from typing import Iterable

from selection_engine.exceptions import EmptyRuleSetError
from selection_engine.models.context import AnalysisContext
from selection_engine.models.insights import Synergy
from selection_engine.models.selections import WorkoutSelections
from selection_engine.rules.base import SynergyRule

logger = logging.getLogger(__name__)


class SynergyAnalyzer:
    """Runs all enabled synergy rules and ranks matches by confidence."""

    def __init__(self, rules: Iterable[SynergyRule]) -> None:
        self._rules = tuple(rules)
        if not self._rules:
            raise EmptyRuleSetError("SynergyAnalyzer")

    @property
    def rules(self) -> tuple[SynergyRule, ...]:
        return self._rules

    def find_synergies(
        self, selections: WorkoutSelections, context: AnalysisContext
    ) -> tuple[Synergy, ...]:
        """Return all matching synergies, highest confidence first."""
        synergies: list[Synergy] = []
        for rule in self._rules:
            if not rule.enabled:
                continue
            try:
                if rule.condition(selections, context):
                    synergies.append(rule.generate(selections, context))
            except Exception:
                logger.warning("Synergy rule %s failed; treating as no match", rule.rule_id, exc_info=True)

        logger.debug("Found %d synergies from %d rules", len(synergies), len(self._rules))
        return tuple(sorted(synergies, key=lambda s: -s.confidence))

    def has_potential_synergy(self, field_a: str, field_b: str) -> bool:
        """True if any enabled rule declares both fields among its components."""
        return any(
            field_a in rule.components and field_b in rule.components
            for rule in self._rules
            if rule.enabled
        )

    def synergy_strength(
        self,
        field_a: str,
        field_b: str,
        selections: WorkoutSelections,
        context: AnalysisContext,
    ) -> float:
        """Mean confidence of realized synergies involving both fields (0.0 if none)."""
        matching = [
            s.confidence
            for s in self.find_synergies(selections, context)
            if field_a in s.components and field_b in s.components
        ]
        if not matching:
            return 0.0
        return sum(matching) / len(matching)
