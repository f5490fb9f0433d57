"""ConflictAnalyzer: evaluates every conflict rule against a snapshot."""

from __future__ import annotations

import logging
from typing import Iterable

from selection_engine.exceptions import EmptyRuleSetError
from selection_engine.models.context import AnalysisContext
from selection_engine.models.insights import Conflict
from selection_engine.models.selections import WorkoutSelections
from selection_engine.rules.base import ConflictRule

logger = logging.getLogger(__name__)


def sort_conflicts(conflicts: Iterable[Conflict]) -> tuple[Conflict, ...]:
    """Severity descending, then confidence descending (stable)."""
    return tuple(sorted(conflicts, key=lambda c: (-c.severity, -c.confidence)))


class ConflictAnalyzer:
    """Runs all enabled conflict rules and ranks the matches.

    Every rule is evaluated; several conflicts firing together is normal.
    A rule that raises is logged and treated as a non-match so one bad rule
    cannot abort the pass.
    """

    def __init__(self, rules: Iterable[ConflictRule]) -> None:
        self._rules = tuple(rules)
        if not self._rules:
            raise EmptyRuleSetError("ConflictAnalyzer")

    @property
    def rules(self) -> tuple[ConflictRule, ...]:
        return self._rules

    def detect_conflicts(
        self, selections: WorkoutSelections, context: AnalysisContext
    ) -> tuple[Conflict, ...]:
        """Return all matching conflicts, most severe first."""
        conflicts: list[Conflict] = []
        for rule in self._rules:
            if not rule.enabled:
                continue
            try:
                if rule.condition(selections, context):
                    conflicts.append(rule.generate(selections, context))
            except Exception:
                logger.warning("Conflict rule %s failed; treating as no match", rule.rule_id, exc_info=True)

        logger.debug("Detected %d conflicts from %d rules", len(conflicts), len(self._rules))
        return sort_conflicts(conflicts)
