"""Rule registry with auto-discovery of module-level RULES tuples."""

from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import replace
from pathlib import Path

from selection_engine.rules.base import ConflictRule, SynergyRule

logger = logging.getLogger(__name__)

Rule = ConflictRule | SynergyRule


class RuleRegistry:
    """Discovers and manages all conflict and synergy rules.

    Auto-discovers rules by scanning the rules/ package tree for modules
    exposing a ``RULES`` tuple. New rules are added simply by appending a
    record to a rule module (or adding a new module) in the appropriate
    subdirectory, no manual registration needed.
    """

    def __init__(self) -> None:
        self._rules: dict[str, Rule] = {}

    def discover_rules(self) -> None:
        """Scan the rules package tree and register every rule record found."""
        import selection_engine.rules as rules_pkg

        rules_path = Path(rules_pkg.__file__).parent  # type: ignore[arg-type]
        self._scan_package(rules_pkg.__name__, str(rules_path))
        logger.debug("Discovered %d rules", len(self._rules))

    def _scan_package(self, package_name: str, package_path: str) -> None:
        """Recursively import all modules under a package and register rules."""
        for _importer, module_name, _is_pkg in pkgutil.walk_packages(
            [package_path], prefix=package_name + "."
        ):
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                logger.warning("Skipping rule module %s: import failed", module_name, exc_info=True)
                continue

            for rule in getattr(module, "RULES", ()):
                if isinstance(rule, (ConflictRule, SynergyRule)):
                    self.register(rule)

    def register(self, rule: Rule) -> None:
        """Register a rule record by its rule_id (replacing any previous one)."""
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> Rule | None:
        """Retrieve a rule by its rule_id."""
        return self._rules.get(rule_id)

    def disable(self, rule_id: str) -> None:
        """Disable a registered rule so the analyzers skip it."""
        rule = self._rules.get(rule_id)
        if rule is None:
            raise KeyError(rule_id)
        self._rules[rule_id] = replace(rule, enabled=False)

    def enable(self, rule_id: str) -> None:
        """Re-enable a previously disabled rule."""
        rule = self._rules.get(rule_id)
        if rule is None:
            raise KeyError(rule_id)
        self._rules[rule_id] = replace(rule, enabled=True)

    def conflict_rules(self) -> list[ConflictRule]:
        """All registered conflict rules, sorted by rule_id."""
        return sorted(
            (r for r in self._rules.values() if isinstance(r, ConflictRule)),
            key=lambda r: r.rule_id,
        )

    def synergy_rules(self) -> list[SynergyRule]:
        """All registered synergy rules, sorted by rule_id."""
        return sorted(
            (r for r in self._rules.values() if isinstance(r, SynergyRule)),
            key=lambda r: r.rule_id,
        )

    @property
    def rule_ids(self) -> list[str]:
        """List all registered rule IDs."""
        return list(self._rules.keys())


def default_registry() -> RuleRegistry:
    """A registry populated with every rule shipped in selection_engine.rules."""
    registry = RuleRegistry()
    registry.discover_rules()
    return registry
