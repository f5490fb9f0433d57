"""Custom exception hierarchy for the selection engine.

Only setup-time misconfiguration and unparseable input raise. Rule and
calculator failures during an analysis pass are recovered locally.
"""

from __future__ import annotations


class SelectionEngineError(Exception):
    """Base exception for all selection_engine errors."""


class ConfigurationError(SelectionEngineError):
    """Invalid service configuration (factor weights, thresholds, etc.)."""


class EmptyRuleSetError(ConfigurationError):
    """An analyzer was constructed without any rules to evaluate."""

    def __init__(self, analyzer: str) -> None:
        super().__init__(f"{analyzer} requires at least one rule")
        self.analyzer = analyzer


class InvalidSelectionError(SelectionEngineError):
    """A selection field name or value could not be interpreted."""

    def __init__(self, message: str, field_name: str | None = None) -> None:
        super().__init__(message)
        self.field_name = field_name
