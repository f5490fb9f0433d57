"""Confidence scoring: how well a generated plan fits the user."""

from selection_engine.confidence.service import ConfidenceService, validate_config

__all__ = ["ConfidenceService", "validate_config"]
