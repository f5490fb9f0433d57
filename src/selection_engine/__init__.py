"""Workout selection engine.

Analyzes a user's workout configuration before generation (conflicts,
synergies, optimization insights), maps requested durations onto supported
buckets, and scores generated plans against the user's profile.
"""

from selection_engine.confidence import ConfidenceService
from selection_engine.cross_component import CrossComponentService
from selection_engine.duration import DurationStrategy
from selection_engine.registry import RuleRegistry

__all__ = [
    "ConfidenceService",
    "CrossComponentService",
    "DurationStrategy",
    "RuleRegistry",
]
