"""Cross-component analyzers: conflicts, synergies and optimization insights."""

from selection_engine.analyzers.conflict_analyzer import ConflictAnalyzer, sort_conflicts
from selection_engine.analyzers.optimization_analyzer import OptimizationAnalyzer, sort_insights
from selection_engine.analyzers.synergy_analyzer import SynergyAnalyzer

__all__ = [
    "ConflictAnalyzer",
    "OptimizationAnalyzer",
    "SynergyAnalyzer",
    "sort_conflicts",
    "sort_insights",
]
