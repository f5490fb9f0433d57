"""Data models for the selection engine."""

from selection_engine.models.confidence import (
    ConfidenceConfig,
    ConfidenceFactors,
    ConfidenceMetadata,
    ConfidenceResult,
    ConfidenceThresholds,
    FactorBreakdown,
)
from selection_engine.models.context import (
    AnalysisContext,
    Environment,
    SessionPreferences,
    SessionRecord,
    UserProfile,
)
from selection_engine.models.duration import (
    DurationConfig,
    DurationOptimization,
    ExerciseCount,
    PhaseAllocation,
    StrategyParams,
    StrategyResult,
    TimeAllocation,
)
from selection_engine.models.enums import (
    Complexity,
    ConfidenceLevel,
    ConflictType,
    FitnessTier,
    ImpactArea,
    ImpactType,
    InsightType,
    Severity,
    SynergyType,
    VariableRichness,
)
from selection_engine.models.insights import (
    ChangeAnalysis,
    ComponentImpact,
    Conflict,
    Insight,
    InteractionAnalysis,
    Synergy,
    ValidationResult,
)
from selection_engine.models.plan import Exercise, GeneratedPlan, PlanPhase
from selection_engine.models.selections import (
    AreaRating,
    AreaSelection,
    DurationSelection,
    EnergySelection,
    EquipmentSelection,
    FocusSelection,
    RatedAreas,
    TrainingLoad,
    WorkoutSelections,
)

__all__ = [
    "AnalysisContext",
    "AreaRating",
    "AreaSelection",
    "ChangeAnalysis",
    "Complexity",
    "ComponentImpact",
    "ConfidenceConfig",
    "ConfidenceFactors",
    "ConfidenceLevel",
    "ConfidenceMetadata",
    "ConfidenceResult",
    "ConfidenceThresholds",
    "Conflict",
    "ConflictType",
    "DurationConfig",
    "DurationOptimization",
    "DurationSelection",
    "EnergySelection",
    "Environment",
    "EquipmentSelection",
    "Exercise",
    "ExerciseCount",
    "FactorBreakdown",
    "FitnessTier",
    "FocusSelection",
    "GeneratedPlan",
    "ImpactArea",
    "ImpactType",
    "Insight",
    "InsightType",
    "InteractionAnalysis",
    "PhaseAllocation",
    "PlanPhase",
    "RatedAreas",
    "SessionPreferences",
    "SessionRecord",
    "Severity",
    "StrategyParams",
    "StrategyResult",
    "Synergy",
    "SynergyType",
    "TimeAllocation",
    "TrainingLoad",
    "UserProfile",
    "ValidationResult",
    "VariableRichness",
    "WorkoutSelections",
]
