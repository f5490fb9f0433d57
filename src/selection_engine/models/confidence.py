"""Confidence scoring records and configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from selection_engine.models.enums import (
    DEFAULT_FACTOR_WEIGHTS,
    EXCELLENT_CONFIDENCE_THRESHOLD,
    FAIR_CONFIDENCE_THRESHOLD,
    GOOD_CONFIDENCE_THRESHOLD,
    ConfidenceLevel,
)

FACTOR_NAMES = (
    "profile_match",
    "safety_alignment",
    "equipment_fit",
    "goal_alignment",
    "structure_quality",
)


@dataclass(frozen=True)
class ConfidenceFactors:
    """Individual 0-1 factor scores."""

    profile_match: float
    safety_alignment: float
    equipment_fit: float
    goal_alignment: float
    structure_quality: float

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in FACTOR_NAMES}


@dataclass(frozen=True)
class ConfidenceThresholds:
    """Lower bounds of each confidence band."""

    excellent: float = EXCELLENT_CONFIDENCE_THRESHOLD
    good: float = GOOD_CONFIDENCE_THRESHOLD
    fair: float = FAIR_CONFIDENCE_THRESHOLD


@dataclass(frozen=True)
class ConfidenceConfig:
    """Factor weights and level thresholds.

    Validated by ConfidenceService at construction time.
    """

    weights: dict[str, float] = field(default_factory=lambda: dict(DEFAULT_FACTOR_WEIGHTS))
    thresholds: ConfidenceThresholds = field(default_factory=ConfidenceThresholds)
    detailed_logging: bool = False


@dataclass(frozen=True)
class ConfidenceMetadata:
    """How a confidence score was produced."""

    calculation_time_ms: float
    factor_weights: dict[str, float]
    data_quality: float  # 0.0-1.0
    version: str


@dataclass(frozen=True)
class ConfidenceResult:
    """Overall confidence with its factor decomposition."""

    overall_score: float
    level: ConfidenceLevel
    factors: ConfidenceFactors
    recommendations: tuple[str, ...]
    metadata: ConfidenceMetadata


@dataclass(frozen=True)
class FactorBreakdown:
    """One factor's contribution to the overall score."""

    factor_name: str
    score: float
    weight: float
    weighted_score: float
    description: str
