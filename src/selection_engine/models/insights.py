"""Analysis outputs: conflicts, synergies, insights and the records that bundle them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from selection_engine.models.enums import (
    ConflictType,
    ImpactArea,
    ImpactType,
    InsightType,
    Severity,
    SynergyType,
)


@dataclass(frozen=True)
class Conflict:
    """A detected incompatibility between two or more selection fields.

    The id is the id of the rule that produced it, so conflict sets from two
    passes over different snapshots can be compared by id.
    """

    id: str
    components: tuple[str, ...]
    type: ConflictType
    severity: Severity
    description: str
    suggested_resolution: str
    confidence: float  # 0.0-1.0
    impact: ImpactArea
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Synergy:
    """A detected beneficial combination of selection fields."""

    id: str
    components: tuple[str, ...]
    type: SynergyType
    description: str
    confidence: float  # 0.0-1.0
    benefit: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Insight:
    """Unified, user-facing projection of a conflict, synergy or heuristic."""

    id: str
    type: InsightType
    message: str
    recommendation: str
    confidence: float
    actionable: bool
    related_fields: tuple[str, ...] = field(default_factory=tuple)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class InteractionAnalysis:
    """Result of a full cross-component analysis."""

    conflicts: tuple[Conflict, ...] = field(default_factory=tuple)
    synergies: tuple[Synergy, ...] = field(default_factory=tuple)
    recommendations: tuple[Insight, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ValidationResult:
    """Blocking vs. advisory classification of a snapshot's conflicts.

    ``conflicts`` carries the full list (including LOW severity) only when
    requested; otherwise it is empty.
    """

    is_valid: bool
    critical_issues: tuple[Conflict, ...] = field(default_factory=tuple)
    warnings: tuple[Conflict, ...] = field(default_factory=tuple)
    suggestions: tuple[Insight, ...] = field(default_factory=tuple)
    conflicts: tuple[Conflict, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ComponentImpact:
    """Effect of a what-if change on one conflict."""

    affected_component: str
    impact_type: ImpactType
    description: str
    confidence: float


@dataclass(frozen=True)
class ChangeAnalysis:
    """Result of analysing a hypothetical change to one selection field."""

    impacts: tuple[ComponentImpact, ...] = field(default_factory=tuple)
    recommendations: tuple[Insight, ...] = field(default_factory=tuple)
