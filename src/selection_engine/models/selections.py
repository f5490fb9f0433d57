"""Workout selection snapshot: the configuration a user builds before generation.

Each field may hold a bare scalar or a richer selection object carrying the
same semantic value plus display metadata. The extractors module turns any
representation into the canonical scalar.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Iterable, Mapping, Union


@dataclass(frozen=True)
class DurationSelection:
    """Detailed duration selection with optional warm-up / cool-down breakdown."""

    total_duration: float
    label: str = ""
    warm_up_included: bool = False
    warm_up_minutes: float = 0.0
    cool_down_included: bool = False
    cool_down_minutes: float = 0.0


@dataclass(frozen=True)
class FocusSelection:
    """Detailed focus selection (e.g. strength with a straight-sets format)."""

    focus: str
    label: str = ""
    format: str | None = None
    intensity: str | None = None


@dataclass(frozen=True)
class EnergySelection:
    """Energy level on a 1-5 scale with its display label."""

    level: int
    label: str = ""


@dataclass(frozen=True)
class AreaRating:
    """One body area inside a rated-areas selection (soreness or injury)."""

    area: str
    selected: bool = True
    rating: int | None = None  # 1-5
    label: str = ""
    severity: str | None = None  # "mild" | "moderate" | "severe"


@dataclass(frozen=True)
class RatedAreas:
    """Category-rating selection: a set of areas, each selectable and rated."""

    ratings: tuple[AreaRating, ...] = field(default_factory=tuple)

    @property
    def selected_areas(self) -> tuple[str, ...]:
        return tuple(r.area for r in self.ratings if r.selected)


@dataclass(frozen=True)
class AreaSelection:
    """Hierarchical target-area selection."""

    selected_areas: tuple[str, ...] = field(default_factory=tuple)
    label: str = ""
    hierarchy: tuple[tuple[str, str], ...] = field(default_factory=tuple)  # (parent, child)


@dataclass(frozen=True)
class EquipmentSelection:
    """Progressive equipment selection: location, contexts, specific pieces."""

    specific_equipment: tuple[str, ...] = field(default_factory=tuple)
    location: str | None = None
    contexts: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TrainingLoad:
    """Recent training load summary."""

    weekly_volume: float = 0.0  # minutes per week
    average_intensity: str = "moderate"  # "light" | "moderate" | "intense"
    recent_activities: tuple[str, ...] = field(default_factory=tuple)


DurationValue = Union[float, int, DurationSelection, Mapping[str, Any], None]
FocusValue = Union[str, FocusSelection, Mapping[str, Any], None]
EnergyValue = Union[int, EnergySelection, Mapping[str, Any], None]
AreaListValue = Union[Iterable[str], AreaSelection, RatedAreas, Mapping[str, Any], None]
EquipmentValue = Union[Iterable[str], EquipmentSelection, Mapping[str, Any], None]
TrainingLoadValue = Union[TrainingLoad, Mapping[str, Any], None]


@dataclass(frozen=True)
class WorkoutSelections:
    """Immutable snapshot of a user's workout configuration.

    This is the sole selection input to the analyzers. Every field is
    optional; a missing field makes the rules that need it non-matching.
    """

    duration: DurationValue = None
    focus: FocusValue = None
    energy: EnergyValue = None
    soreness: AreaListValue = None
    areas: AreaListValue = None
    equipment: EquipmentValue = None
    training_load: TrainingLoadValue = None
    injury: AreaListValue = None

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))
