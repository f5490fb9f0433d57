"""Field extractors: canonical scalar values from any selection representation.

A selection field may be a bare scalar, a rich selection object, or the
mapping form of that object decoded from JSON. Each family has exactly one
extraction function. Missing input never raises:

    - list families return an empty frozenset
    - numeric/enum families return None ("not specified")

Every extractor is idempotent: feeding it its own output returns that output.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from selection_engine.models.selections import (
    AreaListValue,
    AreaSelection,
    DurationSelection,
    DurationValue,
    EnergySelection,
    EnergyValue,
    EquipmentSelection,
    EquipmentValue,
    FocusSelection,
    FocusValue,
    RatedAreas,
    TrainingLoad,
    TrainingLoadValue,
)

_SEVERE = "severe"


def _positive_number(value: Any) -> float | int | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value if value > 0 else None


def _string_set(values: Iterable[Any]) -> frozenset[str]:
    return frozenset(str(v) for v in values if v is not None and str(v) != "")


def _first_key(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _rated_mapping_areas(data: Mapping[str, Any], severe_only: bool = False) -> frozenset[str]:
    """Areas of a {area: {"selected": bool, ...}} mapping."""
    areas = []
    for area, rating in data.items():
        if not isinstance(rating, Mapping) or rating.get("selected") is not True:
            continue
        if severe_only:
            meta = rating.get("metadata") or {}
            severity = rating.get("severity") or meta.get("severity")
            if severity != _SEVERE:
                continue
        areas.append(area)
    return _string_set(areas)


def extract_duration(value: DurationValue) -> float | int | None:
    """Total duration in minutes, or None when not specified."""
    if value is None:
        return None
    if isinstance(value, DurationSelection):
        return _positive_number(value.total_duration)
    if isinstance(value, Mapping):
        return _positive_number(_first_key(value, "totalDuration", "total_duration", "value"))
    return _positive_number(value)


def extract_warmup_included(value: DurationValue) -> bool:
    """Whether the duration selection explicitly includes a warm-up."""
    if isinstance(value, DurationSelection):
        return value.warm_up_included
    if isinstance(value, Mapping):
        warm_up = _first_key(value, "warmUp", "warm_up")
        if isinstance(warm_up, Mapping):
            return bool(warm_up.get("included"))
        return bool(_first_key(value, "warm_up_included", "warmUpIncluded"))
    return False


def extract_focus(value: FocusValue) -> str | None:
    """Workout focus (e.g. "strength"), or None when not specified."""
    if value is None:
        return None
    if isinstance(value, FocusSelection):
        focus: Any = value.focus
    elif isinstance(value, Mapping):
        focus = _first_key(value, "focus", "value")
    else:
        focus = value
    if not isinstance(focus, str) or not focus:
        return None
    return focus


def extract_energy(value: EnergyValue) -> int | None:
    """Energy level (1-5), or None when not specified."""
    if value is None:
        return None
    if isinstance(value, EnergySelection):
        return _positive_number(value.level)
    if isinstance(value, Mapping):
        return _positive_number(_first_key(value, "level", "value", "rating"))
    return _positive_number(value)


def extract_equipment(value: EquipmentValue) -> frozenset[str]:
    """Selected equipment pieces."""
    if value is None:
        return frozenset()
    if isinstance(value, EquipmentSelection):
        return _string_set(value.specific_equipment)
    if isinstance(value, Mapping):
        pieces = _first_key(value, "specificEquipment", "specific_equipment", "equipment")
        return _string_set(pieces) if isinstance(pieces, (list, tuple, set, frozenset)) else frozenset()
    if isinstance(value, str):
        return _string_set([value])
    return _string_set(value)


def extract_areas(value: AreaListValue) -> frozenset[str]:
    """Selected target areas."""
    if value is None:
        return frozenset()
    if isinstance(value, AreaSelection):
        return _string_set(value.selected_areas)
    if isinstance(value, RatedAreas):
        return _string_set(value.selected_areas)
    if isinstance(value, Mapping):
        areas = _first_key(value, "selectedAreas", "selected_areas", "areas")
        if isinstance(areas, (list, tuple, set, frozenset)):
            return _string_set(areas)
        return _rated_mapping_areas(value)
    if isinstance(value, str):
        return _string_set([value])
    return _string_set(value)


def extract_soreness(value: AreaListValue) -> frozenset[str]:
    """Sore areas; only areas marked selected count for rated selections."""
    if isinstance(value, Mapping):
        return _rated_mapping_areas(value)
    return extract_areas(value)


def extract_injury_regions(value: AreaListValue) -> frozenset[str]:
    """Injured body regions, excluding pain categories and the "no injuries" marker."""
    if isinstance(value, Mapping) and "categories" in value:
        regions = _string_set(value["categories"] or ())
    else:
        regions = extract_soreness(value)
    return frozenset(r for r in regions if not r.startswith("pain_") and r != "no_injuries")


def extract_severe_injury_regions(value: AreaListValue) -> frozenset[str]:
    """Injured regions whose severity is marked severe."""
    if isinstance(value, RatedAreas):
        regions = _string_set(r.area for r in value.ratings if r.selected and r.severity == _SEVERE)
    elif isinstance(value, Mapping):
        regions = _rated_mapping_areas(value, severe_only=True)
    else:
        return frozenset()
    return frozenset(r for r in regions if not r.startswith("pain_") and r != "no_injuries")


def extract_training_load(value: TrainingLoadValue) -> TrainingLoad | None:
    """Training load summary, or None when not specified."""
    if value is None:
        return None
    if isinstance(value, TrainingLoad):
        return value
    if isinstance(value, Mapping):
        volume = _first_key(value, "weeklyVolume", "weekly_volume") or 0.0
        intensity = _first_key(value, "averageIntensity", "average_intensity") or "moderate"
        activities = _first_key(value, "recentActivities", "recent_activities") or ()
        return TrainingLoad(
            weekly_volume=float(volume),
            average_intensity=str(intensity),
            recent_activities=tuple(str(a) for a in activities),
        )
    return None
