"""Pure functions mapping decoded JSON documents to engine models.

Keys are accepted in snake_case or camelCase. Selection keys may also carry
the ``customization_`` prefix used by the selection UI. No I/O.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

from selection_engine.exceptions import InvalidSelectionError
from selection_engine.extractors import (
    extract_duration,
    extract_energy,
    extract_focus,
    extract_training_load,
    extract_warmup_included,
)
from selection_engine.models.context import (
    AnalysisContext,
    Environment,
    SessionPreferences,
    SessionRecord,
    UserProfile,
)
from selection_engine.models.duration import StrategyParams
from selection_engine.models.enums import DEFAULT_ENERGY_LEVEL
from selection_engine.models.plan import Exercise, GeneratedPlan, PlanPhase
from selection_engine.models.selections import (
    AreaRating,
    AreaSelection,
    DurationSelection,
    EnergySelection,
    EquipmentSelection,
    FocusSelection,
    RatedAreas,
    WorkoutSelections,
)

_SELECTION_PREFIX = "customization_"
_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def snake_case(key: str) -> str:
    """``trainingLoad`` → ``training_load``; snake_case keys pass through."""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def selection_field_name(key: str) -> str:
    """Canonical WorkoutSelections field for a JSON key.

    Raises:
        InvalidSelectionError: If the key names no selection field.
    """
    name = snake_case(key)
    if name.startswith(_SELECTION_PREFIX):
        name = name[len(_SELECTION_PREFIX):]
    if name not in WorkoutSelections.field_names():
        raise InvalidSelectionError(f"Unknown selection field: {key!r}", key)
    return name


def selections_from_dict(data: Mapping[str, Any]) -> WorkoutSelections:
    """Build a WorkoutSelections snapshot from a decoded JSON object.

    Raises:
        InvalidSelectionError: On an unknown field or a value whose shape
            does not fit its field.
    """
    if not isinstance(data, Mapping):
        raise InvalidSelectionError("Selections must be a JSON object")

    values: dict[str, Any] = {}
    for raw_key, raw_value in data.items():
        name = selection_field_name(raw_key)
        if raw_value is None:
            continue
        values[name] = _PARSERS[name](raw_value, name)
    return WorkoutSelections(**values)


def profile_from_dict(data: Mapping[str, Any] | None) -> UserProfile:
    """Build a UserProfile; missing keys take the model defaults."""
    if not data:
        return UserProfile()
    d = _normalized(data)
    goals = _strings(d.get("goals"))
    if not goals and d.get("primary_goal"):
        goals = (str(d["primary_goal"]),)
    return UserProfile(
        fitness_level=str(d.get("fitness_level") or "some experience"),
        goals=goals,
        workout_styles=_strings(d.get("workout_styles") or d.get("preferred_activities")),
        intensity_preference=d.get("intensity_preference"),
        available_equipment=_strings(d.get("available_equipment")),
        injuries=_strings(d.get("injuries")),
        mobility_limitations=_strings(d.get("mobility_limitations")),
    )


def context_from_dict(data: Mapping[str, Any] | None) -> AnalysisContext:
    """Build an AnalysisContext; every section is optional."""
    if not data:
        return AnalysisContext()
    d = _normalized(data)

    history = tuple(
        SessionRecord(
            focus=s.get("focus"),
            duration_min=float(s.get("duration_min") or s.get("duration") or 0.0),
            completed=bool(s.get("completed", True)),
            rating=s.get("rating"),
        )
        for s in (_normalized(item) for item in d.get("session_history") or ())
    )
    prefs = _normalized(d.get("preferences") or {})
    env = _normalized(d.get("environment") or d.get("environmental_factors") or {})

    return AnalysisContext(
        user_profile=profile_from_dict(d.get("user_profile")),
        session_history=history,
        preferences=SessionPreferences(
            ai_assistance_level=str(prefs.get("ai_assistance_level") or "moderate"),
            show_learning_tips=bool(prefs.get("show_learning_tips", False)),
        ),
        environment=Environment(
            time_of_day=env.get("time_of_day"),
            location=env.get("location"),
        ),
        soreness_areas=_strings(d.get("soreness_areas")),
        workout_type=d.get("workout_type"),
    )


def plan_from_dict(data: Mapping[str, Any]) -> GeneratedPlan:
    """Build a GeneratedPlan; durations are read in seconds."""
    d = _normalized(data)
    return GeneratedPlan(
        title=str(d.get("title") or ""),
        description=str(d.get("description") or ""),
        total_duration_s=_number(d.get("total_duration_s", d.get("total_duration")), "total_duration"),
        difficulty=d.get("difficulty"),
        equipment=_strings(d.get("equipment")),
        warmup=_phase_from_dict(d.get("warmup")),
        main=_phase_from_dict(d.get("main") or d.get("main_workout")),
        cooldown=_phase_from_dict(d.get("cooldown")),
        reasoning=str(d.get("reasoning") or ""),
        tags=_strings(d.get("tags")),
    )


def strategy_params_from_dict(data: Mapping[str, Any]) -> StrategyParams:
    """Build StrategyParams for the duration strategy.

    Raises:
        InvalidSelectionError: If the duration is missing or not positive.
    """
    d = _normalized(data)
    duration = extract_duration(d.get("duration"))
    if duration is None:
        raise InvalidSelectionError("A positive duration is required", "duration")
    return StrategyParams(
        duration=duration,
        fitness_level=str(d.get("fitness_level") or "some experience"),
        focus=extract_focus(d.get("focus")),
        energy_level=int(d.get("energy_level") or DEFAULT_ENERGY_LEVEL),
        soreness_areas=_strings(d.get("soreness_areas")),
        equipment=_strings(d.get("equipment")),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _normalized(data: Any) -> dict[str, Any]:
    if not isinstance(data, Mapping):
        return {}
    return {snake_case(k): v for k, v in data.items()}


def _strings(values: Any) -> tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        return (values,)
    if isinstance(values, Iterable):
        return tuple(str(v) for v in values if v is not None)
    return (str(values),)


def _number(value: Any, name: str) -> float:
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidSelectionError(f"{name} must be a number, got {value!r}", name) from exc


def _phase_from_dict(data: Any) -> PlanPhase:
    if not isinstance(data, Mapping):
        return PlanPhase()
    d = _normalized(data)
    return PlanPhase(
        name=str(d.get("name") or ""),
        duration_s=_number(d.get("duration_s", d.get("duration")), "phase duration"),
        exercises=tuple(_exercise_from_dict(e) for e in d.get("exercises") or ()),
    )


def _exercise_from_dict(data: Any) -> Exercise:
    d = _normalized(data)
    reps = d.get("reps")
    duration = d.get("duration_s", d.get("duration"))
    return Exercise(
        name=str(d.get("name") or ""),
        sets=int(d.get("sets") or 1),
        reps=int(reps) if isinstance(reps, (int, float)) else None,
        duration_s=_number(duration, "exercise duration") if duration is not None else None,
        equipment=_strings(d.get("equipment")),
        intensity=d.get("intensity"),
        target_areas=_strings(d.get("target_areas")),
    )


def _parse_duration(value: Any, name: str):
    if isinstance(value, Mapping):
        total = extract_duration(value)
        if total is None:
            raise InvalidSelectionError("Duration object needs a positive totalDuration", name)
        d = _normalized(value)
        warm_up = _normalized(d.get("warm_up") or {})
        cool_down = _normalized(d.get("cool_down") or {})
        return DurationSelection(
            total_duration=total,
            label=str(d.get("label") or ""),
            warm_up_included=extract_warmup_included(value),
            warm_up_minutes=float(warm_up.get("duration") or 0.0),
            cool_down_included=bool(cool_down.get("included")),
            cool_down_minutes=float(cool_down.get("duration") or 0.0),
        )
    return _scalar(value, name, (int, float))


def _parse_focus(value: Any, name: str):
    if isinstance(value, Mapping):
        focus = extract_focus(value)
        if focus is None:
            raise InvalidSelectionError("Focus object needs a focus value", name)
        d = _normalized(value)
        return FocusSelection(
            focus=focus,
            label=str(d.get("label") or ""),
            format=d.get("format"),
            intensity=d.get("intensity"),
        )
    return _scalar(value, name, (str,))


def _parse_energy(value: Any, name: str):
    if isinstance(value, Mapping):
        level = extract_energy(value)
        if level is None:
            raise InvalidSelectionError("Energy object needs a positive level", name)
        return EnergySelection(level=int(level), label=str(value.get("label") or ""))
    return _scalar(value, name, (int,))


def _parse_rated(value: Mapping[str, Any]) -> RatedAreas:
    ratings = []
    for area, rating in value.items():
        if not isinstance(rating, Mapping):
            continue
        meta = rating.get("metadata") or {}
        ratings.append(
            AreaRating(
                area=str(area),
                selected=rating.get("selected") is True,
                rating=rating.get("rating"),
                label=str(rating.get("label") or ""),
                severity=rating.get("severity") or meta.get("severity"),
            )
        )
    return RatedAreas(ratings=tuple(ratings))


def _parse_area_list(value: Any, name: str):
    if isinstance(value, Mapping):
        d = _normalized(value)
        if "selected_areas" in d:
            return AreaSelection(
                selected_areas=_strings(d["selected_areas"]),
                label=str(d.get("label") or ""),
            )
        if "categories" in d:
            return _strings(d["categories"])
        return _parse_rated(value)
    if isinstance(value, (list, tuple, str)):
        return _strings(value)
    raise InvalidSelectionError(f"{name} must be a list or an object, got {value!r}", name)


def _parse_equipment(value: Any, name: str):
    if isinstance(value, Mapping):
        d = _normalized(value)
        return EquipmentSelection(
            specific_equipment=_strings(d.get("specific_equipment") or d.get("equipment")),
            location=d.get("location"),
            contexts=_strings(d.get("contexts")),
        )
    if isinstance(value, (list, tuple, str)):
        return _strings(value)
    raise InvalidSelectionError(f"{name} must be a list or an object, got {value!r}", name)


def _parse_training_load(value: Any, name: str):
    load = extract_training_load(value) if isinstance(value, Mapping) else None
    if load is None:
        raise InvalidSelectionError(f"{name} must be an object, got {value!r}", name)
    return load


def _scalar(value: Any, name: str, types: tuple[type, ...]):
    if isinstance(value, bool) or not isinstance(value, types):
        raise InvalidSelectionError(f"Unexpected value for {name}: {value!r}", name)
    return value


_PARSERS = {
    "duration": _parse_duration,
    "focus": _parse_focus,
    "energy": _parse_energy,
    "soreness": _parse_area_list,
    "areas": _parse_area_list,
    "equipment": _parse_equipment,
    "training_load": _parse_training_load,
    "injury": _parse_area_list,
}
