"""Serialization module: JSON documents in, JSON-compatible results out."""

from selection_engine.serialization.inputs import (
    context_from_dict,
    plan_from_dict,
    profile_from_dict,
    selection_field_name,
    selections_from_dict,
    strategy_params_from_dict,
)
from selection_engine.serialization.json_export import to_dict, to_json_string

__all__ = [
    "context_from_dict",
    "plan_from_dict",
    "profile_from_dict",
    "selection_field_name",
    "selections_from_dict",
    "strategy_params_from_dict",
    "to_dict",
    "to_json_string",
]
