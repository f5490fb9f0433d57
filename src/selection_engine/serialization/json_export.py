"""JSON export for engine result records.

Converts any result dataclass (conflicts, insights, validation results,
confidence results, strategy results...) into plain JSON-compatible data:
enums become lowercase names, sets become sorted lists, tuples become lists.

All functions are pure (no I/O).
"""

from __future__ import annotations

import dataclasses
import json
from enum import Enum
from typing import Any, Mapping


def to_dict(record: Any) -> Any:
    """Recursively convert a result record into JSON-compatible data."""
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return {f.name: to_dict(getattr(record, f.name)) for f in dataclasses.fields(record)}
    if isinstance(record, Enum):
        return record.name.lower()
    if isinstance(record, Mapping):
        return {str(to_dict(k)): to_dict(v) for k, v in record.items()}
    if isinstance(record, (set, frozenset)):
        return sorted(to_dict(v) for v in record)
    if isinstance(record, (list, tuple)):
        return [to_dict(v) for v in record]
    return record


def to_json_string(record: Any, indent: int = 2) -> str:
    """Serialize a result record to a JSON string."""
    return json.dumps(to_dict(record), indent=indent)
