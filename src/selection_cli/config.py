"""Environment-variable-based configuration for the selection CLI."""

from __future__ import annotations

import os
from pathlib import Path

LOG_LEVEL: str = os.environ.get("SELECTION_ENGINE_LOG_LEVEL", "INFO").upper()
JSON_INDENT: int = int(os.environ.get("SELECTION_ENGINE_JSON_INDENT", "2"))
DEFAULT_PROFILE_PATH: Path | None = (
    Path(os.environ["SELECTION_ENGINE_PROFILE"]).expanduser()
    if os.environ.get("SELECTION_ENGINE_PROFILE")
    else None
)
