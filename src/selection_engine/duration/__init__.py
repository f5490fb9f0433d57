"""Duration buckets and the strategy that selects between them."""

from selection_engine.duration.configs import (
    DURATION_CONFIGS,
    get_duration_config,
    nearest_supported_duration,
)
from selection_engine.duration.strategy import DurationStrategy

__all__ = [
    "DURATION_CONFIGS",
    "DurationStrategy",
    "get_duration_config",
    "nearest_supported_duration",
]
