"""Enumerations and tunable thresholds for the selection engine.

Every rule threshold lives here so the decision policy can be tuned in one
place. Comparators (``<=`` vs ``<``) are fixed by the rules themselves.
"""

from enum import IntEnum, auto


class Severity(IntEnum):
    """Conflict severity. A higher value is more severe.

    CRITICAL conflicts make a configuration invalid; HIGH and MEDIUM are
    advisory warnings; LOW is informational only.
    """

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4


class ConflictType(IntEnum):
    """What kind of problem a conflict describes."""

    SAFETY = auto()
    EFFICIENCY = auto()
    GOAL_ALIGNMENT = auto()
    USER_EXPERIENCE = auto()


class ImpactArea(IntEnum):
    """Which outcome a conflict degrades."""

    PERFORMANCE = auto()
    SAFETY = auto()
    EFFECTIVENESS = auto()


class SynergyType(IntEnum):
    """What kind of benefit a synergy provides."""

    PERFORMANCE = auto()
    EFFICIENCY = auto()
    RECOVERY = auto()
    OPTIMIZATION = auto()


class InsightType(IntEnum):
    """User-facing insight categories."""

    WARNING = auto()
    CRITICAL_WARNING = auto()
    OPTIMIZATION = auto()


class ImpactType(IntEnum):
    """Direction of a what-if change on the conflict set."""

    POSITIVE = auto()
    NEGATIVE = auto()
    NEUTRAL = auto()


class ConfidenceLevel(IntEnum):
    """Qualitative confidence bands, best first."""

    EXCELLENT = auto()
    GOOD = auto()
    FAIR = auto()
    POOR = auto()


class FitnessTier(IntEnum):
    """Normalized fitness level, least experienced first."""

    BEGINNER = 1
    NOVICE = 2
    INTERMEDIATE = 3
    ADVANCED = 4


class Complexity(IntEnum):
    """Structural complexity of a duration bucket."""

    MINIMAL = auto()
    SIMPLE = auto()
    STANDARD = auto()
    COMPREHENSIVE = auto()
    ADVANCED = auto()


class VariableRichness(IntEnum):
    """How many prompt variables a duration bucket can make use of."""

    CORE = auto()
    STANDARD = auto()
    ENHANCED = auto()
    FULL = auto()


# ---------------------------------------------------------------------------
# Field names of a WorkoutSelections snapshot
# ---------------------------------------------------------------------------
FIELD_DURATION = "duration"
FIELD_FOCUS = "focus"
FIELD_ENERGY = "energy"
FIELD_SORENESS = "soreness"
FIELD_AREAS = "areas"
FIELD_EQUIPMENT = "equipment"
FIELD_TRAINING_LOAD = "training_load"
FIELD_INJURY = "injury"

# Context-derived pseudo fields referenced by rules
FIELD_USER_PROFILE = "user_profile"
FIELD_TIME_OF_DAY = "time_of_day"
FIELD_USER_GOALS = "user_goals"

# ---------------------------------------------------------------------------
# Cross-component thresholds (energy on a 1-5 scale, durations in minutes)
# ---------------------------------------------------------------------------
LOW_ENERGY_THRESHOLD = 2  # energy <= this is "low"
HIGH_ENERGY_THRESHOLD = 4  # energy >= this is "high"

SHORT_DURATION_THRESHOLD = 30  # strength work below this is cramped
LONG_DURATION_THRESHOLD = 45  # duration > this is "long"
VERY_LONG_DURATION_THRESHOLD = 60  # duration > this is "very long"

MAX_EQUIPMENT_FOR_SHORT_DURATION = 4  # more pieces than this need time to rotate
MIN_EQUIPMENT_FOR_STRENGTH = 2

HIGH_SORENESS_THRESHOLD = 3  # sore-area count >= this is "high"

HIGH_WEEKLY_VOLUME_THRESHOLD = 300  # weekly training minutes
INTENSE_TRAINING_LOAD = "intense"

WARMUP_DURATION_MINUTES = 5
WARMUP_DURATION_MAX_MINUTES = 10

# High-intensity focus families
STRENGTH_POWER_FOCUSES = frozenset({"strength", "power"})
INTENSE_FOCUSES = frozenset({"strength", "power", "endurance"})
ADVANCED_FOCUSES = frozenset({"power", "endurance"})

# Rule confidence tiers
VERY_HIGH_CONFIDENCE = 0.95
HIGH_CONFIDENCE = 0.9
MEDIUM_HIGH_CONFIDENCE = 0.85
MEDIUM_CONFIDENCE = 0.8
MEDIUM_LOW_CONFIDENCE = 0.75
LOW_CONFIDENCE = 0.7
VERY_LOW_CONFIDENCE = 0.65
NEUTRAL_IMPACT_CONFIDENCE = 0.5

# ---------------------------------------------------------------------------
# Confidence scoring
# ---------------------------------------------------------------------------
DEFAULT_FACTOR_WEIGHTS = {
    "profile_match": 0.25,
    "safety_alignment": 0.20,
    "equipment_fit": 0.15,
    "goal_alignment": 0.20,
    "structure_quality": 0.20,
}
WEIGHT_SUM_TOLERANCE = 1e-6

EXCELLENT_CONFIDENCE_THRESHOLD = 0.8
GOOD_CONFIDENCE_THRESHOLD = 0.6
FAIR_CONFIDENCE_THRESHOLD = 0.4

MIN_FACTOR_SCORE = 0.1  # floor for every calculator; also the failure score
WEAK_FACTOR_THRESHOLD = 0.6  # factors below this get a specific recommendation
LONG_SESSION_MINUTES = 60
CONFIDENCE_VERSION = "1.0.0"

# ---------------------------------------------------------------------------
# Duration strategy (energy on a 1-10 scale)
# ---------------------------------------------------------------------------
SUPPORTED_DURATIONS = (5, 10, 15, 20, 30, 45)
DEFAULT_DURATION = 30
DEFAULT_ENERGY_LEVEL = 5

DURATION_LOW_ENERGY_THRESHOLD = 3
DURATION_HIGH_ENERGY_THRESHOLD = 8
LOW_ENERGY_MIN_DURATION = 10  # low energy never steps below this bucket
SORENESS_MIN_DURATION = 15  # high soreness never steps below this bucket
BEGINNER_MAX_DURATION = 30
SHORT_BUCKET_MAX = 10
LONG_BUCKET_MIN = 30
EQUIPMENT_VARIETY_COUNT = 3
LARGE_ADJUSTMENT_RATIO = 0.5
