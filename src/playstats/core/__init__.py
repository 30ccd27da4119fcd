"""Core functionalities: the state model and optional time values.

Architecture Note:
    core/ contains pure, stateless building blocks with no runtime state.
    Snapshots and their construction live in stats/, derived values in metrics/.
"""

from playstats.core.state import (
    ABANDONING_STATES,
    FOREGROUND_STATES,
    JOIN_INTERRUPTING_STATES,
    PLAYBACK_STATE_COUNT,
    READY_STATES,
    REBUFFER_STATES,
    PlaybackState,
    state_from_value,
)
from playstats.core.timing import (
    max_defined,
    mean_or_unset,
    min_defined,
    ratio_or_zero,
    sum_defined,
)
from playstats.core.types import TIME_UNSET, TimeMs, is_unset

__all__ = [
    # Types
    "TimeMs",
    "TIME_UNSET",
    "is_unset",
    # State
    "PlaybackState",
    "PLAYBACK_STATE_COUNT",
    "READY_STATES",
    "FOREGROUND_STATES",
    "ABANDONING_STATES",
    "JOIN_INTERRUPTING_STATES",
    "REBUFFER_STATES",
    "state_from_value",
    # Timing
    "min_defined",
    "max_defined",
    "sum_defined",
    "mean_or_unset",
    "ratio_or_zero",
]
