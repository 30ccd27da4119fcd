"""playstats: Playback session statistics and quality-of-experience metrics.

Usage:
    from playstats import PlaybackState, build_playback_stats, merge_playback_stats
    from playstats.metrics import rebuffer_rate

    session = build_playback_stats(
        [
            (0, PlaybackState.JOINING_FOREGROUND),
            (400, PlaybackState.PLAYING),
            (5400, PlaybackState.BUFFERING),
            (5900, PlaybackState.PLAYING),
        ],
        now_ms=10_900,
    )
    session.state_at(5500)  # PlaybackState.BUFFERING

    overall = merge_playback_stats(session, other_session)
    rebuffer_rate(overall)
"""

__version__ = "0.1.0"

# Configuration
from playstats.config import PlaybackStatsSettings

# Core primitives
from playstats.core import (
    PLAYBACK_STATE_COUNT,
    TIME_UNSET,
    PlaybackState,
    TimeMs,
    is_unset,
)

# Metrics
from playstats.metrics import PlaybackMetricsReport

# Snapshots
from playstats.stats import (
    EMPTY_PLAYBACK_STATS,
    EventOrderError,
    Mergeable,
    PlaybackEventSource,
    PlaybackStats,
    PlaybackStatsTracker,
    Reducible,
    StateTransition,
    build_playback_stats,
    build_playback_stats_from_source,
    merge_playback_stats,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "PlaybackState",
    "PLAYBACK_STATE_COUNT",
    "TimeMs",
    "TIME_UNSET",
    "is_unset",
    # Snapshots
    "PlaybackStats",
    "StateTransition",
    "Mergeable",
    "Reducible",
    "PlaybackStatsTracker",
    "PlaybackEventSource",
    "EventOrderError",
    "build_playback_stats",
    "build_playback_stats_from_source",
    "merge_playback_stats",
    "EMPTY_PLAYBACK_STATS",
    # Metrics
    "PlaybackMetricsReport",
    # Config
    "PlaybackStatsSettings",
]
