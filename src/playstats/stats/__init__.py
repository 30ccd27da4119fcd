"""Playback snapshots: models, construction from events, and merging."""

from playstats.stats.builder import (
    EventOrderError,
    PlaybackStatsTracker,
    build_playback_stats,
    build_playback_stats_from_source,
    normalize_events,
)
from playstats.stats.merge import EMPTY_PLAYBACK_STATS, merge_playback_stats
from playstats.stats.models import Mergeable, PlaybackStats, Reducible, StateTransition
from playstats.stats.protocol import PlaybackEventSource

__all__ = [
    # Models
    "PlaybackStats",
    "StateTransition",
    "Mergeable",
    "Reducible",
    # Construction
    "PlaybackStatsTracker",
    "build_playback_stats",
    "build_playback_stats_from_source",
    "normalize_events",
    "EventOrderError",
    "PlaybackEventSource",
    # Merge
    "merge_playback_stats",
    "EMPTY_PLAYBACK_STATS",
]
