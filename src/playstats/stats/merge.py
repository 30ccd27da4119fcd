"""Pure function for combining playback statistics.

Counters and durations are summed. Time values combine as min, sum or max
over defined values and stay unset when every input is unset. The state
history only makes sense for a single playback and is always dropped.
"""

from __future__ import annotations

import logging

from playstats.core.state import PLAYBACK_STATE_COUNT
from playstats.core.timing import max_defined, min_defined, sum_defined
from playstats.stats.models import PlaybackStats

logger = logging.getLogger(__name__)


def merge_playback_stats(*stats: PlaybackStats) -> PlaybackStats:
    """Combine snapshots of independent playbacks into one aggregate.

    Commutative and associative. Merging nothing yields the empty snapshot
    (session_count 0, all counters 0, all time values unset).

    Args:
        *stats: Snapshots to combine, single or already aggregated.

    Returns:
        Aggregate PlaybackStats with an empty state history.
    """
    durations = [0] * PLAYBACK_STATE_COUNT
    for item in stats:
        for i, duration in enumerate(item.state_durations_ms):
            durations[i] += duration

    merged = PlaybackStats(
        session_count=sum(item.session_count for item in stats),
        state_durations_ms=tuple(durations),
        state_history=(),
        first_reported_time_ms=min_defined(item.first_reported_time_ms for item in stats),
        foreground_count=sum(item.foreground_count for item in stats),
        abandoned_before_ready_count=sum(item.abandoned_before_ready_count for item in stats),
        ended_count=sum(item.ended_count for item in stats),
        background_joining_count=sum(item.background_joining_count for item in stats),
        total_valid_join_time_ms=sum_defined(item.total_valid_join_time_ms for item in stats),
        valid_join_time_count=sum(item.valid_join_time_count for item in stats),
        pause_count=sum(item.pause_count for item in stats),
        pause_while_buffering_count=sum(item.pause_while_buffering_count for item in stats),
        seek_count=sum(item.seek_count for item in stats),
        rebuffer_count=sum(item.rebuffer_count for item in stats),
        max_rebuffer_time_ms=max_defined(item.max_rebuffer_time_ms for item in stats),
        ad_playback_count=sum(item.ad_playback_count for item in stats),
    )
    logger.debug(
        "Merged %d snapshots covering %d sessions", len(stats), merged.session_count
    )
    return merged


EMPTY_PLAYBACK_STATS = merge_playback_stats()
"""Canonical "no data" snapshot."""
