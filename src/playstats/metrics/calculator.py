"""Pure functions deriving quality-of-experience metrics from a snapshot.

Every function takes a single or merged PlaybackStats and never fails on
empty data:
- Means return an integer number of milliseconds, or None (unset) when the
  denominator is zero.
- Ratios and per-playback counts return 0.0 when the denominator is zero,
  meaning "no evidence of the behavior".
"""

from __future__ import annotations

import math

from playstats.core.state import PlaybackState
from playstats.core.timing import mean_or_unset, ratio_or_zero
from playstats.core.types import TimeMs
from playstats.stats.models import PlaybackStats

# Totals


def total_join_time_ms(stats: PlaybackStats) -> int:
    """Total foreground joining time, including joins that turned out invalid."""
    return stats.duration_of(PlaybackState.JOINING_FOREGROUND)


def total_play_time_ms(stats: PlaybackStats) -> int:
    """Total time spent actively playing."""
    return stats.duration_of(PlaybackState.PLAYING)


def total_paused_time_ms(stats: PlaybackStats) -> int:
    """Total time spent paused, including buffering while paused."""
    return stats.duration_of(PlaybackState.PAUSED) + stats.duration_of(
        PlaybackState.PAUSED_BUFFERING
    )


def total_rebuffer_time_ms(stats: PlaybackStats) -> int:
    """Total rebuffering time.

    Excludes initial joining, buffering after a seek and buffering while paused.
    """
    return stats.duration_of(PlaybackState.BUFFERING)


def total_seek_time_ms(stats: PlaybackStats) -> int:
    """Total time from the start of seeks until playback was ready again."""
    return stats.duration_of(PlaybackState.SEEKING) + stats.duration_of(
        PlaybackState.SEEK_BUFFERING
    )


def total_wait_time_ms(stats: PlaybackStats) -> int:
    """Total time actively waiting for playback.

    Covers joining, rebuffering and seeking. Paused states are left out
    since waiting needs an intent to play.
    """
    return (
        stats.duration_of(PlaybackState.JOINING_FOREGROUND)
        + stats.duration_of(PlaybackState.BUFFERING)
        + stats.duration_of(PlaybackState.SEEKING)
        + stats.duration_of(PlaybackState.SEEK_BUFFERING)
    )


def total_play_and_wait_time_ms(stats: PlaybackStats) -> int:
    """Total time playing or actively waiting for playback."""
    return total_play_time_ms(stats) + total_wait_time_ms(stats)


def total_elapsed_time_ms(stats: PlaybackStats) -> int:
    """Total time covered by any playback state."""
    return stats.total_elapsed_time_ms


# Means


def mean_join_time_ms(stats: PlaybackStats) -> TimeMs:
    """Mean join time over playbacks with a valid join time."""
    return mean_or_unset(stats.total_valid_join_time_ms, stats.valid_join_time_count)


def mean_play_time_ms(stats: PlaybackStats) -> TimeMs:
    """Mean play time per foreground playback."""
    return mean_or_unset(total_play_time_ms(stats), stats.foreground_count)


def mean_paused_time_ms(stats: PlaybackStats) -> TimeMs:
    """Mean paused time per foreground playback."""
    return mean_or_unset(total_paused_time_ms(stats), stats.foreground_count)


def mean_rebuffer_time_ms(stats: PlaybackStats) -> TimeMs:
    """Mean rebuffer time per foreground playback."""
    return mean_or_unset(total_rebuffer_time_ms(stats), stats.foreground_count)


def mean_single_rebuffer_time_ms(stats: PlaybackStats) -> TimeMs:
    """Mean duration of a single rebuffer, counting buffering while paused."""
    return mean_or_unset(
        stats.duration_of(PlaybackState.BUFFERING)
        + stats.duration_of(PlaybackState.PAUSED_BUFFERING),
        stats.rebuffer_count,
    )


def mean_seek_time_ms(stats: PlaybackStats) -> TimeMs:
    """Mean seek time per foreground playback."""
    return mean_or_unset(total_seek_time_ms(stats), stats.foreground_count)


def mean_single_seek_time_ms(stats: PlaybackStats) -> TimeMs:
    """Mean time from the start of a single seek until playback was ready again."""
    return mean_or_unset(total_seek_time_ms(stats), stats.seek_count)


def mean_wait_time_ms(stats: PlaybackStats) -> TimeMs:
    """Mean active waiting time per foreground playback."""
    return mean_or_unset(total_wait_time_ms(stats), stats.foreground_count)


def mean_play_and_wait_time_ms(stats: PlaybackStats) -> TimeMs:
    """Mean play-or-wait time per foreground playback."""
    return mean_or_unset(total_play_and_wait_time_ms(stats), stats.foreground_count)


def mean_elapsed_time_ms(stats: PlaybackStats) -> TimeMs:
    """Mean elapsed time per playback, foreground or not."""
    return mean_or_unset(total_elapsed_time_ms(stats), stats.session_count)


# Per foreground playback ratios


def abandoned_before_ready_ratio(stats: PlaybackStats) -> float:
    """Ratio of foreground playbacks abandoned before they were ready.

    Playbacks that only ever joined in the background are counted as
    abandoned by the tracker and are taken out here.
    """
    background_only = stats.session_count - stats.foreground_count
    foreground_abandoned = stats.abandoned_before_ready_count - background_only
    return ratio_or_zero(foreground_abandoned, stats.foreground_count)


def ended_ratio(stats: PlaybackStats) -> float:
    """Ratio of foreground playbacks that reached the ended state."""
    return ratio_or_zero(stats.ended_count, stats.foreground_count)


def mean_pause_count(stats: PlaybackStats) -> float:
    """Mean number of pauses per foreground playback."""
    return ratio_or_zero(stats.pause_count, stats.foreground_count)


def mean_pause_while_buffering_count(stats: PlaybackStats) -> float:
    """Mean number of pauses during a rebuffer per foreground playback."""
    return ratio_or_zero(stats.pause_while_buffering_count, stats.foreground_count)


def mean_seek_count(stats: PlaybackStats) -> float:
    """Mean number of seeks per foreground playback."""
    return ratio_or_zero(stats.seek_count, stats.foreground_count)


def mean_rebuffer_count(stats: PlaybackStats) -> float:
    """Mean number of rebuffers per foreground playback."""
    return ratio_or_zero(stats.rebuffer_count, stats.foreground_count)


# Time ratios


def wait_time_ratio(stats: PlaybackStats) -> float:
    """Wait time over play-and-wait time.

    Equals join_time_ratio + rebuffer_time_ratio + seek_time_ratio.
    """
    return ratio_or_zero(total_wait_time_ms(stats), total_play_and_wait_time_ms(stats))


def join_time_ratio(stats: PlaybackStats) -> float:
    """Foreground join time over play-and-wait time."""
    return ratio_or_zero(total_join_time_ms(stats), total_play_and_wait_time_ms(stats))


def rebuffer_time_ratio(stats: PlaybackStats) -> float:
    """Rebuffer time over play-and-wait time."""
    return ratio_or_zero(total_rebuffer_time_ms(stats), total_play_and_wait_time_ms(stats))


def seek_time_ratio(stats: PlaybackStats) -> float:
    """Seek time over play-and-wait time."""
    return ratio_or_zero(total_seek_time_ms(stats), total_play_and_wait_time_ms(stats))


# Rates


def rebuffer_rate(stats: PlaybackStats) -> float:
    """Rebuffers per second of play time, or 0.0 without play time."""
    return ratio_or_zero(1000 * stats.rebuffer_count, total_play_time_ms(stats))


def mean_time_between_rebuffers(stats: PlaybackStats) -> float:
    """Mean play time between rebuffers, in seconds.

    Returns:
        1 / rebuffer_rate, or math.inf when the rate is zero.
    """
    rate = rebuffer_rate(stats)
    if rate == 0:
        return math.inf
    return 1 / rate
