"""Derived quality-of-experience metrics.

Usage:
    from playstats.metrics import calculator, PlaybackMetricsReport

    calculator.rebuffer_rate(stats)
    PlaybackMetricsReport.from_stats(stats).model_dump()
"""

from playstats.metrics import calculator
from playstats.metrics.calculator import (
    abandoned_before_ready_ratio,
    ended_ratio,
    join_time_ratio,
    mean_elapsed_time_ms,
    mean_join_time_ms,
    mean_pause_count,
    mean_pause_while_buffering_count,
    mean_paused_time_ms,
    mean_play_and_wait_time_ms,
    mean_play_time_ms,
    mean_rebuffer_count,
    mean_rebuffer_time_ms,
    mean_seek_count,
    mean_seek_time_ms,
    mean_single_rebuffer_time_ms,
    mean_single_seek_time_ms,
    mean_time_between_rebuffers,
    mean_wait_time_ms,
    rebuffer_rate,
    rebuffer_time_ratio,
    seek_time_ratio,
    total_elapsed_time_ms,
    total_join_time_ms,
    total_paused_time_ms,
    total_play_and_wait_time_ms,
    total_play_time_ms,
    total_rebuffer_time_ms,
    total_seek_time_ms,
    total_wait_time_ms,
    wait_time_ratio,
)
from playstats.metrics.report import PlaybackMetricsReport

__all__ = [
    "calculator",
    "PlaybackMetricsReport",
    # Totals
    "total_elapsed_time_ms",
    "total_join_time_ms",
    "total_play_time_ms",
    "total_paused_time_ms",
    "total_rebuffer_time_ms",
    "total_seek_time_ms",
    "total_wait_time_ms",
    "total_play_and_wait_time_ms",
    # Means
    "mean_elapsed_time_ms",
    "mean_join_time_ms",
    "mean_play_time_ms",
    "mean_paused_time_ms",
    "mean_rebuffer_time_ms",
    "mean_single_rebuffer_time_ms",
    "mean_seek_time_ms",
    "mean_single_seek_time_ms",
    "mean_wait_time_ms",
    "mean_play_and_wait_time_ms",
    # Ratios
    "abandoned_before_ready_ratio",
    "ended_ratio",
    "mean_pause_count",
    "mean_pause_while_buffering_count",
    "mean_seek_count",
    "mean_rebuffer_count",
    "wait_time_ratio",
    "join_time_ratio",
    "rebuffer_time_ratio",
    "seek_time_ratio",
    # Rates
    "rebuffer_rate",
    "mean_time_between_rebuffers",
]
