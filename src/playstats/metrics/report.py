"""Pydantic model collecting every derived metric of a snapshot.

Usage:
    report = PlaybackMetricsReport.from_stats(stats)
    report.model_dump()  # plain dict for a renderer
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from playstats.core.state import PlaybackState
from playstats.metrics import calculator
from playstats.stats.models import PlaybackStats


class PlaybackMetricsReport(BaseModel):
    """Quality-of-experience metrics derived from one PlaybackStats.

    Mean fields are None when their denominator is zero. Ratio fields are
    0.0 in that case. `mean_time_between_rebuffers_s` is infinite when no
    rebuffer happened during play time.
    """

    model_config = ConfigDict(frozen=True)

    session_count: int = Field(..., ge=0, description="Playbacks covered by the report.")
    foreground_count: int = Field(..., ge=0, description="Playbacks that were in foreground.")
    state_durations_ms: dict[str, int] = Field(
        ..., description="Milliseconds per state, keyed by state name."
    )

    total_elapsed_time_ms: int = Field(..., ge=0)
    total_join_time_ms: int = Field(..., ge=0)
    total_play_time_ms: int = Field(..., ge=0)
    total_paused_time_ms: int = Field(..., ge=0)
    total_rebuffer_time_ms: int = Field(..., ge=0)
    total_seek_time_ms: int = Field(..., ge=0)
    total_wait_time_ms: int = Field(..., ge=0)
    total_play_and_wait_time_ms: int = Field(..., ge=0)

    mean_elapsed_time_ms: int | None = None
    mean_join_time_ms: int | None = None
    mean_play_time_ms: int | None = None
    mean_paused_time_ms: int | None = None
    mean_rebuffer_time_ms: int | None = None
    mean_single_rebuffer_time_ms: int | None = None
    mean_seek_time_ms: int | None = None
    mean_single_seek_time_ms: int | None = None
    mean_wait_time_ms: int | None = None
    mean_play_and_wait_time_ms: int | None = None
    max_rebuffer_time_ms: int | None = None

    abandoned_before_ready_ratio: float = 0.0
    ended_ratio: float = 0.0
    mean_pause_count: float = 0.0
    mean_pause_while_buffering_count: float = 0.0
    mean_seek_count: float = 0.0
    mean_rebuffer_count: float = 0.0
    wait_time_ratio: float = 0.0
    join_time_ratio: float = 0.0
    rebuffer_time_ratio: float = 0.0
    seek_time_ratio: float = 0.0
    rebuffer_rate: float = Field(0.0, description="Rebuffers per second of play time.")
    mean_time_between_rebuffers_s: float = Field(
        float("inf"), description="Seconds of play time between rebuffers."
    )

    @classmethod
    def from_stats(cls, stats: PlaybackStats) -> PlaybackMetricsReport:
        """Derive every metric from a single or merged snapshot."""
        return cls(
            session_count=stats.session_count,
            foreground_count=stats.foreground_count,
            state_durations_ms={
                state.name: stats.duration_of(state) for state in PlaybackState
            },
            total_elapsed_time_ms=calculator.total_elapsed_time_ms(stats),
            total_join_time_ms=calculator.total_join_time_ms(stats),
            total_play_time_ms=calculator.total_play_time_ms(stats),
            total_paused_time_ms=calculator.total_paused_time_ms(stats),
            total_rebuffer_time_ms=calculator.total_rebuffer_time_ms(stats),
            total_seek_time_ms=calculator.total_seek_time_ms(stats),
            total_wait_time_ms=calculator.total_wait_time_ms(stats),
            total_play_and_wait_time_ms=calculator.total_play_and_wait_time_ms(stats),
            mean_elapsed_time_ms=calculator.mean_elapsed_time_ms(stats),
            mean_join_time_ms=calculator.mean_join_time_ms(stats),
            mean_play_time_ms=calculator.mean_play_time_ms(stats),
            mean_paused_time_ms=calculator.mean_paused_time_ms(stats),
            mean_rebuffer_time_ms=calculator.mean_rebuffer_time_ms(stats),
            mean_single_rebuffer_time_ms=calculator.mean_single_rebuffer_time_ms(stats),
            mean_seek_time_ms=calculator.mean_seek_time_ms(stats),
            mean_single_seek_time_ms=calculator.mean_single_seek_time_ms(stats),
            mean_wait_time_ms=calculator.mean_wait_time_ms(stats),
            mean_play_and_wait_time_ms=calculator.mean_play_and_wait_time_ms(stats),
            max_rebuffer_time_ms=stats.max_rebuffer_time_ms,
            abandoned_before_ready_ratio=calculator.abandoned_before_ready_ratio(stats),
            ended_ratio=calculator.ended_ratio(stats),
            mean_pause_count=calculator.mean_pause_count(stats),
            mean_pause_while_buffering_count=calculator.mean_pause_while_buffering_count(stats),
            mean_seek_count=calculator.mean_seek_count(stats),
            mean_rebuffer_count=calculator.mean_rebuffer_count(stats),
            wait_time_ratio=calculator.wait_time_ratio(stats),
            join_time_ratio=calculator.join_time_ratio(stats),
            rebuffer_time_ratio=calculator.rebuffer_time_ratio(stats),
            seek_time_ratio=calculator.seek_time_ratio(stats),
            rebuffer_rate=calculator.rebuffer_rate(stats),
            mean_time_between_rebuffers_s=calculator.mean_time_between_rebuffers(stats),
        )
