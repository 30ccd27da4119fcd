"""Snapshot models: playback statistics and combining protocols.

A `PlaybackStats` snapshot is built once, either from one session's state
transitions or by merging other snapshots, and never mutated afterwards.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Protocol, Self, runtime_checkable

from playstats.core.state import PLAYBACK_STATE_COUNT, PlaybackState
from playstats.core.types import TimeMs


@runtime_checkable
class Mergeable(Protocol):
    """Two instances → one combined instance."""

    def __merge__(self, other: Self) -> Self: ...


@runtime_checkable
class Reducible(Protocol):
    """N instances → one instance (for aggregation)."""

    @classmethod
    def __reduce_many__(cls, items: list[Self]) -> Self: ...


@dataclass(frozen=True, slots=True)
class StateTransition:
    """Moment a playback state became active.

    Timestamps of different sessions have independent origins and are only
    comparable within one session.
    """

    realtime_ms: int
    state: PlaybackState


def _zero_durations() -> tuple[int, ...]:
    return (0,) * PLAYBACK_STATE_COUNT


@dataclass(frozen=True, slots=True)
class PlaybackStats:
    """Statistics about one playback, or an aggregate of many.

    Defaults describe the empty aggregate: no sessions, zero counters and
    every time value unset.

    Attributes:
        session_count: 1 for a single session, the number of merged sessions otherwise.
        state_durations_ms: Milliseconds spent in each state, indexed by `PlaybackState.index`.
        state_history: Ordered transitions; only kept for single sessions.
        first_reported_time_ms: Time of the earliest reported event.
        foreground_count: Sessions that were the visible playback at some point.
        abandoned_before_ready_count: Sessions given up before being ready to play.
        ended_count: Sessions that reached the ended state at least once.
        background_joining_count: Sessions pre-buffered in the background.
        total_valid_join_time_ms: Foreground join time summed over valid joins.
        valid_join_time_count: Number of valid joins in the total above.
        pause_count: Times playback was paused.
        pause_while_buffering_count: Times playback was paused while rebuffering.
        seek_count: Seeks, including seeks before a previous seek completed.
        rebuffer_count: Rebuffers, excluding joining and buffering after a seek.
        max_rebuffer_time_ms: Longest single rebuffer episode.
        ad_playback_count: Ad playbacks.
    """

    session_count: int = 0
    state_durations_ms: tuple[int, ...] = field(default_factory=_zero_durations)
    state_history: tuple[StateTransition, ...] = ()
    first_reported_time_ms: TimeMs = None
    foreground_count: int = 0
    abandoned_before_ready_count: int = 0
    ended_count: int = 0
    background_joining_count: int = 0
    total_valid_join_time_ms: TimeMs = None
    valid_join_time_count: int = 0
    pause_count: int = 0
    pause_while_buffering_count: int = 0
    seek_count: int = 0
    rebuffer_count: int = 0
    max_rebuffer_time_ms: TimeMs = None
    ad_playback_count: int = 0

    def __post_init__(self) -> None:
        # Accept any sequence but store tuples so snapshots stay hashable and immutable
        object.__setattr__(self, "state_durations_ms", tuple(self.state_durations_ms))
        object.__setattr__(self, "state_history", tuple(self.state_history))

        if len(self.state_durations_ms) != PLAYBACK_STATE_COUNT:
            raise ValueError(
                f"state_durations_ms must have {PLAYBACK_STATE_COUNT} entries, "
                f"got {len(self.state_durations_ms)}"
            )
        if any(duration < 0 for duration in self.state_durations_ms):
            raise ValueError("state_durations_ms entries must be non-negative")

        for name in (
            "session_count",
            "foreground_count",
            "abandoned_before_ready_count",
            "ended_count",
            "background_joining_count",
            "valid_join_time_count",
            "pause_count",
            "pause_while_buffering_count",
            "seek_count",
            "rebuffer_count",
            "ad_playback_count",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

        for name in ("first_reported_time_ms", "total_valid_join_time_ms", "max_rebuffer_time_ms"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be unset or non-negative, got {value}")

        if self.valid_join_time_count > self.foreground_count:
            raise ValueError(
                f"valid_join_time_count ({self.valid_join_time_count}) cannot exceed "
                f"foreground_count ({self.foreground_count})"
            )

    def duration_of(self, state: PlaybackState) -> int:
        """Total time spent in a state, in milliseconds (0 if never visited)."""
        return self.state_durations_ms[state.index]

    def state_at(self, realtime_ms: int) -> PlaybackState:
        """Return the state active at the given time.

        Args:
            realtime_ms: Time on the same clock as the session's events.

        Returns:
            State of the last transition at or before realtime_ms, or
            NOT_STARTED if realtime_ms precedes the first known transition.
        """
        position = bisect_right(
            self.state_history, realtime_ms, key=lambda transition: transition.realtime_ms
        )
        if position == 0:
            return PlaybackState.NOT_STARTED
        return self.state_history[position - 1].state

    @property
    def total_elapsed_time_ms(self) -> int:
        """Total time covered by any playback state, in milliseconds."""
        return sum(self.state_durations_ms)

    @property
    def is_aggregate(self) -> bool:
        """Check whether these stats combine other stats rather than one session."""
        return self.session_count != 1

    def __merge__(self, other: PlaybackStats) -> PlaybackStats:
        """Combine with another snapshot. History is dropped."""
        # Late import to avoid circular dependency
        from playstats.stats.merge import merge_playback_stats

        return merge_playback_stats(self, other)

    @classmethod
    def __reduce_many__(cls, items: list[PlaybackStats]) -> PlaybackStats:
        """Combine any number of snapshots. History is dropped."""
        from playstats.stats.merge import merge_playback_stats

        return merge_playback_stats(*items)
