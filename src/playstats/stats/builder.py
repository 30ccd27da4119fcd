"""Building a playback snapshot from one session's state transitions.

Usage:
    stats = build_playback_stats(
        [
            (0, PlaybackState.JOINING_FOREGROUND),
            (300, PlaybackState.PLAYING),
            (4300, PlaybackState.BUFFERING),
            (4800, PlaybackState.PLAYING),
        ],
        now_ms=9800,
    )

    # Or incrementally
    tracker = PlaybackStatsTracker()
    tracker.record(0, PlaybackState.JOINING_FOREGROUND)
    tracker.record(300, PlaybackState.PLAYING)
    stats = tracker.build(now_ms=1000)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from playstats.config import PlaybackStatsSettings
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
from playstats.core.types import TimeMs
from playstats.stats.models import PlaybackStats, StateTransition
from playstats.stats.protocol import PlaybackEventSource

logger = logging.getLogger(__name__)

_PAUSE_FROM_STATES = frozenset({PlaybackState.PLAYING, PlaybackState.BUFFERING})
_PAUSE_STATES = frozenset({PlaybackState.PAUSED, PlaybackState.PAUSED_BUFFERING})


class EventOrderError(ValueError):
    """Raised when transitions of a session go back in time."""

    pass


EventInput = StateTransition | tuple[int, PlaybackState | int]


def normalize_events(raw: Iterable[Any]) -> list[StateTransition]:
    """Convert supported event formats to StateTransitions.

    Supports:
    - StateTransition: Direct passthrough
    - (realtime_ms, PlaybackState): Tuple with a state
    - (realtime_ms, int): Tuple with a state code

    Args:
        raw: Events in any supported format.

    Returns:
        List of StateTransition in input order.

    Raises:
        TypeError: If an event is not a recognized format.
        ValueError: If a state code is unknown.
    """
    events: list[StateTransition] = []
    for item in raw:
        if isinstance(item, StateTransition):
            events.append(item)
            continue
        if not isinstance(item, tuple) or len(item) != 2:
            raise TypeError(f"Expected (realtime_ms, state) tuple, got {item!r}")
        realtime_ms, state = item
        if isinstance(realtime_ms, bool) or not isinstance(realtime_ms, int):
            raise TypeError(f"Expected integer realtime_ms, got {type(realtime_ms)}")
        events.append(StateTransition(realtime_ms=realtime_ms, state=state_from_value(state)))
    return events


class PlaybackStatsTracker:
    """Accumulates one session's transitions and builds snapshots from them.

    Mutable only while recording; every `build` returns an independent,
    immutable PlaybackStats, so an ongoing session can be snapshotted
    repeatedly.
    """

    def __init__(
        self,
        *,
        is_ad: bool = False,
        settings: PlaybackStatsSettings | None = None,
    ) -> None:
        self._settings = settings if settings is not None else PlaybackStatsSettings()
        self._is_ad = is_ad

        self._history: list[StateTransition] = []
        self._durations = [0] * PLAYBACK_STATE_COUNT
        self._first_time_ms: TimeMs = None
        self._last: StateTransition | None = None

        self._is_foreground = False
        self._has_been_ready = False
        self._has_ended = False
        self._has_background_joined = False

        self._join_start_ms: TimeMs = None
        self._join_resolved = False
        self._join_foreground_ms = 0
        self._join_time_ms: TimeMs = None

        self._pause_count = 0
        self._pause_while_buffering_count = 0
        self._seek_count = 0
        self._rebuffer_count = 0
        self._rebuffer_start_ms: TimeMs = None
        self._max_rebuffer_time_ms: TimeMs = None

    @property
    def current_state(self) -> PlaybackState:
        """State of the most recent accepted transition."""
        return self._last.state if self._last is not None else PlaybackState.NOT_STARTED

    def record(self, realtime_ms: int, state: PlaybackState | int) -> bool:
        """Record that a state became active.

        Args:
            realtime_ms: When the state became active.
            state: The new state, or its integer code.

        Returns:
            True if recorded, False if dropped as out of order (only when
            strict_ordering is disabled).

        Raises:
            EventOrderError: If realtime_ms is before the previous transition
                and strict_ordering is enabled.
            ValueError: If state is not a known state code.
        """
        state = state_from_value(state)
        if self._last is not None and realtime_ms < self._last.realtime_ms:
            message = (
                f"Transition to {state.display_name} at {realtime_ms} ms is before "
                f"previous transition at {self._last.realtime_ms} ms"
            )
            if self._settings.strict_ordering:
                raise EventOrderError(message)
            logger.warning("Dropping out-of-order event: %s", message)
            return False

        previous = self._last
        if previous is None:
            self._first_time_ms = realtime_ms
        else:
            elapsed_ms = realtime_ms - previous.realtime_ms
            self._durations[previous.state.index] += elapsed_ms
            if previous.state is PlaybackState.JOINING_FOREGROUND and self._is_joining:
                self._join_foreground_ms += elapsed_ms

        previous_state = previous.state if previous is not None else PlaybackState.NOT_STARTED
        self._update_counters(realtime_ms, previous_state, state)

        transition = StateTransition(realtime_ms=realtime_ms, state=state)
        if self._settings.keep_history:
            self._history.append(transition)
        self._last = transition
        return True

    def _update_counters(
        self, realtime_ms: int, previous: PlaybackState, state: PlaybackState
    ) -> None:
        if state in FOREGROUND_STATES:
            self._is_foreground = True
        if state is PlaybackState.JOINING_BACKGROUND:
            self._has_background_joined = True
        if state is PlaybackState.ENDED:
            self._has_ended = True

        if state is PlaybackState.SEEKING:
            self._seek_count += 1

        if previous in _PAUSE_FROM_STATES and state in _PAUSE_STATES:
            self._pause_count += 1
            if previous is PlaybackState.BUFFERING and state is PlaybackState.PAUSED_BUFFERING:
                self._pause_while_buffering_count += 1

        # Rebuffer episodes span BUFFERING and PAUSED_BUFFERING
        if self._rebuffer_start_ms is not None and state not in REBUFFER_STATES:
            self._close_rebuffer(realtime_ms)
        if state is PlaybackState.BUFFERING and previous in READY_STATES:
            self._rebuffer_count += 1
            self._rebuffer_start_ms = realtime_ms

        # Only the initial foreground join is measured, counting foreground joining time only
        if (
            state is PlaybackState.JOINING_FOREGROUND
            and self._join_start_ms is None
            and not self._has_been_ready
        ):
            self._join_start_ms = realtime_ms
        elif self._join_start_ms is not None and not self._join_resolved:
            if state in JOIN_INTERRUPTING_STATES:
                self._join_resolved = True
            elif state in READY_STATES:
                self._join_time_ms = self._join_foreground_ms
                self._join_resolved = True

        if state in READY_STATES:
            self._has_been_ready = True

    @property
    def _is_joining(self) -> bool:
        return self._join_start_ms is not None and not self._join_resolved

    def _close_rebuffer(self, realtime_ms: int) -> None:
        assert self._rebuffer_start_ms is not None
        episode_ms = realtime_ms - self._rebuffer_start_ms
        if self._max_rebuffer_time_ms is None or episode_ms > self._max_rebuffer_time_ms:
            self._max_rebuffer_time_ms = episode_ms
        self._rebuffer_start_ms = None

    def build(self, now_ms: int | None = None) -> PlaybackStats:
        """Build an immutable snapshot of the session so far.

        Args:
            now_ms: Time closing the current state. Defaults to the time of
                the last transition, i.e. the current state gets no duration.

        Returns:
            PlaybackStats for this single session.

        Raises:
            EventOrderError: If now_ms is before the last transition.
        """
        durations = list(self._durations)
        max_rebuffer_time_ms = self._max_rebuffer_time_ms

        last = self._last
        if last is not None:
            end_ms = last.realtime_ms if now_ms is None else now_ms
            if end_ms < last.realtime_ms:
                raise EventOrderError(
                    f"now_ms {end_ms} is before last transition at {last.realtime_ms} ms"
                )
            durations[last.state.index] += end_ms - last.realtime_ms
            if self._rebuffer_start_ms is not None:
                open_episode_ms = end_ms - self._rebuffer_start_ms
                if max_rebuffer_time_ms is None or open_episode_ms > max_rebuffer_time_ms:
                    max_rebuffer_time_ms = open_episode_ms

        # Background-only sessions always count as abandoned before ready
        never_ready = not self._has_been_ready and not self._has_ended
        abandoned = never_ready and (
            not self._is_foreground or self.current_state in ABANDONING_STATES
        )
        valid_join = self._join_time_ms is not None

        stats = PlaybackStats(
            session_count=1,
            state_durations_ms=tuple(durations),
            state_history=tuple(self._history),
            first_reported_time_ms=self._first_time_ms,
            foreground_count=int(self._is_foreground),
            abandoned_before_ready_count=int(abandoned),
            ended_count=int(self._has_ended),
            background_joining_count=int(self._has_background_joined),
            total_valid_join_time_ms=self._join_time_ms,
            valid_join_time_count=int(valid_join),
            pause_count=self._pause_count,
            pause_while_buffering_count=self._pause_while_buffering_count,
            seek_count=self._seek_count,
            rebuffer_count=self._rebuffer_count,
            max_rebuffer_time_ms=max_rebuffer_time_ms,
            ad_playback_count=int(self._is_ad),
        )
        logger.debug(
            "Built playback stats: %d transitions, %d ms elapsed, final state %s",
            len(self._history),
            stats.total_elapsed_time_ms,
            self.current_state.display_name,
        )
        return stats


def build_playback_stats(
    events: Iterable[EventInput],
    now_ms: int | None = None,
    *,
    is_ad: bool = False,
    settings: PlaybackStatsSettings | None = None,
) -> PlaybackStats:
    """Build a snapshot for one session from its ordered transitions.

    Args:
        events: Transitions in non-decreasing timestamp order.
        now_ms: Time closing the final state; defaults to the last event time.
        is_ad: Whether the playback was an ad.
        settings: Build settings; loaded from the environment when omitted.

    Returns:
        Immutable PlaybackStats with session_count 1.

    Raises:
        EventOrderError: If timestamps decrease (strict ordering) or now_ms
            is before the last event.
        TypeError: If an event has an unsupported shape.
        ValueError: If an event has an unknown state code.
    """
    tracker = PlaybackStatsTracker(is_ad=is_ad, settings=settings)
    for event in normalize_events(events):
        tracker.record(event.realtime_ms, event.state)
    return tracker.build(now_ms)


def build_playback_stats_from_source(
    source: PlaybackEventSource,
    now_ms: int | None = None,
    *,
    settings: PlaybackStatsSettings | None = None,
) -> PlaybackStats:
    """Build a snapshot from an external event source.

    Args:
        source: Object implementing PlaybackEventSource.
        now_ms: Time closing the final state; defaults to the last event time.
        settings: Build settings; loaded from the environment when omitted.

    Returns:
        Immutable PlaybackStats with session_count 1.
    """
    return build_playback_stats(
        source.transitions(), now_ms, is_ad=source.is_ad, settings=settings
    )
