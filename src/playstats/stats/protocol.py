"""Protocols for the event boundary.

The source that observes a live player lives outside this package. Anything
shaped like `PlaybackEventSource` can be turned into a snapshot with
`build_playback_stats_from_source`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from playstats.core.state import PlaybackState
    from playstats.stats.models import StateTransition


@runtime_checkable
class PlaybackEventSource(Protocol):
    """Protocol for a finished, already-collected record of one playback.

    Usage:
        class RecordedSession:
            is_ad = False

            def transitions(self):
                return [(0, PlaybackState.JOINING_FOREGROUND), (250, PlaybackState.PLAYING)]

        stats = build_playback_stats_from_source(RecordedSession(), now_ms=5250)
    """

    @property
    def is_ad(self) -> bool:
        """Whether the playback was an ad."""
        ...

    def transitions(self) -> Iterable[StateTransition | tuple[int, PlaybackState | int]]:
        """State transitions in non-decreasing timestamp order."""
        ...
