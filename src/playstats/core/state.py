"""Playback state model.

Usage:
    state = PlaybackState.PLAYING
    durations[state.index] += elapsed_ms
    print(state.display_name)  # "playing"
"""

from enum import Enum


class PlaybackState(Enum):
    """Mutually exclusive state of a single playback at any instant.

    Values are stable, contiguous and zero-based so a state can index a
    fixed-size duration tuple directly.
    """

    NOT_STARTED = 0
    """Playback has not started (initial state)."""

    JOINING_BACKGROUND = 1
    """Buffering in the background for initial playback start."""

    JOINING_FOREGROUND = 2
    """Buffering in the foreground for initial playback start."""

    PLAYING = 3
    """Actively playing."""

    PAUSED = 4
    """Paused but ready to play."""

    SEEKING = 5
    """Handling a seek."""

    BUFFERING = 6
    """Buffering to restart playback."""

    PAUSED_BUFFERING = 7
    """Buffering while paused."""

    SEEK_BUFFERING = 8
    """Buffering after a seek."""

    ENDED = 9
    """Reached the end of the media."""

    STOPPED = 10
    """Stopped, can be resumed."""

    FAILED = 11
    """Stopped by a fatal error, can be retried."""

    SUSPENDED = 12
    """Suspended, e.g. the user left or another playback interrupted it."""

    @property
    def index(self) -> int:
        """Position of this state in a duration tuple."""
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. ``"paused buffering"``."""
        return self.name.lower().replace("_", " ")


PLAYBACK_STATE_COUNT = len(PlaybackState)

READY_STATES = frozenset({PlaybackState.PLAYING, PlaybackState.PAUSED})
"""States that end a join."""

FOREGROUND_STATES = frozenset(
    {
        PlaybackState.JOINING_FOREGROUND,
        PlaybackState.PLAYING,
        PlaybackState.PAUSED,
        PlaybackState.SEEKING,
        PlaybackState.BUFFERING,
        PlaybackState.PAUSED_BUFFERING,
        PlaybackState.SEEK_BUFFERING,
        PlaybackState.ENDED,
    }
)
"""Entering any of these means the playback was the visible one at some point."""

ABANDONING_STATES = frozenset(
    {PlaybackState.STOPPED, PlaybackState.FAILED, PlaybackState.SUSPENDED}
)
"""Final states that count as giving up on a playback."""

JOIN_INTERRUPTING_STATES = frozenset(
    {
        PlaybackState.SEEKING,
        PlaybackState.SEEK_BUFFERING,
        PlaybackState.STOPPED,
        PlaybackState.FAILED,
    }
)
"""Entering any of these while joining makes the join time invalid."""

REBUFFER_STATES = frozenset({PlaybackState.BUFFERING, PlaybackState.PAUSED_BUFFERING})
"""States a rebuffer episode can span."""


def state_from_value(value: PlaybackState | int) -> PlaybackState:
    """Resolve a state or its integer code.

    Raises:
        ValueError: If value is not a known state code.
    """
    if isinstance(value, PlaybackState):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Unknown playback state: {value!r}")
    try:
        return PlaybackState(value)
    except ValueError:
        raise ValueError(f"Unknown playback state code: {value}") from None
