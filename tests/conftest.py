"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from playstats import PLAYBACK_STATE_COUNT, PlaybackState, PlaybackStatsSettings


@pytest.fixture
def settings():
    """Default settings, isolated from any local .env file."""
    return PlaybackStatsSettings(_env_file=None)


@pytest.fixture
def make_durations():
    """Build a duration tuple from state names, e.g. make_durations(PLAYING=5000)."""

    def _make(**by_state: int) -> tuple[int, ...]:
        durations = [0] * PLAYBACK_STATE_COUNT
        for name, duration in by_state.items():
            durations[PlaybackState[name].index] = duration
        return tuple(durations)

    return _make
