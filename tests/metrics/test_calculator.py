"""Tests for derived playback metrics."""

import math

import pytest

from playstats import EMPTY_PLAYBACK_STATS, PlaybackState, PlaybackStats
from playstats.metrics import calculator


@pytest.fixture
def single(make_durations):
    """One foreground playback with 5s of play and a 500ms rebuffer."""
    return PlaybackStats(
        session_count=1,
        state_durations_ms=make_durations(PLAYING=5000, BUFFERING=500, PAUSED=0),
        foreground_count=1,
        rebuffer_count=1,
    )


@pytest.fixture
def busy(make_durations):
    """Two foreground playbacks with every kind of waiting."""
    return PlaybackStats(
        session_count=2,
        state_durations_ms=make_durations(
            JOINING_FOREGROUND=600,
            PLAYING=8000,
            PAUSED=1000,
            PAUSED_BUFFERING=200,
            BUFFERING=800,
            SEEKING=100,
            SEEK_BUFFERING=300,
            ENDED=50,
        ),
        foreground_count=2,
        ended_count=1,
        total_valid_join_time_ms=600,
        valid_join_time_count=2,
        pause_count=3,
        pause_while_buffering_count=1,
        seek_count=4,
        rebuffer_count=2,
    )


def test_single_session_scenario(single):
    assert calculator.total_play_time_ms(single) == 5000
    assert calculator.total_rebuffer_time_ms(single) == 500
    assert calculator.rebuffer_rate(single) == pytest.approx(0.2)
    assert calculator.mean_time_between_rebuffers(single) == pytest.approx(5.0)


def test_totals(busy):
    assert calculator.total_join_time_ms(busy) == 600
    assert calculator.total_paused_time_ms(busy) == 1200
    assert calculator.total_seek_time_ms(busy) == 400
    assert calculator.total_wait_time_ms(busy) == 600 + 800 + 100 + 300
    assert calculator.total_play_and_wait_time_ms(busy) == 8000 + 1800
    assert calculator.total_elapsed_time_ms(busy) == 11_050


def test_wait_time_excludes_paused_states(make_durations):
    stats = PlaybackStats(
        session_count=1,
        foreground_count=1,
        state_durations_ms=make_durations(PAUSED=1000, PAUSED_BUFFERING=500),
    )
    assert calculator.total_wait_time_ms(stats) == 0


def test_means(busy):
    assert calculator.mean_join_time_ms(busy) == 300
    assert calculator.mean_play_time_ms(busy) == 4000
    assert calculator.mean_paused_time_ms(busy) == 600
    assert calculator.mean_rebuffer_time_ms(busy) == 400
    assert calculator.mean_single_rebuffer_time_ms(busy) == 500
    assert calculator.mean_seek_time_ms(busy) == 200
    assert calculator.mean_single_seek_time_ms(busy) == 100
    assert calculator.mean_wait_time_ms(busy) == 900
    assert calculator.mean_play_and_wait_time_ms(busy) == 4900
    assert calculator.mean_elapsed_time_ms(busy) == 5525


def test_means_use_integer_division(make_durations):
    stats = PlaybackStats(
        session_count=3, foreground_count=3, state_durations_ms=make_durations(PLAYING=1000)
    )
    assert calculator.mean_play_time_ms(stats) == 333


def test_per_foreground_ratios(busy):
    assert calculator.ended_ratio(busy) == pytest.approx(0.5)
    assert calculator.mean_pause_count(busy) == pytest.approx(1.5)
    assert calculator.mean_pause_while_buffering_count(busy) == pytest.approx(0.5)
    assert calculator.mean_seek_count(busy) == pytest.approx(2.0)
    assert calculator.mean_rebuffer_count(busy) == pytest.approx(1.0)


def test_time_ratios_add_up(busy):
    total = calculator.total_play_and_wait_time_ms(busy)
    assert calculator.join_time_ratio(busy) == pytest.approx(600 / total)
    assert calculator.rebuffer_time_ratio(busy) == pytest.approx(800 / total)
    assert calculator.seek_time_ratio(busy) == pytest.approx(400 / total)
    assert calculator.wait_time_ratio(busy) == pytest.approx(
        calculator.join_time_ratio(busy)
        + calculator.rebuffer_time_ratio(busy)
        + calculator.seek_time_ratio(busy)
    )


def test_abandoned_ratio_excludes_background_only_sessions():
    # 3 sessions, one never left background joining and counts as abandoned
    stats = PlaybackStats(
        session_count=3,
        foreground_count=2,
        abandoned_before_ready_count=2,
        background_joining_count=1,
    )
    assert calculator.abandoned_before_ready_ratio(stats) == pytest.approx(0.5)


def test_no_join_means_unset_mean_join_time(make_durations):
    stats = PlaybackStats(
        session_count=1,
        foreground_count=1,
        state_durations_ms=make_durations(JOINING_FOREGROUND=700),
    )
    assert calculator.mean_join_time_ms(stats) is None
    assert calculator.total_join_time_ms(stats) == 700


@pytest.mark.parametrize(
    "metric",
    [
        calculator.mean_play_time_ms,
        calculator.mean_paused_time_ms,
        calculator.mean_rebuffer_time_ms,
        calculator.mean_seek_time_ms,
        calculator.mean_wait_time_ms,
        calculator.mean_play_and_wait_time_ms,
        calculator.mean_join_time_ms,
        calculator.mean_single_rebuffer_time_ms,
        calculator.mean_single_seek_time_ms,
    ],
)
def test_means_unset_without_foreground(metric, make_durations):
    stats = PlaybackStats(
        session_count=1, state_durations_ms=make_durations(JOINING_BACKGROUND=900)
    )
    assert metric(stats) is None


@pytest.mark.parametrize(
    "metric",
    [
        calculator.abandoned_before_ready_ratio,
        calculator.ended_ratio,
        calculator.mean_pause_count,
        calculator.mean_pause_while_buffering_count,
        calculator.mean_seek_count,
        calculator.mean_rebuffer_count,
        calculator.wait_time_ratio,
        calculator.join_time_ratio,
        calculator.rebuffer_time_ratio,
        calculator.seek_time_ratio,
        calculator.rebuffer_rate,
    ],
)
def test_ratios_zero_without_foreground(metric):
    stats = PlaybackStats(session_count=1, abandoned_before_ready_count=1, seek_count=2)
    assert metric(stats) == 0.0


def test_empty_snapshot():
    assert calculator.mean_elapsed_time_ms(EMPTY_PLAYBACK_STATS) is None
    assert calculator.total_elapsed_time_ms(EMPTY_PLAYBACK_STATS) == 0
    assert calculator.rebuffer_rate(EMPTY_PLAYBACK_STATS) == 0.0


def test_mean_time_between_rebuffers_infinite_without_rebuffers(make_durations):
    stats = PlaybackStats(
        session_count=1, foreground_count=1, state_durations_ms=make_durations(PLAYING=10_000)
    )
    assert calculator.rebuffer_rate(stats) == 0.0
    assert math.isinf(calculator.mean_time_between_rebuffers(stats))


def test_metrics_on_merged_stats(single, busy):
    merged = single.__merge__(busy)
    assert merged.session_count == 3
    assert calculator.total_play_time_ms(merged) == 13_000
    assert calculator.rebuffer_rate(merged) == pytest.approx(1000 * 3 / 13_000)
    assert merged.duration_of(PlaybackState.BUFFERING) == 1300
