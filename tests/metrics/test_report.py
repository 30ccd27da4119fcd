"""Tests for the metrics report model."""

import math

import pytest
from pydantic import ValidationError

from playstats import (
    EMPTY_PLAYBACK_STATS,
    PlaybackMetricsReport,
    PlaybackState,
    PlaybackStatsSettings,
    build_playback_stats,
)


@pytest.fixture
def session_stats():
    return build_playback_stats(
        [
            (0, PlaybackState.JOINING_FOREGROUND),
            (400, PlaybackState.PLAYING),
            (5400, PlaybackState.BUFFERING),
            (5900, PlaybackState.PLAYING),
        ],
        now_ms=10_900,
        settings=PlaybackStatsSettings(_env_file=None),
    )


def test_report_from_session(session_stats):
    report = PlaybackMetricsReport.from_stats(session_stats)

    assert report.session_count == 1
    assert report.total_play_time_ms == 10_000
    assert report.total_rebuffer_time_ms == 500
    assert report.mean_join_time_ms == 400
    assert report.max_rebuffer_time_ms == 500
    assert report.rebuffer_rate == pytest.approx(0.1)
    assert report.mean_time_between_rebuffers_s == pytest.approx(10.0)
    assert report.state_durations_ms["PLAYING"] == 10_000
    assert report.total_elapsed_time_ms == 10_900


def test_report_from_empty_stats():
    report = PlaybackMetricsReport.from_stats(EMPTY_PLAYBACK_STATS)

    assert report.session_count == 0
    assert report.mean_elapsed_time_ms is None
    assert report.mean_join_time_ms is None
    assert report.max_rebuffer_time_ms is None
    assert report.ended_ratio == 0.0
    assert math.isinf(report.mean_time_between_rebuffers_s)
    assert set(report.state_durations_ms) == {state.name for state in PlaybackState}


def test_report_dumps_to_plain_dict(session_stats):
    data = PlaybackMetricsReport.from_stats(session_stats).model_dump()
    assert data["total_wait_time_ms"] == 900
    assert data["state_durations_ms"]["JOINING_FOREGROUND"] == 400


def test_report_is_frozen(session_stats):
    report = PlaybackMetricsReport.from_stats(session_stats)
    with pytest.raises(ValidationError):
        report.session_count = 5
