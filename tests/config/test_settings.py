"""Tests for configuration settings."""

from playstats import PlaybackState, PlaybackStatsSettings, build_playback_stats


def test_defaults():
    settings = PlaybackStatsSettings(_env_file=None)
    assert settings.keep_history is True
    assert settings.strict_ordering is True


def test_loaded_from_environment(monkeypatch):
    monkeypatch.setenv("PLAYBACK_STATS_KEEP_HISTORY", "false")
    monkeypatch.setenv("PLAYBACK_STATS_STRICT_ORDERING", "0")

    settings = PlaybackStatsSettings(_env_file=None)
    assert settings.keep_history is False
    assert settings.strict_ordering is False


def test_explicit_values_override_environment(monkeypatch):
    monkeypatch.setenv("PLAYBACK_STATS_KEEP_HISTORY", "false")
    assert PlaybackStatsSettings(_env_file=None, keep_history=True).keep_history is True


def test_builder_uses_environment_when_settings_omitted(monkeypatch):
    monkeypatch.setenv("PLAYBACK_STATS_KEEP_HISTORY", "false")
    stats = build_playback_stats([(0, PlaybackState.PLAYING)], now_ms=100)
    assert stats.state_history == ()
    assert stats.duration_of(PlaybackState.PLAYING) == 100
