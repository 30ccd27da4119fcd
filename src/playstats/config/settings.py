"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for building
playback statistics.

Usage:
    from playstats.config import PlaybackStatsSettings

    # Load from environment variables (PLAYBACK_STATS_*)
    settings = PlaybackStatsSettings()

    # Or override with explicit values
    settings = PlaybackStatsSettings(keep_history=False)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install playstats"
    ) from e


class PlaybackStatsSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for building playback statistics.

    Attributes:
        keep_history: Keep the ordered state history on single-session snapshots.
            Without it `PlaybackStats.state_at` always answers NOT_STARTED.
        strict_ordering: Raise EventOrderError on decreasing timestamps. When
            False the offending event is dropped and a warning is logged.

    Environment Variables:
        PLAYBACK_STATS_KEEP_HISTORY
        PLAYBACK_STATS_STRICT_ORDERING
    """

    model_config = SettingsConfigDict(
        env_prefix="PLAYBACK_STATS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    keep_history: bool = True
    strict_ordering: bool = True
