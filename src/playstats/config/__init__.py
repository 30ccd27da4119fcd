"""Configuration module using Pydantic Settings.

Usage:
    from playstats.config import PlaybackStatsSettings

    settings = PlaybackStatsSettings(keep_history=False)
"""

from playstats.config.settings import PlaybackStatsSettings

__all__ = [
    "PlaybackStatsSettings",
]
