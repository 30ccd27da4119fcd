"""Core type definitions for playstats."""

type TimeMs = int | None
"""Duration or timestamp in milliseconds, or None when not yet determined.

None is the unset value. It is never the same as a zero duration and never
takes part in arithmetic; see `playstats.core.timing` for the combining rules.
"""

TIME_UNSET: TimeMs = None
"""The unset time value."""


def is_unset(value: TimeMs) -> bool:
    """Check whether a time value is unset."""
    return value is None
