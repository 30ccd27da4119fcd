"""Pure functions for combining optional time values.

Each function skips unset (None) inputs and returns None only when no
defined value was seen, so a real zero is never confused with "unknown".
"""

from __future__ import annotations

from collections.abc import Iterable

from playstats.core.types import TimeMs


def _defined(values: Iterable[TimeMs]) -> list[int]:
    return [value for value in values if value is not None]


def min_defined(values: Iterable[TimeMs]) -> TimeMs:
    """Minimum of the defined values.

    Args:
        values: Time values, any of which may be unset.

    Returns:
        Smallest defined value, or None if all are unset.
    """
    defined = _defined(values)
    return min(defined) if defined else None


def max_defined(values: Iterable[TimeMs]) -> TimeMs:
    """Maximum of the defined values.

    Args:
        values: Time values, any of which may be unset.

    Returns:
        Largest defined value, or None if all are unset.
    """
    defined = _defined(values)
    return max(defined) if defined else None


def sum_defined(values: Iterable[TimeMs]) -> TimeMs:
    """Sum of the defined values.

    Args:
        values: Time values, any of which may be unset.

    Returns:
        Sum of defined values, or None if all are unset.
    """
    defined = _defined(values)
    return sum(defined) if defined else None


def mean_or_unset(total: TimeMs, count: int) -> TimeMs:
    """Integer mean of a total over a count.

    Returns:
        ``total // count``, or None if count is zero or total is unset.
    """
    if count == 0 or total is None:
        return None
    return total // count


def ratio_or_zero(numerator: float, denominator: float) -> float:
    """Ratio that reads as "no evidence" (0.0) when the denominator is zero."""
    if denominator == 0:
        return 0.0
    return numerator / denominator
