"""
samplestats.stats.registry
==========================

Lookup of statistics by name.

The registry lets callers treat the four statistics polymorphically: pick
them by name and run each one over the same sample.

Examples
--------
>>> from samplestats.stats.registry import apply_all, get_statistic
>>> get_statistic("median")([5.0, 1.0, 3.0])
3.0
>>> apply_all([1.0, 1.0])
{'mean': 1.0, 'stddev': 0.0, 'median': 1.0, 'l2': 1.4142135623730951}
>>> apply_all([], ["stddev", "l2"])
{'stddev': None, 'l2': 0.0}
"""

from __future__ import annotations
from typing import Dict, Iterable, Optional, Union

from samplestats.core.names import Sample, StatFn, StatisticName, StatisticResult
from samplestats.stats.descriptive import l2, mean, median, stddev

StatisticLike = Union[StatisticName, str]

STATISTICS: Dict[StatisticName, StatFn] = {
    StatisticName.MEAN: mean,
    StatisticName.STDDEV: stddev,
    StatisticName.MEDIAN: median,
    StatisticName.L2: l2,
}


def resolve_name(name: StatisticLike) -> StatisticName:
    """Normalise a statistic name to its `StatisticName` member."""
    if isinstance(name, StatisticName):
        return name
    try:
        return StatisticName(name)
    except ValueError:
        known = ", ".join(member.value for member in StatisticName)
        raise ValueError(
            f"Unknown statistic: {name!r} (expected one of {known})"
        ) from None


def get_statistic(name: StatisticLike) -> StatFn:
    """Return the statistics function registered under ``name``.

    Args:
        name: A `StatisticName` or its string value

    Returns:
        The matching `StatFn`

    Raises:
        ValueError: If no statistic has that name
    """
    return STATISTICS[resolve_name(name)]


def apply_all(
    sample: Sample, names: Optional[Iterable[StatisticLike]] = None
) -> Dict[str, StatisticResult]:
    """Run several statistics over the same sample.

    Args:
        sample: Sequence of floats (not modified)
        names: Statistics to run, in output order. Defaults to all of them.
            A single name is accepted as-is.

    Returns:
        Mapping from statistic name to its result (``None`` where undefined)
    """
    if isinstance(names, str):
        names = (names,)
    selected = list(STATISTICS) if names is None else [resolve_name(n) for n in names]
    return {name.value: STATISTICS[name](sample) for name in selected}
