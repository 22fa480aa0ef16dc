"""
samplestats
===========

Descriptive statistics over a one-dimensional sample.

The package exposes four pure functions over a finite sequence of floats:
``mean``, ``stddev``, ``median`` and ``l2``. Each returns an optional float:
a statistic that has no meaningful value for the given input (the standard
deviation or median of an empty sample) is returned as ``None`` rather than
as a sentinel number, so "computed zero" and "no value" never collide.

Floating-point anomalies that follow from the arithmetic itself, such as the
Bessel-corrected deviation of a single value, are returned as IEEE-754
results (``nan`` / ``inf``) and left to the caller to filter.

Example
-------
>>> import samplestats
>>> samplestats.mean([-1.0, 1.0])
0.0
>>> samplestats.median([]) is None
True
>>> samplestats.apply_all([-3.0, 4.0], ["l2"])
{'l2': 5.0}
"""

from samplestats.__version__ import __version__
from samplestats.core.names import Sample, StatFn, StatisticName, StatisticResult
from samplestats.stats.descriptive import l2, mean, median, stddev
from samplestats.stats.registry import STATISTICS, apply_all, get_statistic
from samplestats.reporting.summary import (
    SampleSummaryReporter,
    SummaryConfig,
    summarize,
)

__all__ = [
    "__version__",
    "Sample",
    "StatFn",
    "StatisticName",
    "StatisticResult",
    "mean",
    "stddev",
    "median",
    "l2",
    "STATISTICS",
    "apply_all",
    "get_statistic",
    "SampleSummaryReporter",
    "SummaryConfig",
    "summarize",
]
