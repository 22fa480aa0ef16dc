"""
samplestats.stats
=================

Statistics over a one-dimensional sample.

1. **Descriptive** (samplestats.stats.descriptive):
   The four primitive statistics: mean, stddev, median and l2.

2. **Registry** (samplestats.stats.registry):
   Lookup of statistics by name, for callers that run an arbitrary
   selection of statistics over the same sample.

Example:
--------
>>> from samplestats.stats.descriptive import stddev
>>> stddev([1.0, 1.0])
0.0

>>> from samplestats.stats.registry import get_statistic
>>> get_statistic("mean")([2.0, 4.0])
3.0
"""
