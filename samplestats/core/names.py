"""
samplestats.core.names
======================

Typed names shared across the package.

- `Sample`: the read-only input sequence every statistic consumes.
- `StatisticResult`: a float, or ``None`` when the statistic is undefined.
- `StatFn`: any callable mapping a sample to a result.
- `StatisticName`: an Enum for the statistics the package ships.

Examples
--------
>>> from samplestats.core.names import StatisticName
>>> StatisticName.STDDEV.value
'stddev'
>>> StatisticName("l2") is StatisticName.L2
True
"""

from __future__ import annotations
from enum import Enum
from typing import Callable, Optional, Sequence

# A sample is never mutated by the functions that read it.
Sample = Sequence[float]

# ``None`` marks a statistic that does not exist for the input.
StatisticResult = Optional[float]

# Type of statistics function. If the statistic is ill-defined, ``None`` is returned.
StatFn = Callable[[Sample], StatisticResult]


class StatisticName(str, Enum):
    """Names of the statistics the package ships.

    - MEAN: arithmetic mean
    - STDDEV: Bessel-corrected sample standard deviation
    - MEDIAN: lower-middle median
    - L2: Euclidean norm
    """

    MEAN = "mean"
    STDDEV = "stddev"
    MEDIAN = "median"
    L2 = "l2"
