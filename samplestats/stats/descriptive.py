"""
samplestats.stats.descriptive
=============================

Descriptive statistics on a sequence of floating-point numbers.

Every function takes a read-only sample and returns an optional float.
``None`` means the statistic is undefined for the input; any other value,
including ``nan`` and ``inf``, is the IEEE-754 result of the arithmetic.

Sums are accumulated left to right with plain float addition, not the
compensated summation the built-in ``sum`` applies to floats on Python 3.12+.

Examples
--------
>>> from samplestats.stats.descriptive import mean, stddev, median, l2
>>> mean([])
0.0
>>> mean([-1.0, 1.0])
0.0
>>> stddev([]) is None
True
>>> stddev([1.0, 1.0])
0.0
>>> median([]) is None
True
>>> median([0.0, 0.5, -1.0, 1.0])
0.0
>>> l2([])
0.0
>>> l2([-3.0, 4.0])
5.0
"""

from __future__ import annotations
import math
from typing import Optional

from samplestats.core.names import Sample
from samplestats.logging import get_logger

logger = get_logger("stats.descriptive")


def _ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics for a zero denominator.

    Python raises ``ZeroDivisionError`` on ``x / 0.0``; IEEE-754 yields
    ``nan`` for ``0/0`` and a signed infinity otherwise.

    >>> _ieee_divide(1.0, 4.0)
    0.25
    >>> _ieee_divide(0.0, 0.0)
    nan
    >>> _ieee_divide(3.0, 0.0)
    inf
    """
    if denominator != 0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def mean(sample: Sample) -> Optional[float]:
    """Arithmetic mean of input values.

    The mean of an empty sample is ``0.0`` by convention, so the result is
    never ``None``.

    Args:
        sample: Sequence of floats (not modified)

    Returns:
        ``sum(sample) / len(sample)``, or ``0.0`` for an empty sample
    """
    if len(sample) == 0:
        return 0.0

    total = 0.0
    for x in sample:
        total += x
    return total / len(sample)


def stddev(sample: Sample) -> Optional[float]:
    """Sample standard deviation with Bessel's correction.

    Squared deviations from the mean are summed and divided by ``n - 1``
    before taking the square root. This is the unbiased sample estimator, not
    the population standard deviation.

    Args:
        sample: Sequence of floats (not modified)

    Returns:
        The standard deviation, or ``None`` for an empty sample.

    Note:
        A single value divides by zero. The result follows IEEE-754
        (``nan`` for any finite value) rather than raising; callers that
        need finite output must check it.

    >>> import math
    >>> math.isnan(stddev([42.0]))
    True
    """
    n = len(sample)
    if n == 0:
        return None

    mu = mean(sample)
    squares = 0.0
    for x in sample:
        squares += (x - mu) * (x - mu)

    if n == 1:
        logger.debug("stddev of a single value: dividing %r by zero", squares)
    return math.sqrt(_ieee_divide(squares, n - 1))


def median(sample: Sample) -> Optional[float]:
    """Median of input values, taking the value closer to the beginning to break ties.

    A sorted copy is taken, so the caller's sequence keeps its order. For an
    odd count the middle element is returned as-is. For an even count the
    lower of the two middle elements (index ``n/2 - 1``) is returned; the two
    are not averaged.

    Args:
        sample: Sequence of floats (not modified), without NaN

    Returns:
        The lower-middle element, or ``None`` for an empty sample.

    Raises:
        ValueError: If the sample contains NaN, which has no place in the order.

    >>> median([3.0, -1.0, 2.0])
    2.0
    >>> median([4.0, 1.0, 3.0, 2.0])
    2.0
    """
    if len(sample) == 0:
        return None
    if any(math.isnan(x) for x in sample):
        raise ValueError("median is undefined for a sample containing NaN")

    ordered = sorted(sample)
    return ordered[(len(ordered) - 1) // 2]


def l2(sample: Sample) -> Optional[float]:
    """L2 norm (Euclidean norm) of input values.

    The L2 norm of an empty sample is ``0.0``; the result is never ``None``
    and never negative.
    """
    squares = 0.0
    for x in sample:
        squares += x * x
    return math.sqrt(squares)
