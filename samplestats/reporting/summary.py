"""
samplestats.reporting.summary
=============================

Tabular summaries of one or many samples as Polars DataFrames.

The reporter runs a configured selection of statistics over each sample and
lays the results out one row per sample. Undefined statistics become nulls;
non-finite results are kept unless `SummaryConfig.finite_only` is set.

Examples
--------
>>> from samplestats.reporting.summary import SampleSummaryReporter, SummaryConfig
>>> rep = SampleSummaryReporter()
>>> df = rep.table({"a": [1.0, 3.0], "empty": []})
>>> df.columns
['sample', 'count', 'mean', 'stddev', 'median', 'l2']
>>> df.row(0)
('a', 2, 2.0, 1.4142135623730951, 1.0, 3.1622776601683795)
>>> df.row(1)
('empty', 0, 0.0, None, None, 0.0)

>>> import polars as pl
>>> frame = pl.DataFrame({"x": [1.0, None, 3.0], "label": ["p", "q", "r"]})
>>> cfg = SummaryConfig(statistics=("median",), include_count=False)
>>> SampleSummaryReporter(cfg).from_frame(frame).to_dicts()
[{'sample': 'x', 'median': 1.0}]
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import polars as pl
import polars.selectors as cs

from samplestats.core.names import Sample, StatisticName
from samplestats.logging import get_logger, log_with_data
from samplestats.stats.registry import get_statistic, resolve_name

logger = get_logger("reporting.summary")

DEFAULT_STATISTICS: Tuple[str, ...] = tuple(member.value for member in StatisticName)


@dataclass
class SummaryConfig:
    """
    Configuration for sample summaries.

    Parameters
    ----------
    statistics : tuple of str, default=("mean", "stddev", "median", "l2")
        Statistics to compute, in column order
    finite_only : bool, default=False
        Report non-finite results (``nan``/``inf``) as null instead of as-is
    include_count : bool, default=True
        Add a ``count`` column with the sample size

    Examples
    --------
    >>> SummaryConfig(statistics=("mean", "l2")).validate()
    >>> SummaryConfig(statistics=()).validate()
    Traceback (most recent call last):
    ...
    ValueError: At least one statistic must be selected
    """

    statistics: Tuple[str, ...] = DEFAULT_STATISTICS
    finite_only: bool = False
    include_count: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.statistics, str):
            self.statistics = (self.statistics,)

    def validate(self) -> None:
        """Validate summary configuration."""
        if not self.statistics:
            raise ValueError("At least one statistic must be selected")
        names = [resolve_name(name).value for name in self.statistics]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate statistics in {list(self.statistics)}")

    @property
    def names(self) -> List[str]:
        return [resolve_name(name).value for name in self.statistics]


@dataclass
class SampleSummaryReporter:
    """Run the configured statistics over samples and tabulate the results."""

    config: SummaryConfig = field(default_factory=SummaryConfig)

    def __post_init__(self) -> None:
        self.config.validate()

    def summarize(self, sample: Sample) -> Dict[str, Optional[float]]:
        """Compute the configured statistics for one sample."""
        out: Dict[str, Optional[float]] = {}
        for name in self.config.names:
            value = get_statistic(name)(sample)
            if value is not None:
                value = float(value)
                if self.config.finite_only and not math.isfinite(value):
                    log_with_data(
                        logger,
                        logging.WARNING,
                        "Discarding non-finite statistic",
                        {"statistic": name, "value": repr(value), "count": len(sample)},
                    )
                    value = None
            out[name] = value
        return out

    def table(self, samples: Mapping[str, Sample]) -> pl.DataFrame:
        """
        Summarise named samples, one row per sample.

        Returns
        -------
        pl.DataFrame
            Columns ``sample``, optionally ``count``, then one Float64 column
            per statistic. Undefined statistics are null.
        """
        names = self.config.names
        columns: Dict[str, list] = {"sample": []}
        schema: Dict[str, pl.DataType] = {"sample": pl.Utf8}
        if self.config.include_count:
            columns["count"] = []
            schema["count"] = pl.Int64
        for name in names:
            columns[name] = []
            schema[name] = pl.Float64

        for label, sample in samples.items():
            logger.debug("Summarising sample %r (n=%d)", label, len(sample))
            row = self.summarize(sample)
            columns["sample"].append(str(label))
            if self.config.include_count:
                columns["count"].append(len(sample))
            for name in names:
                columns[name].append(row[name])

        return pl.DataFrame(columns, schema=schema)

    def from_frame(
        self, df: pl.DataFrame, columns: Optional[Sequence[str]] = None
    ) -> pl.DataFrame:
        """
        Summarise columns of a DataFrame, treating each column as a sample.

        NaN cells are treated as missing: NaN and nulls are dropped before
        the statistics run.

        Parameters
        ----------
        df : pl.DataFrame
            Source frame
        columns : sequence of str, optional
            Columns to summarise. Defaults to every numeric column.

        Raises
        ------
        ValueError
            If a requested column is not in the frame
        """
        if columns is None:
            columns = df.select(cs.numeric()).columns
        else:
            missing = [c for c in columns if c not in df.columns]
            if missing:
                raise ValueError(f"Columns not found in frame: {missing}")

        samples = {
            name: df.get_column(name)
            .cast(pl.Float64)
            .fill_nan(None)
            .drop_nulls()
            .to_list()
            for name in columns
        }
        return self.table(samples)


def summarize(
    sample: Sample, statistics: Optional[Sequence[str]] = None
) -> Dict[str, Optional[float]]:
    """
    Compute a selection of statistics for one sample.

    Examples
    --------
    >>> summarize([2.0, 4.0, 9.0], ["mean", "median"])
    {'mean': 5.0, 'median': 4.0}
    >>> summarize([-3.0, 4.0], "l2")
    {'l2': 5.0}
    """
    if isinstance(statistics, str):
        statistics = (statistics,)
    config = SummaryConfig() if statistics is None else SummaryConfig(tuple(statistics))
    return SampleSummaryReporter(config).summarize(sample)
