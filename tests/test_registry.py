import math

import pytest

from samplestats.core.names import StatisticName
from samplestats.stats.descriptive import l2, mean, median, stddev
from samplestats.stats.registry import STATISTICS, apply_all, get_statistic, resolve_name


@pytest.mark.parametrize(
    "name,fn",
    [
        ("mean", mean),
        ("stddev", stddev),
        ("median", median),
        ("l2", l2),
        (StatisticName.MEDIAN, median),
    ],
)
def test_get_statistic(name, fn):
    assert get_statistic(name) is fn


def test_get_statistic_unknown_name():
    with pytest.raises(ValueError, match="Unknown statistic: 'kurtosis'"):
        get_statistic("kurtosis")


def test_resolve_name_returns_enum_member():
    assert resolve_name("l2") is StatisticName.L2
    assert resolve_name(StatisticName.MEAN) is StatisticName.MEAN


def test_registry_order():
    assert [name.value for name in STATISTICS] == ["mean", "stddev", "median", "l2"]


def test_apply_all_runs_every_statistic_over_same_sample(large_sample):
    """Each entry matches a direct call"""
    results = apply_all(large_sample)
    assert list(results) == ["mean", "stddev", "median", "l2"]
    for name, value in results.items():
        assert value == STATISTICS[StatisticName(name)](large_sample)


def test_apply_all_empty_sample():
    assert apply_all([]) == {"mean": 0.0, "stddev": None, "median": None, "l2": 0.0}


def test_apply_all_respects_selection_order():
    results = apply_all([3.0, 1.0, 2.0], ["median", StatisticName.MEAN])
    assert results == {"median": 2.0, "mean": 2.0}
    assert list(results) == ["median", "mean"]


def test_apply_all_single_value_keeps_nan():
    results = apply_all([5.0], ["stddev"])
    assert math.isnan(results["stddev"])


def test_apply_all_rejects_unknown_name():
    with pytest.raises(ValueError):
        apply_all([1.0], ["mean", "mode"])


@pytest.mark.parametrize("name", ["l2", StatisticName.L2])
def test_apply_all_accepts_single_name(name):
    assert apply_all([-3.0, 4.0], name) == {"l2": 5.0}
