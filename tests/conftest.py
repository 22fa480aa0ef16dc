import pytest


@pytest.fixture
def mixed_sample():
    """Ten values with negatives, a zero and an outlier"""
    return [-25.8, -18.8, -2.0, 0.0, 1.0, 1.8, 18.0, 25.8, 56.0, -8.0]


@pytest.fixture
def large_sample(mixed_sample):
    """Thirteen values spanning roughly -90 to 100"""
    return mixed_sample + [-90.0, 90.9, 100.9]


@pytest.fixture
def even_sample():
    """Twelve unsorted values; the two middle elements once sorted are -8.0 and 18.0"""
    return [
        18.0, -25.8, 56.0, -8.0, -90.0, 90.9,
        25.8, 100.9, -56.0, -100.89, -100.9, 100.89,
    ]
