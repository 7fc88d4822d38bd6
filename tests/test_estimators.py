import statistics

import pytest

from shrinkage.data.validate import EmptyDatasetError
from shrinkage.evaluation.estimators import absolute_deviation, describe_deviation, least_deviation


def test_least_deviation_prefers_median_when_smaller():
    # mean=4, median=5; deviations 4 vs 3
    summary = describe_deviation([2.0, 5.0, 5.0])
    assert summary.statistic == "median"
    assert summary.value == 5.0
    assert summary.mean == pytest.approx(4.0)
    assert summary.mean_deviation == pytest.approx(4.0)
    assert summary.median_deviation == pytest.approx(3.0)


def test_even_count_median_is_average_of_middle_pair():
    summary = describe_deviation([10.0, 0.0, 1.0, 4.0])
    assert summary.median == 2.5
    assert summary.mean == pytest.approx(3.75)
    # median dev = 2.5+1.5+1.5+7.5 = 13, mean dev = 3.75+2.75+0.25+6.25 = 13
    assert summary.median_deviation == pytest.approx(13.0)
    assert summary.statistic == "median"


def test_skewed_values_keep_median():
    summary = describe_deviation([0.0, 0.0, 3.0, 3.0, 3.0, 10.0])
    assert summary.median == 3.0
    assert summary.mean == pytest.approx(19.0 / 6.0)
    assert summary.median_deviation == pytest.approx(13.0)
    assert summary.mean_deviation > summary.median_deviation
    assert summary.value == 3.0


def test_tie_goes_to_median():
    summary = describe_deviation([1.0, 3.0])
    assert summary.mean_deviation == summary.median_deviation
    assert summary.statistic == "median"


@pytest.mark.parametrize("x", [0.0, -3.5, 1e9, 0.8333333333333334])
def test_single_element_returns_itself(x):
    assert least_deviation([x]) == x


@pytest.mark.parametrize(
    "values",
    [
        [0.8, 0.75, 0.8333333333333334],
        [2.0, 5.0, 5.0],
        [1.0, 2.0, 3.0, 100.0],
        [-1.5, 7.25, 3.0, 3.0, 0.125],
    ],
)
def test_result_is_mean_or_median_with_lowest_deviation(values):
    result = least_deviation(values)
    mean = statistics.mean(values)
    median = statistics.median(values)
    assert result == pytest.approx(mean) or result == pytest.approx(median)
    result_dev = absolute_deviation(result, values)
    assert result_dev <= absolute_deviation(mean, values) + 1e-12
    assert result_dev <= absolute_deviation(median, values) + 1e-12


def test_permutation_invariance():
    values = [0.31, 7.9, -2.2, 4.4, 0.31, 12.05, 3.3]
    expected = least_deviation(values)
    for perm in (list(reversed(values)), sorted(values), values[3:] + values[:3]):
        assert least_deviation(perm) == expected


def test_input_is_not_mutated():
    values = [3.0, 1.0, 2.0]
    least_deviation(values)
    assert values == [3.0, 1.0, 2.0]


def test_empty_input_raises():
    with pytest.raises(EmptyDatasetError):
        least_deviation([])


def test_non_finite_input_raises():
    with pytest.raises(ValueError):
        least_deviation([1.0, float("inf")])
