from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Iterable

import numpy as np

from shrinkage.data.validate import assert_finite, assert_non_empty


@dataclass(frozen=True)
class DeviationSummary:
    value: float
    statistic: str
    mean: float
    median: float
    mean_deviation: float
    median_deviation: float
    n: int

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def _sorted_values(values: Iterable[float], name: str) -> np.ndarray:
    # np.sort returns a copy; caller-owned data is never reordered.
    arr = np.sort(np.asarray(list(values), dtype=float))
    assert_non_empty(arr, name)
    assert_finite(arr, name)
    return arr


def _mean(sorted_values: np.ndarray) -> float:
    return float(np.sum(sorted_values) / sorted_values.size)


def _median(sorted_values: np.ndarray) -> float:
    middle = sorted_values.size // 2
    if sorted_values.size % 2 == 0:
        return float((sorted_values[middle - 1] + sorted_values[middle]) / 2)
    return float(sorted_values[middle])


def absolute_deviation(center: float, values: Iterable[float]) -> float:
    """Sum of |value - center| over values."""
    arr = np.asarray(list(values), dtype=float)
    return float(np.sum(np.abs(arr - center)))


def describe_deviation(values: Iterable[float], *, name: str = "values") -> DeviationSummary:
    """Compare mean and median by total absolute deviation.

    The mean is selected only when its deviation is strictly smaller; ties go
    to the median. Every reduction runs over a sorted copy, so the result does
    not depend on input order.

    Raises EmptyDatasetError for empty input and ValueError for non-finite values.
    """

    arr = _sorted_values(values, name)
    mean = _mean(arr)
    median = _median(arr)
    mean_dev = absolute_deviation(mean, arr)
    median_dev = absolute_deviation(median, arr)

    if mean_dev < median_dev:
        value, statistic = mean, "mean"
    else:
        value, statistic = median, "median"

    return DeviationSummary(
        value=value,
        statistic=statistic,
        mean=mean,
        median=median,
        mean_deviation=mean_dev,
        median_deviation=median_dev,
        n=int(arr.size),
    )


def least_deviation(values: Iterable[float], *, name: str = "values") -> float:
    return describe_deviation(values, name=name).value
