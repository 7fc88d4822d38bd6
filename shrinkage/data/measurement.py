from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import pandas as pd


MEASUREMENT_COLUMNS = ["expected", "actual", "shrinkage", "adjustment"]


@dataclass(frozen=True)
class Measurement:
    """One expected/actual pair.

    shrinkage = actual / expected
    adjustment = expected - actual

    A zero expected value has no finite shrinkage and is rejected.
    """

    expected: float
    actual: float
    shrinkage: float = field(init=False)
    adjustment: float = field(init=False)

    def __post_init__(self) -> None:
        if self.expected == 0:
            raise ValueError("Expected value must be non-zero to derive a shrinkage.")
        object.__setattr__(self, "shrinkage", self.actual / self.expected)
        object.__setattr__(self, "adjustment", self.expected - self.actual)


def measurements_to_frame(measurements: Iterable[Measurement]) -> pd.DataFrame:
    """Return one row per measurement in input order."""

    rows = [
        {
            "expected": m.expected,
            "actual": m.actual,
            "shrinkage": m.shrinkage,
            "adjustment": m.adjustment,
        }
        for m in measurements
    ]
    return pd.DataFrame(rows, columns=MEASUREMENT_COLUMNS)
