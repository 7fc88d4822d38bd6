from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Sequence

from shrinkage.data.measurement import Measurement
from .estimators import DeviationSummary, describe_deviation
from .simulate import simulate_measuring

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShrinkageEstimate:
    shrinkage_summary: DeviationSummary
    adjustment_summary: DeviationSummary
    simulated_adjustment_summary: DeviationSummary

    @property
    def shrinkage(self) -> float:
        return self.shrinkage_summary.value

    @property
    def adjustment(self) -> float:
        return self.adjustment_summary.value

    @property
    def simulated_adjustment(self) -> float:
        return self.simulated_adjustment_summary.value

    def to_dict(self) -> Dict[str, Dict[str, object]]:
        return {
            "shrinkage": self.shrinkage_summary.to_dict(),
            "adjustment": self.adjustment_summary.to_dict(),
            "simulated_adjustment": self.simulated_adjustment_summary.to_dict(),
        }


def estimate_shrinkage(measurements: Sequence[Measurement]) -> ShrinkageEstimate:
    """Least-deviating shrinkage and adjustment, then the adjustment seen when
    re-measuring every expected value with that shrinkage.

    Raises EmptyDatasetError when there are no measurements.
    """

    shrinkage_summary = describe_deviation([m.shrinkage for m in measurements], name="shrinkages")
    adjustment_summary = describe_deviation([m.adjustment for m in measurements], name="adjustments")

    simulated = simulate_measuring(measurements, shrinkage_summary.value)
    simulated_summary = describe_deviation(
        [m.adjustment for m in simulated], name="simulated adjustments"
    )

    for label, summary in [
        ("shrinkage", shrinkage_summary),
        ("adjustment", adjustment_summary),
        ("simulated adjustment", simulated_summary),
    ]:
        logger.info(
            "%s: %s selected (mean=%.6g dev=%.6g, median=%.6g dev=%.6g, n=%s)",
            label,
            summary.statistic,
            summary.mean,
            summary.mean_deviation,
            summary.median,
            summary.median_deviation,
            summary.n,
        )

    return ShrinkageEstimate(
        shrinkage_summary=shrinkage_summary,
        adjustment_summary=adjustment_summary,
        simulated_adjustment_summary=simulated_summary,
    )
