from typing import Iterable, List

from shrinkage.data.measurement import Measurement


def simulate_measuring(measurements: Iterable[Measurement], shrinkage: float) -> List[Measurement]:
    """Re-measure each expected value as if it shrank by exactly `shrinkage`."""
    return [Measurement(expected=m.expected, actual=m.expected * shrinkage) for m in measurements]
