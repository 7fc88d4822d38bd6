import numpy as np


class EmptyDatasetError(ValueError):
    """Raised when a reduction is asked to summarize zero values."""


def assert_non_empty(values: np.ndarray, name: str = "values") -> None:
    if values.size == 0:
        raise EmptyDatasetError(f"Cannot estimate a central value of empty {name}.")


def assert_finite(values: np.ndarray, name: str = "values") -> None:
    bad = values[~np.isfinite(values)]
    if bad.size:
        raise ValueError(f"Non-finite {name}: {sorted(map(str, bad.tolist()))}")
