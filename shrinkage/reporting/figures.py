from pathlib import Path
from typing import Sequence

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from shrinkage.evaluation.estimators import DeviationSummary  # noqa: E402


def save_figure(fig, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=300, bbox_inches="tight")


def plot_deviation_summary(values: Sequence[float], summary: DeviationSummary, out_path: Path, title: str) -> None:
    """Strip plot of the values with mean, median and the selected estimate marked."""

    arr = np.asarray(values, dtype=float)
    fig, ax = plt.subplots(figsize=(8, 3))
    ax.plot(arr, np.zeros_like(arr), "o", alpha=0.6, label=f"Values (n={summary.n})")
    ax.axvline(summary.mean, linestyle="--", color="tab:blue", linewidth=1, label=f"Mean (dev={summary.mean_deviation:.4f})")
    ax.axvline(
        summary.median, linestyle=":", color="tab:orange", linewidth=1, label=f"Median (dev={summary.median_deviation:.4f})"
    )
    ax.axvline(summary.value, color="black", linewidth=2, alpha=0.4, label=f"Selected: {summary.statistic}")
    ax.set_title(title)
    ax.set_yticks([])
    ax.legend(loc="upper right", fontsize=8)
    fig.tight_layout()
    save_figure(fig, out_path)
    plt.close(fig)
