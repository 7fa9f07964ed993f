"""Static matplotlib charts.

All functions return the Figure so callers (and tests) can inspect it;
:func:`save_figure` writes and closes it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional, Sequence, Tuple

import matplotlib.pyplot as plt

from deflection_analyzer.models.results import DistributionCurve

logger = logging.getLogger(__name__)

Points = Sequence[Tuple[float, float]]

# Line + marker styles, cycled per series (matches the legacy chart look).
_MARKERS = ("o", "^", "s", "D", "v", "x")


def plot_series(
    series_by_label: Mapping[str, Points],
    *,
    title: str,
    xlabel: str = "Time",
    ylabel: str = "Voltage (mV)",
    figsize: Tuple[float, float] = (12.0, 9.0),
):
    """Line-and-marker chart of one or more (x, y) point lists.

    Parameters
    ----------
    series_by_label : mapping
        ``{legend label: [(x, y), ...]}``; insertion order sets the drawing order.
    title, xlabel, ylabel : str
        Chart annotations.
    figsize : (float, float)
        Figure size in inches.
    """
    fig, ax = plt.subplots(figsize=figsize)
    for i, (label, pts) in enumerate(series_by_label.items()):
        if len(pts) == 0:
            logger.warning("Series '%s' has no points; only its legend entry is drawn", label)
            xs, ys = [], []
        else:
            xs, ys = zip(*pts)
        ax.plot(xs, ys, "-", marker=_MARKERS[i % len(_MARKERS)], ms=3, lw=1.0, label=label)
    ax.set_title(title)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.grid(True, alpha=0.3)
    ax.legend()
    return fig


def plot_distributions(
    curves_by_label: Mapping[str, DistributionCurve],
    *,
    title: str,
    xlabel: str = "Voltage (mV)",
    figsize: Tuple[float, float] = (12.0, 9.0),
):
    """Overlay of Gaussian PDF curves with a dashed marker at each mean."""
    fig, ax = plt.subplots(figsize=figsize)
    for label, c in curves_by_label.items():
        (line,) = ax.plot(c.x, c.y, "-", lw=1.5, label=f"{label} (mean={c.stats.mean:.4g}, sigma={c.stats.sigma:.4g})")
        ax.axvline(c.stats.mean, color=line.get_color(), ls="--", lw=0.8)
    ax.set_title(title)
    ax.set_xlabel(xlabel)
    ax.set_ylabel("Probability density")
    ax.grid(True, alpha=0.3)
    ax.legend()
    return fig


def save_figure(fig, path: str | Path, *, dpi: Optional[int] = None) -> Path:
    """Save *fig* as an image and close it. Returns the resolved path."""
    out = Path(path).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(str(out), bbox_inches="tight", dpi=dpi, facecolor="white")
    plt.close(fig)
    logger.info("Wrote %s", out)
    return out
