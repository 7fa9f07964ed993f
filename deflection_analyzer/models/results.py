from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SummaryStats:
    """First and second moment of one series.

    Attributes
    ----------
    mean:
        Arithmetic mean of the y-values.
    sigma:
        Population standard deviation (divisor ``N``, not ``N - 1``).
    n_samples:
        Number of samples the moments were computed from.
    """

    mean: float
    sigma: float
    n_samples: int

    @property
    def is_degenerate(self) -> bool:
        """True when no Gaussian can be drawn from these moments."""
        return not (math.isfinite(self.mean) and math.isfinite(self.sigma) and self.sigma > 0)

    def bounds(self, span: float = 4.0) -> tuple[float, float]:
        return self.mean - span * self.sigma, self.mean + span * self.sigma


@dataclass(frozen=True, eq=False)
class DistributionCurve:
    """Gaussian PDF of one SummaryStats pair sampled on a shared domain.

    Attributes
    ----------
    stats:
        Moments the curve was built from.
    x:
        Domain points, shape ``(n,)``.
    y:
        PDF values at ``x``, shape ``(n,)``.
    """

    stats: SummaryStats
    x: np.ndarray
    y: np.ndarray

    def points(self) -> list[tuple[float, float]]:
        return list(zip(np.asarray(self.x).tolist(), np.asarray(self.y).tolist()))

    @property
    def peak(self) -> float:
        return float(np.max(self.y)) if np.size(self.y) else float("nan")
