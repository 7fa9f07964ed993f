"""Gaussian overlay of two SummaryStats on a shared domain.

The domain spans ``mean +/- span*sigma`` of both distributions (span = 4 by
default) and is sampled at ``resolution`` equal steps, both ends included.
"""

from __future__ import annotations

import math
from typing import Dict, Mapping, Tuple

import numpy as np

from deflection_analyzer.errors import DegenerateDistribution
from deflection_analyzer.models.results import DistributionCurve, SummaryStats

SQRT_2PI = math.sqrt(2.0 * math.pi)


def _require_valid(stats: SummaryStats, name: str) -> None:
    if not math.isfinite(stats.sigma) or stats.sigma <= 0:
        raise DegenerateDistribution(
            f"{name}: sigma must be finite and > 0, got {stats.sigma}", sigma=stats.sigma
        )
    if not math.isfinite(stats.mean):
        raise DegenerateDistribution(f"{name}: mean is not finite ({stats.mean})", sigma=stats.sigma)


def domain_bounds(stats_a: SummaryStats, stats_b: SummaryStats, *, span: float = 4.0) -> Tuple[float, float]:
    """(lower, upper) covering both distributions' ``mean +/- span*sigma`` range."""
    _require_valid(stats_a, "stats_a")
    _require_valid(stats_b, "stats_b")
    lo_a, hi_a = stats_a.bounds(span)
    lo_b, hi_b = stats_b.bounds(span)
    return min(lo_a, lo_b), max(hi_a, hi_b)


def pdf_domain(
    stats_a: SummaryStats,
    stats_b: SummaryStats,
    resolution: int,
    *,
    span: float = 4.0,
) -> np.ndarray:
    """``resolution + 1`` evenly spaced points from lower to upper, both exact.

    Point k is ``lower + k*(upper - lower)/resolution``; the last point is set to
    ``upper`` exactly rather than accumulated.
    """
    n = int(resolution)
    if n < 1:
        raise ValueError(f"resolution must be >= 1, got {resolution}")
    lower, upper = domain_bounds(stats_a, stats_b, span=span)
    return np.linspace(lower, upper, n + 1)


def gaussian_pdf(x, mean: float, sigma: float) -> np.ndarray:
    r"""Normal probability density :math:`\frac{1}{\sigma\sqrt{2\pi}} e^{-\frac{1}{2}((x-\mu)/\sigma)^2}`."""
    if not math.isfinite(sigma) or sigma <= 0:
        raise DegenerateDistribution(f"sigma must be finite and > 0, got {sigma}", sigma=sigma)
    z = (np.asarray(x, dtype=np.float64) - mean) / sigma
    return np.exp(-0.5 * z * z) / (sigma * SQRT_2PI)


def build_curves(
    stats_a: SummaryStats,
    stats_b: SummaryStats,
    resolution: int,
    *,
    span: float = 4.0,
) -> Tuple[np.ndarray, DistributionCurve, DistributionCurve]:
    """Sample both Gaussians on their shared domain.

    Returns
    -------
    (domain, curve_a, curve_b)
    """
    domain = pdf_domain(stats_a, stats_b, resolution, span=span)
    curve_a = DistributionCurve(stats=stats_a, x=domain, y=gaussian_pdf(domain, stats_a.mean, stats_a.sigma))
    curve_b = DistributionCurve(stats=stats_b, x=domain, y=gaussian_pdf(domain, stats_b.mean, stats_b.sigma))
    return domain, curve_a, curve_b


def curves_by_key(
    stats_by_key: Mapping,
    resolution: int,
    *,
    span: float = 4.0,
) -> Dict:
    """Two-entry mapping of stats -> same keys mapped to DistributionCurve."""
    if len(stats_by_key) != 2:
        raise ValueError(f"Expected exactly two distributions, got {len(stats_by_key)}")
    (ka, sa), (kb, sb) = list(stats_by_key.items())
    _, ca, cb = build_curves(sa, sb, resolution, span=span)
    return {ka: ca, kb: cb}
