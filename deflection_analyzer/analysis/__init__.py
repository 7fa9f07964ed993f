"""Analysis package.

Design principle:
  - Ingest produces read-only :class:`~deflection_analyzer.models.series.Series` objects.
  - Analysis consumes them and produces derived values (decimated series,
    summary statistics, Gaussian curves) without modifying the input.

x-values are sample indices, never timestamps.
"""

from .distribution import build_curves, curves_by_key, domain_bounds, gaussian_pdf, pdf_domain
from .stats import run_pair_stats, summary_stats
from .windows import decimate, raw_points

__all__ = [
    "build_curves",
    "curves_by_key",
    "domain_bounds",
    "gaussian_pdf",
    "pdf_domain",
    "run_pair_stats",
    "summary_stats",
    "decimate",
    "raw_points",
]
