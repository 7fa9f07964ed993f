from __future__ import annotations

import logging
import math
from typing import Dict

import numpy as np

from deflection_analyzer.errors import EmptySeries
from deflection_analyzer.models.series import RunPair
from deflection_analyzer.models.catalog import Configuration
from deflection_analyzer.models.results import SummaryStats
from deflection_analyzer.models.series import Series

logger = logging.getLogger(__name__)


def summary_stats(series: Series, *, allow_empty: bool = False) -> SummaryStats:
    """Mean and population standard deviation of the series y-values.

    ``sigma = sqrt(sum((y - mean)**2) / N)`` (divisor N).

    An empty series raises EmptySeries unless ``allow_empty`` is set, in which
    case both moments are NaN, as the historical tool reported them.
    """
    y = series.y
    n = int(y.size)
    if n == 0:
        name = series.key.label if series.key is not None else str(series.source_path)
        if not allow_empty:
            raise EmptySeries(f"Cannot compute statistics of an empty series ({name})")
        logger.warning("Empty series %s: mean and sigma are NaN", name)
        return SummaryStats(mean=math.nan, sigma=math.nan, n_samples=0)

    mean = float(np.mean(y))
    sigma = float(np.sqrt(np.mean((y - mean) ** 2)))
    return SummaryStats(mean=mean, sigma=sigma, n_samples=n)


def run_pair_stats(pair: RunPair, *, allow_empty: bool = False) -> Dict[Configuration, SummaryStats]:
    return {cfg: summary_stats(s, allow_empty=allow_empty) for cfg, s in pair.by_configuration().items()}
