"""Fixed-size, non-overlapping window averaging of a Series.

Functions
---------
decimate
    Reduce a series to one point per ``window`` consecutive samples.
raw_points
    Pass-through view used when no averaging is requested.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from deflection_analyzer.models.series import DecimatedSeries, Series


def decimate(series: Series, window: int) -> DecimatedSeries:
    """Average consecutive, non-overlapping windows of ``window`` samples.

    Parameters
    ----------
    series:
        Input series; not modified.
    window:
        Samples per output point, ``>= 1``.

    Returns
    -------
    DecimatedSeries
        ``len(series) // window`` points. Output point ``i`` has

        - ``y = mean(series.y[i*window : (i+1)*window])``
        - ``x = series.x[i + window // 2]``

        The x offset is relative to the output index ``i``, not to the window
        start ``i*window``. This matches the historical plots and must be kept
        for output to line up with them.

    Notes
    -----
    Trailing samples that do not fill a whole window are dropped. A window
    longer than the series gives an empty result.
    """
    w = int(window)
    if w < 1:
        raise ValueError(f"window must be >= 1, got {window}")

    x = series.x
    y = series.y
    n_out = x.size // w
    if n_out == 0:
        return DecimatedSeries.from_arrays(np.empty(0), np.empty(0), key=series.key, window=w)

    y_out = y[: n_out * w].reshape(n_out, w).mean(axis=1)
    x_out = x[np.arange(n_out) + w // 2]
    return DecimatedSeries.from_arrays(x_out, y_out, key=series.key, window=w)


def raw_points(series: Series) -> List[Tuple[float, float]]:
    return series.points()
