from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from deflection_analyzer.models.catalog import Configuration, InstrumentType, SeriesKey


def _xy_frame(x: np.ndarray, y: np.ndarray) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "x": np.asarray(x, dtype=np.float64),
            "y": np.asarray(y, dtype=np.float64),
        }
    )


class _XYView:
    """Shared read accessors for frames holding float64 ``x``/``y`` columns."""

    df: pd.DataFrame

    @property
    def x(self) -> np.ndarray:
        return self.df["x"].to_numpy(dtype=np.float64)

    @property
    def y(self) -> np.ndarray:
        return self.df["y"].to_numpy(dtype=np.float64)

    @property
    def n_samples(self) -> int:
        return int(len(self.df))

    @property
    def is_empty(self) -> bool:
        return self.n_samples == 0

    def points(self) -> List[Tuple[float, float]]:
        """(x, y) pairs in acquisition order, ready for a renderer."""
        return list(zip(self.x.tolist(), self.y.tolist()))

    def __len__(self) -> int:
        return self.n_samples


@dataclass(frozen=True, eq=False)
class Series(_XYView):
    """
    One loaded voltage series.

    Notes
    - 'x' is the synthetic sample index 0, 1, 2, ... assigned in file order;
      the first column of the source file is not used.
    - df columns are always float64 and row order is acquisition order.
    - key is None for files read outside of discovery.
    """
    key: Optional[SeriesKey]
    source_path: Optional[Path]
    df: pd.DataFrame
    warnings: Tuple[str, ...] = ()

    @classmethod
    def from_values(
        cls,
        values,
        *,
        key: Optional[SeriesKey] = None,
        source_path: Optional[Path] = None,
        warnings: Tuple[str, ...] = (),
    ) -> "Series":
        y = np.asarray(values, dtype=np.float64).reshape(-1)
        x = np.arange(y.size, dtype=np.float64)
        return cls(key=key, source_path=source_path, df=_xy_frame(x, y), warnings=tuple(warnings))

    @classmethod
    def empty(cls, key: Optional[SeriesKey] = None) -> "Series":
        return cls.from_values([], key=key)


@dataclass(frozen=True, eq=False)
class DecimatedSeries(_XYView):
    """
    Window-averaged view of a Series.

    Each row is the mean of ``window`` consecutive input samples; the number of
    rows is ``len(source) // window``.
    """
    key: Optional[SeriesKey]
    window: int
    df: pd.DataFrame

    @classmethod
    def from_arrays(cls, x: np.ndarray, y: np.ndarray, *, key: Optional[SeriesKey], window: int) -> "DecimatedSeries":
        return cls(key=key, window=int(window), df=_xy_frame(x, y))


@dataclass(frozen=True, eq=False)
class RunPair:
    """
    The deflected and undeflected series of one run.

    missing lists the configurations that had no source file; their series
    are present but empty so that callers which do not care can proceed.
    """
    instrument: InstrumentType
    run: int
    deflected: Series
    undeflected: Series
    missing: Tuple[Configuration, ...] = ()

    @property
    def complete(self) -> bool:
        return not self.missing

    def by_configuration(self) -> Dict[Configuration, Series]:
        return {
            Configuration.DEFLECTED: self.deflected,
            Configuration.UNDEFLECTED: self.undeflected,
        }

    @property
    def title(self) -> str:
        return f"{self.instrument.display_name} Run {self.run}"
