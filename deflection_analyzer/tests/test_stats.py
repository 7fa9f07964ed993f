"""Summary statistics (mean, population sigma)."""

from __future__ import annotations

import math

import numpy as np
import pytest

from deflection_analyzer.analysis.stats import run_pair_stats, summary_stats
from deflection_analyzer.errors import EmptySeries
from deflection_analyzer.models.series import RunPair
from deflection_analyzer.models.catalog import Configuration, InstrumentType
from deflection_analyzer.models.series import Series


def test_known_values() -> None:
    st = summary_stats(Series.from_values([1.0, 2.0, 3.0]))
    assert st.mean == pytest.approx(2.0)
    assert st.sigma == pytest.approx(math.sqrt(2.0 / 3.0))
    assert st.n_samples == 3


def test_population_not_sample_sigma() -> None:
    y = np.array([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
    st = summary_stats(Series.from_values(y))
    assert st.sigma == pytest.approx(2.0)
    assert st.sigma == pytest.approx(np.std(y, ddof=0))
    assert st.sigma != pytest.approx(np.std(y, ddof=1))


def test_single_sample_has_zero_sigma() -> None:
    st = summary_stats(Series.from_values([4.2]))
    assert st.mean == pytest.approx(4.2)
    assert st.sigma == 0.0
    assert st.is_degenerate


def test_empty_raises_by_default() -> None:
    with pytest.raises(EmptySeries):
        summary_stats(Series.empty())


def test_empty_allowed_gives_nan() -> None:
    st = summary_stats(Series.empty(), allow_empty=True)
    assert math.isnan(st.mean) and math.isnan(st.sigma)
    assert st.n_samples == 0
    assert st.is_degenerate


def test_run_pair_stats() -> None:
    pair = RunPair(
        instrument=InstrumentType.CUP,
        run=1,
        deflected=Series.from_values([1.0, 3.0]),
        undeflected=Series.empty(),
        missing=(Configuration.UNDEFLECTED,),
    )
    out = run_pair_stats(pair, allow_empty=True)
    assert list(out) == [Configuration.DEFLECTED, Configuration.UNDEFLECTED]
    assert out[Configuration.DEFLECTED].mean == pytest.approx(2.0)
    assert out[Configuration.DEFLECTED].sigma == pytest.approx(1.0)
    assert math.isnan(out[Configuration.UNDEFLECTED].mean)

    with pytest.raises(EmptySeries):
        run_pair_stats(pair)


def test_analysis_does_not_depend_on_ingest() -> None:
    import deflection_analyzer.analysis.stats as stats_mod

    assert stats_mod.RunPair.__module__ == "deflection_analyzer.models.series"
