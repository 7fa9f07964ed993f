"""Headless smoke tests for the matplotlib renderers."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from deflection_analyzer.analysis.distribution import build_curves  # noqa: E402
from deflection_analyzer.models.results import SummaryStats  # noqa: E402
from deflection_analyzer.presentation.plots import (  # noqa: E402
    plot_distributions,
    plot_series,
    save_figure,
)


def test_plot_series_labels_and_lines():
    fig = plot_series(
        {"Deflected": [(0.0, 1.0), (1.0, 2.0)], "Undeflected": []},
        title="Faceplate Run 2",
        figsize=(4.0, 3.0),
    )
    ax = fig.axes[0]
    assert ax.get_title() == "Faceplate Run 2"
    assert ax.get_xlabel() == "Time"
    assert ax.get_ylabel() == "Voltage (mV)"
    assert [ln.get_label() for ln in ax.get_lines()] == ["Deflected", "Undeflected"]
    assert list(ax.get_lines()[0].get_ydata()) == [1.0, 2.0]
    plt.close(fig)


def test_plot_distributions_and_save(tmp_path):
    a = SummaryStats(mean=0.0, sigma=1.0, n_samples=10)
    b = SummaryStats(mean=3.0, sigma=0.5, n_samples=10)
    _, ca, cb = build_curves(a, b, 50)
    fig = plot_distributions({"Deflected": ca, "Undeflected": cb}, title="t", figsize=(4.0, 3.0))
    ax = fig.axes[0]
    # one curve + one mean marker per distribution
    assert len(ax.get_lines()) == 4

    out = save_figure(fig, tmp_path / "nested" / "g.png", dpi=50)
    assert out.exists()
    assert out.stat().st_size > 0
    assert not plt.fignum_exists(fig.number)
