"""
Interactive Plotly rendering of the Gaussian overlay.
"""
from __future__ import annotations

from typing import Mapping

import plotly.graph_objects as go

from deflection_analyzer.analysis.distribution import curves_by_key
from deflection_analyzer.models.catalog import Configuration
from deflection_analyzer.models.results import SummaryStats

COLORS = {
    Configuration.DEFLECTED: 'red',
    Configuration.UNDEFLECTED: 'blue',
}


def gaussian_figure(
    stats_by_config: Mapping[Configuration, SummaryStats],
    *,
    resolution: int,
    span: float = 4.0,
    title: str = "Gaussian distributions",
) -> go.Figure:
    """
    Build the two-curve Plotly figure.

    Args:
        stats_by_config: Exactly two entries (deflected, undeflected)
        resolution: Number of domain steps
        span: Domain half-width in sigmas
        title: Figure title

    Returns:
        Plotly Figure with one line trace per configuration.
    """
    curves = curves_by_key(dict(stats_by_config), resolution, span=span)

    fig = go.Figure()
    for cfg, curve in curves.items():
        fig.add_trace(go.Scatter(
            x=curve.x,
            y=curve.y,
            mode='lines',
            name=f"{cfg.display_name} (mean={curve.stats.mean:.4g}, sigma={curve.stats.sigma:.4g})",
            line=dict(color=COLORS.get(cfg), width=2),
        ))

    fig.update_layout(
        title=title,
        xaxis_title="Voltage (mV)",
        yaxis_title="Probability density",
        hovermode='x unified',
        template='plotly_white',
    )
    return fig


def gaussian_html(
    stats_by_config: Mapping[Configuration, SummaryStats],
    *,
    resolution: int,
    span: float = 4.0,
    title: str = "Gaussian distributions",
) -> str:
    """Standalone HTML page for the Gaussian overlay."""
    fig = gaussian_figure(stats_by_config, resolution=resolution, span=span, title=title)
    return fig.to_html(full_html=True, include_plotlyjs='cdn')
