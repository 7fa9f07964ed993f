"""Deflection Analyzer -- voltage-series tooling for deflected/undeflected beam runs.

Each experimental run is recorded by one of two instruments (Faraday cup or
faceplate) in two configurations (deflected and undeflected). Every recording
is a tab-separated text file holding one voltage value per line.

This package provides tools for:
- Discovering the recordings of a data directory and loading them as series
- Selecting the deflected/undeflected pair of one run
- Window-averaging (decimating) a series for display
- Computing mean and population standard deviation per series
- Sampling Gaussian curves of both configurations on a shared domain
- Rendering the series chart (PNG) and the Gaussian overlay (PNG, HTML, HTTP)

Key principles:
- x is the sample index in file order, never a timestamp from the file
- A malformed data line aborts loading; nothing is skipped or interpolated
- All loaded and derived values are read-only after construction

Main subpackages:
- ingest: File reading, run discovery and run selection
- analysis: Window averaging, summary statistics, Gaussian curves
- models: Data models (SeriesKey, Series, RunSet, SummaryStats, ...)
- presentation: matplotlib, Plotly and Flask renderers
"""

__all__ = []
