"""Presentation shell - renders engine output.

- plots: static matplotlib charts (series view, Gaussian overlay)
- interactive: Plotly HTML of the Gaussian overlay
- server: Flask endpoint that re-renders the overlay on each request
"""
