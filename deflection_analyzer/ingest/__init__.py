"""Ingest package - voltage file reading and run discovery.

This package handles:
- Reading one tab-separated voltage file into a Series (header discarded,
  synthetic sample index as x)
- Parsing ``<instrument>_<configuration>_<index>`` file names into typed keys
- Building the read-only RunSet for a data directory
- Selecting the deflected/undeflected pair for one run

Design principle:
- A malformed data line aborts loading; lines are never skipped
- A run with no file is a soft miss unless the caller asks for strict selection
"""
from .discovery import RunDiscovery, parse_series_name
from .readers import parse_series_lines, read_series
from .selection import RunPair, select_run

__all__ = [
    "RunDiscovery",
    "parse_series_name",
    "parse_series_lines",
    "read_series",
    "RunPair",
    "select_run",
]
