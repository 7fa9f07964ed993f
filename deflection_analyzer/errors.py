"""Typed errors raised by the ingest and analysis layers.

Each error also derives from the built-in exception a caller would
naturally catch (``ValueError`` for bad data, ``LookupError`` for a
missing run), so generic handlers keep working.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class AnalyzerError(Exception):
    """Base class for all deflection_analyzer errors."""


class MalformedRecord(AnalyzerError, ValueError):
    """A data line could not be split into >= 2 fields or its value is not a number."""

    def __init__(self, source: str | Path, line_no: int, line: str, reason: str) -> None:
        self.source = str(source)
        self.line_no = int(line_no)
        self.line = line
        self.reason = reason
        super().__init__(f"{self.source}:{self.line_no}: {reason} (line={line[:80]!r})")


class SourceNotFound(AnalyzerError, LookupError):
    """No source file matches the requested run and configuration."""


class AmbiguousSource(AnalyzerError, ValueError):
    """More than one source file maps to the same series key."""


class EmptySeries(AnalyzerError, ValueError):
    """Statistics were requested for a series with no samples."""


class DegenerateDistribution(AnalyzerError, ValueError):
    """A Gaussian cannot be evaluated (sigma is zero or not finite)."""

    def __init__(self, message: str, sigma: Optional[float] = None) -> None:
        self.sigma = sigma
        super().__init__(message)
