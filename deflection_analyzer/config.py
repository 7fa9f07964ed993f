"""Analyzer configuration.

One frozen dataclass groups every setting that affects discovery, rendering
and serving. CLI flags override individual fields via ``dataclasses.replace()``;
``to_dict()`` / ``from_dict()`` allow the settings to travel with outputs.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class AnalyzerConfig:
    """
    data_dir:
      Directory holding the ``<type>_<configuration>_<index>`` text files.
    output_png:
      File name of the static series chart.
    figure_size_in / dpi:
      Static chart geometry (inches, dots per inch).
    curve_resolution:
      Number of equal steps used to sample the Gaussian domain (points = steps + 1).
    sigma_span:
      Half-width of the Gaussian domain, in sigmas, on each side of each mean.
    host / port:
      Bind address of the interactive Gaussian endpoint.
    run_index_base:
      Value of the file-name index token that corresponds to run 1.
      0 means ``cup_deflected_0.txt`` is run 1.
    encoding:
      Text encoding of the source files.
    """
    data_dir: str = "data"
    output_png: str = "points.png"
    figure_size_in: Tuple[float, float] = (12.0, 9.0)
    dpi: int = 100
    curve_resolution: int = 1000
    sigma_span: float = 4.0
    host: str = "127.0.0.1"
    port: int = 8081
    run_index_base: int = 0
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if int(self.curve_resolution) < 1:
            raise ValueError(f"curve_resolution must be >= 1, got {self.curve_resolution}")
        if not float(self.sigma_span) > 0:
            raise ValueError(f"sigma_span must be > 0, got {self.sigma_span}")
        if not (0 < int(self.port) < 65536):
            raise ValueError(f"port out of range: {self.port}")

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["figure_size_in"] = list(self.figure_size_in)
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "AnalyzerConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ValueError(f"Unknown AnalyzerConfig keys: {unknown}")
        kw = dict(d)
        if "figure_size_in" in kw:
            w, h = kw["figure_size_in"]
            kw["figure_size_in"] = (float(w), float(h))
        return cls(**kw)
