from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from pathlib import Path
from typing import Dict, List, Optional

from deflection_analyzer.config import AnalyzerConfig
from deflection_analyzer.errors import AmbiguousSource
from deflection_analyzer.ingest.readers import read_series
from deflection_analyzer.models.catalog import Configuration, InstrumentType, RunSet, SeriesKey
from deflection_analyzer.models.series import Series

logger = logging.getLogger(__name__)


# Typical filenames:
#   cup_deflected_0.txt
#   faceplate_undeflected_3_2023-02-17.txt
_NAME_PAT = re.compile(
    r"^(?P<instrument>cup|faceplate)_(?P<configuration>deflected|undeflected)_(?P<index>\d+)(?:_[^.]*)?(?:\.[^.]*)?$",
    re.IGNORECASE,
)


def parse_series_name(name: str, run_index_base: int = 0) -> Optional[SeriesKey]:
    """
    Parse a file name into a SeriesKey, or None if it does not follow
    ``<instrument>_<configuration>_<index>[_<suffix>][.<ext>]``.

    The index token is converted to a 1-based run number:
    ``run = index - run_index_base + 1``. With the default base 0,
    ``cup_deflected_0.txt`` is run 1. Indices below the base give None.
    """
    m = _NAME_PAT.match(name)
    if not m:
        return None
    run = int(m.group("index")) - int(run_index_base) + 1
    if run < 1:
        return None
    return SeriesKey(
        instrument=InstrumentType(m.group("instrument").lower()),
        configuration=Configuration(m.group("configuration").lower()),
        run=run,
    )


@dataclass
class RunDiscovery:
    """
    Build a RunSet for one data directory.

    STRICT POLICY
      - the directory must exist;
      - every file whose name parses is loaded, and any malformed line aborts discovery;
      - two files mapping to the same (instrument, configuration, run) raise AmbiguousSource;
      - names that do not parse are skipped and reported in RunSet.warnings.
    """
    run_index_base: int = 0
    encoding: str = "utf-8"

    @classmethod
    def from_config(cls, config: AnalyzerConfig) -> "RunDiscovery":
        return cls(run_index_base=config.run_index_base, encoding=config.encoding)

    def scan(self, data_dir: str | Path) -> tuple[Dict[SeriesKey, Path], List[str]]:
        """Map file names to keys without reading any file."""
        root = Path(data_dir).expanduser().resolve()
        if not root.exists() or not root.is_dir():
            raise FileNotFoundError(f"Not a directory: {root}")

        warnings: List[str] = []
        files: Dict[SeriesKey, Path] = {}
        for p in sorted(root.iterdir()):
            if not p.is_file() or p.name.startswith("."):
                continue
            key = parse_series_name(p.name, self.run_index_base)
            if key is None:
                warnings.append(f"Ignored file (name does not match <instrument>_<configuration>_<index>): {p.name}")
                continue
            prev = files.get(key)
            if prev is not None:
                raise AmbiguousSource(
                    f"Two files map to {key.label}: '{prev.name}' and '{p.name}'"
                )
            files[key] = p
        return files, warnings

    def build_run_set(self, data_dir: str | Path) -> RunSet:
        root = Path(data_dir).expanduser().resolve()
        files, warnings = self.scan(root)
        for w in warnings:
            logger.warning(w)

        series: Dict[SeriesKey, Series] = {}
        for key in sorted(files):
            series[key] = read_series(files[key], key=key, encoding=self.encoding)
            warnings.extend(series[key].warnings)

        logger.info("Discovered %d series in %s", len(series), root)
        return RunSet(root_dir=root, series=MappingProxyType(series), warnings=tuple(warnings))
