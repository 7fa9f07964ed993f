from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, List, Mapping, Optional, Tuple

if TYPE_CHECKING:
    from deflection_analyzer.models.series import Series


class InstrumentType(str, Enum):
    CUP = "cup"
    FACEPLATE = "faceplate"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class Configuration(str, Enum):
    DEFLECTED = "deflected"
    UNDEFLECTED = "undeflected"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True, order=True)
class SeriesKey:
    """
    Typed identity of one recorded series.

    instrument: which instrument recorded it (cup or faceplate).
    configuration: deflected or undeflected.
    run: 1-based run number (already converted from the file-name index token).
    """
    instrument: InstrumentType
    configuration: Configuration
    run: int

    def __post_init__(self) -> None:
        if int(self.run) < 1:
            raise ValueError(f"run must be >= 1, got {self.run}")

    @property
    def label(self) -> str:
        return f"{self.instrument.value}_{self.configuration.value}_run{self.run}"


@dataclass(frozen=True)
class RunSet:
    """
    Discovery output: every series found in a data directory, keyed by SeriesKey.

    Notes
    - Built once by RunDiscovery and never modified afterwards.
    - A (instrument, configuration, run) triple with no file is simply absent;
      selection decides whether that is an error.
    - series is a read-only mapping (MappingProxyType) when built by discovery.
    """
    root_dir: Path
    series: Mapping[SeriesKey, "Series"] = field(default_factory=dict)
    warnings: Tuple[str, ...] = ()

    @property
    def keys(self) -> List[SeriesKey]:
        return sorted(self.series)

    def runs(self, instrument: InstrumentType) -> List[int]:
        """Sorted run numbers with at least one configuration for this instrument."""
        return sorted({k.run for k in self.series if k.instrument == instrument})

    def get(self, instrument: InstrumentType, configuration: Configuration, run: int) -> Optional["Series"]:
        return self.series.get(SeriesKey(instrument, configuration, int(run)))

    def __len__(self) -> int:
        return len(self.series)
