from __future__ import annotations

import logging
from typing import Dict

from deflection_analyzer.errors import SourceNotFound
from deflection_analyzer.models.catalog import Configuration, InstrumentType, RunSet, SeriesKey
from deflection_analyzer.models.series import RunPair, Series

logger = logging.getLogger(__name__)


def select_run(
    run_set: RunSet,
    instrument: InstrumentType,
    run: int,
    *,
    strict: bool = False,
) -> RunPair:
    """
    Pick the deflected/undeflected pair for a 1-based run number.

    With ``strict=False`` a configuration without a file yields an empty Series
    (recorded in ``RunPair.missing``). With ``strict=True`` it raises SourceNotFound.
    """
    run = int(run)
    if run < 1:
        raise ValueError(f"run must be >= 1, got {run}")
    instrument = InstrumentType(instrument)

    found: Dict[Configuration, Series] = {}
    missing = []
    for cfg in (Configuration.DEFLECTED, Configuration.UNDEFLECTED):
        s = run_set.get(instrument, cfg, run)
        if s is None:
            key = SeriesKey(instrument, cfg, run)
            if strict:
                available = run_set.runs(instrument)
                raise SourceNotFound(
                    f"No source for {key.label} in {run_set.root_dir} (runs with data: {available})"
                )
            logger.warning("No source for %s; using an empty series", key.label)
            s = Series.empty(key)
            missing.append(cfg)
        found[cfg] = s

    return RunPair(
        instrument=instrument,
        run=run,
        deflected=found[Configuration.DEFLECTED],
        undeflected=found[Configuration.UNDEFLECTED],
        missing=tuple(missing),
    )
