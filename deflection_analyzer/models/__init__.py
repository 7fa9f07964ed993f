from .catalog import Configuration, InstrumentType, RunSet, SeriesKey
from .results import DistributionCurve, SummaryStats
from .series import DecimatedSeries, RunPair, Series

__all__ = [
    "Configuration",
    "InstrumentType",
    "RunSet",
    "SeriesKey",
    "DistributionCurve",
    "SummaryStats",
    "DecimatedSeries",
    "RunPair",
    "Series",
]
