from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from deflection_analyzer.errors import MalformedRecord
from deflection_analyzer.models.catalog import SeriesKey
from deflection_analyzer.models.series import Series

logger = logging.getLogger(__name__)

FIELD_SEP = "\t"
VALUE_FIELD = 1  # 0-based: the second field carries the voltage


def parse_series_lines(
    lines: Iterable[Union[str, bytes]],
    *,
    source: str | Path = "<memory>",
    encoding: str = "utf-8",
) -> List[float]:
    """
    Parse the lines of one tab-separated voltage file into y-values.

    Contract:
      - the first line is a header and is discarded (whatever it contains);
      - every further line must have >= 2 tab-separated fields and the second
        field must parse as a float;
      - any violation raises MalformedRecord immediately. Lines are never skipped,
        because the sample index of every later value depends on line order.

    Lines may be bytes; data lines are then decoded one at a time with *encoding*
    so that an undecodable line is reported with its line number.
    """
    values: List[float] = []
    it = iter(lines)
    if next(it, None) is None:
        return values

    # header is line 1
    for line_no, raw in enumerate(it, start=2):
        if isinstance(raw, bytes):
            try:
                raw = raw.decode(encoding)
            except UnicodeDecodeError as e:
                text = raw.decode(encoding, errors="replace").rstrip("\r\n")
                raise MalformedRecord(source, line_no, text, f"not valid {encoding} text ({e.reason} at byte {e.start})") from None
        line = raw.rstrip("\r\n")
        parts = line.split(FIELD_SEP)
        if len(parts) <= VALUE_FIELD:
            raise MalformedRecord(source, line_no, line, f"expected >= {VALUE_FIELD + 1} tab-separated fields, got {len(parts)}")
        token = parts[VALUE_FIELD]
        try:
            values.append(float(token))
        except ValueError:
            raise MalformedRecord(source, line_no, line, f"field {VALUE_FIELD + 1} is not a number: {token!r}") from None
    return values


def read_series(
    path: str | Path,
    key: Optional[SeriesKey] = None,
    *,
    encoding: str = "utf-8",
) -> Series:
    """
    Load one voltage file into a Series.

    Sample k (0-based, counted after the header) becomes ``(k, value)``.
    A file that is empty or holds only the header gives an empty Series.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    MalformedRecord
        On the first data line that cannot be decoded or parsed; nothing is returned.
    """
    fp = Path(path).expanduser().resolve()
    if not fp.is_file():
        raise FileNotFoundError(f"Not a file: {fp}")

    with fp.open("rb") as fh:
        values = parse_series_lines(fh, source=fp, encoding=encoding)

    warnings: List[str] = []
    if not values:
        warnings.append(f"{fp.name}: no data lines after header")
        logger.warning("%s: no data lines after header", fp.name)
    else:
        logger.debug("Loaded %d samples from %s", len(values), fp.name)

    return Series.from_values(values, key=key, source_path=fp, warnings=tuple(warnings))
