"""Command-line entry point.

Loads every voltage file of a data directory, plots one run (window-averaged
or raw), prints the mean and sigma of both configurations and, on request,
serves the interactive Gaussian overlay.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Tuple

from deflection_analyzer.analysis.distribution import curves_by_key
from deflection_analyzer.analysis.stats import run_pair_stats
from deflection_analyzer.analysis.windows import decimate, raw_points
from deflection_analyzer.config import AnalyzerConfig
from deflection_analyzer.errors import AnalyzerError
from deflection_analyzer.ingest.discovery import RunDiscovery
from deflection_analyzer.ingest.selection import select_run
from deflection_analyzer.models.catalog import Configuration, InstrumentType
from deflection_analyzer.models.series import RunPair

logger = logging.getLogger(__name__)


def _positive_int(s: str) -> int:
    import argparse

    try:
        v = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {s!r}") from None
    if v < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {v}")
    return v


def build_parser():
    import argparse
    import textwrap

    d = AnalyzerConfig()
    p = argparse.ArgumentParser(
        prog="python -m deflection_analyzer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Compare deflected and undeflected voltage series of one run.

            Files in the data directory are named <instrument>_<configuration>_<index>,
            e.g. faceplate_deflected_0.txt (index 0 is run 1 by default).
            """
        ),
    )
    p.add_argument("--cup", action="store_true", help="Use cup data (default: faceplate)")
    p.add_argument("--run", type=_positive_int, default=1, help="Which run to use (1-based)")
    p.add_argument("--raw", action="store_true", help="Plot raw samples instead of the window average")
    p.add_argument("--n", type=_positive_int, default=10, help="Window size for the time average")
    p.add_argument("--data-dir", default=d.data_dir, help=f"Directory with the voltage files (default: {d.data_dir})")
    p.add_argument("--output", default=d.output_png, help=f"Series chart image (default: {d.output_png})")
    p.add_argument("--gaussian-output", default=None, help="Also write a static Gaussian overlay image to this path")
    p.add_argument("--resolution", type=_positive_int, default=d.curve_resolution, help="Gaussian domain steps")
    p.add_argument("--serve", action="store_true", help="Serve the interactive Gaussian overlay over HTTP")
    p.add_argument("--port", type=int, default=d.port, help=f"HTTP port for --serve (default: {d.port})")
    p.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a configuration has no file or no samples (default: continue with NaN statistics)",
    )
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug logging")
    return p


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def run_points(pair: RunPair, *, raw: bool, window: int) -> Dict[str, List[Tuple[float, float]]]:
    """Points per legend label for the series chart."""
    out: Dict[str, List[Tuple[float, float]]] = {}
    for cfg, s in pair.by_configuration().items():
        out[cfg.display_name] = raw_points(s) if raw else decimate(s, window).points()
    return out


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = build_parser()
    ns = p.parse_args(list(argv) if argv is not None else None)
    _configure_logging(ns.verbose)

    try:
        cfg = replace(
            AnalyzerConfig(),
            data_dir=ns.data_dir,
            output_png=ns.output,
            curve_resolution=ns.resolution,
            port=ns.port,
        )
    except ValueError as e:
        p.error(str(e))

    instrument = InstrumentType.CUP if ns.cup else InstrumentType.FACEPLATE

    # Imported late: matplotlib start-up is slow and not needed for --help.
    from deflection_analyzer.presentation.plots import plot_distributions, plot_series, save_figure

    try:
        run_set = RunDiscovery.from_config(cfg).build_run_set(cfg.data_dir)
        pair = select_run(run_set, instrument, ns.run, strict=ns.strict)

        fig = plot_series(
            run_points(pair, raw=ns.raw, window=ns.n),
            title=pair.title,
            figsize=cfg.figure_size_in,
        )
        save_figure(fig, cfg.output_png, dpi=cfg.dpi)

        stats = run_pair_stats(pair, allow_empty=not ns.strict)
        for c in (Configuration.DEFLECTED, Configuration.UNDEFLECTED):
            print(f"{c.display_name} Mean: {stats[c].mean:f}")
            print(f"{c.display_name} Sigma: {stats[c].sigma:f}")

        if ns.gaussian_output:
            curves = curves_by_key(stats, cfg.curve_resolution, span=cfg.sigma_span)
            gfig = plot_distributions(
                {c.display_name: curve for c, curve in curves.items()},
                title=f"{pair.title} distributions",
                figsize=cfg.figure_size_in,
            )
            save_figure(gfig, ns.gaussian_output, dpi=cfg.dpi)

        if ns.serve:
            from deflection_analyzer.presentation.server import create_app, serve

            app = create_app(stats, cfg, title=f"{pair.title} distributions")
            serve(app, cfg)
    except (AnalyzerError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
