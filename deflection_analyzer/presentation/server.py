"""Flask endpoint serving the interactive Gaussian overlay.

The statistics are computed once before the app is created and are only read
afterwards; every request re-renders the chart from them.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from flask import Flask, Response, jsonify

from deflection_analyzer.config import AnalyzerConfig
from deflection_analyzer.errors import DegenerateDistribution
from deflection_analyzer.models.catalog import Configuration
from deflection_analyzer.models.results import SummaryStats
from deflection_analyzer.presentation.interactive import gaussian_html

logger = logging.getLogger(__name__)


def create_app(
    stats_by_config: Mapping[Configuration, SummaryStats],
    config: AnalyzerConfig,
    *,
    title: str = "Gaussian distributions",
) -> Flask:
    stats = MappingProxyType(dict(stats_by_config))
    for cfg, s in stats.items():
        if s.is_degenerate:
            raise DegenerateDistribution(f"{cfg.value}: cannot draw a Gaussian (mean={s.mean}, sigma={s.sigma})", sigma=s.sigma)
    app = Flask(__name__)

    @app.route('/')
    def index():
        page = gaussian_html(stats, resolution=config.curve_resolution, span=config.sigma_span, title=title)
        return Response(page, mimetype='text/html')

    @app.route('/stats')
    def stats_json():
        return jsonify({
            cfg.value: {"mean": s.mean, "sigma": s.sigma, "n_samples": s.n_samples}
            for cfg, s in stats.items()
        })

    return app


def serve(app: Flask, config: AnalyzerConfig) -> None:
    logger.info("Serving Gaussian overlay on http://%s:%d/", config.host, config.port)
    app.run(host=config.host, port=config.port, debug=False)
