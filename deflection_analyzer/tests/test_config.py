from __future__ import annotations

from dataclasses import replace

import pytest

from deflection_analyzer.config import AnalyzerConfig


def test_defaults() -> None:
    cfg = AnalyzerConfig()
    assert cfg.data_dir == "data"
    assert cfg.output_png == "points.png"
    assert cfg.figure_size_in == (12.0, 9.0)
    assert cfg.sigma_span == 4.0
    assert cfg.run_index_base == 0


def test_roundtrip_dict() -> None:
    cfg = replace(AnalyzerConfig(), port=9000, figure_size_in=(6.0, 4.5))
    d = cfg.to_dict()
    assert d["figure_size_in"] == [6.0, 4.5]
    assert AnalyzerConfig.from_dict(d) == cfg


def test_unknown_key_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown"):
        AnalyzerConfig.from_dict({"window": 5})


@pytest.mark.parametrize(
    "kw",
    [{"curve_resolution": 0}, {"sigma_span": 0.0}, {"port": 0}, {"port": 70000}],
)
def test_invalid_values(kw) -> None:
    with pytest.raises(ValueError):
        AnalyzerConfig(**kw)
