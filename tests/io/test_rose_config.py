"""Tests for the renderer configuration loader."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from wind_rose_plot.io import DEFAULT_OUTPUT_PATH, DEFAULT_WIND_INPUT, RoseConfig, load_rose_config


def test_missing_config_returns_defaults(tmp_path: Path) -> None:
    config = load_rose_config(tmp_path / "missing.json")

    assert config == RoseConfig()
    assert config.input_path == DEFAULT_WIND_INPUT
    assert config.output_path == DEFAULT_OUTPUT_PATH
    assert config.dpi == 300
    assert config.colormap == "RdBu_r"
    assert config.figsize == (10.0, 10.0)


def test_none_path_returns_defaults() -> None:
    assert load_rose_config(None) == RoseConfig()


def test_config_values_override_defaults(tmp_path: Path) -> None:
    path = tmp_path / "wind_rose.json"
    path.write_text(
        json.dumps(
            {
                "input": "inputs/site.csv",
                "output": "out/rose.png",
                "figure": {"width_in": 6, "dpi": 120},
                "colormap": "coolwarm",
                "bar_width": "neighbour",
                "radial": {"ticks": 4},
            }
        ),
        encoding="utf-8",
    )

    config = load_rose_config(path)

    assert config.input_path == Path("inputs/site.csv")
    assert config.output_path == Path("out/rose.png")
    assert config.figsize == (6.0, 10.0)
    assert config.dpi == 120
    assert config.colormap == "coolwarm"
    assert config.bar_width == "neighbour"
    assert config.radial_ticks == 4
    assert config.radial_label_position_deg == pytest.approx(45.0)


def test_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "wind_rose.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid JSON configuration"):
        load_rose_config(path)


def test_unknown_bar_width_mode_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "wind_rose.json"
    path.write_text(json.dumps({"bar_width": "stacked"}), encoding="utf-8")

    with pytest.raises(ValueError, match="Unknown bar width mode"):
        load_rose_config(path)


def test_with_overrides_ignores_none() -> None:
    base = RoseConfig()

    assert base.with_overrides(dpi=None, colormap=None) is base
    updated = base.with_overrides(dpi=150, colormap=None)
    assert updated.dpi == 150
    assert updated.colormap == base.colormap


def test_non_positive_ticks_rejected() -> None:
    with pytest.raises(ValueError, match="radial_ticks"):
        RoseConfig(radial_ticks=0)
