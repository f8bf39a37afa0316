"""IO contracts for the wind-rose renderer.

Two inputs feed a rendering pass: the wind-statistics record produced by the
data provider (:mod:`wind_rose_plot.io.wind_input`) and the optional
rendering configuration (:mod:`wind_rose_plot.io.config`). Both are read from
paths relative to the working directory unless an absolute path is given.
"""

from __future__ import annotations

from .config import (
    BAR_WIDTH_MODES,
    DEFAULT_CONFIG_PATH,
    DEFAULT_OUTPUT_PATH,
    RoseConfig,
    load_json_config,
    load_rose_config,
)
from .wind_input import DEFAULT_WIND_INPUT, WindInput, load_wind_input, wind_input_from_mapping

__all__ = [
    "BAR_WIDTH_MODES",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_OUTPUT_PATH",
    "DEFAULT_WIND_INPUT",
    "RoseConfig",
    "WindInput",
    "load_json_config",
    "load_rose_config",
    "load_wind_input",
    "wind_input_from_mapping",
]
