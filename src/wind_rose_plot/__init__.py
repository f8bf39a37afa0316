"""Top-level package for the wind-rose renderer."""

from __future__ import annotations

from .io import WindInput, load_wind_input
from .plotting import create_wind_rose, plot_wind_rose_from_data

__all__ = [
    "__version__",
    "WindInput",
    "create_wind_rose",
    "load_wind_input",
    "plot_wind_rose_from_data",
]

__version__ = "0.1.0"
