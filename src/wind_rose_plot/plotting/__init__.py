"""Matplotlib rendering of wind-rose charts."""

from __future__ import annotations

from .wind_rose import COLORBAR_LABEL, TITLE, create_wind_rose, plot_wind_rose_from_data

__all__ = ["COLORBAR_LABEL", "TITLE", "create_wind_rose", "plot_wind_rose_from_data"]
