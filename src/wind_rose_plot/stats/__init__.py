"""Numeric helpers for the wind-rose chart."""

from __future__ import annotations

from .rose import (
    COMPASS_LABELS,
    COMPASS_STEP_DEG,
    RADIAL_HEADROOM,
    BarGeometry,
    RoseSummary,
    compass_angles,
    compass_label,
    compute_bar_geometry,
    directions_to_radians,
    format_number,
    format_summary,
    frequency_limits,
    neighbour_bar_widths,
    normalise_frequencies,
    radial_limit,
    radial_ticks,
    summarise_wind_input,
    uniform_bar_widths,
)

__all__ = [
    "COMPASS_LABELS",
    "COMPASS_STEP_DEG",
    "RADIAL_HEADROOM",
    "BarGeometry",
    "RoseSummary",
    "compass_angles",
    "compass_label",
    "compute_bar_geometry",
    "directions_to_radians",
    "format_number",
    "format_summary",
    "frequency_limits",
    "neighbour_bar_widths",
    "normalise_frequencies",
    "radial_limit",
    "radial_ticks",
    "summarise_wind_input",
    "uniform_bar_widths",
]
