"""Geometry and summary statistics behind the wind-rose chart.

Everything here is plotting-library agnostic: angles are returned in radians
ready for a polar axes, colours are expressed as positions on a ``[0, 1]``
scale, and the summary string is plain text. Directions follow the
meteorological convention (degrees clockwise from geographic north).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from wind_rose_plot.io.wind_input import WindInput

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

COMPASS_LABELS: tuple[str, ...] = (
    "N",
    "NNE",
    "NE",
    "ENE",
    "E",
    "ESE",
    "SE",
    "SSE",
    "S",
    "SSW",
    "SW",
    "WSW",
    "W",
    "WNW",
    "NW",
    "NNW",
)
COMPASS_STEP_DEG = 360.0 / len(COMPASS_LABELS)
RADIAL_HEADROOM = 1.1
_DEGENERATE_PAD = 0.05


@dataclass(frozen=True)
class BarGeometry:
    """Angular placement of every bar, in radians."""

    centers: np.ndarray
    widths: np.ndarray

    @property
    def lefts(self) -> np.ndarray:
        """Leading edge of each bar (``center - width / 2``)."""

        return self.centers - self.widths / 2.0


@dataclass(frozen=True)
class RoseSummary:
    """Headline statistics annotated below the chart."""

    total_directions: int
    mean_speed_m_s: float
    turbulence_intensity_pct: float
    dominant_direction_deg: float
    max_frequency_pct: float
    min_frequency_pct: float
    frequency_total: float

    @property
    def dominant_compass_point(self) -> str:
        return compass_label(self.dominant_direction_deg)


def _require_bins(count: int) -> None:
    if count == 0:
        raise ValueError("A wind rose needs at least one direction bin; received an empty sequence")


def directions_to_radians(bins_deg: Sequence[float]) -> np.ndarray:
    return np.deg2rad(np.asarray(bins_deg, dtype="float64"))


def uniform_bar_widths(n_bins: int) -> np.ndarray:
    """Return ``n_bins`` identical widths of ``2π / n`` radians.

    Bins are assumed to be evenly spaced; uneven input will overlap or leave
    gaps. Use :func:`neighbour_bar_widths` for irregular spacing.
    """

    _require_bins(n_bins)
    return np.full(n_bins, 2.0 * math.pi / n_bins)


def neighbour_bar_widths(bins_deg: Sequence[float]) -> np.ndarray:
    """Return per-bar widths (radians) derived from the circular neighbour gaps.

    Each bar covers half of the gap to the previous direction plus half of the
    gap to the next one, so the bars tile the circle exactly. Evenly spaced
    bins reproduce :func:`uniform_bar_widths`.
    """

    angles = np.mod(np.asarray(bins_deg, dtype="float64"), 360.0)
    _require_bins(angles.size)
    if angles.size == 1:
        return np.array([2.0 * math.pi])

    previous_gaps, next_gaps = _neighbour_gaps(angles)
    return np.deg2rad((previous_gaps + next_gaps) / 2.0)


def _neighbour_gaps(angles: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Return the circular gap (degrees) to the previous and next direction of each angle."""

    order = np.argsort(angles, kind="stable")
    ordered = angles[order]
    next_ordered = np.diff(np.append(ordered, ordered[0] + 360.0))

    previous_gaps = np.empty_like(angles)
    next_gaps = np.empty_like(angles)
    previous_gaps[order] = np.roll(next_ordered, 1)
    next_gaps[order] = next_ordered
    return previous_gaps, next_gaps


def compute_bar_geometry(bins_deg: Sequence[float], mode: str = "uniform") -> BarGeometry:
    """Return bar centres and widths for the requested width ``mode``.

    With ``"neighbour"`` the centre of each bar is shifted so that its edges
    sit halfway to the adjacent directions; with ``"uniform"`` the bar is
    centred on its direction.
    """

    angles = np.asarray(bins_deg, dtype="float64")
    _require_bins(angles.size)

    if mode == "uniform":
        return BarGeometry(centers=directions_to_radians(angles), widths=uniform_bar_widths(angles.size))
    if mode != "neighbour":
        raise ValueError(f"Unknown bar width mode: {mode!r}")

    widths = neighbour_bar_widths(angles)
    if angles.size == 1:
        return BarGeometry(centers=directions_to_radians(angles), widths=widths)

    wrapped = np.mod(angles, 360.0)
    previous_gaps, _ = _neighbour_gaps(wrapped)
    centers = np.deg2rad(wrapped - previous_gaps / 2.0) + widths / 2.0
    return BarGeometry(centers=centers, widths=widths)


def frequency_limits(freq: Sequence[float]) -> tuple[float, float]:
    """Return the ``(vmin, vmax)`` pair anchoring the colour scale.

    A degenerate range (every frequency equal) is widened symmetrically so the
    shared value lands in the middle of the scale.
    """

    values = np.asarray(freq, dtype="float64")
    _require_bins(values.size)
    vmin = float(np.min(values))
    vmax = float(np.max(values))
    if math.isclose(vmin, vmax):
        pad = abs(vmax) * _DEGENERATE_PAD or _DEGENERATE_PAD
        return vmax - pad, vmax + pad
    return vmin, vmax


def normalise_frequencies(freq: Sequence[float]) -> np.ndarray:
    """Map frequencies linearly onto ``[0, 1]`` (lowest → 0, highest → 1)."""

    values = np.asarray(freq, dtype="float64")
    vmin, vmax = frequency_limits(values)
    return np.clip((values - vmin) / (vmax - vmin), 0.0, 1.0)


def radial_limit(max_freq: float) -> float:
    return RADIAL_HEADROOM * float(max_freq)


def radial_ticks(max_freq: float, n_ticks: int = 5) -> np.ndarray:
    """Return ``n_ticks`` evenly spaced radial ticks ending at ``max_freq`` (zero excluded)."""

    if n_ticks < 1:
        raise ValueError(f"n_ticks must be a positive integer; received {n_ticks!r}")
    return np.linspace(0.0, float(max_freq), n_ticks + 1)[1:]


def compass_angles() -> np.ndarray:
    """Angular gridline positions in degrees (0, 22.5, ..., 337.5)."""

    return np.arange(len(COMPASS_LABELS)) * COMPASS_STEP_DEG


def compass_label(angle_deg: float) -> str:
    """Return the nearest of the 16 compass points for ``angle_deg``."""

    index = int(math.floor((angle_deg % 360.0) / COMPASS_STEP_DEG + 0.5))
    return COMPASS_LABELS[index % len(COMPASS_LABELS)]


def summarise_wind_input(wind_input: WindInput) -> RoseSummary:
    """Compute the statistics reported alongside the chart.

    The dominant direction is the first bin carrying the maximum frequency.
    """

    freq = np.asarray(wind_input.freq, dtype="float64")
    _require_bins(freq.size)
    dominant_index = int(np.argmax(freq))

    return RoseSummary(
        total_directions=wind_input.n_directions,
        mean_speed_m_s=wind_input.speed,
        turbulence_intensity_pct=round(wind_input.ti * 100.0, 1),
        dominant_direction_deg=float(wind_input.bins[dominant_index]),
        max_frequency_pct=round(float(freq[dominant_index]) * 100.0, 1),
        min_frequency_pct=round(float(np.min(freq)) * 100.0, 1),
        frequency_total=float(np.sum(freq)),
    )


def format_number(value: float) -> str:
    """Format a reported value without trailing zeros or precision loss (``8``, ``22.5``, ``123.4567891``)."""

    return f"{value:.15g}"


def format_summary(summary: RoseSummary) -> str:
    parts = [
        f"Total Directions: {summary.total_directions}",
        f"Avg Wind Speed: {format_number(summary.mean_speed_m_s)} m/s",
        f"Turbulence Intensity: {summary.turbulence_intensity_pct:.1f}%",
        f"Dominant Direction: {format_number(summary.dominant_direction_deg)}°",
        f"Max Frequency: {summary.max_frequency_pct:.1f}%",
    ]
    return "  |  ".join(parts)
