"""Tests for the wind-rose geometry and summary helpers."""

from __future__ import annotations

import math

import numpy as np
import pytest

from wind_rose_plot.io import WindInput
from wind_rose_plot.stats import (
    COMPASS_LABELS,
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


@pytest.mark.parametrize("n_bins", [4, 8, 12, 16, 36])
def test_uniform_widths_cover_the_circle(n_bins: int) -> None:
    widths = uniform_bar_widths(n_bins)

    np.testing.assert_allclose(np.rad2deg(widths), 360.0 / n_bins)
    assert widths.sum() == pytest.approx(2.0 * math.pi)


def test_uniform_widths_reject_empty_input() -> None:
    with pytest.raises(ValueError, match="at least one direction bin"):
        uniform_bar_widths(0)


def test_directions_to_radians() -> None:
    np.testing.assert_allclose(directions_to_radians([0.0, 90.0, 180.0]), [0.0, math.pi / 2, math.pi])


def test_neighbour_widths_match_uniform_for_even_spacing() -> None:
    bins = np.arange(16) * 22.5

    np.testing.assert_allclose(neighbour_bar_widths(bins), uniform_bar_widths(16))


def test_neighbour_widths_follow_irregular_spacing() -> None:
    widths = np.rad2deg(neighbour_bar_widths([0.0, 30.0, 180.0]))

    # Gaps: 0->30 = 30, 30->180 = 150, 180->360 = 180.
    np.testing.assert_allclose(widths, [(180.0 + 30.0) / 2, (30.0 + 150.0) / 2, (150.0 + 180.0) / 2])
    assert widths.sum() == pytest.approx(360.0)


def test_neighbour_widths_ignore_input_order() -> None:
    forward = neighbour_bar_widths([0.0, 30.0, 180.0])
    shuffled = neighbour_bar_widths([180.0, 0.0, 30.0])

    np.testing.assert_allclose(shuffled, forward[[2, 0, 1]])


def test_neighbour_geometry_tiles_without_overlap() -> None:
    geometry = compute_bar_geometry([0.0, 30.0, 180.0], mode="neighbour")
    lefts = np.rad2deg(geometry.lefts)
    rights = lefts + np.rad2deg(geometry.widths)

    # Each bar ends where the next one (in angular order) begins.
    np.testing.assert_allclose(rights[0], lefts[1])
    np.testing.assert_allclose(rights[1], lefts[2])
    np.testing.assert_allclose(rights[2] - 360.0, lefts[0])


def test_uniform_geometry_centres_bars_on_directions() -> None:
    geometry = compute_bar_geometry([0.0, 90.0, 180.0, 270.0])

    np.testing.assert_allclose(geometry.centers, np.deg2rad([0.0, 90.0, 180.0, 270.0]))
    np.testing.assert_allclose(geometry.lefts, geometry.centers - math.pi / 4)


def test_single_bin_fills_the_circle() -> None:
    for mode in ("uniform", "neighbour"):
        geometry = compute_bar_geometry([45.0], mode=mode)
        assert geometry.widths[0] == pytest.approx(2.0 * math.pi)


def test_unknown_geometry_mode_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown bar width mode"):
        compute_bar_geometry([0.0, 180.0], mode="wide")


def test_normalisation_anchors_extremes() -> None:
    scaled = normalise_frequencies([0.4, 0.3, 0.2, 0.1])

    np.testing.assert_allclose(scaled, [1.0, 2.0 / 3.0, 1.0 / 3.0, 0.0])


def test_degenerate_range_maps_to_mid_scale() -> None:
    vmin, vmax = frequency_limits([0.25, 0.25, 0.25, 0.25])

    assert vmin < 0.25 < vmax
    np.testing.assert_allclose(normalise_frequencies([0.25, 0.25, 0.25, 0.25]), 0.5)


def test_degenerate_zero_range_stays_finite() -> None:
    scaled = normalise_frequencies([0.0, 0.0])

    assert np.all(np.isfinite(scaled))
    np.testing.assert_allclose(scaled, 0.5)


def test_radial_limit_and_ticks() -> None:
    assert radial_limit(0.4) == pytest.approx(0.44)
    np.testing.assert_allclose(radial_ticks(0.5, 5), [0.1, 0.2, 0.3, 0.4, 0.5])


def test_radial_ticks_reject_non_positive_count() -> None:
    with pytest.raises(ValueError):
        radial_ticks(0.5, 0)


def test_compass_grid_has_sixteen_points() -> None:
    angles = compass_angles()

    assert len(COMPASS_LABELS) == 16
    np.testing.assert_allclose(angles, np.arange(0.0, 360.0, 22.5))
    assert COMPASS_LABELS[0] == "N"
    assert COMPASS_LABELS[4] == "E"
    assert COMPASS_LABELS[-1] == "NNW"


@pytest.mark.parametrize(
    ("angle", "expected"),
    [(0.0, "N"), (11.0, "N"), (12.0, "NNE"), (90.0, "E"), (200.0, "SSW"), (350.0, "N"), (-90.0, "W"), (720.0, "N")],
)
def test_compass_label(angle: float, expected: str) -> None:
    assert compass_label(angle) == expected


def test_summary_reports_dominant_direction() -> None:
    record = WindInput(bins=(0.0, 90.0, 180.0, 270.0), freq=(0.4, 0.3, 0.2, 0.1), speed=8.0, ti=0.12)

    summary = summarise_wind_input(record)

    assert summary.total_directions == 4
    assert summary.dominant_direction_deg == 0.0
    assert summary.dominant_compass_point == "N"
    assert summary.max_frequency_pct == pytest.approx(40.0)
    assert summary.min_frequency_pct == pytest.approx(10.0)
    assert summary.turbulence_intensity_pct == pytest.approx(12.0)
    assert summary.frequency_total == pytest.approx(1.0)


def test_summary_dominant_direction_uses_argmax() -> None:
    bins = (10.0, 100.0, 190.0, 280.0)
    freq = (0.1, 0.2, 0.6, 0.1)

    summary = summarise_wind_input(WindInput(bins=bins, freq=freq, speed=5.0, ti=0.2))

    assert summary.dominant_direction_deg == bins[int(np.argmax(freq))]


def test_summary_rejects_empty_record() -> None:
    with pytest.raises(ValueError):
        summarise_wind_input(WindInput(bins=(), freq=(), speed=5.0, ti=0.1))


def test_format_summary_text() -> None:
    record = WindInput(bins=(0.0, 90.0, 180.0, 270.0), freq=(0.4, 0.3, 0.2, 0.1), speed=8.0, ti=0.12)

    text = format_summary(summarise_wind_input(record))

    assert text == (
        "Total Directions: 4  |  Avg Wind Speed: 8 m/s  |  Turbulence Intensity: 12.0%  |  "
        "Dominant Direction: 0°  |  Max Frequency: 40.0%"
    )


def test_format_summary_keeps_full_precision() -> None:
    record = WindInput(bins=(0.0, 123.4567891), freq=(0.1, 0.9), speed=12.3456789, ti=0.1)

    text = format_summary(summarise_wind_input(record))

    assert "Avg Wind Speed: 12.3456789 m/s" in text
    assert "Dominant Direction: 123.4567891°" in text


@pytest.mark.parametrize(("value", "expected"), [(8.0, "8"), (22.5, "22.5"), (0.0, "0"), (123.4567891, "123.4567891")])
def test_format_number(value: float, expected: str) -> None:
    assert format_number(value) == expected
