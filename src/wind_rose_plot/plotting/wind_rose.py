"""Polar wind-rose rendering.

The renderer draws one bar per direction bin on a polar axes oriented with
north at the top and angles increasing clockwise. Bars are coloured on a
diverging colormap anchored at the observed frequency range (red for the most
frequent directions, blue for the least frequent with the default
``RdBu_r``), a colorbar documents the scale, and a boxed summary of the
record sits below the chart.

Each call builds and owns its own :class:`~matplotlib.figure.Figure`; the
figure is passed explicitly to every drawing step so that repeated renders in
one process never draw onto an earlier chart.
"""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.cm import ScalarMappable
from matplotlib.colors import Colormap, Normalize
from matplotlib.figure import Figure

from wind_rose_plot.io import (
    DEFAULT_CONFIG_PATH,
    RoseConfig,
    WindInput,
    load_rose_config,
    load_wind_input,
)
from wind_rose_plot.stats import (
    COMPASS_LABELS,
    compass_angles,
    compute_bar_geometry,
    format_number,
    format_summary,
    frequency_limits,
    radial_limit,
    radial_ticks,
    summarise_wind_input,
)

__all__ = [
    "COLORBAR_LABEL",
    "TITLE",
    "create_wind_rose",
    "plot_wind_rose_from_data",
]

LOGGER = logging.getLogger(__name__)

TITLE = "Wind Rose - Directional Frequency Distribution"
COLORBAR_LABEL = "Wind Frequency"
BAR_EDGE_COLOR = "black"
BAR_EDGE_WIDTH = 1.0
BAR_ALPHA = 0.9
SUMMARY_BOX = {
    "boxstyle": "round,pad=0.8",
    "facecolor": "lightgray",
    "alpha": 0.9,
    "edgecolor": "black",
}
_NON_INTERACTIVE_BACKENDS = frozenset({"agg", "cairo", "pdf", "pgf", "ps", "svg", "template"})


def _backend_is_interactive() -> bool:
    return matplotlib.get_backend().lower() not in _NON_INTERACTIVE_BACKENDS


def _draw_bars(ax: Axes, wind_data: WindInput, *, config: RoseConfig, cmap: Colormap, norm: Normalize) -> None:
    geometry = compute_bar_geometry(wind_data.bins, config.bar_width)
    frequencies = np.asarray(wind_data.freq, dtype="float64")
    ax.bar(
        geometry.lefts,
        frequencies,
        width=geometry.widths,
        align="edge",
        color=cmap(norm(frequencies)),
        edgecolor=BAR_EDGE_COLOR,
        linewidth=BAR_EDGE_WIDTH,
        alpha=BAR_ALPHA,
    )


def _configure_axes(ax: Axes, wind_data: WindInput, *, config: RoseConfig) -> None:
    ax.set_title(
        f"{TITLE}\nWind Speed: {format_number(wind_data.speed)} m/s",
        fontsize=14,
        fontweight="bold",
        pad=20,
    )

    # Meteorological convention: north up, clockwise.
    ax.set_theta_zero_location("N")
    ax.set_theta_direction(-1)
    ax.set_thetagrids(compass_angles(), COMPASS_LABELS)

    max_freq = max(wind_data.freq)
    # An all-zero record still gets a unit radial axis anchored at 0.
    ax.set_ylim(0.0, radial_limit(max_freq) or 1.0)
    ax.set_rticks(radial_ticks(max_freq, config.radial_ticks))
    ax.set_rlabel_position(config.radial_label_position_deg)


def _attach_colorbar(fig: Figure, ax: Axes, *, cmap: Colormap, norm: Normalize) -> None:
    mappable = ScalarMappable(cmap=cmap, norm=norm)
    mappable.set_array([])
    colorbar = fig.colorbar(mappable, ax=ax, shrink=0.8, pad=0.1)
    colorbar.set_label(COLORBAR_LABEL, fontsize=12)


def _annotate_summary(ax: Axes, wind_data: WindInput) -> str:
    text = format_summary(summarise_wind_input(wind_data))
    ax.text(
        0.5,
        -0.15,
        text,
        transform=ax.transAxes,
        fontsize=10,
        verticalalignment="top",
        horizontalalignment="center",
        bbox=SUMMARY_BOX,
    )
    return text


def plot_wind_rose_from_data(
    wind_data: WindInput,
    *,
    output_path: str | Path | None = None,
    config: RoseConfig | None = None,
    show: bool | None = None,
) -> Figure:
    """Render ``wind_data`` as a colour-coded polar bar chart and save it.

    Parameters
    ----------
    wind_data:
        Direction bins, frequencies, mean speed and turbulence intensity.
    output_path:
        Destination image. Defaults to ``config.output_path``
        (``results/wind_rose_plot.png``). Parent directories are created and
        an existing file is overwritten.
    config:
        Rendering options; the :class:`RoseConfig` defaults when omitted.
    show:
        ``True`` hands the figure to :func:`matplotlib.pyplot.show`,
        ``False`` closes it after saving. ``None`` shows it only when the
        active backend can display figures.

    Returns
    -------
    matplotlib.figure.Figure
        The rendered figure.

    Raises
    ------
    ValueError
        If ``wind_data`` holds no direction bins.
    """

    if wind_data.n_directions == 0:
        raise ValueError("Cannot render a wind rose without at least one direction bin")

    config = config or RoseConfig()
    target = Path(output_path) if output_path is not None else config.output_path

    LOGGER.info("Creating wind rose plot")
    LOGGER.info("Wind directions: %d bins", wind_data.n_directions)
    LOGGER.info(
        "Frequency range: %.1f%% - %.1f%%",
        min(wind_data.freq) * 100.0,
        max(wind_data.freq) * 100.0,
    )

    fig, ax = plt.subplots(figsize=config.figsize, subplot_kw={"projection": "polar"})
    cmap = matplotlib.colormaps[config.colormap]
    vmin, vmax = frequency_limits(wind_data.freq)
    norm = Normalize(vmin=vmin, vmax=vmax)

    _draw_bars(ax, wind_data, config=config, cmap=cmap, norm=norm)
    _configure_axes(ax, wind_data, config=config)
    _attach_colorbar(fig, ax, cmap=cmap, norm=norm)
    summary_text = _annotate_summary(ax, wind_data)
    LOGGER.debug("Summary: %s", summary_text)

    target.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(target, dpi=config.dpi, bbox_inches="tight")
    LOGGER.info("Wind rose saved to: %s", target)
    LOGGER.info("Colour scale %s: high end = most frequent, low end = least frequent", config.colormap)

    interactive = _backend_is_interactive()
    display = interactive if show is None else show
    if display:
        plt.show()
    if not (display and interactive):
        plt.close(fig)
    return fig


def create_wind_rose(
    input_path: str | Path | None = None,
    *,
    output_path: str | Path | None = None,
    config: RoseConfig | None = None,
    show: bool | None = None,
) -> Figure:
    """Load the wind record and render it in one pass.

    Every argument is optional: the configuration is read from
    ``config/wind_rose.json`` (defaults when absent) and the record from the
    configured input path (``data/wind_input.json``).
    """

    config = config or load_rose_config(DEFAULT_CONFIG_PATH)
    source = Path(input_path) if input_path is not None else config.input_path
    LOGGER.info("Loading wind input from %s", source)
    wind_data = load_wind_input(source)
    return plot_wind_rose_from_data(wind_data, output_path=output_path, config=config, show=show)
