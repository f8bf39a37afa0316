"""JSON configuration for the wind-rose renderer.

The configuration file is optional. When ``config/wind_rose.json`` is absent
every value falls back to the defaults declared on :class:`RoseConfig`, which
reproduce the reference chart (10x10 in figure, ``RdBu_r`` colormap, 300 DPI,
five radial ticks labelled at 45 degrees).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping

from .wind_input import DEFAULT_WIND_INPUT

__all__ = [
    "BAR_WIDTH_MODES",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_OUTPUT_PATH",
    "RoseConfig",
    "load_json_config",
    "load_rose_config",
]

DEFAULT_CONFIG_PATH = Path("config") / "wind_rose.json"
DEFAULT_OUTPUT_PATH = Path("results") / "wind_rose_plot.png"
BAR_WIDTH_MODES = ("uniform", "neighbour")


@dataclass(frozen=True)
class RoseConfig:
    """Rendering options shared by the library entry points and the CLI."""

    input_path: Path = DEFAULT_WIND_INPUT
    output_path: Path = DEFAULT_OUTPUT_PATH
    figure_width_in: float = 10.0
    figure_height_in: float = 10.0
    dpi: int = 300
    colormap: str = "RdBu_r"
    bar_width: str = "uniform"
    radial_ticks: int = 5
    radial_label_position_deg: float = 45.0

    def __post_init__(self) -> None:
        if self.bar_width not in BAR_WIDTH_MODES:
            raise ValueError(
                f"Unknown bar width mode {self.bar_width!r}; expected one of {', '.join(BAR_WIDTH_MODES)}"
            )
        if self.radial_ticks < 1:
            raise ValueError(f"radial_ticks must be a positive integer; received {self.radial_ticks!r}")
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive; received {self.dpi!r}")

    @property
    def figsize(self) -> tuple[float, float]:
        return (self.figure_width_in, self.figure_height_in)

    def with_overrides(self, **overrides: object) -> "RoseConfig":
        """Return a copy replacing every override that is not ``None``."""

        values = {key: value for key, value in overrides.items() if value is not None}
        if not values:
            return self
        return replace(self, **values)  # type: ignore[arg-type]


def load_json_config(path: Path | None) -> Mapping[str, object]:
    if path is None:
        return {}
    if not path.exists():
        return {}
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON configuration: {path}") from exc


def _cfg_get(config: Mapping[str, object], *keys: str, default: object | None = None) -> object | None:
    data: object = config
    for key in keys:
        if not isinstance(data, Mapping) or key not in data:
            return default
        data = data[key]  # type: ignore[index]
    return data


def load_rose_config(path: str | Path | None = DEFAULT_CONFIG_PATH) -> RoseConfig:
    """Return the renderer configuration merged with the defaults.

    Parameters
    ----------
    path:
        Location of the JSON configuration. ``None`` or a missing file yields
        the default :class:`RoseConfig`.

    Raises
    ------
    ValueError
        If the file exists but is not valid JSON, or declares an unknown bar
        width mode or a non-positive tick count.
    """

    config = load_json_config(Path(path) if path is not None else None)
    defaults = RoseConfig()

    input_path = _cfg_get(config, "input")
    output_path = _cfg_get(config, "output")
    width = _cfg_get(config, "figure", "width_in")
    height = _cfg_get(config, "figure", "height_in")
    dpi = _cfg_get(config, "figure", "dpi")
    ticks = _cfg_get(config, "radial", "ticks")
    label_position = _cfg_get(config, "radial", "label_position_deg")

    return defaults.with_overrides(
        input_path=Path(str(input_path)) if input_path else None,
        output_path=Path(str(output_path)) if output_path else None,
        figure_width_in=float(width) if width is not None else None,  # type: ignore[arg-type]
        figure_height_in=float(height) if height is not None else None,  # type: ignore[arg-type]
        dpi=int(dpi) if dpi is not None else None,  # type: ignore[arg-type]
        colormap=_cfg_get(config, "colormap"),
        bar_width=_cfg_get(config, "bar_width"),
        radial_ticks=int(ticks) if ticks is not None else None,  # type: ignore[arg-type]
        radial_label_position_deg=float(label_position) if label_position is not None else None,  # type: ignore[arg-type]
    )
