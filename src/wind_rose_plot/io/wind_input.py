"""Wind-statistics record consumed by the wind-rose renderer.

The record is deliberately small: direction bins (degrees clockwise from
geographic north), the relative frequency attributed to each bin, a mean wind
speed and a turbulence intensity. Files may be stored either as a JSON object
or as a CSV table with one row per direction bin.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

import pandas as pd

__all__ = [
    "DEFAULT_WIND_INPUT",
    "WindInput",
    "load_wind_input",
    "wind_input_from_mapping",
]

DEFAULT_WIND_INPUT = Path("data") / "wind_input.json"

_REQUIRED_KEYS = ("bins", "freq", "speed", "ti")
_NESTED_KEY = "wind_input"


@dataclass(frozen=True)
class WindInput:
    """Immutable description of an observation set."""

    bins: tuple[float, ...]
    freq: tuple[float, ...]
    speed: float
    ti: float

    def __post_init__(self) -> None:
        bins = tuple(float(value) for value in self.bins)
        freq = tuple(float(value) for value in self.freq)

        if len(bins) != len(freq):
            raise ValueError(
                f"bins and freq must contain the same number of elements (got {len(bins)} and {len(freq)})"
            )
        for value in freq:
            if not math.isfinite(value) or value < 0.0:
                raise ValueError(f"Frequencies must be finite and non-negative; received {value!r}")

        # Frozen dataclass: normalise through object.__setattr__.
        object.__setattr__(self, "bins", bins)
        object.__setattr__(self, "freq", freq)
        object.__setattr__(self, "speed", float(self.speed))
        object.__setattr__(self, "ti", float(self.ti))

    @property
    def n_directions(self) -> int:
        return len(self.bins)

    def to_frame(self) -> pd.DataFrame:
        """Return the directional histogram as a two-column frame."""

        return pd.DataFrame(
            {
                "direction_deg": list(self.bins),
                "frequency": list(self.freq),
            }
        )


def wind_input_from_mapping(payload: Mapping[str, object]) -> WindInput:
    """Build a :class:`WindInput` from a decoded JSON document.

    The record may sit at the top level or under a ``"wind_input"`` key when
    it is embedded in a larger document.
    """

    nested = payload.get(_NESTED_KEY)
    if isinstance(nested, Mapping):
        payload = nested

    missing = [key for key in _REQUIRED_KEYS if key not in payload]
    if missing:
        raise ValueError(f"Wind input is missing required key(s): {', '.join(missing)}")

    bins = payload["bins"]
    freq = payload["freq"]
    if not isinstance(bins, Sequence) or isinstance(bins, str):
        raise ValueError(f"'bins' must be a list of angles; received {type(bins).__name__}")
    if not isinstance(freq, Sequence) or isinstance(freq, str):
        raise ValueError(f"'freq' must be a list of frequencies; received {type(freq).__name__}")

    return WindInput(
        bins=tuple(bins),
        freq=tuple(freq),
        speed=_scalar(payload, "speed"),
        ti=_scalar(payload, "ti"),
    )


def _scalar(payload: Mapping[str, object], key: str) -> float:
    value = payload[key]
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValueError(f"'{key}' must be a number; received {value!r}") from exc


def _load_json(path: Path) -> WindInput:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in wind input file: {path}") from exc
    if not isinstance(payload, Mapping):
        raise ValueError(f"Wind input file must contain a JSON object: {path}")
    return wind_input_from_mapping(payload)


def _load_csv(path: Path) -> WindInput:
    frame = pd.read_csv(path)
    missing = [key for key in _REQUIRED_KEYS if key not in frame.columns]
    if missing:
        raise ValueError(f"Wind input table {path} is missing column(s): {', '.join(missing)}")
    if frame.empty:
        return WindInput(bins=(), freq=(), speed=float("nan"), ti=float("nan"))

    first = frame.iloc[0]
    return WindInput(
        bins=tuple(frame["bins"].astype("float64")),
        freq=tuple(frame["freq"].astype("float64")),
        speed=float(first["speed"]),
        ti=float(first["ti"]),
    )


def load_wind_input(path: str | Path = DEFAULT_WIND_INPUT) -> WindInput:
    """Read a wind-statistics record from ``path``.

    Parameters
    ----------
    path:
        JSON (``.json``) or tabular (``.csv``) file. Defaults to
        ``data/wind_input.json`` relative to the working directory.

    Returns
    -------
    WindInput
        The decoded, validated record.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ValueError
        If the file cannot be decoded, lacks one of ``bins``, ``freq``,
        ``speed`` or ``ti``, or uses an unsupported suffix.
    """

    target = Path(path)
    if not target.exists():
        raise FileNotFoundError(f"Wind input file not found: {target}")

    suffix = target.suffix.lower()
    if suffix == ".json":
        return _load_json(target)
    if suffix == ".csv":
        return _load_csv(target)
    raise ValueError(f"Unsupported wind input format {suffix!r} for {target}; expected .json or .csv")
