"""Command-line entry point for the wind-rose renderer.

Two sub-commands are provided:

``render``
    Loads the wind-statistics record, renders the polar chart and saves it
    (``results/wind_rose_plot.png`` by default). Values from
    ``config/wind_rose.json`` are used unless overridden on the command line.

``summary``
    Loads the record and prints the headline statistics (direction count,
    mean speed, turbulence intensity, dominant direction, frequency range) as
    JSON without rendering anything.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Sequence

from wind_rose_plot.io import BAR_WIDTH_MODES, DEFAULT_CONFIG_PATH, load_rose_config, load_wind_input
from wind_rose_plot.plotting import create_wind_rose
from wind_rose_plot.stats import summarise_wind_input


def _build_logger(verbose: bool) -> logging.Logger:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")
    return logging.getLogger("wind_rose_plot.cli")


def _handle_render(args: argparse.Namespace) -> int:
    logger = _build_logger(args.verbose)
    config = load_rose_config(args.config).with_overrides(
        input_path=args.input,
        output_path=args.output,
        bar_width=args.bar_width,
        colormap=args.colormap,
        dpi=args.dpi,
    )
    logger.debug("Resolved configuration: %s", config)

    create_wind_rose(config=config, show=args.show)
    return 0


def _handle_summary(args: argparse.Namespace) -> int:
    _build_logger(args.verbose)
    config = load_rose_config(args.config)
    source = args.input if args.input is not None else config.input_path

    summary = summarise_wind_input(load_wind_input(source))
    payload = asdict(summary)
    payload["dominant_compass_point"] = summary.dominant_compass_point
    payload["source"] = str(source)
    sys.stdout.write(json.dumps(payload, indent=2) + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wind-rose")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser(
        "render",
        help="Render the wind rose chart from a wind-statistics record.",
    )
    render.add_argument("--input", type=Path, help="Wind input record (.json or .csv).")
    render.add_argument("--output", type=Path, help="Destination image path.")
    render.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Rendering configuration JSON (defaults apply when the file is missing).",
    )
    render.add_argument(
        "--bar-width",
        choices=BAR_WIDTH_MODES,
        help="Bar width strategy: uniform 360/n sectors or widths derived from neighbouring bins.",
    )
    render.add_argument("--colormap", help="Matplotlib colormap name used for the frequency scale.")
    render.add_argument("--dpi", type=int, help="Resolution of the saved image.")
    render.add_argument(
        "--show",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Display the figure after saving (default: only when the backend is interactive).",
    )
    render.add_argument("--verbose", action="store_true", help="Increase logging verbosity.")
    render.set_defaults(func=_handle_render)

    summary = subparsers.add_parser(
        "summary",
        help="Print the wind rose summary statistics as JSON.",
    )
    summary.add_argument("--input", type=Path, help="Wind input record (.json or .csv).")
    summary.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Configuration JSON providing the default input path.",
    )
    summary.add_argument("--verbose", action="store_true", help="Increase logging verbosity.")
    summary.set_defaults(func=_handle_summary)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
