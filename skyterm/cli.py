"""CLI entry point for the terminal weather viewer."""

import argparse
import logging
import sys
from contextlib import ExitStack

import yaml
from pydantic import ValidationError

from skyterm.app import print_view, run_app
from skyterm.config.loader import load_config, set_config_value
from skyterm.config.schema import AppConfig
from skyterm.diagnostics import diagnostic_log
from skyterm.models.common import TemperatureUnit, ViewMode
from skyterm.models.forecast import Coordinate

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2


def parse_coordinate(values: list[str]) -> Coordinate | None:
    """Parse LAT LON positionals; None if absent, malformed or out of range."""
    if len(values) != 2:
        return None
    try:
        return Coordinate(float(values[0]), float(values[1]))
    except ValueError:
        return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skyterm",
        description="Show Open-Meteo weather for a coordinate in the terminal",
    )
    parser.add_argument(
        "coords", nargs="*", metavar="LAT LON",
        help="Latitude and longitude in degrees (default: New York City)",
    )
    parser.add_argument("--config", help="Config YAML path")
    parser.add_argument(
        "--view", choices=[m.value for m in ViewMode], help="What to display"
    )
    parser.add_argument("--field", help="Daily field to chart")
    parser.add_argument("--days", type=int, help="Forecast horizon in days")
    parser.add_argument(
        "--unit", choices=[u.value for u in TemperatureUnit], help="Temperature unit"
    )
    parser.add_argument("--log-file", help="Diagnostic log path")
    parser.add_argument(
        "--print", action="store_true", dest="print_only",
        help="Print the view once to stdout instead of starting the TUI",
    )
    parser.add_argument(
        "--set", action="append", default=[], metavar="KEY=VALUE",
        help="Override a config value, e.g. chart.margin=2 (repeatable)",
    )
    return parser


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    overrides: list[tuple[str, str]] = []
    for kv in args.set:
        if "=" not in kv:
            raise ValueError(f"use key=value format: {kv!r}")
        key, value = kv.split("=", 1)
        overrides.append((key.strip(), value.strip()))

    flags = {
        "ui.view": args.view,
        "chart.field": args.field,
        "request.forecast_days": args.days,
        "request.temperature_unit": args.unit,
        "logging.file": args.log_file,
    }
    overrides.extend((k, v) for k, v in flags.items() if v is not None)

    for key, value in overrides:
        config = set_config_value(config, key, value)

    # Charting a field means requesting it
    if config.chart.field not in config.request.daily_fields:
        config = set_config_value(
            config,
            "request.daily_fields",
            [*config.request.daily_fields, config.chart.field],
        )
    return config


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.coords) > 2:
        parser.error("expected at most two positional arguments: LAT LON")

    try:
        config = _apply_overrides(load_config(args.config), args)
    except (OSError, yaml.YAMLError, ValidationError, KeyError, ValueError) as e:
        print(f"Config error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    coordinate = parse_coordinate(args.coords)
    if coordinate is not None:
        config = config.model_copy(
            update={
                "location": config.location.model_copy(
                    update={
                        "latitude": coordinate.latitude,
                        "longitude": coordinate.longitude,
                    }
                )
            }
        )

    with ExitStack() as stack:
        try:
            stack.enter_context(diagnostic_log(config.logging.file, config.logging.level))
        except OSError as e:
            print(f"Log file error: {e}", file=sys.stderr)
            return EXIT_CONFIG_ERROR

        logger.info("skyterm starting with view=%s", config.ui.view.value)
        if args.coords and coordinate is None:
            logger.warning(
                "Could not parse coordinates %r, using default %.4f,%.4f",
                args.coords, config.location.latitude, config.location.longitude,
            )
        if args.print_only:
            return print_view(config)
        return run_app(config)


if __name__ == "__main__":
    sys.exit(main())
