"""CLI entry point for stepseries.

Enables ``python -m stepseries <command>`` usage.

Subcommands:
    project  - Resample a CSV series onto new breakpoints.
    describe - Machine-readable API schema (JSON to stdout).
    version  - Print stepseries version.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

import pandas as pd


def _parse_breakpoints(raw: str, datetime_axis: bool) -> list[Any]:
    """Split a comma-separated breakpoint list and convert to the axis type."""
    tokens = [t.strip() for t in raw.split(",") if t.strip()]
    if datetime_axis:
        return list(pd.to_datetime(tokens))
    return [float(t) for t in tokens]


def _cmd_project(args: argparse.Namespace) -> int:
    """Project a CSV series and write the result as CSV."""
    from stepseries.core.config import ProjectionConfig
    from stepseries.core.errors import StepSeriesError
    from stepseries.resampling import project
    from stepseries.series import from_frame, to_frame

    try:
        df = pd.read_csv(args.input)
    except (OSError, pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        print(f"Cannot read input: {exc}", file=sys.stderr)
        return 1

    datetime_axis = False
    if args.time_col in df.columns and not pd.api.types.is_numeric_dtype(df[args.time_col]):
        try:
            df[args.time_col] = pd.to_datetime(df[args.time_col])
        except (ValueError, TypeError) as exc:
            print(f"Cannot parse column '{args.time_col}' as datetimes: {exc}", file=sys.stderr)
            return 1
        datetime_axis = True

    try:
        breakpoints = _parse_breakpoints(args.breakpoints, datetime_axis)
        series = from_frame(df, time_col=args.time_col, target_col=args.target_col)
        result = project(
            series,
            breakpoints,
            args.kind,
            config=ProjectionConfig(method=args.method),
        )
    except StepSeriesError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Invalid breakpoints: {exc}", file=sys.stderr)
        return 1

    out = to_frame(result, time_col=args.time_col, target_col=args.target_col)
    out.to_csv(args.output if args.output else sys.stdout, index=False)
    return 0


def _cmd_describe() -> int:
    """Print machine-readable API schema as JSON."""
    from stepseries.discovery import describe

    info = describe()
    json.dump(info, sys.stdout, indent=2, default=str)
    print()  # trailing newline
    return 0


def _cmd_version() -> int:
    """Print version string."""
    import stepseries

    print(stepseries.__version__)
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="stepseries",
        description="stepseries - step-function series and interval-overlap resampling",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    project_parser = subparsers.add_parser("project", help="Resample a CSV series onto breakpoints")
    project_parser.add_argument("input", help="Input CSV file path")
    project_parser.add_argument(
        "--breakpoints", "-b", required=True, help="Comma-separated new breakpoints"
    )
    project_parser.add_argument(
        "--kind",
        choices=["countable", "non_countable"],
        default="countable",
        help="Value classification (default: countable)",
    )
    project_parser.add_argument(
        "--method",
        choices=["overlap", "sweep"],
        default="overlap",
        help="Projection strategy (default: overlap)",
    )
    project_parser.add_argument("--time-col", default="ds", help="Index column (default: ds)")
    project_parser.add_argument("--target-col", default="y", help="Value column (default: y)")
    project_parser.add_argument("--output", "-o", help="Output CSV path (default: stdout)")

    subparsers.add_parser("describe", help="Machine-readable API schema (JSON)")
    subparsers.add_parser("version", help="Print version")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "project":
        return _cmd_project(args)
    elif args.command == "describe":
        return _cmd_describe()
    elif args.command == "version":
        return _cmd_version()
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
