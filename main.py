#!/usr/bin/env python3
"""
Open Correlation CLI

Reads (x, y) pairs from a CSV file, fits Y = A + B*X over a fixed-size
sample store and prints the result.

Usage:
    python main.py data.csv --capacity 50 --running
"""

import sys
import logging
import argparse

from rich.console import Console

from correlation.config import config_from_args
from correlation.engine import Correlation
from correlation.samples import read_pairs
from correlation.report import build_status_panel, build_samples_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Open Correlation - linear regression over a bounded sample set")
    parser.add_argument("path", help="CSV file with x,y columns")
    parser.add_argument("--capacity", type=int, default=20, help="Number of sample slots (default: 20)")
    parser.add_argument("--running", action="store_true", help="Keep the most recent samples when full instead of rejecting")
    parser.add_argument("--no-r2", action="store_true", help="Skip R / R² calculation")
    parser.add_argument("--no-e2", action="store_true", help="Skip residual sum of squares")
    parser.add_argument("--forced", action="store_true", help="Force recalculation")
    parser.add_argument("--show-samples", action="store_true", help="Print the stored samples with residuals")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def run(args, console: Console) -> int:
    """Execute the CLI. Returns the process exit code."""
    try:
        pairs = read_pairs(args.path)
    except OSError as e:
        logging.error(f"Failed to read {args.path}: {e}")
        console.print(f"[red]✗ Cannot read {args.path}: {e}[/red]")
        return 1

    try:
        corr = Correlation.from_config(config_from_args(args))
    except (TypeError, ValueError) as e:
        console.print(f"[red]✗ {e}[/red]")
        return 1

    rejected = 0
    for x, y in pairs:
        if not corr.add(x, y):
            rejected += 1

    if rejected:
        console.print(f"[yellow]⚠ Store full: {rejected} samples rejected (use --running to keep the latest)[/yellow]")

    if not corr.calculate(forced=args.forced):
        console.print("[red]✗ No samples to correlate[/red]")
        return 1

    console.print(build_status_panel(corr, title=str(args.path)))
    if args.show_samples:
        console.print(build_samples_table(corr))
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    return run(args, Console())


if __name__ == '__main__':
    sys.exit(main())
