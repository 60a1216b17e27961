#!/usr/bin/env python3
"""Compute the convex hull of the points in a CSV file.

Usage: compute_hull.py path/to/points.csv [-o hull.csv]
"""
from __future__ import annotations

import argparse
import logging
import sys

import pandas as pd

from hull import find_hull_array
from io_points_csv import write_points_csv
from models import HullConfig, Point
from validation import InvalidPointError, apply_options_to_config

logger = logging.getLogger(__name__)


def read_table(csv_path: str):
    df = pd.read_csv(csv_path)
    columns = {c.lower(): c for c in df.columns}
    if "x" not in columns or "y" not in columns:
        raise InvalidPointError(
            f"'{csv_path}' needs x and y columns, found {list(df.columns)}"
        )
    return df[[columns["x"], columns["y"]]].dropna(how="all").to_numpy(dtype=float)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convex hull of a CSV point cloud")
    parser.add_argument("csv_path", help="input CSV with x and y columns")
    parser.add_argument("-o", "--output", help="write the hull here instead of printing it")
    parser.add_argument(
        "--keep-start",
        action="store_true",
        help="keep the octagon's first extreme point as the starting vertex",
    )
    parser.add_argument(
        "--allow-non-finite",
        action="store_true",
        help="do not reject NaN or infinite coordinates",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log each phase")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    options = {
        "start_at_leftmost": "false" if args.keep_start else "true",
        "reject_non_finite": "false" if args.allow_non_finite else "true",
    }
    cfg = apply_options_to_config(options, HullConfig())

    try:
        table = read_table(args.csv_path)
        hull = find_hull_array(table, cfg)
    except (OSError, ValueError) as exc:
        logger.error("could not compute hull for %s: %s", args.csv_path, exc)
        return 1

    if args.output:
        write_points_csv(args.output, [Point(float(x), float(y)) for x, y in hull])
    else:
        for x, y in hull:
            print(f"{float(x)!r},{float(y)!r}")
    print(f"N_in={len(table)}, N_hull={len(hull)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
