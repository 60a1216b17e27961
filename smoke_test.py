"""Quick smoke test for the load → validate → hull pipeline."""
from __future__ import annotations

import os
import random
import tempfile

from hull import find_hull
from io_points_csv import load_points_csv, write_points_csv
from models import HullConfig, Point
from validation import apply_options_to_config


def _write_tmp_csv(path: str) -> None:
    rng = random.Random(7)
    square = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]
    interior = [Point(rng.uniform(0.01, 0.99), rng.uniform(0.01, 0.99)) for _ in range(500)]
    points = interior + square
    rng.shuffle(points)
    write_points_csv(path, points)


def test_pipeline() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = os.path.join(tmpdir, "cloud.csv")
        _write_tmp_csv(csv_path)
        points = load_points_csv(csv_path)
        cfg = apply_options_to_config({"start_at_leftmost": "yes"}, HullConfig())
        hull = find_hull(points, cfg)
        assert hull == [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]


if __name__ == "__main__":
    test_pipeline()
    print("OK")
