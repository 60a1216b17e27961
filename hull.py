# hull.py
# Entry points: octagon pruning, per-edge classification and refinement, in that order.
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import numpy as np

from edges import build_edge_frame, classify_candidates
from models import HullConfig, Point, as_points
from octagon import find_extreme_set
from refinement import refine_edge, strip_flat_vertices
from validation import InvalidPointError, distinct_points, validate_points

logger = logging.getLogger(__name__)


def _rotate_to(hull: List[Point], start: Point) -> List[Point]:
    k = hull.index(start)
    return hull[k:] + hull[:k]


def find_hull(points: Iterable[Point], config: Optional[HullConfig] = None) -> List[Point]:
    """Convex hull of ``points`` as a counter-clockwise list of vertices.

    Only strict corners are returned: points on a side, and repeats, are
    left out. ``points`` is left untouched. Fewer than three distinct
    extreme points give the degenerate result directly (empty, a single
    point, or the two ends of a segment).
    """

    cfg = config or HullConfig()
    pool = validate_points(points, cfg)
    n_in = len(pool)
    pool = distinct_points(pool)

    octagon, pool = find_extreme_set(pool)
    hull = list(octagon)
    if len(hull) >= 3:
        frame = build_edge_frame(hull)
        candidates = classify_candidates(pool, hull, frame)
        # Back to front so that insertions never shift an edge still to come.
        for j in range(len(hull) - 1, -1, -1):
            refine_edge(hull, j, candidates[j].points)

    hull = strip_flat_vertices(hull)
    if not cfg.start_at_leftmost:
        survivor = next((p for p in octagon if p in hull), None)
        if survivor is not None:
            hull = _rotate_to(hull, survivor)
    logger.debug("hull: %d input points -> %d vertices", n_in, len(hull))
    return hull


def find_hull_array(table, config: Optional[HullConfig] = None) -> np.ndarray:
    """Same as :func:`find_hull` for an ``N x 2`` table of ``(x, y)`` rows.

    Returns an ``M x 2`` float array holding the hull vertices in order.
    """

    try:
        arr = np.asarray(table, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidPointError(f"Could not read coordinate table: {exc}") from exc
    if arr.ndim == 1 and arr.size == 0:
        arr = arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidPointError(f"Expected an N x 2 table of coordinates, got shape {arr.shape}.")

    hull = find_hull(as_points(arr.tolist()), config)
    return np.array([p.xy for p in hull], dtype=float).reshape(len(hull), 2)


__all__ = ["find_hull", "find_hull_array"]
