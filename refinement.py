"""Concavity elimination for the candidates filed against one octagon edge."""
from __future__ import annotations

import logging
from typing import List, Sequence

from geometry import dot_product, turn
from models import Point

logger = logging.getLogger(__name__)


def prune_concave_chain(chain: List[Point]) -> List[Point]:
    """Remove clockwise turns from ``chain`` in place and return it.

    ``chain`` runs from an edge's start vertex through its candidates, sorted
    along the edge, to the edge's end vertex. The two ends are never removed.
    The sweep walks from the second-to-last vertex toward the start. After a
    removal the same index is examined again, since the vertex that slid into
    it has a new predecessor; if the index now addresses the end vertex it
    steps back by one instead.
    """

    i = len(chain) - 2
    while i > 0:
        if turn(chain[i - 1], chain[i], chain[i + 1]) < 0:
            del chain[i]
            if i == len(chain) - 1:
                i -= 1
        else:
            i -= 1
    return chain


def refine_edge(hull: List[Point], edge_index: int, candidates: Sequence[Point]) -> int:
    """Splice the surviving ``candidates`` of edge ``edge_index`` into ``hull``.

    ``candidates`` must be sorted by projection along the edge. Survivors go in
    directly after ``hull[edge_index]``. Returns how many points were inserted.
    Edges are expected to be refined from the last index down so that earlier
    indices stay valid.
    """

    if not candidates:
        return 0
    position = edge_index + 1
    if len(candidates) == 1:
        # A lone point outside a convex edge is always a hull vertex.
        hull.insert(position, candidates[0])
        return 1

    start = hull[edge_index]
    end = hull[position % len(hull)]
    chain = prune_concave_chain([start, *candidates, end])
    survivors = chain[1:-1]
    for point in reversed(survivors):
        hull.insert(position, point)
    logger.debug(
        "edge %d: kept %d of %d candidates", edge_index, len(survivors), len(candidates)
    )
    return len(survivors)


def strip_flat_vertices(hull: Sequence[Point]) -> List[Point]:
    """Reduce a closed counter-clockwise ``hull`` to its strictly convex corners.

    Refinement keeps collinear candidates, and tied extremes can file points on
    a side in any order along it. This pass starts from the minimum ``(x, y)``
    vertex, which is always a corner, and walks the loop once: a vertex that
    the next point continues straight past is dropped, and a point lying back
    along the current side is skipped. The result starts at that vertex.
    """

    if not hull:
        return []
    first = min(range(len(hull)), key=lambda i: (hull[i].x, hull[i].y))
    origin = hull[first]
    stack: List[Point] = [origin]
    for k in range(1, len(hull)):
        p = hull[(first + k) % len(hull)]
        skip = False
        while len(stack) >= 2:
            a, b = stack[-2], stack[-1]
            bend = turn(a, b, p)
            if bend > 0:
                break
            if bend == 0 and dot_product(b.x - a.x, b.y - a.y, p.x - b.x, p.y - b.y) < 0:
                skip = True
                break
            stack.pop()
        if not skip and p != stack[-1]:
            stack.append(p)
    while len(stack) >= 3 and turn(stack[-2], stack[-1], origin) <= 0:
        stack.pop()
    if len(stack) < len(hull):
        logger.debug("dropped %d flat or repeated vertices", len(hull) - len(stack))
    return stack


__all__ = ["prune_concave_chain", "refine_edge", "strip_flat_vertices"]
