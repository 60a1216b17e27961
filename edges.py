# edges.py
# Per-edge unit vectors for the octagon and the filing of outlying points against them.
from __future__ import annotations

import bisect
import logging
from typing import List, Sequence

from geometry import cross_product, dot_product, unit_vector
from models import CandidateEntry, EdgeFrame, Point

logger = logging.getLogger(__name__)


def build_edge_frame(hull: Sequence[Point]) -> EdgeFrame:
    """Unit direction of every edge ``hull[i] -> hull[i + 1]``, wrapping at the end."""

    n = len(hull)
    return EdgeFrame(tuple(unit_vector(hull[i], hull[(i + 1) % n]) for i in range(n)))


class CandidateList:
    """Candidates for one edge, kept ascending by projection along the edge."""

    def __init__(self) -> None:
        self._keys: List[float] = []
        self._entries: List[CandidateEntry] = []

    def insert(self, entry: CandidateEntry) -> None:
        # Lands before the first entry whose projection is >= the new one.
        k = bisect.bisect_left(self._keys, entry.projection)
        self._keys.insert(k, entry.projection)
        self._entries.insert(k, entry)

    @property
    def points(self) -> List[Point]:
        return [entry.point for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)


def classify_candidates(
    pool: Sequence[Point],
    hull: Sequence[Point],
    frame: EdgeFrame,
) -> List[CandidateList]:
    """File each pool point under the first edge it lies on or outside of.

    A point is outside edge ``j`` when the cross product of the edge's unit
    direction with the offset from ``hull[j]`` is non-positive. Points outside
    no edge are interior and are dropped.
    """

    candidates = [CandidateList() for _ in range(len(hull))]
    interior = 0
    for p in pool:
        for j, (ux, uy) in enumerate(frame.directions):
            bx, by = p.offset_from(hull[j])
            if cross_product(ux, uy, bx, by) <= 0:
                candidates[j].insert(CandidateEntry(p, dot_product(ux, uy, bx, by)))
                break
        else:
            interior += 1
    logger.debug(
        "classified %d points: %d interior, per-edge candidates %s",
        len(pool),
        interior,
        [len(c) for c in candidates],
    )
    return candidates


__all__ = ["CandidateList", "build_edge_frame", "classify_candidates"]
