# octagon.py
# Akl-Toussaint pre-filter: the convex octagon spanned by eight directional extrema.
from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple

from models import Point

logger = logging.getLogger(__name__)

# Slot order: minX, min(X+Y), minY, max(X-Y), maxX, max(X+Y), maxY, min(X-Y).
# Walking the slots in this order traces the octagon counter-clockwise.


def find_extreme_set(pool: Sequence[Point]) -> Tuple[List[Point], List[Point]]:
    """Split ``pool`` into the extreme octagon and the points left to classify.

    The scan runs once over ``pool`` from the back; a point replaces the
    current holder of a slot only when strictly better, so among ties the
    first one met by the reverse scan (the last in ``pool`` order) wins.
    Slots held by the same point collapse into one hull entry. ``pool`` is
    not modified; the returned remainder is a new list.
    """

    best = [math.inf, math.inf, math.inf, -math.inf, -math.inf, -math.inf, -math.inf, math.inf]
    holders: List[Optional[int]] = [None] * 8

    for i in range(len(pool) - 1, -1, -1):
        p = pool[i]
        total = p.x + p.y
        diff = p.x - p.y
        if p.x < best[0]:
            best[0], holders[0] = p.x, i
        if total < best[1]:
            best[1], holders[1] = total, i
        if p.y < best[2]:
            best[2], holders[2] = p.y, i
        if diff > best[3]:
            best[3], holders[3] = diff, i
        if p.x > best[4]:
            best[4], holders[4] = p.x, i
        if total > best[5]:
            best[5], holders[5] = total, i
        if p.y > best[6]:
            best[6], holders[6] = p.y, i
        if diff < best[7]:
            best[7], holders[7] = diff, i

    hull: List[Point] = []
    taken = set()
    for index in holders:
        if index is None:
            continue
        point = pool[index]
        if point in hull:
            continue
        hull.append(point)
        taken.add(index)

    remaining = [p for i, p in enumerate(pool) if i not in taken]
    logger.debug("octagon: %d extreme points, %d left to classify", len(hull), len(remaining))
    return hull, remaining


__all__ = ["find_extreme_set"]
