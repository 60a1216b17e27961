# geometry.py
# Small, dependency-free 2D vector helpers plus a reference hull & containment check.

from __future__ import annotations
from typing import List, Sequence
import math

from models import Point, XY

def cross_product(ax: float, ay: float, bx: float, by: float) -> float:
    """Z component of (a, 0) x (b, 0); positive when b turns left of a."""
    return ax * by - ay * bx

def dot_product(ax: float, ay: float, bx: float, by: float) -> float:
    return ax * bx + ay * by

def unit_vector(origin: Point, target: Point) -> XY:
    """Direction from origin to target scaled to length 1.

    Coincident endpoints give (nan, nan): every comparison against it is False,
    so a zero-length edge never claims a point.
    """
    dx = target.x - origin.x
    dy = target.y - origin.y
    magnitude = math.hypot(dx, dy)
    if magnitude == 0.0:
        return (math.nan, math.nan)
    return (dx / magnitude, dy / magnitude)

def turn(a: Point, b: Point, c: Point) -> float:
    """Cross product of (b - a) and (c - b); negative means a clockwise turn at b."""
    return cross_product(b.x - a.x, b.y - a.y, c.x - b.x, c.y - b.y)

def convex_hull_xy(points: Sequence[Point]) -> List[Point]:
    """Monotone chain convex hull. Returns points in CCW order, no duplicate last point.

    Collinear boundary points are dropped. Used as an independent cross-check.
    """
    pts = sorted(set(points), key=lambda p: (p.x, p.y))
    if len(pts) <= 1:
        return pts
    def cross(o, a, b):
        return (a.x-o.x)*(b.y-o.y) - (a.y-o.y)*(b.x-o.x)
    lower: List[Point] = []
    for p in pts:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)
    upper: List[Point] = []
    for p in reversed(pts):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)
    return lower[:-1] + upper[:-1]

def point_in_convex_polygon(pt: Point, poly: Sequence[Point], eps: float=1e-9) -> bool:
    """Check if point is inside (or on edge of) a convex polygon in CCW order.

    Polygons with fewer than three vertices only contain their own vertices.
    """
    if len(poly) < 3:
        return pt in poly
    for i in range(len(poly)):
        a = poly[i]
        b = poly[(i+1) % len(poly)]
        if cross_product(b.x-a.x, b.y-a.y, pt.x-a.x, pt.y-a.y) < -eps:
            return False
    return True
