"""Core data models for the octagon-pruned convex hull."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

XY = Tuple[float, float]


@dataclass(frozen=True)
class Point:
    """Immutable 2D coordinate pair compared by value."""

    x: float
    y: float

    @property
    def xy(self) -> XY:
        return (self.x, self.y)

    def offset_from(self, origin: "Point") -> XY:
        """Return the vector ``self - origin``."""

        return (self.x - origin.x, self.y - origin.y)


@dataclass(frozen=True)
class CandidateEntry:
    """A point filed against one hull edge, keyed by its projection along it."""

    point: Point
    projection: float


@dataclass(frozen=True)
class EdgeFrame:
    """Unit direction vectors for each directed edge of a closed hull."""

    directions: Tuple[XY, ...]

    def __getitem__(self, index: int) -> XY:
        return self.directions[index]


@dataclass
class HullConfig:
    """Options controlling input handling around the hull computation."""

    reject_non_finite: bool = True
    start_at_leftmost: bool = True  # rotate output to begin at min (x, y)


def as_points(coords: Iterable[Iterable[float]]) -> List[Point]:
    """Convert ``(x, y)`` pairs into :class:`Point` values."""

    points: List[Point] = []
    for pair in coords:
        if isinstance(pair, Point):
            points.append(pair)
            continue
        x, y = pair
        points.append(Point(float(x), float(y)))
    return points


__all__ = [
    "CandidateEntry",
    "EdgeFrame",
    "HullConfig",
    "Point",
    "XY",
    "as_points",
]
