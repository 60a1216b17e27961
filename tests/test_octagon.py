"""Unit tests for the extreme-point octagon."""
from __future__ import annotations

from models import Point
from octagon import find_extreme_set


def test_square_with_centre_point() -> None:
    pool = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4), Point(2, 2)]

    hull, remaining = find_extreme_set(pool)

    # minX ties between (0, 0) and (0, 4); the reverse scan meets (0, 4) first.
    assert hull == [Point(0, 4), Point(0, 0), Point(4, 0), Point(4, 4)]
    assert remaining == [Point(2, 2)]


def test_ties_go_to_last_point_in_input_order() -> None:
    pool = [Point(0, 0), Point(0, 2), Point(3, 1)]

    hull, remaining = find_extreme_set(pool)

    assert hull == [Point(0, 2), Point(0, 0), Point(3, 1)]
    assert remaining == []


def test_eight_distinct_extrema_in_slot_order() -> None:
    # One point per direction, plus interior filler.
    octagon = [
        Point(-3, 0),   # min x
        Point(-2, -2),  # min x+y
        Point(0, -3),   # min y
        Point(2, -2),   # max x-y
        Point(3, 0),    # max x
        Point(2, 2),    # max x+y
        Point(0, 3),    # max y
        Point(-2, 2),   # min x-y
    ]
    filler = [Point(0, 0), Point(1, 1), Point(-1, 0.5)]
    pool = filler + list(reversed(octagon))

    hull, remaining = find_extreme_set(pool)

    assert hull == octagon
    assert remaining == filler


def test_input_is_not_modified() -> None:
    pool = [Point(1, 1), Point(5, 2), Point(3, 7), Point(2, 3)]
    snapshot = list(pool)

    find_extreme_set(pool)

    assert pool == snapshot


def test_coincident_copies_are_removed_once() -> None:
    pool = [Point(1, 1)] * 3

    hull, remaining = find_extreme_set(pool)

    assert hull == [Point(1, 1)]
    assert remaining == [Point(1, 1), Point(1, 1)]


def test_empty_pool() -> None:
    assert find_extreme_set([]) == ([], [])
