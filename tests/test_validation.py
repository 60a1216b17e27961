"""Unit tests for input validation and option parsing."""
from __future__ import annotations

import math

import pytest

from models import HullConfig, Point
from validation import (
    InvalidPointError,
    apply_options_to_config,
    distinct_points,
    validate_points,
)


def test_validate_returns_a_copy_in_order() -> None:
    points = [Point(1, 2), Point(3, 4)]

    checked = validate_points(points)

    assert checked == points
    assert checked is not points


def test_every_non_finite_point_is_reported() -> None:
    points = [Point(0, 0), Point(math.nan, 1), Point(2, math.inf)]

    with pytest.raises(InvalidPointError) as excinfo:
        validate_points(points)

    message = str(excinfo.value)
    assert "Point 1" in message
    assert "Point 2" in message


def test_non_finite_points_pass_when_allowed() -> None:
    points = [Point(0, 0), Point(math.inf, 1)]

    assert validate_points(points, HullConfig(reject_non_finite=False)) == points


def test_non_point_items_are_rejected() -> None:
    with pytest.raises(InvalidPointError, match="expected Point"):
        validate_points([Point(0, 0), (1.0, 2.0)])


def test_distinct_points_keeps_first_occurrence() -> None:
    points = [Point(1, 1), Point(2, 2), Point(1, 1), Point(3, 3), Point(2, 2)]

    assert distinct_points(points) == [Point(1, 1), Point(2, 2), Point(3, 3)]


def test_options_override_config() -> None:
    cfg = apply_options_to_config(
        {"START_AT_LEFTMOST": "off", "Reject_Non_Finite": "No", "deduplicate": "x"},
        HullConfig(),
    )

    assert cfg.start_at_leftmost is False
    assert cfg.reject_non_finite is False


def test_bad_option_value_raises() -> None:
    with pytest.raises(ValueError, match="reject_non_finite"):
        apply_options_to_config({"reject_non_finite": "maybe"}, HullConfig())
