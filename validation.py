"""Validation helpers for hull input points and option overrides."""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Optional

from models import HullConfig, Point

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


class InvalidPointError(ValueError):
    """Raised when the supplied points cannot be used to build a hull."""


def _parse_flag(key: str, raw: str, errors: List[str]) -> Optional[bool]:
    lowered = raw.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    errors.append(f"Option '{key}' expects a boolean, got {raw!r}.")
    return None


def apply_options_to_config(options: Dict[str, str], cfg: HullConfig) -> HullConfig:
    """Apply string option overrides to a :class:`HullConfig`.

    Keys are matched case-insensitively; unknown keys are ignored.

    Raises
    ------
    ValueError
        If a recognised option carries a value that is not a boolean word.
    """

    lowered = {k.lower(): v for k, v in options.items()}
    errors: List[str] = []

    for name in ("reject_non_finite", "start_at_leftmost"):
        if name in lowered:
            flag = _parse_flag(name, lowered[name], errors)
            if flag is not None:
                setattr(cfg, name, flag)

    if errors:
        raise ValueError("\n".join(errors))
    return cfg


def validate_points(points: Iterable[Point], cfg: Optional[HullConfig] = None) -> List[Point]:
    """Check every point and return them as a new list in input order.

    Raises
    ------
    InvalidPointError
        If a coordinate is NaN or infinite and ``cfg.reject_non_finite`` is
        set. The message lists every offending point.
    """

    cfg = cfg or HullConfig()
    errors: List[str] = []
    checked: List[Point] = []
    for index, p in enumerate(points):
        if not isinstance(p, Point):
            raise InvalidPointError(
                f"Item {index} is {type(p).__name__}, expected Point."
            )
        if cfg.reject_non_finite and not (math.isfinite(p.x) and math.isfinite(p.y)):
            errors.append(f"Point {index} has non-finite coordinates ({p.x}, {p.y}).")
        checked.append(p)

    if errors:
        raise InvalidPointError("\n".join(errors))
    return checked


def distinct_points(points: Iterable[Point]) -> List[Point]:
    """Drop value-equal repeats, keeping the first occurrence of each point."""

    return list(dict.fromkeys(points))


__all__ = [
    "InvalidPointError",
    "apply_options_to_config",
    "distinct_points",
    "validate_points",
]
