"""Small numeric helpers."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def clamp(num: T, low: T, high: T) -> T:
    """Clamp ``num`` between ``low`` and ``high``."""
    if num < low:  # type: ignore[operator]
        return low
    if num > high:  # type: ignore[operator]
        return high
    return num