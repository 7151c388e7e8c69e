"""Geometry value types used for content placement.

All types are immutable and cheap to construct. None of them enforce that a
rectangle lies within a canvas: aspect-fill placements legitimately overflow.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Final

# Relative tolerance for treating two aspect ratios as equal
DEFAULT_RATIO_TOLERANCE: Final = 1e-9

_SIZE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*[xX:,]\s*(\d+(?:\.\d+)?)\s*$")


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves always going up (-100.5 -> -100)."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Size:
    """A width/height pair in pixels or abstract ratio units."""

    width: float
    height: float

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    def scaled(self, factor: float) -> Size:
        return Size(self.width * factor, self.height * factor)

    def as_int_tuple(self) -> tuple[int, int]:
        """Round to whole pixels, as Pillow expects."""
        return (_round_half_up(self.width), _round_half_up(self.height))

    @classmethod
    def from_string(cls, text: str) -> Size:
        """Parse ``"WxH"`` (also accepts ``W:H`` and ``W,H``).

        Args:
            text: Size expression such as ``"1920x1080"`` or ``"16:9"``

        Returns:
            Parsed Size

        Raises:
            ValueError: If the text is not a width/height pair
        """
        match = _SIZE_PATTERN.match(text)
        if not match:
            raise ValueError(f"Expected a size like 200x100, got {text!r}")
        return cls(float(match.group(1)), float(match.group(2)))

    def __str__(self) -> str:
        return f"{self.width:g}x{self.height:g}"


@dataclass(frozen=True)
class Point:
    """An x/y coordinate. May be negative."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> Point:
        return cls(0.0, 0.0)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle: origin (top-left) plus size."""

    origin: Point
    size: Size

    @classmethod
    def from_values(cls, x: float, y: float, width: float, height: float) -> Rect:
        return cls(Point(x, y), Size(width, height))

    @property
    def x(self) -> float:
        return self.origin.x

    @property
    def y(self) -> float:
        return self.origin.y

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    @property
    def max_x(self) -> float:
        return self.origin.x + self.size.width

    @property
    def max_y(self) -> float:
        return self.origin.y + self.size.height

    def as_box(self) -> tuple[int, int, int, int]:
        """Return a Pillow ``(left, top, right, bottom)`` box in whole pixels.

        The right/bottom edges are derived from the rounded size so the box
        always spans exactly ``size.as_int_tuple()`` pixels.
        """
        left = _round_half_up(self.origin.x)
        top = _round_half_up(self.origin.y)
        width, height = self.size.as_int_tuple()
        return (left, top, left + width, top + height)
