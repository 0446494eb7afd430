"""Value types shared by every shape: points and frame rectangles."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, Union

import numpy as np

PointLike = Union["Point", Tuple[float, float], Sequence[float]]


class InvalidArgument(ValueError):
    """Raised when a shape or an operation receives an argument it cannot accept."""


@dataclass(frozen=True)
class Point:
    """Immutable 2D coordinate."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def shifted(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)


def as_real(value: object, name: str) -> float:
    """Return ``value`` as a float, rejecting strings, booleans and other non-numbers."""

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(f"{name} must be a number, got {value!r}")
    return float(value)


def as_point(value: PointLike) -> Point:
    """Coerce ``value`` to a :class:`Point`.

    Accepts a ``Point`` or any two-item sequence of real numbers.
    """

    if isinstance(value, Point):
        return value
    if isinstance(value, (str, bytes)) or not isinstance(value, (Sequence, np.ndarray)):
        raise InvalidArgument(f"expected a 2D point, got {value!r}")
    if len(value) != 2:
        raise InvalidArgument(f"expected a 2D point, got {len(value)} coordinate(s)")
    x, y = value
    if not all(isinstance(v, numbers.Real) and not isinstance(v, bool) for v in (x, y)):
        raise InvalidArgument(f"point coordinates must be numbers, got {value!r}")
    return Point(x, y)


@dataclass(frozen=True)
class FrameRect:
    """Axis-aligned box given by its size and the position of its center."""

    width: float
    height: float
    position: Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", float(self.width))
        object.__setattr__(self, "height", float(self.height))
        object.__setattr__(self, "position", as_point(self.position))
        if self.width < 0 or self.height < 0:
            raise InvalidArgument(f"frame size must not be negative, got {self.width:g} x {self.height:g}")

    @classmethod
    def from_bounds(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> "FrameRect":
        width = max_x - min_x
        height = max_y - min_y
        return cls(width, height, Point(min_x + width / 2, min_y + height / 2))

    @property
    def min_x(self) -> float:
        return self.position.x - self.width / 2

    @property
    def min_y(self) -> float:
        return self.position.y - self.height / 2

    @property
    def max_x(self) -> float:
        return self.position.x + self.width / 2

    @property
    def max_y(self) -> float:
        return self.position.y + self.height / 2

    def bounds(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


__all__ = ["InvalidArgument", "Point", "PointLike", "FrameRect", "as_point", "as_real"]
