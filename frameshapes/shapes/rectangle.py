from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict

from ..primitives import FrameRect, InvalidArgument, Point, PointLike, as_point, as_real


@dataclass
class Rectangle:
    """Axis-aligned rectangle given by its side lengths and center."""

    kind: ClassVar[str] = "rectangle"

    side_x: float
    side_y: float
    center: Point

    def __post_init__(self) -> None:
        self.side_x = as_real(self.side_x, "side_x")
        self.side_y = as_real(self.side_y, "side_y")
        self.center = as_point(self.center)
        if self.side_x <= 0 or self.side_y <= 0:
            raise InvalidArgument("the side must be greater than 0")

    def area(self) -> float:
        return self.side_x * self.side_y

    def frame_rect(self) -> FrameRect:
        return FrameRect(self.side_x, self.side_y, self.center)

    def move_to(self, point: PointLike) -> None:
        self.center = as_point(point)

    def move_by(self, dx: float, dy: float) -> None:
        self.move_to(self.center.shifted(dx, dy))

    def scale(self, k: float) -> None:
        # The frame is derived from the sides, so the center stays fixed.
        self.side_x *= k
        self.side_y *= k

    def to_dict(self) -> Dict[str, object]:
        return {
            "kind": self.kind,
            "side_x": self.side_x,
            "side_y": self.side_y,
            "center": list(self.center.as_tuple()),
        }
