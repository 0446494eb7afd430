from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Dict

from ..primitives import FrameRect, InvalidArgument, Point, PointLike, as_point, as_real


@dataclass
class Bubble:
    """Circle pinned to an ``anchor`` point lying inside it.

    The anchor, not the center, is the pivot for :meth:`move_to` and
    :meth:`scale`. Construction checks run in a fixed order: containment of the
    anchor, then anchor/center coincidence, then the sign of the radius.
    """

    kind: ClassVar[str] = "bubble"

    radius: float
    center: Point
    anchor: Point

    def __post_init__(self) -> None:
        self.radius = as_real(self.radius, "radius")
        self.center = as_point(self.center)
        self.anchor = as_point(self.anchor)
        dx = self.center.x - self.anchor.x
        dy = self.center.y - self.anchor.y
        if dx * dx + dy * dy > self.radius * self.radius:
            raise InvalidArgument("the anchor must be inside the circle")
        if self.center == self.anchor:
            raise InvalidArgument("the anchor must not be equal to the center")
        if self.radius <= 0:
            raise InvalidArgument("the radius must be greater than 0")

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def frame_rect(self) -> FrameRect:
        size = 2 * self.radius
        return FrameRect(size, size, self.center)

    def move_to(self, point: PointLike) -> None:
        target = as_point(point)
        self.move_by(target.x - self.anchor.x, target.y - self.anchor.y)

    def move_by(self, dx: float, dy: float) -> None:
        self.anchor = self.anchor.shifted(dx, dy)
        self.center = self.center.shifted(dx, dy)

    def scale(self, k: float) -> None:
        self.radius *= k
        dx = self.center.x - self.anchor.x
        dy = self.center.y - self.anchor.y
        self.center = Point(self.anchor.x + k * dx, self.anchor.y + k * dy)

    def to_dict(self) -> Dict[str, object]:
        return {
            "kind": self.kind,
            "radius": self.radius,
            "center": list(self.center.as_tuple()),
            "anchor": list(self.anchor.as_tuple()),
        }
