"""Simple polygon with a centroid kept fixed under scaling."""

from __future__ import annotations

import logging
from typing import ClassVar, Dict, Iterable, Optional, Tuple

import numpy as np

from ..primitives import FrameRect, InvalidArgument, Point, PointLike, as_point
from .base import EmptyPolygonError

logger = logging.getLogger(__name__)


def _as_vertex_array(points: Iterable[PointLike]) -> np.ndarray:
    if isinstance(points, np.ndarray):
        arr = np.array(points, dtype=float)
    else:
        try:
            arr = np.array([as_point(p).as_tuple() for p in points], dtype=float)
        except TypeError as exc:
            raise InvalidArgument(f"polygon points must be an iterable of 2D points: {exc}") from exc
    if arr.size == 0:
        arr = arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidArgument(f"polygon points must be an Nx2 array, got shape {arr.shape}")
    return arr


def shoelace_signed_area(vertices: np.ndarray) -> float:
    """Signed area of the closed vertex chain; positive for counter-clockwise order."""

    x = vertices[:, 0]
    y = vertices[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    return float(np.sum(x * y_next - y * x_next) * 0.5)


def shoelace_centroid(vertices: np.ndarray) -> Point:
    """Area-weighted centroid of the closed vertex chain.

    Divides by the signed area, so winding order does not matter. A chain with
    zero signed area yields a non-finite point.
    """

    x = vertices[:, 0]
    y = vertices[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    cross = x * y_next - x_next * y
    signed_area = shoelace_signed_area(vertices)
    with np.errstate(divide="ignore", invalid="ignore"):
        cx = np.float64(np.sum((x + x_next) * cross)) / (6 * np.float64(signed_area))
        cy = np.float64(np.sum((y + y_next) * cross)) / (6 * np.float64(signed_area))
    if not (np.isfinite(cx) and np.isfinite(cy)):
        logger.warning(
            "Degenerate polygon with %d vertices has zero signed area; centroid is not finite",
            len(vertices),
        )
    return Point(float(cx), float(cy))


class Polygon:
    """Polygon that exclusively owns its vertex array.

    The centroid is computed once from the initial vertices. Translation moves
    it along with the vertices; scaling dilates the vertices about it and leaves
    it untouched.

    :meth:`copy` and :meth:`assign` deep-copy the vertices. :meth:`transfer` and
    :meth:`take` hand the array over without copying and leave the source
    polygon empty. An empty polygon raises :class:`EmptyPolygonError` on any
    geometric use until something is assigned to it.
    """

    kind: ClassVar[str] = "polygon"

    def __init__(self, points: Iterable[PointLike]):
        vertices = _as_vertex_array(points)
        if len(vertices) < 3:
            raise InvalidArgument("the count must not be less than 3")
        self._vertices: Optional[np.ndarray] = vertices
        self._centroid = shoelace_centroid(vertices)

    @classmethod
    def _from_state(cls, vertices: Optional[np.ndarray], centroid: Point) -> "Polygon":
        polygon = cls.__new__(cls)
        polygon._vertices = vertices
        polygon._centroid = centroid
        return polygon

    def _require_vertices(self) -> np.ndarray:
        if self._vertices is None:
            raise EmptyPolygonError("polygon vertices were transferred to another polygon")
        return self._vertices

    @property
    def is_empty(self) -> bool:
        return self._vertices is None

    @property
    def vertex_count(self) -> int:
        return 0 if self._vertices is None else len(self._vertices)

    def __len__(self) -> int:
        return self.vertex_count

    @property
    def vertices(self) -> Tuple[Point, ...]:
        if self._vertices is None:
            return ()
        return tuple(Point(x, y) for x, y in self._vertices.tolist())

    @property
    def centroid(self) -> Point:
        self._require_vertices()
        return self._centroid

    def signed_area(self) -> float:
        return shoelace_signed_area(self._require_vertices())

    def compute_centroid(self) -> Point:
        """Recompute the centroid from the current vertices."""

        return shoelace_centroid(self._require_vertices())

    def area(self) -> float:
        return abs(self.signed_area())

    def frame_rect(self) -> FrameRect:
        vertices = self._require_vertices()
        min_x, min_y = vertices.min(axis=0)
        max_x, max_y = vertices.max(axis=0)
        return FrameRect.from_bounds(float(min_x), float(min_y), float(max_x), float(max_y))

    def move_to(self, point: PointLike) -> None:
        self._require_vertices()
        target = as_point(point)
        self.move_by(target.x - self._centroid.x, target.y - self._centroid.y)

    def move_by(self, dx: float, dy: float) -> None:
        vertices = self._require_vertices()
        vertices += (dx, dy)
        self._centroid = self._centroid.shifted(dx, dy)

    def scale(self, k: float) -> None:
        vertices = self._require_vertices()
        center = np.array(self._centroid.as_tuple(), dtype=float)
        vertices[:] = center + k * (vertices - center)

    # Ownership

    def copy(self) -> "Polygon":
        vertices = None if self._vertices is None else self._vertices.copy()
        return self._from_state(vertices, self._centroid)

    def __copy__(self) -> "Polygon":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, object]) -> "Polygon":
        result = self.copy()
        memo[id(self)] = result
        return result

    def assign(self, other: "Polygon") -> "Polygon":
        """Replace this polygon's state with a deep copy of ``other``."""

        if other is self:
            return self
        self._vertices = None if other._vertices is None else other._vertices.copy()
        self._centroid = other._centroid
        return self

    def transfer(self) -> "Polygon":
        """Return a new polygon owning this polygon's vertices; ``self`` becomes empty."""

        moved = self._from_state(self._vertices, self._centroid)
        self._vertices = None
        return moved

    def take(self, other: "Polygon") -> "Polygon":
        """Take over ``other``'s vertices without copying; ``other`` becomes empty."""

        if other is self:
            return self
        self._vertices = other._vertices
        self._centroid = other._centroid
        other._vertices = None
        return self

    def shares_vertices_with(self, other: "Polygon") -> bool:
        if self._vertices is None or other._vertices is None:
            return False
        return np.shares_memory(self._vertices, other._vertices)

    def to_dict(self) -> Dict[str, object]:
        return {
            "kind": self.kind,
            "points": self._require_vertices().tolist(),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        if self._vertices is None or other._vertices is None:
            return self._vertices is None and other._vertices is None
        return (
            self._vertices.shape == other._vertices.shape
            and bool(np.array_equal(self._vertices, other._vertices))
            and self._centroid == other._centroid
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._vertices is None:
            return "Polygon(<empty>)"
        return f"Polygon(points={self._vertices.tolist()!r})"
