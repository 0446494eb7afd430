"""Operations over collections of shapes."""

from __future__ import annotations

import logging
from typing import Iterable, List

from .logging_utils import apply_debug_logging
from .primitives import FrameRect, InvalidArgument, PointLike, as_point
from .shapes import Shape

logger = logging.getLogger(__name__)


def _iter_shapes(shapes: Iterable[object]) -> List[Shape]:
    # Accept bare shapes as well as named entries (anything with a ``shape`` attribute).
    return [getattr(item, "shape", item) for item in shapes]


def scale_about_point(shapes: Iterable[object], k: float, pivot: PointLike) -> None:
    """Dilate every shape by ``k`` about ``pivot``.

    Each shape is moved onto the pivot, moved back by ``k`` times the distance
    its frame travelled, and then scaled about its own pivot. Only the shapes'
    own move and scale operations are used.
    """

    if not k > 0:
        raise InvalidArgument("k must be positive")
    target = as_point(pivot)
    for index, shape in enumerate(_iter_shapes(shapes)):
        first_pos = shape.frame_rect().position
        shape.move_to(target)
        second_pos = shape.frame_rect().position
        dx = k * (first_pos.x - second_pos.x)
        dy = k * (first_pos.y - second_pos.y)
        shape.move_by(dx, dy)
        shape.scale(k)
        logger.debug(
            "Scaled shape %d (%s) by %.6g about (%.6g, %.6g): shift=(%.6g, %.6g)",
            index,
            type(shape).__name__,
            k,
            target.x,
            target.y,
            dx,
            dy,
        )


def union_frame_rect(shapes: Iterable[object]) -> FrameRect:
    """Smallest axis-aligned box containing the frames of all ``shapes``."""

    frames = [shape.frame_rect() for shape in _iter_shapes(shapes)]
    if not frames:
        raise InvalidArgument("cannot compute the frame rectangle of an empty collection")
    min_x = min(frame.min_x for frame in frames)
    min_y = min(frame.min_y for frame in frames)
    max_x = max(frame.max_x for frame in frames)
    max_y = max(frame.max_y for frame in frames)
    return FrameRect.from_bounds(min_x, min_y, max_x, max_y)


def total_area(shapes: Iterable[object]) -> float:
    return float(sum(shape.area() for shape in _iter_shapes(shapes)))


apply_debug_logging(globals(), logger=logger)
