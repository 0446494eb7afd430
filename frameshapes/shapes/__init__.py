"""Closed set of shape variants."""

from typing import Dict, Type, Union

from .base import EmptyPolygonError, InvalidArgument, ShapeLike
from .bubble import Bubble
from .polygon import Polygon, shoelace_centroid, shoelace_signed_area
from .rectangle import Rectangle

Shape = Union[Rectangle, Polygon, Bubble]

SHAPE_TYPES: Dict[str, Type[ShapeLike]] = {
    Rectangle.kind: Rectangle,
    Polygon.kind: Polygon,
    Bubble.kind: Bubble,
}


def shape_kind(shape: Shape) -> str:
    """Return the registered kind of ``shape``."""

    kind = getattr(type(shape), "kind", None)
    if kind not in SHAPE_TYPES or not isinstance(shape, SHAPE_TYPES[kind]):
        raise InvalidArgument(f"unsupported shape type {type(shape).__name__}")
    return kind


__all__ = [
    "Bubble",
    "EmptyPolygonError",
    "InvalidArgument",
    "Polygon",
    "Rectangle",
    "Shape",
    "ShapeLike",
    "SHAPE_TYPES",
    "shape_kind",
    "shoelace_centroid",
    "shoelace_signed_area",
]
