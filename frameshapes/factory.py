"""Shape builders that report failures as values instead of raising."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Tuple, Union

from .primitives import InvalidArgument, PointLike
from .shapes import SHAPE_TYPES, Bubble, Polygon, Rectangle, Shape


@dataclass
class ShapeOK:
    """Successfully constructed shape."""

    shape: Shape


@dataclass
class ShapeFail:
    """Reason a shape could not be constructed."""

    kind: str
    message: str


ShapeResult = Union[ShapeOK, ShapeFail]

# Constructor arguments read from a shape mapping, in positional order.
_SHAPE_FIELDS: Dict[str, Tuple[str, ...]] = {
    Rectangle.kind: ("side_x", "side_y", "center"),
    Polygon.kind: ("points",),
    Bubble.kind: ("radius", "center", "anchor"),
}


def _attempt(kind: str, build: Callable[[], Shape]) -> ShapeResult:
    try:
        return ShapeOK(build())
    except InvalidArgument as exc:
        return ShapeFail(kind, str(exc))
    except (TypeError, ValueError) as exc:
        return ShapeFail(kind, f"invalid {kind} field value: {exc}")


def make_rectangle(side_x: float, side_y: float, center: PointLike) -> ShapeResult:
    return _attempt(Rectangle.kind, lambda: Rectangle(side_x, side_y, center))


def make_polygon(points: Iterable[PointLike]) -> ShapeResult:
    return _attempt(Polygon.kind, lambda: Polygon(points))


def make_bubble(radius: float, center: PointLike, anchor: PointLike) -> ShapeResult:
    return _attempt(Bubble.kind, lambda: Bubble(radius, center, anchor))


def build_shape(data: Mapping[str, Any]) -> ShapeResult:
    """Build a shape from a mapping with a ``kind`` key and the constructor fields.

    Rectangles also accept ``width``/``height`` in place of ``side_x``/``side_y``.
    """

    kind = data.get("kind")
    if not isinstance(kind, str) or kind not in SHAPE_TYPES:
        known = ", ".join(sorted(SHAPE_TYPES))
        return ShapeFail(str(kind), f"unknown shape kind {kind!r} (expected one of: {known})")

    fields = dict(data)
    if kind == Rectangle.kind:
        fields.setdefault("side_x", fields.get("width"))
        fields.setdefault("side_y", fields.get("height"))

    args = []
    for name in _SHAPE_FIELDS[kind]:
        value = fields.get(name)
        if value is None:
            return ShapeFail(kind, f"{kind} requires field '{name}'")
        args.append(value)

    cls = SHAPE_TYPES[kind]
    return _attempt(kind, lambda: cls(*args))


def unwrap(result: ShapeResult) -> Shape:
    """Return the shape of a successful result or raise :class:`InvalidArgument`."""

    if isinstance(result, ShapeOK):
        return result.shape
    raise InvalidArgument(f"{result.kind}: {result.message}")


__all__ = [
    "ShapeOK",
    "ShapeFail",
    "ShapeResult",
    "make_rectangle",
    "make_polygon",
    "make_bubble",
    "build_shape",
    "unwrap",
]
