"""Capability set shared by every shape variant."""

from __future__ import annotations

from typing import ClassVar, Dict, Protocol, runtime_checkable

from ..primitives import FrameRect, InvalidArgument, PointLike


class EmptyPolygonError(RuntimeError):
    """Raised when a polygon whose vertices were transferred away is used."""


@runtime_checkable
class ShapeLike(Protocol):
    """Operations every shape supports.

    Shapes are plain mutable objects and are not safe to share between threads
    without external locking.
    """

    kind: ClassVar[str]

    def area(self) -> float: ...

    def frame_rect(self) -> FrameRect: ...

    def move_to(self, point: PointLike) -> None: ...

    def move_by(self, dx: float, dy: float) -> None: ...

    def scale(self, k: float) -> None: ...

    def to_dict(self) -> Dict[str, object]: ...


__all__ = ["EmptyPolygonError", "InvalidArgument", "ShapeLike"]
