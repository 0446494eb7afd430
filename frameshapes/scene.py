"""Named shape collections and their JSON form."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Union

from .factory import ShapeFail, build_shape
from .logging_utils import apply_debug_logging
from .operations import scale_about_point, total_area, union_frame_rect
from .primitives import FrameRect, PointLike
from .shapes import Bubble, Polygon, Rectangle, Shape, shape_kind

logger = logging.getLogger(__name__)


class SceneFormatError(ValueError):
    pass


@dataclass
class NamedShape:
    name: str
    shape: Shape


@dataclass
class Scene:
    """Ordered collection of named shapes.

    Not thread-safe: operations mutate the shapes in place.
    """

    entries: List[NamedShape] = field(default_factory=list)

    def add(self, name: str, shape: Shape) -> NamedShape:
        entry = NamedShape(name, shape)
        self.entries.append(entry)
        return entry

    @property
    def names(self) -> List[str]:
        return [entry.name for entry in self.entries]

    @property
    def shapes(self) -> List[Shape]:
        return [entry.shape for entry in self.entries]

    def __iter__(self) -> Iterator[NamedShape]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def total_area(self) -> float:
        return total_area(self.entries)

    def frame_rect(self) -> FrameRect:
        return union_frame_rect(self.entries)

    def scale_about(self, k: float, pivot: PointLike) -> None:
        scale_about_point(self.entries, k, pivot)


def default_scene() -> Scene:
    """The sample scene: two rectangles, two polygons and a bubble."""

    scene = Scene()
    scene.add("Rectangle 1", Rectangle(5, 6, (1, 2)))
    scene.add("Rectangle 2", Rectangle(10, 2, (-10, 3)))
    scene.add("Polygon 1", Polygon([(0, 0), (1, 0), (1, 1), (0, 1)]))
    scene.add(
        "Polygon 2",
        Polygon([(0, 0), (4, 1), (5, 4), (5, 8), (4, 10), (3, 8), (2, 5), (-1, 1)]),
    )
    scene.add("Bubble", Bubble(10, (0, 0), (2, 2)))
    return scene


def scene_from_dict(data: Mapping[str, Any]) -> Scene:
    if not isinstance(data, Mapping):
        raise SceneFormatError(f"scene document must be an object, got {type(data).__name__}")
    items = data.get("shapes")
    if not isinstance(items, list):
        raise SceneFormatError("scene document requires a 'shapes' list")

    scene = Scene()
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise SceneFormatError(f"shape {index}: expected an object, got {type(item).__name__}")
        name = item.get("name") or f"{str(item.get('kind', 'shape')).capitalize()} {index + 1}"
        result = build_shape(item)
        if isinstance(result, ShapeFail):
            raise SceneFormatError(f"shape {index} ({name}): {result.message}")
        scene.add(str(name), result.shape)
    return scene


def scene_to_dict(scene: Scene) -> Dict[str, Any]:
    shapes = []
    for entry in scene:
        shape_kind(entry.shape)
        payload: Dict[str, Any] = {"name": entry.name}
        payload.update(entry.shape.to_dict())
        shapes.append(payload)
    return {"shapes": shapes}


def load_scene(path: Union[str, Path]) -> Scene:
    path = Path(path)
    logger.info("Loading scene from %s", path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SceneFormatError(f"{path}: invalid JSON: {exc}") from exc
    scene = scene_from_dict(data)
    logger.info("Loaded %d shape(s) from %s", len(scene), path)
    return scene


def dump_scene(scene: Scene, path: Union[str, Path]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Writing %d shape(s) to %s", len(scene), path)
    path.write_text(json.dumps(scene_to_dict(scene), indent=2) + "\n", encoding="utf-8")


apply_debug_logging(globals(), logger=logger, skip={"NamedShape", "SceneFormatError"})
