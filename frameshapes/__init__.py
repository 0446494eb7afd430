from .primitives import FrameRect, InvalidArgument, Point, as_point
from .shapes import (
    SHAPE_TYPES,
    Bubble,
    EmptyPolygonError,
    Polygon,
    Rectangle,
    Shape,
    ShapeLike,
    shape_kind,
)
from .factory import (
    ShapeFail,
    ShapeOK,
    ShapeResult,
    build_shape,
    make_bubble,
    make_polygon,
    make_rectangle,
    unwrap,
)
from .operations import scale_about_point, total_area, union_frame_rect
from .scene import (
    NamedShape,
    Scene,
    SceneFormatError,
    default_scene,
    dump_scene,
    load_scene,
    scene_from_dict,
    scene_to_dict,
)
from .printer import format_frame_rect, format_number, format_scene, format_shape_info
from .config import ReportConfig, get_report_config, set_report_config

__all__ = [
    'Point',
    'FrameRect',
    'as_point',
    'InvalidArgument',
    'EmptyPolygonError',
    'Rectangle',
    'Polygon',
    'Bubble',
    'Shape',
    'ShapeLike',
    'SHAPE_TYPES',
    'shape_kind',
    'ShapeOK',
    'ShapeFail',
    'ShapeResult',
    'build_shape',
    'make_rectangle',
    'make_polygon',
    'make_bubble',
    'unwrap',
    'scale_about_point',
    'union_frame_rect',
    'total_area',
    'NamedShape',
    'Scene',
    'SceneFormatError',
    'default_scene',
    'load_scene',
    'dump_scene',
    'scene_from_dict',
    'scene_to_dict',
    'format_number',
    'format_frame_rect',
    'format_shape_info',
    'format_scene',
    'ReportConfig',
    'get_report_config',
    'set_report_config',
]
