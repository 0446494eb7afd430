from typing import List, Optional

from .config import ReportConfig, get_report_config
from .primitives import FrameRect
from .scene import Scene
from .shapes import Shape


def format_number(value: float, config: Optional[ReportConfig] = None) -> str:
    config = config or get_report_config()
    return f"{value:.{config.precision}g}"


def format_frame_rect(frame: FrameRect, indent: str = "", config: Optional[ReportConfig] = None) -> List[str]:
    config = config or get_report_config()
    x, y = (format_number(value, config) for value in frame.position)
    return [
        f"{indent}width: {format_number(frame.width, config)}",
        f"{indent}height: {format_number(frame.height, config)}",
        f"{indent}position: ({x}; {y})",
    ]


def format_shape_info(name: str, shape: Shape, config: Optional[ReportConfig] = None) -> str:
    config = config or get_report_config()
    step = config.indent
    lines = [
        f"{name}:",
        f"{step}area: {format_number(shape.area(), config)}",
        f"{step}frame rectangle:",
    ]
    lines.extend(format_frame_rect(shape.frame_rect(), step * 2, config))
    return "\n".join(lines) + "\n"


def format_scene(scene: Scene, config: Optional[ReportConfig] = None) -> str:
    """Render every shape followed by the scene's total area and frame rectangle."""

    config = config or get_report_config()
    out = []
    for entry in scene:
        out.append(format_shape_info(entry.name, entry.shape, config) + "\n")
    out.append(f"Total area: {format_number(scene.total_area(), config)}\n")
    out.append("Total frame rectangle:\n")
    out.extend(line + "\n" for line in format_frame_rect(scene.frame_rect(), config.indent, config))
    return "".join(out)
