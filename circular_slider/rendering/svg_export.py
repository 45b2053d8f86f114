"""Serialise slider tracks to a standalone SVG document."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence
from xml.etree import ElementTree

from circular_slider.common.constants import (
    BACKGROUND_STROKE_COLOR,
    HANDLE_FILL_COLOR,
    HANDLE_STROKE_COLOR,
    VIEW_ROTATION_DEGREES,
)
from circular_slider.common.geometry import PathDescription, format_number
from circular_slider.model.track_config import SceneContext
from circular_slider.rendering.track_view import TrackView

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _ring_path(
    parent: ElementTree.Element,
    view: TrackView,
    description: PathDescription,
    color: str,
) -> ElementTree.Element:
    dash, gap = view.dash_pattern
    return ElementTree.SubElement(
        parent,
        "path",
        {
            "stroke": color,
            "stroke-width": format_number(view.stroke_width),
            "fill": "none",
            "r": format_number(view.radius),
            "stroke-dasharray": f"{format_number(dash)} {format_number(gap)}",
            "d": description.to_svg(),
        },
    )


def track_group(view: TrackView, scene: SceneContext) -> ElementTree.Element:
    """Build the ``<g>`` element for one track."""
    cx, cy = scene.center
    rotation = format_number(VIEW_ROTATION_DEGREES)
    transform = f"rotate({rotation}, {format_number(cx)}, {format_number(cy)})"
    group = ElementTree.Element("g", {"transform": transform})
    _ring_path(group, view, view.background, BACKGROUND_STROKE_COLOR)
    _ring_path(group, view, view.progress, view.color)
    hx, hy = view.handle_position
    ElementTree.SubElement(
        group,
        "circle",
        {
            "cx": format_number(hx),
            "cy": format_number(hy),
            "fill": HANDLE_FILL_COLOR,
            "stroke": HANDLE_STROKE_COLOR,
            "r": format_number(view.handle_radius),
        },
    )
    return group


def render_svg(scene: SceneContext, views: Sequence[TrackView]) -> str:
    """Return an SVG document drawing every track of the scene."""
    root = ElementTree.Element(
        "svg",
        {
            "xmlns": SVG_NAMESPACE,
            "width": format_number(scene.width),
            "height": format_number(scene.height),
        },
    )
    for view in views:
        root.append(track_group(view, scene))
    return ElementTree.tostring(root, encoding="unicode")


def write_svg(path: Path, scene: SceneContext, views: Sequence[TrackView]) -> Path:
    document = render_svg(scene, views)
    path = Path(path)
    path.write_text(document, encoding="utf-8")
    logger.info("Wrote slider SVG: path=%s tracks=%s", path, len(views))
    return path
