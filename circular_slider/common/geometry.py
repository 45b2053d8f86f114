"""Polar/Cartesian helpers and arc path descriptions for slider rings.

Angles are degrees measured clockwise from east in screen coordinates
(y grows downward). The view rotates everything by -90 degrees so that
angle zero appears at the top of the ring.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from circular_slider.common.constants import ARC_EPSILON_DEGREES

Point2D = tuple[float, float]


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * math.pi / 180.0


def polar_to_cartesian(center: Point2D, radius: float, angle_degrees: float) -> Point2D:
    """Convert a polar coordinate around *center* into a screen point."""
    angle = degrees_to_radians(angle_degrees)
    cx, cy = center
    return cx + radius * math.cos(angle), cy + radius * math.sin(angle)


def angle_from_offset(dx: float, dy: float) -> float:
    """Convert a screen-space offset from the ring centre into a ring angle.

    The +90 compensates for the view rotation so that a pointer straight
    above the centre reads as zero. The result lies in ``[0, 360)``.
    """
    angle = math.degrees(math.atan2(dy, dx)) + 90.0
    if angle < 0:
        angle += 360.0
    if angle >= 360.0:
        angle -= 360.0
    return angle


def angle_from_point(point: Point2D, center: Point2D) -> float:
    """Return the ring angle of *point* relative to *center*."""
    return angle_from_offset(point[0] - center[0], point[1] - center[1])


@dataclass(frozen=True)
class PathDescription:
    """Renderer-agnostic description of a single elliptical arc segment.

    The path moves to ``start``, then sweeps an arc of ``radius`` to ``end``.
    ``sweep_flag`` follows the SVG convention (0 is counter-clockwise on
    screen). ``closed`` marks a full ring that ends with a closepath.
    """

    center: Point2D
    radius: float
    start: Point2D
    end: Point2D
    start_angle: float
    end_angle: float
    large_arc_flag: int
    sweep_flag: int
    closed: bool

    @property
    def span(self) -> float:
        """Angular distance covered by the arc, in degrees."""
        return self.start_angle - self.end_angle

    def to_svg(self) -> str:
        """Serialise into an SVG path ``d`` attribute."""
        d = (
            f"M {format_number(self.start[0])} {format_number(self.start[1])} "
            f"A {format_number(self.radius)} {format_number(self.radius)} 0 "
            f"{self.large_arc_flag} {self.sweep_flag} "
            f"{format_number(self.end[0])} {format_number(self.end[1])}"
        )
        if self.closed:
            d += "z"
        return d


def describe_arc(
    center: Point2D, radius: float, start_angle: float, end_angle: float
) -> PathDescription:
    """Describe the arc running from *end_angle* back to *start_angle*.

    The end is pulled back by a hundredth of a degree so a full circle
    still has two distinct end points; a full 360 degree span is closed
    explicitly.
    """
    span = end_angle - start_angle
    arc_from = end_angle - ARC_EPSILON_DEGREES
    return PathDescription(
        center=center,
        radius=radius,
        start=polar_to_cartesian(center, radius, arc_from),
        end=polar_to_cartesian(center, radius, start_angle),
        start_angle=arc_from,
        end_angle=start_angle,
        large_arc_flag=0 if span <= 180 else 1,
        sweep_flag=0,
        closed=span == 360,
    )


def format_number(value: float) -> str:
    """Format a coordinate compactly, with at most four decimals."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text
