"""Track ring rendering.

The view owns the three primitives of a track (background ring, progress arc
and handle) plus its readout text. It is only mutated through ``set_angle``
and ``set_value``; painting reads the cached primitives.
"""
from __future__ import annotations

import math
from typing import Callable, Optional

from PyQt5 import QtCore, QtGui

from circular_slider.common.constants import (
    BACKGROUND_STROKE_COLOR,
    DASH_GAP,
    DEFAULT_READOUT_SYMBOL,
    HANDLE_FILL_COLOR,
    HANDLE_RADIUS,
    HANDLE_STROKE_COLOR,
    STROKE_WIDTH,
    VIEW_ROTATION_DEGREES,
)
from circular_slider.common.geometry import (
    PathDescription,
    Point2D,
    describe_arc,
    polar_to_cartesian,
)
from circular_slider.model.track_state import TrackState


def path_from_description(description: PathDescription) -> QtGui.QPainterPath:
    """Build a QPainterPath equivalent to *description*."""
    cx, cy = description.center
    r = description.radius
    rect = QtCore.QRectF(cx - r, cy - r, 2 * r, 2 * r)
    path = QtGui.QPainterPath()
    path.moveTo(QtCore.QPointF(*description.start))
    # Qt angles run counter-clockwise on screen, ring angles clockwise.
    path.arcTo(rect, -description.start_angle, description.span)
    if description.closed:
        path.closeSubpath()
    return path


def dash_length(radius: float, total_steps: int) -> float:
    """Length of one dash so that the gaps fall on step boundaries."""
    return 2 * math.pi * radius / total_steps


def format_value(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_readout(symbol: str, value: float) -> str:
    return f"{symbol}{format_value(value)}"


class TrackView:
    """Render one track and its readout from angle/value updates."""

    def __init__(
        self,
        state: TrackState,
        *,
        readout_symbol: str = DEFAULT_READOUT_SYMBOL,
        stroke_width: float = STROKE_WIDTH,
        handle_radius: float = HANDLE_RADIUS,
    ) -> None:
        self._center = state.center
        self._radius = float(state.config.radius)
        self._color = state.config.color
        self._description = state.config.description
        self._total_steps = state.total_steps
        self._readout_symbol = readout_symbol
        self._stroke_width = stroke_width
        self._handle_radius = handle_radius
        self.readout_changed: Optional[Callable[[str], None]] = None

        self._background = describe_arc(self._center, self._radius, 0.0, 360.0)
        self._background_path = path_from_description(self._background)
        self._progress = describe_arc(self._center, self._radius, 0.0, 0.0)
        self._progress_path = path_from_description(self._progress)
        self._angle = 0.0
        self._handle = polar_to_cartesian(self._center, self._radius, 0.0)
        self._value = state.current_value
        self._readout = format_readout(self._readout_symbol, self._value)
        self.render(state)

    # ------------------------------------------------------------------
    # Mutation entry points
    # ------------------------------------------------------------------
    def set_angle(self, angle: float) -> None:
        """Redraw the progress arc and move the handle to *angle*."""
        self._angle = angle
        self._progress = describe_arc(self._center, self._radius, 0.0, angle)
        self._progress_path = path_from_description(self._progress)
        self._handle = polar_to_cartesian(self._center, self._radius, angle)

    def set_value(self, value: float) -> None:
        """Update the readout text."""
        self._value = value
        text = format_readout(self._readout_symbol, value)
        if text == self._readout:
            return
        self._readout = text
        if self.readout_changed is not None:
            self.readout_changed(text)

    def render(self, state: TrackState) -> None:
        """Project *state* onto the primitives; safe to call repeatedly."""
        self.set_angle(state.rendered_angle)
        self.set_value(state.current_value)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def angle(self) -> float:
        return self._angle

    @property
    def value(self) -> float:
        return self._value

    @property
    def readout(self) -> str:
        return self._readout

    @property
    def color(self) -> str:
        return self._color

    @property
    def description(self) -> str:
        return self._description

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def stroke_width(self) -> float:
        return self._stroke_width

    @property
    def handle_radius(self) -> float:
        return self._handle_radius

    @property
    def background(self) -> PathDescription:
        return self._background

    @property
    def progress(self) -> PathDescription:
        return self._progress

    @property
    def progress_path(self) -> QtGui.QPainterPath:
        return self._progress_path

    @property
    def handle_position(self) -> Point2D:
        """Handle centre before the view rotation is applied."""
        return self._handle

    @property
    def dash_pattern(self) -> tuple[float, float]:
        return dash_length(self._radius, self._total_steps), DASH_GAP

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------
    def ring_pen(self, color: str) -> QtGui.QPen:
        pen = QtGui.QPen(QtGui.QColor(color))
        pen.setWidthF(self._stroke_width)
        pen.setCapStyle(QtCore.Qt.FlatCap)
        dash, gap = self.dash_pattern
        # Qt dash patterns are expressed in pen widths.
        pen.setDashPattern([dash / self._stroke_width, gap / self._stroke_width])
        return pen

    def paint(self, painter: QtGui.QPainter) -> None:
        cx, cy = self._center
        painter.save()
        painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
        painter.translate(cx, cy)
        painter.rotate(VIEW_ROTATION_DEGREES)
        painter.translate(-cx, -cy)
        painter.setBrush(QtCore.Qt.NoBrush)
        painter.setPen(self.ring_pen(BACKGROUND_STROKE_COLOR))
        painter.drawPath(self._background_path)
        painter.setPen(self.ring_pen(self._color))
        painter.drawPath(self._progress_path)
        handle_pen = QtGui.QPen(QtGui.QColor(HANDLE_STROKE_COLOR))
        handle_pen.setWidthF(1.0)
        painter.setPen(handle_pen)
        painter.setBrush(QtGui.QColor(HANDLE_FILL_COLOR))
        painter.drawEllipse(
            QtCore.QPointF(*self._handle), self._handle_radius, self._handle_radius
        )
        painter.restore()
