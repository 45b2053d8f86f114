"""Qt widget hosting the shared drawing surface of a circular slider.

This module lives in the UI layer. It paints the track views and forwards
mouse events to the input router; it does not interpret pointer positions
or mutate track state itself.
"""
from __future__ import annotations

from typing import Optional, Sequence

from PyQt5 import QtCore, QtGui, QtWidgets

from circular_slider.model.track_config import SceneContext
from circular_slider.rendering.track_view import TrackView
from circular_slider.widget.interaction import PointerEvent
from circular_slider.widget.interaction.input_router import SurfaceInputRouter


def pointer_event(event: QtGui.QMouseEvent) -> PointerEvent:
    pos = event.localPos()
    return PointerEvent(pos.x(), pos.y())


class SliderSurface(QtWidgets.QWidget):
    """Fixed-size surface drawing every track ring."""

    def __init__(
        self,
        scene: SceneContext,
        views: Sequence[TrackView],
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._scene = scene
        self._views = list(views)
        self._router: Optional[SurfaceInputRouter] = None
        self.setFixedSize(int(scene.width), int(scene.height))
        self.setAutoFillBackground(False)

    def set_router(self, router: SurfaceInputRouter) -> None:
        self._router = router

    # ------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------
    def paintEvent(self, event: QtGui.QPaintEvent) -> None:  # noqa: D401 - Qt signature
        painter = QtGui.QPainter(self)
        painter.fillRect(self.rect(), self.palette().color(QtGui.QPalette.Base))
        for view in self._views:
            view.paint(painter)
        painter.end()

    def mousePressEvent(self, event: QtGui.QMouseEvent) -> None:  # noqa: D401 - Qt signature
        if (
            self._router is not None
            and event.button() == QtCore.Qt.LeftButton
            and self._router.pointer_down(pointer_event(event))
        ):
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QtGui.QMouseEvent) -> None:  # noqa: D401 - Qt signature
        if self._router is not None and self._router.pointer_move(pointer_event(event)):
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QtGui.QMouseEvent) -> None:  # noqa: D401 - Qt signature
        if (
            self._router is not None
            and event.button() == QtCore.Qt.LeftButton
            and self._router.pointer_up(pointer_event(event))
        ):
            event.accept()
            return
        super().mouseReleaseEvent(event)
