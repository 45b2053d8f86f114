"""Routes surface pointer events to the drag controllers of each track."""
from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from circular_slider.common.constants import (
    HANDLE_RADIUS,
    STROKE_WIDTH,
    VIEW_ROTATION_DEGREES,
)
from circular_slider.widget.interaction import PointerEvent
from circular_slider.widget.interaction.drag_controller import DragController


class SurfaceInputRouter:
    """Dispatch pointer events for a shared drawing surface.

    Presses only start a drag on the track they hit; moves and releases are
    offered to every track, and idle tracks ignore them.
    """

    def __init__(
        self,
        controllers: Sequence[DragController],
        *,
        stroke_width: float = STROKE_WIDTH,
        handle_radius: float = HANDLE_RADIUS,
    ) -> None:
        self._controllers = list(controllers)
        self._stroke_width = stroke_width
        self._handle_radius = handle_radius
        states = [controller.state for controller in self._controllers]
        self._centers = np.array(
            [state.center for state in states], dtype=float
        ).reshape(-1, 2)
        self._radii = np.array([state.config.radius for state in states], dtype=float)

    @property
    def controllers(self) -> list[DragController]:
        return list(self._controllers)

    def hit_mask(self, x: float, y: float) -> np.ndarray:
        """Boolean mask of the tracks whose ring or handle contains ``(x, y)``."""
        if not self._controllers:
            return np.zeros(0, dtype=bool)
        offsets = np.array([x, y], dtype=float) - self._centers
        distances = np.hypot(offsets[:, 0], offsets[:, 1])
        on_ring = np.abs(distances - self._radii) <= self._stroke_width / 2
        angles = np.array(
            [controller.state.rendered_angle for controller in self._controllers],
            dtype=float,
        )
        theta = np.radians(angles + VIEW_ROTATION_DEGREES)
        handle_x = self._centers[:, 0] + self._radii * np.cos(theta)
        handle_y = self._centers[:, 1] + self._radii * np.sin(theta)
        on_handle = np.hypot(x - handle_x, y - handle_y) <= self._handle_radius
        return on_ring | on_handle

    def hit_index(self, event: PointerEvent) -> Optional[int]:
        """Index of the topmost track under *event*, if any.

        Later tracks are painted on top, so they win overlapping hits.
        """
        hits = np.flatnonzero(self.hit_mask(event.x, event.y))
        if hits.size == 0:
            return None
        return int(hits[-1])

    def pointer_down(self, event: PointerEvent) -> bool:
        index = self.hit_index(event)
        if index is None:
            return False
        return self._controllers[index].handle_pointer_down(event)

    def pointer_move(self, event: PointerEvent) -> bool:
        handled = False
        for controller in self._controllers:
            if controller.handle_pointer_move(event):
                handled = True
        return handled

    def pointer_up(self, event: PointerEvent) -> bool:
        handled = False
        for controller in self._controllers:
            if controller.handle_pointer_up(event):
                handled = True
        return handled
