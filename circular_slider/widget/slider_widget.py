"""Multi-track circular slider composite widget."""
from __future__ import annotations

from functools import partial
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from PyQt5 import QtCore, QtWidgets

from circular_slider.common.constants import DEFAULT_READOUT_SYMBOL
from circular_slider.model.track_config import SceneContext, TrackConfig
from circular_slider.model.track_state import TrackState
from circular_slider.rendering.svg_export import render_svg, write_svg
from circular_slider.rendering.track_view import TrackView
from circular_slider.widget.interaction.drag_controller import DragController
from circular_slider.widget.interaction.input_router import SurfaceInputRouter
from circular_slider.widget.readout_panel import ReadoutPanel
from circular_slider.widget.slider_surface import SliderSurface

logger = logging.getLogger(__name__)


def create_tracks(
    slides: Sequence[Mapping[str, Any]],
    scene: SceneContext,
    readout_symbol: str = DEFAULT_READOUT_SYMBOL,
) -> tuple[list[TrackState], list[TrackView]]:
    """Validate *slides* and build the state and view of every track.

    Raises ``ValueError`` for an invalid track before anything is built.
    """
    configs = [TrackConfig.from_spec(slide) for slide in slides]
    states = [TrackState.create(config, scene) for config in configs]
    for state in states:
        logger.debug(
            "Track geometry: description=%r total_steps=%s step_angle=%.4f",
            state.config.description,
            state.total_steps,
            state.step_angle,
        )
    views = [TrackView(state, readout_symbol=readout_symbol) for state in states]
    return states, views


class CircularSlider(QtWidgets.QWidget):
    """Concentric draggable range tracks with a readout panel.

    Tracks are independent; ``valueChanged`` is emitted with the track index
    whenever a drag commits a different value.
    """

    valueChanged = QtCore.pyqtSignal(int, float)

    def __init__(
        self,
        slides: Sequence[Mapping[str, Any]],
        container: Optional[QtWidgets.QWidget] = None,
        *,
        live_readout: bool = False,
        readout_symbol: str = DEFAULT_READOUT_SYMBOL,
        scene: Optional[SceneContext] = None,
    ) -> None:
        super().__init__(container)
        self._scene = scene or SceneContext()
        self._states, self._views = create_tracks(slides, self._scene, readout_symbol)
        self._surface = SliderSurface(self._scene, self._views)
        self._panel = ReadoutPanel()
        self._controllers: list[DragController] = []
        for index, (state, view) in enumerate(zip(self._states, self._views)):
            controller = DragController(
                state,
                view,
                live_readout=live_readout,
                request_repaint=self._surface.update,
            )
            controller.add_value_listener(partial(self._emit_value_changed, index))
            self._controllers.append(controller)
            self._panel.add_track(view)
        self._router = SurfaceInputRouter(self._controllers)
        self._surface.set_router(self._router)

        layout = QtWidgets.QHBoxLayout()
        layout.addWidget(self._surface)
        layout.addWidget(self._panel)
        self.setLayout(layout)

        if container is not None and container.layout() is not None:
            container.layout().addWidget(self)
        logger.info(
            "Created circular slider: tracks=%s live_readout=%s",
            len(self._controllers),
            live_readout,
        )

    @property
    def track_count(self) -> int:
        return len(self._controllers)

    @property
    def controllers(self) -> tuple[DragController, ...]:
        return tuple(self._controllers)

    @property
    def views(self) -> tuple[TrackView, ...]:
        return tuple(self._views)

    @property
    def surface(self) -> SliderSurface:
        return self._surface

    @property
    def readout_panel(self) -> ReadoutPanel:
        return self._panel

    def values(self) -> list[float]:
        return [controller.value for controller in self._controllers]

    def value(self, index: int) -> float:
        return self._controllers[index].value

    def render_svg(self) -> str:
        return render_svg(self._scene, self._views)

    def export_svg(self, path: Path) -> Path:
        return write_svg(path, self._scene, self._views)

    def _emit_value_changed(self, index: int, value: float) -> None:
        self.valueChanged.emit(index, float(value))
