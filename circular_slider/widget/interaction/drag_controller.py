"""Drag controller that drives one track from pointer events."""
from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from circular_slider.model.track_state import TrackState
from circular_slider.widget.interaction import (
    DragPhase,
    PointerEvent,
    RenderCommand,
    SetAngle,
    SetValue,
    Transition,
)
from circular_slider.widget.interaction.handlers import (
    on_pointer_down,
    on_pointer_move,
    on_pointer_up,
)

logger = logging.getLogger(__name__)

ValueListener = Callable[[float], None]


class TrackRenderTarget(Protocol):
    def set_angle(self, angle: float) -> None: ...

    def set_value(self, value: float) -> None: ...


class DragController:
    """Idle/Dragging state machine for a single track.

    Pointer-down must only be routed here when it hits this track; moves and
    releases may come from anywhere on the surface and are ignored while
    idle. The controller is the only writer of its ``TrackState``.
    """

    def __init__(
        self,
        state: TrackState,
        view: Optional[TrackRenderTarget] = None,
        *,
        live_readout: bool = False,
        request_repaint: Optional[Callable[[], None]] = None,
    ) -> None:
        self._state = state
        self._view = view
        self._live_readout = live_readout
        self._request_repaint = request_repaint
        self._phase = DragPhase.IDLE
        self._listeners: list[ValueListener] = []

    @property
    def state(self) -> TrackState:
        return self._state

    @property
    def phase(self) -> DragPhase:
        return self._phase

    @property
    def is_dragging(self) -> bool:
        return self._phase is DragPhase.DRAGGING

    @property
    def live_readout(self) -> bool:
        return self._live_readout

    @property
    def value(self) -> float:
        return self._state.current_value

    def add_value_listener(self, listener: ValueListener) -> None:
        """Register *listener* for committed value changes."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_value_listener(self, listener: ValueListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------
    def handle_pointer_down(self, event: PointerEvent) -> bool:
        transition = on_pointer_down(
            self._phase, self._state, event, self._live_readout
        )
        logger.debug(
            "Drag started: radius=%s angle=%.2f",
            self._state.config.radius,
            transition.angle,
        )
        return self._apply(transition)

    def handle_pointer_move(self, event: PointerEvent) -> bool:
        return self._apply(
            on_pointer_move(self._phase, self._state, event, self._live_readout)
        )

    def handle_pointer_up(self, event: Optional[PointerEvent] = None) -> bool:
        return self._apply(on_pointer_up(self._phase, self._state))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _apply(self, transition: Transition) -> bool:
        self._phase = transition.phase
        if transition.angle is not None:
            self._state.rendered_angle = transition.angle
        if transition.pending_step is not None:
            self._state.pending_step = transition.pending_step
        changed = False
        if transition.commit:
            changed = self._state.commit()
            logger.debug(
                "Drag committed: radius=%s step=%s angle=%.2f value=%s",
                self._state.config.radius,
                self._state.current_step,
                self._state.current_angle,
                self._state.current_value,
            )
        self._dispatch(transition.commands)
        if changed:
            logger.info(
                "Track value changed: description=%r value=%s",
                self._state.config.description,
                self._state.current_value,
            )
            for listener in list(self._listeners):
                listener(self._state.current_value)
        if transition.commands and self._request_repaint is not None:
            self._request_repaint()
        return transition.handled

    def _dispatch(self, commands: tuple[RenderCommand, ...]) -> None:
        if self._view is None:
            return
        for command in commands:
            if isinstance(command, SetAngle):
                self._view.set_angle(command.angle)
            elif isinstance(command, SetValue):
                self._view.set_value(command.value)
