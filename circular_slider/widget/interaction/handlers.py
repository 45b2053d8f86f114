"""Pure pointer-event handlers for the track drag state machine.

Each handler reads the current phase and track state, and returns a
``Transition`` describing the next phase, the state changes to apply and the
render commands to issue. Nothing here mutates the state.
"""
from __future__ import annotations

from circular_slider.common.geometry import angle_from_point
from circular_slider.model.track_state import TrackState
from circular_slider.widget.interaction import (
    DragPhase,
    PointerEvent,
    SetAngle,
    SetValue,
    Transition,
)


def pointer_angle(state: TrackState, event: PointerEvent) -> float:
    """Angle of the pointer around the track centre, in ``[0, 360)``."""
    return angle_from_point((event.x, event.y), state.center)


def _follow_pointer(
    state: TrackState, event: PointerEvent, live_readout: bool
) -> Transition:
    angle = pointer_angle(state, event)
    pending_step = state.mapper.step_for_angle(angle)
    commands = [SetAngle(angle)]
    if live_readout:
        commands.append(SetValue(state.mapper.value_for_step(pending_step)))
    return Transition(
        phase=DragPhase.DRAGGING,
        angle=angle,
        pending_step=pending_step,
        commands=tuple(commands),
    )


def on_pointer_down(
    phase: DragPhase, state: TrackState, event: PointerEvent, live_readout: bool
) -> Transition:
    """Start (or restart) a drag and show the raw pointer angle."""
    return _follow_pointer(state, event, live_readout)


def on_pointer_move(
    phase: DragPhase, state: TrackState, event: PointerEvent, live_readout: bool
) -> Transition:
    if phase is not DragPhase.DRAGGING:
        return Transition(phase=phase)
    return _follow_pointer(state, event, live_readout)


def on_pointer_up(phase: DragPhase, state: TrackState) -> Transition:
    """Snap to the quantised angle and finalise the readout."""
    if phase is not DragPhase.DRAGGING:
        return Transition(phase=phase)
    committed_angle = state.mapper.angle_for_step(state.pending_step)
    committed_value = state.mapper.value_for_step(state.pending_step)
    return Transition(
        phase=DragPhase.IDLE,
        angle=committed_angle,
        pending_step=state.pending_step,
        commit=True,
        commands=(SetAngle(committed_angle), SetValue(committed_value)),
    )
