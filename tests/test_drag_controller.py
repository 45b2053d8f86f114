import pytest

from circular_slider.common.geometry import polar_to_cartesian
from circular_slider.model.track_config import SceneContext, TrackConfig
from circular_slider.model.track_state import TrackState
from circular_slider.widget.interaction import DragPhase, PointerEvent, SetAngle, SetValue
from circular_slider.widget.interaction.drag_controller import DragController
from circular_slider.widget.interaction.handlers import (
    on_pointer_down,
    on_pointer_move,
    on_pointer_up,
    pointer_angle,
)


class _CapturingView:
    def __init__(self) -> None:
        self.angles: list[float] = []
        self.values: list[float] = []

    def set_angle(self, angle: float) -> None:
        self.angles.append(angle)

    def set_value(self, value: float) -> None:
        self.values.append(value)


def _state(**kwargs) -> TrackState:
    return TrackState.create(TrackConfig("red", **kwargs), SceneContext())


def _at(state: TrackState, angle: float, radius=None) -> PointerEvent:
    # Ring angle zero is at the top of the surface.
    x, y = polar_to_cartesian(
        state.center, radius or state.config.radius, angle - 90.0
    )
    return PointerEvent(x, y)


@pytest.fixture
def track():
    state = _state()
    view = _CapturingView()
    return state, view, DragController(state, view)


def test_pointer_angle_from_event(track):
    state, _view, _controller = track

    assert pointer_angle(state, _at(state, 40)) == pytest.approx(40)
    assert pointer_angle(state, _at(state, 300, radius=500)) == pytest.approx(300)


def test_handlers_do_not_mutate_state():
    state = _state()

    down = on_pointer_down(DragPhase.IDLE, state, _at(state, 100), live_readout=True)
    up = on_pointer_up(DragPhase.DRAGGING, state)

    assert down.phase is DragPhase.DRAGGING
    assert down.pending_step == 3
    assert down.commands[0] == SetAngle(pytest.approx(100))
    assert down.commands[1] == SetValue(3)
    assert up.commit
    assert state.rendered_angle == 0.0
    assert state.current_step == 0


def test_idle_moves_and_releases_are_ignored():
    state = _state()

    move = on_pointer_move(DragPhase.IDLE, state, _at(state, 100), live_readout=False)
    up = on_pointer_up(DragPhase.IDLE, state)

    assert move.phase is DragPhase.IDLE and not move.handled
    assert up.phase is DragPhase.IDLE and not up.handled


def test_drag_sequence_commits_quantized_step(track):
    state, view, controller = track

    assert controller.handle_pointer_down(_at(state, 10))
    assert controller.phase is DragPhase.DRAGGING
    assert view.angles[-1] == pytest.approx(10)

    controller.handle_pointer_move(_at(state, 40))
    assert view.angles[-1] == pytest.approx(40)
    assert state.pending_step == 1
    assert state.current_step == 0
    assert state.current_value == 0

    controller.handle_pointer_up()

    assert controller.phase is DragPhase.IDLE
    assert state.current_step == 1
    assert state.current_angle == 36.0
    assert state.current_value == 1
    assert view.angles[-1] == 36.0
    assert state.is_at_rest()


def test_readout_updates_only_on_release_by_default(track):
    state, view, controller = track

    controller.handle_pointer_down(_at(state, 10))
    controller.handle_pointer_move(_at(state, 75))
    assert view.values == []

    controller.handle_pointer_up()
    assert view.values == [2]


def test_live_readout_updates_on_every_move():
    state = _state()
    view = _CapturingView()
    controller = DragController(state, view, live_readout=True)

    controller.handle_pointer_down(_at(state, 10))
    controller.handle_pointer_move(_at(state, 75))
    controller.handle_pointer_move(_at(state, 110))
    assert view.values == [0, 2, 3]
    assert state.current_value == 0

    controller.handle_pointer_up()
    assert view.values == [0, 2, 3, 3]
    assert state.current_value == 3


def test_moves_and_releases_while_idle_are_no_ops(track):
    state, view, controller = track

    assert not controller.handle_pointer_move(_at(state, 100))
    assert not controller.handle_pointer_up(_at(state, 100))
    assert view.angles == []
    assert view.values == []
    assert state.rendered_angle == 0.0


def test_near_full_turn_commits_to_maximum(track):
    state, view, controller = track

    controller.handle_pointer_down(_at(state, 359))
    controller.handle_pointer_up()

    assert state.current_step == 10
    assert state.current_angle == 360.0
    assert state.current_value == 10


def test_partial_last_step_value():
    state = _state(min=0, max=10, step=3)
    controller = DragController(state)

    controller.handle_pointer_down(_at(state, 265))
    controller.handle_pointer_up()

    assert state.current_step == 3
    assert state.current_angle == 270.0
    assert state.current_value == 9


def test_listener_fires_once_per_committed_change(track):
    state, _view, controller = track
    received = []
    controller.add_value_listener(received.append)
    controller.add_value_listener(received.append)

    controller.handle_pointer_down(_at(state, 100))
    controller.handle_pointer_move(_at(state, 150))
    assert received == []
    controller.handle_pointer_up()
    assert received == [4]

    controller.handle_pointer_down(_at(state, 140))
    controller.handle_pointer_up()
    assert received == [4]

    controller.remove_value_listener(received.append)
    controller.handle_pointer_down(_at(state, 10))
    controller.handle_pointer_up()
    assert received == [4]
    assert controller.value == 0


def test_repaint_requested_for_each_render(track):
    state, view, _controller = track
    repaints = []
    controller = DragController(state, view, request_repaint=lambda: repaints.append(1))

    controller.handle_pointer_move(_at(state, 10))
    controller.handle_pointer_down(_at(state, 10))
    controller.handle_pointer_move(_at(state, 20))
    controller.handle_pointer_up()

    assert len(repaints) == 3


def test_tracks_do_not_share_state():
    inner = _state(radius=50)
    outer = _state(radius=120, max=100, step=5)
    inner_controller = DragController(inner, _CapturingView())
    outer_view = _CapturingView()
    outer_controller = DragController(outer, outer_view)

    inner_controller.handle_pointer_down(_at(inner, 200))
    inner_controller.handle_pointer_move(_at(inner, 250))
    outer_controller.handle_pointer_move(_at(outer, 250))
    inner_controller.handle_pointer_up()
    outer_controller.handle_pointer_up()

    assert inner.current_step == 7
    assert outer.current_step == 0
    assert outer.rendered_angle == 0.0
    assert outer_controller.phase is DragPhase.IDLE
    assert outer_view.angles == []
