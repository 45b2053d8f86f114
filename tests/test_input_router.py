import pytest

from circular_slider.model.track_config import SceneContext, TrackConfig
from circular_slider.model.track_state import TrackState
from circular_slider.widget.interaction import DragPhase, PointerEvent
from circular_slider.widget.interaction.drag_controller import DragController
from circular_slider.widget.interaction.input_router import SurfaceInputRouter


def _router(*radii: float) -> SurfaceInputRouter:
    scene = SceneContext()
    controllers = [
        DragController(TrackState.create(TrackConfig("red", radius=r), scene))
        for r in radii
    ]
    return SurfaceInputRouter(controllers)


@pytest.mark.parametrize(
    "point, expected",
    [
        ((200.0, 100.0), 1),
        ((200.0, 150.0), 0),
        ((259.0, 200.0), 0),
        ((200.0, 200.0), None),
        ((200.0, 125.0), None),
        ((400.0, 400.0), None),
    ],
)
def test_hit_index_uses_ring_width(point, expected):
    router = _router(50, 100)

    assert router.hit_index(PointerEvent(*point)) == expected


def test_handle_overhang_is_part_of_the_hit_region():
    router = _router(50)

    # 12 units above the ring centre line: outside the stroke, inside the handle.
    assert router.hit_index(PointerEvent(200.0, 138.0)) == 0
    assert router.hit_index(PointerEvent(212.0, 138.0)) is None


def test_overlapping_rings_pick_topmost_track():
    router = _router(50, 55)

    assert router.hit_index(PointerEvent(200.0, 148.0)) == 1


def test_press_outside_rings_starts_nothing():
    router = _router(50, 100)

    assert not router.pointer_down(PointerEvent(200.0, 200.0))
    assert not router.pointer_up(PointerEvent(200.0, 200.0))
    assert all(c.phase is DragPhase.IDLE for c in router.controllers)


def test_drag_continues_outside_the_ring():
    router = _router(50, 100)
    inner, outer = router.controllers

    assert router.pointer_down(PointerEvent(200.0, 150.0))
    assert inner.is_dragging and not outer.is_dragging

    assert router.pointer_move(PointerEvent(390.0, 200.0))
    assert inner.state.rendered_angle == pytest.approx(90.0)
    assert outer.state.rendered_angle == 0.0

    assert router.pointer_up(PointerEvent(390.0, 200.0))
    assert inner.state.current_step == 3
    assert inner.state.current_angle == 108.0
    assert outer.state.current_step == 0


def test_empty_router_hits_nothing():
    router = SurfaceInputRouter([])

    assert router.hit_index(PointerEvent(0.0, 0.0)) is None
    assert not router.pointer_down(PointerEvent(0.0, 0.0))
