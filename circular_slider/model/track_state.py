"""Mutable per-track slider state.

This module sits in the model layer as a transient state holder driven by
the drag controller. It does not render or persist anything; it keeps the
committed step/angle/value together with the live drag angle so the view
can be projected from it at any time.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from circular_slider.common.angle_value import AngleValueMapper
from circular_slider.model.track_config import SceneContext, TrackConfig


@dataclass
class TrackState:
    """Mutable state for one track.

    ``current_step``/``current_angle``/``current_value`` are the committed
    values and only change on release. ``rendered_angle`` follows the
    pointer during a drag and equals ``current_angle`` at rest;
    ``pending_step`` is the step the pointer currently quantises to.
    """

    config: TrackConfig
    scene: SceneContext
    mapper: AngleValueMapper = field(init=False)
    total_steps: int = field(init=False)
    step_angle: float = field(init=False)
    current_step: int = 0
    current_angle: float = 0.0
    current_value: float = field(init=False)
    pending_step: int = 0
    rendered_angle: float = 0.0

    def __post_init__(self) -> None:
        self.mapper = self.config.mapper()
        self.total_steps = self.mapper.total_steps
        self.step_angle = self.mapper.step_angle
        self.current_angle = self.mapper.angle_for_step(self.current_step)
        self.current_value = self.mapper.value_for_step(self.current_step)
        self.pending_step = self.current_step
        self.rendered_angle = self.current_angle

    @classmethod
    def create(cls, config: TrackConfig, scene: SceneContext) -> "TrackState":
        return cls(config=config, scene=scene)

    @property
    def center(self) -> tuple[float, float]:
        return self.scene.center

    def commit(self) -> bool:
        """Snap to the pending step. Returns True if the value changed."""
        previous = self.current_value
        self.current_step = self.pending_step
        self.current_angle = self.mapper.angle_for_step(self.current_step)
        self.current_value = self.mapper.value_for_step(self.current_step)
        self.rendered_angle = self.current_angle
        return self.current_value != previous

    def is_at_rest(self) -> bool:
        return self.rendered_angle == self.current_angle
