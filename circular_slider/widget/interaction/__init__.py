"""Interaction primitives for slider tracks."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class DragPhase(Enum):
    """Drag state of a single track."""

    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class PointerEvent:
    """Pointer position in surface coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class SetAngle:
    angle: float


@dataclass(frozen=True)
class SetValue:
    value: float


RenderCommand = Union[SetAngle, SetValue]


@dataclass(frozen=True)
class Transition:
    """Result of feeding one pointer event to a track's state machine.

    ``angle``/``pending_step`` are None when the event left the state alone.
    ``commit`` asks the controller to snap the committed step to
    ``pending_step``.
    """

    phase: DragPhase
    angle: Optional[float] = None
    pending_step: Optional[int] = None
    commit: bool = False
    commands: tuple[RenderCommand, ...] = field(default_factory=tuple)

    @property
    def handled(self) -> bool:
        return bool(self.commands) or self.commit


__all__ = [
    "DragPhase",
    "PointerEvent",
    "RenderCommand",
    "SetAngle",
    "SetValue",
    "Transition",
]
