"""Immutable construction inputs for slider tracks and their shared scene."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

from circular_slider.common.angle_value import AngleValueMapper
from circular_slider.common.constants import (
    DEFAULT_MAX,
    DEFAULT_MIN,
    DEFAULT_RADIUS,
    DEFAULT_STEP,
    SURFACE_HEIGHT,
    SURFACE_WIDTH,
)


@dataclass(frozen=True)
class SceneContext:
    """Drawing surface dimensions shared by every track of a composite."""

    width: float = SURFACE_WIDTH
    height: float = SURFACE_HEIGHT

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2


@dataclass(frozen=True)
class TrackConfig:
    color: str
    min: float = DEFAULT_MIN
    max: float = DEFAULT_MAX
    step: float = DEFAULT_STEP
    radius: float = DEFAULT_RADIUS
    description: str = ""

    def __post_init__(self) -> None:
        for name in ("min", "max", "step", "radius"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ValueError(f"Track {name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"Track {name} must be finite, got {value!r}")
        if self.step <= 0:
            raise ValueError(f"Track step must be positive, got {self.step!r}")
        if self.radius <= 0:
            raise ValueError(f"Track radius must be positive, got {self.radius!r}")
        if self.min >= self.max:
            raise ValueError(
                f"Track min must be below max, got min={self.min!r} max={self.max!r}"
            )

    @classmethod
    def from_spec(cls, spec: Mapping[str, Any]) -> "TrackConfig":
        """Build a config from a construction mapping, applying defaults.

        ``range`` may be missing or partial; absent bounds fall back to 0 and
        10. Missing ``step``/``radius`` fall back to 1 and 50; zero or
        negative values are rejected.
        """
        value_range = spec.get("range") or {}
        minimum = value_range.get("min")
        maximum = value_range.get("max")
        step = spec.get("step")
        radius = spec.get("radius")
        return cls(
            color=str(spec.get("color") or ""),
            min=DEFAULT_MIN if minimum is None else minimum,
            max=DEFAULT_MAX if maximum is None else maximum,
            step=DEFAULT_STEP if step is None else step,
            radius=DEFAULT_RADIUS if radius is None else radius,
            description=str(spec.get("description") or ""),
        )

    def to_spec(self) -> dict[str, Any]:
        return {
            "color": self.color,
            "range": {"min": self.min, "max": self.max},
            "step": self.step,
            "radius": self.radius,
            "description": self.description,
        }

    def mapper(self) -> AngleValueMapper:
        return AngleValueMapper(self.min, self.max, self.step)
