"""Quantisation between ring angles, step indices and slider values."""
from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_CEILING, Decimal


def total_steps(minimum: float, maximum: float, step: float) -> int:
    """Number of discrete steps around the ring.

    The final step may cover less than *step* when the range is not an exact
    multiple of it (0..10 by 3 gives four steps, the last spanning 1).
    """
    span = Decimal(str(maximum)) - Decimal(str(minimum))
    return int((span / Decimal(str(step))).to_integral_value(rounding=ROUND_CEILING))


def step_angle(steps: int) -> float:
    """Angle covered by a single step, in degrees."""
    return 360.0 / steps


def step_for_angle(angle: float, angle_per_step: float) -> int:
    """Quantise *angle* to the nearest step index.

    Exact half-step ties round up (half away from zero for the non-negative
    angles a ring produces), so 90 degrees on a 36 degree ring is step 3.
    """
    return math.floor(angle / angle_per_step + 0.5)


def angle_for_step(step_index: int, angle_per_step: float) -> float:
    """Committed angle of *step_index*."""
    return step_index * angle_per_step


def value_for_step(
    step_index: int, minimum: float, step: float, maximum: float
) -> float:
    """Slider value at *step_index*, clamped to ``[minimum, maximum]``."""
    value = minimum + step_index * step
    decimals = max(decimal_places(minimum), decimal_places(step))
    value = round(value, decimals)
    return min(max(value, minimum), maximum)


def decimal_places(number: float) -> int:
    """Number of fractional digits needed to print *number* exactly."""
    exponent = Decimal(str(number)).normalize().as_tuple().exponent
    if not isinstance(exponent, int):
        return 0
    return max(0, -exponent)


@dataclass(frozen=True)
class AngleValueMapper:
    """Owns the min/max/step contract for one track."""

    minimum: float
    maximum: float
    step: float

    @property
    def total_steps(self) -> int:
        return total_steps(self.minimum, self.maximum, self.step)

    @property
    def step_angle(self) -> float:
        return step_angle(self.total_steps)

    def step_for_angle(self, angle: float) -> int:
        return step_for_angle(angle, self.step_angle)

    def angle_for_step(self, step_index: int) -> float:
        return angle_for_step(step_index, self.step_angle)

    def value_for_step(self, step_index: int) -> float:
        return value_for_step(step_index, self.minimum, self.step, self.maximum)
