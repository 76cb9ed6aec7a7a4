import logging
import math
from typing import Callable, Optional

from speedo_helper import clamp
from speedo_ui.core.dataclasses import Bounds, GaugeState, GeometrySnapshot, Oval


RADIUS_RATIO = 1.4


def _is_valid_max_speed(max_speed: float) -> bool:
    # Rejects NaN and infinity as well
    return math.isfinite(max_speed) and max_speed > 0


def _is_valid_number_of_steps(number_of_steps: int) -> bool:
    return (
        isinstance(number_of_steps, int)
        and not isinstance(number_of_steps, bool)
        and number_of_steps >= 1
    )


def compute_geometry(
    bounds: Bounds,
    max_speed: float,
    number_of_steps: int,
    radius_ratio: float = RADIUS_RATIO
) -> GeometrySnapshot:
    """
    Derive the dial geometry for the given bounds. The pivot sits at the
    bottom center so the half circle opens upwards.
    """
    center_x = bounds.width / 2
    center_y = bounds.height
    radius = bounds.height / radius_ratio

    oval = Oval(
        center_x - radius,
        center_y - radius,
        center_x + radius,
        center_y + radius
    )

    half_circumference = radius * math.pi

    return GeometrySnapshot(
        center_x=center_x,
        center_y=center_y,
        radius=radius,
        oval=oval,
        half_circumference=half_circumference,
        distance_increment=half_circumference / number_of_steps,
        scale_increment=max_speed / number_of_steps
    )


class GaugeModel:
    """
    Owns the gauge state and the geometry derived from it.

    Current speed always stays within [0, max_speed]. Every mutation asks
    the host for a redraw through `on_invalidate`.
    """
    DEFAULT_MAX_SPEED = 100.0
    DEFAULT_NUMBER_OF_STEPS = 10

    def __init__(
        self,
        max_speed: float = DEFAULT_MAX_SPEED,
        current_speed: float = 0.0,
        number_of_steps: int = DEFAULT_NUMBER_OF_STEPS,
        radius_ratio: float = RADIUS_RATIO,
        on_invalidate: Optional[Callable[[], None]] = None
    ) -> None:
        if not _is_valid_max_speed(max_speed):
            raise ValueError(f"max_speed must be a positive finite number, got {max_speed}")
        if not _is_valid_number_of_steps(number_of_steps):
            raise ValueError(f"number_of_steps must be an integer of at least 1, got {number_of_steps!r}")
        if radius_ratio <= 0:
            raise ValueError(f"radius_ratio must be positive, got {radius_ratio}")

        self._max_speed = float(max_speed)
        self._current_speed = clamp(float(current_speed), 0.0, self._max_speed)
        self._number_of_steps = number_of_steps
        self.radius_ratio = radius_ratio

        self.on_invalidate = on_invalidate

        self.bounds: Optional[Bounds] = None
        self.geometry: Optional[GeometrySnapshot] = None

    def get_current_speed(self) -> float:
        return self._current_speed

    def set_current_speed(self, current_speed: float) -> None:
        # Out of range values saturate, they are never rejected
        self._current_speed = clamp(float(current_speed), 0.0, self._max_speed)
        self.invalidate()

    def get_max_speed(self) -> float:
        return self._max_speed

    def set_max_speed(self, max_speed: float) -> None:
        if not _is_valid_max_speed(max_speed):
            return

        self._max_speed = float(max_speed)
        self._current_speed = clamp(self._current_speed, 0.0, self._max_speed)
        self._refresh_geometry()
        self.invalidate()

    def get_number_of_steps(self) -> int:
        return self._number_of_steps

    def set_number_of_steps(self, number_of_steps: int) -> None:
        if not _is_valid_number_of_steps(number_of_steps):
            return

        self._number_of_steps = number_of_steps
        self._refresh_geometry()
        self.invalidate()

    def on_speed_changed(self, new_speed: float) -> None:
        """Entry point for external speed sources."""
        self.set_current_speed(new_speed)
        self.invalidate()

    def state(self) -> GaugeState:
        return GaugeState(
            max_speed=self._max_speed,
            current_speed=self._current_speed,
            number_of_steps=self._number_of_steps
        )

    def recompute_geometry(self, bounds: Bounds) -> GeometrySnapshot:
        self.bounds = bounds
        self.geometry = compute_geometry(
            bounds,
            self._max_speed,
            self._number_of_steps,
            self.radius_ratio
        )
        logging.debug(f"Gauge geometry recomputed for {bounds.width}x{bounds.height}: radius={self.geometry.radius:.2f}")

        return self.geometry

    def invalidate(self) -> None:
        if self.on_invalidate is not None:
            self.on_invalidate()

    def _refresh_geometry(self) -> None:
        if self.bounds is not None:
            self.recompute_geometry(self.bounds)
