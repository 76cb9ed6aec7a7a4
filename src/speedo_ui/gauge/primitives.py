"""
Drawing primitives emitted by the gauge renderer.

Angles follow screen conventions: 0 degrees points right and positive
angles turn clockwise, so -90 is straight up.
"""
from dataclasses import dataclass
import math
from typing import Tuple, Union

from speedo_helper import Color
from speedo_ui.core.dataclasses import Oval, Paint


@dataclass(frozen=True)
class Fill:
    color: Color


@dataclass(frozen=True)
class ArcPath:
    """Arc segments along an oval, each one a (start, sweep) pair in degrees."""
    oval: Oval
    segments: Tuple[Tuple[float, float], ...]
    paint: Paint

    @property
    def sweep(self) -> float:
        return sum(sweep for _, sweep in self.segments)


@dataclass(frozen=True)
class TextOnCircle:
    """
    Text laid along a clockwise circle starting at its rightmost point.

    h_offset is the arc length from the start to the first glyph, a negative
    v_offset lifts the baseline away from the center. The whole layer is
    rotated by `rotation` degrees around the center.
    """
    text: str
    center_x: float
    center_y: float
    radius: float
    h_offset: float
    v_offset: float
    rotation: float
    paint: Paint

    def point_at(self, distance: float) -> Tuple[float, float, float]:
        """
        Baseline point and baseline direction (degrees) at the given arc
        length along the circle.
        """
        theta = distance / self.radius + math.radians(self.rotation)
        baseline_radius = self.radius - self.v_offset

        x = self.center_x + baseline_radius * math.cos(theta)
        y = self.center_y + baseline_radius * math.sin(theta)

        return x, y, math.degrees(theta) + 90

    def anchor(self) -> Tuple[float, float, float]:
        return self.point_at(self.h_offset)


@dataclass(frozen=True)
class TextOnLine:
    """Text drawn along a straight baseline from start to end."""
    text: str
    start: Tuple[float, float]
    end: Tuple[float, float]
    paint: Paint

    @property
    def length(self) -> float:
        return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])

    @property
    def direction(self) -> float:
        return math.degrees(math.atan2(self.end[1] - self.start[1], self.end[0] - self.start[0]))


Primitive = Union[Fill, ArcPath, TextOnCircle, TextOnLine]
