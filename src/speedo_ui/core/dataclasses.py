"""Core dataclasses for speedo_ui."""
from dataclasses import dataclass, field, replace
from enum import Enum
import logging
import math
from typing import Any, Callable, Mapping, Optional, Tuple

from speedo_helper import Color, parse_color
from speedo_ui.utils.colors import (
  BLACK,
  BLUE,
  TRANSLUCENT_BLACK,
  WHITE,
  YELLOW,
)


@dataclass(frozen=True)
class Bounds:
    """Resolved drawing bounds in pixels."""
    width: float
    height: float


@dataclass(frozen=True)
class Oval:
    """Axis aligned box whose inscribed ellipse is used for arc drawing."""
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Tuple[float, float]:
        return ((self.left + self.right) / 2, (self.top + self.bottom) / 2)


@dataclass(frozen=True)
class GaugeState:
    """Read-only view of the gauge model state."""
    max_speed: float
    current_speed: float
    number_of_steps: int


@dataclass(frozen=True)
class GeometrySnapshot:
    """Geometry derived from bounds, max speed and step count."""
    center_x: float
    center_y: float
    radius: float
    oval: Oval
    half_circumference: float
    distance_increment: float
    scale_increment: float


class PaintStyle(Enum):
    STROKE = "stroke"
    FILL = "fill"
    FILL_AND_STROKE = "fill_and_stroke"


@dataclass(frozen=True)
class Paint:
    color: Color
    style: PaintStyle = PaintStyle.STROKE
    stroke_width: float = 0.0
    text_size: float = 0.0
    antialias: bool = True
    typeface: Optional[str] = None

    def derive(self, **changes: Any) -> 'Paint':
        return replace(self, **changes)


@dataclass(frozen=True)
class GaugePaints:
    """Paint descriptors for every layer of the gauge, built once."""
    on: Paint
    off: Paint
    scale: Paint
    reading: Paint
    background: Color


@dataclass(frozen=True)
class GaugeStyle:
    on_color: Color = YELLOW
    off_color: Color = TRANSLUCENT_BLACK
    scale_color: Color = BLUE
    reading_color: Color = BLACK
    background_color: Color = WHITE
    scale_text_size: float = 12.0
    reading_text_size: float = 50.0
    arc_width: float = 35.0

    def paints(self) -> GaugePaints:
        on = Paint(
            color=self.on_color,
            style=PaintStyle.STROKE,
            stroke_width=self.arc_width,
            antialias=True
        )
        off = on.derive(color=self.off_color, style=PaintStyle.FILL_AND_STROKE)
        scale = off.derive(
            stroke_width=2.0,
            text_size=self.scale_text_size,
            color=self.scale_color
        )
        reading = scale.derive(
            style=PaintStyle.FILL_AND_STROKE,
            text_size=self.reading_text_size,
            typeface="sans",
            color=self.reading_color
        )

        return GaugePaints(
            on=on,
            off=off,
            scale=scale,
            reading=reading,
            background=self.background_color
        )


@dataclass(frozen=True)
class GaugeConfig:
    max_speed: float = 100.0
    current_speed: float = 0.0
    number_of_steps: int = 10
    radius_ratio: float = 1.4
    segment_degrees: float = 4.0
    exact_sweep: bool = True
    style: GaugeStyle = field(default_factory=GaugeStyle)

    @classmethod
    def from_settings(cls, options: Mapping[str, Any]) -> 'GaugeConfig':
        """
        Build a config from a settings mapping. Every option is validated on
        its own, invalid values are logged and replaced by their default.
        """
        defaults = cls()
        style_defaults = defaults.style

        density = _option(options, "density", 1.0, _positive_float)

        style = GaugeStyle(
            on_color=_option(options, "on_color", style_defaults.on_color, parse_color),
            off_color=_option(options, "off_color", style_defaults.off_color, parse_color),
            scale_color=_option(options, "scale_color", style_defaults.scale_color, parse_color),
            reading_color=_option(options, "reading_color", style_defaults.reading_color, parse_color),
            background_color=_option(options, "background_color", style_defaults.background_color, parse_color),
            scale_text_size=max(1, int(_option(options, "scale_text_size", style_defaults.scale_text_size, _positive_float) * density)),
            reading_text_size=max(1, int(_option(options, "reading_text_size", style_defaults.reading_text_size, _positive_float) * density)),
            arc_width=_option(options, "arc_width", style_defaults.arc_width, _positive_float),
        )

        return cls(
            max_speed=_option(options, "max_speed", defaults.max_speed, _positive_float),
            current_speed=_option(options, "current_speed", defaults.current_speed, _float),
            number_of_steps=_option(options, "number_of_steps", defaults.number_of_steps, _positive_int),
            radius_ratio=_option(options, "radius_ratio", defaults.radius_ratio, _positive_float),
            segment_degrees=_option(options, "segment_degrees", defaults.segment_degrees, _positive_float),
            exact_sweep=_option(options, "exact_sweep", defaults.exact_sweep, _bool),
            style=style,
        )


def _option(
    options: Mapping[str, Any],
    key: str,
    default: Any,
    convert: Callable[[Any], Any]
) -> Any:
    if key not in options:
        return default

    try:
        return convert(options[key])
    except (TypeError, ValueError) as e:
        logging.warning(f"Invalid gauge option '{key}': {e}, using default {default!r}")
        return default


def _float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"expected a finite number, got {value!r}")

    return float(value)


def _positive_float(value: Any) -> float:
    number = _float(value)
    if number <= 0:
        raise ValueError(f"expected a positive number, got {value!r}")

    return number


def _positive_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    if value < 1:
        raise ValueError(f"expected at least 1, got {value!r}")

    return value


def _bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected true or false, got {value!r}")

    return value

