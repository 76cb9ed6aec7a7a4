from dataclasses import dataclass
from enum import Enum
import logging


class MeasureMode(Enum):
    EXACTLY = "exactly"
    AT_MOST = "at_most"
    UNSPECIFIED = "unspecified"


@dataclass(frozen=True)
class MeasureSpec:
    """A single axis layout constraint handed down by the host."""
    mode: MeasureMode
    size: int = 0

    @classmethod
    def exactly(cls, size: int) -> 'MeasureSpec':
        return cls(MeasureMode.EXACTLY, size)

    @classmethod
    def at_most(cls, size: int) -> 'MeasureSpec':
        return cls(MeasureMode.AT_MOST, size)

    @classmethod
    def unspecified(cls) -> 'MeasureSpec':
        return cls(MeasureMode.UNSPECIFIED)


@dataclass(frozen=True)
class Measurement:
    width: int
    height: int
    center_x: float
    center_y: float


class SizingPolicy:
    """
    Resolves the final widget size from host constraints, keeping a fixed
    2:1 width to height ratio.

    Both axes are recomputed from whichever one is limiting, the other axis
    only ever shrinks.
    """
    DEFAULT_SIZE = 300

    def __init__(self, default_size: int = DEFAULT_SIZE) -> None:
        self.default_size = default_size

    def choose_dimension(self, spec: MeasureSpec) -> int:
        if spec.mode in (MeasureMode.EXACTLY, MeasureMode.AT_MOST):
            return spec.size

        return self.default_size

    def resolve(self, width_spec: MeasureSpec, height_spec: MeasureSpec) -> Measurement:
        chosen_width = self.choose_dimension(width_spec)
        chosen_height = self.choose_dimension(height_spec)

        if chosen_width / 2 > chosen_height:
            height = chosen_height
            width = height * 2
        else:
            # Odd widths lose a pixel so width stays exactly twice the height
            height = chosen_width // 2
            width = height * 2

        measurement = Measurement(
            width=width,
            height=height,
            center_x=width / 2,
            center_y=height
        )
        logging.debug(f"Measured gauge: {width}x{height} from {chosen_width}x{chosen_height}")

        return measurement
