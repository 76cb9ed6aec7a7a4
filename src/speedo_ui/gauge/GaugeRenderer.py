from typing import Callable, List, Optional, Sequence, Tuple

from speedo_helper import round_half_up
from speedo_ui.core.dataclasses import GaugePaints, GaugeState, GeometrySnapshot, Paint
from speedo_ui.gauge.primitives import ArcPath, Fill, Primitive, TextOnCircle, TextOnLine


TextMeasure = Callable[[str, Paint], Sequence[float]]

SEGMENT_DEGREES = 4.0


def arc_segments(
    start: float,
    end: float,
    step: float = SEGMENT_DEGREES,
    exact: bool = True
) -> Tuple[Tuple[float, float], ...]:
    """
    Split the sweep from start to end into fixed size segments.

    With `exact` the last segment is shortened to stop at `end`, otherwise
    every segment is a full step and the last one may overshoot.
    """
    segments = []
    index = 0
    angle = start
    while angle < end:
        sweep = min(step, end - angle) if exact else step
        segments.append((angle, sweep))
        index += 1
        angle = start + index * step

    return tuple(segments)


class GaugeRenderer:
    """
    Turns gauge state and geometry into an ordered list of primitives.

    The renderer keeps no state between frames, paints are handed in on
    every call.
    """
    START_ANGLE = -180.0
    SWEEP_ANGLE = 180.0
    SCALE_ROTATION = -180.0
    SCALE_TEXT_OFFSET = -30.0
    READING_BOTTOM_MARGIN = 10.0

    def __init__(
        self,
        measure_text: TextMeasure,
        segment_degrees: float = SEGMENT_DEGREES,
        exact_sweep: bool = True
    ) -> None:
        if segment_degrees <= 0:
            raise ValueError(f"segment_degrees must be positive, got {segment_degrees}")

        self.measure_text = measure_text
        self.segment_degrees = segment_degrees
        self.exact_sweep = exact_sweep

    def render(
        self,
        state: GaugeState,
        geometry: Optional[GeometrySnapshot],
        paints: GaugePaints
    ) -> List[Primitive]:
        if geometry is None:
            raise RuntimeError("Gauge has no geometry, measure it before rendering")

        primitives: List[Primitive] = []
        primitives.extend(self.draw_scale_background(geometry, paints))
        primitives.append(self.draw_on(state, geometry, paints))
        primitives.extend(self.draw_scale_numbers(state, geometry, paints))
        primitives.append(self.draw_reading(state, geometry, paints))

        return primitives

    def sweep_end(self, state: GaugeState) -> float:
        return self.START_ANGLE + (state.current_speed / state.max_speed) * self.SWEEP_ANGLE

    def draw_scale_background(
        self,
        geometry: GeometrySnapshot,
        paints: GaugePaints
    ) -> List[Primitive]:
        segments = arc_segments(
            self.START_ANGLE,
            self.START_ANGLE + self.SWEEP_ANGLE,
            self.segment_degrees,
            self.exact_sweep
        )

        return [
            Fill(paints.background),
            ArcPath(geometry.oval, segments, paints.off),
        ]

    def draw_on(
        self,
        state: GaugeState,
        geometry: GeometrySnapshot,
        paints: GaugePaints
    ) -> ArcPath:
        segments = arc_segments(
            self.START_ANGLE,
            self.sweep_end(state),
            self.segment_degrees,
            self.exact_sweep
        )

        return ArcPath(geometry.oval, segments, paints.on)

    def draw_scale_numbers(
        self,
        state: GaugeState,
        geometry: GeometrySnapshot,
        paints: GaugePaints
    ) -> List[TextOnCircle]:
        labels = []
        for i in range(1, state.number_of_steps + 1):
            labels.append(TextOnCircle(
                text=str(round_half_up(i * geometry.scale_increment)),
                center_x=geometry.center_x,
                center_y=geometry.center_y,
                radius=geometry.radius,
                h_offset=i * geometry.distance_increment,
                v_offset=self.SCALE_TEXT_OFFSET,
                rotation=self.SCALE_ROTATION,
                paint=paints.scale
            ))

        return labels

    def draw_reading(
        self,
        state: GaugeState,
        geometry: GeometrySnapshot,
        paints: GaugePaints
    ) -> TextOnLine:
        message = str(round_half_up(state.current_speed))
        advance = sum(self.measure_text(message, paints.reading))

        # Centered by building a baseline exactly as wide as the text
        baseline_y = geometry.center_y - self.READING_BOTTOM_MARGIN
        return TextOnLine(
            text=message,
            start=(geometry.center_x - advance / 2, baseline_y),
            end=(geometry.center_x + advance / 2, baseline_y),
            paint=paints.reading
        )
