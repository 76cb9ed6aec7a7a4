from typing import Optional, Tuple

from pygame import Surface, SRCALPHA

from speedo_ui.core.dataclasses import Bounds, GaugeConfig
from speedo_ui.gauge.GaugeModel import GaugeModel
from speedo_ui.gauge.GaugeRenderer import GaugeRenderer
from speedo_ui.gauge.SizingPolicy import Measurement, MeasureSpec, SizingPolicy
from speedo_ui.gauge.SurfacePainter import SurfacePainter, measure_text_widths
from speedo_ui.widgets.Widget import Widget


class SpeedometerWidget(Widget):
    """
    Half circle speedometer.

    The gauge is only re-rendered after an invalidation, otherwise the last
    rendered surface is blitted again.
    """
    def __init__(
        self,
        position: Tuple[int, int],
        config: Optional[GaugeConfig] = None,
        renderer: Optional[GaugeRenderer] = None,
        painter: Optional[SurfacePainter] = None
    ) -> None:
        super().__init__()

        self.position = position
        self.config = config or GaugeConfig()

        # Paints never change after construction
        self.paints = self.config.style.paints()

        self.model = GaugeModel(
            max_speed=self.config.max_speed,
            current_speed=self.config.current_speed,
            number_of_steps=self.config.number_of_steps,
            radius_ratio=self.config.radius_ratio,
            on_invalidate=self.invalidate
        )
        self.sizing = SizingPolicy()
        self.renderer = renderer or GaugeRenderer(
            measure_text=measure_text_widths,
            segment_degrees=self.config.segment_degrees,
            exact_sweep=self.config.exact_sweep
        )
        self.painter = painter or SurfacePainter()

        self.surface: Optional[Surface] = None

    def get_current_speed(self) -> float:
        return self.model.get_current_speed()

    def set_current_speed(self, current_speed: float) -> None:
        self.model.set_current_speed(current_speed)

    def get_max_speed(self) -> float:
        return self.model.get_max_speed()

    def set_max_speed(self, max_speed: float) -> None:
        self.model.set_max_speed(max_speed)

    def on_speed_changed(self, new_speed: float) -> None:
        self.model.on_speed_changed(new_speed)

    def measure(self, width_spec: MeasureSpec, height_spec: MeasureSpec) -> Measurement:
        measurement = self.sizing.resolve(width_spec, height_spec)

        if (
            self.surface is None
            or (measurement.width, measurement.height) != self.size
        ):
            self.on_size_changed(measurement.width, measurement.height)

        return measurement

    def on_size_changed(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.model.recompute_geometry(Bounds(width, height))
        self.surface = Surface((max(width, 1), max(height, 1)), SRCALPHA)
        self.invalidate()

    def draw(self, screen: Surface) -> None:
        if self.surface is None:
            self.measure(MeasureSpec.unspecified(), MeasureSpec.unspecified())

        # Collapsed by the layout, nothing to show
        if self.height <= 0:
            return

        if self.dirty:
            primitives = self.renderer.render(
                self.model.state(),
                self.model.geometry,
                self.paints
            )
            self.painter.paint(self.surface, primitives)
            self.dirty = False

        screen.blit(self.surface, self.position)
