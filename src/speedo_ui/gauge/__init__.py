from .GaugeModel import GaugeModel, compute_geometry, RADIUS_RATIO
from .GaugeRenderer import GaugeRenderer, arc_segments, SEGMENT_DEGREES
from .InputAdapter import InputAdapter, SpeedChangeListener, SpeedFeed
from .SizingPolicy import SizingPolicy, MeasureMode, MeasureSpec, Measurement
from .SurfacePainter import SurfacePainter, measure_text_widths

__all__ = [
  "GaugeModel",
  "compute_geometry",
  "RADIUS_RATIO",
  "GaugeRenderer",
  "arc_segments",
  "SEGMENT_DEGREES",
  "InputAdapter",
  "SpeedChangeListener",
  "SpeedFeed",
  "SizingPolicy",
  "MeasureMode",
  "MeasureSpec",
  "Measurement",
  "SurfacePainter",
  "measure_text_widths",
]
