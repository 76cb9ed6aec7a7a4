from .SpeedometerWidget import SpeedometerWidget
from .Widget import Widget

__all__ = [
  "SpeedometerWidget",
  "Widget",
]
