from speedo_helper.helper import (
  clamp,
  round_half_up,
  parse_color,
  Color,
)

__all__ = [
  "clamp",
  "round_half_up",
  "parse_color",
  "Color",
]
