import math
from typing import Any, Tuple

Color = Tuple[int, int, int, int]


def clamp(raw: float, min_val: float, max_val: float) -> float:
    lower = min(min_val, max_val)
    upper = max(min_val, max_val)
    clamped = max(lower, min(upper, raw))

    return clamped


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def parse_color(value: Any) -> Color:
    """
    Parse "#RRGGBB", "#RRGGBBAA" or a list/tuple of 3 or 4 ints (0..255)
    into an RGBA tuple. Missing alpha means fully opaque.
    """
    if isinstance(value, str):
        hex_value = value.lstrip("#")
        if len(hex_value) not in (6, 8) or not value.startswith("#"):
            raise ValueError(f"Invalid color string: '{value}'")

        try:
            channels = [int(hex_value[i:i + 2], 16) for i in range(0, len(hex_value), 2)]
        except ValueError as e:
            raise ValueError(f"Invalid color string: '{value}'") from e

    elif isinstance(value, (list, tuple)):
        if len(value) not in (3, 4):
            raise ValueError(f"Color needs 3 or 4 channels, got {len(value)}")

        channels = []
        for channel in value:
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise ValueError(f"Invalid color channel: {channel!r}")
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")
            channels.append(channel)

    else:
        raise ValueError(f"Unsupported color value: {value!r}")

    if len(channels) == 3:
        channels.append(255)

    return (channels[0], channels[1], channels[2], channels[3])
