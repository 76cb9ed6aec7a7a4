import math
from typing import Callable, Iterable, List, Optional

import pygame
from pygame import Rect, Surface, SRCALPHA
from pygame.freetype import Font

from speedo_ui.core.dataclasses import Paint
from speedo_ui.gauge.primitives import ArcPath, Fill, Primitive, TextOnCircle, TextOnLine
from speedo_ui.utils.fonts import get_font


FontLookup = Callable[[Optional[str]], Font]


def measure_text_widths(text: str, paint: Paint, fonts: FontLookup = get_font) -> List[float]:
    """Horizontal advance of every character of `text` at the paint's text size."""
    font = fonts(paint.typeface)
    metrics = font.get_metrics(text, size=paint.text_size)

    return [float(metric[4]) if metric else 0.0 for metric in metrics]


class SurfacePainter:
    """
    Paints gauge primitives onto a pygame surface, in the order given.

    Arcs are drawn onto an alpha layer first so translucent colors blend with
    whatever is below them.
    """
    def __init__(self, fonts: FontLookup = get_font) -> None:
        self.fonts = fonts

    def paint(self, surface: Surface, primitives: Iterable[Primitive]) -> None:
        for primitive in primitives:
            match primitive:
                case Fill():
                    surface.fill(primitive.color)
                case ArcPath():
                    self._draw_arc_path(surface, primitive)
                case TextOnCircle():
                    self._draw_text_on_circle(surface, primitive)
                case TextOnLine():
                    self._draw_text_on_line(surface, primitive)
                case _:
                    raise TypeError(f"Unknown primitive: {primitive!r}")

    def _draw_arc_path(self, surface: Surface, path: ArcPath) -> None:
        if not path.segments:
            return

        stroke_width = max(1, round(path.paint.stroke_width))

        # pygame draws the stroke inside the rect, grow it so the stroke is
        # centered on the oval like a regular path stroke
        oval = path.oval
        rect = Rect(
            round(oval.left - stroke_width / 2),
            round(oval.top - stroke_width / 2),
            round(oval.width + stroke_width),
            round(oval.height + stroke_width)
        )

        layer = Surface(surface.get_size(), SRCALPHA)
        for start, sweep in path.segments:
            # Screen angles turn clockwise, pygame angles counterclockwise
            pygame.draw.arc(
                layer,
                path.paint.color,
                rect,
                math.radians(-(start + sweep)),
                math.radians(-start),
                stroke_width
            )

        surface.blit(layer, (0, 0))

    def _draw_text_on_circle(self, surface: Surface, text: TextOnCircle) -> None:
        font = self.fonts(text.paint.typeface)
        size = text.paint.text_size
        advances = measure_text_widths(text.text, text.paint, self.fonts)

        distance = text.h_offset
        for char, advance in zip(text.text, advances):
            x, y, direction = text.point_at(distance)
            font.render_to(
                surface,
                (round(x), round(y)),
                char,
                text.paint.color,
                rotation=round(-direction) % 360,
                size=size
            )
            distance += advance

    def _draw_text_on_line(self, surface: Surface, text: TextOnLine) -> None:
        font = self.fonts(text.paint.typeface)
        font.render_to(
            surface,
            (round(text.start[0]), round(text.start[1])),
            text.text,
            text.paint.color,
            rotation=round(-text.direction) % 360,
            size=text.paint.text_size
        )
