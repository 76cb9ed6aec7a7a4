from typing import Dict, Optional

import pygame.freetype
from pygame.freetype import Font


_font_cache: Dict[Optional[str], Font] = {}


def get_font(typeface: Optional[str] = None) -> Font:
    """
    Get a scalable font for the given typeface. Size is passed per call, so
    one Font instance serves every text size.

    Unknown typefaces fall back to the pygame default font.
    """
    if typeface in _font_cache:
        return _font_cache[typeface]

    if not pygame.freetype.get_init():
        pygame.freetype.init()

    if typeface is None:
        font = Font(None, 0)
    else:
        font = pygame.freetype.SysFont(typeface, 0)

    font.origin = True
    _font_cache[typeface] = font

    return font
