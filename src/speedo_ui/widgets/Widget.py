"""
Abstract Base class for all widgets.
"""
from abc import ABC, abstractmethod
from typing import Tuple
from pygame import Surface


class Widget(ABC):
    def __init__(self) -> None:
        # For type-hinting
        self.position: Tuple[int, int] = (0, 0)
        self.width: int = 0
        self.height: int = 0

        # Set whenever the widget needs to be rendered again
        self.dirty: bool = True

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def invalidate(self) -> None:
        self.dirty = True

    @abstractmethod
    def draw(self, screen: Surface) -> None:
        pass
