from __future__ import annotations
from typing import Any, List

import pygame

from drawkit.anim.tween import Vector2
from drawkit.shapes.base import Shape


class Point(Shape):
    """ A 2D point; drawn as a small filled square. Also the building block of other shapes. """

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.x = float(x)
        self.y = float(y)
        self.width = 2

    @staticmethod
    def of(v: Any) -> "Point":
        """ A fresh Point copied from anything Vector2.of() accepts. """
        p = Vector2.of(v)
        return Point(p.x, p.y)

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    def clone(self) -> "Point":
        return Point(self.x, self.y)

    def _points(self) -> List["Point"]:
        return [self]

    def draw_panel(self, surface: pygame.Surface) -> None:
        w = self.width
        surface.fill(self.outline_rgb, pygame.Rect(int(self.x - w / 2), int(self.y - w / 2), w, w))
