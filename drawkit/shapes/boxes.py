from __future__ import annotations
from typing import Any, List

import pygame

from drawkit.shapes.base import Shape
from drawkit.shapes.point import Point


class _Box(Shape):
    """ Two opposite corners; p1 is the anchor. """

    def __init__(self, p1: Any, p2: Any) -> None:
        super().__init__()
        self.p1 = Point.of(p1)
        self.p2 = Point.of(p2)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.p1!r}, {self.p2!r})"

    def _points(self) -> List[Point]:
        return [self.p1, self.p2]

    def get_p1(self) -> Point:
        return self.p1

    def get_p2(self) -> Point:
        return self.p2

    def get_center(self) -> Point:
        return Point((self.p1.x + self.p2.x) / 2, (self.p1.y + self.p2.y) / 2)

    def get_size(self) -> Point:
        return Point(abs(self.p2.x - self.p1.x), abs(self.p2.y - self.p1.y))

    def rect(self) -> pygame.Rect:
        x0, x1 = sorted((self.p1.x, self.p2.x))
        y0, y1 = sorted((self.p1.y, self.p2.y))
        return pygame.Rect(int(x0), int(y0), int(x1 - x0), int(y1 - y0))


class Rectangle(_Box):
    def draw_panel(self, surface: pygame.Surface) -> None:
        r = self.rect()
        if self.fill_rgb is not None:
            pygame.draw.rect(surface, self.fill_rgb, r)
        pygame.draw.rect(surface, self.outline_rgb, r, self.width)


class Oval(_Box):
    def draw_panel(self, surface: pygame.Surface) -> None:
        r = self.rect()
        if self.fill_rgb is not None:
            pygame.draw.ellipse(surface, self.fill_rgb, r)
        pygame.draw.ellipse(surface, self.outline_rgb, r, self.width)


class Circle(Shape):
    def __init__(self, center: Any, radius: float) -> None:
        super().__init__()
        self.center = Point.of(center)
        self.radius = float(radius)

    def __repr__(self) -> str:
        return f"Circle({self.center!r}, {self.radius})"

    def _points(self) -> List[Point]:
        return [self.center]

    def get_center(self) -> Point:
        return self.center

    def get_radius(self) -> float:
        return self.radius

    def draw_panel(self, surface: pygame.Surface) -> None:
        c = (self.center.x, self.center.y)
        if self.fill_rgb is not None:
            pygame.draw.circle(surface, self.fill_rgb, c, self.radius)
        pygame.draw.circle(surface, self.outline_rgb, c, self.radius, self.width)
