from __future__ import annotations
import math
from typing import Any, Iterable, List, Tuple

import pygame

from drawkit.shapes.base import Shape
from drawkit.shapes.point import Point

LINE_TYPES = ("solid", "dotted", "dashed")

_Segment = Tuple[Tuple[float, float], Tuple[float, float]]


def dash_segments(a: Tuple[float, float], b: Tuple[float, float], on: float, off: float) -> List[_Segment]:
    """ Split a..b into `on`-long pieces separated by `off`-long gaps; the last piece may be short. """
    ax, ay = a
    length = math.hypot(b[0] - ax, b[1] - ay)
    if length == 0 or on <= 0:
        return []
    ux, uy = (b[0] - ax) / length, (b[1] - ay) / length
    out: List[_Segment] = []
    s = 0.0
    while s < length:
        e = min(s + on, length)
        out.append(((ax + ux * s, ay + uy * s), (ax + ux * e, ay + uy * e)))
        s = e + off
    return out


class Line(Shape):
    def __init__(self, p1: Any, p2: Any) -> None:
        super().__init__()
        self.p1 = Point.of(p1)
        self.p2 = Point.of(p2)
        self.line_type = "solid"

    def __repr__(self) -> str:
        return f"Line({self.p1!r}, {self.p2!r})"

    def _points(self) -> List[Point]:
        return [self.p1, self.p2]

    def get_p1(self) -> Point:
        return self.p1

    def get_p2(self) -> Point:
        return self.p2

    def set_p1(self, p: Any) -> None:
        with self._frame_lock():
            self.p1 = Point.of(p)
        self._changed()

    def set_p2(self, p: Any) -> None:
        with self._frame_lock():
            self.p2 = Point.of(p)
        self._changed()

    def set_type(self, line_type: str) -> None:
        if line_type not in LINE_TYPES:
            raise ValueError(f"Invalid line type: {line_type!r}")
        self.line_type = line_type
        self._changed()

    def get_center(self) -> Point:
        return Point((self.p1.x + self.p2.x) / 2, (self.p1.y + self.p2.y) / 2)

    def get_length(self) -> float:
        return math.hypot(self.p2.x - self.p1.x, self.p2.y - self.p1.y)

    def draw_panel(self, surface: pygame.Surface) -> None:
        a, b = (self.p1.x, self.p1.y), (self.p2.x, self.p2.y)
        w = self.width
        if self.line_type == "solid":
            pygame.draw.line(surface, self.outline_rgb, a, b, w)
        elif self.line_type == "dashed":
            for s, e in dash_segments(a, b, w * 3.0, w * 1.5):
                pygame.draw.line(surface, self.outline_rgb, s, e, w)
        else:
            # dots are one pixel long, so draw them round
            for s, _ in dash_segments(a, b, 1.0, w * 2.0):
                pygame.draw.circle(surface, self.outline_rgb, s, max(1, w // 2))


class Polygon(Shape):
    """ Closed polygon; the first vertex is the anchor. """

    def __init__(self, points: Iterable[Any]) -> None:
        super().__init__()
        self.vertices: List[Point] = [Point.of(p) for p in points]
        if len(self.vertices) < 2:
            raise ValueError("Polygon needs at least 2 points")

    def __repr__(self) -> str:
        return f"Polygon({self.vertices!r})"

    def _points(self) -> List[Point]:
        return self.vertices

    def get_points(self) -> List[Point]:
        return [p.clone() for p in self.vertices]

    def draw_panel(self, surface: pygame.Surface) -> None:
        pts = [(p.x, p.y) for p in self.vertices]
        if self.fill_rgb is not None and len(pts) >= 3:
            pygame.draw.polygon(surface, self.fill_rgb, pts)
        pygame.draw.polygon(surface, self.outline_rgb, pts, self.width)
