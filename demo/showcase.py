from __future__ import annotations
import logging
from typing import List

from drawkit.anim.easing import EasingDirection, EasingStyle
from drawkit.shapes.base import Shape
from drawkit.shapes.boxes import Circle, Oval, Rectangle
from drawkit.shapes.lines import Line, Polygon
from drawkit.shapes.media import Text
from drawkit.shapes.point import Point
from drawkit.window import GraphWin

logger = logging.getLogger(__name__)


class Showcase:
    """
    One shape per easing style, stacked vertically. Every few seconds each
    shape glides to the other side of the window, cycling IN -> OUT -> INOUT.
    """
    LEFT = 140
    TRAVEL = 440
    PERIOD = 2.4

    def __init__(self, win: GraphWin) -> None:
        self.win = win
        self.shapes: List[Shape] = []
        self.styles = list(EasingStyle)
        self.directions = list(EasingDirection)
        self._t = 0.0
        self._round = 0
        self._build()

    def _build(self) -> None:
        row_h = (self.win.height - 40) / len(self.styles)
        factories = [
            lambda y: Circle(Point(self.LEFT, y), 9),
            lambda y: Rectangle(Point(self.LEFT - 9, y - 9), Point(self.LEFT + 9, y + 9)),
            lambda y: Oval(Point(self.LEFT - 12, y - 7), Point(self.LEFT + 12, y + 7)),
            lambda y: Polygon([Point(self.LEFT, y - 10), Point(self.LEFT + 10, y + 8), Point(self.LEFT - 10, y + 8)]),
            lambda y: Line(Point(self.LEFT - 10, y), Point(self.LEFT + 10, y)),
        ]
        for i, style in enumerate(self.styles):
            y = 30 + row_h * i
            label = Text(Point(10, y), style.value)
            label.set_size(16)
            label.set_alignment("left")
            label.draw(self.win)

            shape = factories[i % len(factories)](y)
            shape.set_fill((70, 120, 220))
            shape.set_width(2)
            shape.draw(self.win)
            self.shapes.append(shape)

    def kick(self) -> None:
        direction = self.directions[self._round % len(self.directions)]
        sign = 1 if self._round % 2 == 0 else -1
        for shape, style in zip(self.shapes, self.styles):
            shape.animate(sign * self.TRAVEL, 0, self.PERIOD * 0.8, style, direction)
        logger.info("round %d: %s", self._round, direction.value)
        self._round += 1

    def on_frame(self, dt: float) -> None:
        self._t += dt
        if self._t >= self.PERIOD or self._round == 0:
            self._t = 0.0
            self.kick()
