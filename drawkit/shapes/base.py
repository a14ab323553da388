from __future__ import annotations
from contextlib import nullcontext
from typing import TYPE_CHECKING, Any, List, Optional, Tuple, Union

import pygame

from drawkit.anim.animator import Animator
from drawkit.anim.easing import EasingDirection, EasingStyle
from drawkit.anim.runner import AnimationRunner
from drawkit.anim.tween import Vector2

if TYPE_CHECKING:
    from drawkit.shapes.point import Point
    from drawkit.window import GraphWin

RGB = Tuple[int, int, int]


class Shape:
    """
    Base for every drawable. Subclasses list their constituent points in
    _points(); the first one is the anchor used for animation. Moving a
    shape always moves all of its points together in one call.
    """

    def __init__(self) -> None:
        self.canvas: Optional["GraphWin"] = None
        self.outline_rgb: RGB = (0, 0, 0)
        self.fill_rgb: Optional[RGB] = None
        self.width: int = 1
        self._own_animator: Optional[Animator] = None
        # The animator that ran this shape's latest animation.
        self._anim_owner: Optional[Animator] = None

    # --- subclass hooks ---------------------------------------------------
    def _points(self) -> List["Point"]:
        raise NotImplementedError

    def draw_panel(self, surface: pygame.Surface) -> None:
        raise NotImplementedError

    # --- host -------------------------------------------------------------
    def draw(self, canvas: "GraphWin") -> "Shape":
        if self.canvas is not None:
            raise RuntimeError("Object is already drawn")
        self._hand_off(snap_to_end=True)
        self.canvas = canvas
        canvas.add_item(self)
        self._changed()
        return self

    def undraw(self) -> None:
        if self.canvas is None:
            return
        self._hand_off(snap_to_end=True)
        canvas, self.canvas = self.canvas, None
        canvas.delete_item(self)
        if canvas.autoflush:
            canvas.request_redraw()

    def _changed(self) -> None:
        if self.canvas is not None and self.canvas.autoflush:
            self.canvas.request_redraw()

    def _frame_lock(self):
        if self.canvas is not None:
            return self.canvas.animator.frame_lock
        return nullcontext()

    # --- style ------------------------------------------------------------
    def set_outline(self, rgb: RGB) -> None:
        self.outline_rgb = tuple(rgb)
        self._changed()

    def set_fill(self, rgb: Optional[RGB]) -> None:
        self.fill_rgb = tuple(rgb) if rgb is not None else None
        self._changed()

    def set_width(self, width: int) -> None:
        self.width = max(1, int(width))
        self._changed()

    def get_width(self) -> int:
        return self.width

    # --- movement ---------------------------------------------------------
    def get_position(self) -> Vector2:
        a = self._points()[0]
        return Vector2(a.x, a.y)

    def set_position(self, value: Any) -> None:
        v = Vector2.of(value)
        pts = self._points()
        anchor = pts[0]
        dx, dy = v.x - anchor.x, v.y - anchor.y
        for p in pts[1:]:
            p.x += dx
            p.y += dy
        # The anchor is assigned, not shifted, so it lands exactly on v.
        anchor.x, anchor.y = v.x, v.y

    def move(self, dx: float, dy: float) -> None:
        with self._frame_lock():
            pos = self.get_position()
            self.set_position(Vector2(pos.x + dx, pos.y + dy))
        self._changed()

    def move_to(self, x: Union[float, Any], y: Optional[float] = None) -> None:
        """ move_to(x, y) or move_to(point_like): put the anchor there. """
        target = Vector2.of(x) if y is None else Vector2(x, y)
        with self._frame_lock():
            self.set_position(target)
        self._changed()

    def on_frame_changed(self) -> None:
        if self.canvas is not None:
            self.canvas.request_redraw()

    # --- animation --------------------------------------------------------
    @property
    def animator(self) -> Animator:
        if self.canvas is not None:
            return self.canvas.animator
        if self._own_animator is None:
            self._own_animator = Animator()
        return self._own_animator

    def animate(
        self,
        dx: float,
        dy: float,
        duration: float,
        style: Union[EasingStyle, str, None] = None,
        direction: Union[EasingDirection, str, None] = None,
    ) -> AnimationRunner:
        """ Glide by (dx, dy) over `duration` seconds without blocking. """
        animator = self.animator
        if self._anim_owner is not animator:
            self._hand_off(snap_to_end=False)
        runner = animator.start_animation(self, Vector2(dx, dy), duration, style, direction)
        self._anim_owner = animator
        return runner

    def stop_animation(self, snap_to_end: bool = False) -> bool:
        return self.animator.cancel(self.animator.active(self), snap_to_end=snap_to_end)

    def _hand_off(self, snap_to_end: bool) -> None:
        """ Stop whatever the previous animator is still running on this shape. """
        owner, self._anim_owner = self._anim_owner, None
        if owner is not None:
            owner.cancel(owner.active(self), snap_to_end=snap_to_end)
