from __future__ import annotations

import logging
import threading
import time
from typing import Callable, List, Optional, Protocol, Set, Tuple

import pygame

from drawkit.anim.animator import Animator
from drawkit.resources import after_display_init
from drawkit.settings import AppCfg
from drawkit.shapes.point import Point

logger = logging.getLogger(__name__)


class Drawable(Protocol):
    def draw_panel(self, surface: pygame.Surface) -> None: ...


class GraphWin:
    """
    A window holding drawable items.

    Anything may call request_redraw() from any thread; requests are
    coalesced and the main loop paints at most once per frame. All
    animations started by shapes on this window run through `self.animator`.
    """

    def __init__(self, cfg: Optional[AppCfg] = None) -> None:
        self.cfg = cfg or AppCfg()
        w = self.cfg.window
        self.title = w.title
        self.width = int(w.width)
        self.height = int(w.height)
        self.bg_rgb: Tuple[int, int, int] = tuple(w.bg_rgb)
        self.autoflush = bool(w.autoflush)

        a = self.cfg.animation
        self.animator = Animator(
            tick_seconds=a.tick_seconds,
            default_style=a.default_style,
            default_direction=a.default_direction,
        )

        self._items: List[Drawable] = []
        self._redraw = threading.Event()
        self._last_time = 0.0
        self.delta_time = 0.0

        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.running = False

        # input state, filled by the event pump
        self._mouse_down = False
        self._mouse_pos: Tuple[int, int] = (0, 0)
        self._keys: Set[int] = set()
        self.last_key: Optional[int] = None
        self._click: Optional[Tuple[int, int]] = None

    def __repr__(self) -> str:
        return f"GraphWin({self.title!r}, {self.width}x{self.height}, items={len(self._items)})"

    # ------------------------------------------------------------------ #
    # Display
    # ------------------------------------------------------------------ #
    def open(self) -> "GraphWin":
        if self.screen is not None:
            return self
        pygame.init()
        pygame.display.set_caption(self.title)
        self.screen = pygame.display.set_mode((self.width, self.height), flags=pygame.DOUBLEBUF)
        after_display_init()
        self.clock = pygame.time.Clock()
        self.running = True
        self.request_redraw()
        return self

    @property
    def is_open(self) -> bool:
        return self.screen is not None

    def close(self) -> None:
        """ Stop every animation (landing on final values by default) and tear the display down. """
        self.running = False
        self.animator.shutdown(snap_to_end=self.cfg.animation.snap_on_shutdown)
        if self.screen is not None:
            pygame.display.quit()
            self.screen = None
        logger.debug("window %r closed", self.title)

    # ------------------------------------------------------------------ #
    # Items
    # ------------------------------------------------------------------ #
    def add_item(self, item: Drawable) -> None:
        self._items.append(item)

    def delete_item(self, item: Drawable) -> None:
        if item in self._items:
            self._items.remove(item)

    @property
    def items(self) -> List[Drawable]:
        return list(self._items)

    def set_background(self, rgb: Tuple[int, int, int]) -> None:
        self.bg_rgb = tuple(rgb)
        if self.autoflush:
            self.request_redraw()

    # ------------------------------------------------------------------ #
    # Redraw
    # ------------------------------------------------------------------ #
    def request_redraw(self) -> None:
        self._redraw.set()

    @property
    def redraw_pending(self) -> bool:
        return self._redraw.is_set()

    def update(self) -> None:
        """ Force a repaint now and record the time since the previous update. """
        now = time.monotonic()
        if self._last_time == 0.0:
            self._last_time = now
        self.delta_time = now - self._last_time
        self._last_time = now
        self._redraw.set()
        self.paint()

    def paint(self) -> bool:
        """ Paint if a redraw is pending. Returns True if a frame was drawn. """
        if not self._redraw.is_set():
            return False
        self._redraw.clear()
        if self.screen is None:
            return False
        self.screen.fill(self.bg_rgb)
        # Hold the animator's lock so no shape is painted halfway through a move.
        with self.animator.frame_lock:
            for item in list(self._items):
                item.draw_panel(self.screen)
        pygame.display.flip()
        return True

    # ------------------------------------------------------------------ #
    # Input
    # ------------------------------------------------------------------ #
    def check_mouse(self) -> bool:
        return self._mouse_down

    def mouse_position(self) -> Tuple[int, int]:
        return self._mouse_pos

    def check_keys(self) -> List[int]:
        return sorted(self._keys)

    def get_mouse(self) -> Point:
        """ Block until the left button is clicked; returns where. """
        self._click = None
        self._wait_for(lambda: self._click is not None, "get_mouse")
        x, y = self._click
        self._click = None
        return Point(x, y)

    def get_key(self) -> int:
        """ Block until a key is pressed; returns its pygame key code. """
        self.last_key = None
        self._wait_for(lambda: self.last_key is not None, "get_key")
        key, self.last_key = self.last_key, None
        return key

    def get_color_at_point(self, x: int, y: int) -> Optional[Tuple[int, int, int]]:
        """ RGB of the last painted frame at (x, y), or None off-screen or with no display. """
        if self.screen is None or not self.screen.get_rect().collidepoint(x, y):
            return None
        c = self.screen.get_at((int(x), int(y)))
        return (c.r, c.g, c.b)

    def _wait_for(self, ready: Callable[[], bool], what: str) -> None:
        while True:
            if self.screen is None or not self.running:
                raise RuntimeError(f"{what} in closed window")
            self.pump_events()
            if ready():
                return
            self.paint()
            if self.clock is not None:
                self.clock.tick(self.cfg.fps)

    def pump_events(self) -> None:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self.running = False
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                self._mouse_down = True
                self._click = self._mouse_pos = e.pos
            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                self._mouse_down = False
            elif e.type == pygame.MOUSEMOTION:
                self._mouse_pos = e.pos
            elif e.type == pygame.KEYDOWN:
                self._keys.add(e.key)
                self.last_key = e.key
            elif e.type == pygame.KEYUP:
                self._keys.discard(e.key)
            elif e.type in (pygame.WINDOWEXPOSED, pygame.VIDEOEXPOSE):
                self.request_redraw()

    # ------------------------------------------------------------------ #
    # Main loop
    # ------------------------------------------------------------------ #
    def run(self, on_frame: Optional[Callable[[float], None]] = None) -> None:
        self.open()
        try:
            while self.running:
                dt = self.clock.tick(self.cfg.fps) / 1000.0
                self.pump_events()
                if not self.running:
                    break
                if on_frame is not None:
                    on_frame(dt)
                self.paint()
        finally:
            self.close()
            pygame.quit()
