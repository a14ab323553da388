from __future__ import annotations
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

import pygame

from drawkit.fonts import FontKey, fonts
from drawkit.resources import load_image
from drawkit.shapes.base import RGB, Shape
from drawkit.shapes.point import Point

_ALIGNMENTS = ("left", "center", "right")
_STYLES = {
    "normal": (False, False),
    "bold": (True, False),
    "italic": (False, True),
    "bold italic": (True, True),
}


class Text(Shape):
    """
    A single string anchored at a point (centred on it by default).

    An optional background box and border are drawn a few pixels around
    the rendered glyphs.
    """

    def __init__(self, anchor: Any, text: str = "") -> None:
        super().__init__()
        self.anchor = Point.of(anchor)
        self.text = str(text)
        self.font_path: Optional[str] = None
        self.size = 25
        self.style = "normal"
        self.text_rgb: RGB = (0, 0, 0)
        self.alignment = "center"
        self.background_rgb: Optional[RGB] = None
        self.border_rgb: RGB = (0, 0, 0)
        self.border_width = 0

    def __repr__(self) -> str:
        return f"Text({self.anchor!r}, {self.text!r})"

    def _points(self) -> List[Point]:
        return [self.anchor]

    def get_anchor(self) -> Point:
        return self.anchor

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        self.text = str(text)
        self._changed()

    def set_size(self, size: int) -> None:
        self.size = max(1, int(size))
        self._changed()

    def set_font(self, path: Optional[str]) -> None:
        self.font_path = path
        self._changed()

    def set_style(self, style: str) -> None:
        """ One of 'normal', 'bold', 'italic' or 'bold italic'. """
        if style not in _STYLES:
            raise ValueError(f"style must be one of {tuple(_STYLES)}")
        self.style = style
        self._changed()

    def set_text_color(self, rgb: RGB) -> None:
        self.text_rgb = tuple(rgb)
        self._changed()

    def set_alignment(self, alignment: str) -> None:
        if alignment not in _ALIGNMENTS:
            raise ValueError(f"alignment must be one of {_ALIGNMENTS}")
        self.alignment = alignment
        self._changed()

    def set_background(self, rgb: Optional[RGB]) -> None:
        self.background_rgb = tuple(rgb) if rgb is not None else None
        self._changed()

    def set_border(self, rgb: RGB) -> None:
        self.border_rgb = tuple(rgb)
        self._changed()

    def set_border_width(self, width: int) -> None:
        self.border_width = max(0, int(width))
        self._changed()

    def font_key(self) -> FontKey:
        bold, italic = _STYLES[self.style]
        return fonts.key(self.font_path, self.size, bold=bold, italic=italic)

    def draw_panel(self, surface: pygame.Surface) -> None:
        surf = fonts.render(self.font_key(), self.text, self.text_rgb)
        pos = (int(self.anchor.x), int(self.anchor.y))
        if self.alignment == "left":
            r = surf.get_rect(midleft=pos)
        elif self.alignment == "right":
            r = surf.get_rect(midright=pos)
        else:
            r = surf.get_rect(center=pos)
        box = r.inflate(10, 4)
        if self.background_rgb is not None:
            pygame.draw.rect(surface, self.background_rgb, box)
        if self.border_width > 0:
            pygame.draw.rect(surface, self.border_rgb, box, self.border_width)
        surface.blit(surf, r.topleft)


class Image(Shape):
    """ A bitmap loaded from disk, top-left corner at the anchor unless centred. """

    def __init__(self, anchor: Any, path: Union[str, Path]) -> None:
        super().__init__()
        self.anchor = Point.of(anchor)
        self.path = str(path)
        self.centered = False
        self._surf = load_image(self.path)
        self._base_size: Tuple[int, int] = self._surf.get_size()

    def __repr__(self) -> str:
        return f"Image({self.anchor!r}, {self.path!r})"

    def _points(self) -> List[Point]:
        return [self.anchor]

    def get_anchor(self) -> Point:
        return self.anchor

    def get_width(self) -> int:
        return self._surf.get_width()

    def get_height(self) -> int:
        return self._surf.get_height()

    def set_size(self, width: int, height: int) -> None:
        size = (max(1, int(width)), max(1, int(height)))
        self._surf = load_image(self.path, scale=size, fallback_size=size)
        self._changed()

    def set_scale(self, factor: float) -> None:
        w, h = self._base_size
        fallback = (max(1, int(w * factor)), max(1, int(h * factor)))
        self._surf = load_image(self.path, scale=float(factor), fallback_size=fallback)
        self._changed()

    def set_alignment(self, alignment: str) -> None:
        if alignment not in ("topleft", "center"):
            raise ValueError("alignment must be 'topleft' or 'center'")
        self.centered = alignment == "center"
        self._changed()

    def draw_panel(self, surface: pygame.Surface) -> None:
        pos = (int(self.anchor.x), int(self.anchor.y))
        r = self._surf.get_rect(center=pos) if self.centered else self._surf.get_rect(topleft=pos)
        surface.blit(self._surf, r.topleft)
        if self.width > 1:
            pygame.draw.rect(surface, self.outline_rgb, r, self.width)
