from __future__ import annotations
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional, Tuple
import pygame


@dataclass(frozen=True)
class FontKey:
    path: Optional[str]
    size: int
    bold: bool = False
    italic: bool = False


class FontCache:
    """
    Tiny LRU cache for pygame.font.Font objects keyed by FontKey.
      - k = fonts.key(path, size, bold=True)
      - surf = fonts.render(k, "Hello", (0, 0, 0))
    pygame.font is initialised on first use.
    """

    def __init__(self, max_entries: int = 32) -> None:
        self._cache: "OrderedDict[FontKey, pygame.font.Font]" = OrderedDict()
        self._max = max(1, int(max_entries))

    def key(self, path: Optional[str], size: int, *, bold: bool = False, italic: bool = False) -> FontKey:
        return FontKey(path, int(size), bool(bold), bool(italic))

    def render(self, k: FontKey, text: str, color: Tuple[int, int, int], aa: bool = True) -> pygame.Surface:
        return self._get_by_key(k).render(text or "", aa, color)

    def _get_by_key(self, k: FontKey) -> pygame.font.Font:
        f = self._cache.get(k)
        if f is not None:
            self._cache.move_to_end(k)
            return f

        if not pygame.font.get_init():
            pygame.font.init()
        f = pygame.font.Font(k.path, k.size)
        if k.bold:
            f.set_bold(True)
        if k.italic:
            f.set_italic(True)

        self._cache[k] = f
        while len(self._cache) > self._max:
            self._cache.popitem(last=False)
        return f


fonts = FontCache()
