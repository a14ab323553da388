from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Tuple, Union

import pygame

logger = logging.getLogger(__name__)

# Cache key: (resolved path, scale)
_ImageKey = Tuple[str, Union[None, float, Tuple[int, int]]]
_image_cache: Dict[_ImageKey, pygame.Surface] = {}


def _display_ready() -> bool:
    try:
        return pygame.display.get_init() and pygame.display.get_surface() is not None
    except pygame.error:
        return False


def _convert_for_display(surf: pygame.Surface) -> pygame.Surface:
    """ Convert to the display format once a display exists, keeping per-pixel alpha. """
    if not _display_ready():
        return surf
    if surf.get_alpha() is not None:
        return surf.convert_alpha()
    return surf.convert()


def _scaled(surf: pygame.Surface, scale: Union[None, float, Tuple[int, int]]) -> pygame.Surface:
    if scale is None:
        return surf
    if isinstance(scale, (float, int)):
        w, h = surf.get_width(), surf.get_height()
        return pygame.transform.smoothscale(surf, (max(1, int(w * scale)), max(1, int(h * scale))))
    w, h = scale
    return pygame.transform.smoothscale(surf, (max(1, w), max(1, h)))


def fallback_surface(size: Tuple[int, int] = (48, 48)) -> pygame.Surface:
    """
    A loud magenta/black box so missing images are obvious.
    """
    surf = pygame.Surface(size, pygame.SRCALPHA)
    surf.fill((255, 0, 255))
    pygame.draw.rect(surf, (0, 0, 0), surf.get_rect(), 2)
    pygame.draw.line(surf, (0, 0, 0), (0, 0), (size[0], size[1]), 2)
    pygame.draw.line(surf, (0, 0, 0), (0, size[1]), (size[0], 0), 2)
    return surf


def load_image(
    path: Union[str, Path],
    *,
    scale: Union[None, float, Tuple[int, int]] = None,
    fallback_size: Tuple[int, int] = (48, 48),
) -> pygame.Surface:
    """
    Load and cache an image file.
    - Optional `scale`: float (uniform) or (w,h).
    - A missing or unreadable file logs a warning and returns the fallback box
      (not cached, so a file that appears later is picked up).
    """
    abs_path = str(Path(path).expanduser().resolve())
    key: _ImageKey = (abs_path, scale)
    cached = _image_cache.get(key)
    if cached is not None:
        return cached

    try:
        surf = pygame.image.load(abs_path)
    except (pygame.error, FileNotFoundError, OSError) as e:
        logger.warning("Could not load image '%s': %s", abs_path, e)
        return fallback_surface(fallback_size)

    surf = _convert_for_display(_scaled(surf, scale))
    _image_cache[key] = surf
    return surf


def after_display_init() -> None:
    """ Re-convert anything loaded before the display existed. """
    if not _display_ready():
        return
    for key, surf in list(_image_cache.items()):
        _image_cache[key] = _convert_for_display(surf)
