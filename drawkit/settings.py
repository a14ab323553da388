from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from drawkit.anim.easing import EasingDirection, EasingStyle

DEFAULTS_PATH = Path(__file__).resolve().parent / "config" / "defaults.yaml"


@dataclass
class WindowCfg:
    width: int = 640
    height: int = 480
    title: str = "Graphics Window"
    bg_rgb: tuple[int, int, int] = (255, 255, 255)
    autoflush: bool = True              # Repaint after every shape mutation


@dataclass
class AnimationCfg:
    tick_ms: float = 10.0               # Sleep between animation ticks
    default_style: EasingStyle = EasingStyle.LINEAR
    default_direction: EasingDirection = EasingDirection.IN
    snap_on_shutdown: bool = True       # Closing the window lands every tween on its end value

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0


@dataclass
class AppCfg:
    fps: int = 60
    log_level: str = "INFO"
    window: WindowCfg = field(default_factory=WindowCfg)
    animation: AnimationCfg = field(default_factory=AnimationCfg)


def _get(d: dict, path: str, default: Any):
    cur = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def load_settings(path: Optional[Union[str, Path]] = DEFAULTS_PATH) -> AppCfg:
    """
    Build an AppCfg from YAML. A missing file or key keeps the dataclass default.
    Easing names go through the same parser as the animation API, so a typo
    raises InvalidArgument here instead of quietly animating linearly.
    """
    data = {}
    p = Path(path) if path is not None else None
    if p is not None and p.exists():
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    win, anim = WindowCfg(), AnimationCfg()
    return AppCfg(
        fps=int(_get(data, "fps", 60)),
        log_level=str(_get(data, "log_level", "INFO")).upper(),
        window=WindowCfg(
            width=int(_get(data, "window.width", win.width)),
            height=int(_get(data, "window.height", win.height)),
            title=str(_get(data, "window.title", win.title)),
            bg_rgb=tuple(_get(data, "window.bg_rgb", win.bg_rgb)),
            autoflush=bool(_get(data, "window.autoflush", win.autoflush)),
        ),
        animation=AnimationCfg(
            tick_ms=float(_get(data, "animation.tick_ms", anim.tick_ms)),
            default_style=EasingStyle.parse(_get(data, "animation.default_style", anim.default_style)),
            default_direction=EasingDirection.parse(_get(data, "animation.default_direction", anim.default_direction)),
            snap_on_shutdown=bool(_get(data, "animation.snap_on_shutdown", anim.snap_on_shutdown)),
        ),
    )
