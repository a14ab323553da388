from __future__ import annotations
from typing import Any, Protocol

from drawkit.anim.tween import Vector2


class AnimationTarget(Protocol):
    """
    What the animation engine needs from a drawable:
      - get_position() returns the animated anchor as a value snapshot
      - set_position(v) moves the whole object so its anchor lands on v,
        in one call (compound shapes move every point together)
    An optional on_frame_changed() hook is called after each write.
    """
    def get_position(self) -> Vector2: ...
    def set_position(self, value: Vector2) -> None: ...


def notify_frame_changed(target: Any) -> None:
    hook = getattr(target, "on_frame_changed", None)
    if callable(hook):
        hook()
