from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Union

from drawkit.anim.easing import EasingDirection, EasingStyle, InvalidArgument, ease


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @staticmethod
    def of(v: Any) -> "Vector2":
        """ Accept a Vector2, an (x, y) pair, or anything exposing .x/.y (or get_x()/get_y()). """
        if isinstance(v, Vector2):
            return v
        if isinstance(v, (tuple, list)) and len(v) == 2:
            return Vector2(v[0], v[1])
        if hasattr(v, "get_x") and hasattr(v, "get_y"):
            return Vector2(v.get_x(), v.get_y())
        if hasattr(v, "x") and hasattr(v, "y"):
            return Vector2(v.x, v.y)
        raise InvalidArgument(f"cannot read a 2D vector from {type(v).__name__}")

    def __add__(self, o: "Vector2") -> "Vector2":
        return Vector2(self.x + o.x, self.y + o.y)

    def __sub__(self, o: "Vector2") -> "Vector2":
        return Vector2(self.x - o.x, self.y - o.y)

    def __mul__(self, k: float) -> "Vector2":
        return Vector2(self.x * k, self.y * k)

    __rmul__ = __mul__

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Tween:
    """
    One animation request, frozen at creation:
    where the target was, how far it should travel, how long, and which curve.
    """
    target: Any
    start: Vector2
    delta: Vector2
    duration: float
    style: EasingStyle = EasingStyle.LINEAR
    direction: EasingDirection = EasingDirection.IN

    @classmethod
    def capture(
        cls,
        target: Any,
        delta: Any,
        duration: float,
        style: Union[EasingStyle, str, None] = None,
        direction: Union[EasingDirection, str, None] = None,
    ) -> "Tween":
        # Resolve easing before touching the target so bad input fails fast.
        st = EasingStyle.parse(style if style is not None else EasingStyle.LINEAR)
        dr = EasingDirection.parse(direction if direction is not None else EasingDirection.IN)
        try:
            dur = float(duration)
        except (TypeError, ValueError) as e:
            raise InvalidArgument(f"duration must be a number, got {duration!r}") from e
        if dur != dur:
            raise InvalidArgument("duration must be a number, got NaN")
        return cls(
            target=target,
            start=Vector2.of(target.get_position()),
            delta=Vector2.of(delta),
            duration=dur,
            style=st,
            direction=dr,
        )

    @property
    def end(self) -> Vector2:
        return self.start + self.delta

    def progress_at(self, elapsed: float) -> float:
        if self.duration <= 0:
            return 1.0
        return max(0.0, min(1.0, elapsed / self.duration))

    def value_at(self, progress: float) -> Vector2:
        k = ease(progress, self.style, self.direction)
        return Vector2(self.start.x + self.delta.x * k, self.start.y + self.delta.y * k)

    def describe(self, name: Optional[str] = None) -> str:
        who = name or type(self.target).__name__
        return (f"{who} {self.start.as_tuple()} -> {self.end.as_tuple()} "
                f"in {self.duration:.3f}s ({self.style.value}/{self.direction.value})")
