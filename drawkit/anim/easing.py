from __future__ import annotations
import math
from enum import Enum
from typing import Callable, Dict, Union


class InvalidArgument(ValueError):
    """Raised when an animation request names an unknown easing or bad value."""


def _norm(name: str) -> str:
    return "".join(ch for ch in name.upper() if ch not in "_- ")


class EasingStyle(Enum):
    LINEAR = "linear"
    SINE = "sine"
    QUAD = "quad"
    CUBIC = "cubic"
    QUART = "quart"
    QUINT = "quint"
    EXPONENTIAL = "exponential"
    CIRCULAR = "circular"
    BACK = "back"
    ELASTIC = "elastic"
    BOUNCE = "bounce"

    @classmethod
    def parse(cls, v: Union["EasingStyle", str]) -> "EasingStyle":
        return _parse(cls, v)


class EasingDirection(Enum):
    IN = "in"
    OUT = "out"
    INOUT = "inout"

    @classmethod
    def parse(cls, v: Union["EasingDirection", str]) -> "EasingDirection":
        return _parse(cls, v)


def _parse(enum_cls, v):
    if isinstance(v, enum_cls):
        return v
    if isinstance(v, str):
        key = _norm(v)
        for member in enum_cls:
            if member.name == key:
                return member
    raise InvalidArgument(f"unknown {enum_cls.__name__}: {v!r}")


# --- base "in" curves ---------------------------------------------------------

_BACK_S = 1.70158
_ELASTIC_P = 0.3
_BOUNCE_D = 2.75
_BOUNCE_N = 7.5625


def _sine(t: float) -> float: return 1 - math.cos(t * math.pi / 2)
def _quad(t: float) -> float: return t ** 2
def _cubic(t: float) -> float: return t ** 3
def _quart(t: float) -> float: return t ** 4
def _quint(t: float) -> float: return t ** 5
def _expo(t: float) -> float: return 2 ** (10 * (t - 1))
def _circ(t: float) -> float: return 1 - math.sqrt(1 - t * t)
def _back(t: float) -> float: return t * t * ((_BACK_S + 1) * t - _BACK_S)


def _elastic(t: float) -> float:
    # Phase shift of a quarter period so the curve meets 1 at t = 1.
    return -(2 ** (10 * (t - 1))) * math.sin((t - 1 - _ELASTIC_P / 4) * 2 * math.pi / _ELASTIC_P)


def _bounce(t: float) -> float:
    # Four parabolic arcs, each resting on a higher floor than the last.
    if t < 1 / _BOUNCE_D:
        return _BOUNCE_N * t * t
    if t < 2 / _BOUNCE_D:
        t -= 1.5 / _BOUNCE_D
        return _BOUNCE_N * t * t + 0.75
    if t < 2.5 / _BOUNCE_D:
        t -= 2.25 / _BOUNCE_D
        return _BOUNCE_N * t * t + 0.9375
    t -= 2.625 / _BOUNCE_D
    return _BOUNCE_N * t * t + 0.984375


_IN_CURVES: Dict[EasingStyle, Callable[[float], float]] = {
    EasingStyle.LINEAR: lambda t: t,
    EasingStyle.SINE: _sine,
    EasingStyle.QUAD: _quad,
    EasingStyle.CUBIC: _cubic,
    EasingStyle.QUART: _quart,
    EasingStyle.QUINT: _quint,
    EasingStyle.EXPONENTIAL: _expo,
    EasingStyle.CIRCULAR: _circ,
    EasingStyle.BACK: _back,
    EasingStyle.ELASTIC: _elastic,
    EasingStyle.BOUNCE: _bounce,
}


def _ease_in(t: float, style: EasingStyle) -> float:
    # Endpoints are pinned so every composed curve starts at 0 and ends at 1 exactly.
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return _IN_CURVES[style](t)


def ease(
    t: float,
    style: Union[EasingStyle, str] = EasingStyle.LINEAR,
    direction: Union[EasingDirection, str] = EasingDirection.IN,
) -> float:
    """
    Map linear progress `t` (clamped to 0..1) to eased progress.

    OUT and INOUT are reflections of the style's IN curve:
        OUT(t)   = 1 - IN(1 - t)
        INOUT(t) = IN(2t) / 2             for t < 0.5
                   1 - IN(2(1 - t)) / 2   otherwise

    BACK and ELASTIC overshoot mid-curve; the endpoints are still exact.
    Raises InvalidArgument for an unknown style or direction.
    """
    style = EasingStyle.parse(style)
    direction = EasingDirection.parse(direction)
    t = float(t)
    if math.isnan(t):
        raise InvalidArgument("progress must be a number, got NaN")

    if direction is EasingDirection.IN:
        return _ease_in(t, style)
    if direction is EasingDirection.OUT:
        return 1.0 - _ease_in(1.0 - t, style)
    if t < 0.5:
        return _ease_in(2.0 * t, style) / 2.0
    return 1.0 - _ease_in(2.0 * (1.0 - t), style) / 2.0
