from __future__ import annotations
import logging
import threading
import time
from typing import Any, Callable, Dict, List, Optional, Union

from drawkit.anim.easing import EasingDirection, EasingStyle
from drawkit.anim.runner import DEFAULT_TICK_SECONDS, AnimationRunner
from drawkit.anim.target import AnimationTarget
from drawkit.anim.tween import Tween

logger = logging.getLogger(__name__)


class Animator:
    """
    Starts and tracks animations for one host window.

    Each target owns at most one slot. Starting a new animation on a target
    that is still moving supersedes the old one: the old runner is cancelled
    (keeping the position it reached) and the new tween starts from there.
    """

    def __init__(
        self,
        *,
        tick_seconds: float = DEFAULT_TICK_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        default_style: Union[EasingStyle, str] = EasingStyle.LINEAR,
        default_direction: Union[EasingDirection, str] = EasingDirection.IN,
    ) -> None:
        self.tick_seconds = tick_seconds
        self.clock = clock
        self.default_style = EasingStyle.parse(default_style)
        self.default_direction = EasingDirection.parse(default_direction)
        # Guards slots and every target write made by this animator's runners.
        self.frame_lock = threading.RLock()
        self._slots: Dict[int, AnimationRunner] = {}

    def start_animation(
        self,
        target: AnimationTarget,
        delta: Any,
        duration: float,
        style: Union[EasingStyle, str, None] = None,
        direction: Union[EasingDirection, str, None] = None,
    ) -> AnimationRunner:
        with self.frame_lock:
            prev = self._slots.get(id(target))
            tween = Tween.capture(
                target, delta, duration,
                style if style is not None else self.default_style,
                direction if direction is not None else self.default_direction,
            )
            # Runners write only while holding frame_lock, so the snapshot above
            # is exactly where the superseded runner stops.
            if prev is not None and prev.cancel():
                logger.debug("superseded in-flight animation on %r", target)
            runner = AnimationRunner(
                tween,
                tick_seconds=self.tick_seconds,
                clock=self.clock,
                lock=self.frame_lock,
                on_finish=self._release,
            )
            self._slots[id(target)] = runner
            return runner.start()

    def cancel(self, handle: Optional[AnimationRunner], snap_to_end: bool = False) -> bool:
        if handle is None:
            return False
        return handle.cancel(snap_to_end=snap_to_end)

    def active(self, target: Any) -> Optional[AnimationRunner]:
        with self.frame_lock:
            return self._slots.get(id(target))

    def running(self) -> List[AnimationRunner]:
        with self.frame_lock:
            return list(self._slots.values())

    def shutdown(self, snap_to_end: bool = True, timeout: float = 1.0) -> None:
        """ Stop everything in flight; by default every target lands on its final value. """
        runners = self.running()
        for r in runners:
            r.cancel(snap_to_end=snap_to_end)
        for r in runners:
            r.join(timeout)
        if runners:
            logger.debug("animator shutdown stopped %d animation(s)", len(runners))

    def _release(self, runner: AnimationRunner) -> None:
        with self.frame_lock:
            key = id(runner.tween.target)
            if self._slots.get(key) is runner:
                del self._slots[key]
