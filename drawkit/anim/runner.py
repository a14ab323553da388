from __future__ import annotations
import logging
import threading
import time
from enum import Enum
from typing import Callable, Optional

from drawkit.anim.target import notify_frame_changed
from drawkit.anim.tween import Tween, Vector2

logger = logging.getLogger(__name__)

DEFAULT_TICK_SECONDS = 0.01


class RunState(Enum):
    CREATED = "created"
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class AnimationRunner:
    """
    Drives one Tween to completion on its own daemon thread.

      - start() never blocks; a duration <= 0 finishes inside start()
      - every tick writes tween.value_at(progress), the last one writes tween.end
      - cancel() stops ticking; nothing is written after it returns
      - step(now) runs a single tick, for hosts/tests that bring their own clock

    The instance itself is the handle returned to callers.
    """

    def __init__(
        self,
        tween: Tween,
        *,
        tick_seconds: float = DEFAULT_TICK_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        lock: Optional[threading.RLock] = None,
        on_finish: Optional[Callable[["AnimationRunner"], None]] = None,
    ) -> None:
        self.tween = tween
        self.tick_seconds = max(0.001, float(tick_seconds))
        self.start_timestamp: Optional[float] = None
        self.last_value: Vector2 = tween.start
        self.rejected = False
        self._clock = clock
        self._lock = lock or threading.RLock()
        self._stop = threading.Event()
        self._state = RunState.CREATED
        self._thread: Optional[threading.Thread] = None
        self._on_finish = on_finish

    def __repr__(self) -> str:
        return f"<AnimationRunner {self._state.value} {self.tween.describe()}>"

    # --- state ------------------------------------------------------------
    @property
    def state(self) -> RunState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is RunState.RUNNING

    @property
    def done(self) -> bool:
        return self._state in (RunState.COMPLETED, RunState.CANCELLED)

    # --- lifecycle --------------------------------------------------------
    def begin(self, now: Optional[float] = None) -> None:
        """ CREATED -> RUNNING without spawning a thread. """
        with self._lock:
            if self._state is not RunState.CREATED:
                raise RuntimeError(f"runner already {self._state.value}")
            self.start_timestamp = self._clock() if now is None else float(now)
            self._state = RunState.RUNNING
        logger.debug("animation start: %s", self.tween.describe())

    def start(self) -> "AnimationRunner":
        self.begin()
        if self.tween.duration <= 0:
            self.step(self.start_timestamp)
            return self
        self._thread = threading.Thread(
            target=self._run,
            name=f"tween-{type(self.tween.target).__name__}",
            daemon=True,
        )
        self._thread.start()
        return self

    def step(self, now: float) -> bool:
        """ Run one tick at time `now`. Returns True while more ticks are needed. """
        if self.start_timestamp is None:
            raise RuntimeError("runner was never started")
        progress = self.tween.progress_at(now - self.start_timestamp)
        with self._lock:
            if self._state is not RunState.RUNNING:
                return False
            if progress >= 1.0:
                value = self.tween.end
                self._state = RunState.COMPLETED
            else:
                value = self.tween.value_at(progress)
            if not self._write(value):
                self._state = RunState.COMPLETED
            finished = self._state is RunState.COMPLETED
        if finished:
            self._finish()
        return not finished

    def cancel(self, snap_to_end: bool = False) -> bool:
        """
        Stop future ticks. With snap_to_end the exact final value is written
        and the run counts as COMPLETED; otherwise it is CANCELLED and keeps
        whatever value was written last. Returns False if already finished.
        """
        with self._lock:
            if self.done:
                return False
            if snap_to_end and self._state is RunState.RUNNING:
                self._write(self.tween.end)
                self._state = RunState.COMPLETED
            else:
                self._state = RunState.CANCELLED
            self._stop.set()
        logger.debug("animation %s by cancel: %s", self._state.value, self.tween.describe())
        self._finish()
        return True

    def join(self, timeout: Optional[float] = None) -> bool:
        t = self._thread
        if t is not None and t is not threading.current_thread():
            t.join(timeout)
        return self.done

    # --- internals --------------------------------------------------------
    def _run(self) -> None:
        while not self._stop.is_set():
            if not self.step(self._clock()):
                break
            self._stop.wait(self.tick_seconds)

    def _write(self, value: Vector2) -> bool:
        target = self.tween.target
        try:
            target.set_position(value)
        except Exception as e:
            self.rejected = True
            logger.warning("animation target %r rejected position %s: %s",
                           target, value.as_tuple(), e)
            return False
        self.last_value = value
        try:
            notify_frame_changed(target)
        except Exception as e:
            logger.warning("frame-changed hook failed on %r: %s", target, e)
        return True

    def _finish(self) -> None:
        self._stop.set()
        if self._state is RunState.COMPLETED and not self.rejected:
            logger.debug("animation completed: %s", self.tween.describe())
        cb, self._on_finish = self._on_finish, None
        if cb is not None:
            cb(self)
