import time
import unittest

from drawkit.anim.easing import EasingDirection, EasingStyle
from drawkit.anim.runner import AnimationRunner, RunState
from drawkit.anim.tween import Tween, Vector2


class Dot:
    """ Minimal animation target that records every write. """
    def __init__(self, x=0.0, y=0.0):
        self.pos = Vector2(x, y)
        self.writes = []
        self.frames = 0

    def get_position(self):
        return self.pos

    def set_position(self, v):
        self.pos = v
        self.writes.append(v)

    def on_frame_changed(self):
        self.frames += 1


class Detached(Dot):
    def set_position(self, v):
        raise RuntimeError("target is no longer on a window")


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


def _runner(target, delta=(100, 50), duration=1.0, style=EasingStyle.LINEAR,
            direction=EasingDirection.IN, clock=None):
    tw = Tween.capture(target, delta, duration, style, direction)
    return AnimationRunner(tw, clock=clock or FakeClock())


class TestRunnerStepping(unittest.TestCase):
    def test_linear_samples_and_exact_end(self):
        dot = Dot()
        r = _runner(dot)
        r.begin(now=0.0)
        self.assertIs(r.state, RunState.RUNNING)

        self.assertTrue(r.step(0.5))
        self.assertAlmostEqual(dot.pos.x, 50.0)
        self.assertAlmostEqual(dot.pos.y, 25.0)

        self.assertFalse(r.step(1.0))
        self.assertEqual(dot.pos, Vector2(100, 50))
        self.assertIs(r.state, RunState.COMPLETED)

    def test_late_tick_lands_exactly_on_end(self):
        dot = Dot(0.1, 0.2)
        r = _runner(dot, delta=(0.2, 0.1), style=EasingStyle.ELASTIC, direction=EasingDirection.OUT)
        r.begin(now=0.0)
        r.step(0.3)
        r.step(7.0)
        self.assertEqual(dot.pos, Vector2(0.1, 0.2) + Vector2(0.2, 0.1))
        self.assertEqual(r.last_value, r.tween.end)

    def test_no_ticks_after_completion(self):
        dot = Dot()
        r = _runner(dot)
        r.begin(now=0.0)
        r.step(2.0)
        n = len(dot.writes)
        self.assertFalse(r.step(3.0))
        self.assertEqual(len(dot.writes), n)

    def test_hook_called_after_each_write(self):
        dot = Dot()
        r = _runner(dot)
        r.begin(now=0.0)
        for t in (0.1, 0.2, 0.3, 1.0):
            r.step(t)
        self.assertEqual(dot.frames, 4)
        self.assertEqual(len(dot.writes), 4)

    def test_step_before_start_is_an_error(self):
        r = _runner(Dot())
        with self.assertRaises(RuntimeError):
            r.step(0.0)

    def test_begin_twice_is_an_error(self):
        r = _runner(Dot())
        r.begin(now=0.0)
        with self.assertRaises(RuntimeError):
            r.begin(now=1.0)


class TestRunnerZeroDuration(unittest.TestCase):
    def test_zero_and_negative_duration_complete_inside_start(self):
        for d in (0.0, -1.0):
            with self.subTest(duration=d):
                dot = Dot(5, 5)
                r = _runner(dot, duration=d).start()
                self.assertIs(r.state, RunState.COMPLETED)
                self.assertEqual(dot.writes, [Vector2(105, 55)])
                self.assertEqual(dot.frames, 1)


class TestRunnerCancel(unittest.TestCase):
    def test_cancel_keeps_last_value_and_stops_writing(self):
        dot = Dot()
        r = _runner(dot)
        r.begin(now=0.0)
        r.step(0.25)
        last = dot.pos
        self.assertTrue(r.cancel())
        self.assertIs(r.state, RunState.CANCELLED)
        self.assertEqual(r.last_value, last)
        self.assertFalse(r.step(0.9))
        self.assertEqual(dot.pos, last)

    def test_cancel_with_snap_writes_exact_end(self):
        dot = Dot(1, 1)
        r = _runner(dot, style=EasingStyle.BOUNCE)
        r.begin(now=0.0)
        r.step(0.4)
        self.assertTrue(r.cancel(snap_to_end=True))
        self.assertIs(r.state, RunState.COMPLETED)
        self.assertEqual(dot.pos, Vector2(101, 51))

    def test_cancel_after_completion_is_a_no_op(self):
        dot = Dot()
        r = _runner(dot, duration=0).start()
        n = len(dot.writes)
        self.assertFalse(r.cancel())
        self.assertFalse(r.cancel(snap_to_end=True))
        self.assertIs(r.state, RunState.COMPLETED)
        self.assertEqual(len(dot.writes), n)

    def test_on_finish_called_once(self):
        seen = []
        tw = Tween.capture(Dot(), (1, 1), 1.0)
        r = AnimationRunner(tw, clock=FakeClock(), on_finish=seen.append)
        r.begin(now=0.0)
        r.step(1.5)
        r.cancel()
        self.assertEqual(seen, [r])


class TestRunnerRejectedWrite(unittest.TestCase):
    def test_rejected_write_is_a_warning_and_finishes(self):
        target = Detached()
        r = _runner(target)
        r.begin(now=0.0)
        with self.assertLogs("drawkit.anim.runner", level="WARNING") as cm:
            self.assertFalse(r.step(0.5))
        self.assertIn("rejected", cm.output[0])
        self.assertTrue(r.rejected)
        self.assertIs(r.state, RunState.COMPLETED)
        self.assertFalse(r.cancel())


class TestRunnerThreaded(unittest.TestCase):
    def test_background_run_reaches_midpoint_then_end(self):
        dot = Dot()
        tw = Tween.capture(dot, (100, 50), 1.0)
        r = AnimationRunner(tw, tick_seconds=0.005)
        t0 = time.monotonic()
        r.start()
        self.assertLess(time.monotonic() - t0, 0.1)   # start() returns immediately

        time.sleep(max(0.0, 0.5 - (time.monotonic() - t0)))
        mid = dot.pos
        self.assertAlmostEqual(mid.x, 50.0, delta=15.0)
        self.assertAlmostEqual(mid.y, 25.0, delta=7.5)

        self.assertTrue(r.join(timeout=3.0))
        self.assertIs(r.state, RunState.COMPLETED)
        self.assertEqual(dot.pos, Vector2(100, 50))

    def test_cancel_stops_background_thread(self):
        dot = Dot()
        r = AnimationRunner(Tween.capture(dot, (100, 0), 5.0), tick_seconds=0.005).start()
        time.sleep(0.05)
        r.cancel()
        r.join(timeout=1.0)
        n = len(dot.writes)
        time.sleep(0.05)
        self.assertEqual(len(dot.writes), n)
        self.assertIs(r.state, RunState.CANCELLED)


if __name__ == "__main__":
    unittest.main()
