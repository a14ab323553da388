import math
import unittest

from drawkit.anim.easing import EasingDirection, EasingStyle, InvalidArgument, ease

SAMPLES = [i / 40 for i in range(41)]


class TestEasingBoundaries(unittest.TestCase):
    def test_endpoints_are_exact_for_every_pair(self):
        for style in EasingStyle:
            for direction in EasingDirection:
                with self.subTest(style=style, direction=direction):
                    self.assertEqual(ease(0.0, style, direction), 0.0)
                    self.assertEqual(ease(1.0, style, direction), 1.0)

    def test_progress_outside_unit_range_is_clamped(self):
        self.assertEqual(ease(-0.5, EasingStyle.CUBIC, EasingDirection.OUT), 0.0)
        self.assertEqual(ease(1.7, EasingStyle.ELASTIC, EasingDirection.INOUT), 1.0)

    def test_linear_is_identity(self):
        for t in SAMPLES:
            for direction in EasingDirection:
                self.assertAlmostEqual(ease(t, EasingStyle.LINEAR, direction), t, places=12)


class TestEasingComposition(unittest.TestCase):
    def test_out_mirrors_in(self):
        for style in EasingStyle:
            for t in SAMPLES:
                with self.subTest(style=style, t=t):
                    self.assertAlmostEqual(
                        ease(t, style, EasingDirection.OUT),
                        1 - ease(1 - t, style, EasingDirection.IN),
                        places=12,
                    )

    def test_inout_is_continuous_at_half(self):
        eps = 1e-12
        for style in EasingStyle:
            with self.subTest(style=style):
                mid = ease(0.5, style, EasingDirection.INOUT)
                self.assertAlmostEqual(mid, 0.5, places=12)
                self.assertAlmostEqual(ease(0.5 - eps, style, EasingDirection.INOUT), mid, places=5)
                self.assertAlmostEqual(ease(0.5 + eps, style, EasingDirection.INOUT), mid, places=5)

    def test_inout_halves_follow_in_curve(self):
        self.assertAlmostEqual(ease(0.25, EasingStyle.QUAD, EasingDirection.INOUT), 0.125)
        self.assertAlmostEqual(ease(0.75, EasingStyle.QUAD, EasingDirection.INOUT), 0.875)


class TestEasingFormulas(unittest.TestCase):
    def test_power_curves(self):
        t = 0.3
        self.assertAlmostEqual(ease(t, EasingStyle.QUAD), t ** 2)
        self.assertAlmostEqual(ease(t, EasingStyle.CUBIC), t ** 3)
        self.assertAlmostEqual(ease(t, EasingStyle.QUART), t ** 4)
        self.assertAlmostEqual(ease(t, EasingStyle.QUINT), t ** 5)

    def test_sine_exponential_circular(self):
        t = 0.4
        self.assertAlmostEqual(ease(t, EasingStyle.SINE), 1 - math.cos(t * math.pi / 2))
        self.assertAlmostEqual(ease(t, EasingStyle.EXPONENTIAL), 2 ** (10 * (t - 1)))
        self.assertAlmostEqual(ease(t, EasingStyle.CIRCULAR), 1 - math.sqrt(1 - t * t))

    def test_back_overshoots_below_zero(self):
        s = 1.70158
        t = 0.2
        self.assertAlmostEqual(ease(t, EasingStyle.BACK), t * t * ((s + 1) * t - s))
        self.assertLess(ease(t, EasingStyle.BACK), 0.0)
        self.assertGreater(ease(0.8, EasingStyle.BACK, EasingDirection.OUT), 1.0)

    def test_elastic_formula(self):
        t = 0.7
        expected = -(2 ** (10 * (t - 1))) * math.sin((t - 1.075) * 2 * math.pi / 0.3)
        self.assertAlmostEqual(ease(t, EasingStyle.ELASTIC), expected)

    def test_bounce_segments_and_non_negative(self):
        self.assertEqual(ease(1.0, EasingStyle.BOUNCE, EasingDirection.IN), 1.0)
        self.assertAlmostEqual(ease(1 / 2.75, EasingStyle.BOUNCE), 1.0)
        self.assertAlmostEqual(ease(1.5 / 2.75, EasingStyle.BOUNCE), 0.75)
        self.assertAlmostEqual(ease(2.25 / 2.75, EasingStyle.BOUNCE), 0.9375)
        self.assertAlmostEqual(ease(2.625 / 2.75, EasingStyle.BOUNCE), 0.984375)
        for direction in EasingDirection:
            for t in [i / 200 for i in range(201)]:
                floor = 0.0 if direction is EasingDirection.IN else -1e-12
                self.assertGreaterEqual(ease(t, EasingStyle.BOUNCE, direction), floor)
                self.assertLessEqual(ease(t, EasingStyle.BOUNCE, direction), 1.0 + 1e-12)


class TestEasingNames(unittest.TestCase):
    def test_names_resolve_regardless_of_case(self):
        self.assertIs(EasingStyle.parse("bounce"), EasingStyle.BOUNCE)
        self.assertIs(EasingStyle.parse("Exponential"), EasingStyle.EXPONENTIAL)
        for name in ("inout", "InOut", "in_out", "IN-OUT", "INOUT"):
            self.assertIs(EasingDirection.parse(name), EasingDirection.INOUT)
        self.assertAlmostEqual(ease(0.3, "quad", "out"), ease(0.3, EasingStyle.QUAD, EasingDirection.OUT))

    def test_unknown_names_fail_instead_of_falling_back_to_linear(self):
        with self.assertRaises(InvalidArgument):
            ease(0.5, "wobble", EasingDirection.IN)
        with self.assertRaises(InvalidArgument):
            ease(0.5, EasingStyle.QUAD, "sideways")
        with self.assertRaises(InvalidArgument):
            EasingStyle.parse(3)
        with self.assertRaises(ValueError):
            ease(float("nan"))


if __name__ == "__main__":
    unittest.main()
