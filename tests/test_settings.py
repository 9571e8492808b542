"""
Unit tests for simulation settings and variants
"""
import unittest

from solarsim.constants import DARKGRAY
from solarsim.settings import DEFAULT_VARIANT, SimulationSettings, get_variant


class TestVariants(unittest.TestCase):

    def test_labels_variant(self):
        s = get_variant("labels")
        self.assertTrue(s.year_labels)
        self.assertFalse(s.overlay_always_on)
        self.assertEqual(s.tuning_k, 1.0)
        self.assertEqual(s.throttle_frames, 7)
        self.assertEqual(s.window_size, 650)
        self.assertEqual(s.center, (325.0, 325.0))
        self.assertAlmostEqual(s.au_pixels, 37.7)
        self.assertIsNone(s.overlay_color)
        self.assertEqual(s.title, "Solar Simulation")

    def test_classic_variant(self):
        s = get_variant("classic")
        self.assertFalse(s.year_labels)
        self.assertTrue(s.overlay_always_on)
        self.assertEqual(s.tuning_k, 4.0)
        self.assertEqual(s.throttle_frames, 10)
        self.assertEqual(s.center, (300.0, 300.0))
        self.assertEqual(s.overlay_color, DARKGRAY)

    def test_outermost_orbit_fits_window(self):
        for name in ("labels", "classic"):
            s = get_variant(name)
            self.assertLess(8 * s.au_pixels + 11, s.window_size / 2, name)

    def test_default_variant_exists(self):
        self.assertIsInstance(get_variant(DEFAULT_VARIANT), SimulationSettings)

    def test_unknown_variant(self):
        with self.assertRaises(KeyError):
            get_variant("nope")


class TestOverrides(unittest.TestCase):

    def test_with_overrides_copies(self):
        base = get_variant("labels")
        fast = base.with_overrides(initial_speed=3.0)
        self.assertEqual(fast.initial_speed, 3.0)
        self.assertEqual(base.initial_speed, 1.0)

    def test_invalid_values_rejected(self):
        base = SimulationSettings()
        for changes in ({"throttle_frames": 0}, {"window_size": 0}, {"initial_speed": 5.5},
                        {"initial_speed": -0.1}):
            with self.assertRaises(ValueError, msg=str(changes)):
                base.with_overrides(**changes)


if __name__ == "__main__":
    unittest.main()
