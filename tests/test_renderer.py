"""
Smoke tests for the pygame renderer, using SDL's headless video driver.
"""
import os
import unittest
from unittest import mock

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402

from solarsim.constants import BLACK, FONT_SM, ORANGE, RAYWHITE  # noqa: E402
from solarsim.renderer import PygameRenderer, RendererError  # noqa: E402
from solarsim.settings import get_variant  # noqa: E402


class TestPygameRenderer(unittest.TestCase):

    def setUp(self):
        self.settings = get_variant("labels")

    def test_window_lifecycle_and_drawing(self):
        with PygameRenderer(self.settings) as r:
            self.assertEqual(r.surface.get_size(), (650, 650))
            self.assertEqual(pygame.display.get_caption()[0], "Solar Simulation")
            self.assertFalse(r.should_close())

            r.begin_frame()
            r.clear(BLACK)
            r.draw_circle((325, 325), 15, ORANGE)
            r.draw_circle_outline((325, 325), 100, RAYWHITE)
            r.draw_circle((1e9, 1e9), 5, ORANGE)
            r.draw_text("Speed: x1.0", 20, 30, 20, RAYWHITE)
            self.assertGreater(r.measure_text_width("1.000", FONT_SM), 0)
            r.end_frame()

            self.assertGreaterEqual(r.frame_delta_seconds(), 0.0)
        self.assertIsNone(r.surface)

    def test_key_press_fires_once(self):
        with PygameRenderer(self.settings) as r:
            pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
            r.begin_frame()
            self.assertTrue(r.is_key_pressed("space"))
            self.assertFalse(r.is_key_pressed("space"))
            self.assertFalse(r.is_key_down("minus"))

    def test_quit_event_requests_close(self):
        with PygameRenderer(self.settings) as r:
            pygame.event.post(pygame.event.Event(pygame.QUIT))
            r.begin_frame()
            self.assertTrue(r.should_close())

    def test_init_failure_raises_renderer_error(self):
        with mock.patch("solarsim.renderer.pygame.display.set_mode",
                        side_effect=pygame.error("no display")):
            with self.assertRaises(RendererError):
                PygameRenderer(self.settings).open()


if __name__ == "__main__":
    unittest.main()
