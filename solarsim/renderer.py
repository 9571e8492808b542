#!/usr/bin/env python3
"""
Pygame implementation of the renderer collaborator.

Owns the window, the frame clock, fonts and keyboard state. Everything here runs on
the thread that drives SimulationController.run; pygame is initialised in open()
and shut down in close(), and the class is a context manager so the window is
always released when the loop exits.

Keys are addressed by logical names (see KEY_CODES) so the simulation never
imports pygame.
"""
import logging
from typing import Dict, Optional, Set, Tuple

import pygame
from pygame import gfxdraw

from .data_models import Color
from .settings import SimulationSettings

logger = logging.getLogger(__name__)

KEY_CODES: Dict[str, int] = {
    "space": pygame.K_SPACE,
    "minus": pygame.K_MINUS,
    "kp_minus": pygame.K_KP_MINUS,
    "equals": pygame.K_EQUALS,
    "plus": pygame.K_PLUS,
    "kp_plus": pygame.K_KP_PLUS,
}

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000


class RendererError(RuntimeError):
    """The window or its drawing context could not be created."""


def _safe_point(pt) -> Optional[Tuple[int, int]]:
    x, y = int(round(pt[0])), int(round(pt[1]))
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


class PygameRenderer:
    """
    Pygame window: clears, draws discs, orbit outlines and text, paces frames.
    """

    def __init__(self, settings: SimulationSettings):
        self.settings = settings
        self.surface = None
        self.clock = None
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._pressed: Set[int] = set()
        self._close_requested = False
        self._delta = 0.0

    # -----------------------
    # Lifecycle
    # -----------------------

    def open(self) -> "PygameRenderer":
        size = self.settings.window_size
        try:
            pygame.init()
            pygame.font.init()
            self.surface = pygame.display.set_mode((size, size))
            pygame.display.set_caption(self.settings.title)
        except pygame.error as exc:
            pygame.quit()
            raise RendererError(f"Could not open a {size}x{size} window: {exc}") from exc
        self.clock = pygame.time.Clock()
        self._close_requested = False
        logger.info("Opened %dx%d window at %d FPS", size, size, self.settings.fps)
        return self

    def close(self) -> None:
        if self.surface is None:
            return
        self.surface = None
        self._fonts.clear()
        pygame.quit()
        logger.info("Window closed")

    def __enter__(self) -> "PygameRenderer":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def should_close(self) -> bool:
        return self._close_requested

    # -----------------------
    # Frame pacing
    # -----------------------

    def begin_frame(self) -> None:
        """Pump the event queue: close requests and one-shot key presses."""
        self._pressed.clear()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._close_requested = True
            elif event.type == pygame.KEYDOWN:
                self._pressed.add(event.key)

    def end_frame(self) -> None:
        pygame.display.flip()
        self._delta = self.clock.tick(self.settings.fps) / 1000.0

    def frame_delta_seconds(self) -> float:
        return self._delta

    def fps(self) -> float:
        return self.clock.get_fps() if self.clock is not None else 0.0

    # -----------------------
    # Drawing
    # -----------------------

    def clear(self, color: Color) -> None:
        self.surface.fill(color)

    def draw_circle(self, center, radius: float, color: Color) -> None:
        p = _safe_point(center)
        r = int(round(radius))
        if p is None or r <= 0:
            return
        gfxdraw.filled_circle(self.surface, p[0], p[1], r, color)
        gfxdraw.aacircle(self.surface, p[0], p[1], r, color)

    def draw_circle_outline(self, center, radius: float, color: Color) -> None:
        p = _safe_point(center)
        r = int(round(radius))
        if p is None or r <= 0:
            return
        gfxdraw.aacircle(self.surface, p[0], p[1], r, color)

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def draw_text(self, text: str, x: float, y: float, size: int, color: Color) -> None:
        img = self._font(size).render(text, True, color)
        self.surface.blit(img, (int(x), int(y)))

    def measure_text_width(self, text: str, size: int) -> float:
        return float(self._font(size).size(text)[0])

    # -----------------------
    # Keyboard
    # -----------------------

    def is_key_pressed(self, key: str) -> bool:
        """True once per physical press of key during this frame."""
        code = KEY_CODES[key]
        if code in self._pressed:
            self._pressed.discard(code)
            return True
        return False

    def is_key_down(self, key: str) -> bool:
        """True on every frame while key is held."""
        return bool(pygame.key.get_pressed()[KEY_CODES[key]])
