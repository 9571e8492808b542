#!/usr/bin/env python3
"""
Simulation state and per-frame orchestration.

What this module does
- SimulationController owns the bodies (central first), the global speed factor,
  the orbit-overlay flag and the input throttle counter.
- Each frame: scale the renderer's frame time by speed, read input, advance every
  orbiting body, then draw the HUD and all bodies.

Threading model
- Single-threaded. The controller and its bodies are only touched from the loop
  that also owns the renderer, so no locking is needed.

The renderer collaborator is described by the Renderer protocol; PygameRenderer in
solarsim.renderer is the real one, tests use a fake.
"""
import logging
import random
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

from .constants import (
    BACKGROUND_COLOR,
    FONT_LG,
    FONT_SM,
    FPS_COLOR,
    FPS_POS,
    KEY_TOGGLE_ORBITS,
    LABEL_GAP,
    SPEED_DOWN_KEYS,
    SPEED_POS,
    SPEED_UP_KEYS,
    TEXT_COLOR,
)
from .data_models import Body, BodySpec, Color
from .kinematics import OrbitKinematics, create_body, orbital_period
from .settings import SimulationSettings
from .vector_utils import clamp

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """Window, drawing, timing and keyboard collaborator."""

    def should_close(self) -> bool: ...

    def begin_frame(self) -> None: ...

    def end_frame(self) -> None: ...

    def frame_delta_seconds(self) -> float: ...

    def fps(self) -> float: ...

    def clear(self, color: Color) -> None: ...

    def draw_circle(self, center: Tuple[float, float], radius: float, color: Color) -> None: ...

    def draw_circle_outline(self, center: Tuple[float, float], radius: float, color: Color) -> None: ...

    def draw_text(self, text: str, x: float, y: float, size: int, color: Color) -> None: ...

    def measure_text_width(self, text: str, size: int) -> float: ...

    def is_key_pressed(self, key: str) -> bool: ...

    def is_key_down(self, key: str) -> bool: ...


def draw_body(body: Body, renderer: Renderer, settings: SimulationSettings, show_orbit: bool) -> None:
    """
    Draw one body: filled disc, optional orbit outline and optional year label.
    """
    renderer.draw_circle(body.position, body.radius, body.color)

    if show_orbit and not body.is_central:
        color = settings.overlay_color or body.color
        renderer.draw_circle_outline(body.center, body.orbit_radius, color)

    if settings.year_labels and not body.is_central:
        text = f"{body.elapsed_years:.3f}"
        width = renderer.measure_text_width(text, FONT_SM)
        x, y = body.position
        renderer.draw_text(text, x - width / 2, y + body.radius + LABEL_GAP, FONT_SM, TEXT_COLOR)


def _any_down(renderer: Renderer, keys: Iterable[str]) -> bool:
    return any(renderer.is_key_down(k) for k in keys)


class SimulationController:
    """
    Explicit simulation state passed through update and render.

    Attributes:
        settings: SimulationSettings in effect.
        bodies: all bodies, central body first, in creation order.
        speed: global time multiplier, always within [min_speed, max_speed].
        orbit_overlay_enabled: whether orbit outlines are drawn.
        frames: frames since the last throttled speed poll.
    """

    def __init__(self, settings: SimulationSettings, bodies: Sequence[Body]):
        self.settings = settings
        self.bodies: List[Body] = list(bodies)
        self.speed = settings.initial_speed
        self.orbit_overlay_enabled = settings.overlay_always_on
        self.frames = 0
        self.kinematics = OrbitKinematics(settings.tuning_k)

    @classmethod
    def from_specs(cls, specs: Sequence[BodySpec], settings: SimulationSettings,
                   rng: Optional[random.Random] = None) -> "SimulationController":
        bodies = [create_body(s, settings, rng) for s in specs]
        for b in bodies:
            if not b.is_central:
                logger.debug("%s: period %.1fs at x1.0", b.name, orbital_period(b, settings.tuning_k))
        return cls(settings, bodies)

    def adjust_speed(self, delta: float) -> float:
        """Apply one speed step and clamp; returns the new speed."""
        s = self.settings
        self.speed = clamp(self.speed + delta, s.min_speed, s.max_speed)
        return self.speed

    def toggle_overlay(self) -> bool:
        if self.settings.overlay_always_on:
            return self.orbit_overlay_enabled
        self.orbit_overlay_enabled = not self.orbit_overlay_enabled
        logger.debug("Orbit overlay %s", "on" if self.orbit_overlay_enabled else "off")
        return self.orbit_overlay_enabled

    def poll_input(self, renderer: Renderer) -> None:
        """
        Read keyboard state for this frame.

        The overlay toggle is a one-shot press. Speed keys are held-key state,
        sampled only once every throttle_frames frames.
        """
        if renderer.is_key_pressed(KEY_TOGGLE_ORBITS):
            self.toggle_overlay()

        if self.frames >= self.settings.throttle_frames:
            before = self.speed
            if _any_down(renderer, SPEED_DOWN_KEYS):
                self.adjust_speed(-self.settings.speed_step)
            elif _any_down(renderer, SPEED_UP_KEYS):
                self.adjust_speed(self.settings.speed_step)
            if self.speed != before:
                logger.debug("Speed x%.1f", self.speed)
            self.frames = 0

    def update(self, scaled_dt: float) -> None:
        """Advance every orbiting body by scaled_dt."""
        for b in self.bodies:
            if not b.is_central:
                self.kinematics.advance(b, scaled_dt)

    def step(self, renderer: Renderer) -> float:
        """
        Run the update half of one frame. Returns the scaled delta used.
        """
        scaled_dt = renderer.frame_delta_seconds() * self.speed
        self.poll_input(renderer)
        self.update(scaled_dt)
        self.frames += 1
        return scaled_dt

    def render(self, renderer: Renderer) -> None:
        renderer.clear(BACKGROUND_COLOR)
        renderer.draw_text(f"{int(round(renderer.fps()))} FPS", FPS_POS[0], FPS_POS[1], FONT_LG, FPS_COLOR)
        renderer.draw_text(f"Speed: x{self.speed:.1f}", SPEED_POS[0], SPEED_POS[1], FONT_LG, TEXT_COLOR)
        for b in self.bodies:
            draw_body(b, renderer, self.settings, self.orbit_overlay_enabled)

    def run(self, renderer: Renderer) -> int:
        """
        Drive update -> render until the window is closed.
        Returns the number of frames run.
        """
        count = 0
        while not renderer.should_close():
            renderer.begin_frame()
            self.step(renderer)
            self.render(renderer)
            renderer.end_frame()
            count += 1
        return count
