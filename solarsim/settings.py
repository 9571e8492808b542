#!/usr/bin/env python3
"""
Simulation settings and the two named variants.

The variants differ in constants that change perceived orbital periods (tuning
multiplier, AU scale, window size), so they are kept as separate, complete
settings objects rather than merged.
"""
from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from .constants import (
    AU_FRACTION,
    DARKGRAY,
    DEFAULT_SPEED,
    KM_SCALE,
    MAX_SPEED,
    MIN_SPEED,
    SPEED_STEP,
    TARGET_FPS,
    WINDOW_SIZE,
    WINDOW_TITLE,
)
from .data_models import Color


@dataclass(frozen=True)
class SimulationSettings:
    """Container for simulation, input and display settings."""
    year_labels: bool = True
    overlay_always_on: bool = False
    tuning_k: float = 1.0
    throttle_frames: int = 7
    window_size: int = WINDOW_SIZE
    au_fraction: float = AU_FRACTION
    km_scale: float = KM_SCALE
    speed_step: float = SPEED_STEP
    min_speed: float = MIN_SPEED
    max_speed: float = MAX_SPEED
    initial_speed: float = DEFAULT_SPEED
    overlay_color: Optional[Color] = None  # None: draw each orbit in its body's colour
    fps: int = TARGET_FPS
    title: str = WINDOW_TITLE

    def __post_init__(self):
        if self.throttle_frames < 1:
            raise ValueError(f"throttle_frames must be >= 1, got {self.throttle_frames}")
        if self.window_size <= 0:
            raise ValueError(f"window_size must be positive, got {self.window_size}")
        if not (self.min_speed <= self.initial_speed <= self.max_speed):
            raise ValueError(
                f"initial_speed {self.initial_speed} outside [{self.min_speed}, {self.max_speed}]"
            )

    @property
    def center(self) -> Tuple[float, float]:
        half = self.window_size / 2
        return (half, half)

    @property
    def au_pixels(self) -> float:
        return self.window_size * self.au_fraction

    def with_overrides(self, **changes) -> "SimulationSettings":
        """Return a validated copy with the given fields replaced."""
        return replace(self, **changes)


VARIANTS: Dict[str, SimulationSettings] = {
    # Year counters under each planet, space toggles the orbit overlay
    "labels": SimulationSettings(),
    # Orbits always drawn in a fixed colour, faster periods, no labels
    "classic": SimulationSettings(
        year_labels=False,
        overlay_always_on=True,
        tuning_k=4.0,
        throttle_frames=10,
        window_size=600,
        au_fraction=0.06,
        overlay_color=DARKGRAY,
    ),
}

DEFAULT_VARIANT = "labels"


def get_variant(name: str) -> SimulationSettings:
    try:
        return VARIANTS[name]
    except KeyError:
        known = ", ".join(sorted(VARIANTS))
        raise KeyError(f"Unknown variant {name!r} (known: {known})") from None
