#!/usr/bin/env python3
"""
Data models for the Solar Simulation.

This module defines the BodySpec and Body dataclasses shared between kinematics,
rendering, and preset loading.

Units and usage
- BodySpec holds unscaled creation parameters: orbit radius in AU, orbit speed in
  abstract speed units. kinematics.create_body turns it into a Body.
- Body holds screen-space state: radii in pixels, angle in radians.
- position is derived from (orbit_radius, angle) about center. It has no setter;
  reproject() is the only writer and runs on construction and after each advance.
"""
from dataclasses import dataclass, field
from typing import Tuple

from .constants import TAU
from .vector_utils import polar_to_screen

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class BodySpec:
    """
    Literal per-body parameters, as written in a preset.

    Fields:
    - name: Identifier for the body
    - radius: Display radius in pixels
    - orbit_radius_au: Distance from the central body in AU (0 for the central body)
    - orbit_speed_units: Orbit speed constant in abstract units
    - color: RGB tuple used for rendering
    - is_central: True for the single non-orbiting body
    """
    name: str
    radius: float
    orbit_radius_au: float
    orbit_speed_units: float
    color: Color
    is_central: bool = False


@dataclass
class Body:
    """
    Represents a celestial body in the simulation.

    Fields:
    - name: Identifier for the body
    - radius: Display radius in pixels
    - orbit_radius: Distance from center in pixels
    - orbit_speed: Angular velocity constant (pixels per time unit)
    - color: RGB tuple used for rendering
    - center: Fixed screen point the body orbits about
    - is_central: Central bodies never move
    - angle: Orbital phase in radians; may exceed 2*pi until the next update wraps it
    - year_count: Completed revolutions
    """
    name: str
    radius: float
    orbit_radius: float
    orbit_speed: float
    color: Color
    center: Tuple[float, float]
    is_central: bool = False
    angle: float = 0.0
    year_count: int = 0
    _position: Tuple[float, float] = field(default=(0.0, 0.0), init=False, repr=False)

    def __post_init__(self) -> None:
        self.reproject()

    def reproject(self) -> None:
        """Refresh position from the current orbit radius and angle."""
        self._position = polar_to_screen(self.center, self.orbit_radius, self.angle)

    @property
    def position(self) -> Tuple[float, float]:
        return self._position

    @property
    def elapsed_years(self) -> float:
        return self.year_count + self.angle / TAU
