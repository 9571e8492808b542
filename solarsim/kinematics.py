#!/usr/bin/env python3
"""
Kinematic orbit engine for the Solar Simulation

Responsibilities
- Build screen-space Body objects from unscaled BodySpec parameters.
- Advance orbiting bodies along circular orbits at a fixed angular velocity.
- Provide small helpers for common orbital quantities (angular velocity, period).

Units and conventions
- Orbit radii are in pixels, angles in radians, time in scaled seconds.
- Angular velocity is orbit_speed / orbit_radius, multiplied by a tuning constant K
  that only exists to make periods visually distinguishable.
- Positions follow polar_to_screen: x = cx + r*cos(a), y = cy - r*sin(a).

Numerical notes
- There is no force integration; orbits are exact circles and the only state is
  the phase angle.
- The angle is wrapped by one subtraction of 2*pi at the start of an update, and
  the year counter is incremented in the same step, so elapsed_years stays
  continuous across the wrap.
- The central body has orbit_radius 0 and is never advanced, so its angular
  velocity is never computed.
"""

import math
import random
from typing import Optional

from .constants import TAU
from .data_models import Body, BodySpec
from .settings import SimulationSettings


def create_body(spec: BodySpec, settings: SimulationSettings,
                rng: Optional[random.Random] = None) -> Body:
    """
    Create a Body from literal preset parameters.

    Orbit radius is converted from AU to pixels via settings.au_pixels and the orbit
    speed via settings.km_scale. Orbiting bodies start at a random whole-degree
    phase in [0, 360) so they do not all line up; the central body starts at 0.

    Args:
        spec: Unscaled body parameters.
        settings: Provides the unit scales and the orbit center.
        rng: Source of starting phases (defaults to the module-level generator).

    Returns:
        A Body with its position already projected.
    """
    rng = rng or random
    if spec.is_central:
        angle = 0.0
    else:
        angle = math.radians(rng.randrange(0, 360))

    return Body(
        name=spec.name,
        radius=float(spec.radius),
        orbit_radius=float(spec.orbit_radius_au) * settings.au_pixels,
        orbit_speed=float(spec.orbit_speed_units) * settings.km_scale,
        color=spec.color,
        center=settings.center,
        is_central=spec.is_central,
        angle=angle,
    )


def angular_velocity(body: Body) -> float:
    """
    Angular velocity (radians per unscaled time unit) of an orbiting body.

    Raises:
        ValueError: for bodies with no orbit radius (the central body).
    """
    if body.orbit_radius == 0:
        raise ValueError(f"{body.name} has no orbit radius; angular velocity is undefined")
    return body.orbit_speed / body.orbit_radius


def orbital_period(body: Body, tuning_k: float) -> float:
    """
    Seconds of real time per revolution at speed x1.0.

    Returns math.inf for bodies that do not move.
    """
    if body.is_central or body.orbit_radius == 0 or body.orbit_speed == 0 or tuning_k == 0:
        return math.inf
    return TAU / (angular_velocity(body) * tuning_k)


class OrbitKinematics:
    """
    Circular-orbit stepper.

    Each update wraps the angle once if it has passed 2*pi (counting a year),
    advances it by omega * dt * K, then re-projects the position from the new
    angle.
    """

    def __init__(self, tuning_k: float = 1.0):
        self.tuning_k = float(tuning_k)

    def advance(self, body: Body, scaled_dt: float) -> None:
        """
        Advance one body by a scaled time step (modified in place).

        Args:
            body: Body to update; central bodies are left untouched.
            scaled_dt: Real frame time multiplied by the simulation speed.
        """
        if body.is_central:
            return

        if body.angle > TAU:
            body.angle -= TAU
            body.year_count += 1

        body.angle += angular_velocity(body) * scaled_dt * self.tuning_k
        body.reproject()
