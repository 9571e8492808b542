#!/usr/bin/env python3
"""
Vector helper functions for 2D operations.

These are small, fast functions for vector math used throughout the app.
"""
import math
from typing import Tuple


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def vec_add(a: Tuple[float, float], b: Tuple[float, float]) -> Tuple[float, float]:
    return (a[0] + b[0], a[1] + b[1])


def polar_to_screen(center: Tuple[float, float], r: float, angle: float) -> Tuple[float, float]:
    """
    Project (r, angle) about center into screen space.

    Screen Y grows downward, so the sine term is subtracted: increasing angle
    traces counter-clockwise motion on screen.
    """
    return vec_add(center, (r * math.cos(angle), -r * math.sin(angle)))
