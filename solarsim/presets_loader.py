#!/usr/bin/env python3
"""
Body preset loading utilities.

Presets are JSON files in solarsim/presets/ describing the bodies to spawn.

Schema
======
{
  "name": "Human-friendly preset name",
  "description": "Optional description",
  "bodies": [
    {
      "name": "Sun",
      "radius": 15,                # display radius, pixels
      "orbit_radius": 0,           # AU
      "orbit_speed": 0,            # abstract speed units
      "color": "ORANGE",           # palette name or [r, g, b]
      "central": true
    }
  ]
}

Exactly one body must be central; it is moved to the front of the returned list.
Users can add their own JSON files into the presets folder and they'll be picked up
by the loader.
"""
import json
import logging
import os
from typing import List, Tuple

from .constants import (
    BEIGE,
    BLUE,
    BROWN,
    DARKBLUE,
    GRAY,
    ORANGE,
    PALETTE,
    RAYWHITE,
    RED,
    SKYBLUE,
)
from .data_models import BodySpec, Color

logger = logging.getLogger(__name__)

PRESETS_DIR = os.path.join(os.path.dirname(__file__), "presets")
DEFAULT_PRESET = "solar_system.json"
FALLBACK_COLOR = (200, 200, 255)


class PresetError(ValueError):
    """A preset file is missing, unreadable or structurally invalid."""


def _read_json(path: str) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise PresetError(f"Cannot read preset {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise PresetError(f"Preset {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise PresetError(f"Preset {path} must contain a JSON object")
    return data


def _coerce_color(c) -> Color:
    if isinstance(c, str):
        try:
            return PALETTE[c.upper()]
        except KeyError:
            raise ValueError(f"unknown colour name {c!r}") from None
    r, g, b = int(c[0]), int(c[1]), int(c[2])
    r = max(0, min(255, r)); g = max(0, min(255, g)); b = max(0, min(255, b))
    return (r, g, b)


def _parse_body(b) -> BodySpec:
    if not isinstance(b, dict):
        raise ValueError(f"expected an object, got {type(b).__name__}")
    return BodySpec(
        name=str(b.get("name", "Body")),
        radius=float(b["radius"]),
        orbit_radius_au=float(b.get("orbit_radius", 0.0)),
        orbit_speed_units=float(b.get("orbit_speed", 0.0)),
        color=_coerce_color(b.get("color", FALLBACK_COLOR)),
        is_central=bool(b.get("central", False)),
    )


def _central_first(specs: List[BodySpec], source: str) -> List[BodySpec]:
    central = [s for s in specs if s.is_central]
    if len(central) != 1:
        raise PresetError(f"{source} must define exactly one central body, found {len(central)}")
    return central + [s for s in specs if not s.is_central]


def list_presets() -> List[Tuple[str, str]]:
    """Return list of (file_name, display_name) for available presets."""
    items: List[Tuple[str, str]] = []
    if not os.path.isdir(PRESETS_DIR):
        return items
    for fn in sorted(os.listdir(PRESETS_DIR)):
        if not fn.lower().endswith(".json"):
            continue
        try:
            data = _read_json(os.path.join(PRESETS_DIR, fn))
        except PresetError as exc:
            logger.warning("Skipping preset %s: %s", fn, exc)
            continue
        display = data.get("name") or os.path.splitext(fn)[0]
        items.append((fn, display))
    return items


def load_preset(file_name: str = DEFAULT_PRESET) -> Tuple[List[BodySpec], str]:
    """
    Load a preset JSON by path, or by file name inside the presets folder.
    An existing file path (absolute or relative to the working directory) wins.
    Returns (specs, display_name) with the central body first.
    """
    path = file_name if os.path.isfile(file_name) else os.path.join(PRESETS_DIR, file_name)
    data = _read_json(path)
    display_name = data.get("name") or os.path.splitext(os.path.basename(file_name))[0]
    bodies = data.get("bodies", [])
    if not isinstance(bodies, list):
        raise PresetError(f"{file_name}: 'bodies' must be a list, got {type(bodies).__name__}")
    specs: List[BodySpec] = []
    for i, b in enumerate(bodies):
        try:
            specs.append(_parse_body(b))
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            logger.warning("Skipping body #%d in %s: %s", i, file_name, exc)
            continue
    return _central_first(specs, file_name), display_name


def template_solar_system() -> List[BodySpec]:
    """
    Sun + the eight planets, with orbit radii of 1..8 AU and hand-tuned speeds.
    Built in so the simulation can start without reading any files.
    """
    return [
        BodySpec("Sun", 15, 0, 0.0, ORANGE, is_central=True),
        BodySpec("Mercury", 6, 1, 48.4, GRAY),
        BodySpec("Venus", 8, 2, 36.0, RAYWHITE),
        BodySpec("Earth", 8, 3, 30.8, BLUE),
        BodySpec("Mars", 7, 4, 25.1, RED),
        BodySpec("Jupiter", 11, 5, 14.1, BROWN),
        BodySpec("Saturn", 10, 6, 10.7, BEIGE),
        BodySpec("Uranus", 9, 7, 7.8, SKYBLUE),
        BodySpec("Neptune", 9, 8, 6.4, DARKBLUE),
    ]
