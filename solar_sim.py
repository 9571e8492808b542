#!/usr/bin/env python3
"""
Solar Simulation application entry point.

What this module does
- Opens a square pygame window titled "Solar Simulation" and animates a central
  body with planets on circular orbits.
- Builds a SimulationController from a JSON body preset and one of two settings
  variants, then runs the single-threaded update -> render loop until the window
  is closed.

Controls
- `-` / `=` (or `+`): decrease / increase the simulation speed in steps of 0.1, clamped
  to [0, 5]. Held keys repeat at a throttled rate.
- Space: toggle the orbit overlay (variant "labels"; "classic" always shows orbits).

Running
1) Install: `pip install -e .`
2) Run: `solar-sim` or `python solar_sim.py --variant classic`
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from solarsim.presets_loader import DEFAULT_PRESET, PresetError, list_presets, load_preset
from solarsim.renderer import PygameRenderer, RendererError
from solarsim.settings import DEFAULT_VARIANT, VARIANTS, get_variant
from solarsim.simulation import SimulationController

logger = logging.getLogger("solar_sim")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Animated model of the solar system")
    parser.add_argument("--variant", choices=sorted(VARIANTS), default=DEFAULT_VARIANT,
                        help="Settings variant (default: %(default)s)")
    parser.add_argument("--preset", default=DEFAULT_PRESET,
                        help="Preset file path, or file name in the presets folder (default: %(default)s)")
    parser.add_argument("--list-presets", action="store_true",
                        help="Print the available presets and exit")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the starting orbital phases")
    parser.add_argument("--speed", type=float, default=None,
                        help="Initial speed multiplier")
    parser.add_argument("--show-orbits", action="store_true",
                        help="Start with the orbit overlay enabled")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: %(default)s)")
    return parser.parse_args(argv)


def build_simulation(args: argparse.Namespace) -> SimulationController:
    settings = get_variant(args.variant)
    if args.speed is not None:
        settings = settings.with_overrides(initial_speed=args.speed)

    specs, display_name = load_preset(args.preset)
    sim = SimulationController.from_specs(specs, settings, random.Random(args.seed))
    if args.show_orbits:
        sim.orbit_overlay_enabled = True
    logger.info("Variant %s, preset %r with %d bodies", args.variant, display_name, len(sim.bodies))
    return sim


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list_presets:
        for fn, display in list_presets():
            print(f"{fn}\t{display}")
        return 0

    try:
        sim = build_simulation(args)
    except (PresetError, ValueError) as exc:
        logger.error("Cannot start: %s", exc)
        return 1

    try:
        with PygameRenderer(sim.settings) as renderer:
            frames = sim.run(renderer)
    except RendererError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Stopped after %d frames", frames)
    return 0


if __name__ == "__main__":
    sys.exit(main())
