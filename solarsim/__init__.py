"""Kinematic solar system model, settings, presets and pygame renderer."""
