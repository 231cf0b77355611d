#!/usr/bin/env python3
"""
Headless core of the solar system simulator: bodies, physics, camera and presets.
"""
from .data_models import Body, SimulationConfig, SimulationState, UpdateMode
from .errors import DegenerateDistanceError, SolarSimError, TemplateError

__all__ = [
    "Body",
    "SimulationConfig",
    "SimulationState",
    "UpdateMode",
    "SolarSimError",
    "DegenerateDistanceError",
    "TemplateError",
]
