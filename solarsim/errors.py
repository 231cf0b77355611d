#!/usr/bin/env python3
"""
Exceptions raised by the simulator core.
"""


class SolarSimError(Exception):
    """Base class for simulator errors."""


class DegenerateDistanceError(SolarSimError, ZeroDivisionError):
    """Two bodies share the same position, so their attraction is undefined."""

    def __init__(self, body_name: str, other_name: str):
        super().__init__(f"{body_name} and {other_name} coincide; gravitational force is undefined")
        self.body_name = body_name
        self.other_name = other_name


class TemplateError(SolarSimError):
    """A scene template could not be read or contains no usable bodies."""
