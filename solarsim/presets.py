#!/usr/bin/env python3
"""
Built-in scenes.

Distances are real SI; radii are display sizes in pixels. Planets start on the x axis
with a purely tangential velocity, on alternating sides of the Sun.
"""
from typing import List

from .constants import AU, SUN_MASS
from .data_models import Body
from .physics import circular_orbit_velocity

YELLOW = (255, 255, 0)
DARK_GREY = (169, 169, 169)
WHITE = (255, 255, 255)
BLUE = (0, 0, 255)
RED = (255, 0, 0)
BROWN = (165, 42, 42)
LIGHT_BLUE = (173, 216, 230)
DARK_BLUE = (0, 0, 139)


def template_solar_system() -> List[Body]:
    """
    Sun + the eight planets. The Sun is the anchor and comes first.
    """
    return [
        Body("Sun", 1.98892 * 10**30, 30, (0.0, 0.0), (0.0, 0.0), YELLOW, is_anchor=True),
        Body("Mercury", 3.30 * 10**23, 8, (0.387 * AU, 0.0), (0.0, -47.4 * 1000), DARK_GREY),
        Body("Venus", 4.8685 * 10**24, 14, (0.723 * AU, 0.0), (0.0, -35.02 * 1000), WHITE),
        Body("Earth", 5.9742 * 10**24, 16, (-1 * AU, 0.0), (0.0, 29.783 * 1000), BLUE),
        Body("Mars", 6.39 * 10**23, 12, (-1.524 * AU, 0.0), (0.0, 24.077 * 1000), RED),
        Body("Jupiter", 1.898 * 10**27, 28, (-5.2 * AU, 0.0), (0.0, 13.07 * 1000), BROWN),
        Body("Saturn", 5.68 * 10**26, 24, (-9.58 * AU, 0.0), (0.0, 9.69 * 1000), YELLOW),
        Body("Uranus", 8.68 * 10**25, 20, (19.2 * AU, 0.0), (0.0, -6.81 * 1000), LIGHT_BLUE),
        Body("Neptune", 1.02 * 10**26, 20, (30.05 * AU, 0.0), (0.0, -5.43 * 1000), DARK_BLUE),
    ]


def template_two_body(central_mass: float = SUN_MASS, orbital_radius: float = AU,
                      satellite_mass: float = 5.9742e24) -> List[Body]:
    """Anchor at the origin and one body on a circular orbit around it."""
    v = circular_orbit_velocity(central_mass, orbital_radius)
    return [
        Body("Sun", central_mass, 30, (0.0, 0.0), (0.0, 0.0), YELLOW, is_anchor=True),
        Body("Planet", satellite_mass, 16, (orbital_radius, 0.0), (0.0, v), BLUE),
    ]


TEMPLATES = {
    "solar_system": template_solar_system,
    "two_body": template_two_body,
}
