#!/usr/bin/env python3
"""
Camera utilities for 2D world-to-screen transforms.

The view is fixed: a linear scale (pixels per meter) and the screen center as offset,
so the world origin (where the Sun sits) is always drawn in the middle of the window.
"""
from typing import Optional, Tuple

from .constants import SAFE_COORD_LIMIT, SCALE, VIEW_HEIGHT, VIEW_WIDTH
from .data_models import Body
from .vector_utils import vec_len, vec_sub


class Camera2D:
    """
    Maps world coordinates (meters) to screen pixels and back.
    """

    def __init__(self, scale: float = SCALE, viewport_size: Tuple[int, int] = (VIEW_WIDTH, VIEW_HEIGHT)):
        self.scale = scale
        self.viewport_size = (viewport_size[0], viewport_size[1])

    def set_viewport_size(self, w: int, h: int) -> None:
        self.viewport_size = (w, h)

    def project(self, pos: Tuple[float, float]) -> Tuple[float, float]:
        px = pos[0] * self.scale + self.viewport_size[0] / 2
        py = pos[1] * self.scale + self.viewport_size[1] / 2
        return (px, py)

    def world_to_screen(self, pos: Tuple[float, float]) -> Tuple[int, int]:
        px, py = self.project(pos)
        return (int(px), int(py))

    def screen_to_world(self, screen: Tuple[float, float]) -> Tuple[float, float]:
        wx = (screen[0] - self.viewport_size[0] / 2) / self.scale
        wy = (screen[1] - self.viewport_size[1] / 2) / self.scale
        return (wx, wy)

    def hit_test(self, body: Body, screen: Tuple[float, float]) -> bool:
        """True if a screen point lies strictly inside the body's drawn circle."""
        return vec_len(vec_sub(screen, self.project(body.position))) < body.radius


def safe_point(pt) -> Optional[Tuple[int, int]]:
    """Integer pixel for drawing, or None if the point is not finite or far off screen."""
    try:
        x, y = int(pt[0]), int(pt[1])
    except (TypeError, ValueError, OverflowError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None
