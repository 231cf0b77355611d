#!/usr/bin/env python3
"""
Scene template JSON loading.

Schema
======
{
  "name": "Human-friendly preset name",
  "description": "Optional description",
  "bodies": [
    {
      "name": "Sun",
      "mass": 1.98892e30,
      "radius": 30,                 # display radius in pixels
      "position": [0.0, 0.0],       # meters
      "velocity": [0.0, 0.0],       # meters/second
      "color": [255, 255, 0],
      "anchor": true                # optional, default false
    }
  ]
}

Positions and velocities may also be given in AU and km/s with "position_au" and
"velocity_kms". Bodies with a missing field, a non-finite number, a non-positive mass
or a non-boolean "anchor" are skipped with a warning. "bodies" itself must be a list. At most one body may be the anchor; it is moved to the front of the list.
"""
import json
import logging
import math
import os
from typing import List, Optional, Tuple

from .constants import AU
from .data_models import Body
from .errors import TemplateError

logger = logging.getLogger(__name__)


def _read_json(path: str) -> dict:
  try:
    with open(path, "r", encoding="utf-8") as f:
      data = json.load(f)
  except (OSError, ValueError) as e:
    raise TemplateError(f"Cannot read template {path}: {e}") from e
  if not isinstance(data, dict):
    raise TemplateError(f"Template {path} must contain a JSON object")
  return data


def _coerce_color(c) -> Tuple[int, int, int]:
  try:
    r, g, b = int(c[0]), int(c[1]), int(c[2])
    r = max(0, min(255, r)); g = max(0, min(255, g)); b = max(0, min(255, b))
    return (r, g, b)
  except (TypeError, ValueError, IndexError):
    return (200, 200, 255)


def _pair(b: dict, key: str, key_alt: str, factor: float) -> Tuple[float, float]:
  if key in b:
    v = b[key]
    return (float(v[0]), float(v[1]))
  if key_alt in b:
    v = b[key_alt]
    return (float(v[0]) * factor, float(v[1]) * factor)
  return (0.0, 0.0)


def _flag(b: dict, key: str) -> bool:
  v = b.get(key, False)
  if not isinstance(v, bool):
    raise ValueError(f"{key} must be true or false, got {v!r}")
  return v


def body_from_dict(b: dict) -> Optional[Body]:
  """Build a Body from one template entry, or None if the entry is unusable."""
  try:
    mass = float(b["mass"])
    body = Body(
      name=str(b.get("name", "Body")),
      mass=mass,
      radius=float(b.get("radius", 10)),
      position=_pair(b, "position", "position_au", AU),
      velocity=_pair(b, "velocity", "velocity_kms", 1000.0),
      color=_coerce_color(b.get("color", [200, 200, 255])),
      is_anchor=_flag(b, "anchor"),
    )
  except (KeyError, TypeError, ValueError, IndexError) as e:
    logger.warning("Skipping malformed body %r: %s", b.get("name") if isinstance(b, dict) else b, e)
    return None
  if not all(math.isfinite(v) for v in (mass, body.radius) + body.position + body.velocity):
    logger.warning("Skipping body %r: mass, radius, position and velocity must be finite", body.name)
    return None
  if not mass > 0:
    logger.warning("Skipping body %r: mass must be positive, got %r", body.name, mass)
    return None
  return body


def load_template(path: str) -> Tuple[List[Body], str]:
  """
  Load a template JSON file.
  Returns (bodies, display_name) with the anchor, if any, first.
  """
  data = _read_json(path)
  display_name = data.get("name") or os.path.splitext(os.path.basename(path))[0]
  entries = data.get("bodies", [])
  if not isinstance(entries, list):
    raise TemplateError(f"Template {path}: \"bodies\" must be a list, got {type(entries).__name__}")
  bodies: List[Body] = []
  for b in entries:
    body = body_from_dict(b)
    if body is not None:
      bodies.append(body)

  if not bodies:
    raise TemplateError(f"Template {path} has no usable bodies")
  anchors = [b for b in bodies if b.is_anchor]
  if len(anchors) > 1:
    raise TemplateError(f"Template {path} marks {len(anchors)} bodies as anchor; at most one is allowed")
  if anchors:
    bodies.remove(anchors[0])
    bodies.insert(0, anchors[0])

  logger.info("Loaded template %r with %d bodies", display_name, len(bodies))
  return bodies, display_name
