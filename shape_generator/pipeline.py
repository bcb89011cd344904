"""Dispatch a :class:`ShapeParameters` request to the matching generator."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from . import shapes
from .parameters import ShapeParameters
from .vec3 import Vector3

__all__ = ["GENERATORS", "available_shapes", "generate"]

log = logging.getLogger(__name__)

Generator = Callable[[ShapeParameters], Optional[List[Vector3]]]

GENERATORS: Dict[str, Generator] = {
    "circle": lambda p: shapes.circle(p.radius, p.points),
    "ellipse": lambda p: shapes.ellipse(p.radius, p.radius_2, p.points),
    "polygon": lambda p: shapes.polygon(p.length, p.sides, p.points),
    "square": lambda p: shapes.square(p.length, p.points),
    "pentagon": lambda p: shapes.pentagon(p.length, p.points),
    "hexagon": lambda p: shapes.hexagon(p.length, p.points),
    "octagon": lambda p: shapes.octagon(p.length, p.points),
    "star": lambda p: shapes.polygonal_star(p.radius, p.branches, p.points),
    "ellipsoid": lambda p: shapes.ellipsoid(p.radius, p.radius_2, p.radius_3, p.points),
    "sphere": lambda p: shapes.sphere(p.radius, p.points),
    "torus": lambda p: shapes.circular_tore(p.radius, p.radius_2, p.points),
}


def available_shapes() -> List[str]:
    return sorted(GENERATORS)


def generate(params: ShapeParameters) -> Optional[List[Vector3]]:
    """Validate ``params`` and run the generator it names.

    Returns ``None`` when the generator rejects the parameters.
    """

    params.validate()
    generator = GENERATORS[params.shape]
    points = generator(params)
    if points is None:
        log.warning("Shape '%s' rejected parameters: %s", params.shape, params.to_dict())
        return None
    log.info("Generated %s with %d points", params.shape, len(points))
    return points
