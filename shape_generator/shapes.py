"""Point-set generators for parametric 2D and 3D shapes.

Every generator is a pure function returning a fresh ``list`` of
:class:`~shape_generator.vec3.Vector3`. Planar shapes lie in the horizontal XZ
plane (y = 0) and are centred on the origin. Invalid parameters (non-positive
sizes, too few points for the shape) make a generator return ``None`` instead
of raising; callers must check for it.
"""

from __future__ import annotations

import logging
from math import cos, floor, pi, sin, sqrt, tan
from typing import List, Optional

from .vec3 import Vector3

__all__ = [
    "preconditions_check",
    "circle",
    "ellipse",
    "polygon",
    "square",
    "pentagon",
    "hexagon",
    "octagon",
    "polygonal_star",
    "ellipsoid",
    "sphere",
    "circular_tore",
    "TORE_SWEEP_STEPS",
]

log = logging.getLogger(__name__)

Points = Optional[List[Vector3]]

# Number of copies of the tube cross-section swept around the Y axis.
TORE_SWEEP_STEPS = 64


def preconditions_check(points: int, minimum: float, *values: float) -> bool:
    """Return True when the parameters must be rejected.

    Rejects when ``points`` is below ``minimum`` or when any of ``values`` is
    not strictly positive.
    """

    if points < minimum:
        log.debug("Rejected: %d points, at least %s required", points, minimum)
        return True
    if not all(v > 0.0 for v in values):
        log.debug("Rejected: non-positive value in %s", values)
        return True
    return False


def circle(radius: float, points: int) -> Points:
    """Circle of ``radius`` sampled at ``points`` evenly spaced angles."""
    return ellipse(radius, radius, points)


def ellipse(r1: float, r2: float, points: int) -> Points:
    """Ellipse with semi-axis ``r1`` along X and ``r2`` along Z.

    ``points`` must be at least 4; it sets the angular resolution.
    """

    if preconditions_check(points, 4, r1, r2):
        return None

    generated: List[Vector3] = []
    for i in range(points):
        proj_x = cos(i * 2 * pi / points)
        proj_z = sin(i * 2 * pi / points)
        if r1 == r2:
            radius = r1
        else:
            radius = sqrt((r1 * r1 * r2 * r2) / (r1 * r1 * proj_z * proj_z + r2 * r2 * proj_x * proj_x))
        generated.append(Vector3(radius * proj_x, 0.0, radius * proj_z))
    return generated


def polygon(length: float, sides: int, points: int) -> Points:
    """Regular polygon with side ``length``, one vertex on the +X axis.

    Each side receives ``points // sides`` samples placed on the edge itself
    (not on the circumscribed circle). ``points`` must be at least ``sides``
    and ``sides`` at least 3.
    """

    if preconditions_check(points, sides, sides, length) or sides < 3:
        return None

    radius = length / sqrt(2 * (1 - cos(2 * pi / sides)))
    per_side = points // sides
    angle = (2 * pi / sides) / per_side
    # Slope of the first edge, running from the vertex at angle 0 to the
    # vertex at angle 2*pi/sides.
    slope = tan(0.5 * pi + pi / sides)
    inv_slope = 1.0 / slope

    beams = [radius]
    for i in range(1, per_side):
        proj_x = cos(i * angle)
        proj_z = sin(i * angle)
        beams.append(abs(radius / (proj_x - proj_z * inv_slope)))

    generated: List[Vector3] = []
    for j in range(points):
        r = beams[j % per_side]
        generated.append(Vector3(r * cos(j * angle), 0.0, r * sin(j * angle)))
    return generated


def square(length: float, points: int) -> Points:
    return polygon(length, 4, points)


def pentagon(length: float, points: int) -> Points:
    return polygon(length, 5, points)


def hexagon(length: float, points: int) -> Points:
    return polygon(length, 6, points)


def octagon(length: float, points: int) -> Points:
    return polygon(length, 8, points)


def polygonal_star(radius: float, branches: int, points: int) -> Points:
    """Star with ``branches`` tips on a circle of ``radius``.

    Each branch contributes ``points // (2 * branches)`` samples along its
    leading edge (tip to inner vertex) interleaved with as many along its
    trailing edge (inner vertex to next tip), so the result holds
    ``2 * branches * (points // (2 * branches))`` points.
    """

    if preconditions_check(points, 2 * branches, branches, radius):
        return None

    inner_radius = radius / ((tan(pi * 0.4) + tan(pi * 0.3)) * sin(pi * 0.2))
    per_edge = points // (2 * branches)

    generated: List[Vector3] = []
    for i in range(branches):
        start_angle = i * 2 * (pi / branches)
        middle_angle = start_angle + pi / branches
        end_angle = (i + 1) * 2 * (pi / branches)
        start = Vector3(radius * cos(start_angle), 0.0, radius * sin(start_angle))
        middle = Vector3(inner_radius * cos(middle_angle), 0.0, inner_radius * sin(middle_angle))
        end = Vector3(radius * cos(end_angle), 0.0, radius * sin(end_angle))
        first_base = middle.clone().subtract(start)
        second_base = end.clone().subtract(middle)
        for j in range(per_edge):
            t = j * 2 * branches / points
            generated.append(start.clone().add(first_base.clone().multiply(t)))
            generated.append(middle.clone().add(second_base.clone().multiply(t)))
    return generated


def ellipsoid(r1: float, r2: float, r3: float, granularity: int) -> Points:
    """Ellipsoid with radii ``r1`` (X), ``r2`` (Y, polar axis) and ``r3`` (Z).

    The surface is sampled on a ``repartition x repartition`` grid of
    colatitude/longitude where ``repartition = max(floor(sqrt(granularity)), 2)``.
    """

    if preconditions_check(granularity, 4, r1, r2, r3):
        return None

    repartition = int(max(floor(sqrt(granularity)), 2))

    generated: List[Vector3] = []
    for i in range(repartition):
        colatitude = -0.5 * pi + i * 2 * pi / repartition
        proj_y = cos(colatitude)
        for j in range(repartition):
            longitude = -pi + j * 2 * pi / repartition
            proj_x = sin(colatitude) * cos(longitude)
            proj_z = sin(colatitude) * sin(longitude)
            generated.append(Vector3(r1 * proj_x, r2 * proj_y, r3 * proj_z))
    return generated


def sphere(radius: float, granularity: int) -> Points:
    return ellipsoid(radius, radius, radius, granularity)


def circular_tore(r1: float, r2: float, granularity: int) -> Points:
    """Torus with tube radius ``r1``, swept around the Y axis.

    The tube centre circle has radius ``r1 + r2``, so ``r2`` is the size of
    the hole. Points are ordered ring by ring, ``granularity`` per ring,
    ``TORE_SWEEP_STEPS`` rings.
    """

    if preconditions_check(granularity, 4, r1, r2):
        return None

    ring = circle(r1, granularity)
    if ring is None:
        return None

    translate = Vector3(0.0, 0.0, r1 + r2)
    for vector in ring:
        vector.rotate_around_z(pi / 2.0).add(translate)

    generated: List[Vector3] = []
    for i in range(TORE_SWEEP_STEPS):
        angle = 2 * i * pi / TORE_SWEEP_STEPS
        generated.extend(vector.clone().rotate_around_y(angle) for vector in ring)
    return generated
