"""Mutable 3-component vector used by every shape generator.

``Vector3`` methods mutate the receiver and return it so calls can be chained::

    v = Vector3(1.0, 0.0, 0.0).rotate_around_z(math.pi / 2).multiply(3.0)

Use :meth:`Vector3.clone` before mutating a vector that is shared with other
code. Equality is component-wise within ``EPSILON`` and requires the exact same
class on both sides.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from math import cos, sin, sqrt
from typing import Iterable, Tuple

__all__ = ["Vector3", "EPSILON"]

EPSILON = 1e-6


@dataclass(slots=True, eq=False)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector3":
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)

    def set_x(self, x: float) -> "Vector3":
        self.x = x
        return self

    def set_y(self, y: float) -> "Vector3":
        self.y = y
        return self

    def set_z(self, z: float) -> "Vector3":
        self.z = z
        return self

    def add(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def subtract(self, other: "Vector3") -> "Vector3":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def multiply(self, factor: float) -> "Vector3":
        self.x *= factor
        self.y *= factor
        self.z *= factor
        return self

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        """Return ``self x other`` as a new vector; neither operand changes."""
        return type(self)(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        """Euclidean length."""
        return sqrt(self.length_squared())

    def is_normalized(self) -> bool:
        """True only when the squared length is exactly 1.0.

        No tolerance is applied, so most computed unit vectors report False
        and get normalized again by :meth:`rotate_around_axis`.
        """
        return self.length_squared() == 1.0

    def normalize(self) -> "Vector3":
        """Scale to unit length in place.

        A zero-length vector is not guarded against: the division raises
        ``ZeroDivisionError``.
        """
        length = self.length()
        self.x /= length
        self.y /= length
        self.z /= length
        return self

    def rotate_around_x(self, angle: float) -> "Vector3":
        c = cos(angle)
        s = sin(angle)
        y = c * self.y - s * self.z
        z = s * self.y + c * self.z
        return self.set_y(y).set_z(z)

    def rotate_around_y(self, angle: float) -> "Vector3":
        c = cos(angle)
        s = sin(angle)
        x = c * self.x + s * self.z
        z = -s * self.x + c * self.z
        return self.set_x(x).set_z(z)

    def rotate_around_z(self, angle: float) -> "Vector3":
        c = cos(angle)
        s = sin(angle)
        x = c * self.x - s * self.y
        y = s * self.x + c * self.y
        return self.set_x(x).set_y(y)

    def rotate_around_axis(self, axis: "Vector3 | None", angle: float) -> "Vector3":
        """Rotate by ``angle`` radians around ``axis`` (normalized if needed).

        ``axis`` itself is never modified.
        """
        if axis is None:
            raise ValueError("The provided axis vector was None")
        unit = axis if axis.is_normalized() else axis.clone().normalize()
        return self.rotate_around_non_unit_axis(unit, angle)

    def rotate_around_non_unit_axis(self, axis: "Vector3 | None", angle: float) -> "Vector3":
        # Rodrigues' rotation formula, using the axis exactly as given.
        if axis is None:
            raise ValueError("The provided axis vector was None")
        c = cos(angle)
        s = sin(angle)
        k = self.dot(axis) * (1.0 - c)
        turn = axis.cross(self)
        x_prime = axis.x * k + self.x * c + turn.x * s
        y_prime = axis.y * k + self.y * c + turn.y * s
        z_prime = axis.z * k + self.z * c + turn.z * s
        return self.set_x(x_prime).set_y(y_prime).set_z(z_prime)

    def clone(self) -> "Vector3":
        return replace(self)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return (
            abs(self.x - other.x) < EPSILON
            and abs(self.y - other.y) < EPSILON
            and abs(self.z - other.z) < EPSILON
        )

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.z}"
