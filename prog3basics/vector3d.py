"""Vectors in three dimensions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector3D:
    """A vector with x, y and z components, zero by default."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)


def dot_product(first: Vector3D, second: Vector3D) -> float:
    """Scalar product of two vectors."""
    return first.x * second.x + first.y * second.y + first.z * second.z