"""3D Vector Mathematics.

The Vector class is an immutable NamedTuple used for trajectory positions,
velocities, accelerations and wind.  Axes follow the engine frame:

    x: downrange (positive toward the target)
    y: vertical (positive up)
    z: lateral (positive to the shooter's right)

Typical Usage:
    ```python
    from py_ballistics_engine import Vector

    position = Vector(100.0, 0.05, 0.0)
    velocity = Vector(800.0, 0.0, 0.0)  # m/s
    new_position = position + velocity * 0.0005
    speed = velocity.magnitude()
    ```
"""
from __future__ import annotations

import math
from typing import Union, NamedTuple

__all__ = ('Vector', 'ZERO_VECTOR')


class Vector(NamedTuple):
    """Immutable 3D vector.

    Attributes:
        x: Downrange component.
        y: Vertical component.
        z: Lateral component.
    """

    x: float
    y: float
    z: float

    def magnitude(self) -> float:
        """Euclidean norm of the vector.

        Note:
            Uses math.hypot() for numerical stability with extreme values.
        """
        return math.hypot(self.x, self.y, self.z)

    def mul_by_const(self, a: float) -> Vector:
        """Multiply vector by a scalar constant."""
        return Vector(self.x * a, self.y * a, self.z * a)

    def mul_by_vector(self, b: Vector) -> float:
        """Dot product of two vectors."""
        return self.x * b.x + self.y * b.y + self.z * b.z

    def add(self, b: Vector) -> Vector:
        """Add two vectors component-wise."""
        return Vector(self.x + b.x, self.y + b.y, self.z + b.z)

    def subtract(self, b: Vector) -> Vector:
        """Subtract `b` from this vector component-wise."""
        return Vector(self.x - b.x, self.y - b.y, self.z - b.z)

    def is_finite(self) -> bool:
        """True when every component is a finite float."""
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def __mul__(self, other: Union[int, float, Vector]) -> Union[float, Vector]:  # type: ignore[override]
        """Scalar multiplication, or dot product when `other` is a Vector."""
        if isinstance(other, (int, float)):
            return self.mul_by_const(other)
        if isinstance(other, Vector):
            return self.mul_by_vector(other)
        raise TypeError(other)

    def __add__(self, other: Vector) -> Vector:  # type: ignore[override]
        return self.add(other)

    def __radd__(self, other: Vector) -> Vector:  # type: ignore[override]
        return self.add(other)

    def __iadd__(self, other: Vector) -> Vector:  # type: ignore[override]
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:  # type: ignore[override]
        return self.subtract(other)

    def __isub__(self, other: Vector) -> Vector:  # type: ignore[override]
        return self.subtract(other)

    def __rmul__(self, other: Union[int, float, Vector]) -> Union[float, Vector]:  # type: ignore[override]
        return self.__mul__(other)

    def __imul__(self, other: Union[int, float, Vector]) -> Union[float, Vector]:  # type: ignore[override]
        return self.__mul__(other)


ZERO_VECTOR: Vector = Vector(0.0, 0.0, 0.0)
