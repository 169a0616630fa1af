"""
Minimal 3-component vector for world-frame quantities.

World frame convention: x and z span the horizontal plane, y is up.
Heading is measured from +x towards +z.
"""

import numpy as np

from archimedes import struct


@struct(frozen=True)
class Vector3:
    """
    Immutable 3D vector (value semantics).

    All operations return new instances.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> 'Vector3':
        """Scale by a scalar."""
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> 'Vector3':
        return self * (1.0 / scalar)

    def __neg__(self) -> 'Vector3':
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: 'Vector3') -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Euclidean magnitude."""
        return float(np.sqrt(self.x**2 + self.y**2 + self.z**2))

    def normalized(self) -> 'Vector3':
        """
        Unit vector in the same direction.

        The zero vector has no direction and is returned unchanged.
        """
        length = self.length()
        if length > 0.0:
            return Vector3(self.x / length, self.y / length, self.z / length)
        return self

    def to_array(self) -> np.ndarray:
        """Convert to numpy array, shape (3,)."""
        return np.array([self.x, self.y, self.z])

    @classmethod
    def from_array(cls, v) -> 'Vector3':
        """Build from any length-3 sequence."""
        x, y, z = v
        return cls(float(x), float(y), float(z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"Vector3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"
