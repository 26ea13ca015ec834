"""2D vector for stage positions and headings.

Coordinate System Convention:
    x-axis: horizontal position (positive = right)
    y-axis: vertical position, same handedness as rotation

    Rotation is measured in degrees from the positive x-axis, increasing
    clockwise on screen (a sprite turned 90 degrees moves along +y).
    Origin (0, 0) is the centre of the stage.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vec2:
    """2D vector for positions and directions.

    Examples:
        >>> Vec2(3, 4).length()
        5.0
        >>> Vec2(0, 0).distance_to(Vec2(6, 8))
        10.0
        >>> Vec2.from_heading(0, 10)
        Vec2(x=10.0, y=0.0)
    """
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        """Add two vectors."""
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        """Subtract two vectors."""
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        """Multiply vector by scalar."""
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __eq__(self, other: object) -> bool:
        """Check equality with floating point tolerance."""
        if not isinstance(other, Vec2):
            return NotImplemented
        return math.isclose(self.x, other.x, abs_tol=1e-9) and \
               math.isclose(self.y, other.y, abs_tol=1e-9)

    def __hash__(self) -> int:
        """Hash based on rounded coordinates."""
        return hash((round(self.x, 6), round(self.y, 6)))

    def length(self) -> float:
        """Get the magnitude (length) of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance_to(self, other: Vec2) -> float:
        """Get Euclidean distance to another vector."""
        return (self - other).length()

    @staticmethod
    def from_heading(degrees: float, length: float = 1.0) -> Vec2:
        """Build a vector pointing along a rotation given in degrees.

        Degrees are not normalised; 450 points the same way as 90.
        """
        radians = degrees * math.pi / 180
        return Vec2(length * math.cos(radians), length * math.sin(radians))
