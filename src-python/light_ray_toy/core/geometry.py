"""
Copyright 2026 light-ray-toy authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import math
from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional, Sequence, Union

from shapely.geometry import Point as ShapelyPoint

from .constants import MIN_ADVANCE, PARALLEL_EPSILON


@dataclass(frozen=True)
class Vector2:
    """
    An immutable 2D vector, also used for points.

    All operations in `Geometry` return new instances.
    Can be converted to/from Shapely Point objects.
    """
    x: float
    y: float

    def to_shapely(self) -> ShapelyPoint:
        """Convert to Shapely Point."""
        return ShapelyPoint(self.x, self.y)

    @classmethod
    def from_shapely(cls, sp: ShapelyPoint) -> 'Vector2':
        """Create Vector2 from Shapely Point."""
        return cls(sp.x, sp.y)

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary representation."""
        return {'x': self.x, 'y': self.y}

    @classmethod
    def coerce(cls, value: Union['Vector2', Dict[str, float], Sequence[float]]) -> 'Vector2':
        """
        Build a Vector2 from a Vector2, an {'x', 'y'} dict or an (x, y) pair.

        Raises:
            ValueError: If the value has none of these shapes.
        """
        if isinstance(value, Vector2):
            return value
        if isinstance(value, dict):
            try:
                return cls(float(value['x']), float(value['y']))
            except KeyError as e:
                raise ValueError(f"Vector dict is missing key {e}: {value!r}") from e
        try:
            x, y = value
        except (TypeError, ValueError) as e:
            raise ValueError(f"Cannot interpret {value!r} as a 2D vector") from e
        return cls(float(x), float(y))

    def __repr__(self) -> str:
        return f"Vector2(x={self.x}, y={self.y})"


ZERO = Vector2(0.0, 0.0)


class MirrorSegment(NamedTuple):
    """World-space endpoints and front-face normal of a mirror."""
    p1: Vector2
    p2: Vector2
    normal: Vector2


class SegmentIntersection(NamedTuple):
    """
    Result of a ray/segment test.

    `t` is the ray parameter (distance along a unit direction),
    `u` is the position along the segment (0 at p1, 1 at p2).
    """
    point: Vector2
    t: float
    u: float


class CircleIntersection(NamedTuple):
    """Result of a ray/circle test: hit point, ray parameter and outward normal."""
    point: Vector2
    t: float
    normal: Vector2


class Geometry:
    """
    The geometry module: vector algebra and the intersection tests used by
    the tracer. Every function is total; "no intersection" is reported as
    None rather than raised.
    """

    @staticmethod
    def vec(x: float, y: float) -> Vector2:
        """Create a vector."""
        return Vector2(x, y)

    @staticmethod
    def add(a: Vector2, b: Vector2) -> Vector2:
        return Vector2(a.x + b.x, a.y + b.y)

    @staticmethod
    def sub(a: Vector2, b: Vector2) -> Vector2:
        return Vector2(a.x - b.x, a.y - b.y)

    @staticmethod
    def scale(s: float, v: Vector2) -> Vector2:
        return Vector2(s * v.x, s * v.y)

    @staticmethod
    def dot(a: Vector2, b: Vector2) -> float:
        """
        Calculate the dot product of two vectors.

        Args:
            a: First vector
            b: Second vector

        Returns:
            Dot product
        """
        return a.x * b.x + a.y * b.y

    @staticmethod
    def cross(a: Vector2, b: Vector2) -> float:
        """Z-component of the 2D cross product."""
        return a.x * b.y - a.y * b.x

    @staticmethod
    def length(v: Vector2) -> float:
        return math.sqrt(v.x * v.x + v.y * v.y)

    @staticmethod
    def distance(p1: Vector2, p2: Vector2) -> float:
        """Distance between two points."""
        return Geometry.length(Geometry.sub(p1, p2))

    @staticmethod
    def normalize(v: Vector2) -> Vector2:
        """
        Normalize a vector to unit length.

        The zero vector has no direction and is returned unchanged
        instead of dividing by zero.

        Args:
            v: Vector to normalize

        Returns:
            Unit vector, or the zero vector
        """
        len_val = Geometry.length(v)
        if len_val > 0:
            return Vector2(v.x / len_val, v.y / len_val)
        return ZERO

    @staticmethod
    def rotate(v: Vector2, angle: float) -> Vector2:
        """
        Rotate a vector by the given angle in radians.

        Counter-clockwise in a y-up frame; in screen coordinates (y down)
        a positive angle turns clockwise on screen.

        Args:
            v: Vector to rotate
            angle: Rotation angle in radians

        Returns:
            Rotated vector
        """
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2(v.x * cos_a - v.y * sin_a, v.x * sin_a + v.y * cos_a)

    @staticmethod
    def mirror_segment(position: Vector2, rotation: float, size: float) -> MirrorSegment:
        """
        Compute the world-space segment of a mirror.

        The mirror is a segment of length `size` lying along the local
        x-axis, centered at the origin, with normal (0, 1). Both endpoints
        and the normal are rotated by `rotation`; only the endpoints are
        translated to `position`.

        Args:
            position: Center of the mirror
            rotation: Orientation in radians
            size: Length of the mirror

        Returns:
            MirrorSegment with endpoints p1, p2 and the front-face normal
        """
        half = size / 2
        p1 = Geometry.add(position, Geometry.rotate(Vector2(-half, 0.0), rotation))
        p2 = Geometry.add(position, Geometry.rotate(Vector2(half, 0.0), rotation))
        normal = Geometry.rotate(Vector2(0.0, 1.0), rotation)
        return MirrorSegment(p1, p2, normal)

    @staticmethod
    def ray_segment_intersection(
        origin: Vector2,
        direction: Vector2,
        p1: Vector2,
        p2: Vector2
    ) -> Optional[SegmentIntersection]:
        """
        Intersect the ray origin + t*direction (t >= 0) with the segment
        p1 + u*(p2 - p1) (0 <= u <= 1).

        Args:
            origin: Ray start
            direction: Ray direction (t is measured in its units)
            p1: First segment endpoint
            p2: Second segment endpoint

        Returns:
            SegmentIntersection, or None if the ray is parallel to the
            segment or the crossing lies behind the ray or off the segment.
        """
        edge = Geometry.sub(p2, p1)
        denom = Geometry.cross(direction, edge)
        if abs(denom) < PARALLEL_EPSILON:
            return None

        offset = Geometry.sub(p1, origin)
        t = Geometry.cross(offset, edge) / denom
        u = Geometry.cross(offset, direction) / denom

        if t >= 0 and 0 <= u <= 1:
            return SegmentIntersection(Geometry.add(origin, Geometry.scale(t, direction)), t, u)
        return None

    @staticmethod
    def ray_circle_intersection(
        origin: Vector2,
        direction: Vector2,
        center: Vector2,
        radius: float,
        min_advance: float = MIN_ADVANCE
    ) -> Optional[CircleIntersection]:
        """
        Intersect a ray with a circle, accepting only front-face hits.

        Solves |origin + t*direction - center|^2 = radius^2 with a unit
        direction. The nearer root is preferred; if it is not beyond
        `min_advance`, the farther root is tried instead. A hit only counts
        when the ray travels against the outward radial normal there.

        Args:
            origin: Ray start
            direction: Unit ray direction
            center: Circle center
            radius: Circle radius
            min_advance: Roots at or below this value are ignored

        Returns:
            CircleIntersection, or None
        """
        oc = Geometry.sub(origin, center)
        b = 2 * Geometry.dot(oc, direction)
        c = Geometry.dot(oc, oc) - radius * radius
        disc = b * b - 4 * c
        if disc < 0:
            return None

        sqrt_disc = math.sqrt(disc)
        t = (-b - sqrt_disc) / 2
        if t <= min_advance:
            t = (-b + sqrt_disc) / 2
        if t <= min_advance:
            return None

        point = Geometry.add(origin, Geometry.scale(t, direction))
        normal = Geometry.normalize(Geometry.sub(point, center))
        if Geometry.dot(direction, normal) >= 0:
            return None
        return CircleIntersection(point, t, normal)


# Create a singleton instance for convenience
geometry = Geometry()
