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

from shapely.geometry import Polygon

from .base_scene_obj import BaseSceneObj
from ..constants import DEFAULT_POSITION, TARGET_TOLERANCE
from ..geometry import Vector2


class Target(BaseSceneObj):
    """
    Circular detector used for the solved check.

    Targets never block or redirect rays. A scene counts as solved when a
    traced segment ends within `size / 2 + tolerance` of a target's center.
    """

    type = 'target'

    serializable_defaults = {
        'position': {'x': DEFAULT_POSITION[0], 'y': DEFAULT_POSITION[1]},
        'rotation': 0.0,
        'size': 30.0,
    }

    def capture_radius(self, tolerance: float = TARGET_TOLERANCE) -> float:
        return self.radius + tolerance

    def contains_point(self, point: Vector2, tolerance: float = TARGET_TOLERANCE) -> bool:
        """
        Check whether a point is strictly inside the capture radius.

        Args:
            point: The point to test
            tolerance: Slack added to the target radius

        Returns:
            True if the point is closer than radius + tolerance to the center
        """
        return self.position.to_shapely().distance(point.to_shapely()) < self.capture_radius(tolerance)

    def to_shapely(self) -> Polygon:
        """Convert to a Shapely polygon (buffered point, approximation of the disc)."""
        return self.position.to_shapely().buffer(self.radius)
