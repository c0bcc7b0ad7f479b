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

from typing import Optional

from shapely.geometry import LineString

from .base_scene_obj import BaseSceneObj, IncidentResult, RayHit
from ..constants import MIRROR_NUDGE
from ..geometry import MirrorSegment, Vector2, geometry
from ..physics import reflect


class Mirror(BaseSceneObj):
    """
    Flat one-sided mirror with the shape of a line segment.

    The mirror has length `size`, is centered at `position` and oriented by
    `rotation`. Only its front face reflects: the side its normal points to.
    At rotation 0 the mirror is horizontal and the normal is (0, 1).
    """

    type = 'mirror'
    interacts_with_rays = True

    def get_segment(self) -> MirrorSegment:
        """World-space endpoints and front-face normal."""
        return geometry.mirror_segment(self.position, self.rotation, self.size)

    def to_shapely(self) -> LineString:
        """Convert to Shapely LineString."""
        seg = self.get_segment()
        return LineString([(seg.p1.x, seg.p1.y), (seg.p2.x, seg.p2.y)])

    def check_ray_intersects(
        self,
        origin: Vector2,
        direction: Vector2,
        min_advance: float
    ) -> Optional[RayHit]:
        """
        Check if a ray hits the front face of this mirror.

        Args:
            origin: Ray start
            direction: Unit ray direction
            min_advance: Hits at or closer than this distance are ignored

        Returns:
            The RayHit, or None
        """
        seg = self.get_segment()
        if geometry.dot(direction, seg.normal) >= 0:
            return None
        inter = geometry.ray_segment_intersection(origin, direction, seg.p1, seg.p2)
        if inter is None or inter.t <= min_advance:
            return None
        return RayHit(self, inter.point, geometry.normalize(seg.normal), inter.t)

    def on_ray_incident(self, direction: Vector2, hit: RayHit, wavelength_index: int) -> IncidentResult:
        """
        Reflect the ray (angle of incidence equals angle of reflection).

        The new origin is pushed off the surface along the normal so the
        next intersection test does not find this mirror again.
        """
        new_direction = geometry.normalize(reflect(direction, hit.normal))
        new_origin = geometry.add(hit.point, geometry.scale(MIRROR_NUDGE, hit.normal))
        return IncidentResult(new_origin, new_direction, 'reflect')
