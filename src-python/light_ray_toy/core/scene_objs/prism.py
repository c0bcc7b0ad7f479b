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

from shapely.geometry import Polygon

from .base_scene_obj import BaseSceneObj, IncidentResult, RayHit
from ..constants import PRISM_NUDGE
from ..geometry import Vector2, geometry
from ..palette import refractive_index_for
from ..physics import reflect, refract


class Prism(BaseSceneObj):
    """
    Dispersive glass disc.

    A prism is modelled as a disc of diameter `size` centered at `position`.
    A ray entering it is refracted with the refractive index of its own
    wavelength, so different colors leave at different angles. When no
    refracted ray exists the ray is reflected instead.

    Rotation does not change the shape; it is stored for the scene editor.
    """

    type = 'prism'
    interacts_with_rays = True

    def to_shapely(self) -> Polygon:
        """Convert to a Shapely polygon (buffered point, approximation of the disc)."""
        return self.position.to_shapely().buffer(self.radius)

    def check_ray_intersects(
        self,
        origin: Vector2,
        direction: Vector2,
        min_advance: float
    ) -> Optional[RayHit]:
        """
        Check if a ray hits the disc from outside.

        Args:
            origin: Ray start
            direction: Unit ray direction
            min_advance: Hits at or closer than this distance are ignored

        Returns:
            The RayHit with the outward radial normal, or None
        """
        inter = geometry.ray_circle_intersection(
            origin, direction, self.position, self.radius, min_advance
        )
        if inter is None:
            return None
        return RayHit(self, inter.point, inter.normal, inter.t)

    def on_ray_incident(self, direction: Vector2, hit: RayHit, wavelength_index: int) -> IncidentResult:
        """
        Refract the ray into the glass, or reflect it if refraction fails.

        The relative index is eta = 1 / n(wavelength) (air to glass). The
        new origin is pushed to the side of the surface the ray continues
        into: inside the glass after refraction, back outside after a
        reflection.
        """
        eta = 1.0 / refractive_index_for(wavelength_index)
        refracted = refract(direction, hit.normal, eta)
        if refracted is not None:
            new_direction = geometry.normalize(refracted)
            interaction_type = 'refract'
        else:
            new_direction = geometry.normalize(reflect(direction, hit.normal))
            interaction_type = 'tir'

        side = 1.0 if geometry.dot(new_direction, hit.normal) >= 0 else -1.0
        new_origin = geometry.add(hit.point, geometry.scale(side * PRISM_NUDGE, hit.normal))
        return IncidentResult(new_origin, new_direction, interaction_type)
