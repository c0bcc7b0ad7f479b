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

import enum
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .constants import MAX_BOUNCES, MAX_LENGTH, MIN_ADVANCE
from .geometry import Vector2, geometry
from .palette import color_for
from .scene_objs import BaseSceneObj, RayHit
from .segment import Segment


class TraceTermination(enum.Enum):
    """Why a trace stopped emitting segments."""
    NO_HIT = 'no_hit'
    BOUNCE_LIMIT = 'bounce_limit'
    LENGTH_LIMIT = 'length_limit'


@dataclass
class TraceResult:
    """
    Output of a single (light, wavelength) trace.

    Attributes:
        segments: The emitted segments, in travel order
        termination: Why emission stopped
        bounces: Number of surfaces the ray hit
        length: Distance accumulated over those hits
        wavelength_index: Palette index of the traced ray
        source_id: Id of the emitting light, if known
    """
    segments: List[Segment] = field(default_factory=list)
    termination: TraceTermination = TraceTermination.NO_HIT
    bounces: int = 0
    length: float = 0.0
    wavelength_index: int = 0
    source_id: Optional[str] = None

    @property
    def escaped(self) -> bool:
        """True if the ray left the scene instead of running out of budget."""
        return self.termination is TraceTermination.NO_HIT


class RayTracer:
    """
    Bounded bounce loop for a single ray.

    Each iteration finds the nearest front-face hit among the obstacles that
    interact with rays, emits the segment up to it and lets the obstacle
    decide how the ray continues. A ray has exactly one continuation per
    bounce; nothing is split. When nothing is hit, a final segment covering
    the remaining length budget is emitted.

    Attributes:
        max_bounces (int): Maximum number of loop iterations
        max_length (float): Total travel budget
        min_advance (float): Intersections at or closer than this are ignored
        verbose (int): Verbosity level
            0 = silent
            1 = one line per trace
            2 = one line per bounce
    """

    def __init__(
        self,
        max_bounces: int = MAX_BOUNCES,
        max_length: float = MAX_LENGTH,
        min_advance: float = MIN_ADVANCE,
        verbose: int = 0
    ) -> None:
        self.max_bounces: int = max_bounces
        self.max_length: float = max_length
        self.min_advance: float = min_advance
        self.verbose: int = verbose

    def find_nearest_hit(
        self,
        origin: Vector2,
        direction: Vector2,
        objects: Iterable[BaseSceneObj],
        source_id: Optional[str] = None
    ) -> Optional[RayHit]:
        """
        Find the nearest front-face hit ahead of the ray.

        Only obstacles that interact with rays (mirrors and prisms) are
        tested, and the emitting obstacle is skipped.

        Args:
            origin: Ray start
            direction: Unit ray direction
            objects: Obstacles of the scene
            source_id: Id of the emitting light, excluded from the test

        Returns:
            The nearest RayHit, or None
        """
        nearest: Optional[RayHit] = None
        for obj in objects:
            if not obj.interacts_with_rays or obj.id == source_id:
                continue
            hit = obj.check_ray_intersects(origin, direction, self.min_advance)
            if hit is not None and (nearest is None or hit.t < nearest.t):
                nearest = hit
        return nearest

    def trace(
        self,
        origin: Vector2,
        direction: Vector2,
        wavelength_index: int,
        objects: Iterable[BaseSceneObj],
        source_id: Optional[str] = None
    ) -> TraceResult:
        """
        Trace one ray until it escapes or runs out of bounces or length.

        Args:
            origin: Emission point
            direction: Emission direction (normalized here)
            wavelength_index: Palette index; selects the color and the prism index
            objects: Obstacles of the scene (read, never modified)
            source_id: Id of the emitting light

        Returns:
            TraceResult with the emitted segments

        Raises:
            IndexError: If the wavelength index is outside the palette.
        """
        color = color_for(wavelength_index)
        objects = list(objects)
        result = TraceResult(wavelength_index=wavelength_index, source_id=source_id)

        direction = geometry.normalize(direction)
        interaction_type = 'source'
        total_length = 0.0

        for bounce in range(self.max_bounces):
            hit = self.find_nearest_hit(origin, direction, objects, source_id)

            if hit is None:
                remaining = self.max_length - total_length
                if remaining > 0:
                    end = geometry.add(origin, geometry.scale(remaining, direction))
                    result.segments.append(
                        Segment(origin, end, color, wavelength_index, source_id, interaction_type)
                    )
                result.termination = TraceTermination.NO_HIT
                break

            result.segments.append(
                Segment(origin, hit.point, color, wavelength_index, source_id, interaction_type)
            )
            incident = hit.obj.on_ray_incident(direction, hit, wavelength_index)
            total_length += hit.t
            result.bounces += 1

            if self.verbose >= 2:
                print(f"    bounce {bounce}: {hit.obj.type} '{hit.obj.id}' at "
                      f"({hit.point.x:.3f}, {hit.point.y:.3f}), t={hit.t:.3f}, "
                      f"traveled={total_length:.3f}")

            origin, direction, interaction_type = incident

            if total_length > self.max_length:
                result.termination = TraceTermination.LENGTH_LIMIT
                break
        else:
            result.termination = TraceTermination.BOUNCE_LIMIT

        result.length = total_length

        if self.verbose >= 1:
            print(f"  trace source={source_id} color={color}: {len(result.segments)} segments, "
                  f"{result.bounces} bounces, stopped by {result.termination.value}")

        return result
