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

from typing import List, Optional, TYPE_CHECKING

from .palette import PALETTE
from .segment import Segment
from .tracer import RayTracer, TraceResult, TraceTermination

if TYPE_CHECKING:
    from .scene import Scene


class Simulator:
    """
    Scene-level driver of the ray tracer.

    For every light and every palette color one trace is run; the segments
    are concatenated in that order (lights outer, colors inner, each trace
    in travel order). The whole scene is retraced on every run; nothing is
    cached between runs, so a run always reflects the current obstacle poses.

    Attributes:
        scene (Scene): The scene to simulate
        verbose (int): Verbosity level (default: 0)
            0 = silent (no debug output)
            1 = verbose (one line per trace)
            2 = very verbose/debug (one line per bounce)
        trace_results (list): TraceResult of every trace in the last run
        ray_segments (list): All segments of the last run
        solved (bool): Whether the last run reached a target
    """

    def __init__(self, scene: 'Scene', verbose: int = 0) -> None:
        self.scene: 'Scene' = scene
        self.verbose: int = verbose
        self.trace_results: List[TraceResult] = []
        self.ray_segments: List[Segment] = []
        self.solved: bool = False

    def make_tracer(self) -> RayTracer:
        """Build a tracer configured from the scene settings."""
        return RayTracer(
            max_bounces=self.scene.max_bounces,
            max_length=self.scene.max_length,
            min_advance=self.scene.min_advance,
            verbose=self.verbose
        )

    def run(self) -> List[Segment]:
        """
        Trace every (light, color) pair of the scene.

        Also updates `solved` and sets `scene.warning` when some traces
        were cut off by the bounce limit.

        Returns:
            list: All emitted segments
        """
        self.trace_results = []
        self.ray_segments = []
        self.scene.warning = None

        tracer = self.make_tracer()
        objects = list(self.scene.objs)

        if self.verbose >= 1:
            print(f"### SIMULATOR tracing {self.scene.get_display_name()}: "
                  f"{len(self.scene.lights)} lights x {len(PALETTE)} colors")

        for light in self.scene.lights:
            origin = light.get_emission_origin()
            direction = light.get_emission_direction()
            for wavelength_index in range(len(PALETTE)):
                result = tracer.trace(origin, direction, wavelength_index, objects, source_id=light.id)
                self.trace_results.append(result)
                self.ray_segments.extend(result.segments)

        capped = sum(1 for r in self.trace_results if r.termination is TraceTermination.BOUNCE_LIMIT)
        if capped:
            self.scene.warning = (
                f"{capped} trace(s) stopped at the bounce limit ({self.scene.max_bounces})"
            )

        self.solved = self.is_solved(self.ray_segments)

        if self.verbose >= 1:
            print(f"### SIMULATOR done: {len(self.ray_segments)} segments, solved={self.solved}")

        return self.ray_segments

    def is_solved(self, segments: Optional[List[Segment]] = None) -> bool:
        """
        Check whether any segment ends on a target.

        A segment end counts when it is strictly closer than
        `target.size / 2 + scene.target_tolerance` to a target center.

        Args:
            segments: Segments to check (default: those of the last run)

        Returns:
            True if some segment end lies on some target
        """
        if segments is None:
            segments = self.ray_segments
        tolerance = self.scene.target_tolerance
        return any(
            target.contains_point(seg.end, tolerance)
            for target in self.scene.targets
            for seg in segments
        )


def trace_scene(scene: 'Scene', verbose: int = 0) -> List[Segment]:
    """Run a simulation of the scene and return its segments."""
    return Simulator(scene, verbose=verbose).run()
