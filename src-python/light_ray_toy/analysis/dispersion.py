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

"""
Dispersion and termination statistics of a simulation run.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np
from shapely.geometry import LineString

from ..core.palette import PALETTE
from ..core.scene_objs import BaseSceneObj
from ..core.segment import Segment
from ..core.tracer import TraceResult


@dataclass
class DispersionSummary:
    """
    How the colors of one light leave the scene.

    Attributes:
        source_id: Id of the light
        wavelength_indices: Palette indices, in palette order
        exit_angles_deg: Angle of the last segment of each trace, degrees,
            measured with atan2(dy, dx) in scene coordinates
        refracted: Whether each trace passed through a prism
    """
    source_id: Optional[str]
    wavelength_indices: np.ndarray
    exit_angles_deg: np.ndarray
    refracted: np.ndarray

    @property
    def spread_deg(self) -> float:
        """Angular width of the fan of exit directions."""
        if self.exit_angles_deg.size == 0:
            return 0.0
        return float(np.ptp(self.exit_angles_deg))

    @property
    def is_dispersed(self) -> bool:
        return self.spread_deg > 1e-9

    def colors(self) -> List[str]:
        return [PALETTE[i].color for i in self.wavelength_indices]


def exit_angle_deg(result: TraceResult) -> float:
    """Direction of the last segment of a trace in degrees (nan if empty)."""
    if not result.segments:
        return float('nan')
    d = result.segments[-1].direction
    return float(np.degrees(np.arctan2(d.y, d.x)))


def analyze_dispersion(trace_results: List[TraceResult]) -> Dict[Optional[str], DispersionSummary]:
    """
    Group traces by light and collect the exit angle of each color.

    Args:
        trace_results: `Simulator.trace_results` from a run

    Returns:
        {source_id: DispersionSummary}
    """
    grouped: Dict[Optional[str], List[TraceResult]] = {}
    for result in trace_results:
        grouped.setdefault(result.source_id, []).append(result)

    summaries = {}
    for source_id, results in grouped.items():
        results = sorted(results, key=lambda r: r.wavelength_index)
        summaries[source_id] = DispersionSummary(
            source_id=source_id,
            wavelength_indices=np.array([r.wavelength_index for r in results], dtype=int),
            exit_angles_deg=np.array([exit_angle_deg(r) for r in results], dtype=float),
            refracted=np.array(
                [any(s.interaction_type == 'refract' for s in r.segments) for r in results],
                dtype=bool
            ),
        )
    return summaries


def termination_counts(trace_results: List[TraceResult]) -> Dict[str, int]:
    """Number of traces per termination reason ('no_hit', 'bounce_limit', 'length_limit')."""
    return dict(Counter(r.termination.value for r in trace_results))


def path_lengths(trace_results: List[TraceResult]) -> np.ndarray:
    """Drawn length of every trace (sum of its segment lengths)."""
    return np.array([sum(s.length for s in r.segments) for r in trace_results], dtype=float)


def segments_crossing(obj: BaseSceneObj, segments: List[Segment]) -> List[Segment]:
    """
    Segments whose drawn line touches the shape of an obstacle.

    Uses the Shapely shape of mirrors, prisms and targets.

    Raises:
        ValueError: If the obstacle has no shape (lights).
    """
    if not hasattr(obj, 'to_shapely'):
        raise ValueError(f"Object '{obj.id}' of type '{obj.type}' has no shape")
    shape = obj.to_shapely()
    return [
        seg for seg in segments
        if LineString([(seg.start.x, seg.start.y), (seg.end.x, seg.end.y)]).intersects(shape)
    ]
