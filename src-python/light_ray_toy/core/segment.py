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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .geometry import Vector2, geometry


@dataclass(frozen=True)
class Segment:
    """
    One straight piece of a traced light path.

    Segments are plain values produced by the tracer and consumed by
    renderers and exporters.

    Attributes:
        start (Vector2): Where the piece begins
        end (Vector2): Where it ends (a hit point, or the end of the budget)
        color (str): Display color of the wavelength
        wavelength_index (int): Position in the palette
        source_id (str or None): Id of the light that emitted the ray
        interaction_type (str): How this piece started:
            'source' = emitted by a light
            'reflect' = mirror reflection
            'refract' = refraction into a prism
            'tir' = reflection off a prism where refraction failed
    """
    start: Vector2
    end: Vector2
    color: str
    wavelength_index: int = 0
    source_id: Optional[str] = None
    interaction_type: str = 'source'

    @property
    def length(self) -> float:
        return geometry.distance(self.start, self.end)

    @property
    def direction(self) -> Vector2:
        """Unit direction from start to end (zero vector for a degenerate segment)."""
        return geometry.normalize(geometry.sub(self.end, self.start))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {
            'start': self.start.to_dict(),
            'end': self.end.to_dict(),
            'color': self.color,
            'wavelength_index': self.wavelength_index,
            'source_id': self.source_id,
            'interaction_type': self.interaction_type,
        }
