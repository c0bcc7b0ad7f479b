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

from .geometry import geometry, Geometry, Vector2, MirrorSegment, SegmentIntersection, CircleIntersection
from . import constants
from .palette import PALETTE, Wavelength, get_wavelength
from .physics import reflect, refract
from .segment import Segment
from .scene import Scene
from .tracer import RayTracer, TraceResult, TraceTermination
from .simulator import Simulator, trace_scene
from .svg_renderer import SVGRenderer

__all__ = [
    'geometry', 'Geometry', 'Vector2', 'MirrorSegment', 'SegmentIntersection', 'CircleIntersection',
    'constants',
    'PALETTE', 'Wavelength', 'get_wavelength',
    'reflect', 'refract',
    'Segment',
    'Scene',
    'RayTracer', 'TraceResult', 'TraceTermination',
    'Simulator', 'trace_scene',
    'SVGRenderer',
]
