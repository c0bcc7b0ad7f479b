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

Light Ray Toy
=============

A 2D ray tracer for colored light bouncing off mirrors and dispersing
through prisms.

Main modules:
- core: Tracing engine (Scene, Simulator, RayTracer, obstacles, geometry)
- analysis: Export and dispersion analysis of traced segments
- examples: Example scenes

Quick start:
    from light_ray_toy import Scene, Simulator
    from light_ray_toy.core.scene_objs import Light, Mirror, Target
"""

__version__ = "0.1.0"

# Convenience imports for common usage
from .core.scene import Scene
from .core.simulator import Simulator
from .core.segment import Segment

__all__ = [
    'Scene',
    'Simulator',
    'Segment',
    '__version__',
]
