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
Constants used throughout the light ray tracer.

These are extracted here so that the scene objects, the tracer and the
simulator can share them without circular imports. The scene-level settings
in `Scene` default to these values.
"""

# Maximum number of segments emitted by a single trace
MAX_BOUNCES = 10

# Maximum total distance a single trace may travel (scene units)
MAX_LENGTH = 1000.0

# Intersections closer than this to the current origin are ignored,
# so a ray does not immediately hit the surface it just left
MIN_ADVANCE = 0.01

# Ray/segment determinant below this magnitude is treated as parallel
PARALLEL_EPSILON = 1e-6

# Distance a new origin is pushed along the hit normal after a bounce
MIRROR_NUDGE = 0.1
PRISM_NUDGE = 0.05

# Extra slack added to the target radius for the solved check
TARGET_TOLERANCE = 5.0

# Lights always emit along world +x; their rotation is not used for emission
DEFAULT_EMISSION_DIRECTION = (1.0, 0.0)

# Pose of obstacles created without an explicit position/size
DEFAULT_POSITION = (300.0, 300.0)
DEFAULT_SIZE = 40.0
