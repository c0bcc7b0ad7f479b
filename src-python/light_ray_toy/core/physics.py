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
Reflection and refraction of a direction vector at a surface.

Both functions work on directions only; where the ray continues from is the
caller's concern. `refract` returns None when no transmitted ray exists,
which is an expected optical event (the caller reflects instead), not an
error.
"""

import math
from typing import Optional

from .geometry import Vector2, geometry


def reflect(incident: Vector2, normal: Vector2) -> Vector2:
    """
    Specular reflection: d - 2 (d . n) n, with n normalized first.

    Args:
        incident: Incident direction (any length; the length is preserved)
        normal: Surface normal (need not be unit length)

    Returns:
        The reflected direction
    """
    n = geometry.normalize(normal)
    proj = geometry.scale(geometry.dot(incident, n), n)
    return geometry.sub(incident, geometry.scale(2, proj))


def refract(incident: Vector2, normal: Vector2, eta: float) -> Optional[Vector2]:
    """
    Refract a direction with the vector form of Snell's law.

    Args:
        incident: Incident direction (normalized internally)
        normal: Surface normal on the incident side (normalized internally)
        eta: n_incident / n_transmitted

    Returns:
        The unit refracted direction, or None when the ray does not meet the
        front of the surface (cos(theta) < 0) or is totally internally
        reflected (sin^2(phi) > 1).
    """
    d = geometry.normalize(incident)
    n = geometry.normalize(normal)

    cos_theta = -geometry.dot(d, n)
    if cos_theta < 0:
        return None

    sin2_theta = 1.0 - cos_theta * cos_theta
    sin2_phi = eta * eta * sin2_theta
    if sin2_phi > 1.0:
        return None

    cos_phi = math.sqrt(1.0 - sin2_phi)
    return geometry.add(
        geometry.scale(eta, d),
        geometry.scale(eta * cos_theta - cos_phi, n)
    )


def critical_angle(eta: float) -> Optional[float]:
    """
    Incidence angle (radians) above which refraction with this eta fails.

    Returns:
        The critical angle, or None when eta <= 1 (no total internal
        reflection is possible).
    """
    if eta <= 1.0:
        return None
    return math.asin(1.0 / eta)
