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

from .base_scene_obj import BaseSceneObj
from ..constants import DEFAULT_EMISSION_DIRECTION, DEFAULT_POSITION
from ..geometry import Vector2


class Light(BaseSceneObj):
    """
    A light source emitting one ray per palette color.

    Every light emits from its position along world +x. The rotation is
    kept and serialized like any other obstacle's, but it does not steer
    the emitted rays.
    """

    type = 'light'

    serializable_defaults = {
        'position': {'x': DEFAULT_POSITION[0], 'y': DEFAULT_POSITION[1]},
        'rotation': 0.0,
        'size': 20.0,
    }

    def get_emission_origin(self) -> Vector2:
        return self.position

    def get_emission_direction(self) -> Vector2:
        return Vector2(*DEFAULT_EMISSION_DIRECTION)
