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

import uuid as uuid_module
from typing import Any, Dict, List, Optional, Union

from .constants import MAX_BOUNCES, MAX_LENGTH, MIN_ADVANCE, TARGET_TOLERANCE
from .scene_objs import BaseSceneObj, Light, Mirror, Prism, Target, obstacle_from_json


class Scene:
    """
    Container for obstacles and trace settings.

    The scene is the snapshot the simulator reads on every run: an ordered
    collection of obstacles keyed by unique id, plus the limits applied to
    each trace.

    Attributes:
        objs (list): All obstacles, in insertion order
        max_bounces (int): Maximum number of segments per trace
        max_length (float): Maximum distance a single trace may travel
        min_advance (float): Intersections closer than this are ignored
        target_tolerance (float): Slack added to target radii in the solved check
        error (str or None): Error message, e.g. from deserialization
        warning (str or None): Warning message from the last simulation
        name (str or None): Optional name for the scene (used in exports)
    """

    def __init__(self):
        """Initialize an empty scene with default settings."""
        self.objs: List[BaseSceneObj] = []
        self._max_bounces = MAX_BOUNCES
        self._max_length = MAX_LENGTH
        self._min_advance = MIN_ADVANCE
        self._target_tolerance = TARGET_TOLERANCE
        self.error: Optional[str] = None
        self.warning: Optional[str] = None
        self.name: Optional[str] = None
        self._uuid: str = str(uuid_module.uuid4())

    # ==================== Settings ====================

    @property
    def max_bounces(self) -> int:
        return self._max_bounces

    @max_bounces.setter
    def max_bounces(self, value):
        """Set the bounce limit; must be a positive integer."""
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"max_bounces must be a positive integer, got {value!r}")
        self._max_bounces = value

    @property
    def max_length(self) -> float:
        return self._max_length

    @max_length.setter
    def max_length(self, value):
        """Set the travel budget; must be a positive number."""
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ValueError(f"max_length must be a positive number, got {value!r}")
        self._max_length = float(value)

    @property
    def min_advance(self) -> float:
        return self._min_advance

    @min_advance.setter
    def min_advance(self, value):
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ValueError(f"min_advance must be a non-negative number, got {value!r}")
        self._min_advance = float(value)

    @property
    def target_tolerance(self) -> float:
        return self._target_tolerance

    @target_tolerance.setter
    def target_tolerance(self, value):
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ValueError(f"target_tolerance must be a non-negative number, got {value!r}")
        self._target_tolerance = float(value)

    # ==================== Identification ====================

    @property
    def uuid(self) -> str:
        """Unique identifier generated when the scene is created."""
        return self._uuid

    def get_display_name(self) -> str:
        """
        Get a display name for the scene.

        Returns the user-defined name if set, otherwise "Scene_" followed
        by a short UUID prefix.
        """
        if self.name:
            return self.name
        return f"Scene_{self._uuid[:8]}"

    # ==================== Object management ====================

    def add_object(self, obj: BaseSceneObj) -> BaseSceneObj:
        """
        Add an obstacle to the scene.

        Args:
            obj: The obstacle to add

        Returns:
            The same obstacle, for chaining

        Raises:
            ValueError: If another obstacle already uses the same id.
        """
        if self.get_object(obj.id) is not None:
            raise ValueError(f"Duplicate object id '{obj.id}'")
        self.objs.append(obj)
        return obj

    def remove_object(self, obj: Union[BaseSceneObj, str]) -> None:
        """
        Remove an obstacle (or the obstacle with the given id).

        Removing an obstacle that is not in the scene does nothing.
        """
        obj_id = obj if isinstance(obj, str) else obj.id
        self.objs = [o for o in self.objs if o.id != obj_id]

    def get_object(self, obj_id: str) -> Optional[BaseSceneObj]:
        for obj in self.objs:
            if obj.id == obj_id:
                return obj
        return None

    def clear(self):
        """Remove all obstacles from the scene."""
        self.objs.clear()
        self.error = None
        self.warning = None

    @property
    def lights(self) -> List[Light]:
        return [o for o in self.objs if isinstance(o, Light)]

    @property
    def mirrors(self) -> List[Mirror]:
        return [o for o in self.objs if isinstance(o, Mirror)]

    @property
    def prisms(self) -> List[Prism]:
        return [o for o in self.objs if isinstance(o, Prism)]

    @property
    def targets(self) -> List[Target]:
        return [o for o in self.objs if isinstance(o, Target)]

    @property
    def ray_interacting_objs(self) -> List[BaseSceneObj]:
        """Obstacles rays can hit (mirrors and prisms), in scene order."""
        return [o for o in self.objs if o.interacts_with_rays]

    # ==================== Serialization ====================

    def serialize(self) -> Dict[str, Dict[str, Any]]:
        """
        Serialize the obstacles as an {id: {type, position, rotation, size}} mapping.

        Settings are not included; they belong to the program, not the layout.
        """
        return {obj.id: obj.serialize() for obj in self.objs}

    def load_objects(self, mapping: Dict[str, Dict[str, Any]]) -> None:
        """
        Replace the obstacles with the ones described by `mapping`.

        Args:
            mapping: {id: {'type': ..., 'position': ..., 'rotation': ..., 'size': ...}}

        Raises:
            ValueError: On an unknown or missing type, or malformed values.
        """
        self.clear()
        for obj_id, json_obj in mapping.items():
            self.add_object(obstacle_from_json(obj_id, json_obj, self))

    @classmethod
    def from_dict(cls, mapping: Dict[str, Dict[str, Any]]) -> 'Scene':
        """Create a scene from an {id: obstacle} mapping."""
        scene = cls()
        scene.load_objects(mapping)
        return scene

    def __repr__(self) -> str:
        return f"Scene(name={self.get_display_name()!r}, objs={len(self.objs)})"
