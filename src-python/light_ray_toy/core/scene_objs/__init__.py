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

from typing import Any, Dict, Optional, Type, TYPE_CHECKING

from .base_scene_obj import BaseSceneObj, IncidentResult, RayHit
from .light import Light
from .mirror import Mirror
from .prism import Prism
from .target import Target

if TYPE_CHECKING:
    from ..scene import Scene


OBJ_TYPES: Dict[str, Type[BaseSceneObj]] = {
    cls.type: cls for cls in (Light, Mirror, Prism, Target)
}


def create_obstacle(
    obj_type: str,
    obj_id: str,
    position: Optional[Any] = None,
    rotation: Optional[float] = None,
    size: Optional[float] = None
) -> BaseSceneObj:
    """
    Create an obstacle from its type tag.

    Args:
        obj_type: One of 'light', 'mirror', 'prism', 'target'
        obj_id: Identifier of the new obstacle
        position, rotation, size: Pose; defaults of the type are used when omitted

    Raises:
        ValueError: If the type tag is unknown.
    """
    return obstacle_class(obj_type)(obj_id, position=position, rotation=rotation, size=size)


def obstacle_from_json(obj_id: str, json_obj: Dict[str, Any], scene: Optional['Scene'] = None) -> BaseSceneObj:
    """Deserialize one entry of a scene mapping; the 'type' key selects the class."""
    if 'type' not in json_obj:
        raise ValueError(f"Object '{obj_id}' has no 'type'")
    return obstacle_class(json_obj['type']).from_json(obj_id, json_obj, scene)


def obstacle_class(obj_type: str) -> Type[BaseSceneObj]:
    try:
        return OBJ_TYPES[obj_type]
    except KeyError:
        raise ValueError(
            f"Unknown object type '{obj_type}'. "
            f"Valid options: {tuple(OBJ_TYPES)}"
        ) from None


__all__ = [
    'BaseSceneObj', 'RayHit', 'IncidentResult',
    'Light', 'Mirror', 'Prism', 'Target',
    'OBJ_TYPES', 'create_obstacle', 'obstacle_from_json', 'obstacle_class',
]
