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

import copy
from typing import Any, Dict, NamedTuple, Optional, TYPE_CHECKING

from ..constants import DEFAULT_POSITION, DEFAULT_SIZE
from ..geometry import Vector2, geometry

if TYPE_CHECKING:
    from ..scene import Scene


class RayHit(NamedTuple):
    """
    A front-face intersection of a ray with an obstacle.

    Attributes:
        obj: The obstacle that was hit
        point: The intersection point
        normal: Unit surface normal at the hit, facing the incoming ray
        t: Distance from the ray origin to the hit
    """
    obj: 'BaseSceneObj'
    point: Vector2
    normal: Vector2
    t: float


class IncidentResult(NamedTuple):
    """Where and in which direction a ray continues after an obstacle handled it."""
    origin: Vector2
    direction: Vector2
    interaction_type: str


class BaseSceneObj:
    """
    Base class for obstacles in the scene.

    Every obstacle shares an identifier and a pose (position, rotation,
    size). Subclasses decide what the pose means: a segment for mirrors,
    a disc for prisms and targets, an emission point for lights.

    This class provides:
    - Serialization/deserialization of the pose
    - Transformation (move/rotate)
    - The ray tracing interface (`check_ray_intersects`, `on_ray_incident`)
    """

    type: str = ''
    """The type tag of the object, as used in serialized scenes."""

    serializable_defaults: Dict[str, Any] = {
        'position': {'x': DEFAULT_POSITION[0], 'y': DEFAULT_POSITION[1]},
        'rotation': 0.0,
        'size': DEFAULT_SIZE,
    }
    """
    Default values of the serialized properties. Points are stored as
    {'x': ..., 'y': ...} dicts in serialized form and as Vector2 on the object.
    """

    interacts_with_rays: bool = False
    """Whether rays can hit this object. Only mirrors and prisms do."""

    def __init__(
        self,
        obj_id: str,
        position: Optional[Any] = None,
        rotation: Optional[float] = None,
        size: Optional[float] = None
    ) -> None:
        """
        Initialize the obstacle.

        Args:
            obj_id: Unique identifier within the scene
            position: Center as Vector2, (x, y) or {'x', 'y'} (default: DEFAULT_POSITION)
            rotation: Orientation in radians (default: 0)
            size: Length for mirrors, diameter for discs (default: DEFAULT_SIZE)
        """
        defaults = self.__class__.serializable_defaults
        self.id: str = str(obj_id)
        self.position: Vector2 = Vector2.coerce(
            position if position is not None else defaults['position']
        )
        self.rotation: float = float(rotation if rotation is not None else defaults['rotation'])
        self.size: float = float(size if size is not None else defaults['size'])

    @classmethod
    def from_json(
        cls,
        obj_id: str,
        json_obj: Optional[Dict[str, Any]] = None,
        scene: Optional['Scene'] = None
    ) -> 'BaseSceneObj':
        """
        Create an obstacle from its serialized form.

        Missing properties take their default values. Unknown keys are not
        fatal; they are reported through `scene.error` when a scene is given.

        Args:
            obj_id: Identifier of the obstacle
            json_obj: Dict with any of 'type', 'position', 'rotation', 'size'
            scene: The scene to report problems to, if any

        Returns:
            The new obstacle
        """
        json_obj = json_obj or {}
        known_keys = ['type'] + list(cls.serializable_defaults.keys())
        for key in json_obj:
            if key not in known_keys and scene is not None:
                scene.error = f"Unknown object key '{key}' for type '{cls.type}'"

        props = {}
        for prop_name, default_value in cls.serializable_defaults.items():
            props[prop_name] = copy.deepcopy(json_obj.get(prop_name, default_value))
        return cls(obj_id, **props)

    def serialize(self) -> Dict[str, Any]:
        """
        Serialize the obstacle to the scene mapping format.

        Returns:
            {'type', 'position', 'rotation', 'size'} dict
        """
        return {
            'type': self.__class__.type,
            'position': self.position.to_dict(),
            'rotation': self.rotation,
            'size': self.size,
        }

    @property
    def radius(self) -> float:
        """Half of `size`."""
        return self.size / 2

    # ==================== Transformation Methods ====================

    def move(self, diff_x: float, diff_y: float) -> None:
        """
        Move the object by the given displacement.

        Args:
            diff_x: The x-coordinate displacement.
            diff_y: The y-coordinate displacement.
        """
        self.position = geometry.add(self.position, Vector2(diff_x, diff_y))

    def set_position(self, position: Any) -> None:
        self.position = Vector2.coerce(position)

    def rotate(self, angle: float) -> None:
        """
        Rotate the object about its own center.

        Args:
            angle: The angle in radians, added to the current rotation.
        """
        self.rotation += angle

    def set_rotation(self, rotation: float) -> None:
        self.rotation = float(rotation)

    def get_default_center(self) -> Vector2:
        """The center of rotation."""
        return self.position

    # ==================== Simulation Methods ====================

    def check_ray_intersects(
        self,
        origin: Vector2,
        direction: Vector2,
        min_advance: float
    ) -> Optional[RayHit]:
        """
        Check whether a ray hits the front face of this object.

        Args:
            origin: Ray start
            direction: Unit ray direction
            min_advance: Hits at or closer than this distance are ignored

        Returns:
            The RayHit, or None. Objects that do not interact with rays
            always return None.
        """
        return None

    def on_ray_incident(self, direction: Vector2, hit: RayHit, wavelength_index: int) -> IncidentResult:
        """
        Decide how a ray continues after hitting this object.

        Args:
            direction: Unit direction of the incoming ray
            hit: The intersection returned by `check_ray_intersects`
            wavelength_index: Palette index of the ray

        Returns:
            The new origin, direction and interaction type.

        Raises:
            NotImplementedError: For objects that rays cannot hit.
        """
        raise NotImplementedError(f"{self.__class__.__name__} does not interact with rays")

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(id={self.id!r}, position=({self.position.x}, {self.position.y}), "
            f"rotation={self.rotation}, size={self.size})"
        )
