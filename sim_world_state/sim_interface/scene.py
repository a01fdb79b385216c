import abc
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from sim_world_state.config.enums import ObjectKind

# Scene handles are opaque to this package; only the scene implementation interprets them.
SceneHandle = Any


class AbstractSimScene(abc.ABC):
    """Template for the host simulator's scene graph, giving access to named objects and their bodies.

    All lengths exchanged through this interface are in the simulator's native units (meters) and
    all orientations in radians. Conversion to millimeters and to the canonical frame happens in
    the callers.
    """

    ### Scene graph queries ###

    @abc.abstractmethod
    def resolve_object(self, path: str, kind: ObjectKind) -> Optional[SceneHandle]:
        """Looks up an object by its full dotted path, e.g. "RoboCup.robots".

        Returns None if there is no object of the given kind at that path.
        """
        ...

    @abc.abstractmethod
    def get_object_child_count(self, group: SceneHandle) -> int:
        """Number of direct children of a compound object."""
        ...

    @abc.abstractmethod
    def get_object_child(self, group: SceneHandle, index: int) -> SceneHandle:
        """The index-th direct child of a compound object, in scene order."""
        ...

    @abc.abstractmethod
    def get_full_name(self, obj: SceneHandle) -> str:
        """The full dotted name of an object, e.g. "RoboCup.robots.robot3"."""
        ...

    ### Body queries ###

    @abc.abstractmethod
    def get_position(self, body: SceneHandle) -> Sequence[float]:
        """Position of a body: (x, y) on a 2D backend, (x, y, z) on a 3D backend."""
        ...

    @abc.abstractmethod
    def get_velocity(self, body: SceneHandle) -> Sequence[float]:
        """Linear velocity of a body, with the same dimensionality as get_position."""
        ...

    @abc.abstractmethod
    def get_pose(self, body: SceneHandle) -> Tuple[Sequence[float], Any]:
        """Position and orientation of a body.

        Returns:
            Tuple: (position, orientation), where orientation is a 3x3 rotation matrix on a 3D
            backend and a heading in radians on a 2D backend.
        """
        ...

    ### Body commands ###

    @abc.abstractmethod
    def set_velocity(self, body: SceneHandle, velocity: Sequence[float]) -> None:
        """Overwrites the linear velocity of a body inside the physics engine."""
        ...

    @abc.abstractmethod
    def move(self, body: SceneHandle, position: Sequence[float], rotation: Optional[Any] = None) -> None:
        """Teleports a body.

        Args:
            body: The body to move.
            position: Target position in meters.
            rotation: Optional target orientation; a 3x3 rotation matrix on a 3D backend, a heading
                in radians on a 2D backend. None keeps the current orientation.
        """
        ...

    @abc.abstractmethod
    def reset_dynamics(self, body: SceneHandle) -> None:
        """Zeroes all linear and angular velocities of a body."""
        ...


def as_rotation_matrix(orientation: Any) -> np.ndarray:
    rotation = np.asarray(orientation, dtype=float)
    assert rotation.shape == (3, 3), f"Expected a 3x3 rotation matrix, got shape {rotation.shape}"
    return rotation
