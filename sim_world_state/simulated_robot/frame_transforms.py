"""Conversions between the simulator's raw frame and the team-relative canonical frame.

The first team views the field rotated by 180 degrees, as if it played from the opposite end.
The second team's canonical frame is the raw frame. Raw positions are read in meters and
converted to millimeters here.
"""

import math
from typing import Tuple

from sim_world_state.config.enums import Backend
from sim_world_state.config.settings import MM_PER_M, UPRIGHT_MIN_Z_AXIS_COMPONENT
from sim_world_state.entities.data.pose import FIELD_ROTATION, Pose2D
from sim_world_state.entities.data.vector import Vector2D, Vector3D
from sim_world_state.global_utils.math_utils import (
    normalise_heading,
    yaw_from_rotation_matrix,
)
from sim_world_state.sim_interface.scene import (
    AbstractSimScene,
    SceneHandle,
    as_rotation_matrix,
)


def raw_to_canonical_position(position: Vector3D, first_team: bool) -> Vector3D:
    return position.flip_xy() if first_team else position


def canonical_to_raw_position(position: Vector3D, first_team: bool) -> Vector3D:
    # negating both horizontal axes is its own inverse
    return position.flip_xy() if first_team else position


def raw_to_canonical_pose(pose: Pose2D, first_team: bool) -> Pose2D:
    return FIELD_ROTATION + pose if first_team else pose


def canonical_to_raw_pose(pose: Pose2D, first_team: bool) -> Pose2D:
    return FIELD_ROTATION.inverse() + pose if first_team else pose


def canonical_to_raw_rotation(rotation: Vector3D, first_team: bool) -> Vector3D:
    """Rotation about x, y, z (radians). Only the yaw is turned; roll and pitch pass through."""
    if not first_team:
        return rotation
    return Vector3D(rotation.x, rotation.y, normalise_heading(rotation.z + math.pi))


def position_mm(scene: AbstractSimScene, body: SceneHandle) -> Vector2D:
    """Raw horizontal position of a body in millimeters."""
    position = scene.get_position(body)
    return Vector2D(position[0], position[1]) * MM_PER_M


def position_3d_mm(scene: AbstractSimScene, body: SceneHandle, backend: Backend) -> Vector3D:
    """Raw position of a body in millimeters. The 2D backend has no height and reports z = 0."""
    position = scene.get_position(body)
    z = position[2] if backend is Backend.THREE_D else 0.0
    return Vector3D(position[0], position[1], z) * MM_PER_M


def pose_from_body(scene: AbstractSimScene, body: SceneHandle, backend: Backend) -> Tuple[Pose2D, bool]:
    """Raw 2D pose of a body in millimeters, and whether it is standing upright.

    On the 3D backend the heading is that of the body x-axis projected onto the ground and the body
    counts as upright while its z-axis points sufficiently upwards. The 2D backend cannot tip over.
    """
    position, orientation = scene.get_pose(body)
    translation = Vector2D(position[0], position[1]) * MM_PER_M
    if backend is Backend.TWO_D:
        return Pose2D(float(orientation), translation), True

    rotation = as_rotation_matrix(orientation)
    upright = bool(rotation[2][2] >= UPRIGHT_MIN_Z_AXIS_COMPONENT)
    return Pose2D(yaw_from_rotation_matrix(rotation), translation), upright
