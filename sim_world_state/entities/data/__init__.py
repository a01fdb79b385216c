from sim_world_state.entities.data.pose import FIELD_ROTATION, Pose2D
from sim_world_state.entities.data.setup_poses import SetupPose, SetupPoses
from sim_world_state.entities.data.vector import Vector2D, Vector3D
from sim_world_state.entities.data.world_state import (
    GroundTruthBall,
    GroundTruthPlayer,
    GroundTruthWorldState,
    OdometryData,
)

__all__ = [
    "FIELD_ROTATION",
    "Pose2D",
    "SetupPose",
    "SetupPoses",
    "Vector2D",
    "Vector3D",
    "GroundTruthBall",
    "GroundTruthPlayer",
    "GroundTruthWorldState",
    "OdometryData",
]
