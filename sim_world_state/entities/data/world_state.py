from dataclasses import dataclass, field
from typing import List

from sim_world_state.entities.data.pose import Pose2D
from sim_world_state.entities.data.vector import Vector3D

# All values are in the canonical (team-relative) frame.
# position data: millimeters
# velocity data: millimeters per second


@dataclass(frozen=True)
class GroundTruthBall:
    position: Vector3D
    velocity: Vector3D


@dataclass(frozen=True)
class GroundTruthPlayer:
    number: int  # 1-based within its team
    pose: Pose2D
    upright: bool


@dataclass
class GroundTruthWorldState:
    own_pose: Pose2D = field(default_factory=Pose2D)
    own_team_players: List[GroundTruthPlayer] = field(default_factory=list)
    opponent_team_players: List[GroundTruthPlayer] = field(default_factory=list)
    balls: List[GroundTruthBall] = field(default_factory=list)


@dataclass(frozen=True)
class OdometryData(Pose2D):
    """Accumulated odometry of a robot, expressed as a pose in the canonical frame."""
