from sim_world_state.simulated_robot.ball_kinematics import BallTracker
from sim_world_state.simulated_robot.robot_identity import (
    NameSuffixResolver,
    PlayerNumberResolver,
    Roster,
    RosterEntry,
    build_roster,
)
from sim_world_state.simulated_robot.simulated_robot import SimulatedRobot

__all__ = [
    "BallTracker",
    "NameSuffixResolver",
    "PlayerNumberResolver",
    "Roster",
    "RosterEntry",
    "SimulatedRobot",
    "build_roster",
]
