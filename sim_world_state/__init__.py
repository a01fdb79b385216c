from sim_world_state.config.enums import Backend
from sim_world_state.sim_interface import AbstractSimScene, SharedBall
from sim_world_state.simulated_robot import SimulatedRobot

__all__ = ["AbstractSimScene", "Backend", "SharedBall", "SimulatedRobot"]
