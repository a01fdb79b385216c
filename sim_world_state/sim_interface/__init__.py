from sim_world_state.sim_interface.clock import Clock, current_system_time_ms
from sim_world_state.sim_interface.scene import AbstractSimScene, SceneHandle
from sim_world_state.sim_interface.shared_ball import SharedBall

__all__ = [
    "AbstractSimScene",
    "Clock",
    "SceneHandle",
    "SharedBall",
    "current_system_time_ms",
]
