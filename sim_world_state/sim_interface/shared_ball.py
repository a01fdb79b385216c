import logging
from typing import Optional

from sim_world_state.sim_interface.scene import SceneHandle

logger = logging.getLogger(__name__)


class SharedBall:
    """The one physical ball of a scene, observed by every simulated robot.

    A single instance is created by the host and passed to each SimulatedRobot, so all robots see
    the same ball without a process-wide global. The handle may be None when the scene has no ball.
    """

    def __init__(self, handle: Optional[SceneHandle] = None):
        self._handle = handle

    @property
    def handle(self) -> Optional[SceneHandle]:
        return self._handle

    def set(self, handle: Optional[SceneHandle]) -> None:
        """Every robot restarts its ball velocity estimate when the handle changes."""
        if handle is self._handle:
            return
        if handle is None:
            logger.info("Ball removed from the scene")
        elif self._handle is None:
            logger.info("Ball added to the scene")
        else:
            logger.info("Ball replaced in the scene")
        self._handle = handle

    def __bool__(self) -> bool:
        return self._handle is not None
