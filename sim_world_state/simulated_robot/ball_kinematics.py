import logging
from typing import Optional

import numpy as np

from sim_world_state.config.enums import Backend
from sim_world_state.config.settings import (
    CURVE_STDDEV_PER_SECOND,
    FLAT_BALL_HEIGHT_MM,
    MS_PER_S,
)
from sim_world_state.entities.data.vector import Vector3D
from sim_world_state.entities.data.world_state import GroundTruthBall
from sim_world_state.sim_interface.scene import AbstractSimScene, SceneHandle
from sim_world_state.simulated_robot.frame_transforms import (
    position_3d_mm,
    raw_to_canonical_position,
)

logger = logging.getLogger(__name__)


class BallTracker:
    """Turns successive raw ball positions into canonical ball samples.

    Velocity is a finite difference against the previous sample. On the 3D backend the tracker also
    bends the ball's path: when the ball starts rolling a random curve angle is drawn, and every
    sample rotates the simulator's own ball velocity by that angle so the next physics step already
    follows the curve. The reported velocity is the estimate from before that rotation.

    Each robot owns one tracker, since robots may sample the shared ball at different times.
    """

    def __init__(
        self,
        first_team: bool,
        backend: Backend,
        rng: Optional[np.random.Generator] = None,
        curve_stddev_per_second: float = CURVE_STDDEV_PER_SECOND,
        flat_ball_height: float = FLAT_BALL_HEIGHT_MM,
    ):
        self.first_team = first_team
        self.backend = backend
        self._rng = rng if rng is not None else np.random.default_rng()
        self._curve_stddev_per_second = curve_stddev_per_second
        self._flat_ball_height = flat_ball_height

        self.last_ball_position: Optional[Vector3D] = None
        self.last_ball_time: Optional[int] = None
        self.had_velocity = False
        self.curve_angle = 0.0  # radians

    def sample(self, scene: AbstractSimScene, ball: SceneHandle, now_ms: int) -> GroundTruthBall:
        """Reads the ball and returns its canonical position and estimated velocity.

        Not a pure read: on the 3D backend this writes the curved velocity back into the simulator.
        """
        position = position_3d_mm(scene, ball, self.backend)
        if self.backend is Backend.TWO_D:
            position = Vector3D(position.x, position.y, self._flat_ball_height)
        position = raw_to_canonical_position(position, self.first_team)

        if self.last_ball_time is not None and self.last_ball_time != now_ms:
            elapsed_ms = now_ms - self.last_ball_time
            velocity = (position - self.last_ball_position) * MS_PER_S / float(elapsed_ms)
            if self.backend is Backend.THREE_D:
                self._apply_curve(scene, ball, velocity, elapsed_ms)
        else:
            velocity = Vector3D.zero()

        self.last_ball_position = position
        self.last_ball_time = now_ms
        self.had_velocity = not velocity.xy_is_zero()
        return GroundTruthBall(position, velocity)

    def _apply_curve(self, scene: AbstractSimScene, ball: SceneHandle, velocity: Vector3D, elapsed_ms: int) -> None:
        if not self.had_velocity and not velocity.xy_is_zero():
            stddev = self._curve_stddev_per_second * elapsed_ms / MS_PER_S
            self.curve_angle = float(self._rng.normal(0.0, stddev))
            logger.debug("Ball started rolling, curve angle %.5f rad", self.curve_angle)
        if velocity.xy_is_zero():
            self.curve_angle = 0.0

        native = Vector3D(scene.get_velocity(ball))
        curved = native.with_xy(native.to_2d().rotate(self.curve_angle))
        scene.set_velocity(ball, list(curved))

    def reset(self) -> None:
        """Forgets the previous sample, e.g. after the ball was replaced."""
        self.last_ball_position = None
        self.last_ball_time = None
        self.had_velocity = False
        self.curve_angle = 0.0
