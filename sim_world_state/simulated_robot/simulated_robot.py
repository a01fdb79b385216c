import logging
from typing import List, Optional

import numpy as np

from sim_world_state.config.enums import Backend
from sim_world_state.config.settings import (
    BALL_FRICTION_DECELERATION,
    MM_PER_M,
    MS_PER_S,
    ROBOTS_PER_TEAM,
    SIM_STEP_LENGTH_MS,
)
from sim_world_state.entities.data.pose import Pose2D
from sim_world_state.entities.data.vector import Vector2D, Vector3D
from sim_world_state.entities.data.world_state import (
    GroundTruthPlayer,
    GroundTruthWorldState,
    OdometryData,
)
from sim_world_state.global_utils.math_utils import rotation_matrix_from_euler
from sim_world_state.sim_interface.clock import Clock, current_system_time_ms
from sim_world_state.sim_interface.scene import AbstractSimScene, SceneHandle
from sim_world_state.sim_interface.shared_ball import SharedBall
from sim_world_state.simulated_robot.ball_kinematics import BallTracker
from sim_world_state.simulated_robot.frame_transforms import (
    canonical_to_raw_position,
    canonical_to_raw_rotation,
    pose_from_body,
    position_mm,
    raw_to_canonical_pose,
)
from sim_world_state.simulated_robot.robot_identity import (
    NameSuffixResolver,
    PlayerNumberResolver,
    RosterEntry,
    build_roster,
)

logger = logging.getLogger(__name__)


class SimulatedRobot:
    """Ground truth access for one robot in the simulated scene.

    Reads the state of the ball and of all other robots in the canonical frame of this robot's team
    and moves robots and the ball given canonical coordinates. Team, number and the roster of other
    robots are fixed at construction.

    Args:
        scene (AbstractSimScene): The host simulator's scene graph.
        robot (SceneHandle): The scene object of the robot this instance belongs to.
        ball (SharedBall): The ball shared by all simulated robots of the scene.
        backend (Backend): Whether the scene runs on the 2D or 3D physics backend.
        resolver (PlayerNumberResolver): Maps scene objects to player numbers. Defaults to reading the
            number from the object's scene name.
        robots_per_team (int): Size of each team. Ignored if a resolver is given.
        clock (Clock): Returns the current time in milliseconds.
        rng (np.random.Generator): Source of the random ball curve.
        sim_step_length_ms (float): Length of one physics step, used by the ball friction.
    """

    def __init__(
        self,
        scene: AbstractSimScene,
        robot: SceneHandle,
        ball: SharedBall,
        backend: Backend = Backend.THREE_D,
        resolver: Optional[PlayerNumberResolver] = None,
        robots_per_team: int = ROBOTS_PER_TEAM,
        clock: Clock = current_system_time_ms,
        rng: Optional[np.random.Generator] = None,
        sim_step_length_ms: float = SIM_STEP_LENGTH_MS,
    ):
        assert robot is not None, "SimulatedRobot needs a robot scene object."
        self._scene = scene
        self._robot = robot
        self._ball = ball
        self._backend = backend
        self._resolver = resolver if resolver is not None else NameSuffixResolver(scene, robots_per_team)
        self._clock = clock
        self._sim_step_length_ms = sim_step_length_ms

        self._first_team = self._resolver.is_first_team(robot)
        self._robot_number = self._resolver.player_number_of(robot)
        self.roster = build_roster(scene, self._resolver, self._robot_number)

        self._ball_tracker = BallTracker(self._first_team, backend, rng)
        self._tracked_ball: Optional[SceneHandle] = None

    @property
    def first_team(self) -> bool:
        return self._first_team

    @property
    def robot_number(self) -> int:
        """Raw player number of this robot."""
        return self._robot_number

    @property
    def robots_per_team(self) -> int:
        return self._resolver.robots_per_team

    @property
    def backend(self) -> Backend:
        return self._backend

    @property
    def ball_tracker(self) -> BallTracker:
        return self._ball_tracker

    ### Reading ###

    def get_world_state(self) -> GroundTruthWorldState:
        """Snapshot of the ball and all robots, in this robot's canonical frame.

        Not a pure read: on the 3D backend the ball's velocity inside the simulator is rotated by
        the current curve angle, which changes the ball's next physics step.
        """
        world_state = GroundTruthWorldState()

        ball = self._ball.handle
        if ball is not None:
            if ball is not self._tracked_ball:
                self._ball_tracker.reset()
                self._tracked_ball = ball
            world_state.balls.append(self._ball_tracker.sample(self._scene, ball, self._clock()))

        world_state.own_pose = self.get_robot_pose()

        if self._first_team:
            first_team_players = world_state.own_team_players
            second_team_players = world_state.opponent_team_players
        else:
            first_team_players = world_state.opponent_team_players
            second_team_players = world_state.own_team_players

        first_team_players.extend(self._players_from_roster(self.roster.first_team))
        second_team_players.extend(self._players_from_roster(self.roster.second_team))
        return world_state

    def _players_from_roster(self, entries: List[RosterEntry]) -> List[GroundTruthPlayer]:
        players = []
        for entry in entries:
            pose, upright = pose_from_body(self._scene, entry.handle, self._backend)
            players.append(
                GroundTruthPlayer(
                    number=entry.team_number,
                    pose=raw_to_canonical_pose(pose, self._first_team),
                    upright=upright,
                )
            )
        return players

    def get_robot_pose(self) -> Pose2D:
        """Pose of this robot in its canonical frame."""
        pose, _ = pose_from_body(self._scene, self._robot, self._backend)
        return raw_to_canonical_pose(pose, self._first_team)

    def get_odometry_data(self, robot_pose: Pose2D) -> OdometryData:
        """Odometry of this robot given its pose in the canonical frame."""
        odometry = raw_to_canonical_pose(robot_pose, self._first_team)
        return OdometryData(odometry.rotation, odometry.translation)

    def get_absolute_ball_position(self) -> Optional[Vector2D]:
        """Ball position in the raw frame (mm), or None if there is no ball."""
        ball = self._ball.handle
        if ball is None:
            return None
        return position_mm(self._scene, ball)

    ### Commanding ###

    def move_robot_per_team(
        self,
        pos: Vector3D,
        rot: Vector3D,
        change_rotation: bool = True,
        reset_dynamics: bool = True,
    ) -> None:
        """Moves this robot to a position (mm) and rotation (radians about x, y, z) given in the canonical frame."""
        self.move_robot(
            canonical_to_raw_position(pos, self._first_team),
            canonical_to_raw_rotation(rot, self._first_team),
            change_rotation,
            reset_dynamics,
        )

    def move_ball_per_team(self, pos: Vector3D, reset_dynamics: bool = True) -> None:
        """Moves the ball to a position (mm) given in the canonical frame."""
        self.move_ball(canonical_to_raw_position(pos, self._first_team), reset_dynamics)

    def move_robot(
        self,
        pos: Vector3D,
        rot: Vector3D,
        change_rotation: bool = True,
        reset_dynamics: bool = True,
    ) -> None:
        """Moves this robot to a position (mm) and rotation (radians about x, y, z) given in the raw frame."""
        position = list(pos / MM_PER_M)
        rotation = None
        if change_rotation:
            if self._backend is Backend.TWO_D:
                rotation = rot.z
            else:
                rotation = rotation_matrix_from_euler(rot.x, rot.y, rot.z)
        self._scene.move(self._robot, position, rotation)
        if reset_dynamics:
            self._scene.reset_dynamics(self._robot)

    def move_ball(self, pos: Vector3D, reset_dynamics: bool = True) -> None:
        """Moves the ball to a position (mm) given in the raw frame. Does nothing if there is no ball."""
        ball = self._ball.handle
        if ball is None:
            return
        self._scene.move(ball, list(pos / MM_PER_M))
        if reset_dynamics:
            self._scene.reset_dynamics(ball)

    def apply_ball_friction(self, deceleration: float = BALL_FRICTION_DECELERATION) -> None:
        """Slows the ball down by one physics step of rolling friction.

        Only the 2D backend needs this, the 3D backend simulates friction itself. The ball stops
        instead of reversing when the speed would drop below zero.

        Args:
            deceleration (float): Magnitude of the friction deceleration in m/s^2.
        """
        ball = self._ball.handle
        if self._backend is not Backend.TWO_D or ball is None:
            return
        assert deceleration >= 0, "Ball friction must slow the ball down."

        velocity = self._scene.get_velocity(ball)
        ball_velocity = Vector2D(velocity[0], velocity[1])
        ball_speed = ball_velocity.mag()
        new_ball_speed = ball_speed - deceleration * self._sim_step_length_ms / MS_PER_S
        if new_ball_speed <= 0.0:
            if ball_speed > 0.0:
                logger.debug("Ball stopped by friction")
            ball_velocity = Vector2D(0.0, 0.0)
        else:
            ball_velocity = ball_velocity * (new_ball_speed / ball_speed)
        self._scene.set_velocity(ball, list(ball_velocity))
