"""Tests for SimulatedRobot against an in-memory scene."""

import math

import numpy as np
import pytest

from sim_world_state.config.enums import Backend
from sim_world_state.entities.data.pose import Pose2D
from sim_world_state.entities.data.vector import Vector2D, Vector3D
from sim_world_state.entities.data.world_state import OdometryData
from sim_world_state.global_utils.math_utils import angle_difference
from sim_world_state.sim_interface.shared_ball import SharedBall
from sim_world_state.simulated_robot.robot_identity import NameSuffixResolver
from sim_world_state.simulated_robot.simulated_robot import SimulatedRobot
from sim_world_state.tests.common.fake_scene import FakeSimScene, ManualClock

# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------

ROBOTS_PER_TEAM = 3


def build_scene(backend: Backend = Backend.THREE_D):
    """Three robots per team; robot 1 and robot 4 are the ones under test."""
    scene = FakeSimScene(backend)
    bodies = {
        1: scene.add_robot(1, x=-1.0, y=0.0, theta=0.0),
        5: scene.add_robot(5, x=2.0, y=-1.0, theta=math.pi / 2),
        2: scene.add_robot(2, x=-2.0, y=1.0, theta=-math.pi / 2),
        4: scene.add_robot(4, x=1.0, y=0.0, theta=math.pi),
        6: scene.add_robot(6, x=3.0, y=2.0, theta=0.0, group="RoboCup.extras"),
        3: scene.add_robot(3, x=-3.0, y=-2.0, theta=0.0, group="RoboCup.extras"),
    }
    return scene, bodies


def make_robot(scene, body, ball_handle=None, backend=Backend.THREE_D, clock=None, **kwargs):
    return SimulatedRobot(
        scene,
        body,
        SharedBall(ball_handle),
        backend=backend,
        robots_per_team=ROBOTS_PER_TEAM,
        clock=clock if clock is not None else ManualClock(),
        rng=np.random.default_rng(0),
        **kwargs,
    )


@pytest.fixture
def scene_and_bodies():
    return build_scene()


def own_number(first_team: bool) -> int:
    return 1 if first_team else 4


# ===========================================================================
# construction
# ===========================================================================


def test_team_and_number_from_scene_name(scene_and_bodies, first_team):
    scene, bodies = scene_and_bodies
    robot = make_robot(scene, bodies[own_number(first_team)])

    assert robot.first_team is first_team
    assert robot.robot_number == own_number(first_team)
    assert len(robot.roster) == 5


def test_robot_is_required(scene_and_bodies):
    scene, _ = scene_and_bodies
    with pytest.raises(AssertionError):
        make_robot(scene, None)


# ===========================================================================
# get_world_state
# ===========================================================================


def test_world_state_splits_own_and_opponent_players(scene_and_bodies, first_team):
    scene, bodies = scene_and_bodies
    robot = make_robot(scene, bodies[own_number(first_team)])

    world_state = robot.get_world_state()

    # both readers have two teammates and three opponents, numbered from 1 within each team
    assert sorted(p.number for p in world_state.own_team_players) == [2, 3]
    assert sorted(p.number for p in world_state.opponent_team_players) == [1, 2, 3]
    for player in world_state.own_team_players + world_state.opponent_team_players:
        assert 1 <= player.number <= ROBOTS_PER_TEAM
        assert player.upright


def test_world_state_keeps_scene_order(scene_and_bodies):
    scene, bodies = scene_and_bodies
    robot = make_robot(scene, bodies[1])

    world_state = robot.get_world_state()

    # opponents as seen by robot 1: robot5, robot4 (robots group), then robot6 (extras group)
    assert [p.number for p in world_state.own_team_players] == [2, 3]
    assert [p.number for p in world_state.opponent_team_players] == [2, 1, 3]


def test_world_state_numbers_players_through_resolver(scene_and_bodies):
    class CountdownResolver(NameSuffixResolver):
        def team_number_of(self, obj):
            return self.robots_per_team + 1 - super().team_number_of(obj)

    scene, bodies = scene_and_bodies
    robot = make_robot(scene, bodies[1], resolver=CountdownResolver(scene, ROBOTS_PER_TEAM))

    world_state = robot.get_world_state()

    assert [p.number for p in world_state.own_team_players] == [2, 1]
    assert [p.number for p in world_state.opponent_team_players] == [2, 3, 1]


def test_first_team_reader_sees_rotated_poses(scene_and_bodies):
    scene, bodies = scene_and_bodies
    robot = make_robot(scene, bodies[1])

    world_state = robot.get_world_state()
    opponent_4 = next(p for p in world_state.opponent_team_players if p.number == 1)

    # raw robot4 at (1000, 0) facing pi
    assert opponent_4.pose.x == pytest.approx(-1000)
    assert opponent_4.pose.y == pytest.approx(0, abs=1e-9)
    assert abs(angle_difference(opponent_4.pose.rotation, 0.0)) < 1e-9


def test_second_team_reader_sees_raw_poses(scene_and_bodies):
    scene, bodies = scene_and_bodies
    robot = make_robot(scene, bodies[4])

    world_state = robot.get_world_state()
    teammate_5 = next(p for p in world_state.own_team_players if p.number == 2)

    assert teammate_5.pose.is_close(Pose2D.from_xy(2000, -1000, math.pi / 2))


def test_own_pose_uses_team_convention(scene_and_bodies, first_team):
    scene, bodies = scene_and_bodies
    robot = make_robot(scene, bodies[own_number(first_team)])

    own_pose = robot.get_world_state().own_pose

    # robot1 raw (-1000, 0, 0) and robot4 raw (1000, 0, pi) both look like (1000, 0, pi) canonically
    assert own_pose.is_close(Pose2D.from_xy(1000, 0, math.pi))


def test_fallen_robot_reported_as_not_upright():
    scene, bodies = build_scene()
    fallen = scene.add_robot(2, x=0.0, y=0.0, group="RoboCup.extras", fallen=True)
    robot = make_robot(scene, bodies[1])

    world_state = robot.get_world_state()

    uprights = [p.upright for p in world_state.own_team_players]
    assert uprights.count(False) == 1
    assert fallen in [e.handle for e in robot.roster.first_team]


def test_no_ball_gives_empty_ball_list(scene_and_bodies, first_team):
    scene, bodies = scene_and_bodies
    robot = make_robot(scene, bodies[own_number(first_team)])

    assert robot.get_world_state().balls == []
    assert robot.get_absolute_ball_position() is None


def test_ball_sample_in_world_state(scene_and_bodies, first_team):
    scene, bodies = scene_and_bodies
    ball = scene.add_ball(0.5, 0.25, 0.05)
    clock = ManualClock(1000)
    robot = make_robot(scene, bodies[own_number(first_team)], ball_handle=ball, clock=clock)

    first = robot.get_world_state().balls
    ball.position = [0.6, 0.25, 0.05]
    clock.advance(100)
    second = robot.get_world_state().balls

    assert len(first) == 1 and len(second) == 1
    sign = -1 if first_team else 1
    assert first[0].velocity.xy_is_zero()
    assert second[0].position.x == pytest.approx(sign * 600)
    assert second[0].velocity.x == pytest.approx(sign * 1000)


def test_robots_track_shared_ball_independently(scene_and_bodies):
    scene, bodies = scene_and_bodies
    ball = scene.add_ball(0.0, 0.0, 0.05)
    shared = SharedBall(ball)
    clock = ManualClock(0)
    robot_a = SimulatedRobot(scene, bodies[1], shared, robots_per_team=ROBOTS_PER_TEAM, clock=clock)
    robot_b = SimulatedRobot(scene, bodies[4], shared, robots_per_team=ROBOTS_PER_TEAM, clock=clock)

    robot_a.get_world_state()
    ball.position = [0.1, 0.0, 0.05]
    clock.advance(100)
    a_state = robot_a.get_world_state()
    b_state = robot_b.get_world_state()

    assert a_state.balls[0].velocity.x == pytest.approx(-1000)
    # robot b sees the ball for the first time
    assert b_state.balls[0].velocity.xy_is_zero()


def test_replacing_the_ball_restarts_velocity_estimate(scene_and_bodies):
    scene, bodies = scene_and_bodies
    shared = SharedBall(scene.add_ball(0.0, 0.0, 0.05))
    clock = ManualClock(0)
    robot = SimulatedRobot(scene, bodies[4], shared, robots_per_team=ROBOTS_PER_TEAM, clock=clock)
    robot.get_world_state()

    shared.set(scene.add_ball(2.0, 0.0, 0.05))
    clock.advance(10)

    assert robot.get_world_state().balls[0].velocity.xy_is_zero()


def test_world_state_on_3d_backend_writes_ball_velocity(scene_and_bodies):
    scene, bodies = scene_and_bodies
    ball = scene.add_ball(0.0, 0.0, 0.05)
    ball.velocity = [1.0, 0.0, 0.0]
    clock = ManualClock(0)
    robot = make_robot(scene, bodies[4], ball_handle=ball, clock=clock)

    robot.get_world_state()
    ball.position = [0.01, 0.0, 0.05]
    clock.advance(10)
    robot.get_world_state()

    assert len(scene.set_velocity_calls) == 1
    vx, vy, vz = scene.set_velocity_calls[0]
    assert math.hypot(vx, vy) == pytest.approx(1.0)
    assert vz == 0.0


# ===========================================================================
# odometry and absolute ball position
# ===========================================================================


def test_odometry_from_pose(scene_and_bodies, first_team):
    scene, bodies = scene_and_bodies
    robot = make_robot(scene, bodies[own_number(first_team)])

    odometry = robot.get_odometry_data(Pose2D.from_xy(1000, 0, 0))

    assert isinstance(odometry, OdometryData)
    expected = Pose2D.from_xy(-1000, 0, math.pi) if first_team else Pose2D.from_xy(1000, 0, 0)
    assert odometry.is_close(expected)


def test_absolute_ball_position_is_raw(scene_and_bodies, first_team):
    scene, bodies = scene_and_bodies
    ball = scene.add_ball(1.0, -0.5, 0.05)
    robot = make_robot(scene, bodies[own_number(first_team)], ball_handle=ball)

    assert robot.get_absolute_ball_position() == Vector2D(1000, -500)


# ===========================================================================
# placement commands
# ===========================================================================


def test_move_robot_per_team_round_trips_with_read(scene_and_bodies, first_team):
    scene, bodies = scene_and_bodies
    robot = make_robot(scene, bodies[own_number(first_team)])
    target = Pose2D.from_xy(-1500, 700, math.pi / 6)

    robot.move_robot_per_team(Vector3D(target.x, target.y, 320), Vector3D(0, 0, target.rotation))

    assert robot.get_robot_pose().is_close(target)
    body = bodies[own_number(first_team)]
    assert body.position[2] == pytest.approx(0.32)
    assert body.reset_count == 1


def test_move_robot_without_rotation_keeps_orientation(scene_and_bodies):
    scene, bodies = scene_and_bodies
    robot = make_robot(scene, bodies[4])
    orientation_before = bodies[4].orientation

    robot.move_robot(Vector3D(0, 0, 300), Vector3D(0, 0, 1.0), change_rotation=False, reset_dynamics=False)

    assert bodies[4].orientation is orientation_before
    assert bodies[4].reset_count == 0


def test_move_robot_on_2d_backend_passes_heading():
    scene, bodies = build_scene(Backend.TWO_D)
    robot = make_robot(scene, bodies[1], backend=Backend.TWO_D)

    robot.move_robot_per_team(Vector3D(500, 0, 0), Vector3D(0, 0, 0))

    assert bodies[1].position == pytest.approx([-0.5, 0.0, 0.0])
    assert bodies[1].orientation == pytest.approx(math.pi)


def test_move_ball_per_team(scene_and_bodies, first_team):
    scene, bodies = scene_and_bodies
    ball = scene.add_ball()
    ball.velocity = [1.0, 1.0, 0.0]
    robot = make_robot(scene, bodies[own_number(first_team)], ball_handle=ball)

    robot.move_ball_per_team(Vector3D(1000, 2000, 50))

    sign = -1 if first_team else 1
    assert ball.position == pytest.approx([sign * 1.0, sign * 2.0, 0.05])
    assert ball.velocity == [0.0, 0.0, 0.0]


def test_move_ball_without_ball_does_nothing(scene_and_bodies):
    scene, bodies = scene_and_bodies
    robot = make_robot(scene, bodies[1])

    robot.move_ball_per_team(Vector3D(0, 0, 0))  # should not raise


# ===========================================================================
# apply_ball_friction
# ===========================================================================


def make_2d_robot_with_ball(velocity, sim_step_length_ms=10):
    scene, bodies = build_scene(Backend.TWO_D)
    ball = scene.add_ball()
    ball.velocity = list(velocity)
    robot = make_robot(scene, bodies[1], ball_handle=ball, backend=Backend.TWO_D, sim_step_length_ms=sim_step_length_ms)
    return scene, ball, robot


def test_friction_slows_ball_along_its_direction():
    _, ball, robot = make_2d_robot_with_ball([3.0, 4.0])

    robot.apply_ball_friction(10.0)  # 0.1 m/s per 10 ms step

    assert math.hypot(*ball.velocity) == pytest.approx(4.9)
    assert ball.velocity[0] / ball.velocity[1] == pytest.approx(0.75)


def test_friction_stops_ball_instead_of_reversing():
    _, ball, robot = make_2d_robot_with_ball([0.05, -0.02])

    robot.apply_ball_friction(10.0)

    assert ball.velocity == [0.0, 0.0]


def test_friction_on_ball_at_rest_keeps_it_at_rest():
    _, ball, robot = make_2d_robot_with_ball([0.0, 0.0])

    robot.apply_ball_friction()

    assert ball.velocity == [0.0, 0.0]


def test_friction_is_not_applied_on_3d_backend(scene_and_bodies):
    scene, bodies = scene_and_bodies
    ball = scene.add_ball()
    ball.velocity = [1.0, 0.0, 0.0]
    robot = make_robot(scene, bodies[1], ball_handle=ball)

    robot.apply_ball_friction(10.0)

    assert ball.velocity == [1.0, 0.0, 0.0]
    assert scene.set_velocity_calls == []


def test_negative_friction_rejected():
    _, _, robot = make_2d_robot_with_ball([1.0, 0.0])

    with pytest.raises(AssertionError):
        robot.apply_ball_friction(-1.0)
