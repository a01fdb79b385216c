from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from sim_world_state.entities.data.pose import Pose2D
from sim_world_state.entities.data.vector import Vector2D


@dataclass(frozen=True)
class SetupPose:
    """The pose of a robot before entering the field (global field coordinates, mm)."""

    player_number: int
    position: Vector2D
    turned_towards: Vector2D

    def to_pose(self) -> Pose2D:
        """Pose at `position`, facing `turned_towards`."""
        return Pose2D(self.position.angle_to(self.turned_towards), self.position)


@dataclass
class SetupPoses:
    """Poses from which the robots enter the pitch. The list is not ordered by player number."""

    poses: List[SetupPose] = field(default_factory=list)

    @classmethod
    def from_tuples(cls, entries: Iterable[Tuple[int, Tuple[float, float], Tuple[float, float]]]) -> "SetupPoses":
        return cls([SetupPose(number, Vector2D(position), Vector2D(towards)) for number, position, towards in entries])

    def get_pose_of_robot(self, number: int) -> SetupPose:
        """Find the setup pose of a player.

        If the list has only one entry, this entry is returned no matter which number the robot has
        (used by demos and tests with a single robot).

        Args:
            number (int): The player number, starting with 1.

        Returns:
            SetupPose: The pose for setup.
        """
        assert self.poses, "No setup poses configured."
        if len(self.poses) == 1:
            return self.poses[0]
        for pose in self.poses:
            if pose.player_number == number:
                return pose
        raise AssertionError(f"No setup pose configured for player {number}.")
