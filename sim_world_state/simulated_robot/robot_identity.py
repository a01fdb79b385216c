import abc
import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from sim_world_state.config.enums import ObjectKind
from sim_world_state.config.settings import (
    PLAYER_NAME_PREFIX_LENGTH,
    ROBOTS_PER_TEAM,
    SCENE_GROUP_EXTRAS,
    SCENE_GROUP_ROBOTS,
)
from sim_world_state.sim_interface.scene import AbstractSimScene, SceneHandle

logger = logging.getLogger(__name__)


def parse_player_number(full_name: str, prefix_length: int = PLAYER_NAME_PREFIX_LENGTH) -> int:
    """Extracts the player number from a name like "RoboCup.robots.robot3".

    The number is whatever follows the last "." and a fixed-length prefix.
    """
    suffix = full_name[full_name.rfind(".") + 1 + prefix_length :]
    assert suffix.isdigit(), f"Scene object name {full_name!r} does not end in a player number"
    return int(suffix)


class PlayerNumberResolver(abc.ABC):
    """Maps scene objects to player numbers and teams.

    Player numbers 1..robots_per_team belong to the first team, the following robots_per_team
    numbers to the second team.
    """

    def __init__(self, robots_per_team: int = ROBOTS_PER_TEAM):
        assert robots_per_team >= 1, "A team needs at least one robot."
        self.robots_per_team = robots_per_team

    @abc.abstractmethod
    def player_number_of(self, obj: SceneHandle) -> int:
        """Raw player number of a robot, in [1, 2 * robots_per_team]."""
        ...

    def is_first_team(self, obj: SceneHandle) -> bool:
        return self.player_number_of(obj) <= self.robots_per_team

    def team_number_of(self, obj: SceneHandle) -> int:
        """Player number within the robot's own team, starting at 1 for both teams."""
        number = self.player_number_of(obj)
        return number if number <= self.robots_per_team else number - self.robots_per_team


class NameSuffixResolver(PlayerNumberResolver):
    """Reads the player number from the trailing digits of the object's full scene name."""

    def __init__(
        self,
        scene: AbstractSimScene,
        robots_per_team: int = ROBOTS_PER_TEAM,
        prefix_length: int = PLAYER_NAME_PREFIX_LENGTH,
    ):
        super().__init__(robots_per_team)
        self._scene = scene
        self._prefix_length = prefix_length

    def player_number_of(self, obj: SceneHandle) -> int:
        return parse_player_number(self._scene.get_full_name(obj), self._prefix_length)


@dataclass(frozen=True)
class RosterEntry:
    handle: SceneHandle
    number: int  # raw player number
    team_number: int  # starts at 1 in both teams


@dataclass
class Roster:
    """Other robots in the scene, split by team. Lists keep scene enumeration order, not number order."""

    first_team: List[RosterEntry] = field(default_factory=list)
    second_team: List[RosterEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.first_team) + len(self.second_team)


def build_roster(
    scene: AbstractSimScene,
    resolver: PlayerNumberResolver,
    own_number: int,
    groups: Sequence[str] = (SCENE_GROUP_ROBOTS, SCENE_GROUP_EXTRAS),
) -> Roster:
    """Collects every robot of the given scene groups except the one numbered own_number."""
    roster = Roster()
    for group_path in groups:
        group = scene.resolve_object(group_path, ObjectKind.COMPOUND)
        assert group is not None, f"Scene group {group_path!r} not found"
        for index in range(scene.get_object_child_count(group)):
            robot = scene.get_object_child(group, index)
            number = resolver.player_number_of(robot)
            if number == own_number:
                continue
            entry = RosterEntry(robot, number, resolver.team_number_of(robot))
            if resolver.is_first_team(robot):
                roster.first_team.append(entry)
            else:
                roster.second_team.append(entry)

    logger.info(
        "Robot %d sees %d first team and %d second team robots",
        own_number,
        len(roster.first_team),
        len(roster.second_team),
    )
    return roster
