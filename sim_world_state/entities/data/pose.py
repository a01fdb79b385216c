import math
from dataclasses import dataclass, field

from sim_world_state.entities.data.vector import Vector2D
from sim_world_state.global_utils.math_utils import angle_difference, normalise_heading

# translation: millimeters
# rotation: radians


@dataclass(frozen=True)
class Pose2D:
    """A rigid 2D transform: rotation about the origin followed by a translation.

    `a + b` applies `b` in the frame of `a`, so `Pose2D(math.pi) + p` rotates `p` by 180 degrees
    about the field centre.
    """

    rotation: float = 0.0
    translation: Vector2D = field(default_factory=lambda: Vector2D(0.0, 0.0))

    def __post_init__(self):
        object.__setattr__(self, "rotation", normalise_heading(self.rotation))

    @classmethod
    def from_xy(cls, x: float, y: float, rotation: float = 0.0) -> "Pose2D":
        return cls(rotation, Vector2D(x, y))

    def __add__(self, other: "Pose2D") -> "Pose2D":
        return Pose2D(
            self.rotation + other.rotation,
            self.translation + other.translation.rotate(self.rotation),
        )

    def inverse(self) -> "Pose2D":
        return Pose2D(-self.rotation, (-self.translation).rotate(-self.rotation))

    def is_close(self, other: "Pose2D", abs_tol: float = 1e-6) -> bool:
        """Compares translation and rotation, treating π and -π as the same heading."""
        rotation_diff = angle_difference(self.rotation, other.rotation)
        return (
            math.isclose(self.translation.x, other.translation.x, abs_tol=abs_tol)
            and math.isclose(self.translation.y, other.translation.y, abs_tol=abs_tol)
            and abs(rotation_diff) <= abs_tol
        )

    @property
    def x(self) -> float:
        return self.translation.x

    @property
    def y(self) -> float:
        return self.translation.y


FIELD_ROTATION = Pose2D(math.pi)
