import math

import numpy as np


def normalise_heading(angle: float) -> float:
    """Normalize an angle to the range [-π, π] radians, where 0 faces along positive x-axis.

    Parameters
    ----------
    angle : float
        The angle in radians to be normalized. The input angle can be any real number.

    Returns
    -------
    float
        The normalized angle in the range [-π, π] radians. An input of exactly π stays π.
    """
    return math.remainder(angle, 2 * math.pi)


def angle_difference(a: float, b: float) -> float:
    """Shortest signed angular difference a - b, in [-π, π]."""
    return normalise_heading(a - b)


def rotation_matrix_from_euler(rx: float, ry: float, rz: float) -> np.ndarray:
    """Builds a 3x3 rotation matrix from rotations about the x, y and z axes (radians).

    The rotations are applied in x, y, z order, i.e. R = Rz @ Ry @ Rx.
    """
    cx, sx = np.cos(rx), np.sin(rx)
    cy, sy = np.cos(ry), np.sin(ry)
    cz, sz = np.cos(rz), np.sin(rz)
    rot_x = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
    rot_y = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    rot_z = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])
    return rot_z @ rot_y @ rot_x


def yaw_from_rotation_matrix(rotation: np.ndarray) -> float:
    """Heading of the body x-axis projected onto the ground plane, in [-π, π]."""
    return float(np.arctan2(rotation[1][0], rotation[0][0]))
