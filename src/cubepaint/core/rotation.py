"""
Face labels and roll permutations of the painted cube.

Frame: +x points toward higher columns, +y toward higher rows, +z up.
A roll is a quarter turn about a horizontal axis; the permutation it induces
on the six face slots is derived once from the rotation matrix acting on the
face normals and cached in ROLL_PERMUTATIONS.
"""

from enum import Enum, IntEnum
from typing import Dict, Tuple

import numpy as np


class Face(IntEnum):
    """Fixed physical face slots. They never rotate with the cube."""
    FRONT = 0   # toward row 0
    BACK = 1    # toward the last row
    LEFT = 2    # toward column 0
    RIGHT = 3   # toward the last column
    BOTTOM = 4
    TOP = 5


NUM_FACES = len(Face)


class RollAxis(Enum):
    """Grid direction a roll travels along"""
    VERTICAL = "vertical"      # changes the row
    HORIZONTAL = "horizontal"  # changes the column


# Outward normal of every face slot, indexed by Face
FACE_NORMALS = np.array([
    [0, -1, 0],   # FRONT
    [0, 1, 0],    # BACK
    [-1, 0, 0],   # LEFT
    [1, 0, 0],    # RIGHT
    [0, 0, -1],   # BOTTOM
    [0, 0, 1],    # TOP
], dtype=int)

# Rotate 90 degrees about X: top tips toward row 0
Rx90 = np.array([
    [1, 0, 0],
    [0, 0, -1],
    [0, 1, 0]
], dtype=int)

# Rotate 90 degrees about Y: top tips toward the last column
Ry90 = np.array([
    [0, 0, 1],
    [0, 1, 0],
    [-1, 0, 0]
], dtype=int)


# Keyed by (axis, direction) where direction is current - target along that axis
ROLL_MATRICES: Dict[Tuple[RollAxis, int], np.ndarray] = {
    (RollAxis.VERTICAL, 1): Rx90,  # toward row 0
    (RollAxis.VERTICAL, -1): Rx90.T,  # toward the last row
    (RollAxis.HORIZONTAL, -1): Ry90,  # toward the last column
    (RollAxis.HORIZONTAL, 1): Ry90.T,  # toward column 0
}


def face_permutation(rot_matrix: np.ndarray) -> np.ndarray:
    """
    Build the source-index permutation of a rigid rotation.

    The paint held by face i ends up on face j where R @ n_i == n_j, so the
    returned array satisfies ``new_faces = old_faces[perm]``.

    Args:
        rot_matrix: 3x3 integer rotation matrix (a cube symmetry)

    Returns:
        Integer array of length 6 with perm[j] = i
    """
    rotated = FACE_NORMALS @ rot_matrix.T
    perm = np.full(NUM_FACES, -1, dtype=int)
    for i, normal in enumerate(rotated):
        matches = np.flatnonzero(np.all(FACE_NORMALS == normal, axis=1))
        if len(matches) != 1:
            raise ValueError("Matrix does not map cube faces onto cube faces")
        perm[matches[0]] = i
    return perm


# Precomputed face permutations for the four rolls
ROLL_PERMUTATIONS: Dict[Tuple[RollAxis, int], np.ndarray] = {
    key: face_permutation(matrix) for key, matrix in ROLL_MATRICES.items()
}


def get_roll_permutation(axis: RollAxis, direction: int) -> np.ndarray:
    """
    Get the face permutation for a roll.
    direction: +1 or -1, computed as current - target coordinate
    """
    try:
        return ROLL_PERMUTATIONS[(axis, direction)]
    except KeyError:
        raise ValueError(f"Roll direction must be +1 or -1, got {direction}") from None


def apply_roll(faces: np.ndarray, axis: RollAxis, direction: int) -> np.ndarray:
    """Return the face paints after one roll; the input array is left untouched."""
    return faces[get_roll_permutation(axis, direction)]
