"""
Painted Cube puzzle - core state.

A cube with paint on some faces sits on one cell of a square grid, some of
whose cells are painted. Rolling the cube onto an adjacent cell permutes the
face paints and swaps the bottom face's paint with the cell's paint. The
puzzle is solved once all six faces are painted.
"""

from enum import Enum
from typing import Callable, List, Optional, Sequence

import numpy as np

from cubepaint.core.rotation import Face, NUM_FACES, RollAxis, apply_roll


class ErrorCode(Enum):
    """Error codes"""
    OK = "OK"
    OUT_OF_RANGE = "OutOfRange"
    ILLEGAL_MOVE = "IllegalMove"


class CubeModelError(ValueError):
    """Base error raised by CubeModel operations."""
    error: ErrorCode = ErrorCode.OK


class OutOfRangeError(CubeModelError):
    """A coordinate lies outside the grid (or a face index outside 0..5)."""
    error = ErrorCode.OUT_OF_RANGE


class IllegalMoveError(CubeModelError):
    """The target cell is not orthogonally adjacent to the cube."""
    error = ErrorCode.ILLEGAL_MOVE


Observer = Callable[["CubeModel"], None]


class CubeModel:
    """
    Models an instance of the Painted Cube puzzle.

    Any callable may observe the model through add_observer; observers are
    called with the model after every successful initialize, copy_from or move.
    """

    DEFAULT_SIDE = 4

    def __init__(self):
        """A blank puzzle of size 4 with the cube at (0, 0)."""
        self._observers: List[Observer] = []
        self._side = 0
        self._row0 = 0
        self._col0 = 0
        self._moves = 0
        self._painted = np.zeros((0, 0), dtype=bool)
        self._face_painted = np.zeros(NUM_FACES, dtype=bool)
        self.initialize(self.DEFAULT_SIDE, 0, 0,
                        np.zeros((self.DEFAULT_SIDE, self.DEFAULT_SIDE), dtype=bool))

    @classmethod
    def copy(cls, other: "CubeModel") -> "CubeModel":
        """A new model holding a copy of OTHER's puzzle (observers are not copied)."""
        model = cls()
        model.copy_from(other)
        return model

    def initialize(self, side: int, row0: int, col0: int,
                   painted: Sequence[Sequence[bool]],
                   face_painted: Optional[Sequence[bool]] = None):
        """
        Start a SIDE x SIDE puzzle with the cube at ROW0, COL0.

        Args:
            side: grid side length, > 2
            row0, col0: starting cube cell, 0 <= row0, col0 < side
            painted: side x side pattern, cell (r, c) painted iff painted[r][c]
            face_painted: 6 flags indexed by Face; None means a blank cube
        """
        grid = np.array(painted, dtype=bool)
        faces = (np.zeros(NUM_FACES, dtype=bool) if face_painted is None
                 else np.array(face_painted, dtype=bool))
        assert side > 2, f"side must be > 2, got {side}"
        assert grid.shape == (side, side), f"grid must be {side}x{side}, got {grid.shape}"
        assert 0 <= row0 < side and 0 <= col0 < side, f"cube cell ({row0}, {col0}) off the grid"
        assert faces.shape == (NUM_FACES,), f"need {NUM_FACES} face flags, got {faces.shape}"

        self._side = side
        self._row0 = row0
        self._col0 = col0
        self._moves = 0
        self._painted = grid
        self._face_painted = faces
        self._notify()

    def copy_from(self, other: "CubeModel"):
        """Make this model a copy of OTHER. Later moves on either do not affect the other."""
        self._side = other.side()
        self._row0 = other.cube_row()
        self._col0 = other.cube_col()
        self._painted = other._painted.copy()
        self._face_painted = other._face_painted.copy()
        self._moves = other.moves()
        self._notify()

    def move(self, row: int, col: int):
        """
        Roll the cube to (ROW, COL).

        The target must be on the board and vertically or horizontally
        adjacent to the current cube cell. Transfers paint per the rules.

        Raises:
            OutOfRangeError: target is off the board
            IllegalMoveError: target is not adjacent to the cube
        """
        self._check_square(row, col)

        if abs(self._row0 - row) == 1 and self._col0 == col:
            faces = apply_roll(self._face_painted, RollAxis.VERTICAL, self._row0 - row)
        elif self._row0 == row and abs(self._col0 - col) == 1:
            faces = apply_roll(self._face_painted, RollAxis.HORIZONTAL, self._col0 - col)
        else:
            raise IllegalMoveError("Illegal cube movement!")

        self._face_painted = faces
        self._row0 = row
        self._col0 = col
        self._swap_bottom()
        self._moves += 1
        self._notify()

    def _swap_bottom(self):
        """Exchange the bottom face paint with the paint of the cube's cell."""
        r, c = self._row0, self._col0
        bottom = self._face_painted[Face.BOTTOM]
        self._face_painted[Face.BOTTOM] = self._painted[r, c]
        self._painted[r, c] = bottom

    def _check_square(self, row: int, col: int):
        if not (0 <= row < self._side and 0 <= col < self._side):
            raise OutOfRangeError("Square out of range!")

    # Queries

    def side(self) -> int:
        """Number of squares on a side."""
        return self._side

    def cube_row(self) -> int:
        return self._row0

    def cube_col(self) -> int:
        return self._col0

    def moves(self) -> int:
        """Number of moves made on the current puzzle."""
        return self._moves

    def is_painted_square(self, row: int, col: int) -> bool:
        """True iff square ROW, COL is painted. Requires 0 <= ROW, COL < side."""
        self._check_square(row, col)
        return bool(self._painted[row, col])

    def is_painted_face(self, face: int) -> bool:
        """True iff face FACE (see Face) of the cube is painted."""
        if not 0 <= face < NUM_FACES:
            raise OutOfRangeError(f"Face must be 0-{NUM_FACES - 1}, got {face}")
        return bool(self._face_painted[face])

    def all_faces_painted(self) -> bool:
        """True iff all six faces are painted."""
        return bool(self._face_painted.all())

    def painted_count(self) -> int:
        """Painted cells plus painted faces. A move never changes it."""
        return int(self._painted.sum() + self._face_painted.sum())

    # Observers

    def add_observer(self, observer: Observer):
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: Observer):
        if observer in self._observers:
            self._observers.remove(observer)

    def count_observers(self) -> int:
        return len(self._observers)

    def _notify(self):
        for observer in list(self._observers):
            observer(self)
