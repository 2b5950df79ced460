"""
Puzzle controller - turns user actions into model calls.
"""

from dataclasses import dataclass
from typing import Optional

from cubepaint.core.config import Config
from cubepaint.core.model import CubeModel, CubeModelError, ErrorCode
from cubepaint.generator import PuzzleGenerator
from cubepaint.utils.logger import SessionLogger


@dataclass
class MoveResult:
    """Outcome of one click"""
    success: bool
    error: ErrorCode
    solved: bool = False
    message: str = ""


class PuzzleController:
    """Sets up and monitors puzzles until the session ends."""

    def __init__(self, config: Optional[Config] = None,
                 model: Optional[CubeModel] = None,
                 generator: Optional[PuzzleGenerator] = None,
                 logger: Optional[SessionLogger] = None):
        self.config = config or Config()
        self.model = model or CubeModel()
        self.generator = generator or PuzzleGenerator(
            seed=self.config.puzzle.seed,
            paint_probability=self.config.puzzle.paint_probability,
        )
        self.logger = logger
        self.side = self.config.puzzle.side
        self._done = False
        self.new_puzzle()

    @property
    def is_done(self) -> bool:
        """True iff a move has solved the current puzzle."""
        return self._done

    def new_puzzle(self):
        """Replace the current puzzle with a random one of the current size."""
        self.generator.initialize(self.model, self.side)
        self._done = False
        self._log("initial", side=self.side, seed=self.generator.seed,
                  cube=[self.model.cube_row(), self.model.cube_col()])

    def set_seed(self, seed: Optional[int]):
        """Reseed the puzzle source. Takes effect from the next new puzzle."""
        self.generator.set_seed(seed)

    def set_size(self, side: int):
        """Switch to SIDE x SIDE boards and start a new puzzle."""
        if not isinstance(side, int) or side <= 2:
            raise ValueError(f"Board side must be an integer greater than 2, got {side}")
        self.side = side
        self.new_puzzle()

    def click(self, row: int, col: int) -> MoveResult:
        """
        Try to roll the cube to (ROW, COL).

        Off-board and non-adjacent targets are ignored: the model is left
        unchanged and a failed result is returned.
        """
        if self._done:
            return MoveResult(success=False, error=ErrorCode.OK, solved=True,
                              message="Puzzle already solved")

        try:
            self.model.move(row, col)
        except CubeModelError as e:
            self._log("rejected", target=[row, col], error=str(e))
            return MoveResult(success=False, error=e.error, message=str(e))

        self._log("move", target=[row, col])
        if self.model.all_faces_painted():
            self._done = True
            message = "Finished in %d moves." % self.model.moves()
            self._log("solved", message=message)
            return MoveResult(success=True, error=ErrorCode.OK, solved=True, message=message)

        return MoveResult(success=True, error=ErrorCode.OK)

    def _log(self, step_type: str, **data):
        if self.logger is not None:
            self.logger.log_step(self.model.moves(), {"step_type": step_type, **data},
                                 verbose=self.config.session.verbose)
