"""
Random puzzle source - picks the board paint pattern, cube cell and face paints.
"""

from typing import Optional, Tuple

import numpy as np

from cubepaint.core.model import CubeModel
from cubepaint.core.rotation import NUM_FACES


class PuzzleGenerator:
    """Pseudo-random source of new puzzles."""

    def __init__(self, seed: Optional[int] = None, paint_probability: float = 0.5):
        """
        Args:
            seed: random seed (for reproducibility); None draws fresh entropy
            paint_probability: chance that any single cell or face starts painted
        """
        self.paint_probability = paint_probability
        self.seed = None
        self.set_seed(seed)

    def set_seed(self, seed: Optional[int]):
        """
        Reseed the source. The same seed replays the same puzzle sequence.

        Raises:
            ValueError: seed is negative; the current sequence is kept
        """
        if seed is not None and (not isinstance(seed, (int, np.integer)) or seed < 0):
            raise ValueError(f"seed must be a non-negative integer, got {seed}")
        self._rng = np.random.default_rng(seed)
        self.seed = seed

    def random_grid(self, side: int) -> np.ndarray:
        """side x side paint pattern"""
        return self._rng.random((side, side)) < self.paint_probability

    def random_faces(self) -> np.ndarray:
        """Paint flags for the six faces"""
        return self._rng.random(NUM_FACES) < self.paint_probability

    def random_cell(self, side: int) -> Tuple[int, int]:
        """A cell on the board"""
        row, col = self._rng.integers(0, side, size=2)
        return int(row), int(col)

    def initialize(self, model: CubeModel, side: int):
        """Fill MODEL with a fresh random puzzle on a SIDE x SIDE board."""
        if side <= 2:
            raise ValueError(f"Board side must be greater than 2, got {side}")
        row0, col0 = self.random_cell(side)
        model.initialize(side, row0, col0, self.random_grid(side), self.random_faces())
