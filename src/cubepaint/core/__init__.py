"""
Core modules for cubepaint.

This package contains the fundamental components:
- Face labels and roll permutations
- The puzzle model and its error kinds
- Configuration management
"""

from cubepaint.core.rotation import (
    Face,
    RollAxis,
    NUM_FACES,
    ROLL_MATRICES,
    ROLL_PERMUTATIONS,
    face_permutation,
    get_roll_permutation,
    apply_roll,
)

from cubepaint.core.model import CubeModel, ErrorCode, CubeModelError, OutOfRangeError, IllegalMoveError

from cubepaint.core.config import Config, PuzzleConfig, SessionConfig, load_config, create_default_config, validate_config

__all__ = [
    "Face",
    "RollAxis",
    "NUM_FACES",
    "ROLL_MATRICES",
    "ROLL_PERMUTATIONS",
    "face_permutation",
    "get_roll_permutation",
    "apply_roll",
    "CubeModel",
    "ErrorCode",
    "CubeModelError",
    "OutOfRangeError",
    "IllegalMoveError",
    "Config",
    "PuzzleConfig",
    "SessionConfig",
    "load_config",
    "create_default_config",
    "validate_config",
]
