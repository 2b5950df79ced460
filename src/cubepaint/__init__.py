"""
cubepaint: the Painted Cube puzzle

A cube, some of whose six faces are painted, sits on a square grid of cells
that may also be painted. Rolling the cube onto an adjacent cell swaps the
paint of its bottom face with the paint of that cell. The puzzle is solved
when every face of the cube is painted.

Example Usage:
```python
from cubepaint import CubeModel

model = CubeModel()
model.initialize(4, 1, 1, painted, face_painted)
model.move(0, 1)
model.all_faces_painted()
```

Command-line Usage:
```bash
cubepaint play --side 5 --seed 7
cubepaint create-config --output config.yaml
```
"""

from cubepaint.core.model import CubeModel, ErrorCode, CubeModelError, OutOfRangeError, IllegalMoveError
from cubepaint.core.rotation import Face
from cubepaint.core.config import Config, load_config, validate_config
from cubepaint.generator import PuzzleGenerator
from cubepaint.controller import PuzzleController, MoveResult

__version__ = "0.1.0"

__all__ = [
    "CubeModel",
    "ErrorCode",
    "CubeModelError",
    "OutOfRangeError",
    "IllegalMoveError",
    "Face",
    "Config",
    "load_config",
    "validate_config",
    "PuzzleGenerator",
    "PuzzleController",
    "MoveResult",
]
