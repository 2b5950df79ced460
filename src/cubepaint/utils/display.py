"""
Console display utilities for cubepaint.
"""

from typing import Any, Dict, List
from datetime import datetime

from cubepaint.core.model import CubeModel
from cubepaint.core.rotation import Face


class StatusDisplay:
    """Handles status display for different operations."""

    @staticmethod
    def print_header(title: str, width: int = 60):
        """Print a formatted header."""
        print("\n" + "=" * width)
        print(f"{title:^{width}}")
        print("=" * width)

    @staticmethod
    def print_section(title: str, width: int = 60):
        """Print a section header."""
        print(f"\n📋 {title}")
        print("-" * width)

    @staticmethod
    def print_config(config_dict: Dict[str, Any], title: str = "Configuration"):
        """Print a (nested) configuration dictionary."""
        StatusDisplay.print_section(title)
        for section, values in config_dict.items():
            if isinstance(values, dict):
                print(f"  [{section}]")
                for key, value in values.items():
                    print(f"    {key:<18} : {value}")
            else:
                print(f"  {section:<20} : {values}")

    @staticmethod
    def print_status(message: str, status: str = "info"):
        """Print a status message with appropriate emoji."""
        icons = {
            "info": "ℹ️",
            "success": "✅",
            "warning": "⚠️",
            "error": "❌",
        }
        icon = icons.get(status, "ℹ️")
        timestamp = datetime.now().strftime("%H:%M:%S")
        print(f"{icon} [{timestamp}] {message}")


def render_board(model: CubeModel) -> List[str]:
    """
    Top view of the board, row 0 first.

    '#' painted cell, '.' blank cell; the cube cell shows '@' if the cell
    under the cube is painted and 'o' otherwise.
    """
    side = model.side()
    lines = ["    " + " ".join(f"{c:>2}" for c in range(side))]
    for r in range(side):
        cells = []
        for c in range(side):
            painted = model.is_painted_square(r, c)
            if (r, c) == (model.cube_row(), model.cube_col()):
                cells.append(" @" if painted else " o")
            else:
                cells.append(" #" if painted else " .")
        lines.append(f"{r:>3} " + " ".join(cells))
    return lines


def render_faces(model: CubeModel) -> str:
    """One-line summary of the face paints, e.g. 'FRONT:# BACK:. ...'"""
    return " ".join(
        f"{face.name}:{'#' if model.is_painted_face(face) else '.'}" for face in Face
    )


def print_model(model: CubeModel):
    """Print board, faces and move count."""
    for line in render_board(model):
        print(line)
    print(f"Faces: {render_faces(model)}")
    print(f"Moves: {model.moves()}")
