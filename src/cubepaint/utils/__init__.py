"""
Utility modules for cubepaint.
"""

from .logger import SessionLogger
from .display import StatusDisplay, render_board, render_faces, print_model

__all__ = ["SessionLogger", "StatusDisplay", "render_board", "render_faces", "print_model"]
