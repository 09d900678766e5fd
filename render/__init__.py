"""
Render module for the TicTacToe game.
Handles window settings and drawing the board.
"""

from .config import RenderConfig
from .board_renderer import BoardRenderer
