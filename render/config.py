"""
Render configuration for the TicTacToe game.
All the settings for the window, colors, and drawing.
"""

import cv2

from logic.board import BOARD_SIZE, CELL_WIDTH, CELL_HEIGHT, SCREEN_WIDTH_PX, SCREEN_HEIGHT_PX


class RenderConfig:
    """
    Configuration class for render settings.
    Instances may override any value (e.g. from command line flags).
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe game"
    SCREEN_WIDTH = SCREEN_WIDTH_PX
    SCREEN_HEIGHT = SCREEN_HEIGHT_PX

    # Update loop period in milliseconds (~60 FPS)
    FPS = 60
    TICK_MS = 1000 // FPS

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = BOARD_SIZE
    CELL_WIDTH = CELL_WIDTH
    CELL_HEIGHT = CELL_HEIGHT

    # ==================== COLORS (BGR) ====================
    BACKGROUND_COLOR = (0, 0, 0)        # Black
    GRID_COLOR = (255, 255, 255)        # White
    PLAYER_X_COLOR = (135, 74, 32)      # Blue
    PLAYER_O_COLOR = (22, 210, 115)     # Green
    TIE_COLOR = (0, 165, 255)           # Orange
    CAPTION_BG_COLOR = (40, 40, 40)

    # ==================== DRAWING ====================
    GRID_THICKNESS = 2
    MARK_THICKNESS = 6
    WIN_LINE_THICKNESS = 8

    # Half size of the X / radius of the O, relative to the cell
    MARK_SCALE = 0.25

    # ==================== CAPTION ====================
    SHOW_CAPTION = True
    CAPTION_FONT = cv2.FONT_HERSHEY_SIMPLEX
    CAPTION_SCALE = 0.8
    CAPTION_THICKNESS = 2
    CAPTION_MARGIN = 12

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False

    def set_fps(self, fps: int):
        """Change the update rate."""
        if fps <= 0:
            raise ValueError(f"FPS must be positive, got {fps}")
        self.FPS = fps
        self.TICK_MS = max(1, 1000 // fps)
