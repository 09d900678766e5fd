"""
Board renderer for the TicTacToe game.
Paints grid lines and X / O marks from a board snapshot using OpenCV.
"""

import cv2
import numpy as np
from typing import Optional, Tuple

from logic.board import Cell, Status
from logic.game_state import BoardSnapshot
from .config import RenderConfig


Color = Tuple[int, int, int]


class BoardRenderer:
    """
    Draws the game into a BGR image.
    Only reads the snapshot, never changes game state.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Render configuration. Uses defaults if not provided.
        """
        self.config = config or RenderConfig()

        # Every status needs a grid color
        self.status_colors = {
            Status.RUNNING: self.config.GRID_COLOR,
            Status.PLAYER_X_WON: self.config.PLAYER_X_COLOR,
            Status.PLAYER_O_WON: self.config.PLAYER_O_COLOR,
            Status.TIE: self.config.TIE_COLOR,
        }
        self.mark_colors = {
            Cell.PLAYER_X: self.config.PLAYER_X_COLOR,
            Cell.PLAYER_O: self.config.PLAYER_O_COLOR,
        }

    def grid_color_for(self, status: Status) -> Color:
        """Get the grid line color for a game status."""
        return self.status_colors[status]

    def draw(self, snapshot: BoardSnapshot) -> np.ndarray:
        """
        Render the whole game.

        Args:
            snapshot: Read-only view of the game.

        Returns:
            BGR image of size SCREEN_HEIGHT x SCREEN_WIDTH.
        """
        cfg = self.config
        frame = np.zeros((cfg.SCREEN_HEIGHT, cfg.SCREEN_WIDTH, 3), dtype=np.uint8)
        frame[:] = cfg.BACKGROUND_COLOR

        self._draw_grid(frame, self.grid_color_for(snapshot.status))

        for row in range(cfg.BOARD_SIZE):
            for col in range(cfg.BOARD_SIZE):
                cell = snapshot.cell_at(row, col)
                if cell == Cell.PLAYER_X:
                    self._draw_x(frame, row, col, self.mark_colors[cell])
                elif cell == Cell.PLAYER_O:
                    self._draw_o(frame, row, col, self.mark_colors[cell])

        if snapshot.winning_line is not None:
            self._draw_winning_line(frame, snapshot)

        if cfg.SHOW_CAPTION and snapshot.status.is_over:
            self._draw_caption(frame, snapshot.status)

        return frame

    def cell_center(self, row: int, col: int) -> Tuple[int, int]:
        """Pixel center (x, y) of a cell."""
        cx = col * self.config.CELL_WIDTH + self.config.CELL_WIDTH // 2
        cy = row * self.config.CELL_HEIGHT + self.config.CELL_HEIGHT // 2
        return cx, cy

    def _mark_half_size(self) -> int:
        cfg = self.config
        return int(min(cfg.CELL_WIDTH, cfg.CELL_HEIGHT * cfg.MARK_SCALE))

    def _draw_grid(self, frame: np.ndarray, color: Color):
        """Draw the N-1 inner vertical and horizontal lines."""
        cfg = self.config
        for i in range(1, cfg.BOARD_SIZE):
            x = i * cfg.CELL_WIDTH
            cv2.line(frame, (x, 0), (x, cfg.SCREEN_HEIGHT), color, cfg.GRID_THICKNESS)
            y = i * cfg.CELL_HEIGHT
            cv2.line(frame, (0, y), (cfg.SCREEN_WIDTH, y), color, cfg.GRID_THICKNESS)

    def _draw_x(self, frame: np.ndarray, row: int, col: int, color: Color):
        cx, cy = self.cell_center(row, col)
        half = self._mark_half_size()
        thickness = self.config.MARK_THICKNESS

        # Top left to bottom right
        cv2.line(frame, (cx - half, cy - half), (cx + half, cy + half),
                 color, thickness, cv2.LINE_AA)
        # Top right to bottom left
        cv2.line(frame, (cx + half, cy - half), (cx - half, cy + half),
                 color, thickness, cv2.LINE_AA)

    def _draw_o(self, frame: np.ndarray, row: int, col: int, color: Color):
        cx, cy = self.cell_center(row, col)
        cv2.circle(frame, (cx, cy), self._mark_half_size(), color,
                   self.config.MARK_THICKNESS, cv2.LINE_AA)

    def _draw_winning_line(self, frame: np.ndarray, snapshot: BoardSnapshot):
        """Strike through the completed line in the winner's color."""
        size = self.config.BOARD_SIZE
        first, last = snapshot.winning_line[0], snapshot.winning_line[-1]
        start = self.cell_center(first // size, first % size)
        end = self.cell_center(last // size, last % size)

        cv2.line(frame, start, end, self.grid_color_for(snapshot.status),
                 self.config.WIN_LINE_THICKNESS, cv2.LINE_AA)

    def _draw_caption(self, frame: np.ndarray, status: Status):
        """Draw the result text along the bottom edge."""
        cfg = self.config
        if status == Status.TIE:
            text = "Tie! Click to play again"
        elif status == Status.PLAYER_X_WON:
            text = "X wins! Click to play again"
        else:
            text = "O wins! Click to play again"

        (text_w, text_h), baseline = cv2.getTextSize(
            text, cfg.CAPTION_FONT, cfg.CAPTION_SCALE, cfg.CAPTION_THICKNESS
        )
        x = (cfg.SCREEN_WIDTH - text_w) // 2
        y = cfg.SCREEN_HEIGHT - cfg.CAPTION_MARGIN - baseline

        cv2.rectangle(
            frame,
            (x - cfg.CAPTION_MARGIN, y - text_h - cfg.CAPTION_MARGIN),
            (x + text_w + cfg.CAPTION_MARGIN, cfg.SCREEN_HEIGHT),
            cfg.CAPTION_BG_COLOR,
            -1
        )
        cv2.putText(frame, text, (x, y), cfg.CAPTION_FONT, cfg.CAPTION_SCALE,
                    self.grid_color_for(status), cfg.CAPTION_THICKNESS, cv2.LINE_AA)
