"""
Board definitions for the TicTacToe game.
Cell and status enums, board geometry, and pixel-to-cell mapping.
"""

from enum import Enum
from typing import List, Optional, Tuple


# ==================== GEOMETRY ====================
# The board is always N x N
BOARD_SIZE = 3

# Window size in pixels (fixed)
SCREEN_WIDTH_PX = 480
SCREEN_HEIGHT_PX = 480

# Size of one cell in pixels
CELL_WIDTH = SCREEN_WIDTH_PX // BOARD_SIZE    # 160
CELL_HEIGHT = SCREEN_HEIGHT_PX // BOARD_SIZE  # 160


class Cell(Enum):
    """What a single board position holds."""
    EMPTY = 0
    PLAYER_X = 1
    PLAYER_O = 2

    def opposite(self) -> "Cell":
        """Get the other player."""
        if self == Cell.PLAYER_X:
            return Cell.PLAYER_O
        if self == Cell.PLAYER_O:
            return Cell.PLAYER_X
        raise ValueError("EMPTY has no opposite player")

    @property
    def symbol(self) -> str:
        """Single character used for console output."""
        return {Cell.EMPTY: " ", Cell.PLAYER_X: "X", Cell.PLAYER_O: "O"}[self]


class Status(Enum):
    """Phase of the game."""
    RUNNING = "running"
    PLAYER_X_WON = "player_x_won"
    PLAYER_O_WON = "player_o_won"
    TIE = "tie"

    @classmethod
    def won_by(cls, player: Cell) -> "Status":
        """Get the winning status for a player."""
        if player == Cell.PLAYER_X:
            return cls.PLAYER_X_WON
        if player == Cell.PLAYER_O:
            return cls.PLAYER_O_WON
        raise ValueError("EMPTY cannot win")

    @property
    def is_over(self) -> bool:
        return self != Status.RUNNING


Board = List[Cell]


def empty_board() -> Board:
    """Create a board with every cell EMPTY."""
    return [Cell.EMPTY] * (BOARD_SIZE * BOARD_SIZE)


def cell_index(row: int, col: int) -> int:
    """Row-major index of a cell."""
    return row * BOARD_SIZE + col


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def pixel_to_cell(pixel_x: int, pixel_y: int) -> Optional[Tuple[int, int]]:
    """
    Convert window pixel coordinates to a board cell.

    Args:
        pixel_x: Horizontal pointer position.
        pixel_y: Vertical pointer position.

    Returns:
        (row, col) tuple, or None if the point is outside the board.
    """
    # Floor division keeps negative coordinates negative
    row = int(pixel_y) // CELL_HEIGHT
    col = int(pixel_x) // CELL_WIDTH

    if not in_bounds(row, col):
        return None

    return row, col
