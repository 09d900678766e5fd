"""
Move validator for the TicTacToe game.
Validates that moves follow the rules.
"""

from typing import TYPE_CHECKING, Optional
from dataclasses import dataclass
from .board import BOARD_SIZE, Cell, Status, cell_index, in_bounds

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must still be running
    2. Position must be on the board
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        game_state: "GameState",
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move for the current player.

        Args:
            game_state: Current game state.
            row: Row to place the mark (0 to N-1).
            col: Column to place the mark (0 to N-1).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.status != Status.RUNNING:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{BOARD_SIZE - 1}."
            )

        occupant = game_state.board[cell_index(row, col)]
        if occupant != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.symbol}"
            )

        return ValidationResult(is_valid=True)
