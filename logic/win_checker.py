"""
Win checker for the TicTacToe game.
Checks if a player has won or if the game is a tie.
"""

from typing import List, Optional, Sequence, Tuple
from .board import BOARD_SIZE, Board, Cell, Status, cell_index


def _build_winning_lines(size: int) -> List[Tuple[int, ...]]:
    """Rows, then columns, then the two diagonals, as board indices."""
    lines = []

    for row in range(size):
        lines.append(tuple(cell_index(row, col) for col in range(size)))

    for col in range(size):
        lines.append(tuple(cell_index(row, col) for row in range(size)))

    lines.append(tuple(cell_index(i, i) for i in range(size)))
    lines.append(tuple(cell_index(i, size - 1 - i) for i in range(size)))

    return lines


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: N marks of the same player in a row
    (horizontally, vertically, or diagonally).

    All methods are pure functions of the board they are given.
    """

    # All possible winning lines (row-major board indices)
    WINNING_LINES = _build_winning_lines(BOARD_SIZE)

    def check_winner(self, board: Sequence[Cell]) -> Optional[Cell]:
        """
        Check if there's a winner.

        Args:
            board: Row-major board.

        Returns:
            The winning player (PLAYER_X or PLAYER_O), or None.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(
        self,
        board: Sequence[Cell],
        line: Tuple[int, ...]
    ) -> Optional[Cell]:
        """
        Check if a single line is owned by one player.

        Returns:
            The owning player, or None if the line is mixed or has a gap.
        """
        first = board[line[0]]
        if first == Cell.EMPTY:
            return None

        for index in line[1:]:
            if board[index] != first:
                return None

        return first

    def check_tie(self, board: Sequence[Cell]) -> bool:
        """
        Check if the game is a tie.

        A tie needs a full board and no winner.
        """
        if Cell.EMPTY in board:
            return False

        return self.check_winner(board) is None

    def evaluate(self, board: Sequence[Cell]) -> Status:
        """
        Get the outcome of a board.

        Args:
            board: Row-major board.

        Returns:
            PLAYER_X_WON / PLAYER_O_WON, TIE, or RUNNING.
        """
        winner = self.check_winner(board)

        if winner is not None:
            return Status.won_by(winner)

        if self.check_tie(board):
            return Status.TIE

        return Status.RUNNING

    def get_winning_line(self, board: Sequence[Cell]) -> Optional[Tuple[int, ...]]:
        """
        Get the winning line if there is one.

        Returns:
            Board indices of the first completed line, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None


_checker = WinChecker()


def evaluate_outcome(board: Board) -> Status:
    """Status of a board snapshot. Pure, no side effects."""
    return _checker.evaluate(board)
