"""
Game state management for the TicTacToe game.
Tracks the board, current player, and game status.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .board import (
    BOARD_SIZE,
    Board,
    Cell,
    Status,
    cell_index,
    empty_board,
    pixel_to_cell,
)
from .move_validator import MoveValidator
from .win_checker import WinChecker


class ClickResult(Enum):
    """What a click did to the game."""
    PLACED = "placed"     # A mark was placed
    IGNORED = "ignored"   # Occupied cell or off the board, nothing changed
    RESET = "reset"       # Game was over, board cleared for a new game


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Cell            # Who made the move
    row: int                # Row (0 to N-1)
    col: int                # Column (0 to N-1)
    move_number: int        # Which move this is (0-based, both players)


@dataclass(frozen=True)
class BoardSnapshot:
    """Read-only view of the game handed to the renderer."""
    cells: Tuple[Cell, ...]
    status: Status
    current_player: Cell
    winning_line: Optional[Tuple[int, ...]] = None

    def cell_at(self, row: int, col: int) -> Cell:
        return self.cells[cell_index(row, col)]


_validator = MoveValidator()
_win_checker = WinChecker()


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The N x N board (row-major list of cells)
    - Current player
    - Move history
    - Game status (running, won, tie)
    """

    # Row-major board, index = row * N + col
    board: Board = field(default_factory=empty_board)

    # Current player's turn (only meaningful while running)
    current_player: Cell = Cell.PLAYER_X

    # Game result
    status: Status = Status.RUNNING

    # Move history for the current game
    moves: List[Move] = field(default_factory=list)

    # Board indices of the completed line, set when the game is won
    winning_line: Optional[Tuple[int, ...]] = None

    @property
    def is_game_over(self) -> bool:
        return self.status.is_over

    def cell_at(self, row: int, col: int) -> Cell:
        """Get the contents of a cell."""
        return self.board[cell_index(row, col)]

    def make_move(self, row: int, col: int) -> bool:
        """
        Place the current player's mark at the given position.

        The outcome is evaluated right after placing. The turn passes to the
        other player only if the game is still running.

        Args:
            row: Row index (0 to N-1).
            col: Column index (0 to N-1).

        Returns:
            True if the mark was placed, False if the move was rejected.
        """
        result = _validator.validate_move(self, row, col)
        if not result.is_valid:
            return False

        self.board[cell_index(row, col)] = self.current_player
        self.moves.append(Move(
            player=self.current_player,
            row=row,
            col=col,
            move_number=len(self.moves)
        ))

        self.status = _win_checker.evaluate(self.board)
        if self.status in (Status.PLAYER_X_WON, Status.PLAYER_O_WON):
            self.winning_line = _win_checker.get_winning_line(self.board)

        if self.status == Status.RUNNING:
            self.current_player = self.current_player.opposite()

        return True

    def apply_click(self, pixel_x: int, pixel_y: int) -> ClickResult:
        """
        Handle a pointer release at window coordinates.

        A click while the game is over starts a new game and places nothing.
        Otherwise the click is mapped to a cell and played as a move.
        Occupied cells and points off the board are ignored.

        Args:
            pixel_x: Pointer x in window pixels.
            pixel_y: Pointer y in window pixels.

        Returns:
            What the click did.
        """
        if self.status != Status.RUNNING:
            self.reset()
            return ClickResult.RESET

        cell = pixel_to_cell(pixel_x, pixel_y)
        if cell is None:
            return ClickResult.IGNORED

        row, col = cell
        if self.make_move(row, col):
            return ClickResult.PLACED
        return ClickResult.IGNORED

    def reset(self):
        """Return to the initial configuration."""
        self.board = empty_board()
        self.current_player = Cell.PLAYER_X
        self.status = Status.RUNNING
        self.moves = []
        self.winning_line = None

    def snapshot(self) -> BoardSnapshot:
        """Get a read-only view of the game for rendering."""
        return BoardSnapshot(
            cells=tuple(self.board),
            status=self.status,
            current_player=self.current_player,
            winning_line=self.winning_line
        )

    def print_board(self):
        """Print the board to console."""
        header = "   ".join(str(col) for col in range(BOARD_SIZE))
        separator = "+".join(["---"] * BOARD_SIZE)

        print(f"\n  {header}")
        for row in range(BOARD_SIZE):
            cells = "|".join(f" {self.cell_at(row, col).symbol} " for col in range(BOARD_SIZE))
            print(f"{row} {cells}")
            if row < BOARD_SIZE - 1:
                print(f"  {separator}")

        if self.status == Status.TIE:
            print("\nIt's a TIE!")
        elif self.is_game_over:
            winner = "X" if self.status == Status.PLAYER_X_WON else "O"
            print(f"\n{winner} WINS!")
        else:
            print(f"\nCurrent turn: {self.current_player.symbol}")
