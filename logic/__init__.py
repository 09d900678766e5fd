"""
Logic module for the TicTacToe game.
Handles board, game state, rules, and outcome evaluation.
"""

from .board import Cell, Status, BOARD_SIZE, pixel_to_cell
from .game_state import GameState, BoardSnapshot, ClickResult, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, evaluate_outcome
