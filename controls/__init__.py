"""
Controls module for the TicTacToe game.
Handles mouse input from the game window.
"""

from .pointer import PointerInput
