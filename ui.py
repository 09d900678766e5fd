"""
TicTacToe UI
A graphical interface for the TicTacToe game using Tkinter.

Shows:
- The N x N grid with X and O marks
- Grid color for the game status (white, winner color, tie color)
- A caption once the game is decided

Clicking a cell plays it. Clicking after the game ends starts a new one.
"""

import cv2
import tkinter as tk
from PIL import Image, ImageTk
from typing import Optional

# Logic imports
from logic.board import Status
from logic.game_state import GameState, ClickResult

# Render imports
from render.config import RenderConfig
from render.board_renderer import BoardRenderer

# Input imports
from controls.pointer import PointerInput


class TicTacToeUI:
    """
    Main UI class for the TicTacToe game.

    Owns the game state and runs the update loop:
    pointer release -> GameState.apply_click -> render snapshot.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """
        Initialize the UI.

        Args:
            config: Render configuration. Uses defaults if not provided.

        Raises:
            tk.TclError: If no display is available.
        """
        self.config = config or RenderConfig()
        self.is_running = False

        self.game_state = GameState()
        self.renderer = BoardRenderer(self.config)
        self.pointer = PointerInput()

        # Keeps the current PhotoImage alive while Tk shows it
        self._photo: Optional[ImageTk.PhotoImage] = None
        self._image_id = None

        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter window and board canvas."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.resizable(False, False)

        self.canvas = tk.Canvas(
            self.root,
            width=self.config.SCREEN_WIDTH,
            height=self.config.SCREEN_HEIGHT,
            highlightthickness=0,
            bg='black'
        )
        self.canvas.pack()

        self.pointer.attach(self.canvas)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _update_loop(self):
        """Main update loop (runs on UI thread)."""
        if not self.is_running:
            return

        click = self.pointer.poll_click()
        if click is not None:
            self._handle_click(*click)

        self._update_canvas()

        # Schedule next tick
        if self.is_running:
            self.root.after(self.config.TICK_MS, self._update_loop)

    def _handle_click(self, x: int, y: int):
        """Apply a click to the game and report what happened."""
        if self.config.DEBUG_MODE:
            print(f"Click at ({x}, {y})")

        player = self.game_state.current_player
        result = self.game_state.apply_click(x, y)

        if result == ClickResult.RESET:
            print("Resetting game...")
        elif result == ClickResult.PLACED:
            move = self.game_state.moves[-1]
            print(f"{player.symbol} placed at ({move.row}, {move.col})")
            if self.config.DEBUG_MODE:
                self.game_state.print_board()
            if self.game_state.is_game_over:
                self._show_game_result()
        elif self.config.DEBUG_MODE:
            print("Click ignored")

    def _show_game_result(self):
        """Print the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)
        if self.game_state.status == Status.TIE:
            print("   It's a tie!")
        else:
            print(f"   {self.game_state.current_player.symbol} wins!")
        print("   Click anywhere to play again.")
        print("="*60 + "\n")

    def _update_canvas(self):
        """Render the game and show it on the canvas."""
        frame = self.renderer.draw(self.game_state.snapshot())

        # Convert BGR to RGB
        frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

        # Convert to PIL Image
        image = Image.fromarray(frame_rgb)
        self._photo = ImageTk.PhotoImage(image)

        if self._image_id is None:
            self._image_id = self.canvas.create_image(0, 0, anchor=tk.NW, image=self._photo)
        else:
            self.canvas.itemconfigure(self._image_id, image=self._photo)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.is_running = False
        self.pointer.detach()

        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.is_running = True
        self.root.after(0, self._update_loop)
        self.root.mainloop()
