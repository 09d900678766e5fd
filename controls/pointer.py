"""
Pointer input for the TicTacToe game.
Tracks the mouse position and primary button releases on a Tk widget.
"""

from typing import Optional, Tuple


class PointerInput:
    """
    Simple mouse wrapper class.

    Records where the pointer is and whether the primary button was
    released since the last check. Event handlers only need objects with
    ``x`` and ``y`` attributes, so they can be driven without a display.
    """

    RELEASE_EVENT = "<ButtonRelease-1>"
    MOTION_EVENT = "<Motion>"

    def __init__(self):
        self.widget = None
        self.is_attached = False
        self._bindings = {}
        self._x = 0
        self._y = 0
        self._released = False

    def attach(self, widget) -> "PointerInput":
        """
        Start listening to a Tk widget.

        Args:
            widget: Any Tk widget (usually the board canvas).
        """
        self.widget = widget
        self._bindings[self.MOTION_EVENT] = widget.bind(self.MOTION_EVENT, self.on_motion)
        self._bindings[self.RELEASE_EVENT] = widget.bind(self.RELEASE_EVENT, self.on_release)
        self.is_attached = True
        return self

    def detach(self):
        """Stop listening to the widget."""
        if self.widget is not None:
            for sequence, func_id in self._bindings.items():
                self.widget.unbind(sequence, func_id)
        self._bindings = {}
        self.widget = None
        self.is_attached = False

    def on_motion(self, event):
        self._x, self._y = event.x, event.y

    def on_release(self, event):
        # Release position wins over the last motion event
        self._x, self._y = event.x, event.y
        self._released = True

    def was_released(self) -> bool:
        """
        Check for a primary button release since the last call.

        Returns:
            True once per release, then False until the next one.
        """
        released = self._released
        self._released = False
        return released

    def position(self) -> Tuple[int, int]:
        """Current pointer position in widget pixels."""
        return self._x, self._y

    def poll_click(self) -> Optional[Tuple[int, int]]:
        """
        Get the release position, if a release happened.

        Returns:
            (x, y) of the release, or None.
        """
        if self.was_released():
            return self.position()
        return None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.detach()
