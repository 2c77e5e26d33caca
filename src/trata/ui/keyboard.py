"""Non-blocking keyboard input for the terminal timer."""

import select
import sys
import termios
import tty
from typing import Optional


class KeyboardHandler:
    """Reads single key presses from stdin without blocking.

    Puts the terminal in cbreak mode on creation and restores it on ``stop()``
    (or on leaving the ``with`` block).
    """

    def __init__(self):
        self.fd = sys.stdin.fileno()
        self.old_settings = None
        self._setup()

    def _setup(self):
        """Setup terminal for non-blocking input."""
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except (termios.error, OSError):
            # stdin is not a TTY (pipes, CI)
            self.old_settings = None

    def get_key(self) -> Optional[str]:
        """Return the pressed key lower-cased, or None if no key is waiting."""
        try:
            if select.select([sys.stdin], [], [], 0)[0]:
                key = sys.stdin.read(1)
                return key.lower() or None
        except (OSError, ValueError):
            return None
        return None

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings:
            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            except termios.error:
                pass
            self.old_settings = None

    def __enter__(self) -> "KeyboardHandler":
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
