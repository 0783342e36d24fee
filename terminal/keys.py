"""
Input handling for the terminal front end.
Maps key presses and typed lines to game commands.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO

from inarow import Coordinate, InvalidInput
from .config import TerminalConfig


class Input(Enum):
    """What the player asked for."""
    QUIT = "quit"
    MARK = "mark"
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    UP = "up"
    NOOP = "noop"


MOVEMENTS = (Input.LEFT, Input.RIGHT, Input.DOWN, Input.UP)


@dataclass
class Command:
    """
    A parsed line of prompt input.
    A MARK carries either a coordinate or a flat index.
    """
    input: Input
    coordinate: Optional[Coordinate] = None
    index: Optional[int] = None


def key_to_input(key: Optional[str], config: Optional[TerminalConfig] = None) -> Input:
    """
    Map a single key press to an Input.

    Args:
        key: The key read from the terminal, or None at end of input.
        config: Key bindings. Uses defaults if not provided.

    Returns:
        The matching Input. Unbound keys are NOOP, end of input is QUIT.
    """
    config = config or TerminalConfig()

    if not key:
        return Input.QUIT

    bindings = {
        config.KEY_QUIT: Input.QUIT,
        config.KEY_MARK: Input.MARK,
        config.KEY_LEFT: Input.LEFT,
        config.KEY_DOWN: Input.DOWN,
        config.KEY_UP: Input.UP,
        config.KEY_RIGHT: Input.RIGHT,
    }
    return bindings.get(key, Input.NOOP)


def parse_command(line: str, config: Optional[TerminalConfig] = None) -> Command:
    """
    Parse a typed move.

    Accepts "x y" for a coordinate, a single number for a flat index,
    or the quit key.

    Raises:
        InvalidInput: If the line is not one of the above.
    """
    config = config or TerminalConfig()
    text = line.strip()

    if text.lower() in (config.KEY_QUIT, "quit", "exit"):
        return Command(Input.QUIT)

    parts = text.replace(",", " ").split()
    try:
        numbers = [int(part) for part in parts]
    except ValueError:
        raise InvalidInput(f"Expected numbers, got {text!r}") from None

    if len(numbers) == 2:
        return Command(Input.MARK, coordinate=Coordinate(numbers[0], numbers[1]))
    if len(numbers) == 1:
        return Command(Input.MARK, index=numbers[0])

    raise InvalidInput(
        f"Expected 'x y' or a single index, got {len(numbers)} values"
    )


class RawTerminal:
    """
    Reads single key presses from a terminal.
    Puts the terminal in cbreak mode while open and restores it on close.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdin
        self._saved = None
        self.is_open = False

    def open(self) -> bool:
        """
        Switch the terminal to cbreak mode.

        Returns:
            True if the stream is a terminal and was switched, False otherwise.
        """
        if not self.stream.isatty():
            return False

        import termios
        import tty

        fd = self.stream.fileno()
        self._saved = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        self.is_open = True
        return True

    def read_key(self) -> str:
        """Block until a key is pressed. Returns "" at end of input."""
        return self.stream.read(1)

    def close(self):
        """Restore the terminal settings."""
        if self._saved is not None:
            import termios

            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._saved)
            self._saved = None
        self.is_open = False

    def __enter__(self):
        """Context manager entry. Check is_open before reading keys."""
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
