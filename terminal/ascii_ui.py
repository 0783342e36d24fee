"""
ASCII renderer for the N-in-a-row game.
Draws the player table and the field, and tracks the considering cursor.
"""

from typing import List, Optional

from inarow import Coordinate, Game
from .config import TerminalConfig
from .keys import Input


class AsciiUI:
    """
    Text front end for a game.

    The considering cursor is the flat index of the highlighted cell.
    It moves with the direction keys and is what gets marked in cursor mode.
    """

    def __init__(self, config: Optional[TerminalConfig] = None):
        """
        Initialize the UI.

        Args:
            config: Terminal configuration. Uses defaults if not provided.
        """
        self.config = config or TerminalConfig()
        self.considering = 0
        self.show_cursor = True

    def move(self, game: Game, direction: Input):
        """
        Move the considering cursor one cell, stopping at the field edges.

        Args:
            game: The game being played.
            direction: One of Input.LEFT, RIGHT, UP or DOWN.
        """
        field = game.field
        x, y = Coordinate.from_index(self.considering, field.row_size)

        if direction == Input.LEFT:
            x = max(x - 1, 0)
        elif direction == Input.RIGHT:
            x = min(x + 1, field.row_size - 1)
        elif direction == Input.UP:
            y = max(y - 1, 0)
        elif direction == Input.DOWN:
            y = min(y + 1, field.column_size - 1)

        self.considering = Coordinate(x, y).to_index(field.row_size)

    def draw(self, game: Game) -> str:
        """
        Render the whole screen.

        Returns:
            The text to print, starting with a clear-screen escape.
        """
        lines = [self.config.CLEAR_SCREEN + self._draw_players(game)]
        lines.append(f"Current player is: {game.current_player.sign}\n")
        lines.append(self.draw_field(game))
        return "\n".join(lines)

    def _draw_players(self, game: Game) -> str:
        width = max(len(player.name) for player in game.players)

        rows = ["-" * (width + 8)]
        for player in game.players:
            rows.append(f"| {player.name:>{width}} | {player.sign} |")
        rows.append("-" * (width + 8) + "\n")
        return "\n".join(rows)

    def draw_field(self, game: Game) -> str:
        """Draw the field as a box of cells, highlighting the cursor and any winning run."""
        field = game.field
        highlighted = set(self._winning_indexes(game))
        if self.show_cursor:
            highlighted.add(self.considering)

        border = "─" * (field.row_size * 2 - 1)
        draw = [f"┌{border}┐"]

        for y, row in enumerate(field.rows()):
            signs = []
            for x, cell in enumerate(row):
                sign = cell.draw()
                if Coordinate(x, y).to_index(field.row_size) in highlighted:
                    sign = f"{self.config.HIGHLIGHT_ON}{sign}{self.config.HIGHLIGHT_OFF}"
                signs.append(sign)
            draw.append(f"│{'│'.join(signs)}│")
            draw.append(f"├{border}┤")

        draw.pop()
        draw.append(f"└{border}┘")
        return "\n".join(draw)

    def _winning_indexes(self, game: Game) -> List[int]:
        line = game.win_checker.get_winning_line(game.field)
        if line is None:
            return []
        return [coordinate.to_index(game.field.row_size) for coordinate in line]
