"""
Game controller for the N-in-a-row game.
Tracks the players, whose turn it is, and whether the game was quit.
"""

from typing import Optional, Sequence, Tuple

from .game_field import Coordinate, GameField
from .player import Player
from .win_checker import GameState, WinChecker


class Game:
    """
    The running game.

    Owns the player roster and the field. Players take turns in the
    order they were given; the turn only moves on after a successful mark.
    Reaching a win or tie does not finish the game: the driving loop
    calls quit() once it has shown the result.
    """

    def __init__(
        self,
        players: Sequence[Tuple[str, str]],
        field: Optional[GameField] = None
    ):
        """
        Set up a new game.

        Args:
            players: (sign, name) pairs in turn order. The first one starts.
            field: The field to play on. Defaults to a 3x3 field, 3 to win.
        """
        if not players:
            raise ValueError("A game needs at least one player")

        self.players: Tuple[Player, ...] = tuple(
            Player(name, sign) for sign, name in players
        )
        if len(set(self.players)) != len(self.players):
            signs = [player.sign for player in self.players]
            raise ValueError(f"Player signs must be unique, got {signs}")

        self.field = field if field is not None else GameField()
        self.turn = 0
        self.win_checker = WinChecker()
        self._is_finished = False

    @property
    def current_player(self) -> Player:
        """The player whose turn it is."""
        return self.players[self.turn]

    def mark(self, coordinate: Coordinate):
        """
        Mark a cell for the current player and pass the turn on.

        Args:
            coordinate: The cell to mark.

        Raises:
            OutOfBounds: If the coordinate lies outside the field.
            CellOccupied: If the cell is taken. The turn does not change.
        """
        self.field.mark(self.current_player, coordinate)
        self.turn = (self.turn + 1) % len(self.players)

    def mark_by_index(self, index: int):
        """Mark a cell given by its flat row-major index."""
        self.mark(Coordinate.from_index(index, self.field.row_size))

    def state(self) -> GameState:
        return self.win_checker.check_state(self.field)

    def is_finished(self) -> bool:
        return self._is_finished

    def quit(self):
        self._is_finished = True
