"""
Win checker for the N-in-a-row game.
Checks if a player has won or if the game is a tie.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .game_field import Coordinate, GameField
from .player import Player


class Direction(Enum):
    """
    Directions a winning run can take, as (dx, dy) steps.
    The order here is the order runs are checked in.
    """
    HORIZONTAL = (1, 0)
    VERTICAL = (0, 1)
    DIAGONAL_RIGHT = (1, 1)
    DIAGONAL_LEFT = (-1, 1)


class Outcome(Enum):
    OPEN = "open"
    TIE = "tie"
    WON = "won"


@dataclass(frozen=True)
class GameState:
    """
    Result of looking at the board: open, tie, or won by a player.
    Never stored, always derived from the field contents.
    """
    outcome: Outcome
    winner: Optional[Player] = None

    @classmethod
    def open(cls) -> "GameState":
        return cls(Outcome.OPEN)

    @classmethod
    def tie(cls) -> "GameState":
        return cls(Outcome.TIE)

    @classmethod
    def won(cls, player: Player) -> "GameState":
        return cls(Outcome.WON, player)

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not Outcome.OPEN

    def __str__(self):
        if self.outcome is Outcome.WON:
            return f"Won by {self.winner.sign}"
        return self.outcome.value.capitalize()


class WinChecker:
    """
    Checks for win conditions in N-in-a-row.

    Win condition: win_count cells owned by the same player in a line
    (horizontally, vertically, or along either diagonal).
    The whole field is rescanned on every call.
    """

    def check_state(self, field: GameField) -> GameState:
        """
        Compute the state of the game from the field.

        Args:
            field: The game field.

        Returns:
            GameState.won(player) for the first winning run found,
            GameState.tie() if the field is full, GameState.open() otherwise.
        """
        winner, _, non_empties = self._scan(field)

        if winner is not None:
            return GameState.won(winner)
        if non_empties == field.size:
            return GameState.tie()
        return GameState.open()

    def get_winning_line(self, field: GameField) -> Optional[List[Coordinate]]:
        """
        Get the winning run if there is one.

        Args:
            field: The game field.

        Returns:
            The coordinates of the run, or None.
        """
        _, line, _ = self._scan(field)
        return line

    def _scan(
        self,
        field: GameField
    ) -> Tuple[Optional[Player], Optional[List[Coordinate]], int]:
        """
        Walk the field row by row, counting marked cells until a win shows up.

        Returns:
            (winner, winning line, non-empty count). The count is only
            complete when there is no winner.
        """
        non_empties = 0

        for y in range(field.column_size):
            for x in range(field.row_size):
                start = Coordinate(x, y)
                if field.get(start).is_empty:
                    continue
                non_empties += 1

                for direction in Direction:
                    line = self._run_from(field, start, direction)
                    if line is None:
                        continue
                    winner = self._check_line(field, line)
                    if winner is not None:
                        return winner, line, non_empties

        return None, None, non_empties

    def _run_from(
        self,
        field: GameField,
        start: Coordinate,
        direction: Direction
    ) -> Optional[List[Coordinate]]:
        """
        The win_count coordinates starting at start in a direction,
        or None if the run would leave the field.
        """
        dx, dy = direction.value
        last = Coordinate(
            start.x + dx * (field.win_count - 1),
            start.y + dy * (field.win_count - 1)
        )
        if not field.in_bounds(last):
            return None

        return [
            Coordinate(start.x + dx * c, start.y + dy * c)
            for c in range(field.win_count)
        ]

    def _check_line(self, field: GameField, line: List[Coordinate]) -> Optional[Player]:
        """
        Check if a single line has a winner.

        Returns:
            The owner if every cell belongs to the same player, None otherwise.
        """
        owner = None
        for coordinate in line:
            cell = field.get(coordinate)
            if cell.is_empty:
                return None  # Empty cell, no winner on this line
            if owner is None:
                owner = cell.player
            elif cell.player != owner:
                return None
        return owner


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()
    red = Player("Red", "X")
    green = Player("Green", "O")

    # Horizontal win on a 4x3 field, three in a row
    field = GameField(4, 3, 3)
    for x in range(1, 4):
        field.mark(red, Coordinate(x, 2))
    field.mark(green, Coordinate(0, 0))

    state = checker.check_state(field)
    print(f"Horizontal: state = {state}, line = {checker.get_winning_line(field)}")
    assert state == GameState.won(red)

    print("\nWinChecker test done!")
