"""
Player definition for the N-in-a-row game.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Player:
    """
    A player in the game.

    Players are created once when the game starts and shared by every
    cell they own. Two players are the same player if their signs match.
    """
    name: str = field(compare=False)
    sign: str                          # Single character drawn on the board

    def __post_init__(self):
        if len(self.sign) != 1:
            raise ValueError(f"Player sign must be a single character, got {self.sign!r}")

    def __eq__(self, other):
        if isinstance(other, Player):
            return self.sign == other.sign
        if isinstance(other, str):
            return self.sign == other
        return NotImplemented

    def __hash__(self):
        return hash(self.sign)
