"""
N-in-a-row game engine.
Handles the field, win/tie detection, and turn order.
"""

__version__ = "1.0.0"

from .errors import MoveError, OutOfBounds, CellOccupied, InvalidInput
from .player import Player
from .game_field import (
    EMPTY, Owned, Cell, Coordinate, GameField,
    coordinate_to_index, index_to_coordinate,
)
from .win_checker import Direction, Outcome, GameState, WinChecker
from .game import Game
