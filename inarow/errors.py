"""
Errors raised by the N-in-a-row engine.
All move errors are recoverable: the board is never left half-updated.
"""


class MoveError(Exception):
    """Base class for a rejected move."""
    pass


class OutOfBounds(MoveError):
    """
    A coordinate lies outside the grid.

    Attributes:
        axis: "X" or "Y", the axis that is out of range.
        given: The offending value.
        max: The largest valid value on that axis.
    """

    def __init__(self, axis: str, given: int, max: int):
        self.axis = axis
        self.given = given
        self.max = max
        super().__init__(
            f"The {axis} coordinate {given} is out of bounds (max is {max})"
        )


class CellOccupied(MoveError):
    """The target cell already belongs to a player."""

    def __init__(self):
        super().__init__("This field is already taken")


class InvalidInput(ValueError):
    """Raised by the terminal when typed input cannot be parsed."""
    pass
