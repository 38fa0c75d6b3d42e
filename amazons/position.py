"""Coordinates of a square on the game board."""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True)
class Position:
    """A square given by row and column, both counted from zero."""

    row: int = 0
    col: int = 0

    def __str__(self) -> str:
        return f"{self.row} {self.col}"

    @classmethod
    def from_string(cls, text: str) -> Position:
        """Parse a position written as ``"row col"``.

        An empty string yields the origin square.
        """
        if text == "":
            return cls()
        tokens = text.split()
        try:
            values = [int(token) for token in tokens[:2]]
        except ValueError:
            raise ValueError("Invalid position string format") from None
        if len(values) < 2:
            raise ValueError("Invalid position string format")
        if len(tokens) > 2:
            raise ValueError("Invalid position string format - extra characters")
        return cls(values[0], values[1])

    def is_valid(self) -> bool:
        """Return True if the position lies on the board."""
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE