"""The 8x8 board and queen-line movement on it."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from amazons.player import Player
from amazons.position import BOARD_SIZE, Position


class Cell(Enum):
    """Contents of a square."""

    EMPTY = "."
    ARROW = "X"
    WHITE_AMAZON = "W"
    BLACK_AMAZON = "B"


AMAZON_CELLS = {
    Player.WHITE: Cell.WHITE_AMAZON,
    Player.BLACK: Cell.BLACK_AMAZON,
}

DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


class Board:
    """A square grid of cells, all empty when created."""

    SIZE = BOARD_SIZE

    def __init__(self) -> None:
        self._grid = [[Cell.EMPTY] * self.SIZE for _ in range(self.SIZE)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, pos: Position) -> Cell:
        return self.get_cell(pos.row, pos.col)

    def __setitem__(self, pos: Position, value: Cell) -> None:
        self.set_cell(pos.row, pos.col, value)

    def initialize_standard_position(self) -> None:
        """Clear the board and place the eight amazons."""
        for row in self._grid:
            row[:] = [Cell.EMPTY] * self.SIZE
        for row, col in ((0, 2), (2, 0), (5, 0), (7, 2)):
            self.set_cell(row, col, Cell.BLACK_AMAZON)
        for row, col in ((0, 5), (2, 7), (5, 7), (7, 5)):
            self.set_cell(row, col, Cell.WHITE_AMAZON)

    def is_valid_position(self, row: int, col: int) -> bool:
        """Return True if (row, col) lies on the board."""
        return 0 <= row < self.SIZE and 0 <= col < self.SIZE

    def get_cell(self, row: int, col: int) -> Cell:
        """Return the cell at (row, col); off-board squares read as empty."""
        if not self.is_valid_position(row, col):
            return Cell.EMPTY
        return self._grid[row][col]

    def set_cell(self, row: int, col: int, value: Cell) -> None:
        """Set the cell at (row, col); off-board squares are ignored."""
        if self.is_valid_position(row, col):
            self._grid[row][col] = value

    def _ray(self, origin: Position, dr: int, dc: int) -> Iterator[Position]:
        row, col = origin.row + dr, origin.col + dc
        while self.is_valid_position(row, col) and self._grid[row][col] is Cell.EMPTY:
            yield Position(row, col)
            row += dr
            col += dc

    def _queen_reach(self, origin: Position) -> list[Position]:
        return [pos for dr, dc in DIRECTIONS for pos in self._ray(origin, dr, dc)]

    def legal_moves(self, origin: Position) -> list[Position]:
        """Empty squares a piece at ``origin`` can reach along queen lines."""
        if not self.is_valid_position(origin.row, origin.col):
            return []
        if self[origin] is Cell.EMPTY:
            return []
        return self._queen_reach(origin)

    def legal_shots(self, origin: Position) -> list[Position]:
        """Empty squares an arrow from ``origin`` can reach along queen lines."""
        if not self.is_valid_position(origin.row, origin.col):
            return []
        return self._queen_reach(origin)

    def count_reachable_squares(self, player: Player) -> int:
        """Count distinct empty squares the player's amazons reach in one move."""
        target = AMAZON_CELLS[player]
        amazons = [
            (row, col)
            for row in range(self.SIZE)
            for col in range(self.SIZE)
            if self._grid[row][col] is target
        ]
        visited = set(amazons)
        count = 0
        for start_row, start_col in amazons:
            for dr, dc in DIRECTIONS:
                row, col = start_row + dr, start_col + dc
                while (
                    self.is_valid_position(row, col)
                    and self._grid[row][col] is Cell.EMPTY
                    and (row, col) not in visited
                ):
                    visited.add((row, col))
                    count += 1
                    row += dr
                    col += dc
        return count

    def copy(self) -> Board:
        """Return an independent copy of the board."""
        clone = Board()
        clone._grid = [list(row) for row in self._grid]
        return clone