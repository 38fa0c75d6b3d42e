"""Game state: board, side to move, turn counter and move history."""

from __future__ import annotations

from collections.abc import Iterator

from amazons.board import AMAZON_CELLS, DIRECTIONS, Board, Cell
from amazons.move import Move
from amazons.player import Player, opposite_player
from amazons.position import Position


def _is_free(board: Board, row: int, col: int, vacated: Position) -> bool:
    return board.get_cell(row, col) is Cell.EMPTY or (
        row == vacated.row and col == vacated.col
    )


def _arrow_path_clear(
    board: Board, start: Position, target: Position, vacated: Position
) -> bool:
    """Check an arrow shot, treating the vacated square as empty."""
    if not board.is_valid_position(target.row, target.col):
        return False
    if not _is_free(board, target.row, target.col, vacated):
        return False
    dr = (target.row > start.row) - (target.row < start.row)
    dc = (target.col > start.col) - (target.col < start.col)
    if dr == 0 and dc == 0:
        return True
    row, col = start.row + dr, start.col + dc
    while row != target.row or col != target.col:
        if not board.is_valid_position(row, col):
            return False
        if not _is_free(board, row, col, vacated):
            return False
        row += dr
        col += dc
    return True


def _arrow_targets(
    board: Board, start: Position, vacated: Position
) -> Iterator[Position]:
    """Squares an arrow from ``start`` can reach, treating ``vacated`` as empty."""
    for dr, dc in DIRECTIONS:
        row, col = start.row + dr, start.col + dc
        while board.is_valid_position(row, col) and _is_free(board, row, col, vacated):
            yield Position(row, col)
            row += dr
            col += dc


class GameState:
    """A game in progress.

    Without a board the standard starting position is used. Equality compares
    the board, the side to move and the turn number, not the history.
    """

    def __init__(
        self,
        board: Board | None = None,
        current_player: Player = Player.WHITE,
        turn_number: int = 1,
    ) -> None:
        if board is None:
            board = Board()
            board.initialize_standard_position()
        else:
            board = board.copy()
        self._board = board
        self._current_player = current_player
        self._turn_number = turn_number
        self._history: list[Move] = []

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def turn_number(self) -> int:
        return self._turn_number

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self._board == other._board
            and self._current_player is other._current_player
            and self._turn_number == other._turn_number
        )

    __hash__ = None  # type: ignore[assignment]

    def initialize_standard_game(self) -> None:
        """Reset to the starting position with White to move."""
        self._board.initialize_standard_position()
        self._current_player = Player.WHITE
        self._turn_number = 1
        self._history.clear()

    def is_game_over(self) -> bool:
        """The game ends when the side to move has no legal move."""
        return not self.legal_moves_for_player(self._current_player)

    def winner(self) -> Player:
        """Return the winner; raise RuntimeError if the game is not over."""
        if not self.is_game_over():
            raise RuntimeError("Game is not over")
        return opposite_player(self._current_player)

    def legal_moves(self) -> list[Move]:
        """All legal moves for the side to move."""
        return self.legal_moves_for_player(self._current_player)

    def legal_moves_for_player(self, player: Player) -> list[Move]:
        """All legal moves for ``player``, scanning amazons in row-major order."""
        board = self._board
        amazon = AMAZON_CELLS[player]
        return [
            Move(origin, destination, arrow)
            for origin in (
                Position(row, col)
                for row in range(Board.SIZE)
                for col in range(Board.SIZE)
                if board.get_cell(row, col) is amazon
            )
            for destination in board.legal_moves(origin)
            for arrow in _arrow_targets(board, destination, origin)
        ]

    def is_valid_move(self, move: Move) -> bool:
        """Return True if ``move`` is legal for the side to move."""
        if not move.is_valid():
            return False
        if self._board[move.origin] is not AMAZON_CELLS[self._current_player]:
            return False
        if move.destination not in self._board.legal_moves(move.origin):
            return False
        return _arrow_path_clear(self._board, move.destination, move.arrow, move.origin)

    def make_move(self, move: Move) -> None:
        """Play ``move``; raise ValueError if it is not legal."""
        if not self.is_valid_move(move):
            raise ValueError("Invalid move")
        self._history.append(move)
        self._board[move.origin] = Cell.EMPTY
        self._board[move.destination] = AMAZON_CELLS[self._current_player]
        self._board[move.arrow] = Cell.ARROW
        self._current_player = opposite_player(self._current_player)
        if self._current_player is Player.WHITE:
            self._turn_number += 1

    def can_undo(self) -> bool:
        return bool(self._history)

    def undo_last_move(self) -> None:
        """Take back the last move; raise RuntimeError if there is none."""
        if not self._history:
            raise RuntimeError("No moves to undo")
        move = self._history.pop()
        mover = opposite_player(self._current_player)
        self._board[move.arrow] = Cell.EMPTY
        self._board[move.destination] = Cell.EMPTY
        self._board[move.origin] = AMAZON_CELLS[mover]
        self._current_player = mover
        if self._current_player is Player.BLACK:
            self._turn_number -= 1

    def copy(self) -> GameState:
        """Return an independent copy, history included."""
        clone = GameState(self._board, self._current_player, self._turn_number)
        clone._history = list(self._history)
        return clone