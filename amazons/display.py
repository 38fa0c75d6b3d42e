"""The interface shared by all user-facing displays."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from amazons.board import Board, Cell
from amazons.game_state import GameState
from amazons.move import Move
from amazons.player import Player
from amazons.position import Position

_CELL_SYMBOLS = {
    Cell.EMPTY: ".",
    Cell.WHITE_AMAZON: "W",
    Cell.BLACK_AMAZON: "B",
    Cell.ARROW: "X",
}

_PLAYER_NAMES = {
    Player.WHITE: "White",
    Player.BLACK: "Black",
}


def cell_to_string(cell: Cell) -> str:
    """Return the one-character symbol drawn for a cell."""
    return _CELL_SYMBOLS.get(cell, "?")


def player_name(player: Player) -> str:
    """Return the capitalised name of a player."""
    return _PLAYER_NAMES.get(player, "Unknown")


class Display(ABC):
    """Shows the game to a user and collects their input."""

    @abstractmethod
    def show_board(self, board: Board) -> None: ...

    @abstractmethod
    def show_game_state(self, state: GameState) -> None: ...

    @abstractmethod
    def show_legal_moves(self, state: GameState, origin: Position) -> None: ...

    @abstractmethod
    def show_winner(self, winner: Player) -> None: ...

    @abstractmethod
    def show_current_player(self, player: Player) -> None: ...

    @abstractmethod
    def show_turn_number(self, turn: int) -> None: ...

    @abstractmethod
    def show_message(self, message: str) -> None: ...

    @abstractmethod
    def show_menu(self, options: Sequence[str]) -> None: ...

    @abstractmethod
    def get_input(self) -> str:
        """Read a line of text from the user."""

    @abstractmethod
    def get_mouse_click(self) -> Position | None:
        """Return a clicked square, or None if clicks are not supported."""

    @abstractmethod
    def get_move_interactively(self, state: GameState) -> Move | None:
        """Return a move picked interactively, or None to fall back to text."""

    @abstractmethod
    def clear_screen(self) -> None: ...

    @abstractmethod
    def wait_for_continue(self) -> None: ...

    @abstractmethod
    def board_to_string(self, board: Board) -> str: ...

    @abstractmethod
    def game_state_to_string(self, state: GameState) -> str: ...