"""A display that writes plain text to a terminal."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from amazons.board import Board
from amazons.display import Display, cell_to_string, player_name
from amazons.game_state import GameState
from amazons.move import Move
from amazons.player import Player
from amazons.position import Position

_CLEAR_SCREEN = "\033[2J\033[H"


class TextDisplay(Display):
    """Writes to ``output`` and reads from ``input_stream``.

    Both default to the process's standard streams at the time of use.
    With ``typed_selection`` off (the default) the display offers no
    pointer or interactive move selection, and callers fall back to their
    own text prompts. With it on, positions and moves are typed in reply
    to a prompt.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        input_stream: TextIO | None = None,
        typed_selection: bool = False,
    ) -> None:
        self._output = output
        self._input = input_stream
        self._typed_selection = typed_selection

    @property
    def _out(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    @property
    def _in(self) -> TextIO:
        return self._input if self._input is not None else sys.stdin

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _read_line(self) -> str:
        return self._in.readline().rstrip("\r\n")

    def _prompt(self, prompt: str) -> str:
        self._write(prompt)
        return self._read_line().strip()

    def show_board(self, board: Board) -> None:
        self._write("\n" + self.board_to_string(board) + "\n")

    def show_game_state(self, state: GameState) -> None:
        self._write("=== King of the Amazons ===\n")
        self.show_turn_number(state.turn_number)
        self.show_current_player(state.current_player)
        self.show_board(state.board)
        if state.is_game_over():
            self.show_winner(state.winner())

    def show_legal_moves(self, state: GameState, origin: Position) -> None:
        moves = [move for move in state.legal_moves() if move.origin == origin]
        if not moves:
            self._write(f"No legal moves from position {origin}\n")
            return
        lines = [f"Legal moves from {origin}:"]
        lines.extend(f"  {move}" for move in moves)
        self._write("\n".join(lines) + "\n")

    def show_winner(self, winner: Player) -> None:
        self._write(f"Game Over! {player_name(winner)} wins!\n")

    def show_current_player(self, player: Player) -> None:
        self._write(f"Current player: {player_name(player)}\n")

    def show_turn_number(self, turn: int) -> None:
        self._write(f"Turn: {turn}\n")

    def show_message(self, message: str) -> None:
        self._write(f"{message}\n")

    def show_menu(self, options: Sequence[str]) -> None:
        lines = ["", "=== Menu ==="]
        lines.extend(f"{number}. {option}" for number, option in enumerate(options, 1))
        self._write("\n".join(lines) + "\nSelect an option: ")

    def get_input(self) -> str:
        """Read one line; an exhausted input reads as an empty string."""
        return self._read_line()

    def get_mouse_click(self) -> Position | None:
        """Return a typed board position, or None when none is offered.

        Without typed selection there is no pointer, so None is returned
        and nothing is read.
        """
        if not self._typed_selection:
            return None
        text = self._prompt("Enter a position (row col): ")
        if not text:
            return None
        try:
            position = Position.from_string(text)
        except ValueError:
            return None
        return position if position.is_valid() else None

    def get_move_interactively(self, state: GameState) -> Move | None:
        """Return a typed legal move, or None to let the caller prompt.

        Without typed selection None is returned and nothing is read.
        """
        if not self._typed_selection:
            return None
        text = self._prompt(
            "Enter your move (from_row from_col to_row to_col arrow_row arrow_col): "
        )
        if not text:
            return None
        try:
            move = Move.from_string(text)
        except ValueError:
            return None
        return move if state.is_valid_move(move) else None

    def clear_screen(self) -> None:
        self._write(_CLEAR_SCREEN)

    def wait_for_continue(self) -> None:
        self._write("\nPress Enter to continue...")
        self._in.readline()

    def board_to_string(self, board: Board) -> str:
        """Render the board with row and column numbers on every side."""
        header = "  " + "".join(f" {col} " for col in range(Board.SIZE))
        rows = [
            f"{row} "
            + "".join(
                f" {cell_to_string(board.get_cell(row, col))} "
                for col in range(Board.SIZE)
            )
            + f" {row}"
            for row in range(Board.SIZE)
        ]
        return "\n".join([header, *rows, header]) + "\n"

    def game_state_to_string(self, state: GameState) -> str:
        text = (
            f"Turn: {state.turn_number}\n"
            f"Current player: {player_name(state.current_player)}\n"
            + self.board_to_string(state.board)
        )
        if state.is_game_over():
            text += f"Game Over! {player_name(state.winner())} wins!\n"
        return text

    def format_move_list(self, moves: Sequence[Move]) -> str:
        """Join moves with commas, breaking the line after every third one."""
        parts = []
        last = len(moves) - 1
        for index, move in enumerate(moves):
            parts.append(str(move))
            if index != last:
                parts.append(", ")
            if index > 0 and index % 3 == 0:
                parts.append("\n")
        return "".join(parts)