"""Reading positions, moves and menu choices typed by the user."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from amazons.move import Move
from amazons.position import Position

_INTEGER = re.compile(r"[+-]?[0-9]+")
_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")
_TRIM = " \t\n\r"

_YES = {"y", "Y", "yes", "YES"}
_NO = {"n", "N", "no", "NO"}


def _is_integer_line(text: str, count: int) -> bool:
    tokens = text.split()
    return len(tokens) == count and all(_INTEGER.fullmatch(t) for t in tokens)


def is_valid_position_string(text: str) -> bool:
    """True if ``text`` is exactly two integers separated by whitespace."""
    return _is_integer_line(text, 2)


def is_valid_move_string(text: str) -> bool:
    """True if ``text`` is exactly six integers separated by whitespace."""
    return _is_integer_line(text, 6)


class InputHandler:
    """Prompts on ``output`` and reads answers from ``input_stream``.

    Both default to the process's standard streams at the time of use.
    Running out of input raises EOFError.
    """

    def __init__(
        self, input_stream: TextIO | None = None, output: TextIO | None = None
    ) -> None:
        self._input = input_stream
        self._output = output

    @property
    def _in(self) -> TextIO:
        return self._input if self._input is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _say(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _get_line(self, prompt: str) -> str:
        self._say(prompt)
        line = self._in.readline()
        if not line:
            raise EOFError("No more input")
        return line.strip(_TRIM)

    def parse_position(self, text: str) -> Position | None:
        """Parse ``"row col"``; return None if the text is malformed."""
        if not is_valid_position_string(text):
            return None
        try:
            return Position.from_string(text)
        except ValueError:
            return None

    def parse_move(self, text: str) -> Move | None:
        """Parse six integers into a move; return None if malformed."""
        if not is_valid_move_string(text):
            return None
        try:
            return Move.from_string(text)
        except ValueError:
            return None

    def get_position(self, prompt: str) -> Position:
        """Ask until an on-board position is entered."""
        while True:
            pos = self.parse_position(self._get_line(prompt))
            if pos is not None and pos.is_valid():
                return pos
            self._say("Invalid position. Please enter in format: row col (e.g., 3 5).\n")

    def get_move(self, prompt: str) -> Move:
        """Ask until a move with all squares on the board is entered."""
        while True:
            move = self.parse_move(self._get_line(prompt))
            if move is not None and move.is_valid():
                return move
            self._say(
                "Invalid move. Please enter 6 numbers: "
                "from_row from_col to_row to_col arrow_row arrow_col\n"
            )

    def get_menu_choice(self, prompt: str, minimum: int, maximum: int) -> int:
        """Ask until a number in ``minimum..maximum`` leads the answer."""
        while True:
            match = _LEADING_INTEGER.match(self._get_line(prompt))
            if match is not None:
                choice = int(match.group(1))
                if minimum <= choice <= maximum:
                    return choice
            self._say(
                f"Invalid choice. Please enter a number between {minimum} and {maximum}.\n"
            )

    def get_yes_no(self, prompt: str) -> bool:
        """Ask until a yes or no answer is given."""
        while True:
            answer = self._get_line(prompt + " (y/n): ")
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            self._say("Please enter 'y' for yes or 'n' for no.\n")