"""A computer player backed by an external Botzone-protocol bot."""

from __future__ import annotations

import logging

from amazons.bot_process import (
    KEEP_RUNNING_SIGNAL,
    BotCommand,
    BotProcess,
    BotProcessError,
)
from amazons.game_state import GameState
from amazons.move import Move
from amazons.position import Position

log = logging.getLogger(__name__)

MOVE_TIMEOUT = 5.0
KEEP_RUNNING_TIMEOUT = 0.5


def parse_bot_output(output: str) -> Move:
    """Parse ``"x0 y0 x1 y1 x2 y2"`` into a move.

    Raises ValueError on malformed text and RuntimeError on the all ``-1``
    line that means the bot has no legal move.
    """
    tokens = output.split()
    try:
        values = [int(token) for token in tokens[:6]]
    except ValueError:
        raise ValueError(f"Invalid move format: {output}") from None
    if len(values) < 6:
        raise ValueError(f"Invalid move format: {output}")
    if all(value == -1 for value in values):
        raise RuntimeError("Bot returned no legal moves")
    x0, y0, x1, y1, x2, y2 = values
    return Move(Position(y0, x0), Position(y1, x1), Position(y2, x2))


class BotzoneAI:
    """Asks an external bot for moves, keeping it alive between turns if it asks."""

    def __init__(self, bot_path: BotCommand = "") -> None:
        self._bot_path = bot_path
        self._process = BotProcess(bot_path) if bot_path else None
        self._keep_running = False
        self._move_history: list[str] = []

    @property
    def bot_path(self) -> BotCommand:
        return self._bot_path

    @property
    def move_history(self) -> list[str]:
        return list(self._move_history)

    def __enter__(self) -> BotzoneAI:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Stop the bot process if one is running."""
        if self._process is not None:
            self._process.stop()
        self._keep_running = False

    def set_bot_path(self, bot_path: BotCommand) -> None:
        """Switch to another bot, forgetting the move history."""
        self.close()
        self._bot_path = bot_path
        self._process = BotProcess(bot_path) if bot_path else None
        self._keep_running = False
        self._move_history.clear()

    def is_bot_available(self) -> bool:
        return bool(self._bot_path) and self._process is not None

    def best_move(self, state: GameState) -> Move:
        """Ask the bot for a move; raise RuntimeError or ValueError on failure."""
        if not self.is_bot_available():
            raise RuntimeError("BotzoneAI: No bot path configured")
        process = self._process
        assert process is not None
        try:
            history = list(self._move_history)
            if not process.is_running() or not self._keep_running:
                try:
                    process.start()
                except OSError as exc:
                    raise RuntimeError("Failed to start bot process") from exc
                try:
                    process.send_first_turn(history)
                except BotProcessError as exc:
                    raise RuntimeError("Failed to send first turn to bot") from exc
                self._keep_running = True
            elif history:
                try:
                    process.send_turn(history[-1])
                except BotProcessError as exc:
                    raise RuntimeError("Failed to send turn to bot") from exc

            output = process.read_move(MOVE_TIMEOUT)
            if not output:
                raise RuntimeError("Bot timed out or returned empty move")

            if process.read_keep_running(KEEP_RUNNING_TIMEOUT) != KEEP_RUNNING_SIGNAL:
                self._keep_running = False

            move = parse_bot_output(output)
            self._move_history.append(output)
            return move
        except Exception as exc:
            log.error("BotzoneAI error: %s", exc)
            self._keep_running = False
            raise