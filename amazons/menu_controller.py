"""The text-mode main menu and the game loops it starts."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Callable
from typing import Protocol, TextIO

from amazons.basic_ai import BasicAI
from amazons.display import Display, player_name
from amazons.game_state import GameState
from amazons.move import Move
from amazons.player import GameMode, Player, game_mode_to_string
from amazons.serializer import Serializer
from amazons.text_display import TextDisplay

_TRIM = " \t\n\r"
_YES = {"y", "Y", "yes", "YES"}
_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


class MoveSource(Protocol):
    def best_move(self, state: GameState) -> Move: ...


class MenuController:
    """Runs the main menu: new games, loading, saving and leaving.

    Prompts go to ``output`` and answers are read from ``input_stream``; both
    default to the process's standard streams. ``delay`` is called with the
    pause, in seconds, shown before each computer move.
    """

    MAX_AI_MOVES = 200

    def __init__(
        self,
        display: Display | None = None,
        *,
        input_stream: TextIO | None = None,
        output: TextIO | None = None,
        serializer: Serializer | None = None,
        ai: MoveSource | None = None,
        delay: Callable[[float], object] = time.sleep,
    ) -> None:
        self._input = input_stream
        self._output = output
        self._display = (
            display if display is not None else TextDisplay(output, input_stream)
        )
        self._serializer = serializer if serializer is not None else Serializer()
        self._ai = ai if ai is not None else BasicAI()
        self._delay = delay
        self._state = GameState()
        self._mode = GameMode.HUMAN_VS_HUMAN

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def _in(self) -> TextIO:
        return self._input if self._input is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _say(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _read_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError("No more input")
        return line.rstrip("\r\n")

    def _pause(self, prompt: str = "Press Enter to continue...") -> None:
        self._say(prompt)
        self._in.readline()

    def _confirm(self, message: str) -> bool:
        self._say(message)
        return self._read_line() in _YES

    def run(self) -> None:
        """Show the main menu until the user leaves or input runs out."""
        try:
            self._main_menu()
        except EOFError:
            self._say("\n")

    def _main_menu(self) -> None:
        while True:
            self._say(
                "\n=== King of the Amazons ===\n"
                "Phase 2: Complete Game System\n"
                "=============================\n"
                "1. New Game\n"
                "2. Load Game\n"
                "3. Save Game\n"
                "4. Exit\n"
                "\nSelect an option (1-4): "
            )
            choice = self._read_line()
            if choice == "1":
                self._new_game()
            elif choice == "2":
                self._load_game()
            elif choice == "3":
                self._save(header="\n=== Save Game ===\n", pause=True)
            elif choice == "4":
                if self._confirm("Are you sure you want to exit? (y/n): "):
                    self._say("Exiting game...\n")
                    return
            else:
                self._say("Invalid option. Please enter 1, 2, 3, or 4.\n")

    def _new_game(self) -> None:
        self._say(
            "\n=== New Game ===\n"
            "1. Human vs Human\n"
            "2. Human vs AI\n"
            "3. AI vs AI\n"
            "4. Back to Main Menu\n"
            "\nSelect game mode (1-4): "
        )
        choice = self._read_line()
        if choice == "1":
            self._state = GameState()
            self._mode = GameMode.HUMAN_VS_HUMAN
            self._say("New Human vs Human game started. White goes first.\n")
            self._human_game_loop()
        elif choice == "2":
            self._state = GameState()
            self._mode = GameMode.HUMAN_VS_AI
            self._say(
                "New Human vs AI game started. White (Human) goes first.\n"
                "AI will play as Black.\n"
            )
            self._human_vs_ai_loop()
        elif choice == "3":
            self._state = GameState()
            self._mode = GameMode.AI_VS_AI
            self._say("New AI vs AI game started. White AI goes first.\n")
            self._ai_vs_ai_loop()
        elif choice != "4":
            self._say("Invalid option. Returning to main menu.\n")

    def _load_game(self) -> None:
        self._say("\n=== Load Game ===\n")
        saves = self._serializer.saved_games()
        if not saves:
            self._say("No saved games found.\n")
            self._pause()
            return
        lines = ["Saved games:"]
        lines.extend(f"  {number}. {name}" for number, name in enumerate(saves, 1))
        lines.append("  0. Back to Main Menu")
        self._say(
            "\n".join(lines) + f"\n\nSelect a game to load (0-{len(saves)}): "
        )
        text = self._read_line()
        match = _LEADING_INTEGER.match(text)
        if match is None:
            self._say(f"Invalid input: {text}\n")
            self._pause()
            return
        choice = int(match.group(1))
        if choice == 0:
            return
        if not 1 <= choice <= len(saves):
            self._say("Invalid choice.\n")
            self._pause()
            return
        self._load_and_run(saves[choice - 1])

    def _load_and_run(self, name: str) -> None:
        try:
            state, mode = self._serializer.load_game_with_mode(name)
        except (OSError, ValueError):
            self._say("Failed to load game.\n")
            self._pause()
            return
        self._state = state
        self._mode = mode
        self._say(
            f"Game loaded successfully. Game mode: {game_mode_to_string(mode)}\n"
        )
        loops = {
            GameMode.HUMAN_VS_HUMAN: self._human_game_loop,
            GameMode.HUMAN_VS_AI: self._human_vs_ai_loop,
            GameMode.AI_VS_AI: self._ai_vs_ai_loop,
        }
        loops[mode]()

    def _save(self, header: str, pause: bool) -> None:
        self._say(header)
        self._save_named()
        if pause:
            self._pause()

    def _save_named(self) -> None:
        saves = self._serializer.saved_games()
        if saves:
            self._say(
                "Existing saved games:\n"
                + "".join(f"  {name}\n" for name in saves)
                + "\n"
            )
        self._say("Enter a name for your save (or press Enter to cancel): ")
        name = self._read_line()
        if not name:
            self._say("Save cancelled.\n")
            return
        if self._serializer.save_exists(name):
            self._say(f"A save with name '{name}' already exists.\n")
            if not self._confirm("Overwrite? (y/n): "):
                self._say("Save cancelled.\n")
                return
        try:
            self._serializer.save_game(self._state, self._mode, name)
        except OSError:
            self._say("Failed to save game.\n")
        else:
            self._say(f"Game saved successfully as '{name}'.\n")

    def _show_status(self) -> None:
        self._display.show_game_state(self._state)

    def _announce_winner(self) -> None:
        try:
            winner = self._state.winner()
        except RuntimeError as exc:
            self._say(f"Error determining winner: {exc}\n")
        else:
            self._say(f"{player_name(winner)} wins!\n")

    def _finish(self) -> None:
        self._show_status()
        self._say("\nGame Over! ")
        self._announce_winner()
        self._pause("\nPress Enter to return to main menu...")

    def _human_game_loop(self) -> None:
        while not self._state.is_game_over():
            self._show_status()
            current = self._state.current_player
            self._display.show_message(f"{player_name(current)}'s turn.")
            if not self._make_player_move():
                return
        self._finish()

    def _human_vs_ai_loop(self) -> None:
        while not self._state.is_game_over():
            self._show_status()
            current = self._state.current_player
            self._say(f"{player_name(current)}'s turn.\n")
            if current is Player.WHITE:
                if not self._make_player_move():
                    return
                continue
            self._say("AI is thinking...\n")
            self._delay(0.5)
            if not self._play_ai_move():
                break
        self._finish()

    def _ai_vs_ai_loop(self) -> None:
        moves_played = 0
        while not self._state.is_game_over() and moves_played < self.MAX_AI_MOVES:
            self._show_status()
            self._say(f"{player_name(self._state.current_player)} AI's turn.\n")
            self._say("AI is thinking...\n")
            self._delay(1.0)
            if not self._play_ai_move():
                break
            moves_played += 1
        self._show_status()
        self._say("\n")
        if moves_played >= self.MAX_AI_MOVES:
            self._say(
                f"Game stopped after {self.MAX_AI_MOVES} moves (safety limit).\n"
            )
        if self._state.is_game_over():
            self._say("Game Over! ")
            self._announce_winner()
        self._pause("\nPress Enter to return to main menu...")

    def _play_ai_move(self) -> bool:
        try:
            move = self._ai.best_move(self._state)
            self._state.make_move(move)
        except (RuntimeError, ValueError) as exc:
            self._say(f"AI error: {exc}\n")
            return False
        self._say(f"AI made move: {move}\n")
        return True

    def _make_player_move(self) -> bool:
        """Play one human move; return False if the user leaves the game."""
        move = self._display.get_move_interactively(self._state)
        if move is not None:
            self._state.make_move(move)
            self._display.show_message(f"Move made: {move}")
            return True

        while True:
            self._say(
                "Enter your move as 6 numbers: "
                "from_row from_col to_row to_col arrow_row arrow_col\n"
                "Or enter 'help' to see legal moves, 'undo' to undo last move, "
                "'save' to save game, or 'exit' to return to main menu: "
            )
            text = self._read_line().strip(_TRIM)
            if not text:
                self._say("Empty input. Please try again.\n")
                continue
            if text in ("help", "h"):
                self._show_legal_moves()
                continue
            if text in ("undo", "u"):
                if self._state.can_undo():
                    self._state.undo_last_move()
                    self._display.show_message("Last move undone.")
                    self._show_status()
                else:
                    self._display.show_message("No moves to undo.")
                continue
            if text in ("save", "s"):
                self._save(header="\n=== Save Current Game ===\n", pause=False)
                continue
            if text in ("exit", "quit", "q"):
                if self._confirm(
                    "Are you sure you want to exit to main menu? (y/n): "
                ):
                    return False
                continue
            try:
                move = Move.from_string(text)
            except ValueError as exc:
                self._display.show_message(f"Invalid move format: {exc}")
                self._display.show_message(
                    "Please use format: from_row from_col to_row to_col "
                    "arrow_row arrow_col (6 numbers)."
                )
                continue
            if self._state.is_valid_move(move):
                self._state.make_move(move)
                self._display.show_message(f"Move made: {move}")
                return True
            self._display.show_message(
                "Invalid move: Move is not legal in current position."
            )

    def _show_legal_moves(self) -> None:
        moves = self._state.legal_moves()
        if not moves:
            self._display.show_message("No legal moves available.")
            return
        self._display.show_message(
            "Legal moves:\n" + "".join(f"  {move}\n" for move in moves)
        )