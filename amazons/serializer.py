"""Saving and loading games as small JSON documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from amazons.board import Board, Cell
from amazons.game_state import GameState
from amazons.player import GameMode, Player

log = logging.getLogger(__name__)

FIELD_BOARD = "board"
FIELD_CURRENT_PLAYER = "current_player"
FIELD_TURN_NUMBER = "turn_number"
FIELD_GAME_MODE = "game_mode"

_SUFFIX = ".json"


def serialize_game_state(state: GameState, mode: GameMode) -> str:
    """Return the JSON text describing a game and its mode."""
    board = state.board
    cells = "".join(
        board.get_cell(row, col).value
        for row in range(Board.SIZE)
        for col in range(Board.SIZE)
    )
    return (
        "{\n"
        f'  "{FIELD_BOARD}": "{cells}",\n'
        f'  "{FIELD_CURRENT_PLAYER}": "{state.current_player.value}",\n'
        f'  "{FIELD_TURN_NUMBER}": {state.turn_number},\n'
        f'  "{FIELD_GAME_MODE}": "{mode.value}"\n'
        "}\n"
    )


def deserialize_game_state(text: str) -> tuple[GameState, GameMode]:
    """Parse saved JSON text; raise ValueError if it is malformed.

    A missing or unknown game mode reads as human versus human; any current
    player other than ``"white"`` reads as Black.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("Saved game is not a JSON object")

    if FIELD_BOARD not in data:
        raise ValueError("Board field not found in JSON")
    cells = data[FIELD_BOARD]
    if not isinstance(cells, str):
        raise ValueError("Invalid board field format")
    if len(cells) != Board.SIZE * Board.SIZE:
        raise ValueError("Invalid board string length")

    if FIELD_CURRENT_PLAYER not in data:
        raise ValueError("Current player field not found in JSON")
    player_name = data[FIELD_CURRENT_PLAYER]
    if not isinstance(player_name, str):
        raise ValueError("Invalid current player field format")
    player = Player.WHITE if player_name == Player.WHITE.value else Player.BLACK

    if FIELD_TURN_NUMBER not in data:
        raise ValueError("Turn number field not found in JSON")
    turn_number = data[FIELD_TURN_NUMBER]
    if isinstance(turn_number, bool) or not isinstance(turn_number, int):
        raise ValueError("Invalid turn number field format")

    mode = GameMode.HUMAN_VS_HUMAN
    mode_name = data.get(FIELD_GAME_MODE)
    if isinstance(mode_name, str):
        try:
            mode = GameMode(mode_name)
        except ValueError:
            pass

    board = Board()
    for index, char in enumerate(cells):
        try:
            cell = Cell(char)
        except ValueError:
            raise ValueError("Invalid cell character in board string") from None
        board.set_cell(index // Board.SIZE, index % Board.SIZE, cell)

    return GameState(board, player, turn_number), mode


def _default_save_dir() -> Path:
    for candidate in (Path("data/saves"), Path("../data/saves")):
        if candidate.is_dir():
            return candidate
    return Path("data/saves")


class Serializer:
    """Stores games as ``<name>.json`` files in a save directory."""

    def __init__(self, save_dir: str | Path | None = None) -> None:
        self._save_dir = Path(save_dir) if save_dir is not None else None

    @property
    def save_dir(self) -> Path:
        return self._save_dir if self._save_dir is not None else _default_save_dir()

    def full_path(self, filename: str) -> Path:
        """Path of a save; ``.json`` is appended unless already present."""
        name = filename if _SUFFIX in filename else filename + _SUFFIX
        return self.save_dir / name

    def save_game(self, state: GameState, mode: GameMode, filename: str) -> Path:
        """Write a game to disk and return the file written."""
        path = self.full_path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(serialize_game_state(state, mode), encoding="utf-8")
        log.info("Game saved to: %s", path)
        return path

    def load_game(self, filename: str) -> GameState:
        """Read a saved game; see ``load_game_with_mode`` for errors."""
        return self.load_game_with_mode(filename)[0]

    def load_game_with_mode(self, filename: str) -> tuple[GameState, GameMode]:
        """Read a saved game and its mode.

        Raises FileNotFoundError if there is no such save and ValueError if
        its content cannot be parsed.
        """
        path = self.full_path(filename)
        if not path.is_file():
            raise FileNotFoundError(f"Save file does not exist: {path}")
        result = deserialize_game_state(path.read_text(encoding="utf-8"))
        log.info("Game loaded from: %s", path)
        return result

    def saved_games(self) -> list[str]:
        """Names of all saves, without suffix, in alphabetical order."""
        directory = self.save_dir
        if not directory.is_dir():
            return []
        return sorted(
            entry.name[: -len(_SUFFIX)]
            for entry in directory.iterdir()
            if len(entry.name) > len(_SUFFIX) and entry.name.endswith(_SUFFIX)
        )

    def save_exists(self, filename: str) -> bool:
        return self.full_path(filename).is_file()

    def delete_save(self, filename: str) -> None:
        """Remove a save; raise FileNotFoundError if there is none."""
        path = self.full_path(filename)
        if not path.is_file():
            raise FileNotFoundError(f"Save file does not exist: {path}")
        path.unlink()