import json

import pytest

from amazons.board import Cell
from amazons.game_state import GameState
from amazons.player import GameMode, Player
from amazons.serializer import (
    Serializer,
    deserialize_game_state,
    serialize_game_state,
)


def _played_state(count=3):
    state = GameState()
    for _ in range(count):
        state.make_move(state.legal_moves()[0])
    return state


def test_serialize_standard_position_text():
    text = serialize_game_state(GameState(), GameMode.HUMAN_VS_AI)
    expected = (
        "{\n"
        '  "board": "..B..W..........B......W................'
        'B......W..........B..W..",\n'
        '  "current_player": "white",\n'
        '  "turn_number": 1,\n'
        '  "game_mode": "human_vs_ai"\n'
        "}\n"
    )
    assert text == expected


def test_serialize_is_valid_json():
    data = json.loads(serialize_game_state(_played_state(), GameMode.AI_VS_AI))
    assert data["current_player"] == "black"
    assert data["game_mode"] == "ai_vs_ai"
    assert data["board"].count(Cell.ARROW.value) == 3


@pytest.mark.parametrize("mode", list(GameMode))
def test_round_trip(mode):
    state = _played_state()
    restored, restored_mode = deserialize_game_state(serialize_game_state(state, mode))
    assert restored == state
    assert restored_mode is mode


def test_missing_mode_defaults_to_human_vs_human():
    data = json.loads(serialize_game_state(GameState(), GameMode.AI_VS_AI))
    del data["game_mode"]
    _, mode = deserialize_game_state(json.dumps(data))
    assert mode is GameMode.HUMAN_VS_HUMAN


def test_unknown_mode_defaults_to_human_vs_human():
    data = json.loads(serialize_game_state(GameState(), GameMode.AI_VS_AI))
    data["game_mode"] = "robots"
    _, mode = deserialize_game_state(json.dumps(data))
    assert mode is GameMode.HUMAN_VS_HUMAN


def test_non_white_player_reads_as_black():
    data = json.loads(serialize_game_state(GameState(), GameMode.HUMAN_VS_HUMAN))
    data["current_player"] = "purple"
    state, _ = deserialize_game_state(json.dumps(data))
    assert state.current_player is Player.BLACK


@pytest.mark.parametrize(
    "change",
    [
        lambda d: d.pop("board"),
        lambda d: d.pop("current_player"),
        lambda d: d.pop("turn_number"),
        lambda d: d.update(board=d["board"][:-1]),
        lambda d: d.update(board="Q" + d["board"][1:]),
        lambda d: d.update(turn_number="one"),
    ],
)
def test_malformed_documents_raise(change):
    data = json.loads(serialize_game_state(GameState(), GameMode.HUMAN_VS_HUMAN))
    change(data)
    with pytest.raises(ValueError):
        deserialize_game_state(json.dumps(data))


def test_not_json_raises():
    with pytest.raises(ValueError):
        deserialize_game_state("not json at all")


def test_full_path_appends_suffix_once(tmp_path):
    serializer = Serializer(tmp_path)
    assert serializer.full_path("game") == tmp_path / "game.json"
    assert serializer.full_path("game.json") == tmp_path / "game.json"


def test_save_and_load(tmp_path):
    serializer = Serializer(tmp_path / "saves")
    state = _played_state()
    path = serializer.save_game(state, GameMode.HUMAN_VS_AI, "first")
    assert path.is_file()
    assert serializer.save_exists("first")
    loaded, mode = serializer.load_game_with_mode("first")
    assert loaded == state
    assert mode is GameMode.HUMAN_VS_AI
    assert serializer.load_game("first") == state


def test_saved_games_sorted(tmp_path):
    serializer = Serializer(tmp_path)
    for name in ("beta", "alpha", "gamma"):
        serializer.save_game(GameState(), GameMode.HUMAN_VS_HUMAN, name)
    (tmp_path / "notes.txt").write_text("x")
    (tmp_path / ".json").write_text("x")
    assert serializer.saved_games() == ["alpha", "beta", "gamma"]


def test_saved_games_missing_directory(tmp_path):
    assert Serializer(tmp_path / "absent").saved_games() == []


def test_load_missing_raises(tmp_path):
    serializer = Serializer(tmp_path)
    with pytest.raises(FileNotFoundError):
        serializer.load_game_with_mode("nothing")
    assert serializer.save_exists("nothing") is False


def test_delete_save(tmp_path):
    serializer = Serializer(tmp_path)
    serializer.save_game(GameState(), GameMode.HUMAN_VS_HUMAN, "doomed")
    serializer.delete_save("doomed")
    assert serializer.save_exists("doomed") is False
    with pytest.raises(FileNotFoundError):
        serializer.delete_save("doomed")


def test_load_corrupt_file_raises(tmp_path):
    serializer = Serializer(tmp_path)
    serializer.full_path("broken").write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError):
        serializer.load_game("broken")