"""Players and game modes."""

from __future__ import annotations

from enum import Enum


class Player(Enum):
    """One of the two sides."""

    WHITE = "white"
    BLACK = "black"


class GameMode(Enum):
    """Who controls each side."""

    HUMAN_VS_HUMAN = "human_vs_human"
    HUMAN_VS_AI = "human_vs_ai"
    AI_VS_AI = "ai_vs_ai"


def opposite_player(player: Player) -> Player:
    """Return the other side."""
    return Player.BLACK if player is Player.WHITE else Player.WHITE


def player_to_string(player: Player) -> str:
    """Return the upper-case name of a player."""
    return player.name


def game_mode_to_string(mode: GameMode) -> str:
    """Return the upper-case name of a game mode."""
    return mode.name