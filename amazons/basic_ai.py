"""A greedy computer player driven by a mobility heuristic."""

from __future__ import annotations

import random

from amazons.board import AMAZON_CELLS
from amazons.game_state import GameState
from amazons.move import Move
from amazons.player import Player, opposite_player

_CENTER = range(3, 7)


class BasicAI:
    """Picks the move that most improves its mobility over the opponent's."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def best_move(self, state: GameState) -> Move:
        """Return the highest-scoring legal move; the first one wins ties.

        Raises RuntimeError if the side to move has no legal move.
        """
        moves = state.legal_moves()
        if not moves:
            raise RuntimeError("No legal moves available")
        return max(moves, key=lambda move: self.evaluate_move(state, move))

    def random_move(self, state: GameState) -> Move:
        """Return a uniformly chosen legal move.

        Raises RuntimeError if the side to move has no legal move.
        """
        moves = state.legal_moves()
        if not moves:
            raise RuntimeError("No legal moves available")
        return self._rng.choice(moves)

    def evaluate_move(self, state: GameState, move: Move) -> int:
        """Score a move as own mobility minus opponent mobility after it."""
        simulated = state.copy()
        simulated.make_move(move)
        player = state.current_player
        ours = len(simulated.legal_moves_for_player(player))
        theirs = len(simulated.legal_moves_for_player(opposite_player(player)))
        return ours - theirs

    def evaluate_board_for_player(self, state: GameState, player: Player) -> int:
        """Count the player's amazons standing in the central area."""
        amazon = AMAZON_CELLS[player]
        board = state.board
        return sum(
            1
            for row in _CENTER
            for col in _CENTER
            if board.get_cell(row, col) is amazon
        )