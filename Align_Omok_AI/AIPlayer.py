"""Heuristic computer player driven by the single-move evaluator."""

import logging
import random

try:
    from Player import DEFAULT_PIECES, Player
    from ai import evaluator, move_selector
    from errors import InvalidConfig
except ImportError:
    from Align_Omok_AI.Player import DEFAULT_PIECES, Player
    from Align_Omok_AI.ai import evaluator, move_selector
    from Align_Omok_AI.errors import InvalidConfig


LOGGER = logging.getLogger(__name__)

TIE_BREAKS = ("first", "random")


class AIPlayer(Player):
    def __init__(self, color, win_length, name=None, pieces=DEFAULT_PIECES, weights=None, tie_break="first", seed=None):
        super().__init__(color, name=name or "Computer", pieces=pieces)
        if isinstance(win_length, bool) or not isinstance(win_length, int) or win_length <= 0:
            raise InvalidConfig(f"win_length must be a positive integer, got {win_length!r}")
        if tie_break not in TIE_BREAKS:
            raise InvalidConfig(f"tie_break must be one of {TIE_BREAKS}, got {tie_break!r}")
        self.win_length = win_length
        self.weights = weights
        self.tie_break = tie_break
        self.rng = random.Random(seed)

    def next_move(self, board, deadline=None):
        opening = move_selector.opening_move(board)
        if opening is not None:
            return opening

        if self.tie_break == "first":
            return evaluator.choose_move(board, self.color, self.win_length, weights=self.weights)

        moves, score = evaluator.best_moves(board, self.color, self.win_length, weights=self.weights)
        move = self.rng.choice(moves)
        LOGGER.debug("%s picked %s among %d moves scoring %d", self.name, move, len(moves), score)
        return move
