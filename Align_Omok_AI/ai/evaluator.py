"""Single-move heuristic: run shape classification, offense/defense scoring, move choice."""

import logging
from enum import Enum
from pathlib import Path

import yaml

from . import move_selector

try:
    from Stone import to_color
    from engine.directions import Direction
    from errors import CellOccupied, InvalidConfig, NoLegalMoves, OutOfBounds
except ImportError:
    from Align_Omok_AI.Stone import to_color
    from Align_Omok_AI.engine.directions import Direction
    from Align_Omok_AI.errors import CellOccupied, InvalidConfig, NoLegalMoves, OutOfBounds


LOGGER = logging.getLogger(__name__)

MAX_SCORE = 2 ** 31 - 1  # a winning move; nothing else may reach it
BLOCK_SCORE = MAX_SCORE // 2

DEFAULT_WEIGHTS = {
    "offense": {
        "open_win_minus_1": 50,
        "open_win_minus_2": 20,
        "semi_open_win_minus_1": 30,
        "semi_open_win_minus_2": 10,
    },
    "defense": {
        "open_win_minus_1": 40,
        "semi_open_win_minus_1": 15,
    },
}


class SequenceType(Enum):
    OPEN = "open"
    SEMI_OPEN = "semi_open"


def load_weights(path="config/weights.yaml"):
    """Load tier weights from YAML; missing file or keys fall back to the defaults."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from repo root (e.g., `python -m Align_Omok_AI.main`).
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        data = {}

    weights = {}
    for side, tiers in DEFAULT_WEIGHTS.items():
        loaded = data.get(side) or {}
        weights[side] = {name: int(loaded.get(name, value)) for name, value in tiers.items()}
    return weights


def classify_sequence(board, row, col, color, direction, length):
    """
    Shape of the run a `color` stone at the empty cell (row, col) would form along
    `direction` and its opposite. Returns OPEN, SEMI_OPEN or None; the run must be
    exactly `length` long.
    """
    if length <= 0 or not board.is_empty(row, col):
        return None

    forward = board.count_run(row, col, color, direction)
    backward = board.count_run(row, col, color, direction.opposite)
    if 1 + forward + backward != length:
        return None

    forward_open = board.is_empty(*direction.step(row, col, forward + 1))
    backward_open = board.is_empty(*direction.opposite.step(row, col, backward + 1))
    if forward_open and backward_open:
        return SequenceType.OPEN
    if forward_open or backward_open:
        return SequenceType.SEMI_OPEN
    return None


def is_open_sequence(board, row, col, color, direction, length):
    return classify_sequence(board, row, col, color, direction, length) is SequenceType.OPEN


def is_semi_open_sequence(board, row, col, color, direction, length):
    """Open on at least one end, so an OPEN run also qualifies."""
    return classify_sequence(board, row, col, color, direction, length) is not None


def _check_win_length(win_length):
    if isinstance(win_length, bool) or not isinstance(win_length, int) or win_length <= 0:
        raise InvalidConfig(f"win_length must be a positive integer, got {win_length!r}")


def _offense(board, row, col, color, win_length, tiers):
    score = 0
    for direction in Direction:
        if is_open_sequence(board, row, col, color, direction, win_length - 1):
            score += tiers["open_win_minus_1"]
        elif is_open_sequence(board, row, col, color, direction, win_length - 2):
            score += tiers["open_win_minus_2"]
        elif is_semi_open_sequence(board, row, col, color, direction, win_length - 1):
            score += tiers["semi_open_win_minus_1"]
        elif is_semi_open_sequence(board, row, col, color, direction, win_length - 2):
            score += tiers["semi_open_win_minus_2"]
    return score


def _defense(board, row, col, enemy, win_length, tiers):
    score = 0
    if board.would_align(row, col, enemy, win_length):
        score += BLOCK_SCORE
    for direction in Direction:
        if is_open_sequence(board, row, col, enemy, direction, win_length - 1):
            score += tiers["open_win_minus_1"]
        elif is_semi_open_sequence(board, row, col, enemy, direction, win_length - 1):
            score += tiers["semi_open_win_minus_1"]
    return score


def evaluate(board, row, col, color, win_length, weights=None):
    """
    Desirability of `color` playing the empty cell (row, col).
    A move that completes `win_length` in a row returns MAX_SCORE outright; blocking
    the opponent's win is worth BLOCK_SCORE, kept below it.
    """
    _check_win_length(win_length)
    color = to_color(color)
    if not board.in_bounds(row, col):
        raise OutOfBounds(f"({row}, {col}) is outside a {board.size}x{board.size} board")
    if board.get(row, col) is not None:
        raise CellOccupied(f"cannot evaluate occupied cell ({row}, {col})")
    weights = weights or DEFAULT_WEIGHTS

    if board.would_align(row, col, color, win_length):
        return MAX_SCORE

    score = _offense(board, row, col, color, win_length, weights["offense"])
    score += _defense(board, row, col, color.opponent, win_length, weights["defense"])
    # only a real win may reach MAX_SCORE
    return min(score, MAX_SCORE - 1)


def score_candidates(board, color, win_length, weights=None):
    """[((row, col), score), ...] for every candidate move, in row-major order."""
    _check_win_length(win_length)
    color = to_color(color)
    return [
        (move, evaluate(board, *move, color, win_length, weights=weights))
        for move in move_selector.candidate_moves(board)
    ]


def best_moves(board, color, win_length, weights=None):
    """All candidates sharing the top score, row-major. Raises NoLegalMoves if none exist."""
    scored = score_candidates(board, color, win_length, weights=weights)
    if not scored:
        raise NoLegalMoves("no empty cell is adjacent to an existing stone")
    top = max(score for _, score in scored)
    return [move for move, score in scored if score == top], top


def choose_move(board, color, win_length, weights=None):
    """Highest scoring candidate; ties go to the first one in row-major order."""
    moves, score = best_moves(board, color, win_length, weights=weights)
    LOGGER.debug("%s best move %s (score %d, %d tied)", to_color(color).label, moves[0], score, len(moves))
    return moves[0]
