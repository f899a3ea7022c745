"""Move validation and time control for a turn."""

try:
    from errors import CellOccupied, IllegalMove, OutOfBounds
    from utils import timer
except ImportError:
    from Align_Omok_AI.errors import CellOccupied, IllegalMove, OutOfBounds
    from Align_Omok_AI.utils import timer


def check_move(move, board, deadline=None):
    """
    Validate a move against time, bounds, occupancy and the adjacency rule.
    Raises ValueError subclasses or TimeoutError on invalid moves.
    """
    if timer.expired(deadline):
        raise TimeoutError("Move exceeded allotted time")

    row, col = move
    if not board.in_bounds(row, col):
        raise OutOfBounds(f"Move ({row}, {col}) out of bounds")
    if not board.is_empty(row, col):
        raise CellOccupied(f"Cell ({row}, {col}) already occupied")

    # The opening stone is the only one allowed away from existing stones
    if board.move_count and not board.is_adjacent_to_occupied(row, col):
        raise IllegalMove(f"Move ({row}, {col}) must be adjacent to an existing stone")

    return True
