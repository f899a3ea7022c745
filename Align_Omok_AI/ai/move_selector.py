"""Candidate move generation: empty cells touching at least one stone."""


def candidate_moves(board):
    """Row-major list of empty cells adjacent to an occupied cell."""
    return [
        (r, c)
        for r, c in board.empty_cells()
        if board.is_adjacent_to_occupied(r, c)
    ]


def opening_move(board):
    """Center cell for the first stone of a game, or None once play has started."""
    if next(board.stones(), None) is not None:
        return None
    return board.center
