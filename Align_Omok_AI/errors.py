"""Error kinds raised by the board and move evaluator."""


class AlignmentError(ValueError):
    """Base class; a ValueError so the game loop treats it as an illegal move."""


class InvalidConfig(AlignmentError):
    pass


class OutOfBounds(AlignmentError):
    pass


class CellOccupied(AlignmentError):
    pass


class InvalidColor(AlignmentError):
    pass


class NoLegalMoves(AlignmentError):
    pass


class IllegalMove(AlignmentError):
    """Move breaks a play rule (e.g. not adjacent to an existing stone)."""
