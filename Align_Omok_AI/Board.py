"""Board state container, run counting and alignment checks (N in a row)."""

import logging

try:
    from Stone import Stone, to_color
    from engine.directions import AXES, Direction
    from errors import CellOccupied, InvalidConfig, OutOfBounds
except ImportError:
    from Align_Omok_AI.Stone import Stone, to_color
    from Align_Omok_AI.engine.directions import AXES, Direction
    from Align_Omok_AI.errors import CellOccupied, InvalidConfig, OutOfBounds


LOGGER = logging.getLogger(__name__)


def _check_size(size, what="board size"):
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidConfig(f"{what} must be an integer, got {size!r}")
    if size <= 0:
        raise InvalidConfig(f"{what} must be positive, got {size}")
    if size % 2 != 1:
        raise InvalidConfig(f"{what} must be odd, got {size}")


class Board:
    def __init__(self, size=15):
        # Odd size so the opening stone has a unique center
        _check_size(size)
        self.size = size
        self.cells = [[None] * size for _ in range(size)]
        self.move_count = 0
        self.history = []

    @classmethod
    def from_placements(cls, size, placements):
        """Rebuild a board by replaying (row, col, color) placements in order."""
        board = cls(size)
        for row, col, color in placements:
            board.place(row, col, color)
        return board

    @property
    def center(self):
        mid = self.size // 2
        return mid, mid

    def in_bounds(self, row, col):
        if not isinstance(row, int) or not isinstance(col, int):
            return False
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] is None

    def get(self, row, col):
        """Stone at (row, col), or None when empty or off the board."""
        if not self.in_bounds(row, col):
            return None
        return self.cells[row][col]

    def place(self, row, col, stone):
        """Place a stone (or a bare Color); raise if out of bounds or occupied."""
        if not self.in_bounds(row, col):
            raise OutOfBounds(f"move ({row}, {col}) out of bounds for size {self.size}")
        if not isinstance(stone, Stone):
            stone = Stone(to_color(stone), row, col)
        if (stone.row, stone.col) != (row, col):
            raise InvalidConfig(
                f"stone at ({stone.row}, {stone.col}) cannot be placed on ({row}, {col})"
            )
        if self.cells[row][col] is not None:
            raise CellOccupied(f"cell ({row}, {col}) already occupied")
        self.cells[row][col] = stone
        self.move_count += 1
        self.history.append((row, col, stone.color))

    def placements(self):
        """Ordered (row, col, color) list; replaying it rebuilds this board."""
        return list(self.history)

    def stones(self):
        for row in self.cells:
            for stone in row:
                if stone is not None:
                    yield stone

    def empty_cells(self):
        for r in range(self.size):
            for c in range(self.size):
                if self.cells[r][c] is None:
                    yield r, c

    def is_full(self):
        return all(stone is not None for row in self.cells for stone in row)

    def is_adjacent_to_occupied(self, row, col):
        """True if any of the 8 surrounding in-bounds cells holds a stone."""
        for direction in Direction:
            if self.get(*direction.step(row, col)) is not None:
                return True
        return False

    def count_run(self, row, col, color, direction):
        """Count contiguous `color` stones from (row, col) (exclusive) along `direction`."""
        count = 0
        r, c = direction.step(row, col)
        while self.in_bounds(r, c):
            stone = self.cells[r][c]
            if stone is None or stone.color != color:
                break
            count += 1
            r, c = direction.step(r, c)
        return count

    def _axis_length(self, row, col, color, axis):
        backward, forward = axis
        return 1 + self.count_run(row, col, color, backward) + self.count_run(row, col, color, forward)

    def would_align(self, row, col, color, win_length):
        """Would placing `color` on the empty cell (row, col) make a run >= win_length?"""
        if not self.is_empty(row, col):
            return False
        return any(self._axis_length(row, col, color, axis) >= win_length for axis in AXES)

    def line_length(self, row, col):
        """Longest axis run through the stone at (row, col); 0 for an empty cell."""
        stone = self.get(row, col)
        if stone is None:
            return 0
        return max(self._axis_length(row, col, stone.color, axis) for axis in AXES)

    def has_alignment(self, row, col, win_length):
        """Check the already placed stone at (row, col) for a run >= win_length."""
        return self.line_length(row, col) >= win_length

    def expand(self, new_size):
        """Return a larger board with this one centered inside it; self is untouched."""
        _check_size(new_size, "new size")
        if new_size <= self.size:
            raise InvalidConfig(f"new size {new_size} must be greater than {self.size}")

        offset = (new_size - self.size) // 2
        expanded = Board(new_size)
        for row, col, color in self.history:
            stone = self.cells[row][col].moved_by(offset)
            expanded.place(stone.row, stone.col, stone)
        LOGGER.debug("expanded board %d -> %d (offset %d)", self.size, new_size, offset)
        return expanded
