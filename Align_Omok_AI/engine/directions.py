"""The 8 line directions and the 4 undirected axes used for run counting."""

from enum import Enum


class Direction(Enum):
    N = (-1, 0)
    S = (1, 0)
    E = (0, 1)
    W = (0, -1)
    NE = (-1, 1)
    NW = (-1, -1)
    SE = (1, 1)
    SW = (1, -1)

    @property
    def d_row(self):
        return self.value[0]

    @property
    def d_col(self):
        return self.value[1]

    @property
    def opposite(self):
        return Direction((-self.d_row, -self.d_col))

    def step(self, row, col, n=1):
        return row + self.d_row * n, col + self.d_col * n


# horizontal, vertical, diagonal down-right, diagonal down-left
AXES = (
    (Direction.W, Direction.E),
    (Direction.N, Direction.S),
    (Direction.NW, Direction.SE),
    (Direction.NE, Direction.SW),
)
