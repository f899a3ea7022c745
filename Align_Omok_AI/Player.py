"""Abstract player interface for human or AI controllers."""

try:
    from Stone import to_color
    from utils import timer
except ImportError:
    from Align_Omok_AI.Stone import to_color
    from Align_Omok_AI.utils import timer


DEFAULT_PIECES = 60


class Player:
    def __init__(self, color, name=None, pieces=DEFAULT_PIECES):
        self.color = to_color(color)
        self.name = name or self.color.label
        if pieces < 0:
            raise ValueError("Number of pieces cannot be negative")
        self.pieces = pieces

    def next_move(self, board, deadline=None):
        """Return (row, col) for next move within time limit."""
        raise NotImplementedError

    def use_piece(self):
        if self.pieces <= 0:
            raise ValueError(f"{self.name} has no pieces left")
        self.pieces -= 1

    def add_pieces(self, count):
        if count < 0:
            raise ValueError("Number of pieces cannot be negative")
        self.pieces += count

    def __str__(self):
        return f"{self.name} [{self.color.label}] - Pieces left: {self.pieces}"


class HumanPlayer(Player):
    def next_move(self, board, deadline=None):
        """Text-input player with deadline guard (raises TimeoutError on timeout)."""
        import os
        import sys

        prompt = f"{self.name}, enter move as 'row col' (0-{board.size - 1}): "
        if deadline is None or os.name == "nt":
            raw = input(prompt).strip()
            if timer.expired(deadline):
                raise TimeoutError("Move exceeded allotted time")
        else:
            import select

            remaining = timer.time_remaining(deadline)
            if remaining <= 0:
                raise TimeoutError("Move exceeded allotted time")
            sys.stdout.write(prompt)
            sys.stdout.flush()
            rlist, _, _ = select.select([sys.stdin], [], [], remaining)
            if not rlist:
                raise TimeoutError("Move exceeded allotted time")
            raw = sys.stdin.readline().strip()

        try:
            row_str, col_str = raw.split()
            return int(row_str), int(col_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc
