"""Game loop and turn management for N-in-a-row with optional board expansion."""

try:
    from Board import Board
    from Player import DEFAULT_PIECES
    from engine import referee
    from errors import InvalidConfig
    from utils import timer
except ImportError:
    from Align_Omok_AI.Board import Board
    from Align_Omok_AI.Player import DEFAULT_PIECES
    from Align_Omok_AI.engine import referee
    from Align_Omok_AI.errors import InvalidConfig
    from Align_Omok_AI.utils import timer


class Omokgame:
    def __init__(
        self,
        board_size,
        win_length,
        move_timeout,
        first_player,
        second_player,
        pieces_per_player=DEFAULT_PIECES,
        expandable=False,
        logger=print,
        renderer=None,
    ):
        if win_length <= 2:
            raise InvalidConfig("Win length should be more than 2")
        if board_size < win_length:
            raise InvalidConfig("Board size must be equal to or larger than win length")
        if pieces_per_player <= 0 or pieces_per_player < win_length:
            raise InvalidConfig("Each player needs at least win length pieces")
        if first_player.color == second_player.color:
            raise InvalidConfig("Players must have different colors")

        self.board = Board(size=board_size)
        self.win_length = win_length
        self.move_timeout = move_timeout
        self.players = [first_player, second_player]
        self.pieces_per_player = pieces_per_player
        self.expandable = expandable
        self.logger = logger
        self.renderer = renderer
        self.move_index = 0
        for player in self.players:
            player.pieces = pieces_per_player

    def _other(self, player):
        return self.players[1] if player is self.players[0] else self.players[0]

    def _play_opening(self):
        """The first player's stone always goes to the center."""
        first = self.players[0]
        move = self.board.center
        self.board.place(*move, first.color)
        first.use_piece()
        self.logger(f"Move 1: {first.name} {move} (center, automatic)")
        self.move_index = 1
        return move

    def _expand(self):
        new_size = self.board.size * 2 - 1
        offset = (new_size - self.board.size) // 2
        self.board = self.board.expand(new_size)
        for player in self.players:
            player.add_pieces(self.pieces_per_player)
        self.logger(
            f"Board expanded to {new_size}x{new_size}; "
            f"each player received {self.pieces_per_player} additional pieces"
        )
        return offset

    def play(self):
        """Run a single game. Returns the winning Color, or None for a draw."""
        last_move = self._play_opening()
        current = self.players[1]
        winner = None
        while True:
            if self.renderer:
                self.renderer(self.board, last_move, current.color, None)

            if all(player.pieces <= 0 for player in self.players):
                self.logger("Result: Draw (both players out of pieces)")
                break
            if current.pieces <= 0:
                self.logger(f"{current.name} has no pieces left. Skipping turn.")
                current = self._other(current)
                continue

            deadline = timer.deadline_after(self.move_timeout)
            try:
                move = tuple(current.next_move(self.board, deadline=deadline))
                referee.check_move(move, self.board, deadline)
                self.board.place(*move, current.color)
                current.use_piece()
                last_move = move
            except (TimeoutError, ValueError) as exc:
                self.logger(f"Disqualification: {current.name} - {exc}")
                winner = self._other(current).color  # opponent wins
                break

            self.logger(f"Move {self.move_index + 1}: {current.name} {move}")
            self.move_index += 1

            if self.board.has_alignment(*move, self.win_length):
                self.logger(f"Winner: {current.name}")
                winner = current.color
                break
            if self.board.is_full():
                if not self.expandable:
                    self.logger("Result: Draw (board full)")
                    break
                offset = self._expand()
                last_move = (move[0] + offset, move[1] + offset)

            current = self._other(current)

        if self.renderer:
            self.renderer(self.board, last_move, current.color, winner)
        return winner
