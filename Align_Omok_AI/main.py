"""Entry point for Align Omok matches. Load config, wire players, start Omokgame."""

import yaml
from pathlib import Path

try:
    from utils.cli import parse_args
    from utils import logger
    from Omokgame import Omokgame
    from AIPlayer import AIPlayer
    from Player import HumanPlayer
    from Stone import Color
    from ai import evaluator
except ImportError:
    from Align_Omok_AI.utils.cli import parse_args
    from Align_Omok_AI.utils import logger
    from Align_Omok_AI.Omokgame import Omokgame
    from Align_Omok_AI.AIPlayer import AIPlayer
    from Align_Omok_AI.Player import HumanPlayer
    from Align_Omok_AI.Stone import Color
    from Align_Omok_AI.ai import evaluator


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Align_Omok_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def pick(cli_value, settings, key, default):
    return cli_value if cli_value is not None else settings.get(key, default)


def build_players(mode, win_length, weights, tie_break, seed):
    """Return (first, second) players for a play mode; first plays Dark."""

    def ai(color):
        return AIPlayer(color, win_length, weights=weights, tie_break=tie_break, seed=seed)

    if mode == "ai-vs-ai":
        return ai(Color.DARK), ai(Color.LIGHT)
    if mode == "human-vs-ai":
        return HumanPlayer(Color.DARK, name="Player"), ai(Color.LIGHT)
    if mode == "ai-vs-human":
        return ai(Color.DARK), HumanPlayer(Color.LIGHT, name="Player")
    if mode == "human-vs-human":
        return HumanPlayer(Color.DARK, name="Player 1"), HumanPlayer(Color.LIGHT, name="Player 2")
    raise ValueError(f"Unsupported mode: {mode}")


def main(argv=None):
    args = parse_args(argv)
    logger.configure(verbose=args.verbose)
    settings = load_settings(args.settings)

    board_size = pick(args.board_size, settings, "board_size", 15)
    win_length = pick(args.win_length, settings, "win_length", 4)
    pieces = pick(args.pieces, settings, "pieces_per_player", 60)
    move_timeout = pick(args.timeout, settings, "move_timeout_seconds", 30)
    expandable = pick(args.expandable, settings, "expandable", False)
    mode = pick(args.mode, settings, "mode", "human-vs-ai")
    tie_break = pick(args.tie_break, settings, "tie_break", "first")
    seed = pick(args.seed, settings, "seed", None)

    weights = evaluator.load_weights(resolve_project_path(args.weights))
    first, second = build_players(mode, win_length, weights, tie_break, seed)

    game = Omokgame(
        board_size=board_size,
        win_length=win_length,
        move_timeout=move_timeout,
        first_player=first,
        second_player=second,
        pieces_per_player=pieces,
        expandable=expandable,
        logger=logger.log_event,
    )
    result = game.play()
    outcome = {Color.DARK: f"{first.name} wins", Color.LIGHT: f"{second.name} wins", None: "Draw"}
    print(outcome[result])


if __name__ == "__main__":
    main()
