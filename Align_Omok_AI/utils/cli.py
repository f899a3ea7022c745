"""CLI options for selecting players, board geometry, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Align Omok (N in a row) with a heuristic AI")
    parser.add_argument("--board-size", type=int, help="Board size (odd)")
    parser.add_argument("--win-length", type=int, help="Stones in a row needed to win")
    parser.add_argument("--pieces", type=int, help="Pieces each player starts with")
    parser.add_argument("--timeout", type=float, help="Seconds per move (default from settings)")
    parser.add_argument(
        "--mode",
        choices=["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"],
        default=None,
        help="Play mode (who plays first/second)",
    )
    parser.add_argument("--expandable", action="store_true", default=None, help="Grow the board instead of drawing when full")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--weights", default="config/weights.yaml", help="Path to evaluation weights YAML")
    parser.add_argument(
        "--tie-break",
        choices=["first", "random"],
        default=None,
        help="How the AI picks among equally scored moves",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random tie-break")
    parser.add_argument("--verbose", action="store_true", help="Show evaluator debug logs")
    return parser.parse_args(argv)
