"""CLI options for selecting players, board geometry, and config paths."""


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="N-in-a-row with an exhaustive minimax opponent")
    parser.add_argument("--board-size", type=int, help="Side length of the square board")
    parser.add_argument("--run-length", type=int, help="Cells in a row needed to win")
    parser.add_argument(
        "--mode",
        choices=["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"],
        default=None,
        help="Two-player shortcut overriding the players list from settings",
    )
    parser.add_argument("--rounds", type=int, help="Number of games to play back to back")
    parser.add_argument("--seed", type=int, help="Seed for the AI opening move")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--verbose", action="store_true", help="Log search statistics")
    return parser
