"""Entry point for N-in-a-row matches. Load config, wire players, start Tictacgame."""

import random
from pathlib import Path

import yaml

try:
    from utils.cli import build_parser
    from utils import logger
    from Board import InvalidConfiguration
    from Tictacgame import Tictacgame
    from Player import AIPlayer, HumanPlayer
except ImportError:
    from Tictac_AI.utils.cli import build_parser
    from Tictac_AI.utils import logger
    from Tictac_AI.Board import InvalidConfiguration
    from Tictac_AI.Tictacgame import Tictacgame
    from Tictac_AI.Player import AIPlayer, HumanPlayer


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_PLAYERS = [
    {"name": "Cross", "controller": "human"},
    {"name": "Nought", "controller": "ai"},
]

MODES = {
    "ai-vs-ai": ("ai", "ai"),
    "human-vs-ai": ("human", "ai"),
    "ai-vs-human": ("ai", "human"),
    "human-vs-human": ("human", "human"),
}

SYMBOLS = "XO#@%&"


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Tictac_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def build_players(specs, seed=None):
    """Create controllers from [{name, controller}] entries; ids follow list order."""
    rng = random.Random(seed)
    players = []
    for player_id, spec in enumerate(specs):
        name = spec.get("name")
        controller = spec.get("controller", "ai")
        if controller == "ai":
            players.append(AIPlayer(player_id, name=name, rng=rng))
        elif controller == "human":
            players.append(HumanPlayer(player_id, name=name))
        else:
            raise ValueError(f"Unsupported controller: {controller}")
    return players


def player_specs(settings, mode=None):
    specs = [dict(s) for s in settings.get("players") or DEFAULT_PLAYERS]
    if mode is None:
        return specs
    while len(specs) < 2:
        specs.append(dict(DEFAULT_PLAYERS[len(specs)]))
    specs = specs[:2]
    for spec, controller in zip(specs, MODES[mode]):
        spec["controller"] = controller
    return specs


def make_renderer(players):
    symbols = {i: SYMBOLS[i % len(SYMBOLS)] for i in range(len(players))}

    def render(board, last_move, turn, result):
        print(board.state_string(symbols))
        if result is None:
            print(f"{players[turn].name} ({symbols[turn]}) to move")
        print()

    return render


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logger.configure(verbose=args.verbose)
    settings = load_settings(args.settings)

    board_size = args.board_size if args.board_size is not None else settings.get("board_size", 3)
    run_length = args.run_length if args.run_length is not None else settings.get("run_length", 3)
    rounds = args.rounds if args.rounds is not None else settings.get("rounds", 1)
    seed = args.seed if args.seed is not None else settings.get("seed")
    max_rejections = settings.get("max_rejections", 3)

    try:
        players = build_players(player_specs(settings, args.mode), seed=seed)
        game = Tictacgame(
            board_size=board_size,
            run_length=run_length,
            players=players,
            logger=logger.log_event,
            renderer=make_renderer(players),
            max_rejections=max_rejections,
        )
    except InvalidConfiguration as exc:
        parser.error(str(exc))
    except ValueError as exc:
        parser.error(f"Invalid settings: {exc}")

    tally = game.play_rounds(rounds)
    if rounds > 1:
        summary = ", ".join(f"{name}: {count}" for name, count in tally.most_common())
        print(f"Results after {rounds} games - {summary}")
    return tally


if __name__ == "__main__":
    main()
