"""Command-line tools for Snake Arcade."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)

_DEFAULT_BEST_FILE = "snake_best_score.json"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-arcade",
        description="Snake Arcade simulation, best-score and config tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play headless random games and report scores.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--games", type=int, default=100)
    sim_p.add_argument("--max-ticks", type=int, default=1_000)
    sim_p.add_argument("--seed", type=int, default=42)
    sim_p.add_argument(
        "--best-file", type=str, default=None,
        help="Persist the best score to this JSON file.",
    )

    # --- best ---
    best_p = sub.add_parser("best", help="Show or reset the best score.")
    best_p.add_argument("--file", type=str, default=_DEFAULT_BEST_FILE)
    best_p.add_argument(
        "--reset", action="store_true", help="Delete the stored best score.",
    )

    # --- config ---
    cfg_p = sub.add_parser("config", help="Write a game config as JSON.")
    cfg_p.add_argument("output", help="Path for the config file.")
    cfg_p.add_argument("--grid-width", type=int, default=None)
    cfg_p.add_argument("--grid-height", type=int, default=None)
    cfg_p.add_argument(
        "--speed", type=str, default=None, choices=["slow", "normal", "fast"],
    )
    cfg_p.add_argument(
        "--start-head", type=int, nargs=2, default=None, metavar=("X", "Y"),
    )
    cfg_p.add_argument("--start-length", type=int, default=None)
    cfg_p.add_argument("--points-per-food", type=int, default=None)
    cfg_p.add_argument("--seed", type=int, default=None)

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from snake_arcade.benchmark import simulate
    from snake_arcade.config import GameConfig
    from snake_arcade.storage import JsonBestScoreStore, MemoryBestScoreStore

    config = GameConfig.load(args.config) if args.config else GameConfig()
    store = (
        JsonBestScoreStore(args.best_file)
        if args.best_file else MemoryBestScoreStore()
    )
    result = simulate(
        num_games=args.games,
        config=config,
        store=store,
        max_ticks=args.max_ticks,
        seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_best(args: argparse.Namespace) -> int:
    from snake_arcade.storage import JsonBestScoreStore

    store = JsonBestScoreStore(args.file)
    if args.reset:
        store.clear()
        logger.info("Best score reset: %s", store.path)
        print("Best score reset.")  # noqa: T201
        return 0
    print(f"Best score: {store.load()}")  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    from snake_arcade.config import GameConfig

    overrides: dict = {}
    flag_map = {
        "grid_width": "grid_width",
        "grid_height": "grid_height",
        "speed": "speed",
        "start_head": "start_head",
        "start_length": "start_length",
        "points_per_food": "points_per_food",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    config = GameConfig.from_dict({**GameConfig().to_dict(), **overrides})
    config.save(args.output)
    print(f"Wrote config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-arcade`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "best": _run_best,
        "config": _run_config,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    sys.exit(main())
