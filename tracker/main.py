"""
Main entry point for the Statit tracker.

This script loads the configuration, restores the saved character state and
runs the interactive menu. The tracker supports:
- Five attributes with buffs and debuffs lasting a number of turns
- Status effects and a free-form inventory
- A money balance that grows with the effective wealth at each turn
- Saving every change to a data directory as it happens
"""

import argparse
import logging

from core.config import load_config
from core.constants import TurnModel
from core.logging import parse_level, setup_logging
from core.utils import cprint, crule
from game.persistence import JsonFileStorage, MemoryStorage, PersistenceAdapter
from game.session import GameSession
from ui.cli_interface import TrackerInterface


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="statit",
        description="Track attributes, buffs, statuses and money across turns.",
    )
    parser.add_argument("--config", help="Path to a JSON config file.")
    parser.add_argument("--data-dir", help="Directory where the state is saved.")
    parser.add_argument(
        "--turn-model",
        choices=[model.value for model in TurnModel],
        help="two_phase: separate start/end turn; fused: a single end turn.",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Keep the state in memory only.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        level = parse_level(args.log_level)
    except ValueError:
        level = logging.WARNING
    setup_logging(level)

    config = load_config(
        args.config,
        data_dir=args.data_dir,
        turn_model=args.turn_model,
    )

    if args.no_save:
        backend = MemoryStorage()
    else:
        backend = JsonFileStorage(config.data_dir)
    session = GameSession(PersistenceAdapter(backend), config)

    crule("LP STATIT", style="bold green")
    cprint(
        f"State directory: [cyan]{'(memory)' if args.no_save else config.data_dir}[/], "
        f"turn model: [cyan]{config.turn_model.value}[/]",
    )

    TrackerInterface(session).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
