"""
Command line entry point.

Usage:
    termsnake
    python -m termsnake

Arrow keys steer (the first press starts the game), q or Ctrl+C quits.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from .config import LOG_FORMAT, Settings, load_settings
from .domain.constants import END_TEXT
from .game import GameResult, SnakeGame
from .terminal import CursesTerminal, game_mode

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="termsnake",
        description=(
            "Play snake in the terminal. Arrow keys move (the first press starts "
            "the game), q or Ctrl+C quits. The snake wraps around the screen edges."
        ),
    )


def configure_logging(settings: Settings) -> None:
    """
    Send log records to TERMSNAKE_LOG_FILE, or nowhere.

    The terminal itself is the game screen, so records never go to stdout/stderr.
    """
    if settings.log_file:
        logging.basicConfig(
            filename=settings.log_file,
            level=settings.log_level,
            format=LOG_FORMAT,
        )
    else:
        logging.basicConfig(level=settings.log_level, handlers=[logging.NullHandler()])


def play(terminal=None, rng: Optional[random.Random] = None) -> GameResult:
    """
    Run one game on the terminal and print the end messages once it is restored.
    """
    terminal = terminal or CursesTerminal()
    try:
        with game_mode(terminal):
            result = SnakeGame(terminal, rng=rng).run()
    except Exception:
        logger.exception("Game aborted by an unexpected error")
        raise

    if result.message:
        print(f"\n\n\t{result.message}\n\n")
    print(f"\n\n\t\t{END_TEXT}\n\n")
    return result


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(settings)

    rng = random.Random(settings.seed) if settings.seed is not None else None
    if settings.seed is not None:
        logger.info("Using food seed %d", settings.seed)

    try:
        play(rng=rng)
    except KeyboardInterrupt:
        # Only reachable outside raw mode, where Ctrl+C is still a signal
        logger.info("Interrupted")
        print(f"\n\n\t\t{END_TEXT}\n\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
