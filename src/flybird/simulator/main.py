"""
Entry point - opens the game window and runs the loop.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from flybird.config.settings import Settings, WorldConfig
from flybird.game.rng import SystemRandom
from flybird.game.session import GameSession
from flybird.simulator.window import SimulatorWindow, WindowConfig, WindowInitError

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False, log_file: Path | None = None) -> None:
    """Configure logging with optional file output."""
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        # Truncate on each run for fresh logs
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logging.info(f"Logging to file: {log_file}")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flybird", description="Fly Bird")
    parser.add_argument("--debug", action="store_true", default=None, help="Verbose logging")
    parser.add_argument("--fps", type=int, help="Frames per second")
    parser.add_argument("--cell-size", type=int, help="Pixels per glyph cell")
    parser.add_argument("--seed", type=int, help="Seed for obstacle placement")
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Load settings from the environment, overridden by CLI flags."""
    overrides = {
        "debug": args.debug,
        "fps": args.fps,
        "cell_size": args.cell_size,
        "seed": args.seed,
        "log_file": args.log_file,
    }
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    settings = build_settings(parse_args(argv))
    setup_logging(settings.debug, settings.log_file)

    session = GameSession(world=WorldConfig(), rng=SystemRandom(settings.seed))
    window = SimulatorWindow(
        session,
        WindowConfig(title=settings.title, fps=settings.fps, cell_size=settings.cell_size),
    )

    try:
        asyncio.run(window.run())
    except WindowInitError as e:
        logger.critical(f"Startup failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")

    logger.info(f"Final score: {session.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
