# main.py
from __future__ import annotations
import argparse
import logging
from pathlib import Path
import random

import pygame  # type: ignore

from .config import FPS, Config, ConfigError, CFG
from .render import PygameRenderer
from .scheduler import PygameScheduler
from .session import GameSession, Lifecycle
from .storage import JsonHighScoreStore

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Snake on a square grid.")
    parser.add_argument("--grid-size", type=int, default=CFG.grid_size, help="cells per side")
    parser.add_argument("--tick-ms", type=int, default=CFG.tick_ms, help="milliseconds per move")
    parser.add_argument("--cell-size", type=int, default=CFG.cell_size, help="pixels per cell")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible food placement")
    parser.add_argument(
        "--high-score-file",
        type=Path,
        default=CFG.high_score_path,
        help="JSON file holding the high score",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        grid_size=args.grid_size,
        tick_ms=args.tick_ms,
        cell_size=args.cell_size,
        seed=args.seed,
        high_score_path=args.high_score_file,
    ).validate()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        cfg = config_from_args(args)
    except ConfigError as e:
        raise SystemExit(f"gridsnake: {e}")

    logger.info("High score file: %s", cfg.high_score_path)
    pygame.init()
    renderer = PygameRenderer(cfg)
    renderer.open("Snake")
    scheduler = PygameScheduler()
    store = JsonHighScoreStore(cfg.high_score_path)
    session = GameSession(cfg, scheduler, store, renderer, rng=random.Random(cfg.seed))
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif scheduler.dispatch(event):
                continue
            elif event.type == pygame.KEYDOWN:
                if session.lifecycle is Lifecycle.OVER and event.key == pygame.K_r:
                    session.reset()
                else:
                    session.handle_input(pygame.key.name(event.key))
            elif event.type == pygame.MOUSEBUTTONDOWN:
                key = renderer.button_at(event.pos)
                if key is not None:
                    session.handle_input(key)

        renderer.draw()
        pygame.display.flip()
        clock.tick(FPS)

    session.close()
    pygame.quit()
    print(f"Score: {session.score}  High score: {session.high_score}")


if __name__ == "__main__":
    main()
