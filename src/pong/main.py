# pylint: disable=no-member
"""
Starting point of the Pong game when it is played by humans
"""

import argparse
import random
import pygame
from src.pong.game_factory import get_pong_game
from src.pong.pong_game import PongGame
from src.pong.renderer import GridRenderer
from src.pong import constants
from src.models.pong import InputSnapshot, Key
from src.logger.logger import logger

KEY_BINDINGS = {
    pygame.K_w: Key.P1_UP,
    pygame.K_s: Key.P1_DOWN,
    pygame.K_UP: Key.P2_UP,
    pygame.K_DOWN: Key.P2_DOWN,
    pygame.K_SPACE: Key.START,
}


def read_input() -> InputSnapshot:
    """
    Snapshot of the bound keys currently held down
    """
    pressed = pygame.key.get_pressed()
    return InputSnapshot(
        held=frozenset(key for code, key in KEY_BINDINGS.items() if pressed[code])
    )


def run(game: PongGame):
    """Main game loop for human play."""
    pygame.init()
    screen = pygame.display.set_mode(
        (
            constants.SCREEN_WIDTH * constants.CELL_SIZE,
            constants.SCREEN_HEIGHT * constants.CELL_SIZE,
        )
    )
    pygame.display.set_caption(constants.SCREEN_CAPTION)
    clock = pygame.time.Clock()
    renderer = GridRenderer(screen)

    try:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    game.pause()

            elapsed_ms = clock.tick(constants.FPS)
            renderer.render(game.tick(elapsed_ms, read_input()))
    finally:
        pygame.quit()


def main():
    """
    Starting point of Pong game
    """

    parser = argparse.ArgumentParser(description="Play Pong game")

    parser.add_argument(
        f"--{constants.ARG_RULES}",
        type=str,
        choices=[constants.RULES_CLASSIC, constants.RULES_RALLY],
        default=constants.RULES_CLASSIC,
        help="Classic scores points, rally bounces the ball off every wall",
    )
    parser.add_argument(
        f"--{constants.ARG_SEED}",
        type=int,
        default=None,
        help="Seed for the ball's starting direction",
    )

    args = parser.parse_args()
    logger.info("Starting Pong with %s rules", args.rules)
    game = get_pong_game(args.rules, rng=random.Random(args.seed))
    run(game)
    logger.info("Final score: %d - %d", *game.scores)


if __name__ == "__main__":
    main()
