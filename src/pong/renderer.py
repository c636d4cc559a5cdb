# pylint: disable=no-member
"""
Draws render snapshots in a pygame window as a grid of glyphs
"""

import pygame
from src.pong import constants
from src.models.pong import RenderSnapshot


class GridRenderer:
    """
    Draws cells of ``constants.CELL_SIZE`` pixels. Cells outside the
    board are silently clipped by pygame.
    """

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.font = pygame.font.Font(None, constants.GAME_FONT_SIZE)

    def set(self, x: int, y: int, glyph: str):
        """Draw a single glyph at a board cell"""
        surface = self.font.render(glyph, True, constants.WHITE)
        rect = surface.get_rect(
            center=(
                x * constants.CELL_SIZE + constants.CELL_SIZE // 2,
                y * constants.CELL_SIZE + constants.CELL_SIZE // 2,
            )
        )
        self.screen.blit(surface, rect)

    def print(self, x: int, y: int, text: str):
        """Draw text starting at a board cell"""
        for i, glyph in enumerate(text):
            self.set(x + i, y, glyph)

    def print_centered(self, y: int, text: str):
        """Draw text centered horizontally on a board row"""
        self.print(constants.SCREEN_WIDTH // 2 - len(text) // 2, y, text)

    def render_middle_line(self):
        for y in range(0, constants.SCREEN_HEIGHT + 1, 2):
            self.set(constants.SCREEN_WIDTH // 2, y, constants.MIDDLE_LINE_GLYPH)

    def render(self, snapshot: RenderSnapshot):
        """Render a whole frame"""
        self.screen.fill(constants.BLACK)
        self.render_middle_line()

        left, right = snapshot.scores
        self.print(constants.MARGIN, 1, str(left))
        self.print(constants.SCREEN_WIDTH - constants.MARGIN, 1, str(right))

        for paddle in snapshot.paddles:
            for x, y in paddle.cells():
                self.set(x, y, constants.PADDLE_GLYPH)
        self.set(snapshot.ball.x, snapshot.ball.y, constants.BALL_GLYPH)

        if snapshot.prompt:
            self.print_centered(constants.SCREEN_HEIGHT // 2 - 1, snapshot.prompt)

        pygame.display.flip()
