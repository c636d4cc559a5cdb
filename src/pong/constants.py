"""
Constants related to the Pong game.
"""

# Board, in cells
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50
MARGIN = SCREEN_WIDTH // 25

# Milliseconds that must accumulate before the ball moves one step
FRAME_DURATION = 60.0

# Half-height of a paddle: it covers y - PADDLE_HEIGHT ..= y + PADDLE_HEIGHT
PADDLE_HEIGHT = SCREEN_HEIGHT // 10 - 1
PADDLE_SPEED = 3
PADDLE_CONTACT_RANGE = 1

BALL_SPEED_X = 2
BALL_SPEED_Y = 1
MAX_TRAJECTORY_ATTEMPTS = 32

SCORE_LEFT_PLAYER = (1, 0)
SCORE_RIGHT_PLAYER = (0, 1)

RULES_CLASSIC = "classic"
RULES_RALLY = "rally"

ARG_RULES = "rules"
ARG_SEED = "seed"

START_PROMPT = "Press Space to start"

# Shell
SCREEN_CAPTION = "Bracket Pong"
FPS = 60
CELL_SIZE = 12
GAME_FONT_SIZE = 16
BALL_GLYPH = "@"
PADDLE_GLYPH = "#"
MIDDLE_LINE_GLYPH = "|"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
