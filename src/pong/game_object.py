"""
Functionality related to the ball and the paddles.
Positions are in board cells, velocities in cells per simulation step.
"""

from typing import Optional, Sequence, Tuple
from abc import ABC, abstractmethod
from src.pong import constants
from src.pong.controller import PaddleController
from src.pong.trajectory import RandomTrajectory
from src.models.pong import BallState, InputSnapshot, PaddleState, Velocity
from src.utils.utils import truncating_div
from src.logger.logger import logger


class GameObject(ABC):
    """
    Abstract class with methods to be implemented by various game objects.
    """

    def __init__(
        self,
        x: int,
        y: int,
        board_width: int = constants.SCREEN_WIDTH,
        board_height: int = constants.SCREEN_HEIGHT,
    ):
        self.x = x
        self.y = y
        self.board_width = board_width
        self.board_height = board_height

    @abstractmethod
    def reset_position(self):
        """
        Put the game object back where it starts a round
        """

    @abstractmethod
    def state(self):
        """
        Read-only view of the game object for rendering
        """


class Paddle(GameObject):
    """
    Represents a paddle that moves up and down along a fixed lane
    """

    def __init__(
        self,
        x: int,
        controller: PaddleController,
        board_width: int = constants.SCREEN_WIDTH,
        board_height: int = constants.SCREEN_HEIGHT,
        half_height: int = constants.PADDLE_HEIGHT,
    ):
        super().__init__(x, board_height // 2, board_width, board_height)
        self.controller = controller
        self.half_height = half_height
        self.score = 0

    def reset_position(self):
        """
        Resets the paddle to the vertical center of the board.
        The lane never changes.
        """
        self.y = self.board_height // 2

    def move_player(self, snapshot: InputSnapshot):
        """
        Moves the paddle according to its controller. The position is not
        clamped, so a paddle can leave the board.
        """
        self.y += self.controller.vertical_delta(snapshot)

    def covers(self, x: int, y: int) -> bool:
        """
        Check if a cell is close enough to the paddle to count as contact
        """
        return (
            self.x - constants.PADDLE_CONTACT_RANGE
            <= x
            <= self.x + constants.PADDLE_CONTACT_RANGE
        ) and (self.y - self.half_height <= y <= self.y + self.half_height)

    def state(self) -> PaddleState:
        return PaddleState(
            x=self.x, y=self.y, half_height=self.half_height, score=self.score
        )


class Ball(GameObject):
    """
    Represents the ball. It bounces off the top and bottom of the board,
    and either scores or bounces when it reaches the left or right edge,
    depending on whether scoring is enabled.
    """

    def __init__(
        self,
        trajectory: Optional[RandomTrajectory] = None,
        board_width: int = constants.SCREEN_WIDTH,
        board_height: int = constants.SCREEN_HEIGHT,
        scoring_enabled: bool = True,
    ):
        super().__init__(board_width // 2, board_height // 2, board_width, board_height)
        self.trajectory = trajectory if trajectory is not None else RandomTrajectory()
        self.scoring_enabled = scoring_enabled
        self.velocity = Velocity(x=0, y=0)

    def reset_position(self):
        """
        Resets the ball to the center of the board, at rest.
        """
        self.x = self.board_width // 2
        self.y = self.board_height // 2
        self.velocity = Velocity(x=0, y=0)

    def start_move(self):
        """
        Gives the ball a fresh random velocity
        """
        self.velocity = self.trajectory.sample()
        logger.debug("Ball launched with velocity %s", self.velocity)

    def move_and_bounce(self):
        """
        Moves the ball one step and reverses its velocity on any axis it
        left the board on. The position itself is not pulled back, so the
        ball can sit one step outside the board until the next move.
        """
        self.x += self.velocity.x
        self.y += self.velocity.y

        if self.y < 0 or self.y > self.board_height - 1:
            self.velocity.y *= -1

        if not self.scoring_enabled and (self.x < 0 or self.x > self.board_width - 1):
            self.velocity.x *= -1

    def bounce_and_score(
        self, paddles: Sequence[Paddle]
    ) -> Optional[Tuple[int, int]]:
        """
        Returns the score deltas (left player, right player) if the ball
        reached either side of the board. Otherwise deflects the ball off
        any paddle it touches and returns None.

        The return angle depends on where the ball hits the paddle:
        the further from the center, the steeper the deflection.
        """
        if self.scoring_enabled:
            if self.x <= 0:
                return constants.SCORE_RIGHT_PLAYER
            if self.x >= self.board_width - 1:
                return constants.SCORE_LEFT_PLAYER

        for paddle in paddles:
            if paddle.covers(self.x, self.y):
                self.velocity.x *= -1
                self.velocity.y = truncating_div(self.y - paddle.y, 2)
                logger.debug(
                    "Ball hit paddle at lane %d, new velocity %s",
                    paddle.x,
                    self.velocity,
                )
        return None

    def state(self) -> BallState:
        return BallState(x=self.x, y=self.y)
