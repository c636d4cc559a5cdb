"""
Random initial trajectory of the ball
"""

import random
from src.pong import constants
from src.models.pong import Velocity
from src.logger.logger import logger


class RandomTrajectory:
    """
    Draws a starting velocity for the ball that is never zero on either axis.

    The entropy source can be anything with a ``randint(a, b)`` method,
    which makes it possible to pass a seeded ``random.Random`` (or a
    scripted stand-in) when the outcome needs to be reproducible.
    """

    def __init__(
        self,
        rng=None,
        max_attempts: int = constants.MAX_TRAJECTORY_ATTEMPTS,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts

    def sample(self) -> Velocity:
        """
        Sample a new velocity
        """
        return Velocity(
            x=self._sign() * constants.BALL_SPEED_X,
            y=self._sign() * constants.BALL_SPEED_Y,
        )

    def _sign(self) -> int:
        for _ in range(self.max_attempts):
            value = self.rng.randint(-1, 1)
            if value != 0:
                return value
        logger.warning(
            "No nonzero direction after %d draws, defaulting to 1", self.max_attempts
        )
        return 1
