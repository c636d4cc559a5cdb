"""
Fixed-timestep gate for the ball physics
"""

from src.pong import constants


class GameClock:
    """
    Accumulates real elapsed time and fires once more than
    ``threshold`` milliseconds have built up. Firing resets the
    accumulator to zero, so leftover time is dropped.
    """

    def __init__(self, threshold: float = constants.FRAME_DURATION):
        self.threshold = threshold
        self._accumulated = 0.0

    @property
    def accumulated(self) -> float:
        return self._accumulated

    def advance(self, elapsed_ms: float) -> bool:
        """
        Add elapsed time and return whether a simulation step should run
        """
        if elapsed_ms < 0:
            raise ValueError(f"Invalid elapsed time: {elapsed_ms}")
        self._accumulated += elapsed_ms
        if self._accumulated > self.threshold:
            self._accumulated = 0.0
            return True
        return False

    def reset(self):
        self._accumulated = 0.0
