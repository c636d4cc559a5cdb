"""
Controllers turn an input snapshot into paddle movement
"""

from abc import ABC, abstractmethod
from src.pong import constants
from src.models.pong import Direction, InputSnapshot, Key


class PaddleController(ABC):
    """
    Interface implemented by anything that can drive a paddle
    """

    @abstractmethod
    def vertical_delta(self, snapshot: InputSnapshot) -> int:
        """
        How many cells the paddle should move this tick (negative is up)
        """


class KeyboardController(PaddleController):
    """
    Moves a paddle with a pair of keys. If both keys are held, up wins.
    """

    def __init__(self, up_key: Key, down_key: Key, speed: int = constants.PADDLE_SPEED):
        self.up_key = up_key
        self.down_key = down_key
        self.speed = speed

    def direction(self, snapshot: InputSnapshot) -> Direction:
        """
        The direction requested by the held keys
        """
        if snapshot.is_held(self.up_key):
            return Direction.UP
        if snapshot.is_held(self.down_key):
            return Direction.DOWN
        return Direction.STAYPUT

    def vertical_delta(self, snapshot: InputSnapshot) -> int:
        return self.direction(snapshot).value * self.speed


def player_one_controller() -> KeyboardController:
    """
    Controller for the left paddle
    """
    return KeyboardController(Key.P1_UP, Key.P1_DOWN)


def player_two_controller() -> KeyboardController:
    """
    Controller for the right paddle
    """
    return KeyboardController(Key.P2_UP, Key.P2_DOWN)
