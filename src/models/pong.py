# pylint: disable=missing-class-docstring
"""
Models related to the Pong game
"""
from enum import Enum
from typing import FrozenSet, List, Optional, Tuple
from pydantic import BaseModel, computed_field


class Velocity(BaseModel):

    x: int
    y: int


class Direction(Enum):
    UP = -1
    DOWN = 1
    STAYPUT = 0


class GameMode(Enum):
    MENU = "menu"
    PAUSED = "paused"
    PLAYING = "playing"


class Key(Enum):
    """
    Logical keys the game understands. The shell decides which physical
    keys map to them.
    """

    P1_UP = "p1_up"
    P1_DOWN = "p1_down"
    P2_UP = "p2_up"
    P2_DOWN = "p2_down"
    START = "start"


class InputSnapshot(BaseModel):
    """
    The keys held down during a single tick
    """

    held: FrozenSet[Key] = frozenset()

    @staticmethod
    def of(*keys: Key) -> "InputSnapshot":
        """
        Create a snapshot with the given keys held
        """
        return InputSnapshot(held=frozenset(keys))

    def is_held(self, key: Key) -> bool:
        return key in self.held


class BallState(BaseModel):

    x: int
    y: int


class PaddleState(BaseModel):

    x: int
    y: int
    half_height: int
    score: int

    def cells(self) -> List[Tuple[int, int]]:
        """
        Cells covered by the paddle, top to bottom
        """
        return [
            (self.x, self.y + i)
            for i in range(-self.half_height, self.half_height + 1)
        ]


class RenderSnapshot(BaseModel):
    """
    Everything the shell needs to draw a frame
    """

    ball: BallState
    paddles: Tuple[PaddleState, PaddleState]
    mode: GameMode
    prompt: Optional[str] = None

    @computed_field
    @property
    def scores(self) -> Tuple[int, int]:
        return self.paddles[0].score, self.paddles[1].score
