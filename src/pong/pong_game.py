"""
Functionality for combining the various parts of the Pong game:
the round state machine that is driven one tick at a time.
"""
from typing import Optional, Tuple
from src.pong import constants
from src.pong.clock import GameClock
from src.pong.controller import player_one_controller, player_two_controller
from src.pong.game_object import Ball, Paddle
from src.pong.trajectory import RandomTrajectory
from src.models.pong import GameMode, InputSnapshot, Key, RenderSnapshot
from src.logger.logger import logger


class PongGame:
    """
    Two player Pong game.

    The game knows nothing about windows or keyboards. Each call to
    ``tick`` receives the time elapsed since the previous call and the
    keys currently held, and returns what should be drawn.
    """

    def __init__(
        self,
        scoring_enabled: bool = True,
        rng=None,
        frame_duration: float = constants.FRAME_DURATION,
        paddles: Optional[Tuple[Paddle, Paddle]] = None,
    ):
        self.scoring_enabled = scoring_enabled
        self.mode = GameMode.MENU if scoring_enabled else GameMode.PAUSED
        self.clock = GameClock(frame_duration)
        self.ball = Ball(RandomTrajectory(rng), scoring_enabled=scoring_enabled)
        if paddles is None:
            paddles = (
                Paddle(constants.MARGIN, player_one_controller()),
                Paddle(
                    constants.SCREEN_WIDTH - constants.MARGIN, player_two_controller()
                ),
            )
        if len(paddles) != 2:
            raise ValueError(f"Invalid number of paddles: {len(paddles)}")
        self.paddles = tuple(paddles)

    @property
    def scores(self) -> Tuple[int, int]:
        return self.paddles[0].score, self.paddles[1].score

    def tick(self, elapsed_ms: float, snapshot: InputSnapshot) -> RenderSnapshot:
        """
        Advance the game by one display frame and return the frame to draw
        """
        match (self.mode):
            case GameMode.MENU:
                self.wait_start(snapshot)
            case GameMode.PAUSED:
                self.paused(snapshot)
            case GameMode.PLAYING:
                self.play(elapsed_ms, snapshot)
            case _:
                raise ValueError(f"Invalid game mode: {self.mode}")
        return self.snapshot()

    def wait_start(self, snapshot: InputSnapshot):
        """Menu: keep everything centered until the start key is pressed."""
        self.reset_round()
        self._start_if_requested(snapshot)

    def paused(self, snapshot: InputSnapshot):
        """Between rounds: positions were reset on entry."""
        self._start_if_requested(snapshot)

    def play(self, elapsed_ms: float, snapshot: InputSnapshot):
        """
        Move the ball when the clock allows it, then move the paddles.
        Paddles move every tick so they stay responsive regardless of the
        ball's pace.
        """
        if self.clock.advance(elapsed_ms):
            self.ball.move_and_bounce()
            score = self.ball.bounce_and_score(self.paddles)
            if score is not None:
                self.update_scores(score)

        for paddle in self.paddles:
            paddle.move_player(snapshot)

    def update_scores(self, score: Tuple[int, int]):
        """Apply score deltas and end the round."""
        for paddle, delta in zip(self.paddles, score):
            paddle.score += delta
        logger.info("Score: %d - %d", *self.scores)
        self.mode = GameMode.PAUSED
        self.reset_round()

    def pause(self):
        """
        Stop the current round. The round restarts from the center when
        the start key is pressed again.
        """
        if self.mode != GameMode.PLAYING:
            return
        logger.info("Game paused")
        self.mode = GameMode.PAUSED
        self.reset_round()

    def reset_round(self):
        """Center the ball and both paddles."""
        self.ball.reset_position()
        for paddle in self.paddles:
            paddle.reset_position()
        self.clock.reset()

    def snapshot(self) -> RenderSnapshot:
        """Read-only view of the current game state."""
        return RenderSnapshot(
            ball=self.ball.state(),
            paddles=(self.paddles[0].state(), self.paddles[1].state()),
            mode=self.mode,
            prompt=None if self.mode == GameMode.PLAYING else constants.START_PROMPT,
        )

    def _start_if_requested(self, snapshot: InputSnapshot):
        if not snapshot.is_held(Key.START):
            return
        self.mode = GameMode.PLAYING
        self.ball.start_move()
        logger.info("Round started, ball velocity %s", self.ball.velocity)
