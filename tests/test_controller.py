from src.pong import constants
from src.pong.controller import (
    KeyboardController,
    player_one_controller,
    player_two_controller,
)
from src.models.pong import Direction, InputSnapshot, Key


def test_up_and_down():
    controller = player_one_controller()
    assert controller.vertical_delta(InputSnapshot.of(Key.P1_UP)) == -constants.PADDLE_SPEED
    assert controller.vertical_delta(InputSnapshot.of(Key.P1_DOWN)) == constants.PADDLE_SPEED
    assert controller.vertical_delta(InputSnapshot()) == 0


def test_up_wins_when_both_keys_are_held():
    controller = player_two_controller()
    snapshot = InputSnapshot.of(Key.P2_UP, Key.P2_DOWN)
    assert controller.direction(snapshot) == Direction.UP
    assert controller.vertical_delta(snapshot) == -constants.PADDLE_SPEED


def test_controllers_only_read_their_own_keys():
    snapshot = InputSnapshot.of(Key.P2_DOWN, Key.START)
    assert player_one_controller().vertical_delta(snapshot) == 0
    assert player_two_controller().vertical_delta(snapshot) == constants.PADDLE_SPEED


def test_custom_speed():
    controller = KeyboardController(Key.P1_UP, Key.P1_DOWN, speed=1)
    assert controller.vertical_delta(InputSnapshot.of(Key.P1_DOWN)) == 1
