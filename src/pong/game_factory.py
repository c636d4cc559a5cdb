"""
Game factory to get the Pong game based on the rule set name
"""

from src.pong.pong_game import PongGame
from src.pong import constants


def get_pong_game(rules: str, rng=None) -> PongGame:
    """
    Get the Pong game for the rule set: "classic" scores points when the
    ball passes a paddle, "rally" bounces the ball off every wall instead.
    """
    match (rules):
        case constants.RULES_CLASSIC:
            return PongGame(scoring_enabled=True, rng=rng)
        case constants.RULES_RALLY:
            return PongGame(scoring_enabled=False, rng=rng)
        case _:
            raise ValueError(f"Invalid rule set: {rules}")
