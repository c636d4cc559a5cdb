"""
Logging for the Pong game
"""

import logging

# Rounds and scores are logged at INFO, simulation steps at DEBUG
# Change logging level to DEBUG to follow every ball step
logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)
