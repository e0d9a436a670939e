"""Built-in bots, strategies and the terminal human agent."""

from unorules.agents.bot import Bot
from unorules.agents.colors import MostFrequentColorStrategy, RandomColorStrategy
from unorules.agents.factory import (
    build_roster,
    create_aggressive_bot,
    create_cheater_bot,
    create_random_bot,
)
from unorules.agents.human_agent import HumanAgent
from unorules.agents.opponent import OpponentView
from unorules.agents.strategies import AggressiveStrategy, CheaterStrategy, RandomStrategy

__all__ = [
    "Bot",
    "MostFrequentColorStrategy",
    "RandomColorStrategy",
    "build_roster",
    "create_aggressive_bot",
    "create_cheater_bot",
    "create_random_bot",
    "HumanAgent",
    "OpponentView",
    "AggressiveStrategy",
    "CheaterStrategy",
    "RandomStrategy",
]
