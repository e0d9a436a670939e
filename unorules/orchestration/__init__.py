"""Game orchestration."""

from unorules.orchestration.game_runner import GameResult, GameRunner
from unorules.orchestration.tournament import run_tournament

__all__ = ["GameResult", "GameRunner", "run_tournament"]
